"""Turn a resolved entry and a usage assessment into sentence feedback."""
from __future__ import annotations

import logging
from typing import Optional

from .classifier import UsageClassifier
from .models import (
    Difficulty,
    EvaluationResult,
    PartOfSpeech,
    SentenceFeedback,
    UsageVerdict,
    WordAnalysis,
    WordEntry,
)
from .tagging import LexicalTaggerAdapter
from .tokens import locate

LOGGER = logging.getLogger(__name__)

WORD_NOT_USED = (
    "You did not use the target word in your sentence. "
    "Try to include it in a short, simple sentence."
)
CORRECT_USAGE = "Great! You used “{word}” correctly in the sentence."
COULD_BE_MORE_NATURAL = (
    "You used the word, but the sentence could sound more natural. Try the suggestion."
)
ROLE_MISMATCH = (
    "You used the word, but it usually works as a {expected}. "
    "In your sentence it looks like a {actual}. See the suggestion."
)
NO_WORD_MEANING = "No word provided."
NO_WORD_EXPLANATION = "You did not provide a word to analyse."

_READABLE_ROLES = {
    PartOfSpeech.NOUN: "noun",
    PartOfSpeech.VERB: "verb",
    PartOfSpeech.ADJECTIVE: "adjective",
    PartOfSpeech.ADVERB: "adverb",
    PartOfSpeech.OTHER: "word",
}

_SIMPLE_SENTENCES = {
    PartOfSpeech.ADJECTIVE: "I am {word}.",
    PartOfSpeech.VERB: "I {word} every day.",
    PartOfSpeech.NOUN: "This is a {word}.",
    PartOfSpeech.ADVERB: "She did it {word}.",
    PartOfSpeech.OTHER: "I know the word {word}.",
}


def readable_role(part_of_speech: PartOfSpeech) -> str:
    return _READABLE_ROLES[part_of_speech]


def build_simple_sentence(word: str, part_of_speech: PartOfSpeech) -> str:
    """Short example sentence that uses ``word`` in its expected role."""

    return _SIMPLE_SENTENCES[part_of_speech].format(word=word)


def mostly_correct_explanation(expected: PartOfSpeech, actual: PartOfSpeech) -> str:
    if expected == actual:
        return COULD_BE_MORE_NATURAL
    return ROLE_MISMATCH.format(expected=readable_role(expected), actual=readable_role(actual))


def no_word_result() -> EvaluationResult:
    return EvaluationResult(
        word_analysis=WordAnalysis(difficulty=Difficulty.BEGINNER, meaning=NO_WORD_MEANING),
        sentence_feedback=SentenceFeedback(
            status=UsageVerdict.INCORRECT,
            explanation=NO_WORD_EXPLANATION,
            corrected_sentence="",
        ),
    )


class FeedbackComposer:
    """Locate, tag and classify the target word, then pick a verdict.

    Precedence: a missing word is ``Incorrect``; a present word in its
    expected role with a natural left context is ``Correct``; anything else
    is ``Mostly correct``. Suggestions always use the *expected* role.
    """

    def __init__(
        self,
        tagger: Optional[LexicalTaggerAdapter] = None,
        classifier: Optional[UsageClassifier] = None,
    ):
        self.tagger = tagger or LexicalTaggerAdapter()
        self.classifier = classifier or UsageClassifier()

    def compose(self, word: str, entry: WordEntry, sentence: str) -> EvaluationResult:
        analysis = WordAnalysis.from_entry(entry)
        expected = entry.part_of_speech
        span = locate(sentence, word)
        if span is None:
            LOGGER.debug("%r not found in sentence", word)
            feedback = SentenceFeedback(
                status=UsageVerdict.INCORRECT,
                explanation=WORD_NOT_USED,
                corrected_sentence=build_simple_sentence(word, expected),
            )
            return EvaluationResult(word_analysis=analysis, sentence_feedback=feedback)

        actual = self.tagger.classify(sentence, span, expected)
        assessment = self.classifier.classify(sentence, span, actual, expected)
        LOGGER.debug(
            "Token %r tagged %s (expected %s), natural=%s",
            span.text,
            actual.value,
            expected.value,
            assessment.natural,
        )
        if assessment.matches_expected_role and assessment.natural:
            feedback = SentenceFeedback(
                status=UsageVerdict.CORRECT,
                explanation=CORRECT_USAGE.format(word=word),
                corrected_sentence="",
            )
        else:
            feedback = SentenceFeedback(
                status=UsageVerdict.MOSTLY_CORRECT,
                explanation=mostly_correct_explanation(expected, actual),
                corrected_sentence=build_simple_sentence(word, expected),
            )
        return EvaluationResult(word_analysis=analysis, sentence_feedback=feedback)
