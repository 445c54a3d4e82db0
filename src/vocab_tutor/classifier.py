"""Judge whether a located word is used naturally for its role."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .models import PartOfSpeech, TokenSpan
from .tokens import words_before

LINKING_VERBS = frozenset({"is", "am", "are", "was", "were", "feel", "seem", "become", "looks", "look"})
PRONOUNS = frozenset({"i", "we", "they", "she", "he", "you", "it"})
DETERMINERS = frozenset({"a", "an", "the", "my", "his", "her", "their"})


@dataclass(frozen=True)
class UsageAssessment:
    matches_expected_role: bool
    natural: bool


class UsageClassifier:
    """Check only the single word to the left of the token.

    Adjectives want a linking verb, verbs a subject pronoun and nouns a
    determiner. Adverbs and other roles are always accepted.
    """

    def classify(
        self,
        sentence: str,
        span: TokenSpan,
        actual: PartOfSpeech,
        expected: PartOfSpeech,
    ) -> UsageAssessment:
        return UsageAssessment(
            matches_expected_role=actual == expected,
            natural=self.is_natural(sentence, span, actual),
        )

    def is_natural(self, sentence: str, span: TokenSpan, role: PartOfSpeech) -> bool:
        preceding = words_before(sentence, span)
        previous: Optional[str] = preceding[-1].lower() if preceding else None
        if role is PartOfSpeech.ADJECTIVE:
            return previous in LINKING_VERBS
        if role is PartOfSpeech.VERB:
            return previous in PRONOUNS
        if role is PartOfSpeech.NOUN:
            return previous in DETERMINERS
        if role is PartOfSpeech.ADVERB or role is PartOfSpeech.OTHER:
            return True
        raise ValueError(f"Unhandled part of speech {role!r}")
