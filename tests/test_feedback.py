import pytest
from conftest import StaticTagger

from vocab_tutor.feedback import (
    FeedbackComposer,
    build_simple_sentence,
    no_word_result,
    readable_role,
)
from vocab_tutor.models import PartOfSpeech, UsageVerdict
from vocab_tutor.resolver import LOCAL_DICTIONARY, build_heuristic_entry
from vocab_tutor.tagging import LexicalTaggerAdapter


@pytest.mark.parametrize(
    "part_of_speech, sentence",
    [
        (PartOfSpeech.ADJECTIVE, "I am zorp."),
        (PartOfSpeech.VERB, "I zorp every day."),
        (PartOfSpeech.NOUN, "This is a zorp."),
        (PartOfSpeech.ADVERB, "She did it zorp."),
        (PartOfSpeech.OTHER, "I know the word zorp."),
    ],
)
def test_simple_sentence_templates(part_of_speech, sentence):
    assert build_simple_sentence("zorp", part_of_speech) == sentence


def test_readable_roles():
    assert [readable_role(pos) for pos in PartOfSpeech] == ["noun", "verb", "adjective", "adverb", "word"]


def test_word_not_used_is_incorrect():
    result = FeedbackComposer().compose("banana", build_heuristic_entry("banana"), "I like apples.")
    feedback = result.sentence_feedback
    assert feedback.status is UsageVerdict.INCORRECT
    assert "did not use the target word" in feedback.explanation
    assert feedback.corrected_sentence == "I am banana."


def test_correct_usage_has_no_correction():
    result = FeedbackComposer().compose("resilient", LOCAL_DICTIONARY["resilient"], "I am resilient when I feel sad.")
    feedback = result.sentence_feedback
    assert feedback.status is UsageVerdict.CORRECT
    assert feedback.explanation == "Great! You used “resilient” correctly in the sentence."
    assert feedback.corrected_sentence == ""


def test_unnatural_usage_is_mostly_correct():
    result = FeedbackComposer().compose("resilient", LOCAL_DICTIONARY["resilient"], "Resilient is good.")
    feedback = result.sentence_feedback
    assert feedback.status is UsageVerdict.MOSTLY_CORRECT
    assert "could sound more natural" in feedback.explanation
    assert feedback.corrected_sentence == "I am resilient."


def test_role_mismatch_names_both_roles_and_suggests_expected_role():
    composer = FeedbackComposer(LexicalTaggerAdapter(StaticTagger({"improve": PartOfSpeech.NOUN})))
    result = composer.compose("improve", LOCAL_DICTIONARY["improve"], "The improve was big.")
    feedback = result.sentence_feedback
    assert feedback.status is UsageVerdict.MOSTLY_CORRECT
    assert feedback.explanation == (
        "You used the word, but it usually works as a verb. "
        "In your sentence it looks like a noun. See the suggestion."
    )
    assert feedback.corrected_sentence == "I improve every day."


def test_expanded_token_is_classified_on_its_own():
    tagger = StaticTagger({"resiliently": PartOfSpeech.ADVERB})
    composer = FeedbackComposer(LexicalTaggerAdapter(tagger))
    result = composer.compose("resilient", LOCAL_DICTIONARY["resilient"], "I am resiliently confident.")
    assert tagger.calls[0][1].text == "resiliently"
    assert result.sentence_feedback.status is UsageVerdict.MOSTLY_CORRECT
    assert "looks like a adverb" in result.sentence_feedback.explanation


def test_word_analysis_is_flattened_from_entry():
    result = FeedbackComposer().compose("happy", LOCAL_DICTIONARY["happy"], "I feel happy.")
    assert result.word_analysis.to_dict() == {
        "difficulty": "Beginner",
        "meaning": "Feeling good and joyful.",
        "examples": [
            "I feel happy when I spend time with my friends.",
            "She was happy with her exam results.",
        ],
        "synonyms": ["joyful", "glad", "pleased"],
    }


def test_no_word_result():
    result = no_word_result().to_dict()
    assert result["wordAnalysis"] == {
        "difficulty": "Beginner",
        "meaning": "No word provided.",
        "examples": [],
        "synonyms": [],
    }
    assert result["sentenceFeedback"]["status"] == "Incorrect"
    assert result["sentenceFeedback"]["correctedSentence"] == ""
