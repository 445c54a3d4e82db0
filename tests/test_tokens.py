from vocab_tutor.models import TokenSpan
from vocab_tutor.tokens import locate, words_before


def test_locate_exact_token():
    sentence = "I am resilient when I feel sad."
    span = locate(sentence, "resilient")
    assert span == TokenSpan(start=5, end=14, text="resilient")
    assert sentence[span.start : span.end] == "resilient"


def test_locate_expands_to_full_token():
    span = locate("I am resiliently confident.", "resilient")
    assert span is not None
    assert span.text == "resiliently"


def test_locate_expands_leftwards_and_over_apostrophes():
    span = locate("That was the learner's mistake.", "earner")
    assert span is not None
    assert span.text == "learner's"


def test_locate_is_case_insensitive_and_keeps_original_text():
    span = locate("Resilient is good.", "resilient")
    assert span == TokenSpan(start=0, end=9, text="Resilient")


def test_locate_missing_word():
    assert locate("I like apples.", "banana") is None
    assert locate("anything", "") is None


def test_locate_escapes_regex_characters():
    assert locate("Is a+b a word?", "a+b") is not None
    assert locate("aab", "a.b") is None


def test_words_before_uses_whitespace_split():
    sentence = "Yes, I am resilient."
    span = locate(sentence, "resilient")
    assert words_before(sentence, span) == ["Yes,", "I", "am"]
    assert words_before("Resilient is good.", locate("Resilient is good.", "resilient")) == []
