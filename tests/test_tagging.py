from conftest import StaticTagger

from vocab_tutor import tagging
from vocab_tutor.models import PartOfSpeech, TokenSpan
from vocab_tutor.tagging import LexicalTaggerAdapter, NltkTagger, penn_to_part_of_speech
from vocab_tutor.tokens import locate


def test_penn_tag_mapping():
    assert penn_to_part_of_speech("NNS") is PartOfSpeech.NOUN
    assert penn_to_part_of_speech("VBD") is PartOfSpeech.VERB
    assert penn_to_part_of_speech("JJR") is PartOfSpeech.ADJECTIVE
    assert penn_to_part_of_speech("RB") is PartOfSpeech.ADVERB
    assert penn_to_part_of_speech("DT") is PartOfSpeech.OTHER
    assert penn_to_part_of_speech(".") is PartOfSpeech.OTHER


def test_nltk_tagger_picks_tag_of_located_token(monkeypatch):
    seen = []

    def fake_pos_tag(words):
        seen.append(list(words))
        table = {"I": "PRP", "am": "VBP", "resilient": "JJ", "today": "NN", ".": "."}
        return [(word, table[word]) for word in words]

    monkeypatch.setattr(tagging.nltk, "pos_tag", fake_pos_tag)
    sentence = "I am resilient today."
    span = locate(sentence, "resilient")

    assert NltkTagger().tag(sentence, span) is PartOfSpeech.ADJECTIVE
    assert seen == [["I", "am", "resilient", "today", "."]]


def test_nltk_tagger_keeps_contractions_together(monkeypatch):
    monkeypatch.setattr(tagging.nltk, "pos_tag", lambda words: [(word, "NN") for word in words])
    sentence = "The learner's notes."
    span = locate(sentence, "learner's")
    assert NltkTagger().tag(sentence, span) is PartOfSpeech.NOUN


def test_nltk_tagger_without_tokens_returns_none(monkeypatch):
    monkeypatch.setattr(tagging.nltk, "pos_tag", lambda words: [])
    assert NltkTagger().tag("   ", TokenSpan(0, 0, "")) is None


def test_adapter_uses_tagger_result():
    adapter = LexicalTaggerAdapter(StaticTagger({"resilient": PartOfSpeech.NOUN}))
    span = locate("The resilient win.", "resilient")
    assert adapter.classify("The resilient win.", span, PartOfSpeech.ADJECTIVE) is PartOfSpeech.NOUN


def test_adapter_falls_back_to_expected_role():
    span = locate("I am resilient.", "resilient")
    assert LexicalTaggerAdapter().classify("I am resilient.", span, PartOfSpeech.ADJECTIVE) is PartOfSpeech.ADJECTIVE
    untagged = LexicalTaggerAdapter(StaticTagger())
    assert untagged.classify("I am resilient.", span, PartOfSpeech.VERB) is PartOfSpeech.VERB


def test_adapter_recovers_from_tagger_fault(caplog):
    class BrokenTagger:
        def tag(self, text, span):
            raise LookupError("Resource averaged_perceptron_tagger not found")

    span = locate("I am resilient.", "resilient")
    adapter = LexicalTaggerAdapter(BrokenTagger())
    assert adapter.classify("I am resilient.", span, PartOfSpeech.ADJECTIVE) is PartOfSpeech.ADJECTIVE
    assert "Tagger failed" in caplog.text
