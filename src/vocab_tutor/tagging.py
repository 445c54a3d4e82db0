"""Part-of-speech tagging for a located token."""
from __future__ import annotations

import logging
from typing import List, Optional, Protocol, Tuple

import nltk
from nltk.tokenize import RegexpTokenizer

from .models import PartOfSpeech, TokenSpan

LOGGER = logging.getLogger(__name__)

TAGGER_RESOURCES = ("averaged_perceptron_tagger_eng", "averaged_perceptron_tagger")

# Penn Treebank tag prefixes
PENN_PREFIXES = (
    ("NN", PartOfSpeech.NOUN),
    ("VB", PartOfSpeech.VERB),
    ("JJ", PartOfSpeech.ADJECTIVE),
    ("RB", PartOfSpeech.ADVERB),
)


class GrammaticalTagger(Protocol):
    def tag(self, text: str, span: TokenSpan) -> Optional[PartOfSpeech]:
        ...


def ensure_tagger_data() -> None:
    """Ensure the perceptron tagger model is available."""

    try:
        nltk.pos_tag(["test"])
    except LookupError:
        LOGGER.info("Downloading NLTK part-of-speech tagger…")
        for resource in TAGGER_RESOURCES:
            nltk.download(resource, quiet=True)


def penn_to_part_of_speech(tag: str) -> PartOfSpeech:
    for prefix, part_of_speech in PENN_PREFIXES:
        if tag.startswith(prefix):
            return part_of_speech
    return PartOfSpeech.OTHER


class NltkTagger:
    """Tag tokens with the NLTK averaged perceptron tagger."""

    def __init__(self) -> None:
        self.tokenizer = RegexpTokenizer(r"\w+(?:'\w+)*|[^\w\s]")

    def tag(self, text: str, span: TokenSpan) -> Optional[PartOfSpeech]:
        spans: List[Tuple[int, int]] = list(self.tokenizer.span_tokenize(text))
        if not spans:
            return None
        words = [text[start:end] for start, end in spans]
        tagged = nltk.pos_tag(words)
        for (start, end), (_, penn_tag) in zip(spans, tagged):
            if start <= span.start < end:
                return penn_to_part_of_speech(penn_tag)
        return None


class LexicalTaggerAdapter:
    """Never returns ``None``: falls back to the expected role."""

    def __init__(self, tagger: Optional[GrammaticalTagger] = None):
        self.tagger = tagger

    def classify(self, sentence: str, span: TokenSpan, expected: PartOfSpeech) -> PartOfSpeech:
        if self.tagger is None:
            return expected
        try:
            tag = self.tagger.tag(sentence, span)
        except Exception as exc:
            LOGGER.warning("Tagger failed for %r: %s", span.text, exc)
            return expected
        if tag is None:
            LOGGER.debug("No tag for %r, assuming %s", span.text, expected.value)
            return expected
        return tag
