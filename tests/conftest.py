from __future__ import annotations

import asyncio
from typing import Dict, Optional

import pytest

from vocab_tutor.models import PartOfSpeech, SourceEntry, TokenSpan
from vocab_tutor.resolver import EntryResolver
from vocab_tutor.tutor import VocabularyTutor


class StaticTagger:
    """Tags tokens from a lowercase word -> role table; unknown tokens get ``None``."""

    def __init__(self, tags: Optional[Dict[str, PartOfSpeech]] = None):
        self.tags = tags or {}
        self.calls = []

    def tag(self, text: str, span: TokenSpan) -> Optional[PartOfSpeech]:
        self.calls.append((text, span))
        return self.tags.get(span.text.lower())


class RecordingLookup:
    def __init__(self, entry: Optional[SourceEntry] = None, error: Optional[Exception] = None, delay: float = 0.0):
        self.entry = entry
        self.error = error
        self.delay = delay
        self.words = []

    async def fetch(self, word: str) -> Optional[SourceEntry]:
        self.words.append(word)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.entry


@pytest.fixture()
def tutor():
    return VocabularyTutor()


@pytest.fixture()
def source_entry():
    return SourceEntry(
        meaning="Showing great attention to detail.",
        part_of_speech="adjective",
        difficulty="Advanced",
        examples=["She is meticulous about her notes."],
        synonyms=["careful", "precise"],
    )


@pytest.fixture()
def recording_lookup(source_entry):
    return RecordingLookup(entry=source_entry)


@pytest.fixture()
def external_tutor(recording_lookup):
    return VocabularyTutor(resolver=EntryResolver(lookup=recording_lookup, timeout=1.0))
