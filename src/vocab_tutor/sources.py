"""External dictionary sources consulted when the local table has no entry."""
from __future__ import annotations

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Protocol

import nltk
from nltk.corpus import wordnet as wn

from .models import SourceEntry

LOGGER = logging.getLogger(__name__)

POS_MAP = {
    "n": "noun",
    "v": "verb",
    "a": "adjective",
    "s": "adjective",
    "r": "adverb",
}

MAX_EXAMPLES = 2


class ExternalSourceLookup(Protocol):
    async def fetch(self, word: str) -> Optional[SourceEntry]:
        ...


def ensure_wordnet_data() -> None:
    """Ensure the WordNet corpus is available."""

    try:
        wn.ensure_loaded()
    except LookupError:
        LOGGER.info("Downloading WordNet corpus via NLTK…")
        nltk.download("wordnet", quiet=True)
        wn.ensure_loaded()


class WordNetLookup:
    """Build :class:`SourceEntry` records from WordNet synsets."""

    def __init__(self, corpus=None):
        self.corpus = corpus if corpus is not None else wn

    async def fetch(self, word: str) -> Optional[SourceEntry]:
        # own executor: a timed out read must not hold up asyncio.run shutdown
        loop = asyncio.get_running_loop()
        executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="wordnet")
        try:
            return await loop.run_in_executor(executor, self.lookup, word)
        finally:
            executor.shutdown(wait=False)

    def lookup(self, word: str) -> Optional[SourceEntry]:
        key = word.strip().lower().replace(" ", "_")
        synsets = self.corpus.synsets(key)
        if not synsets:
            LOGGER.debug("WordNet has no synsets for %r", word)
            return None
        first = synsets[0]
        examples: List[str] = []
        synonyms: List[str] = []
        for synset in synsets:
            for example in synset.examples():
                if len(examples) < MAX_EXAMPLES:
                    examples.append(example)
            for lemma in synset.lemmas():
                name = lemma.name().replace("_", " ").lower()
                if name != word.strip().lower() and name not in synonyms:
                    synonyms.append(name)
        return SourceEntry(
            meaning=first.definition(),
            part_of_speech=POS_MAP.get(first.pos()),
            examples=examples,
            synonyms=synonyms,
        )


class MockDictionaryLookup:
    """Demo source that simulates network latency and always answers."""

    def __init__(self, delay: float = 0.4):
        self.delay = delay

    async def fetch(self, word: str) -> Optional[SourceEntry]:
        if self.delay:
            await asyncio.sleep(self.delay)
        return SourceEntry(
            meaning=f"A mock meaning for {word}. (This is a demo fallback.)",
            part_of_speech="adjective",
            difficulty="Intermediate",
            examples=[
                f"This is a mock example using {word}.",
                f"Another mock sentence with {word}.",
            ],
            synonyms=["sample", "demo"],
        )
