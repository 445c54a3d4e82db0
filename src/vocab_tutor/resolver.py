"""Resolve descriptive metadata for a vocabulary word.

Resolution walks an ordered list of strategies and stops at the first one
that answers:

1. the curated :data:`LOCAL_DICTIONARY`;
2. an optional external source (WordNet, or the demo mock);
3. a heuristic builder that infers everything from the word's spelling.

The last strategy always answers, so :meth:`EntryResolver.resolve` never
fails for any input.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Dict, List, Optional, Protocol, Sequence, Tuple

from .models import Difficulty, PartOfSpeech, SourceEntry, WordEntry
from .sources import ExternalSourceLookup

LOGGER = logging.getLogger(__name__)

DEFAULT_LOOKUP_TIMEOUT = 5.0

LOCAL_DICTIONARY: Dict[str, WordEntry] = {
    "resilient": WordEntry(
        difficulty=Difficulty.INTERMEDIATE,
        meaning="Able to recover quickly from problems or strong emotions; not easily discouraged.",
        part_of_speech=PartOfSpeech.ADJECTIVE,
        examples=(
            "After losing her job, Maria stayed resilient and found a new role within months.",
            "Children can be very resilient after moving to a new school.",
        ),
        synonyms=("tough", "strong", "adaptable"),
    ),
    "happy": WordEntry(
        difficulty=Difficulty.BEGINNER,
        meaning="Feeling good and joyful.",
        part_of_speech=PartOfSpeech.ADJECTIVE,
        examples=(
            "I feel happy when I spend time with my friends.",
            "She was happy with her exam results.",
        ),
        synonyms=("joyful", "glad", "pleased"),
    ),
    "improve": WordEntry(
        difficulty=Difficulty.BEGINNER,
        meaning="To become better or to make something better.",
        part_of_speech=PartOfSpeech.VERB,
        examples=(
            "Practice every day to improve your English.",
            "He took lessons to improve his piano skills.",
        ),
        synonyms=("get better", "enhance", "upgrade"),
    ),
    "journey": WordEntry(
        difficulty=Difficulty.INTERMEDIATE,
        meaning="An act of travelling from one place to another, usually over a long distance.",
        part_of_speech=PartOfSpeech.NOUN,
        examples=(
            "The journey from the city to the coast took six hours.",
            "Learning a language is a long journey.",
        ),
        synonyms=("trip", "voyage", "expedition"),
    ),
    "carefully": WordEntry(
        difficulty=Difficulty.INTERMEDIATE,
        meaning="In a way that avoids mistakes, harm or damage.",
        part_of_speech=PartOfSpeech.ADVERB,
        examples=(
            "Read the instructions carefully before you start.",
            "She carefully carried the glasses to the table.",
        ),
        synonyms=("cautiously", "attentively", "thoroughly"),
    ),
}

# no suffix here is itself a suffix of another, so table order decides nothing
SUFFIX_RULES: Tuple[Tuple[Tuple[str, ...], PartOfSpeech], ...] = (
    (("ly",), PartOfSpeech.ADVERB),
    (("ing", "ed"), PartOfSpeech.VERB),
    (("ion", "ment", "ness"), PartOfSpeech.NOUN),
    (("able", "ous", "ful", "less", "ive", "al"), PartOfSpeech.ADJECTIVE),
)

_MEANING_TEMPLATES = {
    PartOfSpeech.NOUN: "{word} - a thing, person, or idea. (Simple explanation)",
    PartOfSpeech.VERB: "{word} - to do or perform the action named by this word. (Simple explanation)",
    PartOfSpeech.ADJECTIVE: "{word} - a word that describes a person, place, thing, or feeling. (Simple explanation)",
    PartOfSpeech.ADVERB: "{word} - a word that describes how an action is done. (Simple explanation)",
    PartOfSpeech.OTHER: "{word} - a simple description of the word.",
}

_EXAMPLE_TEMPLATES = {
    PartOfSpeech.ADJECTIVE: ("She is {word}.", "It was a {word} day."),
    PartOfSpeech.VERB: ("I {word} every day.", "They {word} the problem together."),
    PartOfSpeech.NOUN: ("The {word} was on the table.", "She found a {word}."),
    PartOfSpeech.ADVERB: ("He moved {word}.", "She spoke {word}."),
    PartOfSpeech.OTHER: ("I know the word {word}.", "This sentence uses {word}."),
}


# ---------------------------------------------------------------------------
# Heuristic builders
# ---------------------------------------------------------------------------


def infer_part_of_speech(word: str) -> PartOfSpeech:
    lower = word.strip().lower()
    for suffixes, part_of_speech in SUFFIX_RULES:
        if lower.endswith(suffixes):
            return part_of_speech
    return PartOfSpeech.ADJECTIVE


def infer_difficulty(word: str) -> Difficulty:
    """Length based difficulty: up to 5 letters is easy, 10 or more is hard."""

    length = len(word.strip())
    if length <= 5:
        return Difficulty.BEGINNER
    if length <= 9:
        return Difficulty.INTERMEDIATE
    return Difficulty.ADVANCED


def capitalize_first(text: str) -> str:
    return text[:1].upper() + text[1:]


def build_fallback_meaning(word: str, part_of_speech: PartOfSpeech) -> str:
    return _MEANING_TEMPLATES[part_of_speech].format(word=capitalize_first(word))


def build_examples(word: str, part_of_speech: PartOfSpeech) -> Tuple[str, ...]:
    return tuple(template.format(word=word) for template in _EXAMPLE_TEMPLATES[part_of_speech])


def build_heuristic_entry(word: str) -> WordEntry:
    word = word.strip()
    part_of_speech = infer_part_of_speech(word)
    return WordEntry(
        difficulty=infer_difficulty(word),
        meaning=build_fallback_meaning(word, part_of_speech),
        part_of_speech=part_of_speech,
        examples=build_examples(word, part_of_speech),
        synonyms=(),
    )


def adapt_source_entry(word: str, source: SourceEntry) -> Optional[WordEntry]:
    """Convert an external record, or return ``None`` when it carries no meaning."""

    if not source.meaning or not source.meaning.strip():
        return None
    return WordEntry(
        difficulty=Difficulty.parse(source.difficulty) or infer_difficulty(word),
        meaning=source.meaning.strip(),
        part_of_speech=PartOfSpeech.parse(source.part_of_speech),
        examples=tuple(source.examples or ()),
        synonyms=tuple(source.synonyms or ()),
    )


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------


class ResolutionStrategy(Protocol):
    name: str
    requires_external: bool

    async def try_resolve(self, word: str) -> Optional[WordEntry]:
        ...


class LocalTableStrategy:
    name = "local"
    requires_external = False

    def __init__(self, table: Optional[Dict[str, WordEntry]] = None):
        self.table = LOCAL_DICTIONARY if table is None else table

    async def try_resolve(self, word: str) -> Optional[WordEntry]:
        return self.table.get(word.strip().lower())


class ExternalSourceStrategy:
    """Ask an external source, treating timeouts and faults as a miss."""

    name = "external"
    requires_external = True

    def __init__(self, lookup: ExternalSourceLookup, timeout: Optional[float] = DEFAULT_LOOKUP_TIMEOUT):
        self.lookup = lookup
        self.timeout = timeout

    async def try_resolve(self, word: str) -> Optional[WordEntry]:
        try:
            source = await asyncio.wait_for(self.lookup.fetch(word), timeout=self.timeout)
        except asyncio.TimeoutError:
            LOGGER.warning("External lookup for %r timed out after %ss", word, self.timeout)
            return None
        except Exception as exc:
            LOGGER.warning("External lookup for %r failed: %s", word, exc)
            return None
        if source is None:
            LOGGER.info("External source has no entry for %r", word)
            return None
        return adapt_source_entry(word, source)


class HeuristicStrategy:
    name = "heuristic"
    requires_external = False

    async def try_resolve(self, word: str) -> Optional[WordEntry]:
        return build_heuristic_entry(word)


class EntryResolver:
    """Run strategies in order; the first answer wins."""

    def __init__(
        self,
        lookup: Optional[ExternalSourceLookup] = None,
        timeout: Optional[float] = DEFAULT_LOOKUP_TIMEOUT,
        strategies: Optional[Sequence[ResolutionStrategy]] = None,
    ):
        if strategies is None:
            built: List[ResolutionStrategy] = [LocalTableStrategy()]
            if lookup is not None:
                built.append(ExternalSourceStrategy(lookup, timeout=timeout))
            built.append(HeuristicStrategy())
            strategies = built
        self.strategies = list(strategies)

    async def resolve(self, word: str, use_external_source: bool = False) -> WordEntry:
        word = word.strip()
        for strategy in self.strategies:
            if strategy.requires_external and not use_external_source:
                continue
            entry = await strategy.try_resolve(word)
            if entry is not None:
                LOGGER.debug("Resolved %r via %s strategy", word, strategy.name)
                return entry
        # custom strategy lists may omit the heuristic step
        return build_heuristic_entry(word)
