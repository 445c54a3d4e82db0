"""Dataclasses and enumerations shared by the tutor components."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple


class PartOfSpeech(Enum):
    NOUN = "noun"
    VERB = "verb"
    ADJECTIVE = "adjective"
    ADVERB = "adverb"
    OTHER = "other"

    @classmethod
    def parse(cls, value: Optional[str]) -> "PartOfSpeech":
        """Map a free-form label (``"adj"``, ``"Noun"``...) to a member, defaulting to ``OTHER``."""

        if not value:
            return cls.OTHER
        key = value.strip().lower()
        return _POS_ALIASES.get(key, cls.OTHER)


_POS_ALIASES = {
    "noun": PartOfSpeech.NOUN,
    "n": PartOfSpeech.NOUN,
    "verb": PartOfSpeech.VERB,
    "v": PartOfSpeech.VERB,
    "adjective": PartOfSpeech.ADJECTIVE,
    "adj": PartOfSpeech.ADJECTIVE,
    "a": PartOfSpeech.ADJECTIVE,
    "s": PartOfSpeech.ADJECTIVE,
    "adverb": PartOfSpeech.ADVERB,
    "adv": PartOfSpeech.ADVERB,
    "r": PartOfSpeech.ADVERB,
}


class Difficulty(Enum):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["Difficulty"]:
        if not value:
            return None
        key = value.strip().lower()
        for member in cls:
            if member.value.lower() == key:
                return member
        return None


class UsageVerdict(Enum):
    CORRECT = "Correct"
    MOSTLY_CORRECT = "Mostly correct"
    INCORRECT = "Incorrect"


@dataclass(frozen=True)
class TokenSpan:
    """Character offsets of one word occurrence; ``end`` is exclusive."""

    start: int
    end: int
    text: str


@dataclass(frozen=True)
class WordEntry:
    difficulty: Difficulty
    meaning: str
    part_of_speech: PartOfSpeech
    examples: Tuple[str, ...] = ()
    synonyms: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.meaning or not self.meaning.strip():
            raise ValueError("WordEntry.meaning must not be empty")
        # accept lists from callers but store tuples
        object.__setattr__(self, "examples", tuple(self.examples))
        object.__setattr__(self, "synonyms", tuple(self.synonyms))


@dataclass
class SourceEntry:
    """Raw record returned by an external dictionary source."""

    meaning: str
    part_of_speech: Optional[str] = None
    difficulty: Optional[str] = None
    examples: List[str] = field(default_factory=list)
    synonyms: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class WordAnalysis:
    difficulty: Difficulty
    meaning: str
    examples: Tuple[str, ...] = ()
    synonyms: Tuple[str, ...] = ()

    @classmethod
    def from_entry(cls, entry: WordEntry) -> "WordAnalysis":
        return cls(
            difficulty=entry.difficulty,
            meaning=entry.meaning,
            examples=entry.examples,
            synonyms=entry.synonyms,
        )

    def to_dict(self) -> Dict[str, object]:
        return {
            "difficulty": self.difficulty.value,
            "meaning": self.meaning,
            "examples": list(self.examples),
            "synonyms": list(self.synonyms),
        }


@dataclass(frozen=True)
class SentenceFeedback:
    status: UsageVerdict
    explanation: str
    corrected_sentence: str = ""

    def to_dict(self) -> Dict[str, object]:
        return {
            "status": self.status.value,
            "explanation": self.explanation,
            "correctedSentence": self.corrected_sentence,
        }


@dataclass(frozen=True)
class EvaluationResult:
    word_analysis: WordAnalysis
    sentence_feedback: SentenceFeedback

    def to_dict(self) -> Dict[str, Dict[str, object]]:
        return {
            "wordAnalysis": self.word_analysis.to_dict(),
            "sentenceFeedback": self.sentence_feedback.to_dict(),
        }
