"""Vocabulary tutor package for evaluating a learner's use of a word."""

from .models import EvaluationResult, PartOfSpeech, UsageVerdict, WordEntry
from .resolver import EntryResolver
from .tokens import locate
from .tutor import VocabularyTutor

__all__ = [
    "EntryResolver",
    "EvaluationResult",
    "PartOfSpeech",
    "UsageVerdict",
    "VocabularyTutor",
    "WordEntry",
    "locate",
]
