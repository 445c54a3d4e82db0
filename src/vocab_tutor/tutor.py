"""High level tutor combining entry resolution and sentence feedback."""
from __future__ import annotations

import asyncio
import logging
from typing import Optional

from .classifier import UsageClassifier
from .feedback import FeedbackComposer, no_word_result
from .models import EvaluationResult, WordAnalysis
from .resolver import EntryResolver
from .tagging import GrammaticalTagger, LexicalTaggerAdapter

LOGGER = logging.getLogger(__name__)


class VocabularyTutor:
    """Evaluate a learner's sentence for a target word.

    The tutor holds only its collaborators; every call builds its own
    entry and result, so one instance can serve concurrent evaluations.
    """

    def __init__(
        self,
        resolver: Optional[EntryResolver] = None,
        tagger: Optional[GrammaticalTagger] = None,
        classifier: Optional[UsageClassifier] = None,
    ):
        self.resolver = resolver or EntryResolver()
        self.composer = FeedbackComposer(LexicalTaggerAdapter(tagger), classifier or UsageClassifier())

    async def evaluate(
        self,
        word: str,
        sentence: str,
        use_external_source: bool = False,
    ) -> EvaluationResult:
        trimmed = word.strip()
        if not trimmed:
            LOGGER.debug("Empty word, skipping resolution")
            return no_word_result()
        entry = await self.resolver.resolve(trimmed, use_external_source=use_external_source)
        return self.composer.compose(trimmed, entry, sentence)

    def evaluate_sync(
        self,
        word: str,
        sentence: str,
        use_external_source: bool = False,
    ) -> EvaluationResult:
        return asyncio.run(self.evaluate(word, sentence, use_external_source))

    async def analyse_word(self, word: str, use_external_source: bool = False) -> WordAnalysis:
        trimmed = word.strip()
        if not trimmed:
            return no_word_result().word_analysis
        entry = await self.resolver.resolve(trimmed, use_external_source=use_external_source)
        return WordAnalysis.from_entry(entry)
