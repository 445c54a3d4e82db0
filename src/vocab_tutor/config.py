"""Runtime settings read from the environment."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .resolver import DEFAULT_LOOKUP_TIMEOUT

SOURCES = ("wordnet", "mock")
TAGGERS = ("nltk", "none")


@dataclass
class Settings:
    lookup_timeout: float = DEFAULT_LOOKUP_TIMEOUT
    source: str = "wordnet"
    tagger: str = "nltk"

    def __post_init__(self) -> None:
        if self.lookup_timeout <= 0:
            raise ValueError(f"Lookup timeout must be positive, got {self.lookup_timeout}")
        if self.source not in SOURCES:
            raise ValueError(f"Unknown source '{self.source}', expected one of {', '.join(SOURCES)}")
        if self.tagger not in TAGGERS:
            raise ValueError(f"Unknown tagger '{self.tagger}', expected one of {', '.join(TAGGERS)}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        timeout = env.get("VOCAB_TUTOR_LOOKUP_TIMEOUT")
        try:
            lookup_timeout = float(timeout) if timeout else DEFAULT_LOOKUP_TIMEOUT
        except ValueError:
            raise ValueError(f"VOCAB_TUTOR_LOOKUP_TIMEOUT must be a number, got '{timeout}'") from None
        return cls(
            lookup_timeout=lookup_timeout,
            source=env.get("VOCAB_TUTOR_SOURCE", "wordnet").strip().lower() or "wordnet",
            tagger=env.get("VOCAB_TUTOR_TAGGER", "nltk").strip().lower() or "nltk",
        )
