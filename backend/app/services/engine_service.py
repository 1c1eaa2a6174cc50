"""Process-wide MatchEngine, built once from the configured vocabulary."""

from __future__ import annotations

import logging
from typing import Optional

from screening.engine import MatchEngine
from screening.vocabulary import resolve_vocabulary
from app.core.config import settings

logger = logging.getLogger(__name__)

_engine: Optional[MatchEngine] = None


def get_engine() -> MatchEngine:
    """Lazy-build and cache the engine."""
    global _engine
    if _engine is None:
        vocabulary = resolve_vocabulary(settings.SKILL_VOCABULARY_PATH or None)
        _engine = MatchEngine(vocabulary)
        logger.info("Match engine ready: %d skill terms", len(vocabulary))
    return _engine


def reset_engine() -> None:
    """Drop the cached engine so the next call reloads the vocabulary."""
    global _engine
    _engine = None
