"""Deterministic candidate screening core.

Pipeline (no LLM, no I/O):
  - skill_extractor   vocabulary terms found in a text
  - fit_scorer        matched / missing / extra + 0-100 score
  - classifier        score -> recommendation label
  - summary           label-specific explanation
  - engine            MatchEngine.analyze() ties the above together
  - remote_adapter    normalises external provider responses to the same result
"""

from screening.engine import MatchEngine, analyze
from screening.errors import MalformedResponse, ProviderError, ProviderUnreachable, ScreeningError
from screening.remote_adapter import normalize
from screening.vocabulary import SkillVocabulary, default_vocabulary, load_vocabulary

__all__ = [
    "MatchEngine",
    "analyze",
    "normalize",
    "SkillVocabulary",
    "default_vocabulary",
    "load_vocabulary",
    "ScreeningError",
    "MalformedResponse",
    "ProviderError",
    "ProviderUnreachable",
]
