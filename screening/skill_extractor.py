"""Deterministic keyword-based skill extractor.

No LLM involved: each vocabulary term is tested with its precompiled
whole-term pattern. The result is ordered by the vocabulary, not by where
the term first appears in the text.
"""

from __future__ import annotations

from typing import Optional

from screening.vocabulary import SkillVocabulary, default_vocabulary

SkillSet = tuple[str, ...]


def extract_skills(text: Optional[str], vocabulary: Optional[SkillVocabulary] = None) -> SkillSet:
    """Return the vocabulary terms found in *text*, in vocabulary order.

    Empty or None text yields an empty tuple.
    """
    if not text:
        return ()
    if vocabulary is None:
        vocabulary = default_vocabulary()
    return tuple(term for term, pattern in vocabulary.patterns if pattern.search(text))
