"""Skill vocabulary: the fixed list of terms the screener can recognise.

The vocabulary order is significant. Every skill list the engine produces
(matched, missing, extra) follows it, so it doubles as display order.
Patterns are compiled once per vocabulary, never per call.
"""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from pathlib import Path
from typing import Iterable, Iterator, Optional

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Built-in vocabulary
# ---------------------------------------------------------------------------

DEFAULT_TERMS: tuple[str, ...] = (
    # --- Frontend / languages ---
    "react", "node", "node.js", "typescript", "javascript",
    "python", "java",
    # --- Cloud ---
    "aws", "gcp", "azure",
    # --- Containers / APIs ---
    "docker", "kubernetes", "graphql",
    # --- Databases ---
    "sql", "nosql", "mongodb", "postgres", "mysql",
    "rest", "api", "microservices",
    # --- Process ---
    "cicd", "ci/cd", "git", "agile", "scrum",
    # --- Web ---
    "html", "css", "sass", "tailwind", "redux",
    "vue", "angular", "next.js", "express",
    # --- Data infra ---
    "redis", "elasticsearch", "kafka",
    # --- AI / data ---
    "machine learning", "ml", "ai", "data science",
    # --- Testing ---
    "testing", "jest", "cypress", "selenium",
)


_ASCII_WORD_BEFORE = r"(?<![A-Za-z0-9_])"
_ASCII_WORD_AFTER = r"(?![A-Za-z0-9_])"


def _compile_term(term: str) -> re.Pattern[str]:
    """Whole-term, case-insensitive pattern for *term*.

    The term must not touch an ASCII letter, digit or underscore on either
    side, so "react" misses "reaction" while "ci/cd" and "node.js" match
    literally. Non-Latin letters count as boundaries: CJK resumes often
    run terms straight into the surrounding text ("熟悉Python和React").
    Words of a multi-word term may be separated by any whitespace run,
    including non-breaking spaces (PDF extraction often splits
    "machine\\nlearning").
    """
    body = r"\s+".join(re.escape(part) for part in term.split())
    return re.compile(_ASCII_WORD_BEFORE + body + _ASCII_WORD_AFTER, re.IGNORECASE)


class SkillVocabulary:
    """Immutable ordered set of canonical skill terms."""

    __slots__ = ("_terms", "_patterns")

    def __init__(self, terms: Iterable[str]) -> None:
        ordered: list[str] = []
        seen: set[str] = set()
        for raw in terms:
            term = " ".join(raw.split()).lower()
            if term and term not in seen:
                seen.add(term)
                ordered.append(term)
        self._terms: tuple[str, ...] = tuple(ordered)
        self._patterns: tuple[tuple[str, re.Pattern[str]], ...] = tuple(
            (term, _compile_term(term)) for term in self._terms
        )

    @property
    def terms(self) -> tuple[str, ...]:
        return self._terms

    @property
    def patterns(self) -> tuple[tuple[str, re.Pattern[str]], ...]:
        """(term, compiled pattern) pairs in vocabulary order."""
        return self._patterns

    def __iter__(self) -> Iterator[str]:
        return iter(self._terms)

    def __len__(self) -> int:
        return len(self._terms)

    def __contains__(self, term: object) -> bool:
        return isinstance(term, str) and term.lower() in self._terms

    def __repr__(self) -> str:
        return f"SkillVocabulary({len(self._terms)} terms)"


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------

def load_vocabulary(path: Path | str) -> SkillVocabulary:
    """Read a vocabulary file: one term per line, '#' starts a comment line.

    Raises FileNotFoundError / OSError as-is; a file with no terms is a
    ValueError since an empty vocabulary can never match anything.
    """
    path = Path(path)
    lines = path.read_text(encoding="utf-8").splitlines()
    terms = [ln.strip() for ln in lines if ln.strip() and not ln.strip().startswith("#")]
    vocabulary = SkillVocabulary(terms)
    if not len(vocabulary):
        raise ValueError(f"Vocabulary file {path} contains no terms")
    logger.info("Loaded %d skill terms from %s", len(vocabulary), path)
    return vocabulary


@lru_cache(maxsize=1)
def default_vocabulary() -> SkillVocabulary:
    """Return the shared built-in vocabulary (compiled on first use)."""
    return SkillVocabulary(DEFAULT_TERMS)


def resolve_vocabulary(path: Optional[str] = None) -> SkillVocabulary:
    """Vocabulary from *path* when given, otherwise the built-in one."""
    if path:
        return load_vocabulary(path)
    return default_vocabulary()
