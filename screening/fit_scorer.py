"""Deterministic fit scorer.

Computes skill coverage (what fraction of the job's skills the resume
covers) and folds in a bounded bonus for extra, unrequested skills.
No LLM involved.
"""

from __future__ import annotations

import math
from typing import NamedTuple, Sequence

COVERAGE_WEIGHT = 70
EXTRA_WEIGHT = 30
# Added to the JD skill count in the extra-skill denominator, and used alone
# when the JD has no recognised skills.
EXTRA_DENOMINATOR_PAD = 4


class CoverageResult(NamedTuple):
    matched: tuple[str, ...]
    missing: tuple[str, ...]
    extra: tuple[str, ...]
    score: int
    coverage: float


def round_half_up(value: float) -> int:
    """Round to the nearest integer, .5 always upwards (56.5 -> 57)."""
    return int(math.floor(value + 0.5))


def skill_gap(
    jd_skills: Sequence[str],
    resume_skills: Sequence[str],
) -> tuple[tuple[str, ...], tuple[str, ...], tuple[str, ...]]:
    """Return (matched, missing, extra) skill tuples.

    - matched: JD skills also in the resume, in JD order
    - missing: JD skills absent from the resume, in JD order
    - extra:   resume skills the JD does not ask for, in resume order
    """
    resume_set = set(resume_skills)
    jd_set = set(jd_skills)
    matched = tuple(s for s in jd_skills if s in resume_set)
    missing = tuple(s for s in jd_skills if s not in resume_set)
    extra = tuple(s for s in resume_skills if s not in jd_set)
    return matched, missing, extra


def coverage_score(matched_count: int, jd_count: int) -> float:
    """Return |matched| / |jd|, or 0.0 when the JD has no skills."""
    if jd_count <= 0:
        return 0.0
    return matched_count / jd_count


def score_skills(jd_skills: Sequence[str], resume_skills: Sequence[str]) -> CoverageResult:
    """Compare two skill sets and derive the 0-100 fit score.

    score = 70 * coverage + 30 * |extra| / (|jd| + 4), capped at 100.
    """
    matched, missing, extra = skill_gap(jd_skills, resume_skills)
    jd_count = len(matched) + len(missing)

    coverage = coverage_score(len(matched), jd_count)
    extra_denominator = jd_count + EXTRA_DENOMINATOR_PAD if jd_count else EXTRA_DENOMINATOR_PAD
    raw = COVERAGE_WEIGHT * coverage + EXTRA_WEIGHT * (len(extra) / extra_denominator)

    score = max(0, min(100, round_half_up(min(100.0, raw))))
    return CoverageResult(matched, missing, extra, score, coverage)
