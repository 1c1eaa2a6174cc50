"""Label-specific natural-language summaries.

Template-based, no LLM. Each template cites a few skills in vocabulary
order and falls back to a generic phrase when the list it draws from is
empty.
"""

from __future__ import annotations

from typing import Sequence

from shared.models import RecommendationLabel

_TEMPLATES: dict[RecommendationLabel, str] = {
    RecommendationLabel.STRONG_RECOMMEND: (
        "This candidate demonstrates excellent alignment with {pct}% of required skills. "
        "They bring additional expertise in {skills} that could add value to the team."
    ),
    RecommendationLabel.CONSIDER: (
        "The candidate shows good potential with {pct}% skill match. "
        "While there are some gaps in {skills}, their background suggests "
        "they could grow into the role."
    ),
    RecommendationLabel.WEAK_FIT: (
        "This candidate has partial alignment ({pct}% match) with the job requirements. "
        "Key gaps include {skills}. Consider only if other candidates are unavailable."
    ),
    RecommendationLabel.NOT_RECOMMENDED: (
        "The candidate's profile shows limited alignment ({pct}% match) with the core "
        "requirements. Major skill gaps in {skills} would require significant training."
    ),
}


def _cite(skills: Sequence[str], limit: int, fallback: str, sep: str = ", ") -> str:
    return sep.join(skills[:limit]) or fallback


def summarize(
    label: RecommendationLabel,
    coverage_percent: int,
    missing: Sequence[str],
    extra: Sequence[str],
) -> str:
    """Render the summary paragraph for *label*."""
    if label is RecommendationLabel.STRONG_RECOMMEND:
        skills = _cite(extra, 3, "related areas")
    elif label is RecommendationLabel.CONSIDER:
        skills = _cite(missing, 2, "a few areas", sep=" and ")
    elif label is RecommendationLabel.WEAK_FIT:
        skills = _cite(missing, 3, "a few areas")
    else:
        skills = _cite(missing, 3, "essential areas")
    return _TEMPLATES[label].format(pct=coverage_percent, skills=skills)
