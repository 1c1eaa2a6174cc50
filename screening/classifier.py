"""Score -> recommendation label step function."""

from __future__ import annotations

from shared.models import RecommendationLabel

# (inclusive lower bound, label), highest first
THRESHOLDS: tuple[tuple[int, RecommendationLabel], ...] = (
    (80, RecommendationLabel.STRONG_RECOMMEND),
    (60, RecommendationLabel.CONSIDER),
    (40, RecommendationLabel.WEAK_FIT),
)


def classify(score: int) -> RecommendationLabel:
    """Map a 0-100 score to its label. Anything below 40 is NOT_RECOMMENDED."""
    for lower_bound, label in THRESHOLDS:
        if score >= lower_bound:
            return label
    return RecommendationLabel.NOT_RECOMMENDED
