"""Tests for coverage scoring, label classification and summaries."""

from __future__ import annotations

import pytest

from shared.models import RecommendationLabel
from screening.classifier import classify
from screening.fit_scorer import round_half_up, score_skills, skill_gap
from screening.summary import summarize


def test_partial_overlap_scores_weak_fit() -> None:
    """4 JD skills, 3 covered, 1 extra: 70*0.75 + 30*(1/8) = 56.25."""
    result = score_skills(("react", "node", "aws", "docker"), ("react", "node", "docker", "redis"))
    assert result.matched == ("react", "node", "docker")
    assert result.missing == ("aws",)
    assert result.extra == ("redis",)
    assert result.coverage == 0.75
    assert result.score == 56
    assert classify(result.score) is RecommendationLabel.WEAK_FIT


def test_empty_resume_scores_zero() -> None:
    result = score_skills(("react", "aws"), ())
    assert result.matched == ()
    assert result.missing == ("react", "aws")
    assert result.extra == ()
    assert result.score == 0


def test_no_jd_skills_uses_guarded_denominator() -> None:
    """coverage is 0 and the extra bonus is 30 * 1/4 = 7.5, rounded up to 8."""
    result = score_skills((), ("python",))
    assert result.coverage == 0.0
    assert result.extra == ("python",)
    assert result.score == 8


def test_full_overlap_without_extras_is_seventy() -> None:
    result = score_skills(("sql", "git"), ("sql", "git"))
    assert result.coverage == 1.0
    assert result.extra == ()
    assert result.score == 70
    assert classify(result.score) is RecommendationLabel.CONSIDER


def test_score_is_capped_at_100() -> None:
    extras = tuple(f"skill{i}" for i in range(20))
    assert score_skills((), extras).score == 100
    assert score_skills(("sql",), ("sql",) + extras).score == 100


def test_both_empty() -> None:
    result = score_skills((), ())
    assert result.score == 0
    assert result.coverage == 0.0


def test_skill_gap_partitions_jd_skills() -> None:
    jd = ("python", "sql", "docker")
    resume = ("docker", "python", "redis")
    matched, missing, extra = skill_gap(jd, resume)
    assert matched == ("python", "docker")
    assert missing == ("sql",)
    assert extra == ("redis",)
    assert set(matched) | set(missing) == set(jd)
    assert not set(matched) & set(missing)
    assert not set(extra) & set(jd)


@pytest.mark.parametrize(
    "value, expected",
    [(56.25, 56), (56.5, 57), (7.5, 8), (0.49, 0), (99.5, 100), (0.0, 0)],
)
def test_round_half_up(value: float, expected: int) -> None:
    assert round_half_up(value) == expected


@pytest.mark.parametrize(
    "score, label",
    [
        (100, RecommendationLabel.STRONG_RECOMMEND),
        (80, RecommendationLabel.STRONG_RECOMMEND),
        (79, RecommendationLabel.CONSIDER),
        (60, RecommendationLabel.CONSIDER),
        (59, RecommendationLabel.WEAK_FIT),
        (40, RecommendationLabel.WEAK_FIT),
        (39, RecommendationLabel.NOT_RECOMMENDED),
        (0, RecommendationLabel.NOT_RECOMMENDED),
    ],
)
def test_classify_thresholds(score: int, label: RecommendationLabel) -> None:
    assert classify(score) is label


def test_summary_strong_recommend_cites_first_three_extras() -> None:
    text = summarize(RecommendationLabel.STRONG_RECOMMEND, 90, (), ("redis", "kafka", "vue", "sass"))
    assert "90% of required skills" in text
    assert "redis, kafka, vue" in text
    assert "sass" not in text


def test_summary_consider_joins_two_missing_with_and() -> None:
    text = summarize(RecommendationLabel.CONSIDER, 75, ("aws", "docker", "git"), ())
    assert "75% skill match" in text
    assert "gaps in aws and docker," in text
    assert "git" not in text


def test_summary_weak_fit_lists_gaps() -> None:
    text = summarize(RecommendationLabel.WEAK_FIT, 50, ("aws", "docker", "git", "sql"), ())
    assert "(50% match)" in text
    assert "Key gaps include aws, docker, git." in text


@pytest.mark.parametrize(
    "label, fallback",
    [
        (RecommendationLabel.STRONG_RECOMMEND, "related areas"),
        (RecommendationLabel.CONSIDER, "a few areas"),
        (RecommendationLabel.WEAK_FIT, "a few areas"),
        (RecommendationLabel.NOT_RECOMMENDED, "essential areas"),
    ],
)
def test_summary_falls_back_when_list_is_empty(label: RecommendationLabel, fallback: str) -> None:
    text = summarize(label, 0, (), ())
    assert fallback in text
    assert "\n" not in text
