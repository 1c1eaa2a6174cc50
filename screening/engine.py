"""Match engine: extract -> score -> classify -> summarise.

Pure and stateless. The only thing an engine holds is its read-only
vocabulary, so one instance can serve any number of concurrent calls.
"""

from __future__ import annotations

import logging
from typing import Optional

from shared.models import AnalysisResult
from screening.classifier import classify
from screening.fit_scorer import round_half_up, score_skills
from screening.skill_extractor import extract_skills
from screening.summary import summarize
from screening.vocabulary import SkillVocabulary, default_vocabulary

logger = logging.getLogger(__name__)


class MatchEngine:
    def __init__(self, vocabulary: Optional[SkillVocabulary] = None) -> None:
        self._vocabulary = vocabulary if vocabulary is not None else default_vocabulary()

    @property
    def vocabulary(self) -> SkillVocabulary:
        return self._vocabulary

    def analyze(
        self,
        job_text: Optional[str],
        resume_text: Optional[str],
        candidate_name: str = "",
        role_title: str = "",
    ) -> AnalysisResult:
        """Screen *resume_text* against *job_text*.

        Never raises: missing or unrecognisable text degrades to empty
        skill sets and a zero score.
        """
        jd_skills = extract_skills(job_text, self._vocabulary)
        resume_skills = extract_skills(resume_text, self._vocabulary)

        coverage = score_skills(jd_skills, resume_skills)
        label = classify(coverage.score)
        summary = summarize(
            label,
            round_half_up(coverage.coverage * 100),
            coverage.missing,
            coverage.extra,
        )

        logger.debug(
            "Analysis: score=%d label=%s (%d/%d JD skills, %d extra)",
            coverage.score, label.value, len(coverage.matched), len(jd_skills), len(coverage.extra),
            extra={"score": coverage.score, "label": label.value},
        )
        return AnalysisResult(
            score=coverage.score,
            label=label,
            summary=summary,
            matched_skills=coverage.matched,
            missing_skills=coverage.missing,
            extra_skills=coverage.extra,
            candidate_name=candidate_name or "",
            role_title=role_title or "",
        )


def analyze(
    job_text: Optional[str],
    resume_text: Optional[str],
    vocabulary: Optional[SkillVocabulary] = None,
) -> AnalysisResult:
    """One-shot convenience wrapper around MatchEngine."""
    return MatchEngine(vocabulary).analyze(job_text, resume_text)
