"""Shared Pydantic models used across the screening core and the gateway."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Longest job description or resume text accepted, in characters
MAX_TEXT_LENGTH = 500_000


class RecommendationLabel(str, Enum):
    """Ordered recommendation categories, strongest first.

    Values are the wire strings shown to recruiters.
    """
    STRONG_RECOMMEND = "Strong Recommend"
    CONSIDER = "Consider"
    WEAK_FIT = "Weak Fit"
    NOT_RECOMMENDED = "Not Recommended"


class _CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class AnalysisResult(_CamelModel):
    """Outcome of screening one resume against one job description.

    Produced either by the local engine or by normalising an external
    provider response. Frozen once built.
    """
    score: int = Field(..., ge=0, le=100)
    label: RecommendationLabel
    summary: str = Field(..., min_length=1)
    matched_skills: tuple[str, ...] = ()
    missing_skills: tuple[str, ...] = ()
    extra_skills: tuple[str, ...] = ()
    candidate_name: str = ""
    role_title: str = ""


class ProviderRequest(_CamelModel):
    """Payload sent to an external analysis provider."""
    job_description: str
    resume_text: str
    candidate_name: Optional[str] = None
    candidate_email: Optional[str] = None
    recruiter_email: Optional[str] = None
    role_title: Optional[str] = None


class AnalyzeRequest(ProviderRequest):
    """Incoming analysis request at the gateway.

    Same fields as the provider payload; bounded so a single request
    cannot carry an unbounded document.
    """
    job_description: str = Field(..., max_length=MAX_TEXT_LENGTH)
    resume_text: str = Field(..., max_length=MAX_TEXT_LENGTH)
