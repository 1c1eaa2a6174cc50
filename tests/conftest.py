"""Shared fixtures for the screening tests."""

from __future__ import annotations

import pytest

from screening.vocabulary import SkillVocabulary


@pytest.fixture
def small_vocabulary() -> SkillVocabulary:
    """A five-term vocabulary so expectations stay easy to read."""
    return SkillVocabulary(["python", "sql", "ci/cd", "node.js", "machine learning"])


@pytest.fixture
def provider_result() -> dict:
    """A well-formed provider result object (camelCase, as on the wire)."""
    return {
        "candidateName": "Jane Doe",
        "roleTitle": "Backend Engineer",
        "score": 72,
        "label": "Consider",
        "summary": "Solid backend profile with a gap in Kubernetes.",
        "matchedSkills": ["python", "sql"],
        "missingSkills": ["kubernetes"],
        "extraSkills": ["redis"],
    }
