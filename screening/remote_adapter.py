"""Normalise external analysis-provider responses into AnalysisResult.

Providers (workflow webhooks in particular) are loose about shape: the
result object may arrive bare, wrapped in a one-element list, or encoded
as a JSON string inside an ``output`` field, and scalar fields sometimes
come back as one-element lists.

Unwrapping is table-driven. SHAPE_VARIANTS is tried in order, repeatedly,
until the result object is reached or the depth limit is hit. New provider
quirks are handled by adding a variant, not by touching the result model.

Only shape is normalised here. A remote result is not checked for
matched/missing/extra consistency or for label/score agreement.
"""

from __future__ import annotations

import json
import logging
import math
import re
from collections.abc import Mapping
from typing import Any, Callable, NamedTuple, Optional

from pydantic import ValidationError

from shared.models import AnalysisResult, RecommendationLabel
from screening.errors import MalformedResponse
from screening.fit_scorer import round_half_up

logger = logging.getLogger(__name__)

MAX_UNWRAP_DEPTH = 5

_SKILL_FIELDS = ("matchedSkills", "missingSkills", "extraSkills")


# ---------------------------------------------------------------------------
# Shape variants
# ---------------------------------------------------------------------------

class ShapeVariant(NamedTuple):
    name: str
    matches: Callable[[Any], bool]
    # None marks the terminal variant: the payload is the result object
    unwrap: Optional[Callable[[Any], Any]]


def _decode(raw: Any) -> Any:
    """JSON-decode strings/bytes; anything else is already decoded."""
    if not isinstance(raw, (str, bytes, bytearray)):
        return raw
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise MalformedResponse(f"Undecodable encoded payload: {exc}") from exc


SHAPE_VARIANTS: tuple[ShapeVariant, ...] = (
    ShapeVariant(
        "bare_object",
        lambda p: isinstance(p, Mapping) and "score" in p,
        None,
    ),
    ShapeVariant(
        "wrapped_list",
        lambda p: isinstance(p, list) and len(p) == 1,
        lambda p: p[0],
    ),
    ShapeVariant(
        "encoded_output",
        lambda p: isinstance(p, Mapping) and "output" in p,
        lambda p: _decode(p["output"]),
    ),
    ShapeVariant(
        "encoded_string",
        lambda p: isinstance(p, (str, bytes, bytearray)),
        _decode,
    ),
)


def unwrap_payload(payload: Any) -> Mapping:
    """Peel wrappers off *payload* until the result object is reached."""
    current = payload
    applied: list[str] = []
    for depth in range(MAX_UNWRAP_DEPTH + 1):
        variant = next((v for v in SHAPE_VARIANTS if v.matches(current)), None)
        if variant is None:
            raise MalformedResponse(
                f"Unrecognised response shape ({type(current).__name__}) after {applied or 'no unwrapping'}"
            )
        if variant.unwrap is None:
            logger.debug("Provider payload unwrapped via %s", applied or ["bare_object"])
            return current
        if depth == MAX_UNWRAP_DEPTH:
            break
        applied.append(variant.name)
        current = variant.unwrap(current)
    raise MalformedResponse(f"Response nesting deeper than {MAX_UNWRAP_DEPTH} levels: {applied}")


# ---------------------------------------------------------------------------
# Field normalisation
# ---------------------------------------------------------------------------

def _scalar(value: Any) -> Any:
    """Unwrap one-element lists; an empty list counts as absent."""
    if isinstance(value, list):
        return value[0] if value else None
    return value


def _text(value: Any) -> str:
    value = _scalar(value)
    return "" if value is None else str(value).strip()


def _score(value: Any) -> int:
    value = _scalar(value)
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            raise MalformedResponse(f"Non-numeric score: {value!r}") from None
    if value is None or isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedResponse(f"Missing or non-numeric score: {value!r}")
    if isinstance(value, float):
        if not math.isfinite(value):
            raise MalformedResponse(f"Non-finite score: {value!r}")
        value = round_half_up(value)
    if not 0 <= value <= 100:
        raise MalformedResponse(f"Score out of range: {value}")
    return value


def _label_key(text: str) -> str:
    return re.sub(r"[\s_\-]+", "", text).lower()


# "Strong Recommend", "StrongRecommend" and "STRONG_RECOMMEND" share a key
_LABELS: dict[str, RecommendationLabel] = {}
for _member in RecommendationLabel:
    _LABELS[_label_key(_member.value)] = _member
    _LABELS[_label_key(_member.name)] = _member


def _label(value: Any) -> RecommendationLabel:
    text = _text(value)
    try:
        return _LABELS[_label_key(text)]
    except KeyError:
        raise MalformedResponse(f"Unknown label: {text!r}") from None


def _skills(value: Any, field: str) -> tuple[str, ...]:
    """Skill list from a list or a comma-separated string."""
    if value is None:
        return ()
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, (list, tuple)):
        raise MalformedResponse(f"{field} must be a list, got {type(value).__name__}")
    skills: list[str] = []
    for item in value:
        if item is None:
            continue
        if not isinstance(item, str):
            raise MalformedResponse(
                f"{field} items must be strings, got {type(item).__name__}"
            )
        skills.extend(part.strip() for part in item.split(",") if part.strip())
    return tuple(skills)


def normalize(payload: Any) -> AnalysisResult:
    """Turn any supported provider response shape into an AnalysisResult.

    Raises:
        MalformedResponse: the payload cannot be normalised.
    """
    data = unwrap_payload(payload)

    summary = _text(data.get("summary"))
    if not summary:
        raise MalformedResponse("Missing summary")

    fields = {
        "score": _score(data.get("score")),
        "label": _label(data.get("label")),
        "summary": summary,
        "candidate_name": _text(data.get("candidateName")),
        "role_title": _text(data.get("roleTitle")),
    }
    fields["matched_skills"], fields["missing_skills"], fields["extra_skills"] = (
        _skills(data.get(name), name) for name in _SKILL_FIELDS
    )

    try:
        return AnalysisResult(**fields)
    except ValidationError as exc:
        raise MalformedResponse(f"Provider result failed validation: {exc}") from exc
