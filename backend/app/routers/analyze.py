"""Analysis endpoints.

Two ways to produce a result, same response shape:
  - local:  the in-process MatchEngine (deterministic, no network)
  - remote: the external analysis provider, normalised by the remote adapter

Provider failures are reported as 502; there is no silent fallback from
remote to local.
"""

from __future__ import annotations

import logging
from typing import Literal, Optional

from fastapi import APIRouter, File, Form, HTTPException, Query, UploadFile

from shared.models import AnalysisResult, AnalyzeRequest
from screening.errors import MalformedResponse, ProviderError, ProviderUnreachable
from app.core.config import settings
from app.services.engine_service import get_engine
from app.services.pdf_service import extract_text_from_pdf
from app.services.provider_client import call_provider

logger = logging.getLogger(__name__)
router = APIRouter()

AnalysisMode = Literal["local", "remote"]


async def _analyze(request: AnalyzeRequest, mode: Optional[str]) -> AnalysisResult:
    if not request.job_description.strip():
        raise HTTPException(status_code=400, detail="Please enter a job description")
    if not request.resume_text.strip():
        raise HTTPException(status_code=400, detail="Please provide resume text")

    mode = mode or settings.ANALYSIS_MODE
    if mode != "remote":
        result = get_engine().analyze(
            request.job_description,
            request.resume_text,
            candidate_name=request.candidate_name or "",
            role_title=request.role_title or "",
        )
        logger.info(
            "Local analysis: score=%d label=%s", result.score, result.label.value,
            extra={"mode": "local", "score": result.score, "label": result.label.value},
        )
        return result

    try:
        return await call_provider(request)
    except ProviderUnreachable as exc:
        logger.error("Provider unreachable: %s", exc)
        raise HTTPException(status_code=502, detail="Analysis provider unreachable")
    except ProviderError as exc:
        logger.error("Provider error %d: %.200s", exc.status, exc.body)
        raise HTTPException(status_code=502, detail=f"Analysis provider error {exc.status}")
    except MalformedResponse as exc:
        logger.error("Malformed provider response: %s", exc)
        raise HTTPException(status_code=502, detail="Analysis provider returned a malformed response")


@router.post("/analyze", response_model=AnalysisResult)
async def analyze(
    request: AnalyzeRequest,
    mode: Optional[AnalysisMode] = Query(default=None),
) -> AnalysisResult:
    """Screen a resume against a job description (both as plain text)."""
    return await _analyze(request, mode)


def _validate_file(file: UploadFile) -> None:
    if file.content_type not in ("application/pdf", "text/plain"):
        raise HTTPException(
            status_code=400,
            detail=f"Unsupported file type: {file.content_type}. Use PDF or plain text.",
        )


async def _read_content(file: UploadFile) -> str:
    content = await file.read()
    if len(content) > settings.MAX_UPLOAD_SIZE_MB * 1024 * 1024:
        raise HTTPException(
            status_code=400,
            detail=f"File size must be less than {settings.MAX_UPLOAD_SIZE_MB}MB",
        )
    if file.content_type == "application/pdf":
        try:
            return extract_text_from_pdf(content)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
    return content.decode("utf-8", errors="replace")[:settings.MAX_TEXT_LENGTH]


@router.post("/analyze/upload", response_model=AnalysisResult)
async def analyze_upload(
    job_description: str = Form(...),
    resume: UploadFile = File(...),
    candidate_name: str = Form(""),
    role_title: str = Form(""),
    mode: Optional[AnalysisMode] = Form(default=None),
) -> AnalysisResult:
    """Screen an uploaded resume (PDF or plain text) against a job description."""
    _validate_file(resume)
    resume_text = await _read_content(resume)

    logger.info("Resume received: %s (%d characters)", resume.filename, len(resume_text))
    request = AnalyzeRequest(
        job_description=job_description[:settings.MAX_TEXT_LENGTH],
        resume_text=resume_text,
        candidate_name=candidate_name or None,
        role_title=role_title or None,
    )
    return await _analyze(request, mode)


@router.get("/vocabulary")
async def vocabulary() -> dict:
    """List the recognised skill terms in display order."""
    return {"terms": list(get_engine().vocabulary.terms)}
