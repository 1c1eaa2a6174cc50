"""FastAPI application entrypoint.

Responsibilities:
  - Validate analysis requests (text or uploaded resume)
  - Run the local MatchEngine, or call the external analysis provider
  - Expose the skill vocabulary in use

NOT responsible for:
  - Persisting analyses (every result is returned and forgotten)
  - Ranking several candidates against each other
"""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.logging_config import setup_logging
from app.routers import analyze

setup_logging()

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Candidate Fit Screener",
    version="1.0.0",
    description="Skill-coverage screening of a resume against a job description",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(analyze.router, tags=["analysis"])


@app.on_event("startup")
async def startup_event() -> None:
    from app.core.config import settings
    from app.services.engine_service import get_engine

    engine = get_engine()
    logger.info(
        "Screener ready: mode=%s, %d skill terms",
        settings.ANALYSIS_MODE, len(engine.vocabulary),
    )


@app.get("/health")
async def health() -> dict:
    return {"status": "ok"}
