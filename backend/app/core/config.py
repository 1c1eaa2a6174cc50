"""Application configuration loaded from environment variables.

  - ANALYSIS_MODE         → "local" (in-process engine) or "remote" (provider)
  - PROVIDER_URL          → external analysis provider webhook
  - SKILL_VOCABULARY_PATH → optional vocabulary file, built-in list otherwise
"""

from __future__ import annotations

import os

from shared.models import MAX_TEXT_LENGTH as _MAX_TEXT_LENGTH


class Settings:
    # Analysis routing
    ANALYSIS_MODE: str = os.getenv("ANALYSIS_MODE", "local")

    # External analysis provider
    PROVIDER_URL: str = os.getenv(
        "PROVIDER_URL", "http://localhost:5678/webhook/recruit-ai-analyze"
    )
    PROVIDER_TIMEOUT: float = float(os.getenv("PROVIDER_TIMEOUT", "60.0"))

    # Skill vocabulary
    SKILL_VOCABULARY_PATH: str = os.getenv("SKILL_VOCABULARY_PATH", "")

    # Request limits
    MAX_UPLOAD_SIZE_MB: int = 10
    MAX_TEXT_LENGTH: int = _MAX_TEXT_LENGTH


settings = Settings()
