"""HTTP client for the external analysis provider.

One request, one response: no retry and no fallback to the local engine.
Failures surface as ProviderUnreachable / ProviderError / MalformedResponse
and the caller decides what to do with them.
"""

from __future__ import annotations

import logging
import time
from typing import Optional

import httpx

from shared.models import AnalysisResult, ProviderRequest
from screening.errors import ProviderError, ProviderUnreachable
from screening.remote_adapter import normalize
from app.core.config import settings

logger = logging.getLogger(__name__)


async def call_provider(
    request: ProviderRequest,
    *,
    client: Optional[httpx.AsyncClient] = None,
) -> AnalysisResult:
    """POST the analysis request to PROVIDER_URL and normalise the answer.

    Args:
        request: Job description, resume text and optional metadata.
        client:  Reuse an existing AsyncClient; a short-lived one is
                 created (with PROVIDER_TIMEOUT) when omitted.

    Raises:
        ProviderUnreachable: connection failure or timeout.
        ProviderError:       non-2xx status.
        MalformedResponse:   body cannot be normalised.
    """
    url = settings.PROVIDER_URL
    body = request.model_dump(by_alias=True, exclude_none=True)
    start = time.perf_counter()

    try:
        if client is None:
            async with httpx.AsyncClient(timeout=settings.PROVIDER_TIMEOUT) as own_client:
                resp = await own_client.post(url, json=body)
        else:
            resp = await client.post(url, json=body)
    except httpx.TransportError as exc:
        logger.error("Analysis provider unreachable at %s: %s", url, exc)
        raise ProviderUnreachable(f"Unable to reach analysis provider at {url}: {exc}") from exc

    latency_ms = (time.perf_counter() - start) * 1000
    if not resp.is_success:
        logger.error(
            "Analysis provider returned %d", resp.status_code,
            extra={"latency_ms": latency_ms, "provider_status": resp.status_code},
        )
        raise ProviderError(resp.status_code, resp.text)

    result = normalize(resp.text)
    logger.info(
        "Provider analysis latency=%.1f ms score=%d label=%s",
        latency_ms, result.score, result.label.value,
        extra={"latency_ms": latency_ms, "provider_status": resp.status_code},
    )
    return result
