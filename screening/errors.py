"""Errors raised at the external-provider boundary.

The engine itself never raises; these cover consuming results from a
remote analysis provider.
"""

from __future__ import annotations


class ScreeningError(Exception):
    """Base class for screening errors."""


class MalformedResponse(ScreeningError):
    """Provider payload could not be normalised into an AnalysisResult."""


class ProviderUnreachable(ScreeningError):
    """Network-level failure while contacting the provider."""


class ProviderError(ScreeningError):
    """Provider answered with a non-success HTTP status."""

    def __init__(self, status: int, body: str) -> None:
        super().__init__(f"Provider error {status}: {body[:200]}")
        self.status = status
        self.body = body
