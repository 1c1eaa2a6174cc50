"""Tests for PDF text extraction and the JSON log formatter."""

from __future__ import annotations

import io
import json
import logging

import pytest
from PyPDF2 import PdfWriter

from shared.logging_config import JSONFormatter
from app.core.config import settings
from app.services import pdf_service
from app.services.pdf_service import extract_text_from_pdf


def _blank_pdf(pages: int = 1) -> bytes:
    writer = PdfWriter()
    for _ in range(pages):
        writer.add_blank_page(width=72, height=72)
    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


def test_pdf_without_text_is_rejected() -> None:
    with pytest.raises(ValueError, match="Could not extract any text"):
        extract_text_from_pdf(_blank_pdf())


def test_unreadable_pdf_is_rejected() -> None:
    with pytest.raises(ValueError):
        extract_text_from_pdf(b"not a pdf")


def test_json_formatter_includes_structured_extras() -> None:
    record = logging.LogRecord(
        name="screening.engine",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="Analysis: score=%d",
        args=(56,),
        exc_info=None,
    )
    record.score = 56
    record.label = "Weak Fit"

    entry = json.loads(JSONFormatter().format(record))

    assert entry["level"] == "INFO"
    assert entry["logger"] == "screening.engine"
    assert entry["message"] == "Analysis: score=56"
    assert entry["score"] == 56
    assert entry["label"] == "Weak Fit"
    assert "latency_ms" not in entry


def test_pdf_over_page_limit_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(pdf_service, "MAX_PAGES", 1)
    with pytest.raises(ValueError, match="2 pages, maximum is 1"):
        extract_text_from_pdf(_blank_pdf(pages=2))


class _TextPage:
    def __init__(self, text: str) -> None:
        self._text = text

    def extract_text(self) -> str:
        return self._text


def test_pdf_text_is_truncated(monkeypatch: pytest.MonkeyPatch) -> None:
    class FakeReader:
        def __init__(self, stream: io.BytesIO) -> None:
            self.pages = [_TextPage("python " * 10), _TextPage("react " * 10)]

    monkeypatch.setattr(pdf_service, "PdfReader", FakeReader)
    monkeypatch.setattr(settings, "MAX_TEXT_LENGTH", 20)

    text = extract_text_from_pdf(b"%PDF-fake")
    assert len(text) == 20
    assert text.startswith("python python")
