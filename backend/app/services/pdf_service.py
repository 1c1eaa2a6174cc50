"""PDF text extraction service for uploaded resumes."""

from __future__ import annotations

import io
import logging

from PyPDF2 import PdfReader
from PyPDF2.errors import PdfReadError

from app.core.config import settings

logger = logging.getLogger(__name__)

MAX_PAGES = 100


def extract_text_from_pdf(content: bytes) -> str:
    """Extract text from PDF bytes.

    Raises ValueError if the PDF is unreadable, too large, or has no text.
    """
    try:
        reader = PdfReader(io.BytesIO(content))
        page_count = len(reader.pages)
    except PdfReadError as exc:
        raise ValueError("Could not read PDF. Please try another file.") from exc

    if page_count > MAX_PAGES:
        raise ValueError(f"PDF has {page_count} pages, maximum is {MAX_PAGES}")

    pages: list[str] = []
    for page in reader.pages:
        pages.append(page.extract_text() or "")

    full_text = "\n\n".join(pages).strip()

    if not full_text:
        raise ValueError("Could not extract any text from PDF")

    if len(full_text) > settings.MAX_TEXT_LENGTH:
        logger.warning(
            "Truncating extracted text from %d to %d chars", len(full_text), settings.MAX_TEXT_LENGTH
        )
        full_text = full_text[:settings.MAX_TEXT_LENGTH]

    logger.info("Extracted %d characters from %d page PDF", len(full_text), page_count)
    return full_text
