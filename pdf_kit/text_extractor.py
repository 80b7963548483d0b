"""
Text Extractor
==============
Decodes PDF bytes into full text and a page count using PyMuPDF (fitz).
"""

from __future__ import annotations

import logging

import fitz  # PyMuPDF

from .models import DecodedText

logger = logging.getLogger(__name__)


class TextExtractor:
    """
    Wraps PyMuPDF text decoding.

    Page texts are joined in page order with ``page_separator``.
    Failures from PyMuPDF propagate unchanged; the engine tags them.
    """

    def __init__(self, page_separator: str = "\n"):
        self.page_separator = page_separator

    def decode(self, pdf_data: bytes) -> DecodedText:
        """
        Decode a PDF held in memory.

        Args:
            pdf_data: Raw PDF file bytes.

        Returns:
            DecodedText with the joined page texts and the page count.

        Raises:
            RuntimeError: If the PDF is password protected.
        """
        with fitz.open(stream=pdf_data, filetype="pdf") as doc:
            if doc.needs_pass:
                raise RuntimeError("PDF is password protected")

            page_texts = [page.get_text() for page in doc]
            total_pages = doc.page_count

        logger.debug(
            f"Decoded {total_pages} pages "
            f"({sum(len(t) for t in page_texts)} characters)"
        )

        return DecodedText(
            text=self.page_separator.join(page_texts),
            numpages=total_pages,
        )
