"""
Page Extractor
==============
Builds a new PDF from a subset of another PDF's pages using pypdf.
"""

from __future__ import annotations

import io
import logging
from typing import Sequence

from pypdf import PdfReader, PdfWriter

logger = logging.getLogger(__name__)


class PageExtractor:
    """
    Copies pages, in the order requested, into a fresh document.

    Page numbers are 1-indexed. Duplicates are copied once per request.
    Numbers outside 1..page_count are skipped with a warning.
    """

    def extract(self, pdf_data: bytes, page_numbers: Sequence[int]) -> bytes:
        """
        Copy the requested pages into a new PDF.

        Args:
            pdf_data: Raw bytes of the source PDF.
            page_numbers: 1-indexed page numbers, in output order.

        Returns:
            Serialized bytes of the new PDF (possibly with zero pages).
        """
        reader = PdfReader(io.BytesIO(pdf_data))
        writer = PdfWriter()
        total_pages = len(reader.pages)
        copied = 0

        for page_num in page_numbers:
            if 0 < page_num <= total_pages:
                writer.add_page(reader.pages[page_num - 1])
                copied += 1
            else:
                logger.warning(
                    f"Page number {page_num} is out of range "
                    f"and will be skipped."
                )

        buffer = io.BytesIO()
        writer.write(buffer)

        logger.info(f"Copied {copied} of {len(page_numbers)} requested pages")
        return buffer.getvalue()
