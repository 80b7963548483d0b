"""
Input Validation
================
Checks run before any PDF is opened.

Every public PdfKit operation calls ``validate_file_path`` first, so a
missing file or a non-PDF path never reaches the delegate libraries.
"""

from __future__ import annotations

import logging
import os
from typing import Union

from .errors import ErrorType, PdfKitError

logger = logging.getLogger(__name__)

PDF_EXTENSION = ".pdf"

PathLike = Union[str, bytes, "os.PathLike[str]"]


def validate_file_path(file_path: PathLike) -> str:
    """
    Ensure a path names an existing file with a .pdf extension.

    Args:
        file_path: Path to the PDF file.

    Returns:
        The path as a plain string.

    Raises:
        PdfKitError: FileNotFound or InvalidFileType.
    """
    path = os.fsdecode(file_path) if file_path else ""

    if not path or not os.path.isfile(path):
        raise PdfKitError(
            f"File not found: {path}",
            ErrorType.FILE_NOT_FOUND,
        )

    ext = os.path.splitext(path)[1].lower()
    if ext != PDF_EXTENSION:
        raise PdfKitError(
            f"Invalid file type. Expected {PDF_EXTENSION}, got {ext}",
            ErrorType.INVALID_FILE_TYPE,
        )

    logger.debug(f"Validated PDF path: {path}")
    return path


def validate_page_numbers(page_numbers) -> list[int]:
    """Require a non-empty list or tuple of integers."""
    if (
        not isinstance(page_numbers, (list, tuple))
        or not page_numbers
        or any(
            isinstance(n, bool) or not isinstance(n, int)
            for n in page_numbers
        )
    ):
        raise PdfKitError(
            "Invalid page numbers provided",
            ErrorType.INVALID_PAGE_NUMBERS,
        )
    return list(page_numbers)
