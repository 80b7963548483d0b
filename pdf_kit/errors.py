"""
Errors
======
Single error type raised by every PdfKit operation.

The ``type`` tag tells callers which check or which operation failed,
so there is no exception hierarchy to walk.
"""

from __future__ import annotations

from enum import Enum


class ErrorType(str, Enum):
    """Discriminator carried by PdfKitError."""
    FILE_NOT_FOUND = "FileNotFound"
    INVALID_FILE_TYPE = "InvalidFileType"
    PARSE_ERROR = "ParseError"
    PAGE_COUNT_ERROR = "PageCountError"
    INVALID_SEARCH_TERM = "InvalidSearchTerm"
    SEARCH_ERROR = "SearchError"
    INVALID_OUTPUT_PATH = "InvalidOutputPath"
    INVALID_PAGE_NUMBERS = "InvalidPageNumbers"
    EXTRACT_PAGES_ERROR = "ExtractPagesError"
    METADATA_ERROR = "MetadataError"
    CONVERT_TO_TEXT_ERROR = "ConvertToTextError"
    UNKNOWN = "UnknownError"


class PdfKitError(Exception):
    """
    Error raised by PdfKit operations.

    Attributes:
        message: Human readable description.
        type: ErrorType tag naming the failed check or operation.
    """

    def __init__(
        self,
        message: str,
        type: ErrorType = ErrorType.UNKNOWN,
    ):
        self.message = message
        self.type = ErrorType(type)
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"PdfKitError({self.message!r}, type={self.type.value!r})"

    def to_dict(self) -> dict:
        return {"type": self.type.value, "message": self.message}
