"""
PDF Kit
=======
Convenience toolkit for everyday PDF chores: text lines, page counts,
search, page extraction, metadata and plain-text conversion.

Architecture:
    - Validator: Checks path existence and .pdf extension up front
    - Text Extractor: Decodes PDF bytes into text via PyMuPDF
    - Page Extractor: Copies page subsets into new PDFs via pypdf
    - Engine: PdfKit facade tying the pieces together
    - Errors: Single PdfKitError tagged with an ErrorType

Version: 1.0.0
"""

__version__ = "1.0.0"

from .engine import KitConfig, PdfKit  # noqa: E402
from .errors import ErrorType, PdfKitError  # noqa: E402
from .models import DecodedText, PdfMetadata, SearchOptions  # noqa: E402

__all__ = [
    "DecodedText",
    "ErrorType",
    "KitConfig",
    "PdfKit",
    "PdfKitError",
    "PdfMetadata",
    "SearchOptions",
    "__version__",
]
