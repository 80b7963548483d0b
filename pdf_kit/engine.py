"""
PDF Kit Engine
==============
Facade exposing the toolkit operations on top of the validator and the
two delegate extractors.

Usage:
    kit = PdfKit(config)
    lines = kit.intoarray("path/to/file.pdf")
    kit.extract_pages("in.pdf", "out.pdf", [3, 1, 3])

Every operation follows the same path:
    validate → read bytes → delegate → reshape → return (or raise)
"""

from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Sequence, Union

from .errors import ErrorType, PdfKitError
from .models import DecodedText, PdfMetadata, SearchOptions
from .page_extractor import PageExtractor
from .text_extractor import TextExtractor
from .validator import PathLike, validate_file_path, validate_page_numbers

logger = logging.getLogger(__name__)

LOG_FORMAT = "[%(asctime)s] %(levelname)-8s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


@dataclass
class KitConfig:
    """Configuration for the PdfKit engine."""

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None

    # Text handling
    page_separator: str = "\n"
    text_encoding: str = "utf-8"


@contextmanager
def _wrap_errors(error_type: ErrorType, action: str):
    """
    Re-raise delegate failures as PdfKitError tagged with ``error_type``.
    PdfKitError raised inside the block passes through untouched.
    """
    try:
        yield
    except PdfKitError:
        raise
    except Exception as e:
        raise PdfKitError(f"Failed to {action}: {e}", error_type) from e


class PdfKit:
    """
    PDF convenience toolkit.

    Holds only configuration; calls do not depend on each other.
    """

    def __init__(
        self,
        config: Optional[KitConfig] = None,
        text_extractor: Optional[TextExtractor] = None,
        page_extractor: Optional[PageExtractor] = None,
    ):
        self.config = config or KitConfig()
        self.text_extractor = text_extractor or TextExtractor(
            page_separator=self.config.page_separator,
        )
        self.page_extractor = page_extractor or PageExtractor()
        self._setup_logging()

    def _setup_logging(self):
        """Configure logging based on config."""
        log_level = getattr(logging, self.config.log_level.upper(), logging.INFO)

        kit_logger = logging.getLogger("pdf_kit")
        kit_logger.setLevel(log_level)

        # Console handler
        if not kit_logger.handlers:
            console = logging.StreamHandler()
            console.setLevel(log_level)
            console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
            kit_logger.addHandler(console)

        # File handler
        if self.config.log_file:
            log_path = Path(self.config.log_file).absolute()
            already_attached = any(
                isinstance(h, logging.FileHandler)
                and h.baseFilename == str(log_path)
                for h in kit_logger.handlers
            )
            if not already_attached:
                log_path.parent.mkdir(parents=True, exist_ok=True)
                file_handler = logging.FileHandler(log_path, encoding="utf-8")
                file_handler.setLevel(log_level)
                file_handler.setFormatter(
                    logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)
                )
                kit_logger.addHandler(file_handler)

    # ─── Helpers ──────────────────────────────────────────────────────────

    def _decode(self, file_path: str) -> DecodedText:
        with open(file_path, "rb") as f:
            pdf_data = f.read()
        return self.text_extractor.decode(pdf_data)

    # ─── Operations ───────────────────────────────────────────────────────

    def intoarray(self, file_path: PathLike) -> list[str]:
        """
        Parse a PDF and return its text as a list of lines.

        Args:
            file_path: Path to the PDF file.

        Returns:
            Lines of the decoded text. Never empty: a document without
            text yields ``[""]``.

        Raises:
            PdfKitError: FileNotFound, InvalidFileType or ParseError.
        """
        with _wrap_errors(ErrorType.PARSE_ERROR, "parse PDF"):
            path = validate_file_path(file_path)
            decoded = self._decode(path)
            lines = decoded.text.split("\n")
            logger.debug(f"Parsed {len(lines)} lines from {path}")
            return lines

    def get_page_count(self, file_path: PathLike) -> int:
        """Return the total number of pages in the PDF."""
        with _wrap_errors(ErrorType.PAGE_COUNT_ERROR, "get page count"):
            path = validate_file_path(file_path)
            return self._decode(path).numpages

    def search_text(
        self,
        file_path: PathLike,
        search_term: str,
        options: Union[SearchOptions, Mapping, None] = None,
    ) -> list[str]:
        """
        Find the lines of a PDF that contain ``search_term``.

        Args:
            file_path: Path to the PDF file.
            search_term: Non-empty text to look for.
            options: SearchOptions, or a mapping with ``case_sensitive``
                (``caseSensitive`` also accepted). Defaults to a
                case-insensitive search.

        Returns:
            Matching lines in document order; possibly empty.

        Raises:
            PdfKitError: InvalidSearchTerm, FileNotFound, InvalidFileType,
                ParseError or SearchError.
        """
        with _wrap_errors(ErrorType.SEARCH_ERROR, "search PDF"):
            if not search_term:
                raise PdfKitError(
                    "Invalid search terms provided",
                    ErrorType.INVALID_SEARCH_TERM,
                )

            if options is None:
                options = SearchOptions()
            elif not isinstance(options, SearchOptions):
                options = SearchOptions.model_validate(dict(options))

            lines = self.intoarray(file_path)

            if options.case_sensitive:
                matches = [line for line in lines if search_term in line]
            else:
                needle = search_term.lower()
                matches = [line for line in lines if needle in line.lower()]

            logger.info(
                f"Found {len(matches)} matching lines for {search_term!r}"
            )
            return matches

    def extract_pages(
        self,
        input_path: PathLike,
        output_path: Optional[PathLike],
        page_numbers: Sequence[int],
    ) -> None:
        """
        Write a new PDF holding the requested pages of ``input_path``.

        Pages are copied in the order given, duplicates included. Page
        numbers outside the document are skipped with a warning.

        Raises:
            PdfKitError: FileNotFound, InvalidFileType, InvalidOutputPath,
                InvalidPageNumbers or ExtractPagesError.
        """
        with _wrap_errors(ErrorType.EXTRACT_PAGES_ERROR, "extract pages"):
            path = validate_file_path(input_path)

            if not output_path:
                raise PdfKitError(
                    "Invalid path provided",
                    ErrorType.INVALID_OUTPUT_PATH,
                )

            pages = validate_page_numbers(page_numbers)

            with open(path, "rb") as f:
                source_data = f.read()

            pdf_bytes = self.page_extractor.extract(source_data, pages)

            with open(output_path, "wb") as f:
                f.write(pdf_bytes)

            logger.info(f"Saved extracted pages to: {os.fspath(output_path)}")

    def get_metadata(self, file_path: PathLike) -> PdfMetadata:
        """
        Summarize a PDF.

        Returns:
            PdfMetadata with page count, full text, text length and
            file name.
        """
        with _wrap_errors(ErrorType.METADATA_ERROR, "get metadata"):
            path = validate_file_path(file_path)
            decoded = self._decode(path)
            return PdfMetadata(
                total_pages=decoded.numpages,
                total_text=decoded.text,
                filename=os.path.basename(path),
            )

    def convert_to_text(
        self,
        input_path: PathLike,
        output_path: Optional[PathLike] = None,
    ) -> str:
        """
        Convert a PDF to plain text.

        Args:
            input_path: Path to the PDF file.
            output_path: Optional path of a text file to write.

        Returns:
            The text when no output path is given, otherwise ``""``
            after writing the text to ``output_path``.

        Raises:
            PdfKitError: FileNotFound, InvalidFileType, ParseError or
                ConvertToTextError.
        """
        with _wrap_errors(ErrorType.CONVERT_TO_TEXT_ERROR, "convert PDF to text"):
            text = "\n".join(self.intoarray(input_path))

            if output_path:
                with open(
                    output_path, "w", encoding=self.config.text_encoding,
                    newline="",
                ) as f:
                    f.write(text)
                logger.info(f"Saved text output: {os.fspath(output_path)}")
                return ""

            return text
