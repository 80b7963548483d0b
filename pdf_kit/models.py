"""
Data Models
===========
Pydantic models for values produced and consumed by PdfKit operations.
Every model is derived per call and never persisted.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, computed_field


# ─── Delegate Output ──────────────────────────────────────────────────────────


class DecodedText(BaseModel):
    """Full text and page count decoded from a PDF."""
    text: str = ""
    numpages: int = Field(default=0, ge=0)


# ─── Metadata ─────────────────────────────────────────────────────────────────


class PdfMetadata(BaseModel):
    """
    Summary of a PDF's decoded content.

    Serializes with camelCase keys when dumped ``by_alias``:
    totalPages, totalText, textLength, filename.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    total_pages: int = Field(ge=0, alias="totalPages")
    total_text: str = Field(default="", alias="totalText")
    filename: str

    @computed_field(alias="textLength")
    @property
    def text_length(self) -> int:
        return len(self.total_text)


# ─── Options ──────────────────────────────────────────────────────────────────


class SearchOptions(BaseModel):
    """Options for PdfKit.search_text."""
    model_config = ConfigDict(populate_by_name=True)

    case_sensitive: bool = Field(default=False, alias="caseSensitive")
