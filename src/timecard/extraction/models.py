"""Extraction value types: pure Pydantic, no I/O."""
from __future__ import annotations
from typing import Literal
from pydantic import BaseModel, Field


class RecoveryFailure(BaseModel):
    """Model text could not be read as JSON at all. Returned, never raised."""

    reason: Literal["no-json-bounds", "malformed-json"]
    detail: str | None = None


class SanitizedHours(BaseModel):
    hours: list[float] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


class ExtractionResult(BaseModel):
    hours: list[float]
    warnings: list[str]
    confidence: float
    raw_text: str | None = None
