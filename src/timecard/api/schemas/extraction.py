"""Extraction DTOs: pure Pydantic."""
from __future__ import annotations
from pydantic import BaseModel
from timecard.extraction.models import ExtractionResult

__all__ = ["ExtractionResult", "ExtractionErrorResponse", "ErrorResponse"]


class ErrorResponse(BaseModel):
    error: str
    detail: str | None = None


class ExtractionErrorResponse(ErrorResponse):
    raw: str
    reason: str
