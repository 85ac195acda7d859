"""Pure helpers for editing extracted hours in the UI."""
from __future__ import annotations
import math

MIN_EXPECTED_ROWS = 3
SHORT_EXTRACTION_WARNING = "Fewer than 3 rows extracted — double-check the screenshot."


def set_hour(hours: list[float], index: int, value: float | None) -> list[float]:
    """Return a copy of ``hours`` with one day replaced; bad values become 0."""
    updated = list(hours)
    if value is None or not math.isfinite(value) or value < 0:
        value = 0.0
    updated[index] = value
    return updated


def add_row(hours: list[float]) -> list[float]:
    return [*hours, 0.0]


def review_warnings(hours: list[float], warnings: list[str]) -> list[str]:
    """Server warnings plus a nudge when suspiciously few rows came back."""
    result = list(warnings)
    if 0 < len(hours) < MIN_EXPECTED_ROWS:
        result.append(SHORT_EXTRACTION_WARNING)
    return result
