"""Clean the ``hours`` array of an extracted object into usable day values.

Rows are never reordered. A row that cannot be read as a non-negative finite
number is dropped with a warning, so once any row is skipped the row numbers
in later warnings refer to the model's array, not to the cleaned output.
Values above 24 are capped rather than dropped to keep the remaining rows
aligned with the screenshot.
"""
from __future__ import annotations
import json
import math
import re
from collections.abc import Mapping
from typing import Any
from timecard.extraction.models import SanitizedHours

MAX_DAY_HOURS = 24.0

_NUMERIC_STRING = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def coerce_hour(value: Any) -> float | None:
    """Return ``value`` as a float, or None if it is not number-like."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            return float(value)
        except OverflowError:
            return None
    if isinstance(value, str):
        text = value.strip()
        # blank strings read as zero hours
        if not text:
            return 0.0
        if _NUMERIC_STRING.fullmatch(text):
            return float(text)
    return None


def display_value(value: Any) -> str:
    """Render a raw entry the way it appeared in the model's JSON.

    Lists and objects are shown as JSON text rather than flattened, so the
    warning still shows what the model actually sent.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return repr(value)
    return json.dumps(value)


def round_hours(value: float) -> float:
    return float(f"{value:.2f}")


def sanitize(candidate: Mapping[str, Any]) -> SanitizedHours:
    raw_warnings = candidate.get("warnings")
    warnings = [w for w in raw_warnings if isinstance(w, str)] if isinstance(raw_warnings, list) else []

    raw_hours = candidate.get("hours")
    if not isinstance(raw_hours, list):
        raw_hours = []

    hours: list[float] = []
    for row, value in enumerate(raw_hours, start=1):
        num = coerce_hour(value)
        if num is None or not math.isfinite(num) or num < 0:
            warnings.append(f'Row {row}: skipped non-numeric hour "{display_value(value)}"')
            continue
        if num > MAX_DAY_HOURS:
            warnings.append(f"Row {row}: capped hour {num:.2f} to 24")
            hours.append(MAX_DAY_HOURS)
            continue
        hours.append(round_hours(num))

    return SanitizedHours(hours=hours, warnings=warnings)
