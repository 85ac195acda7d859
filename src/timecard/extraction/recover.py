"""Recover a JSON object from model output that may be wrapped in prose."""
from __future__ import annotations
import json
from typing import Any
from timecard.extraction.models import RecoveryFailure


def _reject_constant(name: str) -> Any:
    # json accepts NaN/Infinity by default; model output must be strict JSON
    raise ValueError(f"Invalid JSON constant: {name}")


def _loads(text: str) -> Any:
    return json.loads(text, parse_constant=_reject_constant)


def json_bounds(text: str) -> tuple[int, int] | None:
    """Return (first ``{``, last ``}``) indices, or None if no usable span."""
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end == -1 or end <= start:
        return None
    return start, end


def recover(text: str) -> Any | RecoveryFailure:
    """Parse ``text`` as JSON, falling back to its outermost brace span.

    The fallback only ever considers the first ``{`` to the last ``}``; stray
    braces in surrounding commentary can make that span over- or
    under-capture.
    """
    try:
        return _loads(text)
    except (ValueError, RecursionError) as exc:
        first_error = str(exc)

    bounds = json_bounds(text)
    if bounds is None:
        return RecoveryFailure(reason="no-json-bounds", detail=first_error)

    start, end = bounds
    try:
        return _loads(text[start:end + 1])
    except (ValueError, RecursionError) as exc:
        return RecoveryFailure(reason="malformed-json", detail=str(exc))
