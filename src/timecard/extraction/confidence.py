"""Heuristic trust score for an extraction."""
from __future__ import annotations

EMPTY_CONFIDENCE = 0.2
BASE_CONFIDENCE = 0.6
PER_ROW_CONFIDENCE = 0.05
MAX_CONFIDENCE = 0.9


def score(cleaned_count: int) -> float:
    """More usable rows raise confidence, but it never passes 0.9."""
    if cleaned_count <= 0:
        return EMPTY_CONFIDENCE
    return min(MAX_CONFIDENCE, BASE_CONFIDENCE + PER_ROW_CONFIDENCE * cleaned_count)
