"""Recover -> sanitize -> score, through the public boundary."""
import pytest
from unittest.mock import patch
from timecard.domain.exceptions import ExtractionFailedError
from timecard.extraction.pipeline import extract_and_sanitize


def test_commentary_wrapped_response():
    result = extract_and_sanitize('Sure! {"hours": [8, "x", 30]}')
    assert result.hours == [8.0, 24.0]
    assert result.warnings == [
        'Row 2: skipped non-numeric hour "x"',
        "Row 3: capped hour 30.00 to 24",
    ]
    assert result.confidence == pytest.approx(0.7)


def test_no_braces_stops_pipeline():
    with patch("timecard.extraction.pipeline.sanitize") as sanitize_mock:
        with pytest.raises(ExtractionFailedError) as exc_info:
            extract_and_sanitize("  I can't see any hours.  ")
    sanitize_mock.assert_not_called()
    err = exc_info.value
    assert err.reason == "no-json-bounds"
    assert err.raw_text == "I can't see any hours."
    assert err.detail


def test_malformed_json_failure_carries_detail():
    with pytest.raises(ExtractionFailedError) as exc_info:
        extract_and_sanitize("{hours: 8}")
    assert exc_info.value.reason == "malformed-json"
    assert exc_info.value.detail


def test_non_object_json_is_a_failure():
    with pytest.raises(ExtractionFailedError) as exc_info:
        extract_and_sanitize("[8, 9]")
    assert exc_info.value.reason == "not-an-object"


def test_empty_hours_low_confidence():
    result = extract_and_sanitize('{"hours": [], "warnings": ["image unreadable"]}')
    assert result.hours == []
    assert result.warnings == ["image unreadable"]
    assert result.confidence == 0.2


def test_raw_text_passthrough():
    result = extract_and_sanitize('{"hours": [8], "rawText": "Mon 8.00"}')
    assert result.raw_text == "Mon 8.00"
    assert extract_and_sanitize('{"hours": [8], "rawText": 5}').raw_text is None
