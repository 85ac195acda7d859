"""Pure unit tests for JSON recovery from model text."""
from timecard.extraction.models import RecoveryFailure
from timecard.extraction.recover import json_bounds, recover


def test_valid_json_returned_verbatim():
    assert recover('{"hours": [8, 7.5], "warnings": []}') == {"hours": [8, 7.5], "warnings": []}


def test_valid_non_object_json_is_not_rejected_here():
    # Shape checks belong to the sanitizer/pipeline
    assert recover("[1, 2]") == [1, 2]
    assert recover("null") is None


def test_json_wrapped_in_commentary():
    text = 'Sure! Here you go: {"hours": [8, "x", 30]} Let me know if you need more.'
    assert recover(text) == {"hours": [8, "x", 30]}


def test_markdown_fence_is_sliced_away():
    text = '```json\n{"hours": [9.25]}\n```'
    assert recover(text) == {"hours": [9.25]}


def test_no_braces_is_no_json_bounds():
    result = recover("I could not read this timecard.")
    assert isinstance(result, RecoveryFailure)
    assert result.reason == "no-json-bounds"
    assert result.detail


def test_closing_brace_before_opening_is_no_json_bounds():
    result = recover("oops } then {")
    assert isinstance(result, RecoveryFailure)
    assert result.reason == "no-json-bounds"


def test_truncated_object_is_no_json_bounds():
    result = recover('{"hours": [8, 9')
    assert isinstance(result, RecoveryFailure)
    assert result.reason == "no-json-bounds"


def test_bad_json_inside_braces_is_malformed():
    result = recover("Result: {hours: [8, 9]}")
    assert isinstance(result, RecoveryFailure)
    assert result.reason == "malformed-json"
    assert result.detail


def test_stray_braces_over_capture():
    # Outermost span includes the commentary brace, so the slice does not parse
    result = recover('{"hours": [8]} and {note}')
    assert isinstance(result, RecoveryFailure)
    assert result.reason == "malformed-json"


def test_nan_literal_is_rejected():
    result = recover('{"hours": [NaN]}')
    assert isinstance(result, RecoveryFailure)
    assert result.reason == "malformed-json"


def test_input_not_mutated():
    text = 'prefix {"hours": []} suffix'
    recover(text)
    assert text == 'prefix {"hours": []} suffix'


def test_json_bounds():
    assert json_bounds("a{b}c}") == (1, 5)
    assert json_bounds("{") is None
    assert json_bounds("}{") is None
