"""Session-state helpers for the Streamlit UI.

Only reads/writes ``st.session_state``; nothing survives the browser session.
"""
import streamlit as st
from typing import Optional


def init_session() -> None:
    """Initialize session state variables."""
    st.session_state.setdefault("parsed_hours", [])
    st.session_state.setdefault("editable_hours", [])
    st.session_state.setdefault("warnings", [])
    st.session_state.setdefault("confidence", None)


def _clear_day_widgets() -> None:
    # number_input widgets keep their own state and would shadow new hours
    for key in [k for k in st.session_state if str(k).startswith("day_")]:
        del st.session_state[key]


def set_extraction(hours: list[float], warnings: list[str], confidence: Optional[float]) -> None:
    _clear_day_widgets()
    st.session_state["parsed_hours"] = list(hours)
    st.session_state["editable_hours"] = list(hours)
    st.session_state["warnings"] = list(warnings)
    st.session_state["confidence"] = confidence


def get_hours() -> list[float]:
    return st.session_state.get("editable_hours", [])


def set_hours(hours: list[float]) -> None:
    st.session_state["editable_hours"] = hours


def reset_hours() -> None:
    """Discard manual edits and go back to the extracted hours."""
    _clear_day_widgets()
    st.session_state["editable_hours"] = list(st.session_state.get("parsed_hours", []))
