"""Typed HTTP client for the Streamlit page.

Only imports pure DTOs, never services or FastAPI.
Instantiate via ``get_client()`` which caches per Streamlit session.
"""
from __future__ import annotations

import httpx
import streamlit as st

from timecard.api.schemas.payroll import PayRequest, PayrollResponse
from timecard.extraction.models import ExtractionResult


_DEFAULT_BASE_URL = "http://127.0.0.1:8000"


class APIError(Exception):
    """Raised when the backend returns a 4xx/5xx response."""

    def __init__(self, status_code: int, detail: str, raw: str | None = None) -> None:
        self.status_code = status_code
        self.detail = detail
        self.raw = raw
        super().__init__(f"[{status_code}] {detail}")


class TimecardClient:
    """One method per backend endpoint.  All return pure Pydantic DTOs."""

    def __init__(self, base_url: str = _DEFAULT_BASE_URL, transport: httpx.BaseTransport | None = None) -> None:
        self._client = httpx.Client(base_url=base_url, timeout=90.0, transport=transport)

    def _raise_for_status(self, resp: httpx.Response) -> None:
        if resp.is_success:
            return
        try:
            body = resp.json()
        except ValueError:
            raise APIError(resp.status_code, resp.text)
        detail = body.get("error") or body.get("detail") or resp.text
        if not isinstance(detail, str):
            detail = str(detail)
        raise APIError(resp.status_code, detail, raw=body.get("raw"))

    def parse_timecard(
        self, user_id: str, filename: str, content: bytes, content_type: str,
    ) -> ExtractionResult:
        resp = self._client.post(
            "/parse-timecard",
            data={"userId": user_id},
            files={"image": (filename, content, content_type)},
        )
        self._raise_for_status(resp)
        return ExtractionResult.model_validate(resp.json())

    def compute_pay(self, payload: PayRequest) -> PayrollResponse:
        resp = self._client.post("/payroll/compute", json=payload.model_dump(mode="json"))
        self._raise_for_status(resp)
        return PayrollResponse.model_validate(resp.json())

    def health(self) -> dict:
        resp = self._client.get("/health")
        self._raise_for_status(resp)
        return resp.json()


def get_client() -> TimecardClient:
    """Return a cached ``TimecardClient`` for the current Streamlit session."""
    if "timecard_api_client" not in st.session_state:
        from timecard.config import settings
        base_url = st.session_state.get("timecard_api_url", settings.API_BASE_URL)
        st.session_state["timecard_api_client"] = TimecardClient(base_url=base_url)
    return st.session_state["timecard_api_client"]
