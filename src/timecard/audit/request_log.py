"""JSON-lines audit trail for extraction requests.

Every record goes to the ``timecard.audit`` logger; when a file path is
configured it is also appended there. A failed file write is logged and
swallowed so that auditing can never fail the request it describes.
"""
from __future__ import annotations
import json
import logging
from collections.abc import Mapping
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any
from pydantic import BaseModel, Field

logger = logging.getLogger("timecard.audit")


class RequestEvent(str, Enum):
    ATTEMPT = "parse_timecard_attempt"
    UNAUTHORIZED = "parse_timecard_unauthorized"
    SUCCESS = "parse_timecard_success"
    ERROR = "parse_timecard_error"


class RequestLogRecord(BaseModel):
    ts: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    event: RequestEvent
    request_id: str
    path: str | None = None
    method: str | None = None
    user_id: str | None = None
    allowed: bool | None = None
    ip: str | None = None
    user_agent: str | None = None
    detail: str | None = None
    extra: dict[str, Any] | None = None


def client_ip(headers: Mapping[str, str]) -> str | None:
    """First hop of ``x-forwarded-for``, else ``x-real-ip``."""
    forwarded = headers.get("x-forwarded-for")
    if forwarded:
        first = forwarded.split(",")[0].strip()
        if first:
            return first
    return headers.get("x-real-ip") or None


class RequestLog:
    def __init__(self, path: Path | None = None) -> None:
        self._path = path

    def log(self, record: RequestLogRecord) -> None:
        line = record.model_dump_json(exclude_none=True)
        logger.info(line)
        if self._path is None:
            return
        try:
            with self._path.open("a", encoding="utf-8") as fh:
                fh.write(line + "\n")
        except OSError as exc:
            logger.warning(json.dumps({
                "ts": datetime.now(timezone.utc).isoformat(),
                "event": "request_log_write_failed",
                "request_id": record.request_id,
                "detail": str(exc),
            }))
