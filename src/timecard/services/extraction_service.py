"""Timecard extraction use-case: gate, call the vision model, clean its output."""
from __future__ import annotations
import uuid
from timecard.audit.request_log import RequestEvent, RequestLog, RequestLogRecord
from timecard.auth.allow_list import AllowList
from timecard.domain.exceptions import (
    ConfigurationError, MissingImageError, TimecardError, UnauthorizedError,
)
from timecard.extraction.models import ExtractionResult
from timecard.extraction.pipeline import extract_and_sanitize
from timecard.vision.client import VisionClient

PARSE_PATH = "/parse-timecard"


class ExtractionService:
    def __init__(
        self,
        vision: VisionClient | None,
        allow_list: AllowList,
        audit: RequestLog,
    ) -> None:
        self._vision = vision
        self._allow_list = allow_list
        self._audit = audit

    def _record(self, event: RequestEvent, request_id: str, **fields) -> None:
        self._audit.log(RequestLogRecord(
            event=event, request_id=request_id, path=PARSE_PATH, method="POST", **fields,
        ))

    def parse_timecard(
        self,
        user_id: str,
        image: bytes | None,
        mime_type: str | None = None,
        *,
        ip: str | None = None,
        user_agent: str | None = None,
    ) -> ExtractionResult:
        """Run one extraction attempt for ``user_id``.

        Raises:
            UnauthorizedError if the caller is not allow-listed.
            MissingImageError if no image bytes were sent.
            ConfigurationError if no vision client is configured.
            VisionCallError / ExtractionFailedError from the model call and
            the recovery pipeline.
        """
        request_id = uuid.uuid4().hex
        user_id = (user_id or "").strip()
        allowed = self._allow_list.is_allowed(user_id)
        caller = {"user_id": user_id, "ip": ip, "user_agent": user_agent}

        self._record(RequestEvent.ATTEMPT, request_id, allowed=allowed, **caller)
        if not allowed:
            self._record(RequestEvent.UNAUTHORIZED, request_id, allowed=False, **caller)
            raise UnauthorizedError("Unauthorized")

        try:
            if not image:
                raise MissingImageError("Missing image")
            if self._vision is None:
                raise ConfigurationError("Server misconfigured: missing OPENAI_API_KEY")

            text = self._vision.extract_text(image, mime_type or "image/jpeg")
            result = extract_and_sanitize(text)
        except TimecardError as exc:
            self._record(RequestEvent.ERROR, request_id, detail=exc.message, **caller)
            raise
        except Exception as exc:
            self._record(RequestEvent.ERROR, request_id, detail=str(exc), **caller)
            raise

        self._record(
            RequestEvent.SUCCESS, request_id, allowed=True,
            extra={
                "extracted_rows": len(result.hours),
                "warnings": len(result.warnings),
                "confidence": result.confidence,
            },
            **caller,
        )
        return result
