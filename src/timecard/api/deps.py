"""FastAPI dependencies."""
from __future__ import annotations
from functools import lru_cache
from timecard.audit.request_log import RequestLog
from timecard.auth.allow_list import AllowList
from timecard.config import settings
from timecard.services.extraction_service import ExtractionService
from timecard.services.payroll_service import PayrollService
from timecard.vision.client import OpenAIVisionClient, VisionClient


@lru_cache(maxsize=1)
def get_vision_client() -> VisionClient | None:
    """OpenAI-backed client, or None when no API key is configured."""
    if settings.OPENAI_API_KEY is None or not settings.OPENAI_API_KEY.get_secret_value():
        return None
    return OpenAIVisionClient(
        api_key=settings.OPENAI_API_KEY.get_secret_value(),
        model=settings.OPENAI_MODEL_VISION,
        timeout=settings.OPENAI_TIMEOUT_SECONDS,
        max_retries=settings.OPENAI_MAX_RETRIES,
    )


def get_extraction_service() -> ExtractionService:
    return ExtractionService(
        vision=get_vision_client(),
        allow_list=AllowList(settings.allowed_user_ids),
        audit=RequestLog(settings.REQUEST_LOG_FILE),
    )


def get_payroll_service() -> PayrollService:
    return PayrollService()
