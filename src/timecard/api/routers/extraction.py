"""Timecard screenshot extraction endpoint."""
from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from timecard.api.deps import get_extraction_service
from timecard.api.schemas.extraction import (
    ErrorResponse, ExtractionErrorResponse, ExtractionResult,
)
from timecard.audit.request_log import client_ip
from timecard.services.extraction_service import ExtractionService

router = APIRouter(tags=["extraction"])


@router.post(
    "/parse-timecard",
    response_model=ExtractionResult,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        422: {"model": ExtractionErrorResponse},
        502: {"model": ErrorResponse},
    },
)
def parse_timecard(
    request: Request,
    user_id: str = Form(default="", alias="userId"),
    image: UploadFile | None = File(default=None),
    service: ExtractionService = Depends(get_extraction_service),
) -> ExtractionResult:
    data = image.file.read() if image is not None else None
    return service.parse_timecard(
        user_id,
        data,
        image.content_type if image is not None else None,
        ip=client_ip(request.headers),
        user_agent=request.headers.get("user-agent"),
    )
