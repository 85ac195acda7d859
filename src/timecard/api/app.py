"""FastAPI application factory."""
from __future__ import annotations
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from timecard import __version__
from timecard.domain.exceptions import (
    ConfigurationError, ExtractionFailedError, MissingImageError,
    UnauthorizedError, VisionCallError,
)
from timecard.logging import logger


def create_app() -> FastAPI:
    app = FastAPI(title="Timecard Pay API", version=__version__)

    # Import routers inside create_app() to avoid circular imports at module load time
    from timecard.api.routers.extraction import router as extraction_router
    from timecard.api.routers.payroll import router as payroll_router

    app.include_router(extraction_router)
    app.include_router(payroll_router)

    @app.exception_handler(UnauthorizedError)
    def _unauthorized(request: Request, exc: UnauthorizedError) -> JSONResponse:
        return JSONResponse(status_code=401, content={"error": exc.message})

    @app.exception_handler(MissingImageError)
    def _missing_image(request: Request, exc: MissingImageError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"error": exc.message})

    @app.exception_handler(ConfigurationError)
    def _misconfigured(request: Request, exc: ConfigurationError) -> JSONResponse:
        logger.error(exc.message)
        return JSONResponse(status_code=500, content={"error": exc.message})

    @app.exception_handler(VisionCallError)
    def _vision_failed(request: Request, exc: VisionCallError) -> JSONResponse:
        logger.error(exc.message)
        return JSONResponse(status_code=502, content={"error": "Vision call failed", "detail": exc.message})

    @app.exception_handler(ExtractionFailedError)
    def _extraction_failed(request: Request, exc: ExtractionFailedError) -> JSONResponse:
        return JSONResponse(status_code=422, content={
            "error": exc.message,
            "raw": exc.raw_text,
            "reason": exc.reason,
            "detail": exc.detail,
        })

    @app.exception_handler(Exception)
    def _server_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(exc)
        return JSONResponse(status_code=500, content={"error": "Server error", "detail": str(exc)})

    @app.get("/health", tags=["ops"])
    def health() -> dict:
        return {"status": "ok"}

    return app
