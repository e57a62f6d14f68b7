"""Error handling middleware and exception handlers."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import structlog

from src.domain.exceptions import (
    DomainException,
    InvalidEvaluationRequestException,
    PurchaseRecordNotFoundException,
)
from .request_context import get_request_id

logger = structlog.get_logger(__name__)


def _error_response(status_code: int, code: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": code,
            "message": message,
            "request_id": get_request_id(),
        },
    )


def error_handler_middleware(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI app.

    Maps domain exceptions to appropriate HTTP responses.
    """

    @app.exception_handler(PurchaseRecordNotFoundException)
    async def purchase_not_found_handler(
        request: Request,
        exc: PurchaseRecordNotFoundException,
    ) -> JSONResponse:
        """Handle purchase record not found errors."""
        return _error_response(404, exc.code, exc.message)

    @app.exception_handler(InvalidEvaluationRequestException)
    async def invalid_request_handler(
        request: Request,
        exc: InvalidEvaluationRequestException,
    ) -> JSONResponse:
        """Handle invalid evaluation requests."""
        logger.info(
            "invalid_evaluation_request",
            request_id=get_request_id(),
            message=exc.message,
        )
        return _error_response(400, exc.code, exc.message)

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle generic domain exceptions."""
        logger.warning(
            "domain_exception",
            request_id=get_request_id(),
            code=exc.code,
            message=exc.message,
        )
        return _error_response(400, exc.code, exc.message)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(
            "unhandled_exception",
            request_id=get_request_id(),
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return _error_response(500, "INTERNAL_ERROR", "An unexpected error occurred.")
