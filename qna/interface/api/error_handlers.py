"""Global exception handlers.

Domain errors map to client statuses, store outages to 503, and anything
unexpected to a generic 500 that never leaks internal details.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from qna.domain.error import (
    DependencyError,
    DomainError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from qna.util.logging import get_logger

logger = get_logger(__name__)

# Most specific first; the first match wins
DOMAIN_ERROR_STATUS: list[tuple[type[DomainError], int, str]] = [
    (NotFoundError, status.HTTP_404_NOT_FOUND, "NOT_FOUND"),
    (ForbiddenError, status.HTTP_403_FORBIDDEN, "FORBIDDEN"),
    (ValidationError, status.HTTP_422_UNPROCESSABLE_ENTITY, "VALIDATION_ERROR"),
    (DependencyError, status.HTTP_503_SERVICE_UNAVAILABLE, "SERVICE_UNAVAILABLE"),
]


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _error_body(code: str, message: str, **extra) -> dict:
    return {"error": {"code": code, "message": message, **extra}}


def _register_domain_error_handler(app: FastAPI) -> None:
    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        """Translate domain errors to HTTP statuses."""
        status_code, code = status.HTTP_400_BAD_REQUEST, "BAD_REQUEST"
        for error_type, mapped_status, mapped_code in DOMAIN_ERROR_STATUS:
            if isinstance(exc, error_type):
                status_code, code = mapped_status, mapped_code
                break

        if status_code >= 500:
            logger.error(f"{type(exc).__name__} on {request.url.path}: {exc}")
            # The store outage detail stays in the logs
            message = "The service is temporarily unavailable"
        else:
            logger.warning(f"{type(exc).__name__} on {request.url.path}: {exc}")
            message = str(exc)

        return JSONResponse(status_code=status_code, content=_error_body(code, message))


def _register_validation_error_handler(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ):
        """Handle request body, query and path validation errors."""
        logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=_error_body(
                "VALIDATION_ERROR",
                "Invalid request data",
                details=[
                    {
                        "field": ".".join(str(loc) for loc in e["loc"]),
                        "message": e["msg"],
                        "type": e["type"],
                    }
                    for e in exc.errors()
                ],
            ),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all, never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}", exc_info=True
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_error_body("INTERNAL_ERROR", "An unexpected error occurred"),
        )
