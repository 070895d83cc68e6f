from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from slowapi.errors import RateLimitExceeded
import logging
import uuid

logger = logging.getLogger(__name__)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handles expected HTTP exceptions (400, 404, 413, etc.) with standard format."""
    detail = exc.detail if isinstance(exc.detail, dict) else {}
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": {
                "code": detail.get("code", "HTTP_ERROR"),
                "message": detail.get("message", str(exc.detail)),
                "details": detail.get("details", {}),
            }
        },
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies (422) in the same envelope."""
    return JSONResponse(
        status_code=422,
        content={
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "Request body is invalid.",
                "details": {"errors": jsonable_errors(exc)},
            }
        },
    )


def jsonable_errors(exc: RequestValidationError):
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
        for err in exc.errors()
    ]


async def generic_exception_handler(request: Request, exc: Exception):
    """Handles unexpected server errors (500) with unique error_id."""
    error_id = str(uuid.uuid4())[:8]  # Short UUID for error tracking

    logger.exception(f"💥 Error ID {error_id} for {request.url}")

    return JSONResponse(
        status_code=500,
        content={
            "error": {
                "code": "INTERNAL_SERVER_ERROR",
                "message": f"Internal server error. Reference ID: {error_id}",
                "details": {},
            }
        },
    )


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    return JSONResponse(
        status_code=429,
        content={
            "error": {
                "code": "RATE_LIMITED",
                "message": "You have exceeded the allowed number of requests. Please try again later.",
                "details": {"limit": str(exc.detail)},
            }
        },
    )
