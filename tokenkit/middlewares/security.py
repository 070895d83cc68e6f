# tokenkit/middlewares/security.py

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from slowapi import Limiter
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address
from tokenkit.core.config import settings


# ----------------------------
# Rate Limiting Configuration
# ----------------------------
limiter = Limiter(key_func=get_remote_address, default_limits=[settings.RATE_LIMIT])


def add_rate_limit(app: FastAPI) -> None:
    # handler for RateLimitExceeded is registered in main with the error envelope
    app.state.limiter = limiter
    app.add_middleware(SlowAPIMiddleware)


# ----------------------------
# CORS Middleware
# ----------------------------
def add_cors_middleware(app: FastAPI) -> None:
    if settings.ENV == "local" or not settings.FRONTEND_ORIGIN:
        allow_origins = ["*"]
        allow_credentials = False
    else:
        allow_origins = [settings.FRONTEND_ORIGIN]
        allow_credentials = True

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_credentials=allow_credentials,
        allow_methods=["GET", "POST", "PUT"],
        allow_headers=["*"],
    )


# ----------------------------
# Security Headers Middleware
# ----------------------------
class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response: Response = await call_next(request)

        if settings.ENV == "production":
            response.headers["Strict-Transport-Security"] = (
                "max-age=63072000; includeSubDomains"
            )

        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "no-referrer"

        # JSON-only API, nothing to embed or execute
        response.headers["Content-Security-Policy"] = "default-src 'none'"
        response.headers["Cross-Origin-Resource-Policy"] = "same-origin"

        return response
