import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger("access")


class AccessLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        forwarded = request.headers.get("x-forwarded-for")
        if forwarded:
            ip = forwarded.split(",")[0].strip()
        else:
            ip = request.client.host if request.client else "-"

        path = request.url.path
        user_agent = request.headers.get("user-agent", "")

        # Probes hit /health without a user agent
        if path == "/health" and not user_agent:
            return await call_next(request)

        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000

        logger.info(
            f"🛰️ {request.method} {path} -> {response.status_code} ({elapsed_ms:.1f}ms)",
            extra={
                "ip": ip,
                "path": path,
                "method": request.method,
                "status": response.status_code,
                "user_agent": user_agent,
            },
        )
        return response
