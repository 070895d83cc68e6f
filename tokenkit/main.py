import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from slowapi.errors import RateLimitExceeded

import tokenkit
from tokenkit.api import tokenize
from tokenkit.core.config import settings
from tokenkit.middlewares.access_logger import AccessLoggingMiddleware
from tokenkit.middlewares.logging import setup_logging
from tokenkit.middlewares.security import (
    SecurityHeadersMiddleware,
    add_cors_middleware,
    add_rate_limit,
)
from tokenkit.utils.exception_handlers import (
    generic_exception_handler,
    http_exception_handler,
    rate_limit_exceeded_handler,
    validation_exception_handler,
)


# ✅ SETUP LOGGING FIRST
setup_logging()

logging.getLogger(__name__).info(
    f"🚀 Starting {settings.SERVICE_NAME} (env={settings.ENV})"
)

app = FastAPI(
    title="Tokenization API",
    description="Configurable text tokenization: thirteen strategies, preserve patterns, post-processing",
    version=tokenkit.__version__,
    debug=(not settings.ENV == "production"),
)


# ===============
# Middlewares
# ===============
add_cors_middleware(app)
add_rate_limit(app)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(AccessLoggingMiddleware)


# ===============
# Routers
# ===============
app.include_router(tokenize.router)


# ===============
# Health Checks
# ===============
@app.get("/health")
def health():
    return {"status": "ok"}


# ===============
# Global Error Handlers
# ===============
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, generic_exception_handler)
