# tokenkit/middlewares/logging.py

import logging
import sys
import requests
from tokenkit.core.config import settings


class LogtailHandler(logging.Handler):
    """Ships formatted records to Better Stack."""

    def emit(self, record):
        log_entry = self.format(record)
        try:
            response = requests.post(
                settings.BETTERSTACK_HOST,
                headers={
                    "Content-Type": "application/json",
                    "Authorization": f"Bearer {settings.BETTERSTACK_API_KEY}",
                },
                json={
                    "dt": record.created,
                    "message": log_entry,
                },
                timeout=3,
            )
            if response.status_code not in (200, 202):
                sys.stderr.write(f"❌ BetterStack logging failed: {response.text}\n")
        except requests.RequestException as e:
            sys.stderr.write(f"❌ Exception while logging to BetterStack: {e}\n")


def setup_logging():
    logger = logging.getLogger()
    logger.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
    logger.handlers = []

    formatter = logging.Formatter(
        "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
    )

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    if settings.ENV == "production" and settings.BETTERSTACK_API_KEY:
        logtail_handler = LogtailHandler()
        logtail_handler.setFormatter(formatter)
        logger.addHandler(logtail_handler)

    logger.info("✅ Logging system initialized")
