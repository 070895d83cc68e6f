import asyncio
import logging
from typing import Iterable

from fastapi import APIRouter

import tokenkit
from tokenkit.core.config import settings
from tokenkit.core.tokenization.errors import TokenizerError
from tokenkit.core.tokenization.factory import describe
from tokenkit.messages.tokenize_messages import (
    BATCH_TOKENIZE_SUCCESS,
    CONFIG_FETCHED,
    CONFIG_RESET,
    CONFIG_UPDATED,
    CONFIG_VALID,
    TEXT_TOO_LARGE,
    TOKENIZE_FAILED,
    TOKENIZE_SUCCESS,
)
from tokenkit.schemas.tokenize import (
    BatchTokenizedData,
    BatchTokenizedResponse,
    BatchTokenizeRequest,
    ConfigRequest,
    ConfigResponse,
    TokenizedData,
    TokenizedResponse,
    TokenizeRequest,
)
from tokenkit.utils.exceptions import (
    BadRequestError,
    PayloadTooLargeError,
    ServerError,
)
from tokenkit.utils.response_builder import success_response

router = APIRouter(prefix="/api", tags=["Tokenization"])
logger = logging.getLogger(__name__)


def _check_length(texts: Iterable[str]) -> None:
    for text in texts:
        if len(text) > settings.MAX_TEXT_LENGTH:
            raise PayloadTooLargeError(code="TEXT_TOO_LARGE", message=TEXT_TOO_LARGE)


@router.post("/tokenize", response_model=TokenizedResponse)
async def tokenize_text(req: TokenizeRequest):
    """
    Tokenize one text. ``config`` is a partial configuration layered over the
    current default for this request only.
    """
    _check_length([req.text])
    try:
        service = tokenkit.default_service()
        tokenizer = service.tokenizer(req.config)

        # CPU-bound work off the event loop
        loop = asyncio.get_running_loop()
        tokens = await loop.run_in_executor(None, tokenizer.tokenize, req.text)

        return success_response(
            message=TOKENIZE_SUCCESS,
            data=TokenizedData(
                tokens=tokens, count=len(tokens), config=describe(tokenizer)
            ),
        )
    except TokenizerError as e:
        raise BadRequestError.from_tokenizer_error(e)
    except Exception as e:
        logger.exception(f"Tokenization failed: {e}")
        raise ServerError(code="TOKENIZE_FAILED", message=TOKENIZE_FAILED)


@router.post("/tokenize/batch", response_model=BatchTokenizedResponse)
async def tokenize_batch(req: BatchTokenizeRequest):
    _check_length(req.texts)
    try:
        service = tokenkit.default_service()
        tokenizer = service.tokenizer(req.config)

        loop = asyncio.get_running_loop()
        results = await loop.run_in_executor(
            None, lambda: [tokenizer.tokenize(t) for t in req.texts]
        )

        logger.info(f"✅ Tokenized batch of {len(results)} texts")
        return success_response(
            message=BATCH_TOKENIZE_SUCCESS,
            data=BatchTokenizedData(
                results=results, count=len(results), config=describe(tokenizer)
            ),
        )
    except TokenizerError as e:
        raise BadRequestError.from_tokenizer_error(e)
    except Exception as e:
        logger.exception(f"Batch tokenization failed: {e}")
        raise ServerError(code="TOKENIZE_FAILED", message=TOKENIZE_FAILED)


@router.get("/config", response_model=ConfigResponse)
async def get_config():
    return success_response(
        message=CONFIG_FETCHED, data=tokenkit.current_config().to_dict()
    )


@router.put("/config", response_model=ConfigResponse)
async def update_config(req: ConfigRequest):
    try:
        config = tokenkit.configure(req.config)
        return success_response(message=CONFIG_UPDATED, data=config.to_dict())
    except TokenizerError as e:
        raise BadRequestError.from_tokenizer_error(e)


@router.post("/config/reset", response_model=ConfigResponse)
async def reset_config():
    config = tokenkit.reset()
    return success_response(message=CONFIG_RESET, data=config.to_dict())


@router.post("/config/validate", response_model=ConfigResponse)
async def validate_config(req: ConfigRequest):
    """Validate a partial configuration against the current default without storing it."""
    try:
        config = tokenkit.default_service().resolve(req.config)
        return success_response(message=CONFIG_VALID, data=config.to_dict())
    except TokenizerError as e:
        raise BadRequestError.from_tokenizer_error(e)
