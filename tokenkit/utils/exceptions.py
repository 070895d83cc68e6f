from fastapi import HTTPException, status
from typing import Any, Dict, Optional

from tokenkit.core.tokenization.errors import TokenizerError


class APIException(HTTPException):
    """Flexible API Exception."""

    def __init__(
        self,
        status_code: int,
        code: str,
        message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        detail = {
            "code": code,
            "message": message or "An error occurred",
            "details": details or {},
        }
        super().__init__(status_code=status_code, detail=detail)


class BadRequestError(APIException):
    """400 Bad Request Error."""

    def __init__(
        self,
        code: str,
        message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            code=code,
            message=message,
            details=details,
        )

    @classmethod
    def from_tokenizer_error(cls, exc: TokenizerError) -> "BadRequestError":
        return cls(code=exc.code, message=str(exc), details=exc.to_dict())


class PayloadTooLargeError(APIException):
    """413 Payload Too Large Error."""

    def __init__(self, code: str, message: Optional[str] = None):
        super().__init__(
            status_code=status.HTTP_413_CONTENT_TOO_LARGE,
            code=code,
            message=message,
        )


class ServerError(APIException):
    """500 Internal Server Error."""

    def __init__(self, code: str, message: Optional[str] = None):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            code=code,
            message=message,
        )
