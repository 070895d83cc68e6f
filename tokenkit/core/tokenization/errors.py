from __future__ import annotations
from typing import Any, Dict


class TokenizerError(ValueError):
    """Base class for every configuration-time failure of the engine."""

    code = "TOKENIZER_ERROR"

    def to_dict(self) -> Dict[str, Any]:
        return {}


class InvalidConfiguration(TokenizerError):
    code = "INVALID_CONFIGURATION"

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid configuration: {reason}")

    def to_dict(self) -> Dict[str, Any]:
        return {"reason": self.reason}


class InvalidRegex(TokenizerError):
    code = "INVALID_REGEX"

    def __init__(self, pattern: str, message: str):
        self.pattern = pattern
        self.message = message
        super().__init__(f"Invalid regex pattern '{pattern}': {message}")

    def to_dict(self) -> Dict[str, Any]:
        return {"pattern": self.pattern, "message": self.message}


class InvalidNgramConfig(TokenizerError):
    code = "INVALID_NGRAM_CONFIG"

    def __init__(self, min_gram: int, max_gram: int):
        self.min_gram = min_gram
        self.max_gram = max_gram
        super().__init__(
            f"Invalid n-gram configuration: min_gram ({min_gram}) must be > 0 "
            f"and <= max_gram ({max_gram})"
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"min_gram": self.min_gram, "max_gram": self.max_gram}


class EmptyDelimiter(TokenizerError):
    code = "EMPTY_DELIMITER"

    def __init__(self, tokenizer: str):
        self.tokenizer = tokenizer
        super().__init__(f"Empty delimiter is not allowed for {tokenizer} tokenizer")

    def to_dict(self) -> Dict[str, Any]:
        return {"tokenizer": self.tokenizer}


class UnknownStrategy(TokenizerError):
    code = "UNKNOWN_STRATEGY"

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown tokenizer strategy: {name}")

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name}
