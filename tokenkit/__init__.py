"""Configurable text tokenization.

Build a tokenizer once from a configuration, then call it from anywhere::

    import tokenkit

    tok = tokenkit.validate_and_build({"strategy": "edge_ngram", "min_gram": 2, "max_gram": 4})
    tokenkit.tokenize(tok, "apple")  # ['ap', 'app', 'appl']

A process-wide default configuration is also kept for one-off calls
(``tokenize_text``, ``configure``, ``reset``, ``current_config``).
"""
from __future__ import annotations
from typing import Any, List, Mapping, Optional, Union

from tokenkit.core.tokenization.base import Tokenizer
from tokenkit.core.tokenization.config import (
    CharGroup,
    EdgeNgram,
    Grapheme,
    Keyword,
    Letter,
    Lowercase,
    Ngram,
    PathHierarchy,
    Pattern,
    Sentence,
    TokenizerConfig,
    UnicodeWord,
    UrlEmail,
    Whitespace,
    factory_defaults,
)
from tokenkit.core.tokenization.errors import (
    EmptyDelimiter,
    InvalidConfiguration,
    InvalidNgramConfig,
    InvalidRegex,
    TokenizerError,
    UnknownStrategy,
)
from tokenkit.core.tokenization.factory import describe, validate_and_build
from tokenkit.core.tokenization.validation import validate_config
from tokenkit.services.tokenization_service import TokenizationService

__version__ = "0.1.0"

_service = TokenizationService()


def tokenize(
    tokenizer_or_text: Union[Tokenizer, str], text: Optional[str] = None, **options: Any
) -> List[str]:
    """``tokenize(tok, text)`` runs a built tokenizer; ``tokenize(text, **options)``
    uses the default configuration."""
    if isinstance(tokenizer_or_text, Tokenizer):
        if text is None:
            raise TypeError("tokenize(tokenizer, text) requires a text")
        if options:
            raise TypeError("options only apply to tokenize(text, **options)")
        return tokenizer_or_text.tokenize(text)
    if text is not None:
        raise TypeError("tokenize(text, **options) takes a single text")
    return _service.tokenize(tokenizer_or_text, **options)


def tokenize_text(text: str, **options: Any) -> List[str]:
    """Tokenize with the default configuration, optionally overridden for this call."""
    return _service.tokenize(text, **options)


def configure(
    config: Optional[Union[TokenizerConfig, Mapping[str, Any]]] = None, **options: Any
) -> TokenizerConfig:
    """Replace the default configuration; mappings and options layer over the current one."""
    return _service.configure(_service.resolve(config, **options))


def reset() -> TokenizerConfig:
    return _service.reset()


def current_config() -> TokenizerConfig:
    return _service.current_config()


def default_service() -> TokenizationService:
    return _service


__all__ = [
    "CharGroup",
    "EdgeNgram",
    "EmptyDelimiter",
    "Grapheme",
    "InvalidConfiguration",
    "InvalidNgramConfig",
    "InvalidRegex",
    "Keyword",
    "Letter",
    "Lowercase",
    "Ngram",
    "PathHierarchy",
    "Pattern",
    "Sentence",
    "TokenizationService",
    "Tokenizer",
    "TokenizerConfig",
    "TokenizerError",
    "UnicodeWord",
    "UnknownStrategy",
    "UrlEmail",
    "Whitespace",
    "configure",
    "current_config",
    "default_service",
    "describe",
    "factory_defaults",
    "reset",
    "tokenize",
    "tokenize_text",
    "validate_and_build",
    "validate_config",
]
