from __future__ import annotations
import logging
from typing import Any, Mapping, Union

import regex

from tokenkit.core.tokenization.config import (
    STRATEGIES,
    EdgeNgram,
    Ngram,
    PathHierarchy,
    Pattern,
    TokenizerConfig,
)
from tokenkit.core.tokenization.errors import (
    EmptyDelimiter,
    InvalidConfiguration,
    InvalidNgramConfig,
    InvalidRegex,
    TokenizerError,
    UnknownStrategy,
)

logger = logging.getLogger(__name__)


def compile_pattern(pattern: str) -> "regex.Pattern":
    try:
        return regex.compile(pattern)
    except regex.error as e:
        raise InvalidRegex(pattern, str(e)) from e


def _check(config: TokenizerConfig) -> None:
    strategy = config.strategy
    if type(strategy) not in STRATEGIES.values():
        raise UnknownStrategy(getattr(strategy, "name", type(strategy).__name__))

    if isinstance(strategy, (EdgeNgram, Ngram)):
        for value in (strategy.min_gram, strategy.max_gram):
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidConfiguration(f"n-gram bounds must be integers, got {value!r}")
        if strategy.min_gram <= 0 or strategy.min_gram > strategy.max_gram:
            raise InvalidNgramConfig(strategy.min_gram, strategy.max_gram)
    elif isinstance(strategy, PathHierarchy):
        if not strategy.delimiter:
            raise EmptyDelimiter("PathHierarchy")
    elif isinstance(strategy, Pattern):
        if not isinstance(strategy.regex, str):
            raise InvalidConfiguration("pattern strategy requires regex parameter")
        compile_pattern(strategy.regex)

    for pattern in config.preserve_patterns:
        if not isinstance(pattern, str):
            raise InvalidConfiguration(
                f"preserve pattern must be a string, got {pattern!r}"
            )
        compile_pattern(pattern)


def validate_config(
    config: Union[TokenizerConfig, Mapping[str, Any]],
) -> TokenizerConfig:
    """Check a configuration without building anything.

    Accepts either a ``TokenizerConfig`` or a raw wire mapping and returns
    the validated ``TokenizerConfig``. The first violation found is raised
    as a ``TokenizerError`` subclass; nothing shared is touched.
    """
    try:
        if not isinstance(config, TokenizerConfig):
            config = TokenizerConfig.from_dict(config)
        _check(config)
    except TokenizerError as e:
        logger.warning(f"Rejected tokenizer configuration: {e}")
        raise
    return config
