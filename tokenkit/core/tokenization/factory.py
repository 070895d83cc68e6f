from __future__ import annotations
import logging
from typing import Any, Callable, Dict, Mapping, Union

from tokenkit.core.tokenization.base import Tokenizer
from tokenkit.core.tokenization.config import (
    STRATEGIES,
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
)
from tokenkit.core.tokenization.errors import UnknownStrategy
from tokenkit.core.tokenization.strategies.links import UrlEmailTokenizer
from tokenkit.core.tokenization.strategies.ngram import EdgeNgramTokenizer, NgramTokenizer
from tokenkit.core.tokenization.strategies.path import PathHierarchyTokenizer
from tokenkit.core.tokenization.strategies.simple import (
    CharGroupTokenizer,
    KeywordTokenizer,
    LetterTokenizer,
    LowercaseTokenizer,
    PatternTokenizer,
    WhitespaceTokenizer,
)
from tokenkit.core.tokenization.strategies.unicode import (
    GraphemeTokenizer,
    SentenceTokenizer,
    UnicodeWordTokenizer,
)
from tokenkit.core.tokenization.validation import validate_config

logger = logging.getLogger(__name__)

Builder = Callable[[TokenizerConfig, Any], Tokenizer]

_BUILDERS: Dict[type, Builder] = {
    Whitespace: lambda cfg, s: WhitespaceTokenizer(cfg),
    UnicodeWord: lambda cfg, s: UnicodeWordTokenizer(cfg),
    Pattern: lambda cfg, s: PatternTokenizer(cfg, s.regex),
    Sentence: lambda cfg, s: SentenceTokenizer(cfg),
    Grapheme: lambda cfg, s: GraphemeTokenizer(cfg, s.extended),
    Keyword: lambda cfg, s: KeywordTokenizer(cfg),
    EdgeNgram: lambda cfg, s: EdgeNgramTokenizer(cfg, s.min_gram, s.max_gram),
    Ngram: lambda cfg, s: NgramTokenizer(cfg, s.min_gram, s.max_gram),
    PathHierarchy: lambda cfg, s: PathHierarchyTokenizer(cfg, s.delimiter),
    UrlEmail: lambda cfg, s: UrlEmailTokenizer(cfg),
    CharGroup: lambda cfg, s: CharGroupTokenizer(cfg, s.split_on_chars),
    Letter: lambda cfg, s: LetterTokenizer(cfg),
    Lowercase: lambda cfg, s: LowercaseTokenizer(cfg),
}

_missing = sorted(cls.name for cls in set(STRATEGIES.values()) - set(_BUILDERS))
if _missing:
    raise RuntimeError(f"No tokenizer builder registered for: {_missing}")


def build_tokenizer(config: TokenizerConfig) -> Tokenizer:
    """Map a validated configuration to its adapter.

    Patterns are compiled here, once. Call ``validate_and_build`` unless the
    configuration is already known to be valid.
    """
    builder = _BUILDERS.get(type(config.strategy))
    if builder is None:
        raise UnknownStrategy(getattr(config.strategy, "name", repr(config.strategy)))
    tokenizer = builder(config, config.strategy)
    logger.debug(f"Built {type(tokenizer).__name__} for {config.to_dict()}")
    return tokenizer


def validate_and_build(
    config: Union[TokenizerConfig, Mapping[str, Any], None] = None,
) -> Tokenizer:
    """The only fallible entry point: validate, then build. ``None`` means defaults."""
    return build_tokenizer(validate_config(config if config is not None else TokenizerConfig()))


def describe(tokenizer: Tokenizer) -> Dict[str, Any]:
    """Wire mapping that rebuilds an equivalent tokenizer."""
    return tokenizer.config.to_dict()
