from __future__ import annotations
import logging
from functools import lru_cache
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from tokenkit.core.config import settings
from tokenkit.core.tokenization.base import Tokenizer
from tokenkit.core.tokenization.config import TokenizerConfig
from tokenkit.core.tokenization.errors import InvalidConfiguration
from tokenkit.core.tokenization.factory import build_tokenizer
from tokenkit.core.tokenization.validation import validate_config
from tokenkit.services.config_store import DefaultConfigStore

logger = logging.getLogger(__name__)

OPTION_KEYS = frozenset(
    {
        "strategy",
        "lowercase",
        "remove_punctuation",
        "preserve_patterns",
        "regex",
        "extended",
        "min_gram",
        "max_gram",
        "delimiter",
        "split_on_chars",
    }
)
OPTION_ALIASES = {"preserve": "preserve_patterns", "grapheme_extended": "extended"}

ConfigLike = Union[TokenizerConfig, Mapping[str, Any]]


def layer_options(base: TokenizerConfig, options: Mapping[str, Any]) -> TokenizerConfig:
    """Return ``base`` with per-call ``options`` applied on top, validated.

    ``base`` itself is never modified.
    """
    raw: Dict[str, Any] = base.to_dict()
    for key, value in options.items():
        key = OPTION_ALIASES.get(key, key)
        if key not in OPTION_KEYS:
            raise InvalidConfiguration(f"unknown option '{key}'")
        if key == "preserve_patterns" and (
            isinstance(value, str) or hasattr(value, "pattern")
        ):
            value = [value]
        raw[key] = value
    return validate_config(raw)


class TokenizationService:
    """
    Orchestrates tokenization against a default configuration.
    - Per-call options are layered over the stored default, never written back
    - Built tokenizers are memoized per validated configuration
    """

    def __init__(
        self,
        store: Optional[DefaultConfigStore] = None,
        cache_size: Optional[int] = None,
    ):
        self.store = store or DefaultConfigStore()
        size = settings.TOKENIZER_CACHE_SIZE if cache_size is None else cache_size
        self._build = lru_cache(maxsize=size)(build_tokenizer)

    def resolve(self, config: Optional[ConfigLike] = None, **options: Any) -> TokenizerConfig:
        if config is None:
            resolved = self.store.get()
        elif isinstance(config, TokenizerConfig):
            resolved = validate_config(config)
        else:
            # partial mappings fill their gaps from the stored default
            resolved = layer_options(self.store.get(), config)
        if options:
            resolved = layer_options(resolved, options)
        return resolved

    def tokenizer(self, config: Optional[ConfigLike] = None, **options: Any) -> Tokenizer:
        return self._build(self.resolve(config, **options))

    def tokenize(
        self, text: str, config: Optional[ConfigLike] = None, **options: Any
    ) -> List[str]:
        return self.tokenizer(config, **options).tokenize(text)

    def tokenize_many(
        self, texts: Iterable[str], config: Optional[ConfigLike] = None, **options: Any
    ) -> List[List[str]]:
        tok = self.tokenizer(config, **options)
        return [tok.tokenize(t) for t in texts]

    def current_config(self) -> TokenizerConfig:
        return self.store.get()

    def configure(self, config: ConfigLike) -> TokenizerConfig:
        return self.store.set(config)

    def reset(self) -> TokenizerConfig:
        return self.store.reset()

    def cache_info(self):
        return self._build.cache_info()
