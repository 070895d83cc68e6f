from __future__ import annotations
import logging
import threading
from dataclasses import replace
from typing import Any, Mapping, Union

from tokenkit.core.tokenization.config import TokenizerConfig, factory_defaults
from tokenkit.core.tokenization.validation import validate_config

logger = logging.getLogger(__name__)


class DefaultConfigStore:
    """Single lock-guarded slot for the process-wide default configuration.

    Readers get a private copy, writers validate before swapping, so a
    reader never sees a half-written or invalid configuration.
    """

    def __init__(self, initial: TokenizerConfig | None = None):
        self._lock = threading.Lock()
        self._config = validate_config(initial) if initial else factory_defaults()

    def get(self) -> TokenizerConfig:
        with self._lock:
            return replace(self._config)

    def set(
        self, config: Union[TokenizerConfig, Mapping[str, Any]]
    ) -> TokenizerConfig:
        validated = validate_config(config)
        with self._lock:
            self._config = validated
        logger.info(f"Default tokenizer configuration set: {validated.to_dict()}")
        return replace(validated)

    def reset(self) -> TokenizerConfig:
        return self.set(factory_defaults())
