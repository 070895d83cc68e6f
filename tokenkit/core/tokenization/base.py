from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List, Tuple

import regex

from tokenkit.core.tokenization.config import TokenizerConfig
from tokenkit.core.tokenization.overlay import apply_preserve_patterns, whitespace_split
from tokenkit.core.tokenization.postprocess import post_process
from tokenkit.core.tokenization.validation import compile_pattern


class Tokenizer(ABC):
    """Port: split a text into an ordered list of tokens.

    Instances are fixed at construction (parameters and compiled patterns)
    and never mutated afterwards, so one instance can serve many threads.
    Adapters implement ``segment``; ``tokenize`` layers the preserve-pattern
    overlay and post-processing on top.
    """

    def __init__(self, config: TokenizerConfig):
        self.cfg = config
        self._preserve: Tuple["regex.Pattern", ...] = tuple(
            compile_pattern(p) for p in config.preserve_patterns
        )

    @property
    def config(self) -> TokenizerConfig:
        return self.cfg

    @property
    def has_preserve_patterns(self) -> bool:
        return bool(self._preserve)

    @abstractmethod
    def segment(self, text: str) -> List[str]:
        """Raw tokens for ``text``, before overlay and post-processing."""
        ...

    def split_gap(self, text: str) -> List[str]:
        # text between preserved spans is re-split on whitespace
        return whitespace_split(text)

    def tokenize(self, text: str) -> List[str]:
        text = text or ""
        tokens = self.segment(text)
        if self._preserve:
            return apply_preserve_patterns(
                tokens, self._preserve, text, self.cfg, splitter=self.split_gap
            )
        return post_process(tokens, self.cfg)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} config={self.cfg.to_dict()!r}>"
