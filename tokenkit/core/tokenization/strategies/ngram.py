from __future__ import annotations
from abc import abstractmethod
from typing import List

from tokenkit.core.tokenization.base import Tokenizer
from tokenkit.core.tokenization.config import TokenizerConfig
from tokenkit.core.tokenization.postprocess import strip_punctuation


class _GramTokenizer(Tokenizer):
    """Shared word loop for the n-gram adapters.

    Bounds arrive already validated (``1 <= min_gram <= max_gram``).
    Punctuation is stripped from each word before grams are cut, so a
    stripped gram never duplicates a shorter one.
    """

    def __init__(self, config: TokenizerConfig, min_gram: int, max_gram: int):
        super().__init__(config)
        self.min_gram = min_gram
        self.max_gram = max_gram

    @abstractmethod
    def grams(self, word: str) -> List[str]: ...

    def segment(self, text: str) -> List[str]:
        out: List[str] = []
        for word in text.split():
            if self.cfg.remove_punctuation:
                word = strip_punctuation(word)
            if word:
                out.extend(self.grams(word))
        return out

    def split_gap(self, text: str) -> List[str]:
        return self.segment(text)


class EdgeNgramTokenizer(_GramTokenizer):
    """Adapter: word prefixes of every length in ``[min_gram, max_gram]``."""

    def grams(self, word: str) -> List[str]:
        top = min(self.max_gram, len(word))
        return [word[:n] for n in range(self.min_gram, top + 1)]


class NgramTokenizer(_GramTokenizer):
    """Adapter: sliding-window substrings, shortest length first."""

    def grams(self, word: str) -> List[str]:
        size = len(word)
        top = min(self.max_gram, size)
        return [
            word[i : i + n]
            for n in range(self.min_gram, top + 1)
            for i in range(size - n + 1)
        ]
