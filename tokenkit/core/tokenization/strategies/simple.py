from __future__ import annotations
from typing import List

from tokenkit.core.tokenization.base import Tokenizer
from tokenkit.core.tokenization.config import TokenizerConfig
from tokenkit.core.tokenization.overlay import normalize_preserving, preserved_spans
from tokenkit.core.tokenization.postprocess import post_process
from tokenkit.core.tokenization.validation import compile_pattern


class WhitespaceTokenizer(Tokenizer):
    """Adapter: splits on runs of Unicode whitespace."""

    def segment(self, text: str) -> List[str]:
        return text.split()


class PatternTokenizer(Tokenizer):
    """Adapter: every non-overlapping match of the main regex, in order."""

    def __init__(self, config: TokenizerConfig, pattern: str):
        super().__init__(config)
        self._pattern = compile_pattern(pattern)

    def segment(self, text: str) -> List[str]:
        return [m.group(0) for m in self._pattern.finditer(text) if m.end() > m.start()]


class KeywordTokenizer(Tokenizer):
    """Adapter: the whole trimmed input as a single token."""

    def segment(self, text: str) -> List[str]:
        trimmed = text.strip()
        return [trimmed] if trimmed else []

    def tokenize(self, text: str) -> List[str]:
        text = text or ""
        if not self.has_preserve_patterns:
            return post_process(self.segment(text), self.cfg)

        # one token; protected regions inside it stay verbatim
        start = len(text) - len(text.lstrip())
        end = len(text.rstrip())
        if start >= end:
            return []
        spans = preserved_spans(self._preserve, text, start, end)
        token = normalize_preserving(text, spans, self.cfg, start, end)
        return [token] if token else []


class CharGroupTokenizer(Tokenizer):
    """Adapter: splits on any character of ``split_on_chars``.

    An empty set means no split at all: the input comes back as one token,
    surrounding whitespace included.
    """

    def __init__(self, config: TokenizerConfig, split_on_chars: str):
        super().__init__(config)
        self._split_chars = frozenset(split_on_chars)

    def segment(self, text: str) -> List[str]:
        tokens: List[str] = []
        current: List[str] = []
        for ch in text:
            if ch in self._split_chars:
                if current:
                    tokens.append("".join(current))
                    current = []
            else:
                current.append(ch)
        if current:
            tokens.append("".join(current))
        return tokens


class LetterTokenizer(Tokenizer):
    """Adapter: maximal runs of alphabetic characters."""

    def _letter(self, ch: str) -> str:
        return ch

    def segment(self, text: str) -> List[str]:
        tokens: List[str] = []
        current: List[str] = []
        for ch in text:
            if ch.isalpha():
                current.append(self._letter(ch))
            elif current:
                tokens.append("".join(current))
                current = []
        if current:
            tokens.append("".join(current))
        return tokens


class LowercaseTokenizer(LetterTokenizer):
    """Adapter: letter runs, case-folded while accumulating.

    Always folds case; the ``lowercase`` flag has no effect here. Preserved
    spans are the only text that keeps its case.
    """

    def _letter(self, ch: str) -> str:
        return ch.lower()

    def split_gap(self, text: str) -> List[str]:
        return self.segment(text)
