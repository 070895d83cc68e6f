from __future__ import annotations
from typing import List, Optional, Sequence

from tokenkit.core.tokenization.base import Tokenizer
from tokenkit.core.tokenization.config import TokenizerConfig
from tokenkit.core.tokenization.overlay import Span, normalize_preserving, preserved_spans


class PathHierarchyTokenizer(Tokenizer):
    """Adapter: progressive path prefixes.

    ``/usr/local/bin`` -> ``/usr``, ``/usr/local``, ``/usr/local/bin``.
    Empty parts are skipped and a leading delimiter is kept. A delimiter
    inside a preserved span does not split, and each part is normalized on
    its own so delimiters survive punctuation stripping.
    """

    def __init__(self, config: TokenizerConfig, delimiter: str):
        super().__init__(config)
        self.delimiter = delimiter

    def _delimiter_offsets(
        self, text: str, spans: Sequence[Span], start: int, end: int
    ) -> List[int]:
        width = len(self.delimiter)
        offsets: List[int] = []
        i = text.find(self.delimiter, start, end)
        while i != -1:
            if not any(s.start < i + width and i < s.end for s in spans):
                offsets.append(i)
            i = text.find(self.delimiter, i + width, end)
        return offsets

    def _levels(
        self, text: str, spans: Sequence[Span], config: Optional[TokenizerConfig]
    ) -> List[str]:
        start = len(text) - len(text.lstrip())
        end = len(text.rstrip())
        if start >= end:
            return []

        offsets = self._delimiter_offsets(text, spans, start, end)
        leading = self.delimiter if offsets and offsets[0] == start else ""
        bounds = zip([start] + [o + len(self.delimiter) for o in offsets], offsets + [end])

        parts: List[str] = []
        for a, b in bounds:
            if b <= a:
                continue
            if config is None:
                parts.append(text[a:b])
            else:
                parts.append(
                    normalize_preserving(text, spans, config, a, b, keep=self.delimiter)
                )

        tokens: List[str] = []
        for n in range(1, len(parts) + 1):
            token = leading + self.delimiter.join(parts[:n])
            if token:
                tokens.append(token)
        return tokens

    def segment(self, text: str) -> List[str]:
        return self._levels(text, (), None)

    def tokenize(self, text: str) -> List[str]:
        text = text or ""
        spans = preserved_spans(self._preserve, text)
        return self._levels(text, spans, self.cfg)
