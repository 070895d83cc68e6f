from __future__ import annotations
import unicodedata
from typing import List

import regex
from uniseg.sentencebreak import sentence_boundaries

from tokenkit.core.tokenization.base import Tokenizer
from tokenkit.core.tokenization.config import TokenizerConfig
from tokenkit.core.tokenization.overlay import (
    Span,
    normalize_preserving,
    preserved_spans,
)
from tokenkit.core.tokenization.postprocess import post_process

# \b under the WORD flag follows the Unicode default word boundary rules
_WORD_BOUNDARY = regex.compile(r"\b", flags=regex.WORD)
_GRAPHEME = regex.compile(r"\X")


def _has_alnum(s: str) -> bool:
    return any(c.isalnum() for c in s)


def unicode_words(text: str) -> List[str]:
    """Segments between Unicode word boundaries that hold a letter or digit."""
    if not text:
        return []
    cuts = sorted({0, len(text), *(m.start() for m in _WORD_BOUNDARY.finditer(text))})
    return [text[s:e] for s, e in zip(cuts, cuts[1:]) if _has_alnum(text[s:e])]


class UnicodeWordTokenizer(Tokenizer):
    """Adapter: Unicode word segmentation; punctuation-only runs are dropped."""

    def segment(self, text: str) -> List[str]:
        return unicode_words(text)


class SentenceTokenizer(Tokenizer):
    """Adapter: one token per sentence, on Unicode sentence boundaries.

    Every segment keeps its trailing whitespace and punctuation, so the
    tokens concatenate back to the input. Whitespace-only segments are
    dropped.
    """

    def sentence_spans(self, text: str) -> List[Span]:
        if not text:
            return []
        cuts = sorted({0, len(text), *sentence_boundaries(text)})
        return [
            Span(s, e) for s, e in zip(cuts, cuts[1:]) if not text[s:e].isspace()
        ]

    def segment(self, text: str) -> List[str]:
        return [text[s.start : s.end] for s in self.sentence_spans(text)]

    def tokenize(self, text: str) -> List[str]:
        text = text or ""
        if not self.has_preserve_patterns:
            return post_process(self.segment(text), self.cfg)

        out: List[str] = []
        for sentence in self.sentence_spans(text):
            spans = preserved_spans(self._preserve, text, sentence.start, sentence.end)
            token = normalize_preserving(
                text, spans, self.cfg, sentence.start, sentence.end
            )
            if token:
                out.append(token)
        return out


def _legacy_clusters(cluster: str) -> List[str]:
    # legacy clusters do not attach spacing marks to their base
    pieces: List[str] = []
    start = 0
    for i, ch in enumerate(cluster):
        if i > 0 and unicodedata.category(ch) == "Mc":
            pieces.append(cluster[start:i])
            start = i
    pieces.append(cluster[start:])
    return pieces


class GraphemeTokenizer(Tokenizer):
    """Adapter: user-perceived characters (grapheme clusters)."""

    def __init__(self, config: TokenizerConfig, extended: bool):
        super().__init__(config)
        self._extended = extended

    def segment(self, text: str) -> List[str]:
        clusters = _GRAPHEME.findall(text)
        if self._extended:
            return clusters
        return [piece for c in clusters for piece in _legacy_clusters(c)]

    def split_gap(self, text: str) -> List[str]:
        return self.segment(text)
