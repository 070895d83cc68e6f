"""Preserve-pattern overlay.

Protects substrings matched by caller-supplied patterns from segmentation,
case folding and punctuation stripping. Matches are collected over the
original text, merged into disjoint spans, and the text between spans is
re-tokenized and post-processed while every span is emitted verbatim, all
in source order.

Every helper takes optional ``start``/``end`` bounds so a strategy can run
the overlay over one sentence or one path part without losing the offsets
into the full document.
"""
from __future__ import annotations
from typing import Callable, Iterable, Iterator, List, NamedTuple, Optional, Sequence, Tuple

import regex

from tokenkit.core.tokenization.config import TokenizerConfig
from tokenkit.core.tokenization.postprocess import normalize_text, post_process


class Span(NamedTuple):
    """Half-open ``[start, end)`` offsets into the original text."""

    start: int
    end: int


def whitespace_split(text: str) -> List[str]:
    return text.split()


def find_spans(
    patterns: Sequence["regex.Pattern"],
    text: str,
    start: int = 0,
    end: Optional[int] = None,
) -> List[Span]:
    end = len(text) if end is None else end
    spans: List[Span] = []
    for pattern in patterns:
        for m in pattern.finditer(text, start, end):
            # an empty match protects nothing
            if m.end() > m.start():
                spans.append(Span(m.start(), m.end()))
    return spans


def merge_spans(spans: Iterable[Span]) -> List[Span]:
    """Merge strictly overlapping spans; touching spans stay separate."""
    ordered = sorted(spans, key=lambda s: (s.start, -s.end))
    merged: List[Span] = []
    for span in ordered:
        if merged and span.start < merged[-1].end:
            if span.end > merged[-1].end:
                merged[-1] = Span(merged[-1].start, span.end)
        else:
            merged.append(span)
    return merged


def preserved_spans(
    patterns: Sequence["regex.Pattern"],
    text: str,
    start: int = 0,
    end: Optional[int] = None,
) -> List[Span]:
    if not patterns:
        return []
    return merge_spans(find_spans(patterns, text, start, end))


def split_around(
    text: str,
    spans: Sequence[Span],
    start: int = 0,
    end: Optional[int] = None,
) -> Iterator[Tuple[str, bool]]:
    """Yield ``(piece, is_preserved)`` for ``text[start:end]`` in source order.

    ``spans`` must be merged; spans reaching outside the window are clipped.
    Empty pieces are skipped.
    """
    end = len(text) if end is None else end
    pos = start
    for span in spans:
        s, e = max(span.start, start), min(span.end, end)
        if s >= e:
            continue
        if s > pos:
            yield text[pos:s], False
        yield text[s:e], True
        pos = e
    if pos < end:
        yield text[pos:end], False


def apply_preserve_patterns(
    tokens: List[str],
    patterns: Sequence["regex.Pattern"],
    text: str,
    config: TokenizerConfig,
    splitter: Callable[[str], List[str]] = whitespace_split,
    start: int = 0,
    end: Optional[int] = None,
) -> List[str]:
    """Interleave verbatim preserved spans with re-tokenized gaps.

    ``tokens`` is the strategy's raw output for the window; it is only used,
    post-processed, when no pattern matches.
    """
    spans = preserved_spans(patterns, text, start, end)
    if not spans:
        return post_process(tokens, config)

    out: List[str] = []
    for piece, preserved in split_around(text, spans, start, end):
        if preserved:
            out.append(piece)
        else:
            out.extend(post_process(splitter(piece), config))
    return out


def normalize_preserving(
    text: str,
    spans: Sequence[Span],
    config: TokenizerConfig,
    start: int = 0,
    end: Optional[int] = None,
    keep: str = "",
) -> str:
    """Normalize ``text[start:end]`` as one string, leaving preserved spans untouched."""
    return "".join(
        piece if preserved else normalize_text(piece, config, keep)
        for piece, preserved in split_around(text, spans, start, end)
    )
