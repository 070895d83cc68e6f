from __future__ import annotations
import threading
from typing import List

from linkify_it import LinkifyIt

from tokenkit.core.tokenization.base import Tokenizer
from tokenkit.core.tokenization.overlay import Span, find_spans, merge_spans, split_around
from tokenkit.core.tokenization.postprocess import post_process
from tokenkit.core.tokenization.strategies.unicode import unicode_words

# LinkifyIt keeps per-scan state, so every thread gets its own finder
_local = threading.local()


def _finder() -> LinkifyIt:
    finder = getattr(_local, "finder", None)
    if finder is None:
        # links need an explicit scheme; emails are always detected
        finder = LinkifyIt().set({"fuzzy_link": False})
        _local.finder = finder
    return finder


def link_spans(text: str) -> List[Span]:
    if not text:
        return []
    matches = _finder().match(text) or []
    return [Span(m.index, m.last_index) for m in matches]


class UrlEmailTokenizer(Tokenizer):
    """Adapter: URLs and emails stay whole, the rest follows Unicode word rules.

    Link spans and preserve-pattern spans are merged first. A merged span is
    lowercased with the rest of the text unless a preserve pattern matches
    it, and is never stripped of punctuation.
    """

    def _pieces(self, text: str):
        spans = merge_spans(link_spans(text) + find_spans(self._preserve, text))
        return split_around(text, spans)

    def segment(self, text: str) -> List[str]:
        out: List[str] = []
        for piece, protected in self._pieces(text):
            if protected:
                out.append(piece)
            else:
                out.extend(unicode_words(piece))
        return out

    def tokenize(self, text: str) -> List[str]:
        text = text or ""
        out: List[str] = []
        for piece, protected in self._pieces(text):
            if not protected:
                out.extend(post_process(unicode_words(piece), self.cfg))
                continue
            if self.cfg.lowercase and not any(p.search(piece) for p in self._preserve):
                piece = piece.lower()
            out.append(piece)
        return out
