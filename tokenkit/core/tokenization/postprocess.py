from __future__ import annotations
import string
from typing import Iterable, List

from tokenkit.core.tokenization.config import TokenizerConfig

PUNCTUATION = frozenset(string.punctuation)


def strip_punctuation(token: str, keep: str = "") -> str:
    """Drop ASCII punctuation from a token, except characters listed in ``keep``."""
    return "".join(c for c in token if c in keep or c not in PUNCTUATION)


def normalize_text(text: str, config: TokenizerConfig, keep: str = "") -> str:
    """Apply the configured case fold and punctuation strip to a piece of text."""
    if config.lowercase:
        text = text.lower()
    if config.remove_punctuation:
        text = strip_punctuation(text, keep)
    return text


def post_process(
    tokens: Iterable[str], config: TokenizerConfig, keep: str = ""
) -> List[str]:
    """Lowercase, then strip punctuation. Tokens left empty are dropped."""
    out: List[str] = []
    for t in tokens:
        if config.lowercase:
            t = t.lower()
        if config.remove_punctuation:
            t = strip_punctuation(t, keep)
        if t:
            out.append(t)
    return out
