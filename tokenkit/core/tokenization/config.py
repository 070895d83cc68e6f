from __future__ import annotations
from dataclasses import asdict, dataclass, field
from typing import Any, ClassVar, Dict, Mapping, Tuple, Union

import regex

from tokenkit.core.tokenization.errors import InvalidConfiguration, UnknownStrategy


# ----------------------------
# Strategy variants
# ----------------------------
@dataclass(frozen=True)
class Whitespace:
    name: ClassVar[str] = "whitespace"


@dataclass(frozen=True)
class UnicodeWord:
    name: ClassVar[str] = "unicode"


@dataclass(frozen=True)
class Pattern:
    regex: str
    name: ClassVar[str] = "pattern"


@dataclass(frozen=True)
class Sentence:
    name: ClassVar[str] = "sentence"


@dataclass(frozen=True)
class Grapheme:
    extended: bool = True
    name: ClassVar[str] = "grapheme"


@dataclass(frozen=True)
class Keyword:
    name: ClassVar[str] = "keyword"


@dataclass(frozen=True)
class EdgeNgram:
    min_gram: int = 2
    max_gram: int = 10
    name: ClassVar[str] = "edge_ngram"


@dataclass(frozen=True)
class Ngram:
    min_gram: int = 2
    max_gram: int = 10
    name: ClassVar[str] = "ngram"


@dataclass(frozen=True)
class PathHierarchy:
    delimiter: str = "/"
    name: ClassVar[str] = "path_hierarchy"


@dataclass(frozen=True)
class UrlEmail:
    name: ClassVar[str] = "url_email"


@dataclass(frozen=True)
class CharGroup:
    split_on_chars: str = " \t\n\r"
    name: ClassVar[str] = "char_group"


@dataclass(frozen=True)
class Letter:
    name: ClassVar[str] = "letter"


@dataclass(frozen=True)
class Lowercase:
    name: ClassVar[str] = "lowercase"


StrategyVariant = Union[
    Whitespace,
    UnicodeWord,
    Pattern,
    Sentence,
    Grapheme,
    Keyword,
    EdgeNgram,
    Ngram,
    PathHierarchy,
    UrlEmail,
    CharGroup,
    Letter,
    Lowercase,
]

STRATEGIES: Dict[str, type] = {
    cls.name: cls
    for cls in (
        Whitespace,
        UnicodeWord,
        Pattern,
        Sentence,
        Grapheme,
        Keyword,
        EdgeNgram,
        Ngram,
        PathHierarchy,
        UrlEmail,
        CharGroup,
        Letter,
        Lowercase,
    )
}

# inline flag letter for each flag bit carried over from compiled patterns
_INLINE_FLAGS = (
    (regex.IGNORECASE, "i"),
    (regex.MULTILINE, "m"),
    (regex.DOTALL, "s"),
    (regex.VERBOSE, "x"),
)


def pattern_source(pattern: Any) -> str:
    """Return the source of a pattern, folding compiled flags in as inline flags.

    Accepts plain strings as well as ``re.Pattern`` / ``regex.Pattern``
    objects, so ``re.compile(r"gene-\\d+", re.I)`` becomes ``(?i)gene-\\d+``.
    """
    if isinstance(pattern, str):
        return pattern
    source = getattr(pattern, "pattern", None)
    flags = getattr(pattern, "flags", None)
    if not isinstance(source, str) or not isinstance(flags, int):
        raise InvalidConfiguration(
            f"expected a regex pattern string, got {type(pattern).__name__}"
        )
    inline = "".join(letter for bit, letter in _INLINE_FLAGS if flags & bit)
    return f"(?{inline}){source}" if inline else source


# ----------------------------
# Raw value coercion
# ----------------------------
def _get_bool(raw: Mapping[str, Any], key: str, default: bool) -> bool:
    value = raw.get(key)
    if value is None:
        return default
    if not isinstance(value, bool):
        raise InvalidConfiguration(f"'{key}' must be a boolean, got {value!r}")
    return value


def _get_int(raw: Mapping[str, Any], key: str, default: int) -> int:
    value = raw.get(key)
    if value is None:
        return default
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConfiguration(f"'{key}' must be an integer, got {value!r}")
    return value


def _get_str(raw: Mapping[str, Any], key: str, default: str) -> str:
    value = raw.get(key)
    if value is None:
        return default
    if not isinstance(value, str):
        raise InvalidConfiguration(f"'{key}' must be a string, got {value!r}")
    return value


def parse_strategy(name: Any, raw: Mapping[str, Any]) -> StrategyVariant:
    if not isinstance(name, str):
        raise InvalidConfiguration(f"'strategy' must be a string, got {name!r}")
    if name not in STRATEGIES:
        raise UnknownStrategy(name)

    if name == Pattern.name:
        if raw.get("regex") is None:
            raise InvalidConfiguration("pattern strategy requires regex parameter")
        return Pattern(regex=pattern_source(raw["regex"]))
    if name == Grapheme.name:
        return Grapheme(extended=_get_bool(raw, "extended", True))
    if name in (EdgeNgram.name, Ngram.name):
        return STRATEGIES[name](
            min_gram=_get_int(raw, "min_gram", 2),
            max_gram=_get_int(raw, "max_gram", 10),
        )
    if name == PathHierarchy.name:
        return PathHierarchy(delimiter=_get_str(raw, "delimiter", "/"))
    if name == CharGroup.name:
        return CharGroup(split_on_chars=_get_str(raw, "split_on_chars", " \t\n\r"))
    return STRATEGIES[name]()


# ----------------------------
# Top-level configuration
# ----------------------------
@dataclass(frozen=True)
class TokenizerConfig:
    strategy: StrategyVariant = field(default_factory=UnicodeWord)
    lowercase: bool = True
    remove_punctuation: bool = False
    preserve_patterns: Tuple[str, ...] = ()

    def __post_init__(self):
        # keep the value hashable even when built from a list
        object.__setattr__(self, "preserve_patterns", tuple(self.preserve_patterns))

    @property
    def strategy_name(self) -> str:
        return self.strategy.name

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"strategy": self.strategy.name}
        payload.update(asdict(self.strategy))
        payload["lowercase"] = self.lowercase
        payload["remove_punctuation"] = self.remove_punctuation
        payload["preserve_patterns"] = list(self.preserve_patterns)
        return payload

    @staticmethod
    def from_dict(raw: Mapping[str, Any]) -> "TokenizerConfig":
        if not isinstance(raw, Mapping):
            raise InvalidConfiguration(
                f"configuration must be a mapping, got {type(raw).__name__}"
            )

        strategy = parse_strategy(raw.get("strategy", UnicodeWord.name), raw)

        patterns = raw.get("preserve_patterns")
        if patterns is None:
            patterns = []
        elif isinstance(patterns, (str, bytes)) or not isinstance(
            patterns, (list, tuple)
        ):
            raise InvalidConfiguration("'preserve_patterns' must be a list of patterns")

        return TokenizerConfig(
            strategy=strategy,
            lowercase=_get_bool(raw, "lowercase", True),
            remove_punctuation=_get_bool(raw, "remove_punctuation", False),
            preserve_patterns=tuple(pattern_source(p) for p in patterns),
        )


def factory_defaults() -> TokenizerConfig:
    return TokenizerConfig()
