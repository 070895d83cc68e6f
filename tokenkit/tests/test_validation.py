import re

import pytest

from tokenkit import (
    EdgeNgram,
    EmptyDelimiter,
    InvalidConfiguration,
    InvalidNgramConfig,
    InvalidRegex,
    Ngram,
    PathHierarchy,
    Pattern,
    TokenizerConfig,
    UnicodeWord,
    UnknownStrategy,
    factory_defaults,
    validate_and_build,
    validate_config,
)


# -------------------------------------
# ✅ Accepted configurations
# -------------------------------------
def test_factory_defaults():
    config = factory_defaults()
    assert config == TokenizerConfig(
        strategy=UnicodeWord(),
        lowercase=True,
        remove_punctuation=False,
        preserve_patterns=(),
    )


def test_missing_keys_take_defaults():
    config = validate_config({"strategy": "edge_ngram"})
    assert config.strategy == EdgeNgram(min_gram=2, max_gram=10)
    assert config.lowercase is True
    assert config.remove_punctuation is False
    assert config.preserve_patterns == ()


def test_validate_returns_config_unchanged():
    config = TokenizerConfig(strategy=Ngram(1, 1), preserve_patterns=[r"\d+"])
    assert validate_config(config) is config
    assert config.preserve_patterns == (r"\d+",)


def test_min_equal_max_is_valid():
    assert validate_config({"strategy": "ngram", "min_gram": 3, "max_gram": 3})


def test_compiled_flags_become_inline_flags():
    config = validate_config(
        {"strategy": "pattern", "regex": re.compile(r"gene-\d+", re.I)}
    )
    assert config.strategy == Pattern(regex=r"(?i)gene-\d+")


# -------------------------------------
# ❌ Rejected configurations
# -------------------------------------
def test_unknown_strategy():
    with pytest.raises(UnknownStrategy) as exc:
        validate_config({"strategy": "morpheme"})
    assert exc.value.name == "morpheme"
    assert exc.value.code == "UNKNOWN_STRATEGY"


def test_pattern_requires_regex():
    with pytest.raises(InvalidConfiguration):
        validate_config({"strategy": "pattern"})


def test_invalid_main_regex():
    with pytest.raises(InvalidRegex) as exc:
        validate_and_build({"strategy": "pattern", "regex": "(unclosed"})
    assert exc.value.pattern == "(unclosed"
    assert exc.value.message


def test_invalid_preserve_pattern():
    with pytest.raises(InvalidRegex) as exc:
        validate_config({"preserve_patterns": [r"ok\d+", "[bad"]})
    assert exc.value.pattern == "[bad"
    assert exc.value.to_dict()["pattern"] == "[bad"


@pytest.mark.parametrize(
    "min_gram,max_gram",
    [(0, 5), (-1, 3), (5, 2)],
)
def test_invalid_ngram_bounds(min_gram, max_gram):
    for strategy in ("edge_ngram", "ngram"):
        with pytest.raises(InvalidNgramConfig) as exc:
            validate_and_build(
                {"strategy": strategy, "min_gram": min_gram, "max_gram": max_gram}
            )
        assert (exc.value.min_gram, exc.value.max_gram) == (min_gram, max_gram)


def test_invalid_ngram_bounds_on_typed_config():
    with pytest.raises(InvalidNgramConfig):
        validate_config(TokenizerConfig(strategy=EdgeNgram(min_gram=0, max_gram=5)))


def test_empty_delimiter():
    with pytest.raises(EmptyDelimiter) as exc:
        validate_config(TokenizerConfig(strategy=PathHierarchy(delimiter="")))
    assert exc.value.tokenizer == "PathHierarchy"


def test_strategy_errors_come_before_preserve_pattern_errors():
    with pytest.raises(InvalidNgramConfig):
        validate_config(
            {
                "strategy": "ngram",
                "min_gram": 0,
                "max_gram": 1,
                "preserve_patterns": ["("],
            }
        )


def test_first_bad_preserve_pattern_is_reported():
    with pytest.raises(InvalidRegex) as exc:
        validate_config({"preserve_patterns": ["(", "["]})
    assert exc.value.pattern == "("


@pytest.mark.parametrize(
    "raw",
    [
        {"lowercase": "yes"},
        {"remove_punctuation": 1},
        {"strategy": "ngram", "min_gram": "2"},
        {"strategy": "ngram", "max_gram": True},
        {"strategy": "path_hierarchy", "delimiter": 5},
        {"preserve_patterns": r"\d+"},
        {"preserve_patterns": [42]},
        {"strategy": 3},
    ],
)
def test_wrongly_typed_values(raw):
    with pytest.raises(InvalidConfiguration):
        validate_config(raw)


def test_rejection_is_logged(caplog):
    with caplog.at_level("WARNING"):
        with pytest.raises(UnknownStrategy):
            validate_config({"strategy": "nope"})
    assert "Rejected tokenizer configuration" in caplog.text


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        validate_config({"strategy": "nope"})
