from concurrent.futures import ThreadPoolExecutor

import pytest

import tokenkit
from tokenkit import (
    InvalidConfiguration,
    InvalidNgramConfig,
    TokenizerConfig,
    UnicodeWord,
    Whitespace,
    factory_defaults,
)
from tokenkit.services.config_store import DefaultConfigStore
from tokenkit.services.tokenization_service import TokenizationService, layer_options


@pytest.fixture(autouse=True)
def restore_default():
    yield
    tokenkit.reset()


# -------------------------------------
# ✅ Default configuration store
# -------------------------------------
def test_store_starts_at_factory_defaults():
    assert DefaultConfigStore().get() == factory_defaults()


def test_store_rejects_invalid_config_and_keeps_old_one():
    store = DefaultConfigStore()
    store.set({"strategy": "whitespace"})
    with pytest.raises(InvalidNgramConfig):
        store.set({"strategy": "ngram", "min_gram": 4, "max_gram": 2})
    assert store.get().strategy == Whitespace()


def test_store_reset():
    store = DefaultConfigStore(TokenizerConfig(strategy=Whitespace()))
    assert store.reset() == factory_defaults()
    assert store.get() == factory_defaults()


def test_store_concurrent_readers_and_writers():
    store = DefaultConfigStore()
    configs = [
        TokenizerConfig(strategy=Whitespace(), lowercase=False),
        TokenizerConfig(strategy=UnicodeWord(), remove_punctuation=True),
    ]

    def write(i):
        store.set(configs[i % 2])

    def read(_):
        return store.get()

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(write, range(200)))
        seen = list(pool.map(read, range(200)))

    assert all(config in configs for config in seen)


# -------------------------------------
# ✅ Per-call options
# -------------------------------------
def test_layer_options_overrides_without_mutating_base():
    base = factory_defaults()
    layered = layer_options(base, {"strategy": "whitespace", "lowercase": False})
    assert layered.strategy == Whitespace()
    assert layered.lowercase is False
    assert base == factory_defaults()


def test_layer_options_aliases():
    layered = layer_options(
        factory_defaults(),
        {"strategy": "grapheme", "grapheme_extended": False, "preserve": r"\d+"},
    )
    assert layered.strategy.extended is False
    assert layered.preserve_patterns == (r"\d+",)


def test_unknown_option_rejected():
    with pytest.raises(InvalidConfiguration):
        layer_options(factory_defaults(), {"colour": "blue"})


def test_tokenize_text_with_overrides_leaves_default_alone():
    assert tokenkit.tokenize_text("Hello, World", remove_punctuation=True) == [
        "hello",
        "world",
    ]
    assert tokenkit.tokenize_text(
        "apple", strategy="edge_ngram", min_gram=2, max_gram=3
    ) == ["ap", "app"]
    assert tokenkit.current_config() == factory_defaults()


def test_module_tokenize_accepts_text_or_tokenizer():
    tok = tokenkit.validate_and_build({"strategy": "whitespace", "lowercase": False})
    assert tokenkit.tokenize(tok, "A b") == ["A", "b"]
    assert tokenkit.tokenize("A b", lowercase=False) == ["A", "b"]


def test_configure_changes_default():
    tokenkit.configure(strategy="whitespace", lowercase=False)
    assert tokenkit.tokenize_text("Hello, World") == ["Hello,", "World"]
    tokenkit.reset()
    assert tokenkit.tokenize_text("Hello, World") == ["hello", "world"]


def test_configure_partial_mapping_layers_over_current():
    tokenkit.configure({"remove_punctuation": True})
    config = tokenkit.configure({"strategy": "whitespace"})
    assert config.remove_punctuation is True
    assert config.strategy == Whitespace()


# -------------------------------------
# ✅ Tokenizer cache
# -------------------------------------
def test_tokenizers_are_cached_per_config():
    service = TokenizationService(cache_size=4)
    first = service.tokenizer({"strategy": "whitespace"})
    second = service.tokenizer(strategy="whitespace")
    assert first is second
    assert service.cache_info().hits == 1


def test_tokenize_many_uses_one_tokenizer():
    service = TokenizationService()
    assert service.tokenize_many(["A b", "c"], strategy="whitespace") == [
        ["a", "b"],
        ["c"],
    ]
