import regex

from tokenkit import validate_and_build
from tokenkit.core.tokenization.overlay import Span, merge_spans, split_around


def run(config, text):
    return validate_and_build(config).tokenize(text)


# -------------------------------------
# ✅ Span merging
# -------------------------------------
def test_merge_overlapping_spans():
    assert merge_spans([Span(5, 9), Span(0, 3), Span(2, 6)]) == [Span(0, 9)]


def test_merge_keeps_touching_spans_apart():
    assert merge_spans([Span(3, 6), Span(0, 3)]) == [Span(0, 3), Span(3, 6)]


def test_merge_contained_span():
    assert merge_spans([Span(0, 10), Span(2, 4)]) == [Span(0, 10)]


def test_split_around_clips_to_window():
    text = "abcdefgh"
    pieces = list(split_around(text, [Span(1, 4)], start=2, end=6))
    assert pieces == [("cd", True), ("ef", False)]


# -------------------------------------
# ✅ Whole-text overlay
# -------------------------------------
def test_preserved_span_is_one_verbatim_token():
    config = {"strategy": "whitespace", "preserve_patterns": [r"ID-\d+"]}
    assert run(config, "contact ID-42 now") == ["contact", "ID-42", "now"]


def test_preserved_span_survives_punctuation_removal_and_case():
    config = {
        "strategy": "unicode",
        "remove_punctuation": True,
        "preserve_patterns": [r"(?i)anti-cd\d+"],
    }
    tokens = run(config, "Anti-CD3 is a co-stimulatory antibody")
    assert tokens == ["Anti-CD3", "is", "a", "costimulatory", "antibody"]


def test_no_match_falls_back_to_plain_tokens():
    config = {"strategy": "unicode", "preserve_patterns": [r"ZZZ\d"]}
    assert run(config, "Hello, World") == ["hello", "world"]


def test_overlapping_patterns_merge_into_one_token():
    config = {
        "strategy": "whitespace",
        "preserve_patterns": [r"New York", r"York City"],
    }
    assert run(config, "I love New York City today") == [
        "i",
        "love",
        "New York City",
        "today",
    ]


def test_preserved_span_inside_a_word_splits_it():
    config = {"strategy": "whitespace", "preserve_patterns": [r"\d+"]}
    assert run(config, "abc123def") == ["abc", "123", "def"]


def test_compiled_pattern_is_accepted():
    config = {
        "strategy": "whitespace",
        "preserve_patterns": [regex.compile(r"gene-\d+", regex.IGNORECASE)],
    }
    assert run(config, "the GENE-7 locus") == ["the", "GENE-7", "locus"]


# -------------------------------------
# ✅ Strategy-specific overlay scope
# -------------------------------------
def test_ngram_gaps_keep_ngram_segmentation():
    config = {
        "strategy": "ngram",
        "min_gram": 2,
        "max_gram": 2,
        "preserve_patterns": [r"\d+"],
    }
    assert run(config, "abc 123") == ["ab", "bc", "123"]


def test_grapheme_gaps_keep_cluster_segmentation():
    config = {"strategy": "grapheme", "preserve_patterns": [r"ab"]}
    assert run(config, "xaby") == ["x", "ab", "y"]


def test_lowercase_strategy_keeps_case_of_preserved_span():
    config = {"strategy": "lowercase", "preserve_patterns": [r"NASA"]}
    assert run(config, "The NASA Mission") == ["the", "NASA", "mission"]


def test_keyword_keeps_protected_region_inside_single_token():
    config = {"strategy": "keyword", "preserve_patterns": [r"ABC-\d+"]}
    assert run(config, "  Order ABC-123 Now ") == ["order ABC-123 now"]


def test_sentence_protects_inside_each_sentence():
    config = {"strategy": "sentence", "preserve_patterns": [r"ACME Corp"]}
    assert run(config, "We Joined ACME Corp! It Was Fun.") == [
        "we joined ACME Corp! ",
        "it was fun.",
    ]


def test_path_hierarchy_protected_delimiter_does_not_split():
    config = {"strategy": "path_hierarchy", "preserve_patterns": [r"api/v\d+"]}
    assert run(config, "api/v2/users/profile") == [
        "api/v2",
        "api/v2/users",
        "api/v2/users/profile",
    ]


def test_path_hierarchy_protected_part_skips_punctuation_removal():
    config = {
        "strategy": "path_hierarchy",
        "remove_punctuation": True,
        "preserve_patterns": [r"file\.txt"],
    }
    assert run(config, "/path/to/file.txt") == [
        "/path",
        "/path/to",
        "/path/to/file.txt",
    ]


def test_path_hierarchy_windows_paths():
    config = {
        "strategy": "path_hierarchy",
        "delimiter": "\\",
        "preserve_patterns": [r"Program Files", r"System32"],
    }
    assert run(config, r"C:\Program Files\System32\Drivers") == [
        "c:",
        "c:\\Program Files",
        "c:\\Program Files\\System32",
        "c:\\Program Files\\System32\\drivers",
    ]


def test_url_email_preserved_link_keeps_case():
    config = {"strategy": "url_email", "preserve_patterns": [r"https://\S+"]}
    tokens = run(config, "Go to https://Example.com/Docs now")
    assert tokens == ["go", "to", "https://Example.com/Docs", "now"]


def test_overlapping_matches_in_a_date_become_one_span():
    config = {
        "strategy": "unicode",
        "preserve_patterns": [r"\d{4}-\d{2}", r"\d{2}-\d{2}$"],
    }
    assert run(config, "2024-01-01") == ["2024-01-01"]
