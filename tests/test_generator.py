"""Tests for candidate generation and keyword extraction."""

import pytest

from namesmith.generator import (
    DEFAULT_LIBRARY,
    DEFAULT_TLDS,
    WordLibrary,
    extract_keywords,
    generate_candidates,
    is_well_formed,
    normalize_keyword,
)


def test_duplicate_keywords_produce_no_duplicates():
    candidates = generate_candidates(["shop", "shop"], max_results=1000)
    assert len(candidates) == len(set(candidates))
    assert "shop.com" in candidates


def test_explicit_tlds_only():
    candidates = generate_candidates(["petly"], tlds=[".com", ".io"], max_results=1000)
    assert "petly.com" in candidates
    assert "petly.io" in candidates
    assert all(c.endswith((".com", ".io")) for c in candidates)


def test_compound_emits_both_orders():
    candidates = generate_candidates(["cat", "app"], max_results=1000)
    for tld in DEFAULT_TLDS:
        assert f"catapp{tld}" in candidates
        assert f"appcat{tld}" in candidates


def test_compound_comes_after_single_keyword_candidates():
    library = WordLibrary(prefixes=("get",), suffixes=("hq",), tlds=(".io",))
    candidates = generate_candidates(["cat", "dog"], library=library, max_results=1000)
    assert candidates == [
        "cat.io",
        "getcat.io",
        "cathq.io",
        "dog.io",
        "getdog.io",
        "doghq.io",
        "catdog.io",
        "dogcat.io",
    ]


def test_bare_keywords_come_first():
    candidates = generate_candidates(["petly"])
    assert candidates[: len(DEFAULT_TLDS)] == [f"petly{tld}" for tld in DEFAULT_TLDS]


def test_default_max_results_truncates():
    candidates = generate_candidates(["petly", "walker"])
    assert len(candidates) == 20


def test_max_results_zero_or_negative():
    assert generate_candidates(["petly"], max_results=0) == []
    assert generate_candidates(["petly"], max_results=-3) == []


def test_keywords_are_normalized():
    candidates = generate_candidates(["Pet-Ly!"], tlds=[".com"])
    assert candidates[0] == "petly.com"


def test_no_valid_keywords_is_empty_not_error():
    assert generate_candidates(["!!!", "", "   "]) == []
    assert generate_candidates([]) == []


def test_tlds_are_used_verbatim():
    candidates = generate_candidates(["petly"], tlds=["COM"], max_results=1)
    assert candidates == ["petlyCOM"]


def test_vibe_does_not_change_output():
    assert generate_candidates(["petly"], vibe="playful") == generate_candidates(["petly"])


def test_custom_library_is_used():
    library = WordLibrary(prefixes=("x",), suffixes=(), tlds=(".io",))
    assert generate_candidates(["pet"], library=library) == ["pet.io", "xpet.io"]


def test_default_library_sizes():
    assert len(DEFAULT_LIBRARY.prefixes) == 12
    assert len(DEFAULT_LIBRARY.suffixes) == 10
    assert DEFAULT_LIBRARY.tlds == (".com", ".io", ".co", ".dev", ".app", ".ai")


def test_library_from_settings_matches_defaults():
    assert WordLibrary.from_settings() == DEFAULT_LIBRARY


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("Shop", "shop"), ("my_shop-42", "myshop42"), ("café", "caf"), ("!!", "")],
)
def test_normalize_keyword(raw, expected):
    assert normalize_keyword(raw) == expected


def test_extract_keywords_skips_short_and_stop_words():
    idea = "A marketplace for pet sitters with dogs and cats"
    assert extract_keywords(idea) == ["marketplace", "sitters", "dogs"]


def test_extract_keywords_dedupes_and_limits():
    assert extract_keywords("Garden garden GARDEN plants", limit=5) == ["garden", "plants"]
    assert extract_keywords("alpha bravo charlie delta", limit=2) == ["alpha", "bravo"]


def test_extract_keywords_empty():
    assert extract_keywords("") == []
    assert extract_keywords("the and for") == []


def test_is_well_formed():
    assert is_well_formed("petly.com")
    assert is_well_formed("my-pet.co.uk")
    assert not is_well_formed("petly")
    assert not is_well_formed("pet..com")
    assert not is_well_formed("Petly.com")
    assert not is_well_formed("a" * 64 + ".com")
