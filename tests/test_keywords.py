"""Tests for keyword extraction."""

from eco_lens.services.keywords import extract_keywords


def test_extract_keywords_lowercases_and_strips_punctuation() -> None:
    assert extract_keywords("Organic BANANA, 6-pack!") == [
        "organic",
        "banana",
        "6",
        "pack",
    ]


def test_extract_keywords_keeps_duplicates_in_order() -> None:
    assert extract_keywords("milk and more milk") == ["milk", "and", "more", "milk"]


def test_extract_keywords_joins_multiple_texts() -> None:
    assert extract_keywords("plastic bottle", "IMG_0042.jpg") == [
        "plastic",
        "bottle",
        "img",
        "0042",
        "jpg",
    ]


def test_extract_keywords_splits_on_any_whitespace() -> None:
    assert extract_keywords("tuna\tcan\nbrine") == ["tuna", "can", "brine"]


def test_extract_keywords_empty_input() -> None:
    assert extract_keywords("") == []
    assert extract_keywords(None, "  ") == []
    assert extract_keywords("¡¿…") == []
