from __future__ import annotations

from collections import Counter

import pytest

from phrasedensity.phrase_extractor import (
    MIN_PHRASE_LEN,
    PhraseExtractor,
    normalize_phrase,
    tokenize,
)


MESSY_TEXT = (
    "  The 2024 Annual-Report: growth, GROWTH & more growth!!\n"
    "Q4 results -- beat expectations; naïve forecasts were wrong.  "
)


@pytest.fixture
def extractor() -> PhraseExtractor:
    return PhraseExtractor()


def test_tokenize_drops_separators_and_boundary_blanks() -> None:
    assert tokenize("  Hello, World 2024! ") == ["hello", "world"]
    assert tokenize("web2page--design") == ["web", "page", "design"]
    assert tokenize("") == []
    assert tokenize("123 !!! ...") == []


def test_tokenize_treats_non_ascii_letters_as_separators() -> None:
    assert tokenize("naïve approach") == ["na", "ve", "approach"]


def test_normalize_phrase_collapses_whitespace() -> None:
    assert normalize_phrase("  big   cat ") == "big cat"


def test_extract_concrete_bigrams(extractor: PhraseExtractor) -> None:
    result = extractor.extract("the Quick quick fox", 2, 1.0)
    assert result == Counter({"the quick": 1.0, "quick quick": 1.0, "quick fox": 1.0})


def test_extract_drops_short_phrases(extractor: PhraseExtractor) -> None:
    # "a b" and "b c" are 3 characters long; only the trigram survives
    assert extractor.extract("a b c", 3, 1.0) == Counter({"a b c": 1.0})
    assert extractor.extract("ab cd", 2, 1.0) == Counter({"ab cd": 1.0})
    assert extractor.extract("ab c", 2, 1.0) == Counter()


def test_extract_accumulates_repeats_within_fragment(extractor: PhraseExtractor) -> None:
    result = extractor.extract("big cat big cat", 2, 0.5)
    assert result == Counter({"big cat": 1.0, "cat big": 0.5})


def test_extract_all_window_lengths(extractor: PhraseExtractor) -> None:
    result = extractor.extract("one two three four", 4, 1.0)
    assert set(result) == {
        "one two",
        "two three",
        "three four",
        "one two three",
        "two three four",
        "one two three four",
    }


def test_extract_empty_and_degenerate_inputs(extractor: PhraseExtractor) -> None:
    assert extractor.extract("", 4, 1.0) == Counter()
    assert extractor.extract("single", 4, 1.0) == Counter()
    assert extractor.extract("!!! 42 ???", 4, 1.0) == Counter()
    assert extractor.extract("one two three", 1, 1.0) == Counter()


def test_extract_propagates_zero_and_negative_weights(extractor: PhraseExtractor) -> None:
    assert extractor.extract("quick fox", 2, -2.0) == Counter({"quick fox": -2.0})
    assert extractor.extract("quick fox", 2, 0.0)["quick fox"] == 0.0


@pytest.mark.parametrize("max_words", [2, 3, 4, 6])
def test_extract_phrase_shape_invariants(extractor: PhraseExtractor, max_words: int) -> None:
    result = extractor.extract(MESSY_TEXT, max_words, 1.0)
    assert result
    for phrase in result:
        words = phrase.split(" ")
        assert 2 <= len(words) <= max_words
        assert len(phrase) > MIN_PHRASE_LEN
        assert phrase == phrase.strip()
        assert "  " not in phrase
        assert all(w.isascii() and w.isalpha() and w.islower() for w in words)


def test_extract_is_linear_in_weight(extractor: PhraseExtractor) -> None:
    base = extractor.extract(MESSY_TEXT, 4, 0.75)
    scaled = extractor.extract(MESSY_TEXT, 4, 0.75 * 2.0)
    assert set(base) == set(scaled)
    for phrase, value in base.items():
        assert scaled[phrase] == value * 2.0


def test_extract_does_not_share_state_between_calls(extractor: PhraseExtractor) -> None:
    first = extractor.extract("quick fox", 2, 1.0)
    second = extractor.extract("quick fox", 2, 1.0)
    assert first == second
    assert first is not second


def test_extract_occurrences_match_extract(extractor: PhraseExtractor) -> None:
    occurrences = extractor.extract_occurrences("big cat big cat", 3, 0.5, source="title")
    totals: Counter = Counter()
    for occ in occurrences:
        totals[occ.phrase] += occ.weight
    assert totals == extractor.extract("big cat big cat", 3, 0.5)

    assert [(o.n_words, o.position) for o in occurrences] == [
        (2, 0),
        (2, 1),
        (2, 2),
        (3, 0),
        (3, 1),
    ]
    assert {o.source for o in occurrences} == {"title"}


def test_constructor_validates_arguments() -> None:
    with pytest.raises(ValueError):
        PhraseExtractor(min_words=1)
    with pytest.raises(ValueError):
        PhraseExtractor(min_phrase_len=-1)


def test_custom_min_words() -> None:
    extractor = PhraseExtractor(min_words=3)
    assert set(extractor.extract("one two three", 3, 1.0)) == {"one two three"}
