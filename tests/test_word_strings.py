"""Tests for the delimited word string encoding."""
from __future__ import annotations

import pytest

from app.core.word_strings import apply_status, join_terms, split_terms, status_of


@pytest.mark.parametrize("value", [None, "", "'", "''"])
def test_split_empty_values(value) -> None:
    assert split_terms(value) == []


def test_split_drops_empty_items() -> None:
    assert split_terms("apple''dog'") == ["apple", "dog"]


def test_terms_round_trip() -> None:
    terms = ["apple", "ice cream", "well-being"]

    assert split_terms(join_terms(terms)) == terms


def test_apply_status_moves_term_between_lists() -> None:
    mastered, learning = apply_status("", "apple'dog", "apple", True)

    assert split_terms(mastered) == ["apple"]
    assert split_terms(learning) == ["dog"]

    mastered, learning = apply_status(mastered, learning, "apple", False)

    assert split_terms(mastered) == []
    assert split_terms(learning) == ["dog", "apple"]


def test_apply_status_never_duplicates() -> None:
    mastered, learning = "", ""
    for is_correct in (True, True, False, True):
        mastered, learning = apply_status(mastered, learning, "dog", is_correct)

    assert split_terms(mastered) == ["dog"]
    assert learning == ""


def test_status_of() -> None:
    assert status_of("apple", "apple'dog", "cat") == "mastered"
    assert status_of("cat", "apple'dog", "cat") == "learning"
    assert status_of("bird", None, None) == "not-started"
