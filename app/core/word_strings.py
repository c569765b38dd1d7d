"""Encoding of a learner's mastered/learning term sets as delimited strings.

Each source keeps two plain strings of terms joined with a single quote.
Terms that contain the delimiter cannot be represented.
"""
from __future__ import annotations

from typing import Iterable, Literal

DELIMITER = "'"

WordStatus = Literal["mastered", "learning", "not-started"]


def split_terms(value: str | None) -> list[str]:
    """Split a stored string into its non-empty terms."""

    if not value:
        return []
    return [term for term in value.split(DELIMITER) if term]


def join_terms(terms: Iterable[str]) -> str:
    return DELIMITER.join(terms)


def status_of(word: str, mastered: str | None, learning: str | None) -> WordStatus:
    """Return the learner's status for ``word``."""

    if word in split_terms(mastered):
        return "mastered"
    if word in split_terms(learning):
        return "learning"
    return "not-started"


def apply_status(
    mastered: str | None,
    learning: str | None,
    word: str,
    is_correct: bool,
) -> tuple[str, str]:
    """Move ``word`` into the mastered or learning list and return both strings.

    The term is removed from both lists before it is appended, so it is never
    present in both.
    """

    mastered_terms = [term for term in split_terms(mastered) if term != word]
    learning_terms = [term for term in split_terms(learning) if term != word]
    if is_correct:
        mastered_terms.append(word)
    else:
        learning_terms.append(word)
    return join_terms(mastered_terms), join_terms(learning_terms)


__all__ = ["DELIMITER", "WordStatus", "apply_status", "join_terms", "split_terms", "status_of"]
