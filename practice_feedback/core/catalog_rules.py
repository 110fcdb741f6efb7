"""Catalog Rules: the four-question invariant of the feedback catalog.

Invariants:
    - A valid catalog has exactly REQUIRED_QUESTION_COUNT entries
    - Sorted order values must equal [1, 2, ..., REQUIRED_QUESTION_COUNT];
      duplicates fail even when the count is right
"""

from collections.abc import Iterable

REQUIRED_QUESTION_COUNT = 4


def orders_are_complete(orders: Iterable[int]) -> bool:
    actual = sorted(orders)
    expected = list(range(1, REQUIRED_QUESTION_COUNT + 1))
    return actual == expected
