"""
Locale-aware string ordering.

Product names are ordered with the Unicode Collation Algorithm (DUCET), which
matches what browsers do for `localeCompare` under the root locale:
case and accents only break ties, so "apple" < "Banana" < "Cherry".
"""

from __future__ import annotations

from functools import lru_cache
from typing import Callable, Iterable, List, Tuple, TypeVar

from pyuca import Collator

T = TypeVar("T")


@lru_cache(maxsize=1)
def _collator() -> Collator:
    # Loads the full allkeys table; build once per process.
    return Collator()


def collation_key(text: str) -> Tuple[int, ...]:
    return _collator().sort_key(text or "")


def locale_sorted(items: Iterable[T], key: Callable[[T], str]) -> List[T]:
    return sorted(items, key=lambda item: collation_key(key(item)))
