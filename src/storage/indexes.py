# src/storage/indexes.py

"""Lookup indexes rebuilt whenever a store publishes a new record tuple."""

from collections.abc import Callable, Hashable, Iterable
from typing import TypeVar

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


def index_by(records: Iterable[T], key: Callable[[T], K]) -> dict[K, T]:
    """Map each key to its record. Later records win on duplicate keys."""
    return {key(record): record for record in records}


def group_by(
    records: Iterable[T], key: Callable[[T], K],
) -> dict[K, tuple[T, ...]]:
    """Group records by key, keeping insertion order inside each group."""
    groups: dict[K, list[T]] = {}
    for record in records:
        groups.setdefault(key(record), []).append(record)
    return {k: tuple(v) for k, v in groups.items()}


def position_index(
    records: Iterable[T], key: Callable[[T], K],
) -> dict[K, int]:
    """Map each key to the position of its record in the sequence."""
    return {key(record): pos for pos, record in enumerate(records)}
