"""
sort_rules.py - Sorting Rules Module

Provides entry ordering and index width computation
"""

from typing import List

from .models_fs import ParsedEntry


def sort_entries(entries: List[ParsedEntry]) -> List[ParsedEntry]:
    """
    Sort entries by their parsed key

    Only the key participates; entries with equal keys keep the order in
    which they were listed (sorted() is stable).

    Args:
        entries: Parsed entries

    Returns:
        Sorted entry list (new list)
    """
    return sorted(entries, key=lambda e: e.key)


def compute_width(count: int, min_width: int = 2) -> int:
    """
    Get the number of digits needed for indices 0..count-1

    Args:
        count: Number of entries
        min_width: Lower bound for the result

    Returns:
        Zero padding digits
    """
    if min_width < 0:
        raise ValueError(f"Minimum width cannot be negative: {min_width}")

    width = 1
    threshold = 10
    while threshold < count:
        width += 1
        threshold *= 10

    return max(width, min_width)
