"""
Text matching utilities shared by the targeting and validation contexts.

All matching in PATHFINDER is case-insensitive substring containment; there
is no fuzzy or phonetic matching.
"""

from typing import Iterable, List


def contains_ci(haystack: str, needle: str) -> bool:
    """
    Case-insensitive substring test.

    Example:
        >>> contains_ci("Machine Learning", "learn")
        True
    """
    return needle.lower() in haystack.lower()


def overlaps_ci(a: str, b: str) -> bool:
    """
    True when either string contains the other, ignoring case.

    Example:
        >>> overlaps_ci("Python", "Python/R")
        True
        >>> overlaps_ci("Cooking", "SQL")
        False
    """
    a_lower = a.lower()
    b_lower = b.lower()
    return a_lower in b_lower or b_lower in a_lower


def any_overlap_ci(term: str, candidates: Iterable[str]) -> bool:
    """True when term overlaps (either direction) with any candidate."""
    return any(overlaps_ci(term, candidate) for candidate in candidates)


def any_contains_ci(candidates: Iterable[str], term: str) -> bool:
    """True when any candidate contains term, ignoring case."""
    return any(contains_ci(candidate, term) for candidate in candidates)


def searchable_text(*parts: Iterable[str]) -> str:
    """
    Join groups of strings into one lowercase blob for substring search.

    Example:
        >>> searchable_text(["Nursing"], ("patient care", "clinical"))
        'nursing patient care clinical'
    """
    return " ".join(item for group in parts for item in group).lower()


def dedupe_preserving_order(items: Iterable[str]) -> List[str]:
    """
    Remove exact duplicates while keeping first-seen order.

    Example:
        >>> dedupe_preserving_order(["a", "b", "a", "c"])
        ['a', 'b', 'c']
    """
    return list(dict.fromkeys(items))


def truncate_display(text: str, max_len: int) -> str:
    """
    Truncate text for display with ellipsis if needed.

    Args:
        text: Text to truncate
        max_len: Maximum length including ellipsis

    Returns:
        Original text if within max_len, otherwise truncated with "..."

    Example:
        >>> truncate_display("short", 10)
        'short'
        >>> truncate_display("this is a very long string", 10)
        'this is...'
    """
    return text if len(text) <= max_len else text[: max_len - 3] + "..."
