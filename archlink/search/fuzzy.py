"""
Fuzzy matching algorithms for package search.

This module provides the string metrics the ranker scores candidates with.
"""

from typing import List


def edit_distance(source: str, target: str) -> int:
    """
    Levenshtein distance between two strings.

    Insertions, deletions and substitutions each cost 1. The comparison is
    case-sensitive.

    Args:
        source: First string.
        target: Second string.

    Returns:
        Minimum number of single-character edits turning source into target.
    """
    if source == target:
        return 0
    if not source:
        return len(target)
    if not target:
        return len(source)

    # Keep the shorter string in the inner loop
    if len(source) < len(target):
        source, target = target, source

    previous = list(range(len(target) + 1))
    for i, s_char in enumerate(source, start=1):
        current = [i]
        for j, t_char in enumerate(target, start=1):
            current.append(min(
                previous[j] + 1,
                current[j - 1] + 1,
                previous[j - 1] + (s_char != t_char)
            ))
        previous = current

    return previous[-1]


def query_words(query: str) -> List[str]:
    """Split a query into whitespace-delimited words."""
    return query.split()


def description_hits(words: List[str], description: str) -> int:
    """
    Count the query words contained in a description.

    Matching is a case-insensitive substring test. A word counts at most once
    however often it occurs in the description.

    Args:
        words: Query words.
        description: Candidate description.

    Returns:
        Number of words found in the description.
    """
    if not description:
        return 0
    desc_lower = description.lower()
    return sum(1 for word in words if word.lower() in desc_lower)
