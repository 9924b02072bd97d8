"""
Resource pattern matching.

A grant pattern is either the universal wildcard "*" or a literal resource
identifier. Matching is exact and case-sensitive; there is no partial
globbing.
"""
from typing import Iterable

WILDCARD = "*"


def matches(candidate: str, pattern: str) -> bool:
    """
    Check if a grant pattern covers a resource identifier.

    Args:
        candidate: Resource being accessed (e.g., "doc")
        pattern: Pattern that was granted (e.g., "doc" or "*")

    Returns:
        True if the pattern is the wildcard or equals the candidate
    """
    return pattern == WILDCARD or pattern == candidate


def matches_any(candidate: str, patterns: Iterable[str]) -> bool:
    """Check if any granted pattern covers the resource."""
    return any(matches(candidate, pattern) for pattern in patterns)


__all__ = [
    "WILDCARD",
    "matches",
    "matches_any",
]
