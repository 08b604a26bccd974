"""Ordered first-match-wins helpers shared by the heuristic cascades.

Heading detection, metadata lookup and training-flag classification are
all expressed as ordered rule lists; these helpers walk a list and stop
at the first rule that fires.
"""

import re
from typing import Any, Callable, Iterable, Optional, Pattern, Sequence, Tuple, TypeVar

R = TypeVar("R")

Rule = Tuple[Callable[..., bool], R]


def first_match(rules: Iterable[Rule], *args: Any, default: Optional[R] = None) -> Optional[R]:
    """
    Return the result paired with the first predicate that holds.

    Args:
        rules: Ordered ``(predicate, result)`` pairs.
        *args: Arguments passed to every predicate.
        default: Value returned when no predicate holds.

    Returns:
        The result of the first matching rule, or ``default``.
    """
    for predicate, result in rules:
        if predicate(*args):
            return result
    return default


def first_regex_match(patterns: Sequence[Pattern[str]], text: str) -> Optional[re.Match]:
    """Return the match of the first pattern that matches ``text`` from its start."""
    for pattern in patterns:
        match = pattern.match(text)
        if match:
            return match
    return None


def first_capture(
    patterns: Sequence[Pattern[str]],
    text: str,
    accept: Optional[Callable[[str], bool]] = None,
) -> Optional[str]:
    """
    Return capture group 1 of the first pattern found anywhere in ``text``.

    Args:
        patterns: Ordered compiled patterns, each with one capture group.
        text: Text to search.
        accept: Optional filter; a rejected capture moves on to the next pattern.

    Returns:
        The captured string, or None if no pattern produced an accepted capture.
    """
    for pattern in patterns:
        match = pattern.search(text)
        if not match:
            continue
        value = match.group(1)
        if accept is None or accept(value):
            return value
    return None


def contains_any(text: str, terms: Iterable[str]) -> bool:
    """Check if any of ``terms`` occurs as a substring of ``text``."""
    return any(term in text for term in terms)
