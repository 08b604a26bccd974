"""Text normalization and natural ordering used by the comparator."""

import re
from typing import Tuple

_WHITESPACE = re.compile(r"\s+")
_CHUNKS = re.compile(r"(\d+)")


def normalize(text: str) -> str:
    """Lowercase, collapse whitespace runs to one space and trim."""
    return _WHITESPACE.sub(" ", (text or "").lower()).strip()


def natural_sort_key(value: str) -> Tuple:
    """
    Sort key that orders embedded numbers numerically.

    "1.2" sorts before "1.10" and "2" before "10". Punctuation sorts
    before digits and digits before letters; letters compare without
    regard to case, with lowercase first on ties.
    """
    key = []
    for chunk in _CHUNKS.split(value or ""):
        if not chunk:
            continue
        if chunk.isdecimal():
            key.append((1, int(chunk), ""))
        else:
            rank = 2 if chunk[0].isalnum() else 0
            key.append((rank, 0, chunk.casefold() + "\x00" + chunk.swapcase()))
    return tuple(key)
