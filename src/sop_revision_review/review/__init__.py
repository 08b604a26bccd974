"""Review helpers for the SOP Revision Review System."""

from .diff_highlighter import DiffHighlighter, DiffType, tokenize

__all__ = [
    "DiffHighlighter",
    "DiffType",
    "tokenize",
]
