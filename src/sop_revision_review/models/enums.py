"""Enumerations for the SOP Revision Review System."""

from enum import Enum


class DocumentFormat(Enum):
    """Source file formats accepted at the text-extraction boundary."""
    WORD = "docx"
    LEGACY_WORD = "doc"
    PDF = "pdf"


class ChangeType(Enum):
    """Kinds of section-level change between two document versions."""
    ADDED = "added"
    REMOVED = "removed"
    MODIFIED = "modified"
