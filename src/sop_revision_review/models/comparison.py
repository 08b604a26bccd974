"""Comparison result data models for the SOP Revision Review System."""

from dataclasses import dataclass, field
from typing import List

from .document import ExtractedDocument
from .enums import ChangeType


@dataclass
class SectionChange:
    """
    A single section that differs between two document versions.

    ``old_content`` is empty for added sections and ``new_content`` is
    empty for removed sections.
    """
    section_id: str
    section_title: str
    change_type: ChangeType
    old_content: str = ""
    new_content: str = ""


@dataclass
class ComparisonSummary:
    """Exact counts of changes by type."""
    total_changes: int = 0
    added: int = 0
    modified: int = 0
    removed: int = 0

    @classmethod
    def from_changes(cls, changes: List[SectionChange]) -> "ComparisonSummary":
        """Count changes by type."""
        added = sum(1 for c in changes if c.change_type == ChangeType.ADDED)
        modified = sum(1 for c in changes if c.change_type == ChangeType.MODIFIED)
        removed = sum(1 for c in changes if c.change_type == ChangeType.REMOVED)
        return cls(
            total_changes=len(changes),
            added=added,
            modified=modified,
            removed=removed,
        )


@dataclass
class ComparisonResult:
    """
    Result of comparing two versions of a document.

    Unchanged sections are not materialized; ``changes`` is sorted by
    section id in natural order.
    """
    old_document: ExtractedDocument
    new_document: ExtractedDocument
    changes: List[SectionChange] = field(default_factory=list)
    summary: ComparisonSummary = field(default_factory=ComparisonSummary)

    def __post_init__(self):
        if self.changes is None:
            self.changes = []
        if self.summary is None:
            self.summary = ComparisonSummary.from_changes(self.changes)

    def changes_of_type(self, change_type: ChangeType) -> List[SectionChange]:
        """Return the changes of the given type, in result order."""
        return [c for c in self.changes if c.change_type == change_type]

    @property
    def has_changes(self) -> bool:
        """Check if any section differs."""
        return len(self.changes) > 0
