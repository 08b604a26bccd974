"""Section-level comparison of two document versions.

Sections are aligned purely by their declared id. A section that is
renumbered between versions is reported as removed under the old id and
added under the new one.
"""

import logging
from typing import Dict, List

from ..models.comparison import ComparisonResult, ComparisonSummary, SectionChange
from ..models.document import DocumentSection, ExtractedDocument
from ..models.enums import ChangeType
from .normalization import natural_sort_key, normalize

logger = logging.getLogger(__name__)


def index_sections(sections: List[DocumentSection]) -> Dict[str, DocumentSection]:
    """
    Map section id to section in source order.

    When an id repeats, the last section with that id is kept.
    """
    indexed: Dict[str, DocumentSection] = {}
    for section in sections:
        indexed[section.id] = section
    return indexed


class DocumentComparator:
    """
    Compares two ExtractedDocuments section by section.

    Content equality is tested on normalized text, so differences in case
    or spacing alone do not count as changes. Unchanged sections produce
    no entry.
    """

    def compare(
        self,
        old_doc: ExtractedDocument,
        new_doc: ExtractedDocument,
    ) -> ComparisonResult:
        """
        Compare two document versions.

        Args:
            old_doc: The previous version.
            new_doc: The current version.

        Returns:
            ComparisonResult with changes sorted by section id in natural order.
        """
        old_sections = index_sections(old_doc.sections)
        new_sections = index_sections(new_doc.sections)
        changes: List[SectionChange] = []

        for section_id, old_section in old_sections.items():
            new_section = new_sections.get(section_id)
            if new_section is None:
                changes.append(SectionChange(
                    section_id=section_id,
                    section_title=old_section.title,
                    change_type=ChangeType.REMOVED,
                    old_content=old_section.content,
                    new_content="",
                ))
            elif normalize(old_section.content) != normalize(new_section.content):
                changes.append(SectionChange(
                    section_id=section_id,
                    section_title=old_section.title,
                    change_type=ChangeType.MODIFIED,
                    old_content=old_section.content,
                    new_content=new_section.content,
                ))

        for section_id, new_section in new_sections.items():
            if section_id not in old_sections:
                changes.append(SectionChange(
                    section_id=section_id,
                    section_title=new_section.title,
                    change_type=ChangeType.ADDED,
                    old_content="",
                    new_content=new_section.content,
                ))

        changes.sort(key=lambda change: natural_sort_key(change.section_id))
        summary = ComparisonSummary.from_changes(changes)

        logger.debug(
            f"Compared {len(old_sections)} old and {len(new_sections)} new sections: "
            f"{summary.added} added, {summary.modified} modified, {summary.removed} removed"
        )

        return ComparisonResult(
            old_document=old_doc,
            new_document=new_doc,
            changes=changes,
            summary=summary,
        )


def compare_documents(old_doc: ExtractedDocument, new_doc: ExtractedDocument) -> ComparisonResult:
    """Compare two document versions section by section."""
    return DocumentComparator().compare(old_doc, new_doc)
