"""Assembly of training impact report data from a comparison result."""

import logging
from datetime import date
from typing import List, Optional

from ..models.comparison import ComparisonResult, SectionChange
from ..models.document import ExtractedDocument
from ..models.impact import (
    ComparisonMetadata,
    DocumentChange,
    ReportSummary,
    TrainingImpactReportData,
)
from .classifier import (
    categorize_change,
    detect_change_badges,
    detect_training_indicators,
    generate_change_descriptor,
)

logger = logging.getLogger(__name__)

DEFAULT_IMPACTED_AREA_LIMIT = 4


def _unique(values: List[str]) -> List[str]:
    return list(dict.fromkeys(values))


def to_document_change(change: SectionChange) -> DocumentChange:
    """Enrich a section change with its training flag, badges and descriptor."""
    categorization = categorize_change(change.old_content, change.new_content)
    return DocumentChange(
        section=f"{change.section_id} – {change.section_title}",
        section_number=change.section_id,
        section_title=change.section_title,
        change_type=categorization.change_type,
        previous_text=change.old_content,
        new_text=change.new_content,
        training_flag=categorization.training_flag,
        badges=detect_change_badges(change.old_content, change.new_content),
        descriptor=generate_change_descriptor(
            change.old_content, change.new_content, categorization.change_type
        ),
    )


def metadata_from_documents(
    old_doc: ExtractedDocument,
    new_doc: ExtractedDocument,
    effective_date: Optional[str] = None,
    comparison_date: Optional[str] = None,
) -> ComparisonMetadata:
    """
    Prefill report metadata from the two extracted documents.

    Title, id and department prefer the new version; versions come from
    their own side. Dates default to today.
    """
    today = date.today().isoformat()
    old_meta = old_doc.metadata
    new_meta = new_doc.metadata
    return ComparisonMetadata(
        document_title=new_meta.title or old_meta.title or "",
        document_id=new_meta.sop_id or old_meta.sop_id or "",
        previous_version=old_meta.version or "",
        new_version=new_meta.version or "",
        effective_date=effective_date or today,
        comparison_date=comparison_date or today,
        department=new_meta.department or old_meta.department,
    )


def build_report_data(
    result: ComparisonResult,
    metadata: Optional[ComparisonMetadata] = None,
    impacted_area_limit: int = DEFAULT_IMPACTED_AREA_LIMIT,
) -> TrainingImpactReportData:
    """
    Build the data consumed by the report renderers.

    Args:
        result: Comparison of two document versions.
        metadata: Caller-supplied metadata; prefilled from the documents if None.
        impacted_area_limit: Maximum number of section titles listed as impacted areas.

    Returns:
        TrainingImpactReportData with enriched changes, indicators and summary.
    """
    if metadata is None:
        metadata = metadata_from_documents(result.old_document, result.new_document)

    changes = [to_document_change(change) for change in result.changes]
    indicators = detect_training_indicators(changes)

    summary = ReportSummary(
        total_sections_changed=result.summary.total_changes,
        added=result.summary.added,
        modified=result.summary.modified,
        removed=result.summary.removed,
        impacted_areas=_unique([c.section_title for c in changes])[:impacted_area_limit],
        change_categories=_unique([badge for c in changes for badge in c.badges]),
    )

    logger.debug(f"Built report data for {len(changes)} changes")
    return TrainingImpactReportData(
        metadata=metadata,
        changes=changes,
        indicators=indicators,
        summary=summary,
    )
