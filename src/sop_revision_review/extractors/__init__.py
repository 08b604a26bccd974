"""Section and metadata extractors for the SOP Revision Review System."""

from .patterns import contains_any, first_capture, first_match, first_regex_match
from .section_extractor import (
    HEADING_PATTERNS,
    SectionExtractor,
    extract_sections,
    section_level,
)
from .metadata_extractor import (
    extract_department,
    extract_metadata,
    extract_sop_id,
    extract_title,
    extract_version,
    title_from_filename,
)
from .document_extractor import extract_document

__all__ = [
    "contains_any",
    "first_capture",
    "first_match",
    "first_regex_match",
    "HEADING_PATTERNS",
    "SectionExtractor",
    "extract_sections",
    "section_level",
    "extract_department",
    "extract_metadata",
    "extract_sop_id",
    "extract_title",
    "extract_version",
    "title_from_filename",
    "extract_document",
]
