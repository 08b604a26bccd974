"""Document identity extraction (title, version, SOP id, department)."""

import re
from typing import Optional

from ..models.document import DocumentMetadata
from .patterns import first_capture


NOT_AVAILABLE = "N/A"
TITLE_MAX_LENGTH = 200
TITLE_SEARCH_LINES = 10

SOP_ID_PATTERNS = [
    re.compile(r"SOP[-\s]?ID:?\s*([A-Z0-9-]+)", re.IGNORECASE),
    re.compile(r"Document\s*(?:ID|Number|No\.?):?\s*([A-Z0-9-]+)", re.IGNORECASE),
    re.compile(r"SOP[-\s]?(?:No\.?|Number):?\s*([A-Z0-9-]+)", re.IGNORECASE),
    re.compile(r"([A-Z]{2,4}-[A-Z]{2,4}-\d{4}-\d{3})"),  # SOP-QC-2024-089
]

FILENAME_SOP_ID_PATTERN = re.compile(
    r"([A-Z]{2,4}[-_][A-Z]{2,4}[-_]\d{4}[-_]\d{3})", re.IGNORECASE
)

VERSION_PATTERNS = [
    re.compile(r"Version:?\s*([\d.]+)", re.IGNORECASE),
    re.compile(r"Rev(?:ision)?\.?:?\s*([\d.]+)", re.IGNORECASE),
    re.compile(r"v([\d.]+)", re.IGNORECASE),
]

TITLE_PATTERNS = [
    re.compile(r"Title:?\s*(.+?)(?:\n|$)", re.IGNORECASE),
    re.compile(r"^(.+?Standard Operating Procedure.+?)(?:\n|$)", re.IGNORECASE | re.MULTILINE),
    re.compile(r"SOP:?\s*(.+?)(?:\n|$)", re.IGNORECASE),
]

DEPARTMENT_PATTERNS = [
    re.compile(r"Department:?\s*(.+?)(?:\n|$)", re.IGNORECASE),
    re.compile(r"Dept\.?:?\s*(.+?)(?:\n|$)", re.IGNORECASE),
]


def extract_sop_id(text: str, filename: str = "") -> str:
    """
    Find the SOP / document identifier.

    Searches the text first, then the filename for a structured code
    (underscores normalized to hyphens). Always returns a value.
    """
    sop_id = first_capture(SOP_ID_PATTERNS, text)
    if sop_id:
        return sop_id

    match = FILENAME_SOP_ID_PATTERN.search(filename or "")
    if match:
        return match.group(1).replace("_", "-")
    return NOT_AVAILABLE


def extract_version(text: str) -> Optional[str]:
    """Find the document version number."""
    return first_capture(VERSION_PATTERNS, text)


def title_from_filename(filename: str) -> Optional[str]:
    """Derive a title from a filename by dropping the extension and separators."""
    stem = re.sub(r"\.[^.]+$", "", filename or "")
    title = re.sub(r"[_-]", " ", stem)
    return title or None


def extract_title(text: str, filename: str = "") -> Optional[str]:
    """
    Find the document title in the first lines of text.

    Candidates of ``TITLE_MAX_LENGTH`` characters or more are skipped.
    Falls back to the filename when the text yields nothing.
    """
    head = " ".join(text.split("\n")[:TITLE_SEARCH_LINES])
    candidate = first_capture(
        TITLE_PATTERNS,
        head,
        accept=lambda value: len(value) < TITLE_MAX_LENGTH,
    )
    title = candidate.strip() if candidate else ""
    return title or title_from_filename(filename)


def extract_department(text: str) -> Optional[str]:
    """Find the owning department."""
    department = first_capture(DEPARTMENT_PATTERNS, text)
    return department.strip() if department else None


def extract_metadata(text: str, filename: str = "") -> DocumentMetadata:
    """
    Extract document identity fields from raw text and filename.

    Each field is resolved independently; unmatched fields stay None
    except ``sop_id``, which defaults to ``"N/A"``.
    """
    text = text or ""
    return DocumentMetadata(
        title=extract_title(text, filename),
        version=extract_version(text),
        sop_id=extract_sop_id(text, filename),
        department=extract_department(text),
    )
