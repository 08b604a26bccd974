"""Raw text to ExtractedDocument."""

from ..models.document import ExtractedDocument
from .metadata_extractor import extract_metadata
from .section_extractor import extract_sections


def extract_document(raw_text: str, filename: str = "") -> ExtractedDocument:
    """
    Build an ExtractedDocument from text produced by a file reader.

    Args:
        raw_text: Plain text of the document.
        filename: Original file name, used for metadata fallbacks.

    Returns:
        ExtractedDocument with sections and metadata.
    """
    raw_text = raw_text or ""
    return ExtractedDocument(
        text=raw_text,
        sections=extract_sections(raw_text),
        metadata=extract_metadata(raw_text, filename),
        filename=filename or "",
    )
