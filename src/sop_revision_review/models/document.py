"""Document-related data models for the SOP Revision Review System."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class DocumentSection:
    """
    A labeled section of a semi-structured document.

    The ``id`` is the identifier as written in the source ("1.2",
    "Section 3", "A.1", "Purpose") and is the key used to align two
    versions of the same document. ``level`` is 0 for the synthetic
    preamble and ``1 + id.count(".")`` otherwise.
    """
    id: str
    title: str
    content: str = ""
    level: int = 1


@dataclass
class DocumentMetadata:
    """
    Identity fields pulled from a document's text and filename.

    Every field is optional; ``sop_id`` is set to ``"N/A"`` by the
    metadata extractor when nothing matches.
    """
    title: Optional[str] = None
    version: Optional[str] = None
    sop_id: Optional[str] = None
    department: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert metadata to a dictionary, keeping unset fields as None."""
        return {
            "title": self.title,
            "version": self.version,
            "sop_id": self.sop_id,
            "department": self.department,
        }


@dataclass
class ExtractedDocument:
    """
    Structured form of one uploaded document.

    Produced once per file and treated as immutable afterwards.
    """
    text: str
    sections: List[DocumentSection] = field(default_factory=list)
    metadata: DocumentMetadata = field(default_factory=DocumentMetadata)
    filename: str = ""

    def __post_init__(self):
        if self.sections is None:
            self.sections = []
        if self.metadata is None:
            self.metadata = DocumentMetadata()

    def section_ids(self) -> List[str]:
        """Return section ids in source order."""
        return [section.id for section in self.sections]
