"""Heading-based section extraction for semi-structured document text."""

import logging
import re
from typing import List, Optional

from ..models.document import DocumentSection
from .patterns import first_regex_match

logger = logging.getLogger(__name__)


PREAMBLE_ID = "Preamble"
PREAMBLE_TITLE = "Document Header"

# Tried in order; the first pattern that matches a line wins.
HEADING_PATTERNS = [
    # 1. / 1.1 / 1.1.1 Title
    re.compile(r"^(\d+\.?\d*\.?\d*)\s+(.+)$"),
    # Section 3: Title
    re.compile(r"^(Section\s+\d+):?\s*(.+)$", re.IGNORECASE),
    # A. / A.1 Title
    re.compile(r"^([A-Z]{1,3}\.?\d*\.?\d*)\s+(.+)$"),
    # Bare keyword on a line of its own
    re.compile(
        r"^(Purpose|Scope|Procedure|Responsibilities|References|Definitions|"
        r"Equipment|Materials|Safety|Quality|Documentation):?\s*$",
        re.IGNORECASE,
    ),
]


def section_level(section_id: str) -> int:
    """Return the nesting depth of a section id: one plus its dot count."""
    return section_id.count(".") + 1


def _heading_id(raw_id: Optional[str], counter: int) -> str:
    # "1." and "A." are written forms of "1" and "A"
    section_id = (raw_id or "").rstrip(".")
    return section_id or f"Section {counter}"


class SectionExtractor:
    """
    Splits document text into sections at recognized heading lines.

    Each non-empty, trimmed line is tested against ``HEADING_PATTERNS``.
    A matching line opens a new section; any other line is appended to
    the open section. Text before the first heading goes into a level-0
    preamble section. Extraction never raises.
    """

    def __init__(self, patterns: Optional[List[re.Pattern]] = None):
        self.patterns = patterns or HEADING_PATTERNS

    def extract(self, text: str) -> List[DocumentSection]:
        """
        Extract ordered sections from raw text.

        Args:
            text: Raw document text.

        Returns:
            Sections in source order. Empty for text with no content.
        """
        sections: List[DocumentSection] = []
        current: Optional[DocumentSection] = None
        lines: List[str] = []
        counter = 0

        for line in (text or "").split("\n"):
            stripped = line.strip()
            if not stripped:
                continue

            match = first_regex_match(self.patterns, stripped)
            if match:
                if current is not None:
                    current.content = "\n".join(lines)
                    sections.append(current)
                counter += 1
                section_id = _heading_id(match.group(1), counter)
                title = self._heading_title(match) or stripped
                current = DocumentSection(
                    id=section_id,
                    title=title,
                    content="",
                    level=section_level(section_id),
                )
                lines = []
            elif current is not None:
                lines.append(stripped)
            elif not sections:
                current = DocumentSection(
                    id=PREAMBLE_ID,
                    title=PREAMBLE_TITLE,
                    content="",
                    level=0,
                )
                lines = [stripped]

        if current is not None:
            current.content = "\n".join(lines)
            sections.append(current)

        logger.debug(f"Extracted {len(sections)} sections")
        return sections

    @staticmethod
    def _heading_title(match: re.Match) -> Optional[str]:
        groups = match.groups()
        if len(groups) >= 2 and groups[1]:
            return groups[1]
        return groups[0] if groups else None


def extract_sections(text: str) -> List[DocumentSection]:
    """Extract ordered sections from raw text with the default heading patterns."""
    return SectionExtractor().extract(text)
