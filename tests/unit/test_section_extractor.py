"""Unit tests for heading-based section extraction."""

import re

import pytest

from sop_revision_review.extractors import SectionExtractor, extract_sections, section_level
from sop_revision_review.extractors.section_extractor import PREAMBLE_ID, PREAMBLE_TITLE


class TestHeadingPatterns:
    """Tests for the recognized heading shapes."""

    def test_numbered_headings(self):
        """Test that '1. Title' lines open sections keyed by their number."""
        text = "1. Purpose\nThis SOP defines cleaning steps.\n2. Scope\nApplies to all lab equipment."

        sections = extract_sections(text)

        assert [s.id for s in sections] == ["1", "2"]
        assert [s.title for s in sections] == ["Purpose", "Scope"]
        assert sections[0].content == "This SOP defines cleaning steps."
        assert sections[1].content == "Applies to all lab equipment."

    def test_nested_numbered_headings(self):
        """Test dotted numbers and their nesting levels."""
        text = "1.1 Preparation\nGather materials.\n1.1.2 Rinse\nRinse twice."

        sections = extract_sections(text)

        assert [(s.id, s.level) for s in sections] == [("1.1", 2), ("1.1.2", 3)]
        assert sections[1].title == "Rinse"

    def test_section_keyword_heading(self):
        """Test 'Section N:' headings."""
        sections = extract_sections("Section 3: Equipment\nUse the calibrated balance.")

        assert len(sections) == 1
        assert sections[0].id == "Section 3"
        assert sections[0].title == "Equipment"
        assert sections[0].level == 1

    def test_lettered_headings(self):
        """Test 'A.' and 'A.1' headings."""
        sections = extract_sections("A. General\nIntro text.\nA.1 Details\nMore text.")

        assert [(s.id, s.title, s.level) for s in sections] == [
            ("A", "General", 1),
            ("A.1", "Details", 2),
        ]

    def test_bare_keyword_headings(self):
        """Test lone keywords such as 'Purpose' and 'Scope:'."""
        sections = extract_sections("Purpose\nWhy this exists.\nScope:\nWhere it applies.")

        assert [s.id for s in sections] == ["Purpose", "Scope"]
        assert sections[0].title == "Purpose"
        assert sections[1].content == "Where it applies."

    def test_keyword_heading_is_case_insensitive(self):
        """Test that keyword headings ignore case."""
        sections = extract_sections("RESPONSIBILITIES\nEveryone.")

        assert sections[0].id == "RESPONSIBILITIES"

    def test_custom_patterns(self):
        """Test that an extractor can run with its own pattern list."""
        extractor = SectionExtractor(patterns=[re.compile(r"^#\s*(\w+)\s+(.+)$")])

        sections = extractor.extract("# one First\nbody\n1. Not a heading here")

        assert len(sections) == 1
        assert sections[0].id == "one"
        assert sections[0].content == "body\n1. Not a heading here"


class TestSectionBodies:
    """Tests for section content assembly."""

    def test_preamble_before_first_heading(self):
        """Test that leading text becomes a level-0 preamble section."""
        text = "Standard Operating Procedure\nIssued by Quality\n1. Purpose\nText."

        sections = extract_sections(text)

        assert sections[0].id == PREAMBLE_ID
        assert sections[0].title == PREAMBLE_TITLE
        assert sections[0].level == 0
        assert sections[0].content == "Standard Operating Procedure\nIssued by Quality"
        assert sections[1].id == "1"

    def test_text_without_headings_is_single_preamble(self):
        """Test that unstructured text degrades to one preamble section."""
        sections = extract_sections("just some words\nand more words")

        assert len(sections) == 1
        assert sections[0].id == PREAMBLE_ID
        assert sections[0].content == "just some words\nand more words"

    def test_blank_lines_skipped_and_lines_trimmed(self):
        """Test that blank lines vanish and body lines are trimmed."""
        sections = extract_sections("1. Purpose\n\n   Indented line   \n\t\nSecond line")

        assert sections[0].content == "Indented line\nSecond line"

    def test_heading_without_body(self):
        """Test that a heading followed directly by another has empty content."""
        sections = extract_sections("1. Purpose\n2. Scope\nBody.")

        assert sections[0].content == ""
        assert sections[1].content == "Body."

    def test_duplicate_headings_kept_in_order(self):
        """Test that repeated ids produce separate sections."""
        sections = extract_sections("1. First\nOne.\n1. Again\nTwo.")

        assert [s.title for s in sections] == ["First", "Again"]

    @pytest.mark.parametrize("text", ["", "   ", "\n\n\t\n"])
    def test_empty_text(self, text):
        """Test that empty or blank text yields no sections."""
        assert extract_sections(text) == []

    def test_none_text(self):
        """Test that None is treated as empty text."""
        assert SectionExtractor().extract(None) == []

    def test_windows_line_endings(self):
        """Test that CRLF input splits like LF input."""
        sections = extract_sections("1. Purpose\r\nBody line.\r\n2. Scope\r\nOther.")

        assert [s.content for s in sections] == ["Body line.", "Other."]

    def test_only_newlines_split_lines(self):
        """Test that form feeds and line separators stay inside a line."""
        sections = extract_sections("1. Purpose\nend of page\x0c2. Scope\nbody\u2028more")

        assert [s.id for s in sections] == ["1"]
        assert sections[0].content == "end of page\x0c2. Scope\nbody\u2028more"


class TestSectionLevel:
    """Tests for section level derivation."""

    @pytest.mark.parametrize("section_id,level", [
        ("1", 1),
        ("1.2", 2),
        ("1.2.3", 3),
        ("Section 3", 1),
        ("A.1", 2),
    ])
    def test_level_from_dots(self, section_id, level):
        """Test that level is one plus the number of dots."""
        assert section_level(section_id) == level
