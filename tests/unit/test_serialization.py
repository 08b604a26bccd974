"""Unit tests for JSON serialization of documents and results."""

import json

import pytest

from sop_revision_review.comparison import compare_documents
from sop_revision_review.extractors import extract_document
from sop_revision_review.impact import build_report_data
from sop_revision_review.models import ChangeType, ComparisonMetadata
from sop_revision_review.parsers import DocumentSerializer, deserialize_document, serialize_document


OLD_TEXT = "Version: 1.0\n1. Purpose\nClean the bench weekly.\n2. Scope\nLab 4 only."
NEW_TEXT = "Version: 2.0\n1. Purpose\nClean the bench daily.\n3. Records\nRecord results."


@pytest.fixture
def documents():
    return (
        extract_document(OLD_TEXT, "SOP_QC_2024_001.docx"),
        extract_document(NEW_TEXT, "SOP_QC_2024_001.docx"),
    )


class TestDocumentSerialization:
    """Tests for ExtractedDocument JSON round trips."""

    def test_round_trip(self, documents):
        """Test that a document survives serialization unchanged."""
        doc = documents[0]

        assert deserialize_document(serialize_document(doc)) == doc

    def test_unicode_preserved(self):
        """Test that non-ASCII text is written as-is."""
        doc = extract_document("1. Limits\nStore at 5 °C – 8 °C.", "limits.docx")

        json_str = serialize_document(doc)

        assert "°C –" in json_str
        assert deserialize_document(json_str) == doc

    def test_invalid_json(self):
        """Test that malformed JSON raises ValueError."""
        with pytest.raises(ValueError, match="Invalid JSON"):
            deserialize_document("{not json")

    def test_missing_text(self):
        """Test that a document without text is rejected."""
        with pytest.raises(ValueError, match="text"):
            deserialize_document(json.dumps({"sections": []}))

    def test_missing_section_field(self):
        """Test that sections need an id and title."""
        payload = {"text": "", "sections": [{"title": "Purpose"}]}

        with pytest.raises(ValueError, match="id"):
            deserialize_document(json.dumps(payload))


class TestComparisonSerialization:
    """Tests for ComparisonResult JSON round trips."""

    def test_round_trip(self, documents):
        """Test that a comparison survives serialization unchanged."""
        result = compare_documents(*documents)

        restored = DocumentSerializer.deserialize_comparison(
            DocumentSerializer.serialize_comparison(result)
        )

        assert restored == result

    def test_change_type_written_as_value(self, documents):
        """Test that change types are stored by their string value."""
        data = json.loads(DocumentSerializer.serialize_comparison(compare_documents(*documents)))

        assert {c["change_type"] for c in data["changes"]} == {"added", "modified", "removed"}

    def test_invalid_change_type(self, documents):
        """Test that an unknown change type is rejected."""
        data = json.loads(DocumentSerializer.serialize_comparison(compare_documents(*documents)))
        data["changes"][0]["change_type"] = "renamed"

        with pytest.raises(ValueError, match="change_type"):
            DocumentSerializer.deserialize_comparison(json.dumps(data))

    def test_missing_document(self):
        """Test that both documents are required."""
        with pytest.raises(ValueError, match="old_document"):
            DocumentSerializer.deserialize_comparison(json.dumps({"changes": []}))


class TestReportDataSerialization:
    """Tests for report data export."""

    def test_report_data_dict(self, documents):
        """Test the shape of serialized report data."""
        result = compare_documents(*documents)
        data = build_report_data(result, ComparisonMetadata(document_id="QC-001"))

        payload = json.loads(DocumentSerializer.serialize_report_data(data))

        assert payload["metadata"]["document_id"] == "QC-001"
        assert payload["summary"]["total_sections_changed"] == len(result.changes)
        assert payload["indicators"]["frequency_timing"] is True
        assert payload["changes"][0]["change_type"] == ChangeType.MODIFIED.value
        assert payload["changes"][0]["section"] == "1 – Purpose"
