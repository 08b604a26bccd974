"""Serialization and deserialization utilities for extracted documents and results."""

import json
from typing import Any

from ..models.comparison import ComparisonResult, ComparisonSummary, SectionChange
from ..models.document import DocumentMetadata, DocumentSection, ExtractedDocument
from ..models.enums import ChangeType
from ..models.impact import TrainingImpactReportData


class DocumentSerializer:
    """
    Handles JSON serialization of ExtractedDocument and ComparisonResult.

    Ensures round-trip consistency: deserialize(serialize(doc)) == doc
    for both structures.
    """

    @staticmethod
    def serialize(doc: ExtractedDocument) -> str:
        """Serialize an ExtractedDocument to a JSON string."""
        return json.dumps(
            DocumentSerializer._doc_to_dict(doc),
            ensure_ascii=False,
            indent=2
        )

    @staticmethod
    def deserialize(json_str: str) -> ExtractedDocument:
        """
        Deserialize a JSON string to an ExtractedDocument.

        Raises:
            ValueError: If the JSON is invalid or malformed.
        """
        return DocumentSerializer._dict_to_doc(DocumentSerializer._load(json_str))

    @staticmethod
    def serialize_comparison(result: ComparisonResult) -> str:
        """Serialize a ComparisonResult, including both documents, to JSON."""
        return json.dumps(
            DocumentSerializer._comparison_to_dict(result),
            ensure_ascii=False,
            indent=2
        )

    @staticmethod
    def deserialize_comparison(json_str: str) -> ComparisonResult:
        """
        Deserialize a JSON string to a ComparisonResult.

        Raises:
            ValueError: If the JSON is invalid or malformed.
        """
        data = DocumentSerializer._load(json_str)
        if not isinstance(data, dict):
            raise ValueError("Expected dictionary for ComparisonResult")
        for key in ("old_document", "new_document", "changes"):
            if key not in data:
                raise ValueError(f"Missing required field: {key}")

        changes = [DocumentSerializer._dict_to_change(c) for c in data["changes"]]
        return ComparisonResult(
            old_document=DocumentSerializer._dict_to_doc(data["old_document"]),
            new_document=DocumentSerializer._dict_to_doc(data["new_document"]),
            changes=changes,
            summary=ComparisonSummary.from_changes(changes),
        )

    @staticmethod
    def serialize_report_data(data: TrainingImpactReportData) -> str:
        """Serialize report data to JSON for hand-off to other renderers."""
        return json.dumps(
            DocumentSerializer.report_data_to_dict(data),
            ensure_ascii=False,
            indent=2
        )

    @staticmethod
    def report_data_to_dict(data: TrainingImpactReportData) -> dict[str, Any]:
        """Convert report data to a JSON-compatible dictionary."""
        meta = data.metadata
        return {
            "metadata": {
                "document_title": meta.document_title,
                "document_id": meta.document_id,
                "previous_version": meta.previous_version,
                "new_version": meta.new_version,
                "effective_date": meta.effective_date,
                "comparison_date": meta.comparison_date,
                "department": meta.department,
            },
            "changes": [
                {
                    "section": c.section,
                    "section_number": c.section_number,
                    "section_title": c.section_title,
                    "change_type": c.change_type.value,
                    "previous_text": c.previous_text,
                    "new_text": c.new_text,
                    "training_flag": c.training_flag,
                    "badges": list(c.badges),
                    "descriptor": c.descriptor,
                }
                for c in data.changes
            ],
            "indicators": {
                "procedural_steps": data.indicators.procedural_steps,
                "safety_warnings": data.indicators.safety_warnings,
                "limits_specifications": data.indicators.limits_specifications,
                "frequency_timing": data.indicators.frequency_timing,
                "required_documentation": data.indicators.required_documentation,
                "role_responsibilities": data.indicators.role_responsibilities,
            },
            "summary": {
                "total_sections_changed": data.summary.total_sections_changed,
                "added": data.summary.added,
                "modified": data.summary.modified,
                "removed": data.summary.removed,
                "impacted_areas": list(data.summary.impacted_areas),
                "change_categories": list(data.summary.change_categories),
            },
        }

    @staticmethod
    def _load(json_str: str) -> Any:
        try:
            return json.loads(json_str)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON: {str(e)}")

    @staticmethod
    def _doc_to_dict(doc: ExtractedDocument) -> dict[str, Any]:
        """Convert ExtractedDocument to dictionary."""
        return {
            "filename": doc.filename,
            "text": doc.text,
            "sections": [DocumentSerializer._section_to_dict(s) for s in doc.sections],
            "metadata": doc.metadata.to_dict(),
        }

    @staticmethod
    def _dict_to_doc(data: dict[str, Any]) -> ExtractedDocument:
        """Convert dictionary to ExtractedDocument."""
        if not isinstance(data, dict):
            raise ValueError("Expected dictionary for ExtractedDocument")
        if "text" not in data:
            raise ValueError("Missing required field: text")

        metadata = data.get("metadata") or {}
        return ExtractedDocument(
            text=data["text"],
            sections=[
                DocumentSerializer._dict_to_section(s)
                for s in data.get("sections", [])
            ],
            metadata=DocumentMetadata(
                title=metadata.get("title"),
                version=metadata.get("version"),
                sop_id=metadata.get("sop_id"),
                department=metadata.get("department"),
            ),
            filename=data.get("filename", ""),
        )

    @staticmethod
    def _section_to_dict(section: DocumentSection) -> dict[str, Any]:
        """Convert DocumentSection to dictionary."""
        return {
            "id": section.id,
            "title": section.title,
            "content": section.content,
            "level": section.level,
        }

    @staticmethod
    def _dict_to_section(data: dict[str, Any]) -> DocumentSection:
        """Convert dictionary to DocumentSection."""
        for key in ("id", "title"):
            if key not in data:
                raise ValueError(f"Missing required section field: {key}")
        return DocumentSection(
            id=data["id"],
            title=data["title"],
            content=data.get("content", ""),
            level=int(data.get("level", 1)),
        )

    @staticmethod
    def _comparison_to_dict(result: ComparisonResult) -> dict[str, Any]:
        return {
            "old_document": DocumentSerializer._doc_to_dict(result.old_document),
            "new_document": DocumentSerializer._doc_to_dict(result.new_document),
            "changes": [
                {
                    "section_id": c.section_id,
                    "section_title": c.section_title,
                    "change_type": c.change_type.value,
                    "old_content": c.old_content,
                    "new_content": c.new_content,
                }
                for c in result.changes
            ],
            "summary": {
                "total_changes": result.summary.total_changes,
                "added": result.summary.added,
                "modified": result.summary.modified,
                "removed": result.summary.removed,
            },
        }

    @staticmethod
    def _dict_to_change(data: dict[str, Any]) -> SectionChange:
        try:
            change_type = ChangeType(data["change_type"])
        except (KeyError, ValueError) as e:
            raise ValueError(f"Invalid change_type in change: {e}")
        return SectionChange(
            section_id=data["section_id"],
            section_title=data.get("section_title", ""),
            change_type=change_type,
            old_content=data.get("old_content", ""),
            new_content=data.get("new_content", ""),
        )


def serialize_document(doc: ExtractedDocument) -> str:
    """Convenience function to serialize an ExtractedDocument."""
    return DocumentSerializer.serialize(doc)


def deserialize_document(json_str: str) -> ExtractedDocument:
    """Convenience function to deserialize an ExtractedDocument."""
    return DocumentSerializer.deserialize(json_str)
