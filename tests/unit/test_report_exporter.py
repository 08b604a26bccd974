"""Unit tests for training impact report export."""

from datetime import date

import pytest
from docx import Document

from sop_revision_review.config import ReportSettings, SignOffRole
from sop_revision_review.generators import TrainingImpactReportExporter, category_label, excerpt
from sop_revision_review.models import (
    ChangeType,
    ComparisonMetadata,
    DocumentChange,
    ReportSummary,
    TrainingImpactReportData,
    TrainingIndicators,
)


GENERATED_ON = date(2026, 10, 17)


@pytest.fixture
def report_data():
    changes = [
        DocumentChange(
            section="1 – Purpose",
            section_number="1",
            section_title="Purpose",
            change_type=ChangeType.MODIFIED,
            previous_text="Clean the bench weekly.",
            new_text="Clean the bench daily.",
            training_flag="Frequency change",
            badges=["frequency"],
            descriptor="Frequency wording modified (weekly → daily)",
        ),
        DocumentChange(
            section="3 – Safety",
            section_number="3",
            section_title="Safety",
            change_type=ChangeType.REMOVED,
            previous_text="Wear gloves.",
            new_text="",
            training_flag="Content removed",
            badges=["procedure"],
            descriptor="Content retired from this section",
        ),
    ]
    return TrainingImpactReportData(
        metadata=ComparisonMetadata(
            document_title="Bench Cleaning",
            document_id="SOP-QC-2024-001",
            previous_version="1.0",
            new_version="2.0",
            effective_date="2026-11-01",
            comparison_date="2026-10-17",
        ),
        changes=changes,
        indicators=TrainingIndicators(frequency_timing=True),
        summary=ReportSummary(
            total_sections_changed=2,
            modified=1,
            removed=1,
            impacted_areas=["Purpose", "Safety"],
            change_categories=["frequency", "procedure"],
        ),
    )


def all_text(doc):
    """Collect paragraph and table cell text of a Word document."""
    parts = [p.text for p in doc.paragraphs]
    for table in doc.tables:
        for row in table.rows:
            parts.extend(cell.text for cell in row.cells)
    return "\n".join(parts)


class TestHelpers:
    """Tests for report text helpers."""

    def test_excerpt(self):
        """Test truncation and the empty placeholder."""
        assert excerpt("short", 10) == "short"
        assert excerpt("abcdefghij", 4) == "abcd..."
        assert excerpt("", 10) == "—"

    def test_category_label(self):
        """Test readable category labels."""
        assert category_label("frequency") == "Timing/frequency"
        assert category_label("roles") == "Role responsibilities"
        assert category_label("other") == "other"


class TestDocxExport:
    """Tests for Word report export."""

    def test_default_filename(self, report_data):
        """Test the generated file name."""
        exporter = TrainingImpactReportExporter()

        name = exporter.default_filename(report_data, GENERATED_ON)

        assert name == "Training_Impact_Assessment_SOP-QC-2024-001_v2.0_2026-10-17.docx"

    def test_export_docx(self, report_data, tmp_path):
        """Test that the exported file reopens with every report part."""
        exporter = TrainingImpactReportExporter(output_dir=str(tmp_path))

        path = exporter.export_docx(report_data, generated_on=GENERATED_ON)

        assert path.endswith("Training_Impact_Assessment_SOP-QC-2024-001_v2.0_2026-10-17.docx")
        doc = Document(path)
        text = all_text(doc)
        for heading in (
            "TRAINING IMPACT ASSESSMENT",
            "EXECUTIVE SUMMARY",
            "TRAINING RELEVANCE INDICATORS",
            "REVISION SUMMARY",
            "STRUCTURED CHANGE TABLE",
            "SIGN-OFF",
        ):
            assert heading in text
        assert "Bench Cleaning" in text
        assert "Generated: 2026-10-17 | Document Revision Impact Review" in text
        assert "☑  Frequency or timing" in text
        assert "☐  Safety / warnings" in text

    def test_change_table_rows(self, report_data, tmp_path):
        """Test one change table row per change."""
        exporter = TrainingImpactReportExporter(output_dir=str(tmp_path))
        doc = Document(exporter.export_docx(report_data, generated_on=GENERATED_ON))

        header_table, summary_table, change_table, sign_off_table = doc.tables

        assert len(change_table.rows) == 1 + len(report_data.changes)
        row = [cell.text for cell in change_table.rows[2].cells]
        assert row[:3] == ["3 – Safety", "RETIRED", "Content retired from this section"]
        assert row[4] == "—"
        assert [r.cells[0].text for r in sign_off_table.rows[1:]] == ["Process Owner", "Quality", "L&D"]
        assert header_table.rows[6].cells[1].text == "N/A"

    def test_settings_shape_report(self, report_data, tmp_path):
        """Test that configured sign-off roles and excerpt length are used."""
        settings = ReportSettings(
            excerpt_length=5,
            sign_off_roles=[SignOffRole("Trainer", "Done / Pending")],
        )
        exporter = TrainingImpactReportExporter(output_dir=str(tmp_path), settings=settings)

        doc = Document(exporter.export_docx(report_data, generated_on=GENERATED_ON))
        change_table, sign_off_table = doc.tables[2], doc.tables[3]

        assert change_table.rows[1].cells[3].text == "Clean..."
        assert len(sign_off_table.rows) == 2
        assert sign_off_table.rows[1].cells[2].text == "Done / Pending"

    def test_explicit_output_path(self, report_data, tmp_path):
        """Test export to a caller-chosen path, creating parent directories."""
        target = tmp_path / "nested" / "report.docx"

        path = TrainingImpactReportExporter().export_docx(report_data, str(target))

        assert path == str(target)
        assert target.exists()


class TestTextReport:
    """Tests for the plain-text report."""

    def test_text_report_content(self, report_data):
        """Test the main lines of the text report."""
        report = TrainingImpactReportExporter().generate_text_report(report_data, GENERATED_ON)

        assert "Generated: 2026-10-17" in report
        assert "Document ID: SOP-QC-2024-001" in report
        assert "Department: N/A" in report
        assert "A total of 2 section(s) were impacted in this revision." in report
        assert "  • Purpose" in report
        assert "The majority of changes relate to Timing/frequency and Procedural steps." in report
        assert "No changes were identified affecting safety warnings or operational limits." in report
        assert "  [x] Frequency or timing" in report
        assert "  [ ] Safety / warnings" in report
        assert "Change #2: 3 – Safety" in report
        assert "  Type: RETIRED" in report
        assert "  Current: —" in report

    def test_safety_sentence(self, report_data):
        """Test the sentence used when safety content changed."""
        report_data.indicators.safety_warnings = True

        report = TrainingImpactReportExporter().generate_text_report(report_data, GENERATED_ON)

        assert "Safety-related content was identified in this revision." in report

    def test_category_fallback(self, report_data):
        """Test the category wording when no categories are known."""
        report_data.summary.change_categories = []
        for change in report_data.changes:
            change.badges = []

        report = TrainingImpactReportExporter().generate_text_report(report_data, GENERATED_ON)

        assert "relate to procedural content." in report

    def test_export_text_report(self, report_data, tmp_path):
        """Test writing the text report to disk."""
        exporter = TrainingImpactReportExporter(output_dir=str(tmp_path))

        path = exporter.export_text_report(report_data, generated_on=GENERATED_ON)

        assert path.endswith(".txt")
        with open(path, encoding="utf-8") as f:
            assert "TRAINING IMPACT ASSESSMENT" in f.read()
