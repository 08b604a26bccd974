"""Training impact assessment export (.docx and plain text)."""

import logging
import re
from datetime import date
from pathlib import Path
from typing import List, Optional

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.shared import Pt, RGBColor

from ..config.models import ReportSettings
from ..models.enums import ChangeType
from ..models.impact import DocumentChange, TrainingImpactReportData


logger = logging.getLogger(__name__)


CHANGE_TYPE_LABELS = {
    ChangeType.ADDED: ("NEW", RGBColor(0x22, 0x8B, 0x22)),
    ChangeType.REMOVED: ("RETIRED", RGBColor(0xCC, 0x00, 0x00)),
    ChangeType.MODIFIED: ("REVISED", RGBColor(0xCC, 0x77, 0x00)),
}

CATEGORY_LABELS = {
    "documentation": "Documentation requirements",
    "roles": "Role responsibilities",
    "frequency": "Timing/frequency",
    "procedure": "Procedural steps",
}

HEADER_FILL = "2E5090"
LABEL_FILL = "F0F0F0"
SUMMARY_FILL = "F8F8F8"
MUTED = RGBColor(0x66, 0x66, 0x66)
EMPTY_TEXT = "—"


def excerpt(text: str, limit: int) -> str:
    """Cut text to ``limit`` characters, marking truncation with '...'."""
    if not text:
        return EMPTY_TEXT
    return text[:limit] + ("..." if len(text) > limit else "")


def category_label(badge: str) -> str:
    """Readable label for a change category badge."""
    return CATEGORY_LABELS.get(badge, badge)


def impacted_areas(data: TrainingImpactReportData, limit: int = 4) -> List[str]:
    """Areas named in the executive summary, falling back to change section titles."""
    if data.summary.impacted_areas:
        return list(data.summary.impacted_areas)
    titles = list(dict.fromkeys(c.section_title for c in data.changes))
    return titles[:limit]


def categories_text(data: TrainingImpactReportData) -> str:
    """Join category labels for the executive summary sentence."""
    badges = data.summary.change_categories or list(
        dict.fromkeys(b for c in data.changes for b in c.badges)
    )
    return " and ".join(category_label(b) for b in badges) or "procedural content"


def safety_sentence(data: TrainingImpactReportData) -> str:
    """Closing sentence of the executive summary on safety-related changes."""
    if data.indicators.safety_warnings:
        return "Safety-related content was identified in this revision."
    return "No changes were identified affecting safety warnings or operational limits."


class TrainingImpactReportExporter:
    """
    Renders TrainingImpactReportData as a Word document or plain text.

    The Word report has an administrative header, executive summary,
    training relevance indicators, revision summary, structured change
    table and sign-off table.
    """

    def __init__(
        self,
        output_dir: Optional[str] = None,
        settings: Optional[ReportSettings] = None,
    ):
        """
        Initialize the report exporter.

        Args:
            output_dir: Directory for exported files; defaults to the settings value.
            settings: Report settings.
        """
        self.settings = settings or ReportSettings()
        self.output_dir = Path(output_dir or self.settings.output_dir)

    def default_filename(
        self,
        data: TrainingImpactReportData,
        generated_on: Optional[date] = None,
        extension: str = "docx",
    ) -> str:
        """Build the report file name from document id, new version and date."""
        stamp = (generated_on or date.today()).isoformat()
        document_id = re.sub(r"[^\w.-]+", "_", data.metadata.document_id or "document")
        version = re.sub(r"[^\w.-]+", "_", data.metadata.new_version or "")
        return f"Training_Impact_Assessment_{document_id}_v{version}_{stamp}.{extension}"

    def build_document(
        self,
        data: TrainingImpactReportData,
        generated_on: Optional[date] = None,
    ):
        """
        Build the Word report in memory.

        Args:
            data: Report data.
            generated_on: Date printed in the footer; defaults to today.

        Returns:
            python-docx Document.
        """
        doc = Document()

        title = doc.add_heading("TRAINING IMPACT ASSESSMENT", level=0)
        title.alignment = WD_ALIGN_PARAGRAPH.CENTER
        subtitle = doc.add_paragraph("Document Revision Analysis")
        subtitle.alignment = WD_ALIGN_PARAGRAPH.CENTER

        self._add_header_table(doc, data)
        self._add_executive_summary(doc, data)
        self._add_indicators(doc, data)
        self._add_revision_summary(doc, data)

        doc.add_heading("STRUCTURED CHANGE TABLE", level=1)
        self._add_change_table(doc, data.changes)

        doc.add_heading("SIGN-OFF", level=1)
        self._add_sign_off_table(doc)

        stamp = (generated_on or date.today()).isoformat()
        footer = doc.add_paragraph()
        footer.alignment = WD_ALIGN_PARAGRAPH.CENTER
        run = footer.add_run(f"Generated: {stamp} | {self.settings.footer_label}")
        run.font.size = Pt(9)
        run.font.color.rgb = RGBColor(0x99, 0x99, 0x99)

        return doc

    def export_docx(
        self,
        data: TrainingImpactReportData,
        output_path: Optional[str] = None,
        generated_on: Optional[date] = None,
    ) -> str:
        """
        Export the report as a .docx file.

        Args:
            data: Report data.
            output_path: Optional output path; defaults to a generated name in output_dir.
            generated_on: Date used in the file name and footer.

        Returns:
            Path to the exported file.
        """
        if output_path is None:
            output_path = str(self.output_dir / self.default_filename(data, generated_on))

        doc = self.build_document(data, generated_on)
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)
        doc.save(output_path)

        logger.info(f"Exported training impact report to: {output_path}")
        return output_path

    def generate_text_report(
        self,
        data: TrainingImpactReportData,
        generated_on: Optional[date] = None,
    ) -> str:
        """
        Generate a plain-text rendering of the report.

        Args:
            data: Report data.
            generated_on: Date printed in the header; defaults to today.

        Returns:
            Report as a string.
        """
        meta = data.metadata
        summary = data.summary
        stamp = (generated_on or date.today()).isoformat()
        limit = self.settings.excerpt_length

        lines = [
            "=" * 60,
            "TRAINING IMPACT ASSESSMENT",
            f"Generated: {stamp}",
            "=" * 60,
            f"Document Title: {meta.document_title or 'N/A'}",
            f"Document ID: {meta.document_id or 'N/A'}",
            f"Previous Version: {meta.previous_version or 'N/A'}",
            f"New Version: {meta.new_version or 'N/A'}",
            f"Effective Date: {meta.effective_date or 'N/A'}",
            f"Assessment Date: {meta.comparison_date or 'N/A'}",
            f"Department: {meta.department or 'N/A'}",
            "",
            "EXECUTIVE SUMMARY",
            f"A total of {summary.total_sections_changed} section(s) were impacted in this revision.",
        ]
        lines.extend(f"  • {area}" for area in impacted_areas(data, self.settings.impacted_area_limit))
        lines.extend([
            f"The majority of changes relate to {categories_text(data)}. {safety_sentence(data)}",
            "",
            "TRAINING RELEVANCE INDICATORS",
        ])
        lines.extend(
            f"  [{'x' if checked else ' '}] {label}"
            for label, checked in data.indicators.as_labeled_items()
        )
        lines.extend([
            "",
            "REVISION SUMMARY",
            f"  Sections Impacted: {summary.total_sections_changed}",
            f"  New Content: {summary.added}",
            f"  Revised Content: {summary.modified}",
            f"  Retired Content: {summary.removed}",
            "",
        ])

        for i, change in enumerate(data.changes, 1):
            label, _ = CHANGE_TYPE_LABELS[change.change_type]
            lines.extend([
                f"Change #{i}: {change.section}",
                f"  Type: {label}",
                f"  Summary: {change.descriptor or change.training_flag}",
                f"  Training Flag: {change.training_flag}",
                f"  Previous: {excerpt(change.previous_text, limit)}",
                f"  Current: {excerpt(change.new_text, limit)}",
                "",
            ])

        lines.extend([
            "=" * 60,
            self.settings.disclaimer,
            "=" * 60,
        ])
        return "\n".join(lines)

    def export_text_report(
        self,
        data: TrainingImpactReportData,
        output_path: Optional[str] = None,
        generated_on: Optional[date] = None,
    ) -> str:
        """
        Export the plain-text report to a file.

        Returns:
            Path to the exported report.
        """
        if output_path is None:
            output_path = str(self.output_dir / self.default_filename(data, generated_on, "txt"))

        report = self.generate_text_report(data, generated_on)

        Path(output_path).parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(report)

        logger.info(f"Exported text report to: {output_path}")
        return output_path

    # ------------------------------------------------------------------
    # Word building blocks
    # ------------------------------------------------------------------

    def _add_header_table(self, doc, data: TrainingImpactReportData) -> None:
        meta = data.metadata
        rows = [
            ("Document Title", meta.document_title),
            ("Document ID", meta.document_id),
            ("Previous Version", meta.previous_version),
            ("New Version", meta.new_version),
            ("Effective Date", meta.effective_date),
            ("Assessment Date", meta.comparison_date),
            ("Department", meta.department),
            ("Assessment Method", self.settings.assessment_method),
        ]
        table = doc.add_table(rows=0, cols=2)
        table.style = "Table Grid"
        for label, value in rows:
            cells = table.add_row().cells
            cells[0].paragraphs[0].add_run(label).bold = True
            self._shade(cells[0], LABEL_FILL)
            cells[1].paragraphs[0].add_run(value or "N/A")

    def _add_executive_summary(self, doc, data: TrainingImpactReportData) -> None:
        doc.add_heading("EXECUTIVE SUMMARY", level=1)
        doc.add_paragraph(
            "This Training Impact Assessment evaluates changes between the previous "
            "and current versions of the document identified above."
        )

        para = doc.add_paragraph("A total of ")
        para.add_run(f"{data.summary.total_sections_changed} section(s)").bold = True
        para.add_run(" were impacted in this revision. Changes were identified in the following areas:")

        for area in impacted_areas(data, self.settings.impacted_area_limit):
            doc.add_paragraph(area, style="List Bullet")

        para = doc.add_paragraph("The majority of changes relate to ")
        para.add_run(categories_text(data)).bold = True
        para.add_run(f". {safety_sentence(data)}")

        disclaimer = doc.add_paragraph()
        run = disclaimer.add_run(self.settings.disclaimer)
        run.italic = True
        run.font.color.rgb = MUTED

    def _add_indicators(self, doc, data: TrainingImpactReportData) -> None:
        doc.add_heading("TRAINING RELEVANCE INDICATORS", level=1)
        doc.add_paragraph("Objective training relevance indicators identified in this revision:")
        for label, checked in data.indicators.as_labeled_items():
            para = doc.add_paragraph()
            box = para.add_run("☑" if checked else "☐")
            box.font.size = Pt(14)
            para.add_run(f"  {label}")

        note = doc.add_paragraph()
        note.add_run("Note: ").bold = True
        note.add_run(
            "These indicators are provided to support the training decision. The "
            "determination of whether retraining is required remains with Quality, "
            "L&D, and the Process Owner."
        ).italic = True

    def _add_revision_summary(self, doc, data: TrainingImpactReportData) -> None:
        doc.add_heading("REVISION SUMMARY", level=1)
        summary = data.summary
        cells_data = [
            ("Sections Impacted", summary.total_sections_changed),
            ("New Content", summary.added),
            ("Revised Content", summary.modified),
            ("Retired Content", summary.removed),
        ]
        table = doc.add_table(rows=1, cols=len(cells_data))
        table.style = "Table Grid"
        for cell, (label, value) in zip(table.rows[0].cells, cells_data):
            self._shade(cell, SUMMARY_FILL)
            value_para = cell.paragraphs[0]
            value_para.alignment = WD_ALIGN_PARAGRAPH.CENTER
            value_run = value_para.add_run(str(value))
            value_run.bold = True
            value_run.font.size = Pt(16)
            label_para = cell.add_paragraph()
            label_para.alignment = WD_ALIGN_PARAGRAPH.CENTER
            label_run = label_para.add_run(label)
            label_run.font.size = Pt(9)
            label_run.font.color.rgb = MUTED

    def _add_change_table(self, doc, changes: List[DocumentChange]) -> None:
        headers = ["Section", "Type", "Change Summary", "Previous Text", "Current Text", "Flag"]
        table = doc.add_table(rows=1, cols=len(headers))
        table.style = "Table Grid"
        self._fill_header_row(table.rows[0].cells, headers)

        limit = self.settings.excerpt_length
        for change in changes:
            cells = table.add_row().cells
            cells[0].paragraphs[0].add_run(change.section).bold = True

            label, color = CHANGE_TYPE_LABELS[change.change_type]
            type_run = cells[1].paragraphs[0].add_run(label)
            type_run.bold = True
            type_run.font.color.rgb = color

            summary_run = cells[2].paragraphs[0].add_run(change.descriptor or change.training_flag)
            summary_run.bold = True
            summary_run.font.size = Pt(10)

            for cell, text in ((cells[3], change.previous_text), (cells[4], change.new_text)):
                run = cell.paragraphs[0].add_run(excerpt(text, limit))
                run.font.size = Pt(9)
                run.font.color.rgb = RGBColor(0x44, 0x44, 0x44)

            flag_para = cells[5].paragraphs[0]
            flag_para.alignment = WD_ALIGN_PARAGRAPH.CENTER
            flag_run = flag_para.add_run("●")
            flag_run.font.color.rgb = (
                RGBColor(0xCC, 0x00, 0x00) if "Safety" in change.training_flag
                else RGBColor(0x2E, 0x50, 0x90)
            )

    def _add_sign_off_table(self, doc) -> None:
        headers = ["Role", "Name", "Decision", "Date"]
        table = doc.add_table(rows=1, cols=len(headers))
        table.style = "Table Grid"
        self._fill_header_row(table.rows[0].cells, headers)

        for sign_off in self.settings.sign_off_roles:
            cells = table.add_row().cells
            cells[0].paragraphs[0].add_run(sign_off.role).bold = True
            decision = cells[2].paragraphs[0].add_run(sign_off.decision_placeholder)
            decision.italic = True
            decision.font.color.rgb = RGBColor(0x99, 0x99, 0x99)

    def _fill_header_row(self, cells, headers: List[str]) -> None:
        for cell, text in zip(cells, headers):
            run = cell.paragraphs[0].add_run(text)
            run.bold = True
            run.font.color.rgb = RGBColor(0xFF, 0xFF, 0xFF)
            self._shade(cell, HEADER_FILL)

    @staticmethod
    def _shade(cell, fill: str) -> None:
        """Set a table cell's background color."""
        shading = OxmlElement("w:shd")
        shading.set(qn("w:val"), "clear")
        shading.set(qn("w:color"), "auto")
        shading.set(qn("w:fill"), fill)
        cell._tc.get_or_add_tcPr().append(shading)
