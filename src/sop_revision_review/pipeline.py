"""End-to-end processing pipeline for the SOP Revision Review System.

This module wires the document readers, extractors, comparator, impact
classifier and report exporter together, taking two revisions of an SOP
from upload to a training impact assessment.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .comparison.comparator import DocumentComparator
from .config.config_manager import ConfigurationManager
from .extractors.document_extractor import extract_document
from .generators.report_exporter import TrainingImpactReportExporter
from .impact.report_builder import build_report_data
from .interfaces.parser import IDocumentParser
from .models.comparison import ComparisonResult
from .models.document import ExtractedDocument
from .models.impact import ComparisonMetadata, TrainingImpactReportData
from .parsers.base import DocumentParser
from .parsers.exceptions import DocumentCorruptedError, ErrorHandler, ParseError


logger = logging.getLogger(__name__)


@dataclass
class PipelineConfig:
    """Configuration for the processing pipeline."""

    # Output directory; falls back to the report settings when None
    output_dir: Optional[str] = None

    # Export formats
    export_docx: bool = True
    export_text: bool = False

    # Directory holding report.json
    config_dir: Optional[str] = None


@dataclass
class PipelineResult:
    """Result of a complete pipeline execution."""

    success: bool
    old_document: Optional[ExtractedDocument] = None
    new_document: Optional[ExtractedDocument] = None
    comparison: Optional[ComparisonResult] = None
    report_data: Optional[TrainingImpactReportData] = None
    report_paths: Dict[str, str] = field(default_factory=dict)
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    processing_time: float = 0.0
    metadata: Dict[str, Any] = field(default_factory=dict)


@dataclass
class PipelineStats:
    """Statistics about pipeline execution."""

    total_executions: int = 0
    successful_executions: int = 0
    failed_executions: int = 0
    average_processing_time: float = 0.0
    total_processing_time: float = 0.0


class RevisionReviewPipeline:
    """
    Main processing pipeline for SOP revision review.

    Reads both revisions, compares their sections, classifies each change
    for training impact and exports the assessment report.
    """

    def __init__(
        self,
        config: Optional[PipelineConfig] = None,
        parser: Optional[IDocumentParser] = None,
        config_manager: Optional[ConfigurationManager] = None,
        comparator: Optional[DocumentComparator] = None,
    ):
        """
        Initialize the processing pipeline.

        Args:
            config: Pipeline configuration.
            parser: Optional document parser (created if not provided).
            config_manager: Optional configuration manager (created if not provided).
            comparator: Optional document comparator (created if not provided).
        """
        self.config = config or PipelineConfig()
        self.stats = PipelineStats()

        self._parser = parser or DocumentParser()
        self._comparator = comparator or DocumentComparator()
        self._config_manager = config_manager or ConfigurationManager(
            config_dir=self.config.config_dir
        )

        if self.config.config_dir:
            validation = self._config_manager.load_from_directory(self.config.config_dir)
            if validation.is_valid:
                logger.info(f"Loaded configuration from {self.config.config_dir}")
            for error in validation.errors:
                logger.warning(f"Failed to load configuration: {error}")

        settings = self._config_manager.settings
        self._exporter = TrainingImpactReportExporter(
            output_dir=self.config.output_dir or settings.output_dir,
            settings=settings,
        )

        logger.info("Revision review pipeline initialized")

    def compare_files(
        self,
        old_file_path: str,
        new_file_path: str,
        metadata: Optional[ComparisonMetadata] = None,
    ) -> PipelineResult:
        """
        Compare two revisions stored on disk and export the report.

        Args:
            old_file_path: Path to the previous revision.
            new_file_path: Path to the new revision.
            metadata: Optional report metadata; prefilled from the documents if None.

        Returns:
            PipelineResult with the comparison, report data and exported paths.
        """
        start_time = time.time()
        result = PipelineResult(success=False)
        errors = ErrorHandler(file_path=new_file_path)

        try:
            logger.info(f"Starting revision review for old: {old_file_path}, new: {new_file_path}")

            old_doc, new_doc = self._parse_documents(old_file_path, new_file_path)
            self._run(old_doc, new_doc, metadata, result, errors)

        except DocumentCorruptedError as e:
            errors.add_error(e)
            result.errors.append(f"Document corrupted: {e.message}")
            logger.error(f"Document corrupted: {e}")

        except ParseError as e:
            errors.add_error(e)
            result.errors.append(f"Parsing error: {e.message}")
            logger.error(f"Parsing error: {e}")

        except FileNotFoundError as e:
            result.errors.append(str(e))
            logger.error(str(e))

        except OSError as e:
            result.errors.append(f"Report export failed: {e}")
            logger.exception(f"Report export failed: {e}")

        finally:
            self._finish(result, errors, start_time)

        return result

    def compare_texts(
        self,
        old_text: str,
        new_text: str,
        old_filename: str = "",
        new_filename: str = "",
        metadata: Optional[ComparisonMetadata] = None,
    ) -> PipelineResult:
        """
        Compare two revisions given as raw text and export the report.

        Args:
            old_text: Raw text of the previous revision.
            new_text: Raw text of the new revision.
            old_filename: File name of the previous revision, for metadata fallbacks.
            new_filename: File name of the new revision, for metadata fallbacks.
            metadata: Optional report metadata; prefilled from the documents if None.

        Returns:
            PipelineResult with the comparison, report data and exported paths.
        """
        start_time = time.time()
        result = PipelineResult(success=False)
        errors = ErrorHandler(file_path=new_filename or None)

        try:
            old_doc = extract_document(old_text, old_filename)
            new_doc = extract_document(new_text, new_filename)
            self._run(old_doc, new_doc, metadata, result, errors)

        except OSError as e:
            result.errors.append(f"Report export failed: {e}")
            logger.exception(f"Report export failed: {e}")

        finally:
            self._finish(result, errors, start_time)

        return result

    def _parse_documents(
        self,
        old_file_path: str,
        new_file_path: str,
    ) -> Tuple[ExtractedDocument, ExtractedDocument]:
        """Parse both revisions."""
        old_doc = self._parser.parse(old_file_path)
        logger.debug(f"Parsed previous revision: {old_file_path}")

        new_doc = self._parser.parse(new_file_path)
        logger.debug(f"Parsed new revision: {new_file_path}")

        return old_doc, new_doc

    def _run(
        self,
        old_doc: ExtractedDocument,
        new_doc: ExtractedDocument,
        metadata: Optional[ComparisonMetadata],
        result: PipelineResult,
        errors: ErrorHandler,
    ) -> None:
        result.old_document = old_doc
        result.new_document = new_doc

        for label, doc in (("previous", old_doc), ("new", new_doc)):
            if not doc.sections:
                errors.add_warning(
                    f"No sections detected in {label} revision",
                    location=doc.filename or None,
                )

        comparison = self._comparator.compare(old_doc, new_doc)
        result.comparison = comparison

        if not comparison.has_changes:
            errors.add_warning("No differences detected between revisions")

        report_data = build_report_data(
            comparison,
            metadata,
            impacted_area_limit=self._exporter.settings.impacted_area_limit,
        )
        result.report_data = report_data

        if self.config.export_docx:
            result.report_paths["docx"] = self._exporter.export_docx(report_data)
        if self.config.export_text:
            result.report_paths["text"] = self._exporter.export_text_report(report_data)

        result.success = True
        logger.info(
            f"Revision review completed: {comparison.summary.total_changes} changes "
            f"({comparison.summary.added} added, {comparison.summary.modified} modified, "
            f"{comparison.summary.removed} removed)"
        )

    def _finish(self, result: PipelineResult, errors: ErrorHandler, start_time: float) -> None:
        result.warnings.extend(errors.warnings)
        for warning in errors.warnings:
            logger.warning(warning)
        result.metadata["error_summary"] = errors.get_summary()
        result.processing_time = time.time() - start_time
        self._update_stats(result)

    def _update_stats(self, result: PipelineResult) -> None:
        """Update pipeline statistics."""
        self.stats.total_executions += 1

        if result.success:
            self.stats.successful_executions += 1
        else:
            self.stats.failed_executions += 1

        self.stats.total_processing_time += result.processing_time
        self.stats.average_processing_time = (
            self.stats.total_processing_time / self.stats.total_executions
        )

    def get_stats(self) -> PipelineStats:
        """Get pipeline execution statistics."""
        return self.stats

