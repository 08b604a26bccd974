"""
SOP Revision Review System

Compares two revisions of a Standard Operating Procedure section by
section and assesses the training impact of each change.
"""

__version__ = "0.1.0"

# Export main components
from .models.enums import ChangeType, DocumentFormat
from .models.document import DocumentMetadata, DocumentSection, ExtractedDocument
from .models.comparison import ComparisonResult, ComparisonSummary, SectionChange
from .models.impact import (
    ChangeCategorization,
    ComparisonMetadata,
    DocumentChange,
    ReportSummary,
    TrainingImpactReportData,
    TrainingIndicators,
)
from .extractors import SectionExtractor, extract_document, extract_metadata, extract_sections
from .comparison import DocumentComparator, compare_documents
from .impact import (
    build_report_data,
    categorize_change,
    detect_change_badges,
    detect_training_flag,
    detect_training_indicators,
    generate_change_descriptor,
)
from .parsers import DocumentParser, ParseError, DocumentCorruptedError, UnsupportedFormatError
from .generators import TrainingImpactReportExporter
from .config import (
    ConfigurationManager,
    ConfigurationError,
    ReportSettings,
    SignOffRole,
    ValidationResult,
)
from .pipeline import PipelineConfig, PipelineResult, RevisionReviewPipeline

__all__ = [
    "ChangeType",
    "DocumentFormat",
    "DocumentMetadata",
    "DocumentSection",
    "ExtractedDocument",
    "ComparisonResult",
    "ComparisonSummary",
    "SectionChange",
    "ChangeCategorization",
    "ComparisonMetadata",
    "DocumentChange",
    "ReportSummary",
    "TrainingImpactReportData",
    "TrainingIndicators",
    "SectionExtractor",
    "extract_document",
    "extract_metadata",
    "extract_sections",
    "DocumentComparator",
    "compare_documents",
    "build_report_data",
    "categorize_change",
    "detect_change_badges",
    "detect_training_flag",
    "detect_training_indicators",
    "generate_change_descriptor",
    "DocumentParser",
    "ParseError",
    "DocumentCorruptedError",
    "UnsupportedFormatError",
    "TrainingImpactReportExporter",
    "ConfigurationManager",
    "ConfigurationError",
    "ReportSettings",
    "SignOffRole",
    "ValidationResult",
    "PipelineConfig",
    "PipelineResult",
    "RevisionReviewPipeline",
]
