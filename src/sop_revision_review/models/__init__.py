"""Data models and enums for the SOP Revision Review System."""

from .enums import ChangeType, DocumentFormat
from .document import DocumentMetadata, DocumentSection, ExtractedDocument
from .comparison import ComparisonResult, ComparisonSummary, SectionChange
from .impact import (
    ChangeCategorization,
    ComparisonMetadata,
    DocumentChange,
    ReportSummary,
    TrainingImpactReportData,
    TrainingIndicators,
)

__all__ = [
    # Enums
    "ChangeType",
    "DocumentFormat",
    # Document models
    "DocumentMetadata",
    "DocumentSection",
    "ExtractedDocument",
    # Comparison models
    "ComparisonResult",
    "ComparisonSummary",
    "SectionChange",
    # Impact models
    "ChangeCategorization",
    "ComparisonMetadata",
    "DocumentChange",
    "ReportSummary",
    "TrainingImpactReportData",
    "TrainingIndicators",
]
