"""Training impact classification for the SOP Revision Review System."""

from .classifier import (
    categorize_change,
    detect_change_badges,
    detect_training_flag,
    detect_training_indicators,
    generate_change_descriptor,
)
from .report_builder import build_report_data, metadata_from_documents, to_document_change

__all__ = [
    "categorize_change",
    "detect_change_badges",
    "detect_training_flag",
    "detect_training_indicators",
    "generate_change_descriptor",
    "build_report_data",
    "metadata_from_documents",
    "to_document_change",
]
