"""Report generators for the SOP Revision Review System."""

from .report_exporter import (
    TrainingImpactReportExporter,
    category_label,
    excerpt,
)

__all__ = [
    "TrainingImpactReportExporter",
    "category_label",
    "excerpt",
]
