"""Training-impact data models for the SOP Revision Review System."""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .enums import ChangeType


@dataclass
class ChangeCategorization:
    """Change type plus the single training flag assigned to it."""
    change_type: ChangeType
    training_flag: str


@dataclass
class TrainingIndicators:
    """
    Presence flags for training-relevant change areas.

    Each flag is set when at least one change in a comparison carries a
    matching training flag; there are no counts.
    """
    procedural_steps: bool = False
    safety_warnings: bool = False
    limits_specifications: bool = False
    frequency_timing: bool = False
    required_documentation: bool = False
    role_responsibilities: bool = False

    def any_flagged(self) -> bool:
        """Check if any indicator is set."""
        return any(checked for _, checked in self.as_labeled_items())

    def as_labeled_items(self) -> List[Tuple[str, bool]]:
        """Return (label, checked) pairs in report order."""
        return [
            ("Procedural steps", self.procedural_steps),
            ("Safety / warnings", self.safety_warnings),
            ("Limits or specifications", self.limits_specifications),
            ("Frequency or timing", self.frequency_timing),
            ("Required documentation", self.required_documentation),
            ("Role responsibilities", self.role_responsibilities),
        ]


@dataclass
class DocumentChange:
    """A section change enriched for the training impact report."""
    section: str  # "<id> – <title>"
    section_number: str
    section_title: str
    change_type: ChangeType
    previous_text: str
    new_text: str
    training_flag: str
    badges: List[str] = field(default_factory=list)
    descriptor: str = ""

    def __post_init__(self):
        if self.badges is None:
            self.badges = []


@dataclass
class ComparisonMetadata:
    """Caller-facing identity of the revision being assessed."""
    document_title: str = ""
    document_id: str = ""
    previous_version: str = ""
    new_version: str = ""
    effective_date: str = ""
    comparison_date: str = ""
    department: Optional[str] = None


@dataclass
class ReportSummary:
    """Counts and headline areas for the executive summary."""
    total_sections_changed: int = 0
    added: int = 0
    modified: int = 0
    removed: int = 0
    impacted_areas: List[str] = field(default_factory=list)
    change_categories: List[str] = field(default_factory=list)


@dataclass
class TrainingImpactReportData:
    """Everything the report renderers need."""
    metadata: ComparisonMetadata
    changes: List[DocumentChange] = field(default_factory=list)
    indicators: TrainingIndicators = field(default_factory=TrainingIndicators)
    summary: ReportSummary = field(default_factory=ReportSummary)
