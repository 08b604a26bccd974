"""Data models for configuration management."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


DEFAULT_DISCLAIMER = (
    "This assessment identifies textual changes only. It does not provide "
    "regulatory interpretation or training recommendations. The determination "
    "of whether retraining is required remains the responsibility of Quality, "
    "Learning & Development, and the Process Owner."
)


@dataclass
class SignOffRole:
    """A row of the report's sign-off table."""
    role: str
    decision_placeholder: str


def default_sign_off_roles() -> List[SignOffRole]:
    """Sign-off rows used when none are configured."""
    return [
        SignOffRole("Process Owner", "Retraining required / Not required"),
        SignOffRole("Quality", "Approved / Not approved"),
        SignOffRole("L&D", "Actioned / Pending"),
    ]


@dataclass
class ReportSettings:
    """
    Settings that shape the training impact report.

    Text excerpts in the change table are cut to ``excerpt_length``
    characters; the executive summary lists at most
    ``impacted_area_limit`` section titles.
    """
    output_dir: str = "data/reports"
    excerpt_length: int = 300
    impacted_area_limit: int = 4
    assessment_method: str = "Document Revision Impact Review – Textual comparison"
    footer_label: str = "Document Revision Impact Review"
    disclaimer: str = DEFAULT_DISCLAIMER
    sign_off_roles: List[SignOffRole] = field(default_factory=default_sign_off_roles)
    version: int = 1
    metadata: Dict[str, Any] = field(default_factory=dict)


@dataclass
class ValidationResult:
    """Result of configuration validation."""
    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_error(self, message: str) -> None:
        """Add an error message."""
        self.errors.append(message)
        self.is_valid = False

    def add_warning(self, message: str) -> None:
        """Add a warning message."""
        self.warnings.append(message)

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Merge another validation result into this one."""
        return ValidationResult(
            is_valid=self.is_valid and other.is_valid,
            errors=self.errors + other.errors,
            warnings=self.warnings + other.warnings
        )


class ConfigurationError(Exception):
    """Exception raised for configuration errors."""

    def __init__(self, message: str, validation_result: Optional[ValidationResult] = None):
        super().__init__(message)
        self.message = message
        self.validation_result = validation_result
