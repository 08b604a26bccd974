"""Custom exceptions for document parsing."""

from dataclasses import dataclass, field
from typing import Any, Optional


SUPPORTED_EXTENSIONS = [".docx", ".doc", ".pdf"]


@dataclass
class ParseError(Exception):
    """
    Base exception for document reading errors.

    Attributes:
        message: Human-readable error description.
        file_path: Path to the file that caused the error.
        location: Where in the file the error occurred (page, header, extension).
        details: Additional error details.
    """
    message: str
    file_path: Optional[str] = None
    location: Optional[str] = None
    details: Optional[dict] = field(default_factory=dict)

    def __post_init__(self):
        if self.details is None:
            self.details = {}
        super().__init__(str(self))

    def __str__(self) -> str:
        parts = [self.message]
        if self.file_path:
            parts.append(f"File: {self.file_path}")
        if self.location:
            parts.append(f"Location: {self.location}")
        return " | ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "file_path": self.file_path,
            "location": self.location,
            "details": self.details,
        }


@dataclass
class DocumentCorruptedError(ParseError):
    """
    Raised when a file has a supported extension but cannot be read.

    Covers damaged or encrypted PDFs and legacy binary .doc files that
    are not Office Open XML packages.
    """

    def get_recovery_suggestions(self) -> list[str]:
        """Return suggestions for recovering from this error."""
        suggestions = [
            "Try opening the file in its native application to verify it's not corrupted",
            "Check if the file is password-protected or encrypted",
        ]
        if self.file_path and self.file_path.lower().endswith(".pdf"):
            suggestions.append("For scanned PDFs, run OCR before uploading")
        elif self.file_path and self.file_path.lower().endswith(".doc"):
            suggestions.append("Re-save legacy .doc files as .docx")
        return suggestions


@dataclass
class UnsupportedFormatError(ParseError):
    """Raised when a file extension is not one of .docx, .doc or .pdf."""

    def get_supported_formats(self) -> list[str]:
        """Return list of supported formats."""
        return self.details.get("supported_formats", list(SUPPORTED_EXTENSIONS))


class ErrorHandler:
    """
    Collects errors and warnings raised while processing a file pair.

    The pipeline records failures here instead of aborting, so a single
    result can report everything that went wrong.
    """

    def __init__(self, file_path: Optional[str] = None):
        self.file_path = file_path
        self.errors: list[ParseError] = []
        self.warnings: list[str] = []

    def add_error(self, error: ParseError) -> None:
        """Add an error to the collection."""
        self.errors.append(error)

    def add_warning(self, message: str, location: Optional[str] = None) -> None:
        """Add a warning message."""
        warning = f"{message}"
        if location:
            warning += f" (at {location})"
        self.warnings.append(warning)

    def has_errors(self) -> bool:
        """Check if any errors were recorded."""
        return len(self.errors) > 0

    def error_messages(self) -> list[str]:
        """Return errors as display strings."""
        return [str(e) for e in self.errors]

    def get_summary(self) -> dict[str, Any]:
        """Get a summary of all errors and warnings."""
        return {
            "file_path": self.file_path,
            "error_count": len(self.errors),
            "warning_count": len(self.warnings),
            "errors": [e.to_dict() for e in self.errors],
            "warnings": self.warnings,
        }
