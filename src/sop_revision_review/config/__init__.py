"""Configuration management for the SOP Revision Review System."""

from .config_manager import ConfigurationManager
from .models import (
    ConfigurationError,
    ReportSettings,
    SignOffRole,
    ValidationResult,
)

__all__ = [
    "ConfigurationManager",
    "ConfigurationError",
    "ReportSettings",
    "SignOffRole",
    "ValidationResult",
]
