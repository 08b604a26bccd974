"""Configuration Manager implementation for the SOP Revision Review System.

This module loads, validates and saves the report settings used when
rendering training impact assessments.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .models import (
    ConfigurationError,
    ReportSettings,
    SignOffRole,
    ValidationResult,
)


REPORT_SETTINGS_FILE = "report.json"

_STRING_FIELDS = ["output_dir", "assessment_method", "footer_label", "disclaimer"]
_POSITIVE_INT_FIELDS = ["excerpt_length", "impacted_area_limit"]
_KNOWN_FIELDS = set(_STRING_FIELDS + _POSITIVE_INT_FIELDS + ["sign_off_roles", "version", "metadata"])


class ConfigurationManager:
    """
    Manager for report configuration.

    Handles loading, validation, persistence and access to ReportSettings.
    """

    def __init__(self, config_dir: Optional[Union[str, Path]] = None):
        """
        Initialize the configuration manager.

        Args:
            config_dir: Optional directory path for configuration files.
        """
        self._config_dir = Path(config_dir) if config_dir else None
        self._settings = ReportSettings()
        self._is_loaded = False

    @property
    def settings(self) -> ReportSettings:
        """Get the current report settings."""
        return self._settings

    @property
    def is_loaded(self) -> bool:
        """Check if configuration has been loaded."""
        return self._is_loaded

    def load_report_settings(
        self,
        source: Union[str, Path, Dict[str, Any]]
    ) -> ValidationResult:
        """
        Load and validate report settings.

        Fields missing from the source keep their defaults.

        Args:
            source: JSON file path or dictionary.

        Returns:
            ValidationResult indicating success, with any warnings.

        Raises:
            ConfigurationError: If validation fails and settings cannot be applied.
        """
        raw_data = self._parse_source(source)
        result, settings = self._validate_report_settings(raw_data)

        if not result.is_valid or settings is None:
            raise ConfigurationError(
                "Report settings validation failed",
                validation_result=result
            )

        self._settings = settings
        self._is_loaded = True
        return result

    def _validate_report_settings(
        self,
        data: Any
    ) -> tuple[ValidationResult, Optional[ReportSettings]]:
        """Validate a report settings dictionary."""
        result = ValidationResult(is_valid=True)
        prefix = "Report settings"

        if not isinstance(data, dict):
            result.add_error(f"{prefix}: expected a JSON object")
            return result, None

        for key in data:
            if key not in _KNOWN_FIELDS:
                result.add_warning(f"{prefix}: unknown field '{key}' ignored")

        for name in _STRING_FIELDS:
            if name in data and (not isinstance(data[name], str) or not data[name].strip()):
                result.add_error(f"{prefix}: '{name}' must be a non-empty string")

        for name in _POSITIVE_INT_FIELDS:
            if name in data:
                value = data[name]
                if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                    result.add_error(f"{prefix}: '{name}' must be a positive integer")

        if "version" in data and (isinstance(data["version"], bool) or not isinstance(data["version"], int)):
            result.add_error(f"{prefix}: 'version' must be an integer")

        if "metadata" in data and not isinstance(data["metadata"], dict):
            result.add_error(f"{prefix}: 'metadata' must be an object")

        roles: Optional[List[SignOffRole]] = None
        if "sign_off_roles" in data:
            roles = self._validate_sign_off_roles(data["sign_off_roles"], result)

        if not result.is_valid:
            return result, None

        defaults = ReportSettings()
        settings = ReportSettings(
            output_dir=data.get("output_dir", defaults.output_dir).strip(),
            excerpt_length=data.get("excerpt_length", defaults.excerpt_length),
            impacted_area_limit=data.get("impacted_area_limit", defaults.impacted_area_limit),
            assessment_method=data.get("assessment_method", defaults.assessment_method).strip(),
            footer_label=data.get("footer_label", defaults.footer_label).strip(),
            disclaimer=data.get("disclaimer", defaults.disclaimer).strip(),
            sign_off_roles=roles if roles is not None else defaults.sign_off_roles,
            version=data.get("version", defaults.version),
            metadata=data.get("metadata", {}),
        )
        return result, settings

    def _validate_sign_off_roles(
        self,
        data: Any,
        result: ValidationResult
    ) -> Optional[List[SignOffRole]]:
        """Validate the sign-off role list, recording problems on ``result``."""
        if not isinstance(data, list):
            result.add_error("Report settings: 'sign_off_roles' must be a list")
            return None

        roles = []
        for i, item in enumerate(data):
            prefix = f"Sign-off role [{i}]"
            if not isinstance(item, dict):
                result.add_error(f"{prefix}: must be an object")
                continue
            role = item.get("role")
            placeholder = item.get("decision_placeholder", "")
            if not isinstance(role, str) or not role.strip():
                result.add_error(f"{prefix}: 'role' must be a non-empty string")
                continue
            if not isinstance(placeholder, str):
                result.add_error(f"{prefix}: 'decision_placeholder' must be a string")
                continue
            roles.append(SignOffRole(role.strip(), placeholder.strip()))

        if not data:
            result.add_warning("Report settings: 'sign_off_roles' is empty; no sign-off table rows")

        names = [r.role for r in roles]
        duplicates = {name for name in names if names.count(name) > 1}
        if duplicates:
            result.add_error(f"Duplicate sign-off roles found: {duplicates}")

        return roles

    def _parse_source(
        self,
        source: Union[str, Path, Dict[str, Any]]
    ) -> Any:
        """Parse configuration source to raw data."""
        if isinstance(source, (str, Path)):
            path = Path(source)
            if not path.exists():
                raise ConfigurationError(f"Configuration file not found: {path}")

            with open(path, "r", encoding="utf-8") as f:
                try:
                    return json.load(f)
                except json.JSONDecodeError as e:
                    raise ConfigurationError(f"Invalid JSON in {path}: {e}")

        return source

    def load_from_directory(self, config_dir: Union[str, Path]) -> ValidationResult:
        """
        Load configuration files from a directory.

        Expects ``report.json``; a missing file leaves the defaults in place.

        Args:
            config_dir: Directory containing configuration files.

        Returns:
            ValidationResult for the loaded configuration.
        """
        config_dir = Path(config_dir)
        result = ValidationResult(is_valid=True)

        settings_file = config_dir / REPORT_SETTINGS_FILE
        if settings_file.exists():
            try:
                result = result.merge(self.load_report_settings(settings_file))
            except ConfigurationError as e:
                result.add_error(f"Report settings loading failed: {e.message}")
                if e.validation_result:
                    result = result.merge(e.validation_result)

        self._config_dir = config_dir
        return result

    def save_to_directory(
        self,
        config_dir: Optional[Union[str, Path]] = None
    ) -> None:
        """
        Save current configuration to a directory.

        Args:
            config_dir: Directory to save to. Uses current config_dir if None.
        """
        config_dir = Path(config_dir) if config_dir else self._config_dir
        if not config_dir:
            raise ConfigurationError("No configuration directory specified")

        config_dir.mkdir(parents=True, exist_ok=True)
        with open(config_dir / REPORT_SETTINGS_FILE, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)

    def reset(self) -> None:
        """Reset configuration to defaults."""
        self._settings = ReportSettings()
        self._is_loaded = False

    def to_dict(self) -> Dict[str, Any]:
        """Export current configuration as a dictionary."""
        s = self._settings
        return {
            "version": s.version,
            "output_dir": s.output_dir,
            "excerpt_length": s.excerpt_length,
            "impacted_area_limit": s.impacted_area_limit,
            "assessment_method": s.assessment_method,
            "footer_label": s.footer_label,
            "disclaimer": s.disclaimer,
            "sign_off_roles": [
                {"role": r.role, "decision_placeholder": r.decision_placeholder}
                for r in s.sign_off_roles
            ],
            "metadata": s.metadata,
        }
