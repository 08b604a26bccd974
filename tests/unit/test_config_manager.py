"""Unit tests for the Configuration Manager."""

import json

import pytest

from sop_revision_review.config import (
    ConfigurationError,
    ConfigurationManager,
    ReportSettings,
    SignOffRole,
)


class TestReportSettingsLoading:
    """Tests for loading report settings."""

    def test_defaults(self):
        """Test the settings of a fresh manager."""
        manager = ConfigurationManager()

        assert not manager.is_loaded
        assert manager.settings == ReportSettings()
        assert [r.role for r in manager.settings.sign_off_roles] == ["Process Owner", "Quality", "L&D"]

    def test_load_from_dict(self):
        """Test loading settings from a dictionary."""
        manager = ConfigurationManager()

        result = manager.load_report_settings({
            "excerpt_length": 120,
            "footer_label": "  QA Review  ",
            "sign_off_roles": [
                {"role": "Process Owner", "decision_placeholder": "Yes / No"},
                {"role": "Trainer"},
            ],
        })

        assert result.is_valid
        assert manager.is_loaded
        assert manager.settings.excerpt_length == 120
        assert manager.settings.footer_label == "QA Review"
        assert manager.settings.impacted_area_limit == 4
        assert manager.settings.sign_off_roles == [
            SignOffRole("Process Owner", "Yes / No"),
            SignOffRole("Trainer", ""),
        ]

    def test_load_from_file(self, tmp_path):
        """Test loading settings from a JSON file."""
        path = tmp_path / "report.json"
        path.write_text(json.dumps({"impacted_area_limit": 6}), encoding="utf-8")
        manager = ConfigurationManager()

        manager.load_report_settings(path)

        assert manager.settings.impacted_area_limit == 6

    def test_unknown_field_warns(self):
        """Test that unknown keys are ignored with a warning."""
        result = ConfigurationManager().load_report_settings({"colour": "blue"})

        assert result.is_valid
        assert any("colour" in w for w in result.warnings)

    def test_empty_sign_off_roles_warns(self):
        """Test that an empty role list is allowed but reported."""
        manager = ConfigurationManager()

        result = manager.load_report_settings({"sign_off_roles": []})

        assert result.is_valid
        assert manager.settings.sign_off_roles == []
        assert any("sign_off_roles" in w for w in result.warnings)


class TestReportSettingsValidation:
    """Tests for settings validation failures."""

    @pytest.mark.parametrize("data", [
        {"excerpt_length": 0},
        {"excerpt_length": "300"},
        {"impacted_area_limit": True},
        {"footer_label": "   "},
        {"disclaimer": 5},
        {"version": "1"},
        {"metadata": []},
        {"sign_off_roles": "Quality"},
        {"sign_off_roles": [{"decision_placeholder": "x"}]},
        {"sign_off_roles": ["Quality"]},
    ])
    def test_invalid_values(self, data):
        """Test that invalid values raise ConfigurationError."""
        manager = ConfigurationManager()

        with pytest.raises(ConfigurationError) as exc_info:
            manager.load_report_settings(data)

        assert not exc_info.value.validation_result.is_valid
        assert not manager.is_loaded
        assert manager.settings == ReportSettings()

    def test_duplicate_roles(self):
        """Test that sign-off roles must be unique."""
        data = {"sign_off_roles": [{"role": "Quality"}, {"role": "Quality"}]}

        with pytest.raises(ConfigurationError) as exc_info:
            ConfigurationManager().load_report_settings(data)

        assert any("Duplicate" in e for e in exc_info.value.validation_result.errors)

    def test_not_an_object(self):
        """Test that a non-object source is rejected."""
        with pytest.raises(ConfigurationError):
            ConfigurationManager().load_report_settings([1, 2])

    def test_missing_file(self, tmp_path):
        """Test that a missing file raises ConfigurationError."""
        with pytest.raises(ConfigurationError, match="not found"):
            ConfigurationManager().load_report_settings(tmp_path / "missing.json")

    def test_invalid_json_file(self, tmp_path):
        """Test that a malformed file raises ConfigurationError."""
        path = tmp_path / "report.json"
        path.write_text("{broken", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="Invalid JSON"):
            ConfigurationManager().load_report_settings(path)


class TestConfigurationDirectory:
    """Tests for directory load and save."""

    def test_save_and_load(self, tmp_path):
        """Test that saved settings load back identically."""
        manager = ConfigurationManager()
        manager.load_report_settings({"excerpt_length": 80, "metadata": {"site": "Plant 2"}})
        manager.save_to_directory(tmp_path)

        other = ConfigurationManager()
        result = other.load_from_directory(tmp_path)

        assert result.is_valid
        assert other.settings == manager.settings

    def test_missing_directory_file_keeps_defaults(self, tmp_path):
        """Test that a directory without report.json leaves defaults."""
        manager = ConfigurationManager()

        result = manager.load_from_directory(tmp_path)

        assert result.is_valid
        assert not manager.is_loaded

    def test_invalid_directory_file_reported(self, tmp_path):
        """Test that invalid settings in a directory are returned as errors."""
        (tmp_path / "report.json").write_text(json.dumps({"excerpt_length": -1}), encoding="utf-8")

        result = ConfigurationManager().load_from_directory(tmp_path)

        assert not result.is_valid
        assert any("excerpt_length" in e for e in result.errors)

    def test_save_without_directory(self):
        """Test that saving needs a directory."""
        with pytest.raises(ConfigurationError):
            ConfigurationManager().save_to_directory()

    def test_reset(self):
        """Test that reset restores defaults."""
        manager = ConfigurationManager()
        manager.load_report_settings({"excerpt_length": 10})

        manager.reset()

        assert manager.settings == ReportSettings()
        assert not manager.is_loaded
