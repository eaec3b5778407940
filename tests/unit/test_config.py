"""Tests for configuration module."""

from pathlib import Path

import pytest

from rdftypes.core import config as config_module
from rdftypes.core.config import RdfTypesSettings, configure, get_settings


class TestRdfTypesSettings:
    """Tests for the RdfTypesSettings class."""

    def test_default_settings(self, monkeypatch):
        monkeypatch.delenv("RDFTYPES_RULES_PATH", raising=False)
        settings = RdfTypesSettings()
        assert settings.rules_path is None
        assert settings.app_root == Path.cwd()
        assert settings.search_rows == 11
        assert settings.log_level == "INFO"
        assert settings.log_format == "plain"

    def test_custom_settings(self, tmp_path):
        settings = RdfTypesSettings(app_root=tmp_path, institution_name="Example University")
        assert settings.app_root == tmp_path
        assert settings.institution_name == "Example University"

    def test_settings_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("RDFTYPES_RULES_PATH", str(tmp_path / "rules.yml"))
        monkeypatch.setenv("RDFTYPES_SEARCH_ROWS", "25")

        settings = RdfTypesSettings()
        assert settings.rules_path == tmp_path / "rules.yml"
        assert settings.search_rows == 25

    def test_search_rows_bounds(self):
        from pydantic import ValidationError

        with pytest.raises(ValidationError):
            RdfTypesSettings(search_rows=0)

    def test_to_dict(self):
        data = RdfTypesSettings().to_dict()
        assert "rules_path" in data
        assert "institution_name" in data


class TestGlobalSettings:
    """Tests for the process-wide settings instance."""

    def test_get_settings_singleton(self):
        assert get_settings() is get_settings()

    def test_configure_replaces(self, monkeypatch):
        monkeypatch.setattr(config_module, "_settings", None)

        settings = configure(search_rows=5)

        assert get_settings() is settings
        assert get_settings().search_rows == 5
