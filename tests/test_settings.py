"""Tests for the Settings module."""

import tempfile
from datetime import date
from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from american_generator.settings.base import GeneratorSettings
from american_generator.settings.loader import SettingsLoader, load_settings


EXAMPLE_SETTINGS = Path(__file__).parent.parent / "examples" / "settings.yaml"


class TestGeneratorSettings:
    """Tests for GeneratorSettings class."""

    def test_defaults(self):
        settings = GeneratorSettings()

        assert settings.min_age == 18
        assert settings.max_age == 80
        assert settings.date_format == "%m/%d/%Y"
        assert settings.seed is None

    def test_age_range_order(self):
        with pytest.raises(ValidationError):
            GeneratorSettings(min_age=60, max_age=30)

    def test_negative_age(self):
        with pytest.raises(ValidationError):
            GeneratorSettings(min_age=-1)

    def test_empty_date_format(self):
        with pytest.raises(ValidationError):
            GeneratorSettings(date_format="  ")

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            GeneratorSettings(min_agee=30)

    def test_format_date(self):
        settings = GeneratorSettings(date_format="%d.%m.%Y")

        assert settings.format_date(date(1985, 3, 7)) == "07.03.1985"


class TestSettingsLoader:
    """Tests for SettingsLoader."""

    def test_load_from_string(self):
        yaml_content = """
generator:
  min_age: 25
  max_age: 40
  date_format: "%Y-%m-%d"
  seed: 99
"""
        settings = SettingsLoader().load_from_string(yaml_content)

        assert settings.min_age == 25
        assert settings.max_age == 40
        assert settings.date_format == "%Y-%m-%d"
        assert settings.seed == 99

    def test_load_top_level_keys(self):
        settings = SettingsLoader().load_from_string("max_age: 70\n")

        assert settings.max_age == 70
        assert settings.min_age == 18

    def test_load_empty(self):
        assert SettingsLoader().load_from_string("") == GeneratorSettings()

    def test_load_non_mapping(self):
        with pytest.raises(ValueError):
            SettingsLoader().load_from_string("- 1\n- 2\n")

    def test_load_empty_generator_section(self):
        assert SettingsLoader().load_from_string("generator:\n") == GeneratorSettings()

    def test_load_non_mapping_generator_section(self):
        with pytest.raises(ValueError, match="YAML mapping"):
            SettingsLoader().load_from_string("generator:\n  - 1\n  - 2\n")

    def test_load_unknown_key(self):
        with pytest.raises(ValidationError):
            SettingsLoader().load_from_string("generator:\n  min_agee: 30\n")

    def test_load_invalid_values(self):
        with pytest.raises(ValidationError):
            SettingsLoader().load_from_string("generator:\n  min_age: 90\n")

    def test_save_and_load_file(self):
        settings = GeneratorSettings(min_age=20, max_age=30, seed=5)
        loader = SettingsLoader()

        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "nested" / "settings.yaml"
            loader.save_file(settings, path)

            with open(path) as f:
                raw = yaml.safe_load(f)
            assert raw["generator"]["min_age"] == 20

            assert loader.load_file(path) == settings

    def test_load_missing_file(self):
        with pytest.raises(FileNotFoundError):
            SettingsLoader().load_file("/nonexistent/settings.yaml")

    def test_load_settings_defaults(self):
        assert load_settings() == GeneratorSettings()

    def test_load_example_settings(self):
        settings = load_settings(EXAMPLE_SETTINGS)

        assert settings.min_age == 21
        assert settings.max_age == 65
