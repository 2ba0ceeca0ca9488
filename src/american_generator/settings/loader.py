"""Settings Loader for reading generation settings from YAML files."""

from pathlib import Path
from typing import Any

import yaml

from american_generator.settings.base import GeneratorSettings


class SettingsLoader:
    """Loads and saves generator settings as YAML."""

    def load_file(self, path: Path | str) -> GeneratorSettings:
        """Load settings from a YAML file.

        Args:
            path: Path to the YAML file

        Returns:
            Loaded GeneratorSettings instance
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Settings file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f)

        return self._parse_settings(data)

    def load_from_string(self, content: str) -> GeneratorSettings:
        """Load settings from a YAML string.

        Args:
            content: YAML content as string

        Returns:
            Loaded GeneratorSettings instance
        """
        data = yaml.safe_load(content)
        return self._parse_settings(data)

    def _parse_settings(self, data: Any) -> GeneratorSettings:
        """Parse settings data from YAML structure."""
        if data is None:
            return GeneratorSettings()
        if not isinstance(data, dict):
            raise ValueError("Settings must be a YAML mapping")

        # Settings may sit at the top level or under a "generator" key.
        section = data.get("generator", data)
        if section is None:
            return GeneratorSettings()
        if not isinstance(section, dict):
            raise ValueError("Settings must be a YAML mapping")
        return GeneratorSettings(**section)

    def save_file(self, settings: GeneratorSettings, path: Path | str) -> None:
        """Save settings to a YAML file.

        Args:
            settings: The settings to save
            path: Path for the output file
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        data = {"generator": settings.model_dump()}

        with open(path, "w") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)


def load_settings(path: Path | str | None = None) -> GeneratorSettings:
    """Convenience function to load settings, falling back to defaults.

    Args:
        path: Path to the YAML file, or None for default settings

    Returns:
        Loaded GeneratorSettings instance
    """
    if path is None:
        return GeneratorSettings()
    return SettingsLoader().load_file(path)
