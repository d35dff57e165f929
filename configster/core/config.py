"""
Settings file loading for the configster command line.

Loads .configster.yaml from the project root or home directory.
Settings provide defaults that can be overridden by CLI options;
the library functions never read them.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

SETTINGS_FILENAME = ".configster.yaml"
OUTPUT_FORMATS = ("table", "json", "text")


@dataclass
class ParserSettings:
    """Parser settings from the settings file."""
    delimiter: str = ","
    encoding: str = "utf-8"


@dataclass
class OutputSettings:
    """Output settings from the settings file."""
    format: str = "table"


@dataclass
class CheckSettings:
    """Malformed-line handling from the settings file."""
    strict: bool = False


@dataclass
class Settings:
    """Loaded settings."""
    parser: ParserSettings = field(default_factory=ParserSettings)
    output: OutputSettings = field(default_factory=OutputSettings)
    check: CheckSettings = field(default_factory=CheckSettings)
    source_path: Optional[Path] = None

    @classmethod
    def from_dict(cls, data: dict, source_path: Optional[Path] = None) -> "Settings":
        """Create Settings from parsed YAML dict."""
        settings = cls(source_path=source_path)

        if "parser" in data and isinstance(data["parser"], dict):
            parser = data["parser"]
            delimiter = parser.get("delimiter", settings.parser.delimiter)
            if isinstance(delimiter, str) and len(delimiter) == 1:
                settings.parser.delimiter = delimiter
            else:
                logging.getLogger("configster.core.config").warning(
                    f"Ignoring parser.delimiter {delimiter!r}: must be a single character"
                )
            settings.parser.encoding = parser.get("encoding", settings.parser.encoding)

        if "output" in data and isinstance(data["output"], dict):
            fmt = data["output"].get("format", settings.output.format)
            if fmt in OUTPUT_FORMATS:
                settings.output.format = fmt

        if "check" in data and isinstance(data["check"], dict):
            settings.check.strict = bool(data["check"].get("strict", settings.check.strict))

        return settings


# Global cached settings
_cached_settings: Optional[Settings] = None


def find_settings_file(start: Optional[Path] = None) -> Optional[Path]:
    """Search for .configster.yaml.

    Search order:
    1. start directory (default: current directory) and its parents,
       stopping at a git root
    2. ~/.configster.yaml
    """
    search_dir = start or Path.cwd()
    while search_dir != search_dir.parent:
        candidate = search_dir / SETTINGS_FILENAME
        if candidate.exists():
            return candidate
        if (search_dir / ".git").exists():
            break
        search_dir = search_dir.parent

    home_settings = Path.home() / SETTINGS_FILENAME
    if home_settings.exists():
        return home_settings
    return None


def load_settings(path: Optional[Path] = None, use_cache: bool = True) -> Settings:
    """Load .configster.yaml.

    Args:
        path: Explicit path to a settings file
        use_cache: Whether to use cached settings (default True)

    Returns:
        Loaded Settings, or default Settings if no file found
    """
    global _cached_settings

    if use_cache and _cached_settings is not None:
        return _cached_settings

    if path and path.exists():
        settings_path = path
    else:
        settings_path = find_settings_file()

    if settings_path is None:
        settings = Settings()
    else:
        try:
            data = yaml.safe_load(settings_path.read_text())
            if not isinstance(data, dict):
                data = {}
            settings = Settings.from_dict(data, source_path=settings_path)
        except (yaml.YAMLError, OSError) as e:
            logging.getLogger("configster.core.config").warning(
                f"Failed to load settings from {settings_path}: {e}"
            )
            settings = Settings()

    if use_cache:
        _cached_settings = settings

    return settings


def clear_settings_cache() -> None:
    """Clear the cached settings (useful for testing)."""
    global _cached_settings
    _cached_settings = None
