"""Configuration Management Package"""

import json
import sys
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional

from czcommit.config.wizard import (
    CommitType, Scope, CzConfig, WizardConfig,
    DEFAULT_TYPES, DEFAULT_MESSAGES, DEFAULT_FOOTER_PREFIX,
    resolve, read_cz_config,
)

# Valid settings values
VALID_OUTPUT_MODES = {"off", "always", "onError"}

# camelCase spellings of the same options, as editor settings name them
KEY_ALIASES = {
    "autoSync": "auto_sync",
    "subjectLength": "subject_length",
    "showOutputChannel": "show_output_channel",
    "smartCommit": "smart_commit",
}


@dataclass
class Settings:
    """User settings with sensible defaults."""
    auto_sync: bool = False
    subject_length: int = 50
    show_output_channel: str = "onError"
    smart_commit: bool = False

    def to_dict(self) -> dict:
        return asdict(self)

    def validate(self) -> list[str]:
        """Validate settings values and return list of warnings.

        Invalid values are replaced with defaults after warning.
        """
        warnings = []
        defaults = Settings()

        if not isinstance(self.show_output_channel, str) or self.show_output_channel not in VALID_OUTPUT_MODES:
            warnings.append(f"Invalid show_output_channel '{self.show_output_channel}', using '{defaults.show_output_channel}'")
            self.show_output_channel = defaults.show_output_channel

        # bool is an int subclass, so reject it explicitly
        if isinstance(self.subject_length, bool) or not isinstance(self.subject_length, int) or self.subject_length <= 0:
            warnings.append(f"Invalid subject_length '{self.subject_length}', using {defaults.subject_length}")
            self.subject_length = defaults.subject_length

        for name in ('auto_sync', 'smart_commit'):
            value = getattr(self, name)
            if not isinstance(value, bool):
                warnings.append(f"Invalid {name} '{value}', using {str(getattr(defaults, name)).lower()}")
                setattr(self, name, getattr(defaults, name))

        return warnings

    @classmethod
    def from_dict(cls, data: dict) -> 'Settings':
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {}
        for key, value in data.items():
            key = KEY_ALIASES.get(key, key)
            if key in valid_keys:
                filtered[key] = value
        settings = cls(**filtered)
        for warning in settings.validate():
            print(f"Settings warning: {warning}", file=sys.stderr)
        return settings


class SettingsManager:
    """Finds and loads the settings file."""

    SETTINGS_FILENAME = ".czcommitrc"

    def __init__(self):
        self._settings: Optional[Settings] = None
        self._settings_path: Optional[Path] = None
        self._start: Optional[Path] = None

    def load(self, start: Optional[Path] = None) -> Settings:
        """Load from start (default: cwd), then the home directory."""
        start = Path(start) if start is not None else Path.cwd()
        if self._settings is not None and self._start == start:
            return self._settings

        self._start = start
        self._settings_path = None
        for path in (start / self.SETTINGS_FILENAME, Path.home() / self.SETTINGS_FILENAME):
            if path.exists():
                self._settings = self._load_from_file(path)
                self._settings_path = path
                return self._settings

        self._settings = Settings()
        return self._settings

    def _load_from_file(self, path: Path) -> Settings:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError("expected a JSON object")
            return Settings.from_dict(data)
        except (ValueError, TypeError, OSError) as e:
            print(f"Warning: Could not load {path}: {e}", file=sys.stderr)
            return Settings()

    def get_settings_path(self) -> Optional[Path]:
        return self._settings_path


_manager = SettingsManager()


def load_settings(start: Optional[Path] = None) -> Settings:
    return _manager.load(start)


def get_settings_path() -> Optional[Path]:
    return _manager.get_settings_path()


__all__ = [
    "Settings",
    "SettingsManager",
    "load_settings",
    "get_settings_path",
    "VALID_OUTPUT_MODES",
    "CommitType",
    "Scope",
    "CzConfig",
    "WizardConfig",
    "DEFAULT_TYPES",
    "DEFAULT_MESSAGES",
    "DEFAULT_FOOTER_PREFIX",
    "resolve",
    "read_cz_config",
]
