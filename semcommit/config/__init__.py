"""Configuration Management Package"""

import json
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

# Valid configuration values
VALID_LANGUAGES = {"auto", "en", "de"}

DEFAULT_VERIFY_COMMAND = ["cargo", "test"]


@dataclass
class Config:
    """User configuration with sensible defaults."""
    language: str = "auto"
    verify_command: list[str] = field(default_factory=lambda: list(DEFAULT_VERIFY_COMMAND))
    editor: Optional[str] = None  # Falls back to $VISUAL / $EDITOR

    def validate(self) -> list[str]:
        """Validate config values and return list of warnings.

        Invalid values are replaced with defaults silently after warning.
        """
        warnings = []
        defaults = Config()

        if self.language not in VALID_LANGUAGES:
            warnings.append(f"Invalid language '{self.language}', using '{defaults.language}'")
            self.language = defaults.language

        if (not isinstance(self.verify_command, list) or not self.verify_command
                or not all(isinstance(arg, str) and arg for arg in self.verify_command)):
            warnings.append(f"Invalid verify_command '{self.verify_command}', using {defaults.verify_command}")
            self.verify_command = defaults.verify_command

        if self.editor is not None and (not isinstance(self.editor, str) or not self.editor.strip()):
            warnings.append(f"Invalid editor '{self.editor}', using $VISUAL/$EDITOR")
            self.editor = None

        return warnings

    @classmethod
    def from_dict(cls, data: dict) -> 'Config':
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        config = cls(**filtered)
        # Validate and print warnings to stderr
        for warning in config.validate():
            print(f"Config warning: {warning}", file=sys.stderr)
        return config


class ConfigManager:
    """Manages loading configuration."""

    CONFIG_FILENAME = ".semcommitrc"

    def __init__(self):
        self._config: Optional[Config] = None
        self._config_path: Optional[Path] = None

    def load(self) -> Config:
        if self._config is not None:
            return self._config

        local_path = Path.cwd() / self.CONFIG_FILENAME
        if local_path.exists():
            self._config = self._load_from_file(local_path)
            self._config_path = local_path
            return self._config

        home_path = Path.home() / self.CONFIG_FILENAME
        if home_path.exists():
            self._config = self._load_from_file(home_path)
            self._config_path = home_path
            return self._config

        self._config = Config()
        return self._config

    def _load_from_file(self, path: Path) -> Config:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError("top level must be an object")
            return Config.from_dict(data)
        except (json.JSONDecodeError, ValueError, IOError) as e:
            print(f"Warning: Could not load {path}: {e}", file=sys.stderr)
            return Config()

    def get_config_path(self) -> Optional[Path]:
        return self._config_path


_manager = ConfigManager()


def load_config() -> Config:
    return _manager.load()


def get_config_path() -> Optional[Path]:
    return _manager.get_config_path()


__all__ = [
    "Config",
    "ConfigManager",
    "load_config",
    "get_config_path",
    "VALID_LANGUAGES",
    "DEFAULT_VERIFY_COMMAND",
]
