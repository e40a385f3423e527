"""Booter configuration file management.

Reads and writes the .booter_config JSON file that selects the boot list
(a built-in profile or a YAML test list), the directory the test binaries
live in, and whether progress is reported on stderr.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from booter.execution.entries import DEFAULT_PROFILE

DEFAULT_CONFIG_PATH = Path(".booter_config")

# Default configuration values
DEFAULT_CONFIG: dict[str, Any] = {
    "profile": DEFAULT_PROFILE,
    "test_list": None,
    "directory": None,
    "verbose": False,
}


class BooterConfig:
    """Manages the .booter_config JSON configuration file."""

    def __init__(self, path: Path | None = None) -> None:
        self.path = path
        self._data: dict[str, Any] = dict(DEFAULT_CONFIG)
        if path is not None and path.exists():
            self._load()

    def _load(self) -> None:
        """Load config from the file."""
        assert self.path is not None
        try:
            text = self.path.read_text()
            data = json.loads(text)
            if isinstance(data, dict):
                self._data = {**DEFAULT_CONFIG, **data}
        except (json.JSONDecodeError, OSError):
            self._data = dict(DEFAULT_CONFIG)

    def save(self) -> None:
        """Write config to the file."""
        if self.path is None:
            raise ValueError("No config file path specified")
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w") as f:
            json.dump(self._data, f, indent=2)
            f.write("\n")

    @property
    def config(self) -> dict[str, Any]:
        """Get the full configuration dict."""
        return dict(self._data)

    @property
    def profile(self) -> str:
        """Get the built-in boot list name."""
        value = self._data.get("profile")
        if value is None:
            return DEFAULT_PROFILE
        if not isinstance(value, str):
            raise ValueError(f"Config key 'profile' must be a string, got {value!r}")
        return value

    @property
    def test_list(self) -> Path | None:
        """Get the YAML test list path (None = use the profile).

        Relative paths are taken relative to the config file.
        """
        return self._resolve_path("test_list")

    @property
    def directory(self) -> Path | None:
        """Get the directory test binaries are resolved against."""
        return self._resolve_path("directory")

    @property
    def verbose(self) -> bool:
        """Get whether progress lines are printed."""
        value = self._data.get("verbose")
        if value is None:
            return bool(DEFAULT_CONFIG["verbose"])
        if not isinstance(value, bool):
            raise ValueError(f"Config key 'verbose' must be true or false, got {value!r}")
        return value

    def _resolve_path(self, key: str) -> Path | None:
        value = self._data.get(key)
        if value is None:
            return None
        if not isinstance(value, str):
            raise ValueError(f"Config key '{key}' must be a path string, got {value!r}")
        path = Path(value)
        if not path.is_absolute() and self.path is not None:
            path = self.path.parent / path
        return path

    def set_config(
        self,
        profile: str | None = None,
        test_list: str | None = None,
        directory: str | None = None,
        verbose: bool | None = None,
    ) -> None:
        """Update configuration values."""
        if profile is not None:
            self._data["profile"] = profile
        if test_list is not None:
            self._data["test_list"] = test_list
        if directory is not None:
            self._data["directory"] = directory
        if verbose is not None:
            self._data["verbose"] = verbose
