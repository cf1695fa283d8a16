"""
Persisted theme preference.

A single key-value pair stored in a small JSON file: read once at startup,
written on every toggle.
"""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Optional

from glossary.config import get_settings
from glossary.utils.logging import get_logger

log = get_logger(__name__)

THEME_KEY = "itsc-dictionary-theme"


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"

    def toggled(self) -> "Theme":
        return Theme.DARK if self is Theme.LIGHT else Theme.LIGHT


DEFAULT_THEME = Theme.LIGHT


class ThemePreferenceStore:
    """
    JSON-file backed store for the theme preference.

    Other keys already present in the file are preserved on write.
    """

    def __init__(self, path: Optional[Path | str] = None) -> None:
        self.path = Path(path if path is not None else get_settings().preferences_path)

    def _read_all(self) -> dict:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as exc:
            log.warning(
                "Unreadable preferences file; using defaults",
                extra={"path": str(self.path), "error": str(exc)},
            )
            return {}
        return data if isinstance(data, dict) else {}

    def get_theme(self) -> Theme:
        raw = self._read_all().get(THEME_KEY)
        try:
            return Theme(raw) if raw is not None else DEFAULT_THEME
        except ValueError:
            log.warning("Ignoring unknown theme preference", extra={"theme": raw})
            return DEFAULT_THEME

    def set_theme(self, theme: Theme | str) -> Theme:
        value = Theme(theme)
        data = self._read_all()
        data[THEME_KEY] = value.value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2, sort_keys=True), encoding="utf-8")
        log.info(f"Theme set to {value.value}", extra={"theme": value.value, "path": str(self.path)})
        return value

    def toggle(self) -> Theme:
        return self.set_theme(self.get_theme().toggled())


__all__ = ["DEFAULT_THEME", "THEME_KEY", "Theme", "ThemePreferenceStore"]
