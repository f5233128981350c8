"""Runtime settings loaded from settings.json."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

SETTINGS_PATH = Path("settings.json")

DEFAULT_SETTINGS: Dict[str, Any] = {
    "logLevel": "INFO",
    "logChannels": {},
}


def load_settings(path: Path | None = None) -> Dict[str, Any]:
    """Return settings merged over the defaults.

    A missing or unreadable file yields the defaults unchanged.
    """

    path = path or SETTINGS_PATH
    settings = {key: (value.copy() if isinstance(value, dict) else value) for key, value in DEFAULT_SETTINGS.items()}
    if not path.exists():
        return settings
    try:
        data = json.loads(path.read_text())
    except json.JSONDecodeError:
        return settings
    if isinstance(data, dict):
        settings.update(data)
    return settings


__all__ = ["SETTINGS_PATH", "DEFAULT_SETTINGS", "load_settings"]
