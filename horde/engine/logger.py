"""Game logging utilities with channel toggles."""
from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

from horde.engine.settings import load_settings

DEFAULT_CHANNELS = {
    "weapons": True,
    "passives": True,
    "spawning": True,
    "content": True,
}


@dataclass
class LoggerConfig:
    """Configuration for runtime logging."""

    level: int = logging.INFO
    channels: Dict[str, bool] = None

    @classmethod
    def from_settings(cls, settings_path: Path) -> "LoggerConfig":
        data = load_settings(settings_path)
        level_name = str(data.get("logLevel", "INFO")).upper()
        level = getattr(logging, level_name, logging.INFO)
        if not isinstance(level, int):
            level = logging.INFO
        channels = DEFAULT_CHANNELS.copy()
        channels.update(data.get("logChannels") or {})
        return cls(level=level, channels=channels)


class ChannelLogger:
    """Wrapper that only emits records when the channel is enabled."""

    def __init__(self, name: str, logger: logging.Logger, enabled: bool) -> None:
        self._logger = logger
        self._enabled = enabled
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    @property
    def enabled(self) -> bool:
        return self._enabled

    @enabled.setter
    def enabled(self, value: bool) -> None:
        self._enabled = value

    def debug(self, msg: str, *args, **kwargs) -> None:
        if self._enabled:
            self._logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs) -> None:
        if self._enabled:
            self._logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs) -> None:
        if self._enabled:
            self._logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs) -> None:
        if self._enabled:
            self._logger.error(msg, *args, **kwargs)


class GameLogger:
    """Central logging registry for the project."""

    def __init__(self, config: LoggerConfig) -> None:
        logging.basicConfig(
            level=config.level,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            stream=sys.stdout,
        )
        self._root = logging.getLogger("horde")
        self._root.setLevel(config.level)
        self._channels: Dict[str, ChannelLogger] = {}
        for name, enabled in (config.channels or {}).items():
            self._channels[name] = ChannelLogger(
                name,
                logging.getLogger(f"horde.{name}"),
                bool(enabled),
            )

    def channel(self, name: str) -> ChannelLogger:
        if name not in self._channels:
            # Unknown channels start disabled until explicitly enabled.
            self._channels[name] = ChannelLogger(
                name,
                logging.getLogger(f"horde.{name}"),
                False,
            )
        return self._channels[name]

    def set_enabled(self, name: str, enabled: bool) -> None:
        self.channel(name).enabled = enabled


_active: Optional[GameLogger] = None
_fallback: Dict[str, ChannelLogger] = {}


def init_logger(settings_path: Optional[Path] = None) -> GameLogger:
    """Initialise a logger from settings.json and make it the active registry."""

    global _active
    settings_path = settings_path or Path("settings.json")
    config = LoggerConfig.from_settings(settings_path)
    _active = GameLogger(config)
    return _active


def channel(name: str) -> ChannelLogger:
    """Return the channel logger used by library code.

    Before ``init_logger`` runs, channels follow ``DEFAULT_CHANNELS`` and
    propagate to whatever handlers the host application installed.
    """

    if _active is not None:
        return _active.channel(name)
    if name not in _fallback:
        _fallback[name] = ChannelLogger(
            name,
            logging.getLogger(f"horde.{name}"),
            DEFAULT_CHANNELS.get(name, False),
        )
    return _fallback[name]


__all__ = ["GameLogger", "LoggerConfig", "ChannelLogger", "init_logger", "channel"]
