"""Typed configuration for the timer command, loaded from the environment."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_SOUND_COMMAND = "audacious --headless --quit-after-play FILE"
SOUND_COMMAND_ENV = "TIMER_SOUND_CMD"
SOUND_FILE_PLACEHOLDER = "FILE"
DEFAULT_TICKS = 100


@dataclass(frozen=True)
class SoundConfig:
    """Where sounds live and how they are played."""

    folder: Path
    command: str = DEFAULT_SOUND_COMMAND
    placeholder: str = SOUND_FILE_PLACEHOLDER


@dataclass(frozen=True)
class NotificationConfig:
    """Fixed contents of the expiry notification."""

    title: str = "Timer"
    message: str = "Time is expired!"
    app_name: str = "timer"
    timeout: int = 10


@dataclass(frozen=True)
class CountdownConfig:
    """Countdown display settings."""

    ticks: int = DEFAULT_TICKS


@dataclass(frozen=True)
class AppConfig:
    """Application settings resolved for one process run."""

    sounds: SoundConfig
    notification: NotificationConfig = field(default_factory=NotificationConfig)
    countdown: CountdownConfig = field(default_factory=CountdownConfig)


def _home_dir() -> Path:
    home = os.getenv("HOME", "").strip()
    return Path(home) if home else Path.home()


def default_sounds_dir(platform: str | None = None) -> Path:
    """Returns the sounds directory for the given (or current) platform."""
    platform = platform or sys.platform
    if platform.startswith("win"):
        return _home_dir() / "AppData" / "timer" / "sounds"
    return _home_dir() / ".config" / "timer" / "sounds"


def _sound_command() -> str:
    command = os.getenv(SOUND_COMMAND_ENV, "").strip()
    return command or DEFAULT_SOUND_COMMAND


def _build_settings() -> AppConfig:
    return AppConfig(
        sounds=SoundConfig(
            folder=default_sounds_dir(),
            command=_sound_command(),
        ),
    )


_SETTINGS: AppConfig | None = None


def reload_settings() -> AppConfig:
    """Rebuilds settings from the current environment and caches them."""
    global _SETTINGS
    _SETTINGS = _build_settings()
    return _SETTINGS


def get_settings() -> AppConfig:
    """Returns the cached settings, loading them on first use."""
    if _SETTINGS is None:
        return reload_settings()
    return _SETTINGS
