"""
Operation Set for the timer command.

Each ``Operation`` resolved by the dispatcher maps to one method of
``TimerOperations``. Composite operations run their steps strictly in order
and the first failing step aborts the rest.
"""

import logging
import sys
from typing import Callable, Optional, TextIO

from timer.config import AppConfig
from timer.countdown import ProgressRenderer, run_countdown
from timer.dispatch import Operation
from timer.domain import ArgumentSet
from timer.duration import parse_duration
from timer.errors import SoundNotFound
from timer.notifier import show_notification
from timer.player import play_sound_file
from timer.sound_library import SoundLibrary
from timer.utils import format_duration, get_logger

logger: logging.Logger = get_logger(__name__)


class TimerOperations:
    """Runs the user-facing operations against one sound library."""

    def __init__(
        self,
        arguments: ArgumentSet,
        library: SoundLibrary,
        settings: AppConfig,
        *,
        stream: Optional[TextIO] = None,
        renderer: Optional[ProgressRenderer] = None,
    ) -> None:
        self.arguments = arguments
        self.library = library
        self.settings = settings
        self.stream = stream or sys.stdout
        self.renderer = renderer

    def run(self, operation: Operation) -> None:
        handler: Callable[[], None] = getattr(self, operation.value)
        logger.debug(msg=f"Running operation {operation.name}")
        handler()

    def _require_sound(self) -> None:
        sound = self.arguments.sound or ""
        if self.library.lookup(sound) is None:
            raise SoundNotFound(f"Selected sound {sound!r} not available")

    # Primitive operations

    def timed(self) -> None:
        """Runs the countdown for the requested time value."""
        duration = parse_duration(self.arguments.time or "")
        logger.info(msg=f"Timer started for {format_duration(duration.total_seconds())}")
        run_countdown(
            duration,
            ticks=self.settings.countdown.ticks,
            renderer=self.renderer,
            stream=self.stream,
        )

    def play_sound(self) -> None:
        """Plays the requested sound from the library."""
        sound = self.arguments.sound or ""
        location = self.library.lookup(sound)
        if location is None:
            raise SoundNotFound(f"Selected sound {sound!r} not found")
        play_sound_file(
            location,
            self.settings.sounds.command,
            self.settings.sounds.placeholder,
        )

    def notify(self) -> None:
        show_notification(self.settings.notification)

    def list_sounds(self) -> None:
        for name in self.library.names():
            print(name, file=self.stream)

    def add_sound(self) -> None:
        self.library.add(self.arguments.addsound or "")

    def delete_sound(self) -> None:
        self.library.delete(self.arguments.deletesound or "")

    # Composite operations

    def timed_sound(self) -> None:
        self._require_sound()
        self.timed()
        self.play_sound()

    def timed_notify(self) -> None:
        self.timed()
        self.notify()

    def timed_sound_notify(self) -> None:
        self._require_sound()
        self.timed()
        self.notify()
        self.play_sound()
