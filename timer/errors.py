"""Error hierarchy for the timer command.

Every error carries a short, user-facing ``summary`` that the CLI always
prints, while ``str(err)`` holds the full detail shown in verbose mode.
"""


class TimerError(RuntimeError):
    """Base class for every failure surfaced by the timer command."""

    summary: str = "Timer command failed"


class InvalidArgumentCombination(TimerError):
    """Raised when the supplied flags do not match a supported combination."""

    summary = "Received invalid set of options"


class DurationParseError(TimerError, ValueError):
    """Raised when a time value cannot be turned into a positive duration."""

    summary = "Error parsing time value"


class SoundNotFound(TimerError, LookupError):
    """Raised when a sound name is not registered in the sound library."""

    summary = "Sound not found in library"


class ConfigDirectoryError(TimerError):
    """Raised when the sounds directory cannot be created or listed."""

    summary = "Error reading the sounds configuration directory"


class SoundFileIOError(TimerError):
    """Raised when a sound file cannot be read, written or removed."""

    summary = "Error updating the sound library"


class PlaybackError(TimerError):
    """Raised when the external play command is missing or fails."""

    summary = "Error playing sound"


class NotificationError(TimerError):
    """Raised when the desktop notification cannot be shown."""

    summary = "Error showing notification"
