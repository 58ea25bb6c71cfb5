"""Plays sound files through an external command built from a template."""

import logging
import shlex
import subprocess
from pathlib import Path

from halo import Halo

from timer.config import SOUND_FILE_PLACEHOLDER
from timer.errors import PlaybackError
from timer.utils import get_logger

logger: logging.Logger = get_logger(__name__)


def build_play_command(
    template: str, sound_file: Path, placeholder: str = SOUND_FILE_PLACEHOLDER
) -> list[str]:
    """
    Splits a command template and substitutes the sound file location.

    Only the first occurrence of the placeholder is replaced, and the
    template is split before substitution so paths with spaces stay a
    single argument.

    Raises:
        PlaybackError: If the template is empty or lacks the placeholder.
    """
    try:
        parts = shlex.split(template)
    except ValueError as err:
        raise PlaybackError(f"Invalid sound command {template!r}: {err}") from err
    if not parts:
        raise PlaybackError("Sound command is empty")

    for index, part in enumerate(parts):
        if placeholder in part:
            parts[index] = part.replace(placeholder, str(sound_file), 1)
            return parts
    raise PlaybackError(
        f"Sound command {template!r} must contain the placeholder {placeholder}"
    )


def play_sound_file(
    sound_file: Path, template: str, placeholder: str = SOUND_FILE_PLACEHOLDER
) -> None:
    """
    Runs the play command for a sound file and waits for it to finish.

    Raises:
        PlaybackError: If the command cannot be started or exits non-zero.
    """
    command = build_play_command(template, sound_file, placeholder)
    logger.debug(msg=f"Running sound command: {command}")
    with Halo(
        text=f"Playing {Path(sound_file).stem}",
        spinner="dots",
        text_color="green",
    ):
        try:
            subprocess.run(
                command,
                check=True,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
            )
        except FileNotFoundError as err:
            raise PlaybackError(f"Sound command {command[0]!r} not found") from err
        except subprocess.CalledProcessError as err:
            output = (err.stdout or b"").decode(errors="replace").strip()
            raise PlaybackError(
                f"Sound command exited with status {err.returncode}: {output}"
            ) from err
        except OSError as err:
            raise PlaybackError(f"Unable to run sound command: {err}") from err
