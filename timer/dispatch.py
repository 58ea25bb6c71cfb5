"""
Argument Dispatcher for the timer command.

The options present on the command line are encoded as a bitmask of
``ArgumentFlag`` values. A fixed table maps each supported combination to
exactly one ``Operation``; lookup is exact, so any other combination,
including supersets of a supported one, is rejected.
"""

import enum
from types import MappingProxyType
from typing import Mapping

from timer.domain import ArgumentSet
from timer.errors import InvalidArgumentCombination


class ArgumentFlag(enum.IntFlag):
    """Presence bit for each option that selects an operation."""

    NONE = 0
    TIME = enum.auto()
    SOUND = enum.auto()
    SOUNDS = enum.auto()
    NOTIFY = enum.auto()
    ADDSOUND = enum.auto()
    DELETESOUND = enum.auto()


class Operation(str, enum.Enum):
    """User intents the command can carry out."""

    TIMED = "timed"
    TIMED_SOUND = "timed_sound"
    TIMED_NOTIFY = "timed_notify"
    TIMED_SOUND_NOTIFY = "timed_sound_notify"
    LIST_SOUNDS = "list_sounds"
    PLAY_SOUND = "play_sound"
    ADD_SOUND = "add_sound"
    DELETE_SOUND = "delete_sound"


DISPATCH_TABLE: Mapping[ArgumentFlag, Operation] = MappingProxyType(
    {
        ArgumentFlag.TIME: Operation.TIMED,
        ArgumentFlag.TIME | ArgumentFlag.SOUND: Operation.TIMED_SOUND,
        ArgumentFlag.TIME | ArgumentFlag.NOTIFY: Operation.TIMED_NOTIFY,
        ArgumentFlag.TIME
        | ArgumentFlag.SOUND
        | ArgumentFlag.NOTIFY: Operation.TIMED_SOUND_NOTIFY,
        ArgumentFlag.SOUNDS: Operation.LIST_SOUNDS,
        ArgumentFlag.SOUND: Operation.PLAY_SOUND,
        ArgumentFlag.ADDSOUND: Operation.ADD_SOUND,
        ArgumentFlag.DELETESOUND: Operation.DELETE_SOUND,
    }
)


def argument_flags(arguments: ArgumentSet) -> ArgumentFlag:
    """Encodes which operation-selecting options are present."""
    flags = ArgumentFlag.NONE
    if arguments.time:
        flags |= ArgumentFlag.TIME
    if arguments.sound:
        flags |= ArgumentFlag.SOUND
    if arguments.sounds:
        flags |= ArgumentFlag.SOUNDS
    if arguments.notify:
        flags |= ArgumentFlag.NOTIFY
    if arguments.addsound:
        flags |= ArgumentFlag.ADDSOUND
    if arguments.deletesound:
        flags |= ArgumentFlag.DELETESOUND
    return flags


def resolve_operation(flags: ArgumentFlag) -> Operation:
    """
    Returns the operation registered for exactly this flag combination.

    Raises:
        InvalidArgumentCombination: If the combination is not supported.
    """
    try:
        return DISPATCH_TABLE[ArgumentFlag(flags)]
    except (KeyError, ValueError) as err:
        raise InvalidArgumentCombination(
            f"Unsupported combination of options: {_describe(flags)}"
        ) from err


def dispatch(arguments: ArgumentSet) -> Operation:
    return resolve_operation(argument_flags(arguments))


def _describe(flags: ArgumentFlag) -> str:
    names = [
        member.name.lower()
        for member in ArgumentFlag
        if member is not ArgumentFlag.NONE and member in ArgumentFlag(flags)
    ]
    return ", ".join(names) if names else "none"
