"""
Timer

This module serves as the entry point for the timer command. It parses the
command-line options, loads the sound library, resolves the single operation
matching the supplied options and runs it.

Usage:
    timer -t 30m                 start a timer of 30 minutes
    timer -t 30m -s Alien -n     play a sound and notify when it expires
    timer -l                     list the sounds in the library
    timer -a ~/Alien.mp3         add a sound to the library
    timer -d Alien               remove a sound from the library

Exit status is 0 on success and 1 on any failure.
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from dotenv import load_dotenv

from timer.config import reload_settings
from timer.dispatch import dispatch
from timer.domain import ArgumentSet
from timer.errors import InvalidArgumentCombination, TimerError
from timer.operations import TimerOperations
from timer.sound_library import SoundLibrary
from timer.utils import configure_logging, get_logger

VERSION = "0.0.1"

HELP_TEXT = f"""timer version {VERSION}

Set a timer. Play a sound when the timer expires. Receive notification when the
timer expires.

Command to play the sound is read from the environment variable TIMER_SOUND_CMD.
It should contain the placeholder text FILE where the filename should appear in
the command. By default the audacious application is used:
    audacious --headless --quit-after-play FILE

Added sounds are stored in $HOME/.config/timer/sounds on Linux and
%HOME%\\AppData\\timer\\sounds on Windows. Name of the file is the name of the sound.

Time value is of the format 1h20m30s. Some valid examples are:
    2h          time of 2 hours
    1h5m        time of 1 hour 5 minutes
    5h10m10s    time of 5 hours 10 minutes 10 seconds
    70m         time of 70 minutes
    100s        time of 100 seconds
    2m200s      time of 2 minutes 200 seconds

Supported combinations of options:
    -t TIME                  run the timer
    -t TIME -s NAME          run the timer, then play a sound
    -t TIME -n               run the timer, then show a notification
    -t TIME -s NAME -n       run the timer, show a notification and play a sound
    -s NAME                  play a sound
    -l                       list available sounds
    -a FILE                  add FILE to the sound library
    -d NAME                  remove the sound NAME from the sound library
"""

logger: logging.Logger = get_logger("timer")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="timer",
        description=HELP_TEXT,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument(
        "-t", "-time", "--time",
        dest="time",
        metavar="TIME",
        help="time value",
    )
    parser.add_argument(
        "-s", "-sound", "--sound",
        dest="sound",
        metavar="NAME",
        help="play this sound after timer expires",
    )
    parser.add_argument(
        "-l", "-sounds", "--sounds",
        dest="sounds",
        action="store_true",
        help="show the list of available sounds",
    )
    parser.add_argument(
        "-n", "-notify", "--notify",
        dest="notify",
        action="store_true",
        help="show notification",
    )
    parser.add_argument(
        "-a", "-addsound", "--addsound",
        dest="addsound",
        metavar="FILE",
        help="add FILE to the sound library",
    )
    parser.add_argument(
        "-d", "-deletesound", "--deletesound",
        dest="deletesound",
        metavar="NAME",
        help="remove the sound named NAME from the sound library",
    )
    parser.add_argument(
        "-v", "-verbose", "--verbose",
        dest="verbose",
        action="store_true",
        help="print more details on error",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
        type=str.upper,
        help="logging level; overrides the LOG_LEVEL environment variable",
    )
    parser.add_argument(
        "-h", "-help", "--help",
        action="help",
        help="show this help information",
    )
    return parser


def _to_argument_set(args: argparse.Namespace) -> ArgumentSet:
    return ArgumentSet(
        time=args.time,
        sound=args.sound,
        sounds=args.sounds,
        notify=args.notify,
        addsound=args.addsound,
        deletesound=args.deletesound,
        verbose=args.verbose,
    )


def _report_failure(err: TimerError, verbose: bool) -> None:
    print(err.summary, file=sys.stderr)
    if verbose:
        logger.error(msg=f"{type(err).__name__}: {err}", exc_info=err)
    if isinstance(err, InvalidArgumentCombination):
        print("Type 'timer -help' to see how to use", file=sys.stderr)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """
    Main function to handle the command line interface logic.
    """
    args = build_parser().parse_args(argv)
    load_dotenv()

    if args.log_level:
        configure_logging(args.log_level)
    elif args.verbose:
        configure_logging(logging.DEBUG)
    else:
        configure_logging()

    arguments = _to_argument_set(args)
    settings = reload_settings()

    try:
        library = SoundLibrary(settings.sounds.folder)
        operation = dispatch(arguments)
        TimerOperations(arguments, library, settings).run(operation)
    except TimerError as err:
        _report_failure(err, arguments.verbose)
        sys.exit(1)

    sys.exit(0)


if __name__ == "__main__":
    main()
