"""
Time value parsing for the timer command.

A time value is a sequence of ``<integer><unit>`` pairs where the unit is one
of ``h``, ``m`` or ``s``, for example ``1h20m30s``, ``70m`` or ``2m200s``.
Components may exceed their natural range and units may repeat; the parsed
value is the sum of all components.
"""

import logging
import re
import threading
from datetime import timedelta

from timer.errors import DurationParseError
from timer.utils import get_logger

logger: logging.Logger = get_logger(__name__)

_UNIT_SECONDS = {"h": 3600, "m": 60, "s": 1}
_COMPONENT = re.compile(r"(\d+)([hms])")
_TIME_VALUE = re.compile(r"(?:\d+[hms])+")
# Leaves headroom for the nanosecond deadlines of time.sleep and Event.wait.
MAX_DURATION_SECONDS = int(threading.TIMEOUT_MAX) // 2


def parse_duration(value: str) -> timedelta:
    """
    Parses a time value into a positive duration.

    Arguments:
        value (str): Time value such as ``1h5m`` or ``100s``.

    Returns:
        timedelta: The parsed duration.

    Raises:
        DurationParseError: If the value is empty, malformed or not positive.
    """
    text = (value or "").strip()
    if not _TIME_VALUE.fullmatch(text):
        raise DurationParseError(f"Invalid time value {value!r}, expected e.g. 1h20m30s")

    total_seconds = sum(
        int(amount) * _UNIT_SECONDS[unit] for amount, unit in _COMPONENT.findall(text)
    )
    if total_seconds <= 0:
        raise DurationParseError(f"Time value {value!r} must be greater than zero")
    if total_seconds > MAX_DURATION_SECONDS:
        raise DurationParseError(
            f"Time value {value!r} exceeds the maximum of {MAX_DURATION_SECONDS} seconds"
        )

    logger.debug(msg=f"Parsed time value {value!r} as {total_seconds} seconds")
    return timedelta(seconds=total_seconds)
