"""
Countdown Engine for the timer command.

A countdown blocks the calling thread for the full duration while a single
background ticker thread redraws a progress line at each of a fixed number of
tick boundaries (100 by default, one per percent).

Ordering:
    The foreground marks the countdown complete, sets the stop event and
    joins the ticker before returning. On a completed countdown the ticker
    draws any tick boundary it has not reached yet before it exits, so a
    run always emits exactly ``ticks`` updates and nothing is drawn after
    ``run`` returns.
"""

import logging
import sys
import threading
import time
from datetime import timedelta
from typing import Callable, Optional, Protocol, TextIO

from colored import attr, fg

from timer.config import DEFAULT_TICKS
from timer.domain import CountdownTick
from timer.duration import MAX_DURATION_SECONDS
from timer.errors import DurationParseError
from timer.utils import format_duration, get_logger

logger: logging.Logger = get_logger(__name__)

CLEAR_LINE = "\r" + " " * 80
EXPIRED_MESSAGE = "⏰  Timer expired!"


class ProgressRenderer(Protocol):
    """Receives the countdown progress."""

    def start(self, total_seconds: float) -> None: ...

    def update(self, tick: CountdownTick) -> None: ...

    def finish(self) -> None: ...


class ConsoleProgress:
    """Redraws a single coloured progress line in place on a terminal stream."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream or sys.stdout

    def _draw(self, percent: int, elapsed: float, total: float) -> None:
        line = (
            f"⏲  {fg('green')}{percent:3d}%{attr('reset')} "
            f"[passed: {format_duration(elapsed)}, "
            f"remaining: {format_duration(total - elapsed)}, "
            f"total: {format_duration(total)}]"
        )
        self.stream.write(CLEAR_LINE)
        self.stream.write(f"\r{line}")
        self.stream.flush()

    def start(self, total_seconds: float) -> None:
        self._draw(0, 0.0, total_seconds)

    def update(self, tick: CountdownTick) -> None:
        self._draw(tick.percent, tick.elapsed_seconds, tick.total_seconds)

    def finish(self) -> None:
        self.stream.write("\n")
        self.stream.flush()


class Countdown:
    """
    Blocks for a fixed duration while reporting progress from a ticker thread.

    Arguments:
        duration (timedelta): Positive duration to wait.
        ticks (int): Number of progress updates spread over the duration.
        renderer (ProgressRenderer): Receives start/update/finish calls.
        sleep (Callable[[float], None]): Foreground blocking wait,
            ``time.sleep`` by default.
    """

    def __init__(
        self,
        duration: timedelta,
        *,
        ticks: int = DEFAULT_TICKS,
        renderer: Optional[ProgressRenderer] = None,
        sleep: Optional[Callable[[float], None]] = None,
    ) -> None:
        total = duration.total_seconds()
        if total <= 0:
            raise DurationParseError(
                f"Countdown duration must be greater than zero, got {format_duration(total)}"
            )
        if total > MAX_DURATION_SECONDS:
            raise DurationParseError(
                f"Countdown duration {format_duration(total)} exceeds the maximum "
                f"of {MAX_DURATION_SECONDS} seconds"
            )
        if ticks <= 0:
            raise ValueError(f"ticks must be positive, got {ticks}")

        self.total_seconds: float = total
        self.ticks = ticks
        self.unit_seconds: float = total / ticks
        self.renderer: ProgressRenderer = renderer or ConsoleProgress()
        self._sleep = sleep or time.sleep
        self._stop = threading.Event()
        self._completed = False
        self._last_tick = 0

    def _tick(self, tick: int) -> CountdownTick:
        return CountdownTick(
            tick=tick,
            ticks=self.ticks,
            elapsed_seconds=self.total_seconds * tick / self.ticks,
            total_seconds=self.total_seconds,
        )

    def _run_ticker(self, started_at: float) -> None:
        for tick in range(1, self.ticks + 1):
            deadline = started_at + self.unit_seconds * tick
            if self._stop.wait(timeout=max(0.0, deadline - time.monotonic())):
                break
            self.renderer.update(self._tick(tick))
            self._last_tick = tick

        if self._completed:
            for tick in range(self._last_tick + 1, self.ticks + 1):
                self.renderer.update(self._tick(tick))
                self._last_tick = tick

    def run(self) -> None:
        """Waits for the full duration, then stops the ticker and returns."""
        logger.debug(
            msg=(
                f"Starting countdown of {format_duration(self.total_seconds)} "
                f"with {self.ticks} ticks of {self.unit_seconds:.3f}s"
            )
        )
        self.renderer.start(self.total_seconds)
        started_at = time.monotonic()
        ticker = threading.Thread(
            target=self._run_ticker,
            args=(started_at,),
            name="countdown-ticker",
            daemon=True,
        )
        ticker.start()
        try:
            self._sleep(self.total_seconds)
            self._completed = True
        finally:
            self._stop.set()
            ticker.join()
            self.renderer.finish()
        logger.debug(msg="Countdown finished")


def run_countdown(
    duration: timedelta,
    *,
    ticks: int = DEFAULT_TICKS,
    renderer: Optional[ProgressRenderer] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Runs a countdown to completion and prints the expiry message."""
    stream = stream or sys.stdout
    Countdown(
        duration,
        ticks=ticks,
        renderer=renderer or ConsoleProgress(stream),
    ).run()
    stream.write(f"{fg('red')}{EXPIRED_MESSAGE}{attr('reset')}\n")
    stream.flush()
