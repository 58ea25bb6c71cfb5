"""Tests for the countdown engine's tick accounting and ordering."""

import io
import threading
import time
from datetime import timedelta

import pytest

import timer.countdown as countdown_module
from timer.countdown import EXPIRED_MESSAGE, ConsoleProgress, Countdown, run_countdown
from timer.domain import CountdownTick
from timer.errors import DurationParseError


def test_countdown_emits_exactly_one_update_per_tick(recording_renderer) -> None:
    """A completed countdown reports every tick boundary exactly once."""
    Countdown(timedelta(seconds=0.2), renderer=recording_renderer).run()

    ticks = recording_renderer.ticks
    assert [tick.tick for tick in ticks] == list(range(1, 101))
    assert ticks[-1].percent == 100
    assert ticks[-1].elapsed_seconds == pytest.approx(0.2)


def test_countdown_elapsed_is_monotonic_and_bounded(recording_renderer) -> None:
    """Elapsed never decreases and never exceeds the total."""
    Countdown(timedelta(seconds=0.1), renderer=recording_renderer).run()

    elapsed = [tick.elapsed_seconds for tick in recording_renderer.ticks]
    assert elapsed == sorted(elapsed)
    assert all(0 <= value <= 0.1 for value in elapsed)
    assert all(0 <= tick.percent <= 100 for tick in recording_renderer.ticks)


def test_countdown_catches_up_when_foreground_finishes_first(recording_renderer) -> None:
    """Ticks the ticker did not reach are drawn before the countdown returns."""
    Countdown(
        timedelta(seconds=100),
        renderer=recording_renderer,
        sleep=lambda _seconds: None,
    ).run()

    assert len(recording_renderer.ticks) == 100
    assert recording_renderer.events[0] == ("start", 100.0)
    assert recording_renderer.events[-1] == "finish"
    assert recording_renderer.ticks[49].elapsed_seconds == pytest.approx(50.0)
    assert recording_renderer.ticks[49].remaining_seconds == pytest.approx(50.0)


def test_countdown_blocks_for_full_duration(recording_renderer) -> None:
    started = time.monotonic()

    Countdown(timedelta(seconds=0.3), renderer=recording_renderer).run()

    assert time.monotonic() - started >= 0.3


def test_countdown_stops_ticker_before_returning(recording_renderer) -> None:
    """No countdown-ticker thread survives a finished run."""
    Countdown(timedelta(seconds=0.05), renderer=recording_renderer).run()

    names = [thread.name for thread in threading.enumerate()]
    assert "countdown-ticker" not in names


def test_countdown_interrupted_wait_stops_ticker_without_catch_up(
    recording_renderer,
) -> None:
    """An interrupted countdown propagates the error and skips remaining ticks."""

    def _interrupt(_seconds: float) -> None:
        raise KeyboardInterrupt

    with pytest.raises(KeyboardInterrupt):
        Countdown(
            timedelta(seconds=100),
            renderer=recording_renderer,
            sleep=_interrupt,
        ).run()

    assert recording_renderer.ticks == []
    assert recording_renderer.events[-1] == "finish"


@pytest.mark.parametrize("seconds", [0, -5])
def test_countdown_rejects_non_positive_durations(seconds: float) -> None:
    with pytest.raises(DurationParseError):
        Countdown(timedelta(seconds=seconds))


def test_countdown_rejects_durations_beyond_maximum() -> None:
    with pytest.raises(DurationParseError, match="exceeds the maximum"):
        Countdown(timedelta(days=999999999))


def test_countdown_rejects_non_positive_tick_count() -> None:
    with pytest.raises(ValueError):
        Countdown(timedelta(seconds=1), ticks=0)


def test_countdown_supports_custom_tick_count(recording_renderer) -> None:
    Countdown(
        timedelta(seconds=10),
        ticks=4,
        renderer=recording_renderer,
        sleep=lambda _seconds: None,
    ).run()

    assert [tick.percent for tick in recording_renderer.ticks] == [25, 50, 75, 100]


def test_console_progress_draws_percent_and_times() -> None:
    stream = io.StringIO()
    progress = ConsoleProgress(stream)

    progress.start(200.0)
    progress.update(CountdownTick(tick=25, ticks=100, elapsed_seconds=50.0, total_seconds=200.0))
    progress.finish()

    output = stream.getvalue()
    assert "0%" in output
    assert " 25%" in output
    assert "passed: 50s, remaining: 2m30s, total: 3m20s" in output
    assert output.endswith("\n")


def test_run_countdown_prints_expiry_after_last_update(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """The expiry message is written only after all progress updates."""
    stream = io.StringIO()
    monkeypatch.setattr(countdown_module.time, "sleep", lambda _seconds: None)

    run_countdown(timedelta(seconds=5), ticks=10, stream=stream)

    output = stream.getvalue()
    assert output.count("\r⏲") == 11
    assert output.rindex(EXPIRED_MESSAGE) > output.rindex("100%")
