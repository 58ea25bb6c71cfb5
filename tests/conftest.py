import contextlib
import io
import sys
from pathlib import Path
from typing import Sequence

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import timer.__main__ as timer_main
import timer.config as config_module
from timer.config import AppConfig, SoundConfig
from timer.domain import CountdownTick


class RecordingRenderer:
    """Collects countdown progress instead of drawing it."""

    def __init__(self) -> None:
        self.events: list[object] = []

    def start(self, total_seconds: float) -> None:
        self.events.append(("start", total_seconds))

    def update(self, tick: CountdownTick) -> None:
        self.events.append(tick)

    def finish(self) -> None:
        self.events.append("finish")

    @property
    def ticks(self) -> list[CountdownTick]:
        return [event for event in self.events if isinstance(event, CountdownTick)]


@pytest.fixture(autouse=True)
def _silence_halo(monkeypatch):
    """Replace Halo spinners with a no-op context manager for tests."""

    class _DummyHalo:
        def __init__(self, *args, **kwargs):
            self.text = kwargs.get("text")

        def __enter__(self):
            return self

        def __exit__(self, exc_type, exc, tb):
            return False

    monkeypatch.setattr("timer.player.Halo", _DummyHalo, raising=False)
    monkeypatch.setattr("timer.sound_library.Halo", _DummyHalo, raising=False)


@pytest.fixture
def sounds_dir(tmp_path: Path) -> Path:
    folder = tmp_path / "sounds"
    folder.mkdir()
    return folder


@pytest.fixture
def settings(sounds_dir: Path) -> AppConfig:
    return AppConfig(sounds=SoundConfig(folder=sounds_dir, command="player FILE"))


@pytest.fixture
def recording_renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture
def home_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Points HOME at a temporary directory and reloads settings."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("TIMER_SOUND_CMD", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    config_module.reload_settings()
    return home


@pytest.fixture
def run_cli(monkeypatch):
    """Run the timer CLI with a custom argv list."""
    monkeypatch.setattr(timer_main, "load_dotenv", lambda: None)

    def _run_cli(args: Sequence[str]) -> tuple[int, str]:
        stdout = io.StringIO()
        with contextlib.redirect_stdout(stdout), contextlib.redirect_stderr(stdout):
            try:
                timer_main.main(list(args))
            except SystemExit as exc:
                return exc.code, stdout.getvalue()
        raise AssertionError("CLI did not exit as expected")

    return _run_cli

