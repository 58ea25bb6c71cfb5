"""Domain data structures for command arguments and countdown progress."""

from typing import NamedTuple, Optional


class ArgumentSet(NamedTuple):
    """The options a user may pass on a single invocation."""

    time: Optional[str] = None
    sound: Optional[str] = None
    sounds: bool = False
    notify: bool = False
    addsound: Optional[str] = None
    deletesound: Optional[str] = None
    verbose: bool = False


class CountdownTick(NamedTuple):
    """Progress of a running countdown at one tick boundary, in seconds."""

    tick: int
    ticks: int
    elapsed_seconds: float
    total_seconds: float

    @property
    def percent(self) -> int:
        return (100 * self.tick) // self.ticks

    @property
    def remaining_seconds(self) -> float:
        return self.total_seconds - self.elapsed_seconds
