from .config import AppConfig, get_settings, reload_settings
from .countdown import Countdown, run_countdown
from .dispatch import ArgumentFlag, Operation, dispatch, resolve_operation
from .domain import ArgumentSet, CountdownTick
from .duration import parse_duration
from .operations import TimerOperations
from .sound_library import SoundLibrary
