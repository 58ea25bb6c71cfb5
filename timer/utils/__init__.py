from .logger import configure_logging, get_logger
from .common_utils import format_duration
