import logging

from plyer import notification

from timer.config import NotificationConfig
from timer.errors import NotificationError
from timer.utils import get_logger

logger: logging.Logger = get_logger(__name__)


def show_notification(config: NotificationConfig) -> None:
    """Raises a desktop notification, wrapping any backend failure."""
    try:
        notification.notify(
            title=config.title,
            message=config.message,
            app_name=config.app_name,
            timeout=config.timeout,
        )
    except Exception as err:
        raise NotificationError(f"Error showing notification: {err}") from err
    logger.debug(msg=f"Notification {config.title!r} shown")
