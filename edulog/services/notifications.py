"""Transient user notifications (toasts)."""

import logging

logger = logging.getLogger(__name__)


class Notifier:
    """Delivers short success/failure messages to the user."""

    def success(self, message: str):
        raise NotImplementedError

    def error(self, message: str):
        raise NotImplementedError


class LoggingNotifier(Notifier):
    """Notifier that only writes to the log. Used outside the web UI."""

    def success(self, message: str):
        logger.info(message)

    def error(self, message: str):
        logger.warning(message)
