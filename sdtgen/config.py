import logging

from systemd.journal import JournalHandler


APP_LOGGER_NAME = 'sdtgen'


def setup_logger(level: int = logging.DEBUG) -> logging.Logger:
    """Send the sdtgen logs to the systemd journal.

    Calling it again only updates the level.
    """
    app_logger = logging.getLogger(APP_LOGGER_NAME)
    app_logger.setLevel(level)

    if not any(
        isinstance(handler, JournalHandler)
        for handler in app_logger.handlers
    ):
        app_logger.addHandler(
            JournalHandler(SYSLOG_IDENTIFIER=APP_LOGGER_NAME)
        )

    return app_logger
