import logging
from logging.handlers import RotatingFileHandler
from datetime import datetime, timezone
import pytz
from glowbaby.constants import DEFAULT_TIMEZONE, LOG_FORMAT, LOG_MAX_BYTES, LOG_BACKUP_COUNT


class LocalTimeFormatter(logging.Formatter):
    """Formatter whose asctime is an ISO 8601 time in the plot's local zone."""

    def __init__(self, fmt=LOG_FORMAT, datefmt=None, tz=DEFAULT_TIMEZONE):
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.tz = pytz.timezone(tz) if isinstance(tz, str) else tz

    def formatTime(self, record, datefmt=None):
        local = datetime.fromtimestamp(record.created, tz=timezone.utc).astimezone(
            self.tz
        )
        return local.strftime(datefmt) if datefmt else local.isoformat()


def _drop_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def setup_logger(name: str, file_path: str, tz, level=logging.INFO) -> logging.Logger:
    """Send `name`'s records to a rotating log file and to the console.

    Handlers left by an earlier call for the same name are closed and
    replaced, so a long-lived process can reconfigure without writing every
    line twice.

    Args:
        name (str): logger name, e.g. "glowbaby"
        file_path (str): log file, rotated at LOG_MAX_BYTES
        tz (str or tzinfo): zone used for timestamps, e.g. "America/Chicago"
        level (int, optional): defaults to logging.INFO

    Returns:
        logging.Logger: the configured logger
    """
    logger = logging.getLogger(name)
    _drop_handlers(logger)
    logger.setLevel(level)

    formatter = LocalTimeFormatter(tz=tz)
    handlers = [
        RotatingFileHandler(
            file_path, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT
        ),
        logging.StreamHandler(),
    ]
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger
