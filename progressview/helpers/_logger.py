# progressview/helpers/_logger.py

# SECTION: MODULE DOCSTRING
"""Configures the application logger.

A single named logger is shared by every module. Console output goes through
Rich (warnings and above); a rotating file handler is added when a log
directory is given.
"""

# SECTION: IMPORTS
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from rich.logging import RichHandler

# SECTION: CONSTANTS
LOGGER_NAME = "ProgressView"
LOG_FILENAME = "progressview.log"
LOG_FORMAT_FILE = "%(asctime)s - %(filename)s:%(lineno)d - %(levelname)s - %(message)s"
SUCCESS_LEVEL_NUM = 25

# --- Custom Success Level ---
logging.addLevelName(SUCCESS_LEVEL_NUM, "SUCCESS")


def success(self, message, *args, **kws):
    if self.isEnabledFor(SUCCESS_LEVEL_NUM):
        self._log(SUCCESS_LEVEL_NUM, message, args, **kws)


logging.Logger.success = success


# FUNC: setup_logging
def setup_logging(
    log_level: int | str = logging.DEBUG,
    logger_name: str = LOGGER_NAME,
    log_dir: Path | None = None,
) -> logging.Logger:
    """Configures the named logger with a Rich console handler and an optional file handler.

    Args:
        log_level: Level for the logger itself.
        logger_name: Name of the logger to configure.
        log_dir: Directory for the rotating log file. No file is written when None.

    Returns:
        The configured logger.
    """
    log = logging.getLogger(logger_name)
    log.setLevel(log_level)

    # Clear existing handlers to prevent duplicates
    if log.hasHandlers():
        log.handlers.clear()

    rich_handler = RichHandler(rich_tracebacks=True, show_path=False)
    rich_handler.setLevel(logging.WARNING)
    rich_handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    log.addHandler(rich_handler)

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_dir / LOG_FILENAME,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT_FILE))
        log.addHandler(file_handler)

    root_logger = logging.getLogger()
    if not root_logger.handlers:
        root_logger.addHandler(logging.NullHandler())

    log.propagate = False
    return log


_log_instance: logging.Logger | None = None


# FUNC: get_logger
def get_logger() -> logging.Logger:
    global _log_instance
    if _log_instance is None:
        _log_instance = setup_logging(log_level=logging.DEBUG)
    return _log_instance


log = get_logger()
