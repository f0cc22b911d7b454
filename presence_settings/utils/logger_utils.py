# presence_settings/utils/logger_utils.py

import logging
import logging.handlers
import sys
from pathlib import Path
from datetime import datetime

from presence_settings.core.constants import APP_DATA_DIR, LOG_DIR_NAME, LOG_FILE_PREFIX, LOGGER_NAME


# ANSI escape codes for colors
class LogColors:
    RESET = "\x1b[0m"
    GREY = "\x1b[38;21m"
    GREEN = "\x1b[32m"
    YELLOW = "\x1b[33m"
    RED = "\x1b[31m"
    BOLD_RED = "\x1b[31;1m"
    CYAN = "\x1b[36m"


class ColoredFormatter(logging.Formatter):
    """Console formatter: green time, colored level, cyan location."""

    LOG_LEVEL_COLORS = {
        logging.DEBUG: LogColors.GREY,
        logging.INFO: LogColors.GREEN,
        logging.WARNING: LogColors.YELLOW,
        logging.ERROR: LogColors.RED,
        logging.CRITICAL: LogColors.BOLD_RED,
    }

    def __init__(self, datefmt="%B %d, %Y > %H:%M:%S"):
        super().__init__(fmt="%(message)s", datefmt=datefmt)

    def format(self, record):
        level_color = self.LOG_LEVEL_COLORS.get(record.levelno, LogColors.RESET)

        colored_time = f"{LogColors.GREEN}{self.formatTime(record, self.datefmt)}{LogColors.RESET}"
        colored_level = f"{level_color}{record.levelname:<8}{LogColors.RESET}"
        location = f'File "{record.pathname}", line {record.lineno} |  {record.funcName}'
        colored_location = f"{LogColors.CYAN}{location}{LogColors.RESET}"
        colored_message = f"{level_color}{record.getMessage()}{LogColors.RESET}"

        log_entry = f"{colored_time} | {colored_level} | {colored_location} - {colored_message}"

        if record.exc_info:
            if not record.exc_text:
                record.exc_text = self.formatException(record.exc_info)
            log_entry += f"\n{LogColors.RED}{record.exc_text}{LogColors.RESET}"

        return log_entry


# Global state for the lazily created logger
_logger_instance = None
_custom_log_dir = None
_current_log_file: Path | None = None


def set_log_directory(log_dir):
    """
    Set a custom log directory. Must be called before the logger is first used.
    """
    global _custom_log_dir
    _custom_log_dir = log_dir


def get_logger():
    """Return the shared logger, creating it on first access."""
    global _logger_instance
    if _logger_instance is None:
        _logger_instance = setup_logger(_custom_log_dir)
    return _logger_instance


def get_current_log_file() -> Path | None:
    """Path of the file the logger is currently writing to, if any."""
    return _current_log_file


def setup_logger(log_dir=None):
    global _current_log_file

    # === Setup log folder & file name ===
    if log_dir is None:
        log_dir = APP_DATA_DIR / LOG_DIR_NAME
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H-%M-%S")
    log_file_path = log_dir / f"{LOG_FILE_PREFIX}_{timestamp}.log"

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    # Drop handlers from a previous setup (e.g. after reconfigure_logger)
    if logger.hasHandlers():
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()

    # === Console handler (manual coloring) ===
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(ColoredFormatter())
    logger.addHandler(console_handler)

    # === File handler (no color, structured) ===
    # 5 MB per file, 10 backups
    file_handler = logging.handlers.RotatingFileHandler(
        log_file_path, maxBytes=5 * 1024 * 1024, backupCount=10, encoding="utf-8"
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(
            fmt="{asctime} | {levelname} | {name}:{funcName}:{lineno} - {message}",
            datefmt="%Y-%m-%d %H:%M:%S",
            style="{",
        )
    )
    logger.addHandler(file_handler)

    _current_log_file = log_file_path
    return logger


def reconfigure_logger(log_dir):
    """
    Recreate the logger so its file handler writes into a new directory.
    Called by the composition root whenever debug logging points somewhere new.
    """
    global _logger_instance, _custom_log_dir
    _custom_log_dir = log_dir
    _logger_instance = setup_logger(log_dir)
    return _logger_instance


class LoggerProxy:
    """
    Forwards every logging call to the real logger, which is only created on
    first use. Modules can import `logger` at import time without touching disk.
    """

    def __getattr__(self, name):
        return getattr(get_logger(), name)


logger = LoggerProxy()
__all__ = ["logger", "reconfigure_logger", "set_log_directory", "get_current_log_file"]
