"""
Logging configuration for the tasklist CLI.

The terminal is taken by the interactive menu, so full logs go to a file and
only warnings and errors reach stderr.
"""
import logging
import sys
from pathlib import Path
from typing import Optional, Union

from tasklist.constants import DEFAULT_LOG_DIR, LOG_FILE_NAME

_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class _ConsoleFilter(logging.Filter):
    """Keep the menu readable: tasklist warnings and anyone's errors only."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith("tasklist"):
            return record.levelno >= logging.WARNING
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: Union[str, Path] = DEFAULT_LOG_DIR,
    file_level: Union[int, str] = logging.INFO,
    console_level: int = logging.WARNING,
) -> Optional[Path]:
    """
    Configure the "tasklist" logger with a file handler and a quiet console handler.

    Call this once at startup. Calling it again replaces the handlers.
    If the log file cannot be opened, only the console handler is installed.

    Returns:
        Path of the log file, or None when file logging is unavailable.
    """
    log_file = Path(log_dir) / LOG_FILE_NAME

    if isinstance(file_level, str):
        file_level = logging.getLevelName(file_level.upper())
        if not isinstance(file_level, int):
            file_level = logging.INFO

    logger = logging.getLogger("tasklist")
    logger.setLevel(min(file_level, console_level))
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    fmt = logging.Formatter(fmt=_FORMAT, datefmt=_DATE_FORMAT)

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleFilter())
    logger.addHandler(ch)

    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_file), encoding="utf-8")
    except OSError as e:
        logger.warning("Cannot write log file %s, logging to console only: %s", log_file, e)
        log_file = None
    else:
        fh.setLevel(file_level)
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    # Route warnings.warn(...) into logging as 'py.warnings'
    logging.captureWarnings(True)

    return log_file
