import logging
import sys
from pathlib import Path
from typing import Optional, Union

LIBRARY_LOGGER = "quant_autodiff"


def setup_logging(
    level: Union[str, int] = logging.INFO,
    format_string: Optional[str] = None,
    log_file: Optional[Union[str, Path]] = None,
    console: bool = True,
    logger_name: str = LIBRARY_LOGGER,
) -> logging.Logger:
    """
    Set up logging for applications using the library.

    The library itself only creates module loggers and never installs handlers;
    call this from scripts or notebooks to see its output.

    Args:
        level: Logging level (string or logging constant)
        format_string: Custom format string for log messages
        log_file: Optional file path to write logs to
        console: Whether to log to the console
        logger_name: Logger to configure ("" for the root logger)

    Returns:
        Configured logger instance
    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Convert string level to logging constant
    if isinstance(level, str):
        level = getattr(logging, level.upper())

    formatter = logging.Formatter(format_string)

    logger = logging.getLogger(logger_name)
    logger.setLevel(level)

    # Clear existing handlers so repeated calls do not duplicate output
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        console_handler.setLevel(level)
        logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path)
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance with the specified name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
