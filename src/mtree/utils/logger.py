import logging
import sys
from pathlib import Path
from typing import Optional, TextIO


def setup_logger(
        name: str,
        log_dir: Optional[Path] = None,
        log_file: Optional[str] = None,
        level: int = logging.WARNING,
        format_str: Optional[str] = None,
        stream: Optional[TextIO] = None
) -> logging.Logger:
    """
    Setup logger with console and optional file handlers

    The console handler writes to stderr unless another stream is given,
    so log records never interleave with the rendered tree on stdout.

    Args:
        name: Logger name
        log_dir: Directory for log files
        log_file: Log file name
        level: Logging level
        format_str: Custom format string
        stream: Stream for the console handler

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Remove existing handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    # Default format
    if format_str is None:
        format_str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    formatter = logging.Formatter(format_str)

    # Console handler
    console_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # File handler
    if log_dir and log_file:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_dir / log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def parse_log_level(level_name: str) -> int:
    """
    Convert a level name such as 'debug' or 'WARNING' to a logging level

    Raises:
        ValueError: if the name is not a standard logging level
    """
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {level_name}")
    return level
