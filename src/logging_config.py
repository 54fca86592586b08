"""
Logging Configuration
Sets up the loggers for the landing scene packages.
"""
import logging
import sys
from typing import Optional, Union

# Top-level packages whose module loggers should share the handlers below
LOGGER_NAMESPACES = ("landing", "core", "camera", "textures", "ui", "main")


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Configures the loggers of every project namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG or "DEBUG")
        log_file: Optional path to save logs to a file.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level!r}")

    # Format: Time - Module - Level - Message
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)

    for name in LOGGER_NAMESPACES:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        # Avoid duplicate output when setup runs more than once
        if logger.hasHandlers():
            logger.handlers.clear()
        for handler in handlers:
            logger.addHandler(handler)
        logger.propagate = False

    logging.getLogger("landing").info("Logging initialized.")


def log_timing(logger: logging.Logger, message: str, start_time: float, end_time: float) -> None:
    """Log how long a setup phase took (DEBUG level)."""
    logger.debug("%s took %.6f seconds", message, end_time - start_time)
