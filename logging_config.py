"""
Logging Configuration
Sets up the loggers for the solver and the interactive front-end.
"""
import logging
import sys
from typing import Optional

_NAMESPACES = ("solver", "cli")


def setup_logging(level: int = logging.WARNING, log_file: Optional[str] = None) -> None:
    """
    Configures the 'solver' and 'cli' loggers.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
    """
    # Format: Time - Module - Level - Message
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    # 1. Console Handler (stderr; stdout carries the interactive transcript)
    handlers = []
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    # 2. File Handler (Optional)
    if log_file:
        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    for namespace in _NAMESPACES:
        logger = logging.getLogger(namespace)
        logger.setLevel(level)

        # Check if handlers already exist to avoid duplicate logs on re-setup
        if logger.handlers:
            logger.handlers.clear()
        for handler in handlers:
            logger.addHandler(handler)

    logging.getLogger("solver").info("Logging initialized.")
