"""
Logging Configuration
=====================
Routes the records of every `cadcurves.*` module to the console, and
optionally to a log file.
"""
import logging
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Attach handlers to the 'cadcurves' package logger.

    Calling this again replaces the previous handlers instead of stacking
    new ones on top of them.

    Args:
        level: Threshold for the logger and all of its handlers.
        log_file: If given, records are also written to this file (overwritten).
    """
    package_logger = logging.getLogger("cadcurves")
    package_logger.setLevel(level)

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')

    # stdout belongs to the curve report
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)

    target = f"stderr and {log_file}" if log_file else "stderr"
    package_logger.info(f"Logging to {target} at {logging.getLevelName(level)}")
