"""
Low Roller - Logging Configuration

Routes library log records to stderr so they never interleave with the
game's own console output on stdout.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int = "WARNING") -> logging.Logger:
    """
    Configure the ``low_roller`` logger hierarchy.

    Safe to call more than once; the handler is replaced, not duplicated.

    Returns:
        The package root logger
    """
    if isinstance(level, str):
        numeric = logging.getLevelName(level.upper())
        if not isinstance(numeric, int):
            raise ValueError(f"Unknown log level {level!r}.")
        level = numeric

    root = logging.getLogger("low_roller")
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(level)
    return root
