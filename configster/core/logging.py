"""
Logging configuration for configster.

Provides centralized logging setup with verbosity levels:
- 0 (default): WARNING - malformed lines and failures only
- 1 (-v):      INFO - files parsed and record counts
- 2 (-vv):     DEBUG - open/close and per-file settings
- 3+ (-vvv):   TRACE - every record as it is produced

SourceLoggerAdapter prefixes messages with the file and line being parsed.
"""

import logging
import sys
from typing import Optional

# Custom TRACE level (more verbose than DEBUG)
TRACE = 5
logging.addLevelName(TRACE, "TRACE")


def trace(self, message, *args, **kwargs):
    """Log at TRACE level."""
    if self.isEnabledFor(TRACE):
        self._log(TRACE, message, args, **kwargs)


# Add trace method to Logger class
logging.Logger.trace = trace

# Library use: stay silent until the application configures logging
logging.getLogger("configster").addHandler(logging.NullHandler())


class SourceLoggerAdapter(logging.LoggerAdapter):
    """Logger adapter that includes the source position in messages.

    Usage:
        logger = SourceLoggerAdapter(get_logger(__name__), "app.conf")
        logger.warning("bad option", line_number=7)  # [app.conf:7] bad option
    """

    def __init__(self, logger: logging.Logger, source: str):
        super().__init__(logger, {})
        self.source = source

    def process(self, msg, kwargs):
        line_number = kwargs.pop("line_number", None)
        if line_number is not None:
            return f"[{self.source}:{line_number}] {msg}", kwargs
        return f"[{self.source}] {msg}", kwargs

    def trace(self, msg, *args, **kwargs):
        if self.isEnabledFor(TRACE):
            self.log(TRACE, msg, *args, **kwargs)


def setup_logging(verbosity: int = 0, quiet: bool = False) -> logging.Logger:
    """Configure logging based on verbosity level.

    Args:
        verbosity: Number of -v flags (0=WARNING, 1=INFO, 2=DEBUG, 3+=TRACE)
        quiet: If True, suppress all output except errors

    Returns:
        The configured root logger for configster
    """
    if quiet:
        level = logging.ERROR
    elif verbosity == 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    elif verbosity == 2:
        level = logging.DEBUG
    else:  # verbosity >= 3
        level = TRACE

    logger = logging.getLogger("configster")
    logger.setLevel(level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)

    if verbosity >= 2:
        fmt = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
        datefmt = "%H:%M:%S"
    elif verbosity == 1:
        fmt = "[%(levelname)s] %(message)s"
        datefmt = None
    else:
        fmt = "%(message)s"
        datefmt = None

    handler.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    logger.addHandler(handler)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger for a module.

    Args:
        name: Module name (e.g., "configster.core.file").
              If None, returns the root configster logger.
    """
    if name is None:
        return logging.getLogger("configster")
    return logging.getLogger(name)


def get_source_logger(name: str, source: str) -> SourceLoggerAdapter:
    """Get a logger that prefixes messages with a source file name."""
    return SourceLoggerAdapter(get_logger(name), source)
