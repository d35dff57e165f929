"""Core components for configster."""

from .config import Settings, load_settings
from .exceptions import ExitCode, InvalidDelimiter, MalformedOptions
from .file import parse_file, parse_string, scan_file, scan_string
from .logging import get_logger, setup_logging
from .parser import parse_line, scan_line
from .types import InvalidLine, OptionRecord, ValidLine, Value

__all__ = [
    "ExitCode",
    "InvalidDelimiter",
    "InvalidLine",
    "MalformedOptions",
    "OptionRecord",
    "Settings",
    "ValidLine",
    "Value",
    "get_logger",
    "load_settings",
    "parse_file",
    "parse_line",
    "parse_string",
    "scan_file",
    "scan_line",
    "scan_string",
    "setup_logging",
]
