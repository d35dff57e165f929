"""
configster - line-oriented configuration file parser

Reads files of ``option = primary, attr, attr`` lines into an ordered
list of option records.
"""

__version__ = "0.1.0"

from .core.file import parse_file, parse_string, scan_file, scan_string
from .core.parser import parse_line, scan_line
from .core.types import InvalidLine, OptionRecord, ValidLine, Value


def get_version() -> str:
    """Return the library version."""
    return __version__


__all__ = [
    "InvalidLine",
    "OptionRecord",
    "ValidLine",
    "Value",
    "__version__",
    "get_version",
    "parse_file",
    "parse_line",
    "parse_string",
    "scan_file",
    "scan_line",
    "scan_string",
]
