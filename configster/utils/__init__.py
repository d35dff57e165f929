"""Utility functions for configster."""

from .decorators import handle_io_errors
from .output import (
    handle_error,
    print_records,
    print_scan_report,
    records_to_json,
    records_to_text,
)

__all__ = [
    "handle_error",
    "handle_io_errors",
    "print_records",
    "print_scan_report",
    "records_to_json",
    "records_to_text",
]
