"""
Decorator utilities for CLI error handling.

Converts the errors the parser lets propagate (FileNotFoundError,
PermissionError, other OSError, UnicodeDecodeError) and configster's own
exceptions into a message and an exit code.
"""

import functools
import sys
from typing import Callable, ParamSpec, TypeVar

import click

from ..core.exceptions import ExitCode, InvalidDelimiter, MalformedOptions
from .output import handle_error, print_error

P = ParamSpec("P")
R = TypeVar("R")


def handle_io_errors(
    json_errors: bool = False,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Decorator for consistent error handling in CLI commands.

    JSON output is used when ``json_errors`` is set or when the group was
    invoked with --json-errors.

    Example:
        @click.command()
        @handle_io_errors()
        def parse(file):
            records = parse_file(file)  # May raise
            ...
    """
    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            use_json = json_errors or _json_errors_requested()
            try:
                return func(*args, **kwargs)
            except (InvalidDelimiter, MalformedOptions) as e:
                sys.exit(handle_error(e, json_errors=use_json))
            except UnicodeDecodeError as e:
                if use_json:
                    sys.exit(handle_error(e, json_errors=True))
                print_error(f"Cannot decode file as {e.encoding}: {e.reason} at byte {e.start}")
                sys.exit(ExitCode.DECODE_ERROR)
            except FileNotFoundError as e:
                _exit_with(e, f"File not found: {_extract_path(e)}", use_json)
            except PermissionError as e:
                _exit_with(e, f"Permission denied: {_extract_path(e)}", use_json)
            except OSError as e:
                _exit_with(e, f"I/O error: {e}", use_json)
        return wrapper
    return decorator


def _json_errors_requested() -> bool:
    ctx = click.get_current_context(silent=True)
    if ctx is None or not isinstance(ctx.find_root().obj, dict):
        return False
    return bool(ctx.find_root().obj.get("json_errors", False))


def _exit_with(exc: OSError, message: str, json_output: bool) -> None:
    if json_output:
        sys.exit(handle_error(exc, json_errors=True))
    print_error(message)
    sys.exit(ExitCode.FILE_ERROR)


def _extract_path(exc: OSError) -> str:
    """Extract path from OSError for user-friendly messages."""
    if exc.filename is not None:
        return str(exc.filename)
    msg = str(exc)
    if ":" in msg:
        # Format: "[Errno N] Message: path"
        parts = msg.rsplit(":", 1)
        if len(parts) == 2:
            path = parts[1].strip().strip("'\"")
            if path:
                return path
    return msg
