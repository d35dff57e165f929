"""
Custom exceptions for configster.

The parser itself only raises InvalidDelimiter; I/O and decoding errors
propagate unchanged. The remaining types are used by the CLI and carry
an exit code. All exceptions support JSON serialization via --json-errors.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Optional


class ExitCode:
    """Standard exit codes for configster."""
    SUCCESS = 0
    GENERAL_ERROR = 1
    FILE_ERROR = 2
    DECODE_ERROR = 3
    MALFORMED_OPTIONS = 4
    INVALID_ARGUMENT = 5


@dataclass
class InvalidDelimiter(ValueError):
    """Raised when the attribute delimiter is not a single character.

    Attributes:
        delimiter: The rejected delimiter value
    """
    delimiter: str

    def __str__(self) -> str:
        return f"Attribute delimiter must be a single character, got {self.delimiter!r}"

    @property
    def exit_code(self) -> int:
        return ExitCode.INVALID_ARGUMENT


@dataclass
class MalformedOptions(Exception):
    """Raised in strict mode when option names contain whitespace.

    Attributes:
        path: Source file (or "<stdin>")
        line_numbers: 1-based line numbers of the malformed lines
    """
    path: str
    line_numbers: list[int] = field(default_factory=list)

    def __str__(self) -> str:
        if len(self.line_numbers) == 1:
            return f"{self.path}: malformed option on line {self.line_numbers[0]}"
        lines = ", ".join(str(n) for n in self.line_numbers)
        return f"{self.path}: {len(self.line_numbers)} malformed options on lines {lines}"

    @property
    def exit_code(self) -> int:
        return ExitCode.MALFORMED_OPTIONS


def exit_code_for(exc: BaseException) -> int:
    """Map an exception to the exit code the CLI should use."""
    if hasattr(exc, "exit_code"):
        return exc.exit_code
    if isinstance(exc, UnicodeDecodeError):
        return ExitCode.DECODE_ERROR
    if isinstance(exc, OSError):
        return ExitCode.FILE_ERROR
    return ExitCode.GENERAL_ERROR


def exception_to_json(exc: Exception, context: Optional[dict[str, Any]] = None) -> dict[str, Any]:
    """Convert an exception to a JSON-serializable dictionary.

    Args:
        exc: The exception to convert
        context: Optional additional context (file, delimiter, etc.)

    Returns:
        JSON-serializable dict with error details
    """
    error_dict: dict[str, Any] = {
        "type": type(exc).__name__,
        "message": str(exc),
        "exit_code": exit_code_for(exc),
    }

    if isinstance(exc, MalformedOptions):
        error_dict["path"] = exc.path
        error_dict["line_numbers"] = exc.line_numbers

    elif isinstance(exc, InvalidDelimiter):
        error_dict["delimiter"] = exc.delimiter

    elif isinstance(exc, UnicodeDecodeError):
        error_dict["encoding"] = exc.encoding
        error_dict["position"] = exc.start

    elif isinstance(exc, OSError):
        if exc.filename is not None:
            error_dict["path"] = str(exc.filename)
        if exc.errno is not None:
            error_dict["errno"] = exc.errno

    if context:
        error_dict["context"] = context

    return {"error": error_dict}


def format_json_error(exc: Exception, context: Optional[dict[str, Any]] = None) -> str:
    """Format an exception as a JSON string."""
    return json.dumps(exception_to_json(exc, context), indent=2, default=str)
