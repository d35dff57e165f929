"""Record types produced by the configuration parser."""

from dataclasses import dataclass, field
from typing import Any, Optional, Union

# Sentinel option name for lines whose option contains whitespace
INVALID_OPTION = "InvalidOption"


def invalid_option_marker(line_number: Optional[int] = None) -> str:
    """Build the sentinel option name for a malformed line.

    Examples:
        InvalidOption
        InvalidOption_on_Line7
    """
    if line_number is None:
        return INVALID_OPTION
    return f"{INVALID_OPTION}_on_Line{line_number}"


@dataclass
class Value:
    """Right-hand side of an option line."""
    primary: str = ""
    attributes: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"primary": self.primary, "attributes": list(self.attributes)}


@dataclass
class OptionRecord:
    """A single option parsed from a configuration line.

    Attributes:
        option: Option name, or the invalid-option marker for a malformed line
        value: Primary value and attributes
        is_valid: False when the driver degraded a malformed line into this
            record. Set from the line scan, never from the option text.
    """
    option: str
    value: Value = field(default_factory=Value)
    is_valid: bool = field(default=True, compare=False, repr=False)

    @classmethod
    def from_parts(cls, option: str, primary: str, attributes: list[str]) -> "OptionRecord":
        """Create a record from a parse_line() tuple."""
        return cls(option=option, value=Value(primary=primary, attributes=list(attributes)))

    def to_dict(self) -> dict[str, Any]:
        return {"option": self.option, "value": self.value.to_dict()}


@dataclass
class ValidLine:
    """A well-formed option line.

    Attributes:
        line_number: 1-based line number in the source
        record: The parsed option record
    """
    line_number: int
    record: OptionRecord

    @property
    def is_valid(self) -> bool:
        return True

    def to_record(self) -> OptionRecord:
        return self.record


@dataclass
class InvalidLine:
    """A line whose option name contains whitespace.

    The value and attributes are discarded; only the position and the raw
    text are kept for diagnostics.

    Attributes:
        line_number: 1-based line number in the source
        raw_line: The line text without its terminator
    """
    line_number: int
    raw_line: str = ""

    @property
    def is_valid(self) -> bool:
        return False

    @property
    def marker(self) -> str:
        """Sentinel option name used when this line is degraded to a record."""
        return invalid_option_marker(self.line_number)

    def to_record(self) -> OptionRecord:
        """Degrade into a record carrying the sentinel option name."""
        return OptionRecord(option=self.marker, is_valid=False)


ScannedLine = Union[ValidLine, InvalidLine]
