"""Line-level parsing for configuration options."""

from typing import Optional

from .exceptions import InvalidDelimiter
from .types import InvalidLine, OptionRecord, ScannedLine, ValidLine, invalid_option_marker

COMMENT_CHAR = "#"
ASSIGN_CHAR = "="
DEFAULT_DELIMITER = ","


def check_delimiter(attribute_delimiter: str) -> str:
    """Ensure the attribute delimiter is exactly one character."""
    if not isinstance(attribute_delimiter, str) or len(attribute_delimiter) != 1:
        raise InvalidDelimiter(delimiter=str(attribute_delimiter))
    return attribute_delimiter


def has_whitespace(text: str) -> bool:
    return any(c.isspace() for c in text)


def split_value(value_text: str, attribute_delimiter: str) -> tuple[str, list[str]]:
    """Split the right-hand side of an option into primary value and attributes.

    Every segment is trimmed. Empty segments (e.g. from a trailing delimiter)
    are kept as empty strings.

    Example:
        split_value("/home/foo , another,", ",") -> ("/home/foo", ["another", ""])
    """
    primary, sep, rest = value_text.partition(attribute_delimiter)
    if not sep:
        return value_text.strip(), []
    return primary.strip(), [a.strip() for a in rest.split(attribute_delimiter)]


def parse_line(
    raw_line: str,
    attribute_delimiter: str = DEFAULT_DELIMITER,
    line_number: Optional[int] = None,
) -> tuple[str, str, list[str]]:
    """Parse a single line into its option properties.

    Args:
        raw_line: The line text to parse
        attribute_delimiter: Character separating the primary value from attributes
        line_number: Optional 1-based line number, embedded in the invalid-option marker

    Returns:
        (option, primary, attributes). Blank and comment lines return
        ("", "", []). An option name containing whitespace returns the
        invalid-option marker with an empty value and no attributes.
    """
    check_delimiter(attribute_delimiter)

    line = raw_line.strip()
    if not line or line.startswith(COMMENT_CHAR):
        return "", "", []

    option, _, value_text = line.partition(ASSIGN_CHAR)
    option = option.strip()
    value_text = value_text.strip()

    # An '=' is required after the option; whitespace within it is invalid
    if has_whitespace(option):
        return invalid_option_marker(line_number), "", []

    if not value_text:
        return option, "", []

    primary, attributes = split_value(value_text, attribute_delimiter)
    return option, primary, attributes


def scan_line(
    raw_line: str,
    attribute_delimiter: str = DEFAULT_DELIMITER,
    line_number: int = 0,
) -> Optional[ScannedLine]:
    """Parse a single line into a tagged result.

    Returns:
        None for blank, comment and empty-option lines, an InvalidLine when
        the option name contains whitespace, a ValidLine otherwise
    """
    check_delimiter(attribute_delimiter)

    line = raw_line.strip()
    if not line or line.startswith(COMMENT_CHAR):
        return None

    option = line.partition(ASSIGN_CHAR)[0].strip()
    if has_whitespace(option):
        return InvalidLine(line_number=line_number, raw_line=raw_line)

    option, primary, attributes = parse_line(line, attribute_delimiter, line_number)
    if not option:
        return None
    return ValidLine(
        line_number=line_number,
        record=OptionRecord.from_parts(option, primary, attributes),
    )
