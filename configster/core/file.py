"""
Configuration file driver.

Reads a file line by line and collects the options found on each line.

Example file:
    ExampleOption = 12
    ExampleOption2 = /home/foo/bar, optional, attribute, list
    DefaultFeatureFooDisabled

    # Option = commented_out_using_hashtag
    color = Green
    color = Blue
"""

import io
from pathlib import Path
from typing import Iterable

from .logging import SourceLoggerAdapter, get_source_logger
from .parser import DEFAULT_DELIMITER, check_delimiter, scan_line
from .types import InvalidLine, OptionRecord, ScannedLine

DEFAULT_ENCODING = "utf-8"


def _text_lines(content: str) -> io.StringIO:
    """Iterate in-memory text with the same line breaks as a file opened in text mode."""
    return io.StringIO(content, newline=None)


def _strip_terminator(line: str) -> str:
    return line.rstrip("\r\n")


def _collect_records(
    lines: Iterable[str],
    attribute_delimiter: str,
    log: SourceLoggerAdapter,
) -> list[OptionRecord]:
    records: list[OptionRecord] = []
    for result in _collect_scanned(lines, attribute_delimiter, log):
        record = result.to_record()
        if result.is_valid:
            log.trace("%s = %r %r", record.option, record.value.primary,
                      record.value.attributes, line_number=result.line_number)
        records.append(record)
    return records


def _collect_scanned(
    lines: Iterable[str],
    attribute_delimiter: str,
    log: SourceLoggerAdapter,
) -> list[ScannedLine]:
    scanned: list[ScannedLine] = []
    for line_number, line in enumerate(lines, 1):
        result = scan_line(_strip_terminator(line), attribute_delimiter, line_number)
        if result is None:
            continue
        if isinstance(result, InvalidLine):
            log.warning("Whitespace in option name, line kept as %s", result.marker,
                        line_number=line_number)
        scanned.append(result)
    return scanned


def parse_file(
    path: Path | str,
    attribute_delimiter: str = DEFAULT_DELIMITER,
    encoding: str = DEFAULT_ENCODING,
) -> list[OptionRecord]:
    """Parse a configuration file into an ordered list of option records.

    Blank and comment lines are skipped. A line whose option name contains
    whitespace still yields a record, with the option set to
    ``InvalidOption_on_Line<N>`` and an empty value. Duplicate options are
    kept as separate records in file order.

    Args:
        path: File to read
        attribute_delimiter: Character separating the primary value from attributes
        encoding: Text encoding of the file

    Returns:
        Records in file line order

    Raises:
        InvalidDelimiter: If attribute_delimiter is not a single character
        OSError: If the file cannot be opened or read
        UnicodeDecodeError: If the file is not valid text in ``encoding``
    """
    check_delimiter(attribute_delimiter)
    path = Path(path)
    log = get_source_logger(__name__, str(path))

    log.debug("Opening (delimiter=%r, encoding=%s)", attribute_delimiter, encoding)
    with path.open("r", encoding=encoding) as f:
        records = _collect_records(f, attribute_delimiter, log)

    log.info("Parsed %d option(s)", len(records))
    return records


def parse_string(
    content: str,
    attribute_delimiter: str = DEFAULT_DELIMITER,
    source: str = "<string>",
) -> list[OptionRecord]:
    """Parse configuration text already held in memory.

    Same semantics as parse_file(); ``source`` only appears in log messages.
    """
    check_delimiter(attribute_delimiter)
    log = get_source_logger(__name__, source)
    records = _collect_records(_text_lines(content), attribute_delimiter, log)
    log.info("Parsed %d option(s)", len(records))
    return records


def scan_file(
    path: Path | str,
    attribute_delimiter: str = DEFAULT_DELIMITER,
    encoding: str = DEFAULT_ENCODING,
) -> list[ScannedLine]:
    """Parse a configuration file into tagged line results.

    Unlike parse_file(), malformed lines come back as InvalidLine entries
    instead of records with a marker option name, so callers can tell them
    apart without inspecting option text.

    Raises:
        Same as parse_file()
    """
    check_delimiter(attribute_delimiter)
    path = Path(path)
    log = get_source_logger(__name__, str(path))

    with path.open("r", encoding=encoding) as f:
        scanned = _collect_scanned(f, attribute_delimiter, log)

    log.info("Scanned %d option line(s)", len(scanned))
    return scanned


def scan_string(
    content: str,
    attribute_delimiter: str = DEFAULT_DELIMITER,
    source: str = "<string>",
) -> list[ScannedLine]:
    """Tagged counterpart of parse_string()."""
    check_delimiter(attribute_delimiter)
    log = get_source_logger(__name__, source)
    return _collect_scanned(_text_lines(content), attribute_delimiter, log)
