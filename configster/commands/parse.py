"""
configster parse - Print the options found in a configuration file.

Usage:
    configster parse app.conf
    configster parse app.conf -d ';'
    configster parse app.conf --format json
    configster parse app.conf --strict       # fail on malformed option names
    cat app.conf | configster parse -
"""

from typing import Optional

import click

from ..core.config import OUTPUT_FORMATS, load_settings
from ..core.exceptions import MalformedOptions
from ..core.file import parse_file, parse_string, scan_file, scan_string
from ..core.logging import get_logger
from ..core.types import InvalidLine, OptionRecord, ScannedLine
from ..utils.decorators import handle_io_errors
from ..utils.output import print_records

logger = get_logger(__name__)

STDIN = "-"
STDIN_NAME = "<stdin>"


def source_name(file: str) -> str:
    return STDIN_NAME if file == STDIN else file


def read_stdin(encoding: str) -> str:
    """Read standard input, decoded the same way a file would be."""
    return click.get_binary_stream("stdin").read().decode(encoding)


def read_records(file: str, delimiter: str, encoding: str) -> list[OptionRecord]:
    """Parse FILE, or standard input when FILE is '-'."""
    if file == STDIN:
        content = read_stdin(encoding)
        return parse_string(content, delimiter, source=STDIN_NAME)
    return parse_file(file, delimiter, encoding=encoding)


def read_scanned(file: str, delimiter: str, encoding: str) -> list[ScannedLine]:
    """Scan FILE, or standard input when FILE is '-', into tagged lines."""
    if file == STDIN:
        content = read_stdin(encoding)
        return scan_string(content, delimiter, source=STDIN_NAME)
    return scan_file(file, delimiter, encoding=encoding)


@click.command("parse")
@click.argument("file", type=click.Path(dir_okay=False, allow_dash=True))
@click.option("--delimiter", "-d", default=None,
              help="Attribute delimiter character (default from settings, else ',')")
@click.option("--encoding", default=None, help="File encoding (default utf-8)")
@click.option("--format", "-f", "output_format", type=click.Choice(OUTPUT_FORMATS), default=None,
              help="Output format")
@click.option("--strict/--lenient", default=None,
              help="Fail when an option name contains whitespace")
@handle_io_errors()
def parse(
    file: str,
    delimiter: Optional[str],
    encoding: Optional[str],
    output_format: Optional[str],
    strict: Optional[bool],
) -> None:
    """Parse a configuration file and print its options.

    \b
    Examples:
      configster parse app.conf
      configster parse app.conf --format json
      configster parse app.conf -d ';' --strict
    """
    settings = load_settings()
    delimiter = delimiter if delimiter is not None else settings.parser.delimiter
    encoding = encoding or settings.parser.encoding
    output_format = output_format or settings.output.format
    strict = settings.check.strict if strict is None else strict

    if strict:
        scanned = read_scanned(file, delimiter, encoding)
        bad_lines = [s.line_number for s in scanned if isinstance(s, InvalidLine)]
        if bad_lines:
            raise MalformedOptions(path=source_name(file), line_numbers=bad_lines)
        records = [s.to_record() for s in scanned]
    else:
        records = read_records(file, delimiter, encoding)

    logger.info(f"Loaded {len(records)} option(s) from {source_name(file)}")
    print_records(records, format=output_format, title=source_name(file))
