"""
configster check - Report option lines with whitespace in the option name.

Usage:
    configster check app.conf
    configster check app.conf -d ';'
"""

from typing import Optional

import click

from ..core.config import load_settings
from ..core.exceptions import MalformedOptions
from ..core.logging import get_logger
from ..core.types import InvalidLine
from ..utils.decorators import handle_io_errors
from ..utils.output import print_scan_report
from .parse import read_scanned, source_name

logger = get_logger(__name__)


@click.command("check")
@click.argument("file", type=click.Path(dir_okay=False, allow_dash=True))
@click.option("--delimiter", "-d", default=None, help="Attribute delimiter character")
@click.option("--encoding", default=None, help="File encoding (default utf-8)")
@handle_io_errors()
def check(file: str, delimiter: Optional[str], encoding: Optional[str]) -> None:
    """Check a configuration file for malformed option lines.

    Exits with a non-zero status when any line has whitespace in its
    option name (e.g. a missing '=').
    """
    settings = load_settings()
    delimiter = delimiter if delimiter is not None else settings.parser.delimiter
    encoding = encoding or settings.parser.encoding

    scanned = read_scanned(file, delimiter, encoding)
    malformed = print_scan_report(source_name(file), scanned)
    logger.debug(f"{malformed} malformed line(s) in {source_name(file)}")

    if malformed:
        bad_lines = [s.line_number for s in scanned if isinstance(s, InvalidLine)]
        raise MalformedOptions(path=source_name(file), line_numbers=bad_lines)
