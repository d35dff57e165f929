"""Output formatting utilities.

Provides TTY-aware console output for configster:
- stdout console: parsed records (table, json, text)
- stderr console: errors and warnings
- JSON error output for CI integration (--json-errors)
"""

import json
import sys
from typing import Any, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from ..core.exceptions import exit_code_for, format_json_error
from ..core.types import InvalidLine, OptionRecord, ScannedLine

_stdout_is_tty = sys.stdout.isatty()
_stderr_is_tty = sys.stderr.isatty()

console = Console(
    force_terminal=_stdout_is_tty,
    no_color=not _stdout_is_tty,
)

stderr_console = Console(
    stderr=True,
    force_terminal=_stderr_is_tty,
    no_color=not _stderr_is_tty,
)


def records_to_json(records: list[OptionRecord]) -> str:
    """Serialize records as a JSON array."""
    return json.dumps([r.to_dict() for r in records], indent=2)


def records_to_text(records: list[OptionRecord]) -> str:
    """Render records one per line: option<TAB>primary<TAB>attr|attr.

    Trailing tabs are dropped only for records without attributes, so an
    empty attribute (``a = b,``) still shows as a final empty column.
    """
    lines = []
    for record in records:
        if not record.value.attributes:
            lines.append(f"{record.option}\t{record.value.primary}".rstrip("\t"))
            continue
        attrs = "|".join(record.value.attributes)
        lines.append(f"{record.option}\t{record.value.primary}\t{attrs}")
    return "\n".join(lines)


def records_table(records: list[OptionRecord], title: Optional[str] = None) -> Table:
    """Build a Rich table of records."""
    table = Table(title=title)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Option", style="cyan")
    table.add_column("Primary")
    table.add_column("Attributes", style="green")

    for i, record in enumerate(records, 1):
        option_style = "" if record.is_valid else "red"
        table.add_row(
            str(i),
            Text(record.option, style=option_style),
            Text(record.value.primary),
            Text(", ".join(repr(a) for a in record.value.attributes)),
        )
    return table


def print_records(
    records: list[OptionRecord],
    format: str = "table",
    title: Optional[str] = None,
) -> None:
    """Print records in the requested format."""
    if format == "json":
        print(records_to_json(records))
    elif format == "text":
        text = records_to_text(records)
        if text:
            print(text)
    else:
        console.print(records_table(records, title=title))


def print_scan_report(path: str, scanned: list[ScannedLine]) -> int:
    """Print malformed lines from a scan.

    Returns:
        Number of malformed lines found
    """
    invalid = [s for s in scanned if isinstance(s, InvalidLine)]
    for line in invalid:
        console.print(
            f"{escape(path)}:{line.line_number}: [red]whitespace in option name[/red] "
            f"{escape(repr(line.raw_line.strip()))}",
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )
    if invalid:
        print_warning(f"{len(invalid)} malformed of {len(scanned)} option line(s)")
    else:
        print_success(f"{len(scanned)} option line(s), none malformed")
    return len(invalid)


def print_error(message: str) -> None:
    """Print error message."""
    stderr_console.print(f"[red]Error: {escape(message)}[/red]", highlight=False, soft_wrap=True)


def print_success(message: str) -> None:
    """Print success message."""
    console.print(f"[green]✓ {message}[/green]", highlight=False, soft_wrap=True)


def print_warning(message: str) -> None:
    """Print warning message."""
    console.print(f"[yellow]⚠ {message}[/yellow]", highlight=False, soft_wrap=True)


def handle_error(
    exc: Exception,
    json_errors: bool = False,
    context: Optional[dict[str, Any]] = None,
) -> int:
    """Handle an exception with appropriate output format.

    Args:
        exc: The exception to handle
        json_errors: If True, output JSON format; otherwise Rich format
        context: Optional additional context (file, delimiter, etc.)

    Returns:
        Exit code to use for sys.exit()
    """
    if json_errors:
        print(format_json_error(exc, context))
    else:
        print_error(str(exc))
    return exit_code_for(exc)
