#!/usr/bin/env python3
"""
configster - line-oriented configuration file parser

Usage:
    configster parse app.conf
    configster parse app.conf --format json
    configster check app.conf
    configster version

For more information: configster --help
"""

import click

from . import get_version
from .commands.check import check
from .commands.parse import parse
from .core.logging import setup_logging


@click.group()
@click.version_option(version=get_version(), prog_name="configster")
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v, -vv, -vvv)")
@click.option("-q", "--quiet", is_flag=True, help="Suppress output except errors")
@click.option("--json-errors", is_flag=True, help="Output errors as JSON for CI integration")
@click.pass_context
def cli(ctx: click.Context, verbose: int, quiet: bool, json_errors: bool) -> None:
    """configster - parse `option = primary, attr, ...` configuration files.

    \b
    File format:
      ExampleOption = 12
      ExampleOption2 = /home/foo/bar, optional, attribute, list
      DefaultFeatureFooDisabled
      # comment lines and blank lines are ignored

    \b
    Verbosity:
      -v       INFO level (files and record counts)
      -vv      DEBUG level (open/close, settings)
      -vvv     TRACE level (every record)
      -q       Quiet mode (errors only)

    \b
    Examples:
      configster parse app.conf
      configster parse app.conf -d ';' --format json
      configster check app.conf
      configster --json-errors parse missing.conf
    """
    ctx.ensure_object(dict)
    ctx.obj["verbosity"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["json_errors"] = json_errors
    setup_logging(verbose, quiet)


cli.add_command(parse)
cli.add_command(check)


@cli.command()
def version() -> None:
    """Print the library version."""
    click.echo(get_version())


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
