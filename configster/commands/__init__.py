"""CLI commands for configster."""

from .check import check
from .parse import parse

__all__ = ["check", "parse"]
