"""Command line interface."""

from napisy.interfaces.cli.app import build_parser, run

__all__ = ["build_parser", "run"]
