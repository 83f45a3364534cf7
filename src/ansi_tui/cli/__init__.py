"""Command line tools for inspecting terminal input and escape sequences."""

from ansi_tui.cli.main import main

__all__ = ["main"]
