"""
Command-line interface.

Exports: Console, open_console, ReplDriver, ReplState
"""

from pdfqa.cli.console import Console, open_console
from pdfqa.cli.repl import ReplDriver, ReplState

__all__ = ["Console", "open_console", "ReplDriver", "ReplState"]
