"""
Console resource.

Wraps the interactive input/output streams as an explicit handle that is
acquired once and released on every exit path.

Dependencies: contextlib (stdlib)
System role: Scoped console I/O for the REPL driver
"""

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TextIO

logger = logging.getLogger(__name__)


class ConsoleClosedError(RuntimeError):
    """Raised when a closed console is used."""


class Console:
    """
    Line-oriented console.

    With no streams given, prompts go through the built-in input() so the
    terminal keeps its line editing. Explicit streams are used as-is, which
    is what tests rely on.
    """

    def __init__(
        self,
        input_stream: TextIO | None = None,
        output_stream: TextIO | None = None,
    ) -> None:
        self._input = input_stream
        self._output = output_stream
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def output(self) -> TextIO:
        return self._output if self._output is not None else sys.stdout

    def ask(self, prompt: str) -> str:
        """
        Show a prompt and read one line.

        Args:
            prompt: Text shown before reading

        Returns:
            str: The line without its trailing newline

        Raises:
            EOFError: When input is exhausted
            ConsoleClosedError: When the console was already released
        """
        self._check_open()
        if self._input is None and self._output is None:
            return input(prompt)

        self.output.write(prompt)
        self.output.flush()
        stream = self._input if self._input is not None else sys.stdin
        line = stream.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def print(self, text: str = "") -> None:
        """Write a line of text."""
        self._check_open()
        print(text, file=self.output, flush=True)

    def close(self) -> None:
        """Release the console. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        self.output.flush()
        logger.debug(f"{__name__}:close - Console released")

    def _check_open(self) -> None:
        if self._closed:
            raise ConsoleClosedError("Console has been closed")


@contextmanager
def open_console(
    input_stream: TextIO | None = None,
    output_stream: TextIO | None = None,
) -> Iterator[Console]:
    """
    Acquire a console and release it when the block exits, however it exits.

    Args:
        input_stream: Stream to read lines from (terminal input() if None)
        output_stream: Stream to write to (sys.stdout if None)

    Yields:
        Console: The open console
    """
    console = Console(input_stream, output_stream)
    try:
        yield console
    finally:
        console.close()
