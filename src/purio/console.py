from __future__ import annotations

import sys
from typing import TextIO

from typing_extensions import Protocol, runtime_checkable

from .immutable import Immutable


@runtime_checkable
class Console(Protocol):
    """
    The host primitives an interpreter performs effects with
    """
    def read_line(self) -> str:
        """
        Read the next line of input, without its line terminator.
        May block until a line is available
        """
        ...

    def write_line(self, text: str) -> None:
        """
        Write ``text`` as one line. The line must be visible
        to the host when this method returns
        """
        ...


class HasConsole(Protocol):
    """
    Environment providing a `Console`
    """
    console: Console
    """
    The provided `Console`
    """


class StdConsole(Immutable):
    """
    `Console` reading from standard in and writing to standard out

    Example:
        >>> StdConsole().write_line('Hello, Ada')
        Hello, Ada

    Attributes:
        stdout: stream to write to. `sys.stdout` at the time of each \
            write when omitted
    """
    stdout: TextIO | None = None

    def read_line(self) -> str:
        """
        Read a line from standard in

        Raises:
            EOFError: when standard in is exhausted
        Return:
            the line read
        """
        return input()

    def write_line(self, text: str) -> None:
        """
        Write ``text`` and a newline to standard out and flush it

        Args:
            text: the line to write
        """
        print(text, file=self.stdout or sys.stdout, flush=True)


__all__ = ['Console', 'HasConsole', 'StdConsole']
