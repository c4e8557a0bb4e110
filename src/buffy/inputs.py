"""
Input sources for the ``,`` instruction.

An input source is any zero-argument callable returning one line of text.
The interpreter calls it once per ``,`` and stores the code of the line's
first character in the current cell (0 for an empty line).
"""

from __future__ import annotations

from typing import Callable, Iterable, Optional, TextIO

from .tape import CELL_MASK

LineSupplier = Callable[[], str]


def first_byte(line: str) -> int:
    return ord(line[0]) & CELL_MASK if line else 0


def lines_from(lines: Iterable[str]) -> LineSupplier:
    """Supply successive items of ``lines``, then empty lines once exhausted."""
    it = iter(lines)

    def supply() -> str:
        return next(it, '')

    return supply


def stream_lines(stream: TextIO) -> LineSupplier:
    """Supply lines read from a text stream, without their line terminator."""

    def supply() -> str:
        return stream.readline().rstrip('\r\n')

    return supply


def console(prompt: str = '') -> LineSupplier:
    def supply() -> str:
        try:
            return input(prompt)
        except EOFError:
            return ''

    return supply


def read_byte(source: Optional[LineSupplier]) -> Optional[int]:
    """Pull one line from ``source`` and decode it; None when input is disabled."""
    if source is None:
        return None
    return first_byte(source())
