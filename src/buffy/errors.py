from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple


def _locate(source: str, position: int) -> Tuple[int, int]:
    """Return the 1-based (line, column) of a program position."""
    before = source[:position]
    line = before.count('\n') + 1
    column = position - (before.rfind('\n') + 1) + 1
    return line, column


def _build_context(lines: List[str], line_no_1: int, column: int, *, context: int = 2) -> str:
    idx = max(1, line_no_1)
    start = max(1, idx - context)
    end = min(len(lines), idx + context)

    out: List[str] = []
    for i in range(start, end + 1):
        prefix = '>' if i == idx else ' '
        out.append(f"{prefix} {i:4d} | {lines[i - 1]}")
        if i == idx:
            out.append(f"       | {' ' * (column - 1)}^")
    return "\n".join(out)


def _hint_for(kind: str) -> Optional[str]:
    if kind == 'unmatched_close':
        return 'Every "]" needs an earlier "[" that is still open. Remove the extra "]" or add the missing "[".'
    if kind == 'unmatched_open':
        return 'Add the missing "]" or remove the extra "[".'
    if kind == 'loop_limit':
        return 'The program may loop forever. Raise the loop limit, or use -1 to disable it.'
    return None


@dataclass
class BuffyError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class InvalidConfigurationError(BuffyError):
    pass


@dataclass
class MalformedProgramError(BuffyError):
    position: int
    line: int
    context: str


@dataclass
class UnmatchedCloseError(MalformedProgramError):
    pass


@dataclass
class UnmatchedOpenError(MalformedProgramError):
    pass


@dataclass
class LoopLimitExceededError(MalformedProgramError):
    limit: int


def _describe(message: str, *, source: str, position: int, kind: str) -> Tuple[str, int, str]:
    line, column = _locate(source, position)
    ctx = _build_context(source.split('\n'), line, column)
    hint = _hint_for(kind)
    hint_block = f"\nHint: {hint}" if hint else ""
    return f"{message} (line {line}, column {column})\n{ctx}{hint_block}", line, ctx


def make_unmatched_close_error(*, source: str, position: int) -> UnmatchedCloseError:
    text, line, ctx = _describe(
        'Cannot close a loop before opening it',
        source=source, position=position, kind='unmatched_close',
    )
    return UnmatchedCloseError(message=text, position=position, line=line, context=ctx)


def make_unmatched_open_error(*, source: str, position: int) -> UnmatchedOpenError:
    text, line, ctx = _describe(
        'A loop was opened but never closed',
        source=source, position=position, kind='unmatched_open',
    )
    return UnmatchedOpenError(message=text, position=position, line=line, context=ctx)


def make_loop_limit_error(*, source: str, position: int, limit: int) -> LoopLimitExceededError:
    text, line, ctx = _describe(
        f'The loop limit is exceeded (Loop limit set to {limit})',
        source=source, position=position, kind='loop_limit',
    )
    return LoopLimitExceededError(message=text, position=position, line=line, context=ctx, limit=limit)
