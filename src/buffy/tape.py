from __future__ import annotations

import numpy as np

CELL_MASK = 0xFF
DEFAULT_TAPE_SIZE = 1024


def new_tape(size: int) -> np.ndarray:
    """Allocate a zeroed tape of ``size`` unsigned 8-bit cells."""
    return np.zeros(size, dtype=np.uint8)


def increment(tape: np.ndarray, cursor: int) -> None:
    tape[cursor] = (int(tape[cursor]) + 1) & CELL_MASK


def decrement(tape: np.ndarray, cursor: int) -> None:
    tape[cursor] = (int(tape[cursor]) - 1) & CELL_MASK


def move_left(cursor: int, size: int) -> int:
    cursor -= 1
    if cursor < 0:
        cursor = size - 1
    return cursor


def move_right(cursor: int, size: int) -> int:
    cursor += 1
    if cursor >= size:
        cursor = 0
    return cursor


def dump(tape: np.ndarray, count: int, *, width: int = 8) -> str:
    """Format the first ``count`` cells as rows of ``width`` decimal values."""
    cells = [int(b) for b in tape[:count]]
    rows = [" ".join(map(str, cells[i:i + width])) for i in range(0, len(cells), width)]
    return "\n".join(rows)
