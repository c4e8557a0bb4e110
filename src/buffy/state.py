from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

import numpy as np

from .tape import DEFAULT_TAPE_SIZE, new_tape


@dataclass
class ExecutionState:
    tape: np.ndarray = field(default_factory=lambda: new_tape(DEFAULT_TAPE_SIZE))
    cursor: int = 0
    ip: int = 0
    loop_stack: List[int] = field(default_factory=list)
    loop_count: int = 0
    steps: int = 0
    output: List[str] = field(default_factory=list)
    trace: List[str] = field(default_factory=list)
    is_tracing: bool = False

    @property
    def cell(self) -> int:
        return int(self.tape[self.cursor])

    def add_trace(self, message: str) -> None:
        if self.is_tracing:
            self.trace.append(message)
