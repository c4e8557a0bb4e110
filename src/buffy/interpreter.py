from __future__ import annotations

import numbers
from typing import Optional

from .errors import (
    InvalidConfigurationError,
    make_loop_limit_error,
    make_unmatched_close_error,
    make_unmatched_open_error,
)
from .inputs import LineSupplier, read_byte
from .state import ExecutionState
from .tape import DEFAULT_TAPE_SIZE, decrement, increment, move_left, move_right, new_tape

UNLIMITED = -1


def is_code_char(ch: str) -> bool:
    return ch in '+-<>[].,'


def _is_count(value) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def _check_config(tape_size: int, loop_limit: int) -> None:
    if not _is_count(tape_size) or tape_size < 1:
        raise InvalidConfigurationError(f"Tape size must be a positive integer, got {tape_size!r}")
    if not _is_count(loop_limit) or loop_limit < UNLIMITED:
        raise InvalidConfigurationError(
            f"Loop limit must be -1 (unlimited) or a non-negative integer, got {loop_limit!r}"
        )


class Interpreter:
    """
    Brainfuck interpreter over a circular tape of 8-bit cells.

    Execution is a single left-to-right scan of the source. Loops are matched
    lazily: ``[`` pushes its position on the loop stack, and the matching
    ``]`` either jumps back to just after that position (cell non-zero) or
    pops it (cell zero). Nothing is matched ahead of time, so a stray ``]``
    is only detected when it is reached and a stray ``[`` only at the end.

    Failures:
    - UnmatchedCloseError: ``]`` reached with an empty loop stack
    - UnmatchedOpenError: end of program reached with pending ``[``
    - LoopLimitExceededError: more ``]`` evaluated than ``loop_limit`` allows

    Args:
        source: program text; characters outside ``+-<>.,[]`` are ignored
        input: line supplier for ``,``; None turns ``,`` into a no-op
        tape_size: number of cells, at least 1
        loop_limit: maximum number of ``]`` evaluations, -1 for no limit
        trace: record every executed instruction in ``state.trace``
    """

    def __init__(self, source: str, input: Optional[LineSupplier] = None,
                 tape_size: int = DEFAULT_TAPE_SIZE, loop_limit: int = UNLIMITED,
                 trace: bool = False):
        _check_config(tape_size, loop_limit)
        self.source = source
        self.input = input
        self.tape_size = int(tape_size)
        self.loop_limit = int(loop_limit)
        self.state = ExecutionState(tape=new_tape(self.tape_size), is_tracing=trace)
        self.finished = False

    # ===== Execution =====

    def run(self) -> str:
        """Run the program to completion and return its output."""
        while self.step():
            pass
        return ''.join(self.state.output)

    def step(self) -> bool:
        """
        Execute the instruction at the instruction pointer.

        Returns False once the end of the program has been reached, True
        while there is more to execute.
        """
        st = self.state
        if st.ip >= len(self.source):
            if not self.finished:
                self.finished = True
                if st.loop_stack:
                    raise make_unmatched_open_error(source=self.source, position=st.loop_stack[-1])
            return False

        cmd = self.source[st.ip]
        if is_code_char(cmd):
            if st.is_tracing:
                st.add_trace(f"ip={st.ip} cmd={cmd!r} ptr={st.cursor} cell={st.cell}")
            self._dispatch(cmd)
            st.steps += 1
        st.ip += 1
        return True

    def _dispatch(self, cmd: str) -> None:
        st = self.state

        if cmd == '+':
            increment(st.tape, st.cursor)
        elif cmd == '-':
            decrement(st.tape, st.cursor)
        elif cmd == '<':
            st.cursor = move_left(st.cursor, self.tape_size)
        elif cmd == '>':
            st.cursor = move_right(st.cursor, self.tape_size)
        elif cmd == '.':
            st.output.append(chr(st.cell))
        elif cmd == ',':
            value = read_byte(self.input)
            if value is not None:
                st.tape[st.cursor] = value
        elif cmd == '[':
            st.loop_stack.append(st.ip)
        elif cmd == ']':
            self._close_loop()

    def _close_loop(self) -> None:
        st = self.state
        st.loop_count += 1
        if self.loop_limit != UNLIMITED and st.loop_count > self.loop_limit:
            raise make_loop_limit_error(source=self.source, position=st.ip, limit=self.loop_limit)
        if not st.loop_stack:
            raise make_unmatched_close_error(source=self.source, position=st.ip)

        if st.cell != 0:
            # step() advances past the '[' that stays on the stack
            st.ip = st.loop_stack[-1]
        else:
            st.loop_stack.pop()


def execute(source: str, input: Optional[LineSupplier] = None,
            tape_size: int = DEFAULT_TAPE_SIZE, loop_limit: int = UNLIMITED) -> str:
    """Execute a program and return its output; failures raise a BuffyError."""
    return Interpreter(source, input=input, tape_size=tape_size, loop_limit=loop_limit).run()
