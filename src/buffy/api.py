from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from .inputs import LineSupplier
from .interpreter import UNLIMITED, Interpreter
from .tape import DEFAULT_TAPE_SIZE


@dataclass(frozen=True)
class ExecuteOptions:
    tape_size: int = DEFAULT_TAPE_SIZE
    loop_limit: int = UNLIMITED
    trace: bool = False


@dataclass(frozen=True)
class ExecuteResult:
    output: str
    tape: bytes
    cursor: int
    loop_count: int
    steps: int
    trace: Tuple[str, ...] = ()


def run_string(source: str, *, input: Optional[LineSupplier] = None,
               options: Optional[ExecuteOptions] = None) -> ExecuteResult:
    opts = ExecuteOptions() if options is None else options
    interp = Interpreter(source, input=input, tape_size=opts.tape_size,
                         loop_limit=opts.loop_limit, trace=opts.trace)
    output = interp.run()
    st = interp.state
    return ExecuteResult(
        output=output,
        tape=st.tape.tobytes(),
        cursor=st.cursor,
        loop_count=st.loop_count,
        steps=st.steps,
        trace=tuple(st.trace),
    )


def run_file(path: str | Path, *, input: Optional[LineSupplier] = None,
             options: Optional[ExecuteOptions] = None, encoding: str = "utf-8",
             errors: str = "replace") -> ExecuteResult:
    p = Path(path)
    # undecodable bytes can only sit in comments, which are inert
    return run_string(p.read_text(encoding=encoding, errors=errors), input=input, options=options)
