#!/usr/bin/env python3
"""
run_string / run_file and their option and result dataclasses.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import dataclasses

import pytest

from buffy import (
    ExecuteOptions,
    ExecuteResult,
    LoopLimitExceededError,
    lines_from,
    run_file,
    run_string,
)


def test_default_options():
    opts = ExecuteOptions()
    assert opts.tape_size == 1024
    assert opts.loop_limit == -1
    assert opts.trace is False


def test_options_are_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        ExecuteOptions().tape_size = 8


def test_run_string_result():
    result = run_string("+++[->+<]>.", options=ExecuteOptions(tape_size=4))
    assert isinstance(result, ExecuteResult)
    assert result.output == chr(3)
    assert result.tape == bytes([0, 3, 0, 0])
    assert result.cursor == 1
    assert result.loop_count == 3
    assert result.trace == ()


def test_run_string_with_input():
    result = run_string(",+.", input=lines_from(["a"]))
    assert result.output == "b"
    assert len(result.tape) == 1024


def test_run_string_trace():
    result = run_string("+.", options=ExecuteOptions(trace=True))
    assert result.trace == (
        "ip=0 cmd='+' ptr=0 cell=0",
        "ip=1 cmd='.' ptr=0 cell=1",
    )
    assert result.steps == 2


def test_run_string_loop_limit():
    with pytest.raises(LoopLimitExceededError):
        run_string("+[]", options=ExecuteOptions(loop_limit=10))


def test_run_file(tmp_path):
    program = tmp_path / "star.bf"
    program.write_text("six times seven\n++++++[>+++++++<-]>.\n", encoding="utf-8")
    result = run_file(program)
    assert result.output == "*"
    assert result.tape[1] == 42


def test_run_file_accepts_str_path(tmp_path):
    program = tmp_path / "echo.bf"
    program.write_text(",.", encoding="utf-8")
    assert run_file(str(program), input=lines_from(["!"])).output == "!"


def test_run_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        run_file(tmp_path / "missing.bf")


def test_run_file_tolerates_undecodable_comment_bytes(tmp_path):
    program = tmp_path / "latin1.bf"
    program.write_bytes(b"caf\xe9 +++.")
    assert run_file(program).output == chr(3)
