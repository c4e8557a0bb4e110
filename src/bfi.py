#!/usr/bin/env python3
"""Command-line runner for Brainfuck programs."""

import argparse
import sys
import time

import numpy as np

from buffy import BuffyError, ExecuteOptions, UNLIMITED, run_file, stream_lines
from buffy.tape import DEFAULT_TAPE_SIZE, dump


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bfi",
        description="Run a Brainfuck program on a circular tape of 8-bit cells.",
    )
    parser.add_argument("path", nargs="?", help="program file (prompted for on stdin when omitted)")
    parser.add_argument("--cells", type=int, default=DEFAULT_TAPE_SIZE,
                        help=f"number of tape cells (default: {DEFAULT_TAPE_SIZE})")
    parser.add_argument("--loop-limit", type=int, default=UNLIMITED,
                        help="maximum number of loop iterations, -1 for no limit (default: -1)")
    parser.add_argument("--dump", type=int, default=0, metavar="N",
                        help="print the first N tape cells after execution")
    parser.add_argument("--no-input", action="store_true",
                        help="ignore ',' instead of reading lines from stdin")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    path = args.path
    if path is None:
        print("Please enter file absolute path:")
        path = sys.stdin.readline().strip()

    source = None if args.no_input else stream_lines(sys.stdin)
    options = ExecuteOptions(tape_size=args.cells, loop_limit=args.loop_limit)

    start = time.perf_counter()
    try:
        result = run_file(path, input=source, options=options)
    except FileNotFoundError:
        print("Couldn't find file")
        return 1
    except OSError as e:
        print(f"Couldn't read file: {e.strerror}")
        return 1
    except BuffyError as e:
        print(f"Error: {e}")
        return 1
    end = time.perf_counter()

    print(result.output)
    print(f"Execution took {(end - start) * 1000:.2f} ms")

    if args.dump > 0:
        print("================")
        print(dump(np.frombuffer(result.tape, dtype=np.uint8), args.dump))
    return 0


if __name__ == "__main__":
    sys.exit(main())
