from __future__ import annotations

import argparse
import os
import sys
from typing import List, Optional

from .errors import BFIError, BFIWriteError, format_error
from .interpreter import Brainfuck
from .parser import emit


class _Unbuffered:
    """Pass each byte straight through to the wrapped stream."""

    def __init__(self, raw):
        self.raw = raw

    def write(self, data: bytes) -> int:
        n = self.raw.write(data)
        self.raw.flush()
        return n


def _dump_tape(engine: Brainfuck, count: int) -> None:
    cells = [int(b) for b in engine.tape(0, count)]
    for i in range(0, len(cells), 8):
        print(" ".join(map(str, cells[i:i + 8])), file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Run a Brainfuck program.")
    parser.add_argument("path", help="Brainfuck source file")
    parser.add_argument("--dump", action="store_true", help="Print the optimized program and exit")
    parser.add_argument("--trace", action="store_true", help="Write an execution trace to stderr as the program runs")
    parser.add_argument("--tape", type=int, default=0, metavar="N", help="Write the first N tape cells to stderr")
    args = parser.parse_args(argv)

    try:
        with open(args.path, "rb") as f:
            program = f.read()
    except FileNotFoundError:
        print("Couldn't find file", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"Couldn't read file: {exc}", file=sys.stderr)
        return 1

    engine = Brainfuck(program, trace=args.trace, trace_stream=sys.stderr)

    if args.dump:
        sys.stdout.write(emit(engine.instructions) + "\n")
        return 0

    status = 0
    try:
        engine.run(sys.stdin.buffer, _Unbuffered(sys.stdout.buffer))
    except BFIWriteError as err:
        if isinstance(err.cause, BrokenPipeError):
            # reader went away; point stdout at devnull so the exit-time flush stays quiet
            devnull = os.open(os.devnull, os.O_WRONLY)
            os.dup2(devnull, sys.stdout.fileno())
        else:
            print(format_error(err), file=sys.stderr)
            status = 1
    except BFIError as err:
        print(format_error(err), file=sys.stderr)
        status = 1

    if args.tape > 0:
        _dump_tape(engine, args.tape)
    return status


if __name__ == "__main__":
    raise SystemExit(main())
