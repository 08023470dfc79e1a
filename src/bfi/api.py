from __future__ import annotations

import io
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from .interpreter import Brainfuck


@dataclass(frozen=True)
class RunOptions:
    trace: bool = False


@dataclass(frozen=True)
class RunResult:
    output: bytes
    tape_pointer: int
    trace: Tuple[str, ...]


def run_string(source: str | bytes, input_data: bytes = b"", *, options: Optional[RunOptions] = None) -> RunResult:
    trace = False if options is None else options.trace
    engine = Brainfuck(source, trace=trace)
    out = io.BytesIO()
    engine.run(io.BytesIO(input_data), out)
    return RunResult(output=out.getvalue(), tape_pointer=engine.tape_pointer(), trace=tuple(engine.trace))


def run_file(path: str | Path, input_data: bytes = b"", *, options: Optional[RunOptions] = None) -> RunResult:
    p = Path(path)
    return run_string(p.read_bytes(), input_data, options=options)
