"""
Brainfuck execution engine.

The program is parsed and optimized once, at construction. ``run`` then
interprets the instruction list against a 30,000-cell byte tape:

    Right(n) / Left(n)   move the data pointer, clamped to the tape
    Add(n) / Sub(n)      change the current cell, modulo 256
    Out / In             write / read one byte through the given streams
    Open / Close         loop on the current cell being nonzero

Errors abort the run immediately; I/O already performed is not undone.
"""
from __future__ import annotations

import io
from typing import Iterable, List, Optional, Sequence, TextIO, Tuple

import numpy as np

from .errors import make_read_error, make_unbalanced_error, make_write_error
from .instruction import Add, Close, In, Instruction, Left, Open, Out, Right, Sub
from .optimizer import optimize as optimize_instructions
from .parser import parse
from .state import TAPE_SIZE, EngineState


class Brainfuck:
    def __init__(self, program: str | bytes, *, trace: bool = False, trace_stream: Optional[TextIO] = None):
        self._init(optimize_instructions(parse(program)), trace, trace_stream)

    @classmethod
    def from_instructions(
        cls,
        instructions: Iterable[Instruction],
        *,
        optimize: bool = True,
        trace: bool = False,
        trace_stream: Optional[TextIO] = None,
    ) -> "Brainfuck":
        engine = cls.__new__(cls)
        ins = list(instructions)
        engine._init(optimize_instructions(ins) if optimize else ins, trace, trace_stream)
        return engine

    def _init(self, instructions: List[Instruction], trace: bool, trace_stream: Optional[TextIO]) -> None:
        self._instructions: Tuple[Instruction, ...] = tuple(instructions)
        self.state = EngineState(is_tracing=trace, trace_stream=trace_stream)

    # ---------------- Introspection ----------------
    @property
    def instructions(self) -> Tuple[Instruction, ...]:
        return self._instructions

    @property
    def trace(self) -> Sequence[str]:
        return tuple(self.state.trace)

    def tape_pointer(self) -> int:
        return self.state.dp

    def tape(self, start: int = 0, stop: Optional[int] = None) -> np.ndarray:
        view = self.state.tape[start:stop]
        view.flags.writeable = False
        return view

    def reset(self) -> None:
        self.state.reset()

    # ---------------- Execution ----------------
    def run_pure(self) -> None:
        self.run(io.BytesIO(), _Sink())

    def run(self, input_stream, output_stream) -> None:
        """Execute until the instruction pointer passes the end of the program.

        ``input_stream.read(1)`` supplies one byte per ``In`` (an empty result
        means end of stream and stores 0); ``output_stream.write`` receives one
        byte per ``Out``. Raises BFIReadError (including a text stream that
        fails to decode), BFIWriteError or BFIUnbalancedParensError.
        """
        st = self.state
        program = self._instructions
        stack = st.stack
        end = len(program)
        last = TAPE_SIZE - 1

        with memoryview(st.tape) as tape:
            while st.ip < end:
                ins = program[st.ip]
                if st.is_tracing:
                    st.add_trace(f"ip={st.ip} {ins} dp={st.dp} cell={tape[st.dp]}")

                if isinstance(ins, Right):
                    st.dp = min(st.dp + ins.n, last)
                elif isinstance(ins, Left):
                    st.dp = max(st.dp - ins.n, 0)
                elif isinstance(ins, Add):
                    tape[st.dp] = (tape[st.dp] + ins.n) & 0xFF
                elif isinstance(ins, Sub):
                    tape[st.dp] = (tape[st.dp] - ins.n) & 0xFF
                elif isinstance(ins, Out):
                    try:
                        output_stream.write(bytes((tape[st.dp],)))
                    except OSError as exc:
                        raise make_write_error(exc) from exc
                elif isinstance(ins, In):
                    try:
                        data = input_stream.read(1)
                    except (OSError, ValueError) as exc:
                        raise make_read_error(exc) from exc
                    tape[st.dp] = _byte_of(data)
                elif isinstance(ins, Open):
                    if tape[st.dp] == 0:
                        st.ip = self._skip_loop(st.ip)
                        continue
                    stack.append(st.ip)
                elif isinstance(ins, Close):
                    if not stack:
                        raise make_unbalanced_error(ip=st.ip)
                    if tape[st.dp] != 0:
                        # back into the body, just past the matching Open
                        st.ip = stack[-1] + 1
                        continue
                    stack.pop()

                st.ip += 1

    def _skip_loop(self, ip: int) -> int:
        """Index just past the Close matching the Open at ``ip``.

        An unmatched Open skips to the end of the program, which ends the run.
        """
        program = self._instructions
        depth = 0
        ip += 1
        while ip < len(program):
            ins = program[ip]
            if isinstance(ins, Open):
                depth += 1
            elif isinstance(ins, Close):
                if depth == 0:
                    return ip + 1
                depth -= 1
            ip += 1
        return ip


def _byte_of(data) -> int:
    if not data:
        return 0
    if isinstance(data, str):
        return ord(data[0]) & 0xFF
    return data[0]


class _Sink:
    def write(self, data: bytes) -> int:
        return len(data)
