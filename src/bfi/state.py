from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, TextIO

import numpy as np

TAPE_SIZE = 30_000


def _new_tape() -> np.ndarray:
    return np.zeros(TAPE_SIZE, dtype=np.uint8)


@dataclass
class EngineState:
    ip: int = 0
    dp: int = 0
    tape: np.ndarray = field(default_factory=_new_tape)
    stack: List[int] = field(default_factory=list)
    trace: List[str] = field(default_factory=list)
    is_tracing: bool = False
    # when set, trace lines go here as they happen instead of into `trace`
    trace_stream: Optional[TextIO] = None

    def reset(self) -> None:
        self.ip = 0
        self.dp = 0
        self.tape.fill(0)
        self.stack.clear()
        self.trace.clear()

    def add_trace(self, message: str) -> None:
        if not self.is_tracing:
            return
        if self.trace_stream is not None:
            print(message, file=self.trace_stream)
        else:
            self.trace.append(message)
