from __future__ import annotations

from dataclasses import dataclass
from typing import Union


# ---------------- IR Nodes ----------------
@dataclass(frozen=True)
class Add:
    n: int = 1  # cell increment, wraps on execution

@dataclass(frozen=True)
class Sub:
    n: int = 1  # cell decrement, wraps on execution

@dataclass(frozen=True)
class Right:
    n: int = 1  # '>' run length

@dataclass(frozen=True)
class Left:
    n: int = 1  # '<' run length

@dataclass(frozen=True)
class Out:
    pass

@dataclass(frozen=True)
class In:
    pass

@dataclass(frozen=True)
class Open:
    pass

@dataclass(frozen=True)
class Close:
    pass

Instruction = Union[Add, Sub, Right, Left, Out, In, Open, Close]

OUT = Out()
IN = In()
OPEN = Open()
CLOSE = Close()
