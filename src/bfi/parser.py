from __future__ import annotations

from typing import Dict, Iterable, List, Union

from .instruction import CLOSE, IN, OPEN, OUT, Add, Close, In, Instruction, Left, Open, Out, Right, Sub

BF_OPS: Dict[int, Instruction] = {
    ord("+"): Add(1),
    ord("-"): Sub(1),
    ord(">"): Right(1),
    ord("<"): Left(1),
    ord("."): OUT,
    ord(","): IN,
    ord("["): OPEN,
    ord("]"): CLOSE,
}


# ---------------- Parser: BF -> instructions ----------------
def parse(source: Union[str, bytes]) -> List[Instruction]:
    """Translate program text into unit-count instructions.

    Every byte outside the eight command symbols is a comment. Brackets are
    not checked for balance here; the interpreter reports that at run time.
    """
    if isinstance(source, str):
        source = source.encode("utf-8")
    return [BF_OPS[b] for b in source if b in BF_OPS]


# ---------------- Emit ----------------
def emit(instructions: Iterable[Instruction]) -> str:
    out: List[str] = []
    for ins in instructions:
        if isinstance(ins, Add):
            out.append("+" * ins.n)
        elif isinstance(ins, Sub):
            out.append("-" * ins.n)
        elif isinstance(ins, Right):
            out.append(">" * ins.n)
        elif isinstance(ins, Left):
            out.append("<" * ins.n)
        elif isinstance(ins, Out):
            out.append(".")
        elif isinstance(ins, In):
            out.append(",")
        elif isinstance(ins, Open):
            out.append("[")
        elif isinstance(ins, Close):
            out.append("]")
    return "".join(out)
