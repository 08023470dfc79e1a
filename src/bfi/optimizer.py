# Peephole optimizer for parsed Brainfuck.
#
# Adjacent pairs only:
#   Add/Add, Sub/Sub, Right/Right, Left/Left   -> one instruction, counts summed
#   Add(n)/Sub(n), Right(n)/Left(n) and mirrors -> removed
#
# Out, In, Open and Close are never merged or looked past. Counts are plain
# sums; wrapping happens at execution time, not here.
#
from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from .instruction import Add, Instruction, Left, Right, Sub

_FUSIBLE = (Add, Sub, Right, Left)
_OPPOSITE = {Add: Sub, Sub: Add, Right: Left, Left: Right}

# (fired, replacement); replacement None with fired=True means the pair cancels
Rewrite = Tuple[bool, Optional[Instruction]]


def combine(a: Instruction, b: Instruction) -> Rewrite:
    """Apply the first rule matching the adjacent pair (a, b)."""
    if not isinstance(a, _FUSIBLE) or not isinstance(b, _FUSIBLE):
        return False, None
    if type(a) is type(b):
        return True, type(a)(a.n + b.n)
    if _OPPOSITE[type(a)] is type(b) and a.n == b.n:
        return True, None
    return False, None


def _compact_pass(instructions: List[Instruction]) -> Tuple[bool, List[Instruction]]:
    """One front-to-back pass over the sequence.

    The front element is rewritten with its successor while a rule fires; a
    cancelled pair leaves the element after it as the new front. Nothing
    already emitted is revisited.
    """
    out: List[Instruction] = []
    front: Optional[Instruction] = None
    changed = False
    for ins in instructions:
        if front is None:
            front = ins
            continue
        fired, replacement = combine(front, ins)
        if not fired:
            out.append(front)
            front = ins
            continue
        changed = True
        front = replacement
    if front is not None:
        out.append(front)
    return changed, out


def optimize(instructions: Iterable[Instruction]) -> List[Instruction]:
    """Fuse and cancel adjacent instructions until no rule fires.

    Passes repeat until one makes no change, so optimizing the result again
    returns it unchanged.
    """
    cur = list(instructions)
    changed = True
    while changed:
        changed, cur = _compact_pass(cur)
    return cur


def count_static_ops(instructions: Iterable[Instruction]) -> int:
    """Number of source symbols the sequence stands for."""
    c = 0
    for ins in instructions:
        if isinstance(ins, _FUSIBLE):
            c += ins.n
        else:
            c += 1
    return c
