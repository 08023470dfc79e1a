#!/usr/bin/env python3
"""
Test the peephole optimizer: fusion, cancellation and fixed point.
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from bfi.instruction import Add, Sub, Right, Left, Out, In, Open, Close
from bfi.optimizer import optimize, count_static_ops
from bfi.parser import parse


def test_compact_add():
    assert optimize([Add(1)]) == [Add(1)]
    assert optimize([Out(), Add(1), Add(1), Add(1), Out()]) == [Out(), Add(3), Out()]


def test_compact_sub():
    assert optimize([Sub(1)]) == [Sub(1)]
    assert optimize([Out(), Sub(1), Sub(1), Sub(1), Out()]) == [Out(), Sub(3), Out()]


def test_compact_moves():
    assert optimize([Right(5), Right(5)]) == [Right(10)]
    assert optimize([Left(5), Left(5)]) == [Left(10)]


def test_fusion_matches_summed_count():
    for x, y in [(1, 1), (2, 7), (200, 100)]:
        assert optimize([Add(x), Add(y)]) == optimize([Add(x + y)])
        assert optimize([Sub(x), Sub(y)]) == optimize([Sub(x + y)])
        assert optimize([Right(x), Right(y)]) == optimize([Right(x + y)])
        assert optimize([Left(x), Left(y)]) == optimize([Left(x + y)])


def test_counts_not_reduced_mod_256():
    assert optimize(parse("+" * 300)) == [Add(300)]


def test_cancellation():
    assert optimize([Add(5), Sub(5)]) == []
    assert optimize([Sub(5), Add(5)]) == []
    assert optimize([Right(5), Left(5)]) == []
    assert optimize([Left(5), Right(5)]) == []


def test_unequal_opposites_kept():
    assert optimize([Add(3), Sub(2)]) == [Add(3), Sub(2)]
    assert optimize([Right(1), Left(4)]) == [Right(1), Left(4)]


def test_barriers_not_crossed():
    assert optimize(parse("+.+")) == [Add(1), Out(), Add(1)]
    assert optimize(parse("+,-")) == [Add(1), In(), Sub(1)]
    assert optimize(parse(">[<]")) == [Right(1), Open(), Left(1), Close()]
    assert optimize(parse("+[]-")) == [Add(1), Open(), Close(), Sub(1)]


def test_reaches_fixed_point():
    # cancelling the middle pair exposes a new fusible pair
    assert optimize([Add(1), Right(1), Left(1), Add(1)]) == [Add(2)]
    # a cancellation does not reach back into what is already kept
    assert optimize(parse("+><--")) == [Add(1), Sub(2)]
    # a fusion can expose a cancellation
    assert optimize([Sub(3), Add(1), Add(2)]) == []
    assert optimize(parse("+>+<-<>-")) == [Add(1), Right(1), Add(1), Left(1), Sub(2)]


def test_idempotent():
    programs = [
        "++++++++[>++++[>++>+++>+++>+<<<<-]>+>+>->>+[<]<-]>>.>---.+++++++..+++.>>.<-.<.+++.------.--------.>>+.>++.",
        "+-+-><<>+++---",
        "+>+<-<>-,.[-]",
        "",
    ]
    for src in programs:
        once = optimize(parse(src))
        assert optimize(once) == once


def test_long_sequence_no_recursion_limit():
    assert optimize(parse("+" * 100000)) == [Add(100000)]
    assert optimize(parse("+>" * 50000)) == [Add(1), Right(1)] * 50000


def test_count_static_ops():
    assert count_static_ops([Add(3), Out(), Right(2), Open(), Close()]) == 8
    assert count_static_ops(optimize(parse("+++>>"))) == 5
