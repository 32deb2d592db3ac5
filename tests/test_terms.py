"""Tests for rinha_core.terms."""

import dataclasses

import pytest

from rinha_core.terms import (
    INT_MAX,
    INT_MIN,
    Binary,
    BinaryOp,
    Int,
    Let,
    Program,
    Var,
)


class TestBinaryOp:
    def test_members(self):
        assert [op.name for op in BinaryOp] == [
            "Add", "Sub", "Mul", "Div", "Rem",
            "Eq", "Neq", "Lt", "Gt", "Lte", "Gte",
            "And", "Or",
        ]

    def test_lookup_by_wire_name(self):
        assert BinaryOp("Gte") is BinaryOp.Gte


class TestTerms:
    def test_int_range(self):
        assert INT_MIN == -2147483648
        assert INT_MAX == 2147483647

    def test_structural_equality(self):
        a = Binary(Int(1), BinaryOp.Add, Var("x"))
        b = Binary(Int(1), BinaryOp.Add, Var("x"))
        assert a == b

    def test_terms_are_immutable(self):
        term = Let("x", Int(1), Var("x"))
        with pytest.raises(dataclasses.FrozenInstanceError):
            term.name = "y"

    def test_program_holds_root(self):
        prog = Program(name="demo", expression=Int(3))
        assert prog.expression == Int(3)
