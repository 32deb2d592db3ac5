"""Tests for rinha_core.reader."""

import json

import pytest

from rinha_core import DecodeError
from rinha_core.reader import load_program, loads_program, read_program, read_term
from rinha_core.terms import Binary, BinaryOp, Bool, If, Int, Let, Print, Program, Str, Var

LOC = {"start": 0, "end": 1, "filename": "test.rinha"}


def _int(n):
    return {"kind": "Int", "value": n, "location": LOC}


class TestReadTerm:
    def test_literals(self):
        assert read_term(_int(3)) == Int(3)
        assert read_term({"kind": "Str", "value": "s"}) == Str("s")
        assert read_term({"kind": "Bool", "value": True}) == Bool(True)

    def test_var(self):
        assert read_term({"kind": "Var", "text": "x", "location": LOC}) == Var("x")

    def test_print(self):
        assert read_term({"kind": "Print", "value": _int(1)}) == Print(Int(1))

    def test_if(self):
        node = {
            "kind": "If",
            "condition": {"kind": "Bool", "value": False},
            "then": _int(1),
            "otherwise": _int(2),
        }
        assert read_term(node) == If(Bool(False), Int(1), Int(2))

    def test_let(self):
        node = {
            "kind": "Let",
            "name": {"text": "x", "location": LOC},
            "value": _int(5),
            "next": {"kind": "Var", "text": "x"},
        }
        assert read_term(node) == Let("x", Int(5), Var("x"))

    def test_binary(self):
        node = {"kind": "Binary", "lhs": _int(1), "op": "Rem", "rhs": _int(2)}
        assert read_term(node) == Binary(Int(1), BinaryOp.Rem, Int(2))


class TestReadTermErrors:
    def test_unknown_kind(self):
        with pytest.raises(DecodeError, match="unknown term kind"):
            read_term({"kind": "Function", "parameters": []})

    def test_missing_kind(self):
        with pytest.raises(DecodeError):
            read_term({"value": 1})

    def test_not_an_object(self):
        with pytest.raises(DecodeError):
            read_term([1, 2])

    def test_missing_field(self):
        with pytest.raises(DecodeError, match="missing field 'otherwise'"):
            read_term({"kind": "If", "condition": _int(1), "then": _int(2)})

    def test_unknown_operator(self):
        with pytest.raises(DecodeError, match="unknown binary operator"):
            read_term({"kind": "Binary", "lhs": _int(1), "op": "Pow", "rhs": _int(2)})

    def test_int_out_of_range(self):
        with pytest.raises(DecodeError, match="32 bits"):
            read_term(_int(2 ** 31))

    def test_bool_is_not_an_int(self):
        with pytest.raises(DecodeError):
            read_term({"kind": "Int", "value": True})

    def test_int_is_not_a_bool(self):
        with pytest.raises(DecodeError):
            read_term({"kind": "Bool", "value": 1})

    @pytest.mark.parametrize(
        "node",
        [
            {"kind": "Str", "value": "\ud800"},
            {"kind": "Var", "text": "x\udfff"},
            {"kind": "Let", "name": {"text": "\ud800"}, "value": {"kind": "Int", "value": 1},
             "next": {"kind": "Int", "value": 1}},
        ],
    )
    def test_lone_surrogate_rejected(self, node):
        with pytest.raises(DecodeError, match="invalid unicode text"):
            read_term(node)


class TestReadProgram:
    def test_program(self):
        prog = read_program({"name": "demo.rinha", "expression": _int(1), "location": LOC})
        assert prog == Program(name="demo.rinha", expression=Int(1))

    def test_missing_expression(self):
        with pytest.raises(DecodeError):
            read_program({"name": "demo"})

    def test_invalid_json(self):
        with pytest.raises(DecodeError, match="invalid JSON"):
            loads_program("{not json")

    def test_load_from_file(self, tmp_path):
        path = tmp_path / "prog.json"
        path.write_text(json.dumps({"name": "p", "expression": {"kind": "Str", "value": "ok"}}))
        assert load_program(path) == Program(name="p", expression=Str("ok"))

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            load_program(tmp_path / "absent.json")

    def test_surrogate_escape_in_json(self):
        with pytest.raises(DecodeError, match="invalid unicode text"):
            loads_program(
                '{"name": "t", "expression": {"kind": "Print",'
                ' "value": {"kind": "Str", "value": "\\ud800"}}}'
            )

    def test_surrogate_in_program_name(self):
        with pytest.raises(DecodeError):
            read_program({"name": "\ud800", "expression": _int(1)})
