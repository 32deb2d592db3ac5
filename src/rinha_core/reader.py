"""Reader: decode the JSON AST format into Term / Program objects."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .errors import DecodeError
from .terms import (
    INT_MAX,
    INT_MIN,
    Binary,
    BinaryOp,
    Bool,
    If,
    Int,
    Let,
    Print,
    Program,
    Str,
    Term,
    Var,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------

def load_program(path: str | Path) -> Program:
    """Read and decode the program stored at *path*.

    OSError from opening the file is left to the caller.
    """
    path = Path(path)
    with path.open(encoding="utf-8") as fh:
        text = fh.read()
    program = loads_program(text)
    logger.debug("Loaded program %r from %s", program.name, path)
    return program


def loads_program(text: str) -> Program:
    """Decode a program from its JSON text."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DecodeError(f"invalid JSON: {exc}") from exc
    return read_program(data)


def read_program(data: Any) -> Program:
    """Decode the top-level ``{name, expression}`` object."""
    if not isinstance(data, dict):
        raise DecodeError(f"program must be an object, got {type(data).__name__}")
    name = _field(data, "name", str, "File")
    return Program(name=name, expression=read_term(_field(data, "expression", dict, "File")))


def read_term(node: Any) -> Term:
    """Decode one AST node (and its children) into a Term."""
    if not isinstance(node, dict):
        raise DecodeError(f"term must be an object, got {type(node).__name__}")

    kind = node.get("kind")
    match kind:
        case "Int":
            return Int(_int_literal(node))
        case "Str":
            return Str(_field(node, "value", str, kind))
        case "Bool":
            return Bool(_field(node, "value", bool, kind))
        case "Var":
            return Var(_field(node, "text", str, kind))
        case "Print":
            return Print(_child(node, "value", kind))
        case "If":
            return If(
                condition=_child(node, "condition", kind),
                then=_child(node, "then", kind),
                otherwise=_child(node, "otherwise", kind),
            )
        case "Let":
            param = _field(node, "name", dict, kind)
            return Let(
                name=_field(param, "text", str, "Parameter"),
                value=_child(node, "value", kind),
                body=_child(node, "next", kind),
            )
        case "Binary":
            return Binary(
                left=_child(node, "lhs", kind),
                op=_binary_op(_field(node, "op", str, kind)),
                right=_child(node, "rhs", kind),
            )
        case _:
            raise DecodeError(f"unknown term kind {kind!r}")


# ---------------------------------------------------------------------------
# Field helpers
# ---------------------------------------------------------------------------

def _field(node: dict, key: str, expected: type, kind: str) -> Any:
    if key not in node:
        raise DecodeError(f"{kind}: missing field '{key}'")
    value = node[key]
    # bool is an int subclass; keep the two apart.
    if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
        raise DecodeError(
            f"{kind}.{key}: expected {expected.__name__}, got {type(value).__name__}"
        )
    if isinstance(value, str):
        # json accepts lone surrogate escapes; they cannot be printed as UTF-8.
        try:
            value.encode("utf-8")
        except UnicodeEncodeError:
            raise DecodeError(f"{kind}.{key}: invalid unicode text") from None
    return value


def _child(node: dict, key: str, kind: str) -> Term:
    return read_term(_field(node, key, dict, kind))


def _int_literal(node: dict) -> int:
    value = _field(node, "value", int, "Int")
    if not INT_MIN <= value <= INT_MAX:
        raise DecodeError(f"Int.value: {value} does not fit in 32 bits")
    return value


def _binary_op(name: str) -> BinaryOp:
    try:
        return BinaryOp(name)
    except ValueError:
        raise DecodeError(f"unknown binary operator {name!r}") from None
