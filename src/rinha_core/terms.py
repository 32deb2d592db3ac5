"""Term model: the nodes of an already-decoded Rinha AST."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1


# ---------------------------------------------------------------------------
# BinaryOp
# ---------------------------------------------------------------------------

class BinaryOp(Enum):
    Add = "Add"
    Sub = "Sub"
    Mul = "Mul"
    Div = "Div"
    Rem = "Rem"
    Eq = "Eq"
    Neq = "Neq"
    Lt = "Lt"
    Gt = "Gt"
    Lte = "Lte"
    Gte = "Gte"
    And = "And"
    Or = "Or"


# ---------------------------------------------------------------------------
# Literals and references
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Int:
    value: int  # 32-bit signed


@dataclass(frozen=True, slots=True)
class Str:
    value: str


@dataclass(frozen=True, slots=True)
class Bool:
    value: bool


@dataclass(frozen=True, slots=True)
class Var:
    name: str


# ---------------------------------------------------------------------------
# Composite nodes
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Print:
    operand: Term


@dataclass(frozen=True, slots=True)
class If:
    condition: Term
    then: Term
    otherwise: Term


@dataclass(frozen=True, slots=True)
class Let:
    name: str
    value: Term
    body: Term


@dataclass(frozen=True, slots=True)
class Binary:
    left: Term
    op: BinaryOp
    right: Term


Term = Union[Int, Str, Bool, Var, Print, If, Let, Binary]


# ---------------------------------------------------------------------------
# Program
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Program:
    """A named root expression, as handed over by the decoder."""

    name: str
    expression: Term
