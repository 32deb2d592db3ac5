"""Rinha Core — tree-walking evaluator for decoded Rinha ASTs."""

import logging

from .environment import Environment
from .errors import (
    DecodeError,
    DivisionByZero,
    EvaluationError,
    IntegerOverflow,
    RinhaError,
    TypeMismatch,
    UnboundVariable,
)
from .evaluator import apply_binary, evaluate, run
from .reader import load_program, loads_program, read_program, read_term
from .terms import (
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
from .values import Value, VBool, VInt, VStr, VTuple, Void, render

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "evaluate",
    "run",
    "apply_binary",
    "Environment",
    "load_program",
    "loads_program",
    "read_program",
    "read_term",
    "Binary",
    "BinaryOp",
    "Bool",
    "If",
    "Int",
    "Let",
    "Print",
    "Program",
    "Str",
    "Term",
    "Var",
    "Value",
    "VBool",
    "VInt",
    "VStr",
    "VTuple",
    "Void",
    "render",
    "RinhaError",
    "DecodeError",
    "EvaluationError",
    "UnboundVariable",
    "TypeMismatch",
    "DivisionByZero",
    "IntegerOverflow",
]
