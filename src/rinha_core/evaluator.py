"""Evaluator: recursive tree walk of a Term under an Environment."""

from __future__ import annotations

import logging
import sys
from typing import IO, Callable

from .environment import Environment
from .errors import DivisionByZero, IntegerOverflow, TypeMismatch
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
from .values import Value, VBool, VInt, VStr, Void, render

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------

def evaluate(
    term: Term,
    env: Environment | None = None,
    dest: IO[str] | None = None,
) -> Value:
    """Evaluate *term* and return its value.

    *env* is mutated in place by Let nodes; a fresh one is created when
    omitted. Print output goes to *dest* (``sys.stdout`` by default).
    Any failure raises an EvaluationError and aborts the whole evaluation.
    """
    if env is None:
        env = Environment()
    if dest is None:
        dest = sys.stdout
    return _eval(term, env, dest)


def run(program: Program, dest: IO[str] | None = None) -> Value:
    """Evaluate a Program's root expression with an empty environment."""
    logger.debug("Running program %r", program.name)
    result = evaluate(program.expression, Environment(), dest)
    logger.debug("Program %r finished with %r", program.name, result)
    return result


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

def _eval(term: Term, env: Environment, dest: IO[str]) -> Value:
    if isinstance(term, Int):
        return VInt(term.value)
    if isinstance(term, Str):
        return VStr(term.value)
    if isinstance(term, Bool):
        return VBool(term.value)
    if isinstance(term, Var):
        return env.lookup(term.name)
    if isinstance(term, Print):
        return _eval_print(term, env, dest)
    if isinstance(term, If):
        return _eval_if(term, env, dest)
    if isinstance(term, Let):
        return _eval_let(term, env, dest)
    if isinstance(term, Binary):
        return _eval_binary(term, env, dest)
    raise TypeError(f"not a term: {term!r}")


def _eval_print(term: Print, env: Environment, dest: IO[str]) -> Value:
    value = _eval(term.operand, env, dest)
    print(render(value), file=dest)
    return Void


def _eval_if(term: If, env: Environment, dest: IO[str]) -> Value:
    condition = _eval(term.condition, env, dest)
    if not isinstance(condition, VBool):
        raise TypeMismatch(f"if condition must be a bool, got {condition!r}")
    # Only the selected branch is evaluated.
    if condition.value:
        return _eval(term.then, env, dest)
    return _eval(term.otherwise, env, dest)


def _eval_let(term: Let, env: Environment, dest: IO[str]) -> Value:
    value = _eval(term.value, env, dest)
    env.bind(term.name, value)
    return _eval(term.body, env, dest)


def _eval_binary(term: Binary, env: Environment, dest: IO[str]) -> Value:
    lhs = _eval(term.left, env, dest)
    rhs = _eval(term.right, env, dest)
    return apply_binary(term.op, lhs, rhs)


# ---------------------------------------------------------------------------
# Binary operators
# ---------------------------------------------------------------------------

def apply_binary(op: BinaryOp, lhs: Value, rhs: Value) -> Value:
    """Apply *op* to two already evaluated operands."""
    return _OPERATORS[op](lhs, rhs)


def _mismatch(op: BinaryOp, lhs: Value, rhs: Value) -> TypeMismatch:
    return TypeMismatch(f"invalid operands for {op.value}: {lhs!r}, {rhs!r}")


def _checked(n: int) -> VInt:
    if not INT_MIN <= n <= INT_MAX:
        raise IntegerOverflow(f"integer overflow: {n}")
    return VInt(n)


def _ints(op: BinaryOp, lhs: Value, rhs: Value) -> tuple[int, int]:
    if isinstance(lhs, VInt) and isinstance(rhs, VInt):
        return lhs.value, rhs.value
    raise _mismatch(op, lhs, rhs)


def _bools(op: BinaryOp, lhs: Value, rhs: Value) -> tuple[bool, bool]:
    if isinstance(lhs, VBool) and isinstance(rhs, VBool):
        return lhs.value, rhs.value
    raise _mismatch(op, lhs, rhs)


def _trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _add(lhs: Value, rhs: Value) -> Value:
    if isinstance(lhs, VInt) and isinstance(rhs, VInt):
        return _checked(lhs.value + rhs.value)
    if isinstance(lhs, (VInt, VStr)) and isinstance(rhs, (VInt, VStr)):
        return VStr(str(lhs) + str(rhs))
    raise _mismatch(BinaryOp.Add, lhs, rhs)


def _sub(lhs: Value, rhs: Value) -> Value:
    a, b = _ints(BinaryOp.Sub, lhs, rhs)
    return _checked(a - b)


def _mul(lhs: Value, rhs: Value) -> Value:
    a, b = _ints(BinaryOp.Mul, lhs, rhs)
    return _checked(a * b)


def _div(lhs: Value, rhs: Value) -> Value:
    a, b = _ints(BinaryOp.Div, lhs, rhs)
    if b == 0:
        raise DivisionByZero("attempt to divide by zero")
    return _checked(_trunc_div(a, b))


def _rem(lhs: Value, rhs: Value) -> Value:
    a, b = _ints(BinaryOp.Rem, lhs, rhs)
    if b == 0:
        raise DivisionByZero("attempt to calculate the remainder with a divisor of zero")
    # INT_MIN % -1 overflows along with the matching division.
    q = _checked(_trunc_div(a, b)).value
    return VInt(a - b * q)


def _same_kind(op: BinaryOp, lhs: Value, rhs: Value) -> tuple[object, object]:
    for kind in (VInt, VStr, VBool):
        if isinstance(lhs, kind) and isinstance(rhs, kind):
            return lhs.value, rhs.value
    raise _mismatch(op, lhs, rhs)


def _eq(lhs: Value, rhs: Value) -> Value:
    a, b = _same_kind(BinaryOp.Eq, lhs, rhs)
    return VBool(a == b)


def _neq(lhs: Value, rhs: Value) -> Value:
    a, b = _same_kind(BinaryOp.Neq, lhs, rhs)
    return VBool(a != b)


def _compare(op: BinaryOp, test: Callable[[int, int], bool]) -> Callable[[Value, Value], Value]:
    def apply(lhs: Value, rhs: Value) -> Value:
        a, b = _ints(op, lhs, rhs)
        return VBool(test(a, b))
    return apply


def _and(lhs: Value, rhs: Value) -> Value:
    a, b = _bools(BinaryOp.And, lhs, rhs)
    return VBool(a and b)


def _or(lhs: Value, rhs: Value) -> Value:
    a, b = _bools(BinaryOp.Or, lhs, rhs)
    return VBool(a or b)


_OPERATORS: dict[BinaryOp, Callable[[Value, Value], Value]] = {
    BinaryOp.Add: _add,
    BinaryOp.Sub: _sub,
    BinaryOp.Mul: _mul,
    BinaryOp.Div: _div,
    BinaryOp.Rem: _rem,
    BinaryOp.Eq: _eq,
    BinaryOp.Neq: _neq,
    BinaryOp.Lt: _compare(BinaryOp.Lt, lambda a, b: a < b),
    BinaryOp.Gt: _compare(BinaryOp.Gt, lambda a, b: a > b),
    BinaryOp.Lte: _compare(BinaryOp.Lte, lambda a, b: a <= b),
    BinaryOp.Gte: _compare(BinaryOp.Gte, lambda a, b: a >= b),
    BinaryOp.And: _and,
    BinaryOp.Or: _or,
}
