"""Runtime values produced by the evaluator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .errors import TypeMismatch


@dataclass(frozen=True, slots=True)
class VInt:
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class VBool:
    value: bool

    def __str__(self) -> str:
        return str(self.value).lower()


@dataclass(frozen=True, slots=True)
class VStr:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class VTuple:
    # No term produces tuples.
    first: Value
    second: Value

    def __str__(self) -> str:
        return f"({self.first}, {self.second})"


class _VoidType:
    """Singleton result of statements such as Print."""

    _instance: _VoidType | None = None

    def __new__(cls) -> _VoidType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Void"

    def __str__(self) -> str:
        return "Void"


Void = _VoidType()

Value = Union[VInt, VBool, VStr, VTuple, _VoidType]


def render(value: Value) -> str:
    """Return the text Print emits for *value*.

    Only ints, strings and booleans are printable; tuples and Void raise
    TypeMismatch.
    """
    if isinstance(value, (VInt, VBool, VStr)):
        return str(value)
    if isinstance(value, VTuple):
        raise TypeMismatch("tuple is not printable")
    if isinstance(value, _VoidType):
        raise TypeMismatch("void is not printable")
    raise TypeMismatch(f"unknown value {value!r}")
