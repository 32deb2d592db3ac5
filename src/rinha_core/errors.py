"""Exceptions raised by Rinha Core."""

from __future__ import annotations


class RinhaError(Exception):
    """Base class for every error raised by this package."""


class DecodeError(RinhaError):
    """The serialized AST does not describe a well-formed term tree."""


class EvaluationError(RinhaError):
    """Evaluation aborted; no partial result is available."""


class UnboundVariable(EvaluationError):
    def __init__(self, name: str) -> None:
        super().__init__(f"unbound variable '{name}'")
        self.name = name


class TypeMismatch(EvaluationError):
    pass


class DivisionByZero(EvaluationError):
    def __init__(self, message: str = "division by zero") -> None:
        super().__init__(message)


class IntegerOverflow(EvaluationError):
    def __init__(self, message: str = "integer overflow") -> None:
        super().__init__(message)
