"""Variable bindings threaded through evaluation."""

from __future__ import annotations

from dataclasses import dataclass, field

from .errors import UnboundVariable
from .values import Value


@dataclass
class Environment:
    """A single flat name -> Value table.

    Let writes into this table in place; there are no nested frames, so a
    binding stays visible after the Let body returns.
    """

    bindings: dict[str, Value] = field(default_factory=dict)

    def bind(self, name: str, value: Value) -> None:
        self.bindings[name] = value

    def lookup(self, name: str) -> Value:
        try:
            return self.bindings[name]
        except KeyError:
            raise UnboundVariable(name) from None

    def names(self) -> list[str]:
        return list(self.bindings)

    def __contains__(self, name: object) -> bool:
        return name in self.bindings
