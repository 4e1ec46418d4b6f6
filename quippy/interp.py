"""Interpreter state: the global scope and a stack of local scopes."""

from __future__ import annotations

from dataclasses import dataclass, field

from quippy.values import QType


@dataclass
class Interpreter:
    """Holds the variables visible to running code."""

    global_scope: dict[str, QType] = field(default_factory=dict)
    local_scopes: list[dict[str, QType]] = field(default_factory=lambda: [{}])

    def store_global(self, name: str, value: QType) -> None:
        """Bind ``name`` to ``value`` in the global scope."""
        self.global_scope[name] = value

    def fetch_global(self, name: str) -> QType | None:
        """Return the global bound to ``name``, or ``None`` if there is none."""
        return self.global_scope.get(name)

    def store_local(self, name: str, value: QType) -> None:
        """Bind ``name`` to ``value`` in the innermost local scope."""
        self.local_scopes[-1][name] = value