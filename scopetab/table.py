"""A stack of scope tables forming a symbol table."""

from __future__ import annotations

import sys
from typing import Optional, TextIO, Tuple

from .scope import ScopeTable
from .symbol import OutputStyle, SymbolInfo

__all__ = ["SymbolTable"]


class SymbolTable:
    """Nested scopes; lookups search from the innermost scope outwards.

    The outermost scope is created on construction and can never be exited.
    In plain style scope ids run 1, 1.1, 1.2, ...; in compact style they run
    1, 2, 3, ... and creation of each scope is reported.
    """

    def __init__(
        self,
        num_buckets: int = 20,
        out: Optional[TextIO] = None,
        hash_name: str = "SDBM",
        style: OutputStyle = OutputStyle.PLAIN,
    ) -> None:
        self.num_buckets = num_buckets
        self.out = out
        self.hash_name = hash_name
        self.style = style
        self._scopes: list[ScopeTable] = []
        self._created = 0
        self._collision = 0.0
        self.enter_scope()

    def _write(self, text: str) -> None:
        (self.out if self.out is not None else sys.stdout).write(text)

    @property
    def current(self) -> ScopeTable:
        """The innermost scope."""
        if not self._scopes:
            raise RuntimeError("symbol table is closed")
        return self._scopes[-1]

    @property
    def scopes(self) -> Tuple[ScopeTable, ...]:
        """Open scopes, innermost first."""
        return tuple(reversed(self._scopes))

    @property
    def scope_count(self) -> int:
        """Number of scopes created so far, including exited ones."""
        return self._created

    def enter_scope(self) -> ScopeTable:
        """Open a new innermost scope and return it."""
        if self.style is OutputStyle.COMPACT:
            self._created += 1
            scope_id: object = self._created
        else:
            scope_id = 1 + self._created * 0.1
            self._created += 1
        scope = ScopeTable(
            scope_id, self.num_buckets, self.hash_name, self.out, self.style
        )
        self._scopes.append(scope)
        if self.style is OutputStyle.COMPACT:
            self._write(f"\t\tScopeTable# {self._created} created\n")
        return scope

    def exit_scope(self) -> bool:
        """Close the innermost scope; the outermost one stays. Return whether closed."""
        scope = self.current
        if scope.id == 1:
            return False
        self._scopes.pop()
        self._collision += scope.collision
        scope.close()
        return True

    def insert(self, symbol: SymbolInfo) -> bool:
        """Add ``symbol`` to the innermost scope."""
        return self.current.insert(symbol)

    def insert_name(self, name: str, kind: str) -> bool:
        """Add a plain symbol with ``name`` and ``kind`` to the innermost scope."""
        return self.insert(SymbolInfo(name, kind))

    def remove(self, name: str) -> bool:
        """Delete ``name`` from the innermost scope."""
        removed = self.current.delete(name)
        if not removed:
            self._write("Not found in the current ScopeTable\n")
        return removed

    def look_up(self, name: str) -> Optional[SymbolInfo]:
        """The nearest symbol called ``name``, or None."""
        for scope in reversed(self._scopes):
            found = scope.look_up(name)
            if found is not None:
                return found
        self._write(f"\t\t'{name}' not found in any of the ScopeTables\n")
        return None

    def print_current(self) -> None:
        """Dump the innermost scope."""
        self.current.dump(2)

    def print_all(self) -> None:
        """Dump every open scope, innermost first."""
        for depth, scope in enumerate(reversed(self._scopes), 1):
            scope.dump(2 * depth)
        if self.style is not OutputStyle.COMPACT:
            self._write("\n")

    def collision_ratio(self) -> float:
        """Collisions of all scopes, open and exited, per scope created."""
        total = self._collision + sum(s.collision for s in self._scopes)
        return total / self._created

    def close(self) -> None:
        """Close every scope, innermost first."""
        while self._scopes:
            self._scopes.pop().close()

    def __enter__(self) -> "SymbolTable":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()