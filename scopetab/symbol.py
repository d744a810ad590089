"""Symbol entries stored in a scope table."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

__all__ = ["OutputStyle", "SymbolInfo"]


class OutputStyle(enum.Enum):
    """How plain symbols are written out.

    ``PLAIN`` gives ``< name : type >``; ``COMPACT`` gives ``<name,type>``.
    Functions, structs and unions look the same in both styles.
    """

    PLAIN = "plain"
    COMPACT = "compact"


_AGGREGATE_KINDS = ("STRUCT", "UNION")


@dataclass
class SymbolInfo:
    """A named symbol with its type and any extra entries.

    For a ``FUNCTION`` the extras are the return type followed by the
    parameter types (only their ``kind`` is used). For a ``STRUCT`` or
    ``UNION`` the extras are the members, each with a name and a type.
    """

    name: str
    kind: str
    _extra: List["SymbolInfo"] = field(
        default_factory=list, init=False, repr=False, compare=False
    )

    def add_extra(self, extra: Optional["SymbolInfo"]) -> None:
        """Append an extra entry; ``None`` is ignored."""
        if extra is None:
            return
        self._extra.append(extra)

    def extras(self) -> Tuple["SymbolInfo", ...]:
        """The extra entries in the order they were added."""
        return tuple(self._extra)

    def render(self, style: OutputStyle = OutputStyle.PLAIN) -> str:
        """Text form of the symbol as it appears in a table dump."""
        if self.kind in _AGGREGATE_KINDS:
            members = ""
            if self._extra:
                members = "{" + ",".join(
                    f"({member.kind},{member.name})" for member in self._extra
                ) + "}"
            return f"<{self.name},{self.kind},{members}>"

        if self.kind == "FUNCTION":
            if not self._extra:
                raise ValueError(f"function {self.name!r} has no return type")
            return_type, *params = self._extra
            param_text = ""
            if params:
                param_text = "(" + ",".join(p.kind for p in params) + ")"
            return f"<{self.name},{self.kind},{return_type.kind}<=={param_text}>"

        if style is OutputStyle.COMPACT:
            return f"<{self.name},{self.kind}>"
        return f"< {self.name} : {self.kind} >"

    def __str__(self) -> str:
        return self.render(OutputStyle.PLAIN)