"""A single scope: a fixed-size hash table of symbols with chained buckets."""

from __future__ import annotations

import sys
from typing import Iterator, List, Optional, TextIO, Union

from .hashing import bucket_index
from .symbol import OutputStyle, SymbolInfo

__all__ = ["ScopeTable"]

ScopeId = Union[int, float]


class ScopeTable:
    """Symbols of one scope, stored in ``num_buckets`` chained buckets.

    In ``OutputStyle.COMPACT`` the table reports every insertion, successful
    lookup and its own removal, SDBM reduces its value after every character,
    and a dump lists every bucket. In ``OutputStyle.PLAIN`` only deletions are
    reported and a dump lists the non-empty buckets alone.
    """

    def __init__(
        self,
        scope_id: ScopeId,
        num_buckets: int = 20,
        hash_name: str = "SDBM",
        out: Optional[TextIO] = None,
        style: OutputStyle = OutputStyle.PLAIN,
    ) -> None:
        if num_buckets <= 0:
            raise ValueError(f"number of buckets must be positive, got {num_buckets}")
        self.id = scope_id
        self.num_buckets = num_buckets
        self.hash_name = hash_name
        self.out = out
        self.style = style
        self.collision = 0.0
        self._buckets: List[List[SymbolInfo]] = [[] for _ in range(num_buckets)]
        self._closed = False

    @property
    def label(self) -> str:
        """The scope id as it is written in messages."""
        if isinstance(self.id, float):
            return format(self.id, "g")
        return str(self.id)

    @property
    def _verbose(self) -> bool:
        return self.style is OutputStyle.COMPACT

    def _write(self, text: str) -> None:
        (self.out if self.out is not None else sys.stdout).write(text)

    def _index(self, name: str) -> int:
        return bucket_index(
            name, self.num_buckets, self.hash_name, self.style is OutputStyle.COMPACT
        )

    def insert(self, symbol: SymbolInfo) -> bool:
        """Add ``symbol``; return False if its name is already in this scope."""
        if self.look_up(symbol.name) is not None:
            return False
        index = self._index(symbol.name)
        bucket = self._buckets[index]
        if bucket:
            self.collision += 1.0 / self.num_buckets
        bucket.append(symbol)
        if self._verbose:
            self._write(
                f"\t\tInserted in ScopeTable# {self.label} at position "
                f"{index + 1},{len(bucket)}\n"
            )
        return True

    def look_up(self, name: str) -> Optional[SymbolInfo]:
        """The symbol called ``name`` in this scope, or None."""
        index = self._index(name)
        for position, symbol in enumerate(self._buckets[index], 1):
            if symbol.name == name:
                if self._verbose:
                    self._write(
                        f"\t\t'{name}' found in ScopeTable# {self.label} "
                        f"at position {index + 1}, {position}\n"
                    )
                return symbol
        return None

    def delete(self, name: str) -> bool:
        """Remove the symbol called ``name``; return whether it was there."""
        index = self._index(name)
        bucket = self._buckets[index]
        for position, symbol in enumerate(bucket, 1):
            if symbol.name == name:
                del bucket[position - 1]
                self._write(
                    f"\t\tDeleted {name} from ScopeTable# {self.label} "
                    f"at position {index + 1}, {position}\n"
                )
                return True
        self._write("\t\tNot found in current ScopeTable\n")
        return False

    def dump(self, indent: int = 0) -> None:
        """Write the table's contents; ``indent`` tabs apply in compact style."""
        style = self.style
        if self._verbose:
            prefix = "\t" * indent
            self._write(f"{prefix}ScopeTable# {self.label}\n")
            for number, bucket in enumerate(self._buckets, 1):
                symbols = "".join(s.render(style) for s in bucket)
                self._write(f"{prefix}{number}--> {symbols}\n")
        else:
            self._write(f"ScopeTable # {self.label}\n")
            for number, bucket in enumerate(self._buckets, 1):
                if bucket:
                    symbols = "".join(s.render(style) for s in bucket)
                    self._write(f"{number} --> {symbols}\n")

    def close(self) -> None:
        """Discard all symbols; in compact style report the removal once."""
        if self._closed:
            return
        self._closed = True
        for bucket in self._buckets:
            bucket.clear()
        if self._verbose:
            self._write(f"\t\tScopeTable# {self.label} removed\n")

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def __iter__(self) -> Iterator[SymbolInfo]:
        for bucket in self._buckets:
            yield from bucket

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        return any(s.name == name for s in self._buckets[self._index(name)])