"""Hash table storage: chained nodes, bin entries and the bin array."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, Optional, Union


class BinKind(Enum):
    """What a bin entry holds."""

    NODE = 0
    """The entry heads a chain of nodes."""
    MOVED = 1
    """The bin was moved during a resize; the entry points at the next table."""


@dataclass(eq=False)
class Node:
    """One key/value pair in a bin's chain."""

    hash: int
    key: Any
    value: Any = None
    next: Optional[Node] = None
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def __iter__(self) -> Iterator[Node]:
        """Yield this node and every node after it in the chain."""
        node: Optional[Node] = self
        while node is not None:
            yield node
            node = node.next

    def matches(self, hash: int, key: Any) -> bool:
        """Return True if this node holds the given hash and key."""
        return self.hash == hash and (self.key is key or self.key == key)

    def find(self, hash: int, key: Any) -> Optional[Node]:
        """Return the first node from here on that holds key, or None."""
        return next((node for node in self if node.matches(hash, key)), None)


@dataclass(frozen=True)
class BinEntry:
    """The content of an initialised bin.

    A NODE entry's target is the head of the chain (None for an empty bin);
    a MOVED entry's target is the table the bin was moved to.
    """

    kind: BinKind
    target: Union[Node, Table, None] = None

    @classmethod
    def node(cls, head: Optional[Node]) -> BinEntry:
        """Build an entry heading the chain that starts at head."""
        return cls(BinKind.NODE, head)

    @classmethod
    def moved(cls, table: Table) -> BinEntry:
        """Build an entry forwarding lookups to table."""
        return cls(BinKind.MOVED, table)


class Table:
    """A fixed array of bins; its size is zero or a power of two."""

    __slots__ = ("bins",)

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("table size must not be negative")
        self.bins: list[Optional[BinEntry]] = [None] * size

    def __len__(self) -> int:
        return len(self.bins)

    def __repr__(self) -> str:
        return f"Table(size={len(self.bins)})"

    def bin_index(self, hash: int) -> int:
        """Return the bin a hash falls in."""
        return hash & (len(self.bins) - 1)

    def find(self, hash: int, key: Any) -> Optional[Node]:
        """Return the node holding key, following moved bins, or None."""
        table: Optional[Table] = self
        while table is not None and table.bins:
            entry = table.bins[table.bin_index(hash)]
            if entry is None:
                return None
            if entry.kind is BinKind.NODE:
                head = entry.target
                return head.find(hash, key) if isinstance(head, Node) else None
            target = entry.target
            table = target if isinstance(target, Table) else None
        return None