"""A thread-safe hash map with per-bin locking."""

from __future__ import annotations

import threading
from typing import Any, Callable, NamedTuple, Optional, Union

from .hasher import Hasher, default_hasher
from .helpers import DEFAULT_CAPACITY, LOAD_FACTOR, MAXIMUM_CAPACITY, next_power_of_two
from .table import BinEntry, BinKind, Node, Table

_UINT64_MASK = 0xFFFFFFFFFFFFFFFF

HashFunction = Union[Hasher, Callable[[Any], int]]


class PutResult(NamedTuple):
    """Outcome of a put: the value that was there before, and whether a value was stored."""

    previous: Any
    stored: bool


class Cmap:
    """A concurrent hash map.

    Reads take no locks; writers lock the head node of the bin they change.
    Empty bins are claimed, and the table is created, under a map-wide lock.
    """

    def __init__(self, hasher: Optional[HashFunction] = None) -> None:
        self._hasher: HashFunction = hasher if hasher is not None else default_hasher
        self._table: Optional[Table] = None
        self._size_ctl = DEFAULT_CAPACITY
        self._count = 0
        self._lock = threading.Lock()

    @classmethod
    def with_capacity(cls, n: int) -> Cmap:
        """Create a map whose table fits n entries before reaching the load factor."""
        if n <= 0:
            raise ValueError("capacity must be positive")
        cmap = cls()
        size = int(n / LOAD_FACTOR) + 1
        cmap._size_ctl = min(next_power_of_two(size), MAXIMUM_CAPACITY)
        return cmap

    def _hash(self, key: Any) -> int:
        return self._hasher(key) & _UINT64_MASK

    def _init_table(self) -> Table:
        with self._lock:
            table = self._table
            if table is not None and len(table) > 0:
                return table
            n = self._size_ctl if self._size_ctl > 0 else DEFAULT_CAPACITY
            table = Table(n)
            self._table = table
            self._size_ctl = n - (n >> 2)
            return table

    def _add_count(self, n: int) -> None:
        with self._lock:
            self._count += n

    def _find(self, key: Any) -> Optional[Node]:
        h = self._hash(key)
        table = self._table
        if table is None or len(table) == 0:
            return None
        return table.find(h, key)

    def get(self, key: Any) -> Any:
        """Return the value stored for key; raise KeyError if there is none."""
        node = self._find(key)
        if node is None:
            raise KeyError(key)
        return node.value

    def get_and_then(self, key: Any, fn: Callable[[Any], Any]) -> Any:
        """Return fn applied to the value stored for key; raise KeyError if there is none."""
        return fn(self.get(key))

    def put(self, key: Any, value: Any) -> PutResult:
        """Store value under key, replacing any existing value."""
        return self._put(key, value, only_if_absent=False)

    def put_if_absent(self, key: Any, value: Any) -> PutResult:
        """Store value under key only if the key is not present yet."""
        return self._put(key, value, only_if_absent=True)

    def _put(self, key: Any, value: Any, only_if_absent: bool) -> PutResult:
        h = self._hash(key)
        table = self._table
        while True:
            if table is None or len(table) == 0:
                table = self._init_table()
                continue

            index = table.bin_index(h)
            entry = table.bins[index]

            if entry is None or (entry.kind is BinKind.NODE and entry.target is None):
                with self._lock:
                    if table.bins[index] is not entry:
                        continue
                    table.bins[index] = BinEntry.node(Node(h, key, value))
                    self._count += 1
                return PutResult(None, True)

            if entry.kind is BinKind.MOVED:
                target = entry.target
                table = target if isinstance(target, Table) else self._table
                continue

            head = entry.target
            assert isinstance(head, Node)

            if only_if_absent and head.matches(h, key):
                return PutResult(head.value, False)

            with head.lock:
                if table.bins[index] is not entry:
                    continue
                last = head
                for node in head:
                    if node.matches(h, key):
                        previous = node.value
                        if not only_if_absent:
                            node.value = value
                        return PutResult(previous, not only_if_absent)
                    last = node
                last.next = Node(h, key, value)
            self._add_count(1)
            return PutResult(None, True)

    def size(self) -> int:
        """Return the number of entries in the map."""
        return self._count

    def clear(self) -> None:
        """Remove every entry, leaving a fresh table of the default capacity."""
        with self._lock:
            if self._table is None:
                return
            self._table = Table(DEFAULT_CAPACITY)
            self._count = 0
            self._size_ctl = DEFAULT_CAPACITY - (DEFAULT_CAPACITY >> 2)

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: Any) -> bool:
        return self._find(key) is not None

    def __getitem__(self, key: Any) -> Any:
        return self.get(key)