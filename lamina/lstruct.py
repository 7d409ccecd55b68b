"""A string-keyed struct backed by a chained hash table with FNV-1a hashing."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

_MASK = (1 << 64) - 1
_FNV_OFFSET = 14695981039346656037
_FNV_PRIME = 1099511628211
_LOAD_FACTOR = 0.7
_INITIAL_BUCKETS = 16


def hash_string(key: str) -> int:
    """64-bit FNV-1a hash of the UTF-8 bytes of ``key``.

    Bytes above 0x7f are sign-extended before mixing, as with a signed char.
    """
    value = _FNV_OFFSET
    for byte in key.encode("utf-8"):
        mixed = byte if byte < 0x80 else (byte - 0x100) & _MASK
        value ^= mixed
        value = (value * _FNV_PRIME) & _MASK
    return value


@dataclass
class _Node:
    key: str
    value: Any
    hash: int


class LStruct:
    """A mutable mapping from attribute names to values.

    Iteration order follows the bucket layout of the underlying hash table.
    """

    def __init__(self, pairs: Iterable[tuple[str, Any]] = ()) -> None:
        items = list(pairs)
        size = _INITIAL_BUCKETS
        while size < len(items) / _LOAD_FACTOR:
            size *= 2
        self._buckets: list[list[_Node]] = [[] for _ in range(size)]
        self._count = 0
        for key, value in items:
            self.insert(key, value)

    def _index(self, hashed: int) -> int:
        return hashed & (len(self._buckets) - 1)

    def _resize(self) -> None:
        new_buckets: list[list[_Node]] = [[] for _ in range(len(self._buckets) * 2)]
        mask = len(new_buckets) - 1
        for chain in self._buckets:
            for node in chain:
                new_buckets[node.hash & mask].insert(0, node)
        self._buckets = new_buckets

    def _lookup(self, key: str) -> _Node | None:
        hashed = hash_string(key)
        for node in self._buckets[self._index(hashed)]:
            if node.hash == hashed and node.key == key:
                return node
        return None

    def insert(self, key: str, value: Any) -> None:
        """Set ``key`` to ``value``, adding it if absent."""
        if self._count / len(self._buckets) >= _LOAD_FACTOR:
            self._resize()
        node = self._lookup(key)
        if node is not None:
            node.value = value
            return
        hashed = hash_string(key)
        self._buckets[self._index(hashed)].insert(0, _Node(key, value, hashed))
        self._count += 1

    def find(self, key: str) -> Any:
        """Return the value stored under ``key``, or None if absent."""
        node = self._lookup(key)
        return None if node is None else node.value

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._lookup(key) is not None

    def to_list(self) -> list[tuple[str, Any]]:
        """All (key, value) pairs in table order."""
        return [(node.key, node.value) for chain in self._buckets for node in chain]

    def __str__(self) -> str:
        body = "".join(f"{key}: {value},\n" for key, value in self.to_list())
        return "{\n" + body + "}"

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[str]:
        """Iterate over the keys in table order."""
        for chain in self._buckets:
            for node in chain:
                yield node.key


def get_attr(struct: LStruct, name: str) -> Any:
    """Return attribute ``name`` of ``struct``; raise AttributeError if missing."""
    node = struct._lookup(name)
    if node is None:
        raise AttributeError(f"AttrError: struct hasn't attribute named {name}")
    return node.value


def set_attr(struct: LStruct, name: str, value: Any) -> None:
    """Set attribute ``name`` of ``struct`` to ``value``."""
    struct.insert(name, value)


def update(target: LStruct, other: LStruct) -> None:
    """Copy every attribute of ``other`` into ``target``."""
    for key, value in other.to_list():
        target.insert(key, value)