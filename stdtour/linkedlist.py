"""Sorted singly and doubly linked lists."""

from __future__ import annotations

import operator
from typing import Any, Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")


class EmptyListError(IndexError):
    """Raised when taking an element from an empty list."""


class _Node:
    __slots__ = ("data", "next")

    def __init__(self, data: Any, next_node: "_Node | None" = None) -> None:
        self.data = data
        self.next = next_node


class _DoubleNode(_Node):
    __slots__ = ("prev",)

    def __init__(
        self,
        data: Any,
        next_node: "_Node | None" = None,
        prev: "_DoubleNode | None" = None,
    ) -> None:
        super().__init__(data, next_node)
        self.prev = prev


class LinkedList(Generic[T]):
    """A singly linked list whose ``insert`` keeps the elements ordered.

    ``insert`` places a value before the first element it sorts ahead of, so
    equal values keep their insertion order. ``push_front`` and ``push_back``
    add at the ends without regard to order.
    """

    _node_type: type[_Node] = _Node
    # A singly linked list cannot be walked backwards.
    __reversed__ = None  # type: ignore[assignment]

    def __init__(self, iterable: Iterable[T] = (), *, descending: bool = False) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        self._descending = descending
        for value in iterable:
            self.insert(value)

    @property
    def descending(self) -> bool:
        return self._descending

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r}, descending={self._descending})"

    def _node_at(self, index: Any) -> _Node:
        position = operator.index(index)
        if position < 0:
            position += self._size
        if not 0 <= position < self._size:
            raise IndexError("list index out of range")
        node = self._head
        for _ in range(position):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def __getitem__(self, index: int) -> T:
        return self._node_at(index).data

    def __setitem__(self, index: int, value: T) -> None:
        self._node_at(index).data = value

    def _goes_before(self, value: Any, existing: Any) -> bool:
        return value > existing if self._descending else value < existing

    def _insert_sorted(self, value: T) -> tuple[_Node, _Node | None]:
        """Link a new node in order; return it and the node before it."""
        prev: _Node | None = None
        current = self._head
        while current is not None and not self._goes_before(value, current.data):
            prev = current
            current = current.next
        node = self._node_type(value, current)
        if prev is None:
            self._head = node
        else:
            prev.next = node
        if current is None:
            self._tail = node
        self._size += 1
        return node, prev

    def insert(self, value: T) -> None:
        """Insert ``value`` at its place in the ordering."""
        self._insert_sorted(value)

    def push_front(self, value: T) -> None:
        """Add ``value`` before the first element."""
        node = self._node_type(value, self._head)
        self._head = node
        self._size += 1
        if self._size == 1:
            self._tail = node

    def push_back(self, value: T) -> None:
        """Add ``value`` after the last element."""
        node = self._node_type(value)
        if self._tail is not None:
            self._tail.next = node
        self._tail = node
        if self._head is None:
            self._head = node
        self._size += 1

    def pop_head(self) -> T:
        """Remove and return the first element."""
        if self._head is None:
            raise EmptyListError("pop from an empty list")
        node = self._head
        self._head = node.next
        self._size -= 1
        if self._size == 0:
            self._tail = None
        return node.data


class DoubleLinkedList(LinkedList[T]):
    """An ordered linked list that can also be walked from the tail."""

    _node_type = _DoubleNode

    def __reversed__(self) -> Iterator[T]:
        node = self._tail
        while node is not None:
            yield node.data
            node = node.prev  # type: ignore[attr-defined]

    def insert(self, value: T) -> None:
        node, prev = self._insert_sorted(value)
        node.prev = prev  # type: ignore[attr-defined]
        if node.next is not None:
            node.next.prev = node  # type: ignore[attr-defined]

    def push_front(self, value: T) -> None:
        super().push_front(value)
        assert self._head is not None
        if self._head.next is not None:
            self._head.next.prev = self._head  # type: ignore[attr-defined]

    def push_back(self, value: T) -> None:
        previous_tail = self._tail
        super().push_back(value)
        assert self._tail is not None
        self._tail.prev = previous_tail  # type: ignore[attr-defined]

    def pop_head(self) -> T:
        value = super().pop_head()
        if self._head is not None:
            self._head.prev = None  # type: ignore[attr-defined]
        return value