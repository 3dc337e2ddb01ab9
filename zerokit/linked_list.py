"""An immutable singly linked list built by prepending elements."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass(frozen=True)
class _Node:
    data: Any
    next: Optional["_Node"]


class LinkedList:
    """A persistent list; :meth:`cons` returns a new list and leaves this one intact."""

    __slots__ = ("_head",)

    def __init__(self) -> None:
        self._head: Optional[_Node] = None

    @classmethod
    def _from_head(cls, head: Optional[_Node]) -> "LinkedList":
        lst = cls()
        lst._head = head
        return lst

    def cons(self, data: Any) -> "LinkedList":
        """Return a list with ``data`` in front of the elements of this one."""
        return LinkedList._from_head(_Node(data, self._head))

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return list(self) == list(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        text = "Nil"
        for data in reversed(list(self)):
            text = f"Node {{ data: {data!r}, next: {text} }}"
        return text