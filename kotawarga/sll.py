"""Singly linked list of residents that belongs to a named city."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass(eq=False)
class Node:
    """One element of a city's resident list."""

    info: str
    next: Optional["Node"] = None


class City:
    """A named city that holds its residents as a singly linked list."""

    def __init__(self, name):
        self.name = name
        self.first: Optional[Node] = None

    def _nodes(self) -> Iterator[Node]:
        node = self.first
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[str]:
        for node in self._nodes():
            yield node.info

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __repr__(self) -> str:
        return f"City({self.name!r}, {list(self)!r})"

    def is_empty(self) -> bool:
        """Return True when the city has no residents."""
        return self.first is None

    def search(self, value) -> Optional[Node]:
        """Return the first node holding ``value``, or None."""
        return next((node for node in self._nodes() if node.info == value), None)

    def contains_node(self, node) -> bool:
        """Return True when ``node`` itself is part of this list."""
        return any(candidate is node for candidate in self._nodes())

    def search_prev(self, value) -> Optional[Node]:
        """Return the node before the first one holding ``value``.

        None is returned when the value is absent or sits in the first node.
        """
        prev = None
        for node in self._nodes():
            if node.info == value:
                return prev
            prev = node
        return None

    def push_front(self, value) -> Node:
        """Add ``value`` as the first resident and return its node."""
        node = Node(value)
        self.insert_first(node)
        return node

    def push_back(self, value) -> Node:
        """Add ``value`` as the last resident and return its node."""
        node = Node(value)
        self.insert_last(node)
        return node

    def pop_front(self):
        """Remove the first resident and return its value."""
        return self.remove_first().info

    def pop_back(self):
        """Remove the last resident and return its value."""
        return self.remove_last().info

    def insert_first(self, node) -> None:
        """Link ``node`` in as the first element."""
        node.next = self.first
        self.first = node

    def insert_after(self, node, prev) -> None:
        """Link ``node`` in directly after ``prev``."""
        node.next = prev.next
        prev.next = node

    def insert_last(self, node) -> None:
        """Link ``node`` in as the last element."""
        if self.first is None:
            self.first = node
            return
        last = self.first
        while last.next is not None:
            last = last.next
        last.next = node

    def remove_first(self) -> Node:
        """Unlink and return the first node."""
        node = self.first
        if node is None:
            raise IndexError(f"city {self.name!r} has no residents")
        self.first = node.next
        node.next = None
        return node

    def remove_last(self) -> Node:
        """Unlink and return the last node."""
        if self.first is None:
            raise IndexError(f"city {self.name!r} has no residents")
        prev = None
        node = self.first
        while node.next is not None:
            prev, node = node, node.next
        if prev is None:
            self.first = None
        else:
            prev.next = None
        return node

    def remove_after(self, prev) -> Optional[Node]:
        """Unlink and return the node after ``prev``; None if there is none."""
        node = prev.next
        if node is not None:
            prev.next = node.next
            node.next = None
        return node

    def remove_value(self, value) -> bool:
        """Unlink the first node holding ``value``; return whether one was found."""
        prev = None
        for node in self._nodes():
            if node.info == value:
                break
            prev = node
        else:
            return False
        if prev is None:
            self.first = node.next
        else:
            prev.next = node.next
        node.next = None
        return True

    def remove_resident(self, name) -> bool:
        """Remove the resident called ``name``; return whether one was found."""
        return self.remove_value(name)

    def clear(self) -> None:
        """Remove every resident."""
        while self.first is not None:
            self.remove_first()

    def format(self) -> str:
        """Render the city and its residents as one display block."""
        head = f"Kota {self.name} : "
        if self.is_empty():
            return head + "List Kosong .... \a\n\n"
        return head + "".join(f"{name} " for name in self) + "\n\n"