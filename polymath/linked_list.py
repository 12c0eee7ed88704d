"""A doubly linked list whose nodes keep a loopback link to the root."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False, repr=False)
class Node:
    """A list node holding its contents and links."""

    contents: Any = None
    next: Node | None = field(default=None)
    previous: Node | None = field(default=None)
    loopback: Node | None = field(default=None)

    def __repr__(self) -> str:
        return f"Node({self.contents!r})"


class CircularLinkedList:
    """Nodes chained by ``next``/``previous`` with every node looping back to the root."""

    def __init__(self, root: Node) -> None:
        self.root: Node | None = root
        root.loopback = root

    def __iter__(self) -> Iterator[Node]:
        current = self.root
        while current is not None:
            yield current
            current = current.next

    def create_and_insert_node(self, previous_node: Node, contents: Any) -> Node:
        """Create a node holding ``contents`` and link it in after ``previous_node``."""
        new_node = Node(contents, previous_node.next, previous_node, self.root)
        if previous_node.next is not None:
            previous_node.next.previous = new_node
        previous_node.next = new_node
        return new_node

    def traverse_until(self, target: Node) -> Node:
        """Walk from the root to ``target`` and return it."""
        for node in self:
            if node is target:
                return node
        raise ValueError("Node is not in the list.")

    def delete_node(self, node: Node) -> bool:
        """Unlink ``node``; False if it is not in the list."""
        if not any(current is node for current in self):
            return False
        previous_node, next_node = node.previous, node.next
        if previous_node is not None:
            previous_node.next = next_node
        if next_node is not None:
            next_node.previous = previous_node
        if node is self.root:
            self.root = next_node
            for current in self:
                current.loopback = self.root
        node.next = node.previous = node.loopback = None
        return True