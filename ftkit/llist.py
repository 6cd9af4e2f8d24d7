"""A singly linked list of nodes carrying arbitrary content."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class Node:
    """One list element: its content and the following node."""

    content: Any = None
    next: Node | None = field(default=None, repr=False)


def iter_nodes(head: Node | None) -> Iterator[Node]:
    """Yield every node from ``head`` to the end of the list."""
    node = head
    while node is not None:
        following = node.next
        yield node
        node = following


def lst_new(content: Any) -> Node:
    """Return a single unlinked node holding ``content``."""
    return Node(content)


def lst_add(head: Node | None, node: Node | None) -> Node | None:
    """Put ``node`` at the front of the list and return the new head."""
    if node is None:
        return head
    node.next = head
    return node


def lst_iter(head: Node | None, f: Callable[[Node], Any] | None) -> None:
    """Call ``f`` on every node in order."""
    if f is None:
        return
    for node in iter_nodes(head):
        f(node)


def lst_map(head: Node | None, f: Callable[[Node], Node] | None) -> Node | None:
    """Build a new list from the nodes ``f`` returns for each node in order."""
    if head is None or f is None:
        return None
    new_head: Node | None = None
    tail: Node | None = None
    for node in iter_nodes(head):
        made = f(node)
        if tail is None:
            new_head = made
        else:
            tail.next = made
        tail = made
    return new_head


def lst_del(head: Node | None, delete: Callable[[Any], Any] | None) -> Node | None:
    """Pass every node's content to ``delete`` and return the emptied list (None).

    Without a ``delete`` function the list is left as it is and returned.
    """
    if head is None or delete is None:
        return head
    for node in iter_nodes(head):
        delete(node.content)
        node.next = None
    return None