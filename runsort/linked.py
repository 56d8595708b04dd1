"""Singly linked list primitives.

A list is a chain of :class:`Node` objects. :class:`LinkedList` is the handle
that owns the first node of a chain; a handle whose ``head`` is ``None`` is the
empty list. Every traversal in this module is a loop over a cursor, so chains
of any length can be walked without growing the call stack.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import zip_longest
from typing import Any, Union

from attrs import define, field

from runsort.exception import CyclicListError


@define(eq=False)
class Node:
    """Node for the linked list.

    Two nodes only compare equal if they are the same object, so ``==`` can be
    used to check whether two handles own the same cell.

    Parameters
    ----------
    data : Any, optional (default None)
        The current data.
    next : Node | None, optional (default None)
        The next node in the chain.
    """

    data: Any = None
    next: Node | None = field(default=None, repr=False)

    def to_list(self) -> list[Any]:
        """Collect the data from this node to the end of the chain.

        Returns
        -------
        list[Any]
            A standard list of data, in chain order.
        """
        return [node.data for node in iter_nodes(self)]


ListLike = Union["LinkedList", Node, None]


def iter_nodes(head: Node | None) -> Iterator[Node]:
    """Walk a chain of nodes from ``head``.

    A second cursor trails at half speed; if the leading cursor ever lands on
    it, the chain loops back on itself.

    Parameters
    ----------
    head : Node | None
        The first node of the chain.

    Yields
    ------
    Node
        Each node in the chain, in order.

    Raises
    ------
    runsort.exception.CyclicListError
        Raised if the chain contains a cycle.
    """
    current = head
    trailing = head
    steps = 0
    while current is not None:
        yield current
        current = current.next
        steps += 1
        if steps % 2 == 0 and trailing is not None:
            trailing = trailing.next
        if current is not None and current is trailing:
            raise CyclicListError(
                f"Node chain loops back on itself after {steps} steps"
            )


def _head_of(lst: ListLike) -> Node | None:
    if isinstance(lst, LinkedList):
        return lst.head
    return lst


@define(eq=False)
class LinkedList:
    """The linked list.

    Parameters
    ----------
    head : Node, optional (default None)
        The start of the list. ``None`` is the empty list.
    """

    head: Node | None = None

    @classmethod
    def from_list(cls, data: Iterable[Any]) -> LinkedList:
        """Build a linked list holding ``data`` in the same order.

        Parameters
        ----------
        data : Iterable[Any]
            The values for the new nodes.

        Returns
        -------
        LinkedList
            A new list.
        """
        sentinel = Node()
        tail = sentinel
        for val in data:
            tail.next = Node(data=val)
            tail = tail.next

        return cls(head=sentinel.next)

    def append(self, data: Any) -> None:
        """Append a new node to the end of the list.

        Parameters
        ----------
        data : Any
            The new data.
        """
        new = Node(data=data)
        if self.head is None:
            self.head = new
            return
        # Scroll to the end of the list
        for current in iter_nodes(self.head):
            if current.next is None:
                current.next = new
                break

    def prepend(self, data: Any) -> None:
        """Add a new node to the front of the list.

        Parameters
        ----------
        data : Any
            The new data.
        """
        self.head = Node(data=data, next=self.head)

    def pop(self) -> Any:
        """Remove the first node and return its data.

        Returns
        -------
        Any
            The data from the removed node.

        Raises
        ------
        IndexError
            Raised if the list is empty.
        """
        if self.head is None:
            raise IndexError("pop from an empty linked list")
        node = self.head
        self.head = node.next
        node.next = None

        return node.data

    def detach(self) -> Node | None:
        """Hand over the chain owned by this list.

        The list is left empty; the caller becomes the sole owner of the
        returned nodes.

        Returns
        -------
        Node | None
            The former head of the list.
        """
        head, self.head = self.head, None
        return head

    def is_empty(self) -> bool:
        """Whether the list has no nodes."""
        return self.head is None

    def length(self) -> int:
        """Count the nodes in the list."""
        return length(self)

    def render(self) -> str:
        """Render the list as ``[e1,e2,...,en]``."""
        return render(self)

    def is_sorted(self) -> bool:
        """Whether the list is non-decreasing."""
        return is_sorted(self)

    def to_list(self) -> list[Any]:
        """Convert the list to a standard list of data."""
        return list(self)

    def __iter__(self) -> Iterator[Any]:
        for node in iter_nodes(self.head):
            yield node.data

    def __len__(self) -> int:
        return length(self)

    def __str__(self) -> str:
        return render(self)

    def __eq__(self, other: object) -> bool:
        """Element-wise comparison with another linked list."""
        if not isinstance(other, LinkedList):
            return NotImplemented
        missing = object()
        return all(
            a is not missing and b is not missing and a == b
            for a, b in zip_longest(self, other, fillvalue=missing)
        )


def length(lst: ListLike) -> int:
    """Count the nodes in a list.

    Parameters
    ----------
    lst : LinkedList | Node | None
        The list, or the first node of a chain.

    Returns
    -------
    int
        The number of nodes. An empty list has length 0.
    """
    count = 0
    for _ in iter_nodes(_head_of(lst)):
        count += 1

    return count


def render(lst: ListLike) -> str:
    """Render a list as a bracketed, comma-separated string.

    Parameters
    ----------
    lst : LinkedList | Node | None
        The list, or the first node of a chain.

    Returns
    -------
    str
        For example ``[3,1,4]``. An empty list renders as ``[]``.
    """
    return "[" + ",".join(str(node.data) for node in iter_nodes(_head_of(lst))) + "]"


def is_sorted(lst: ListLike) -> bool:
    """Check whether a list is non-decreasing.

    Equal neighbours are allowed, so ``[1,3,3,4]`` is sorted. The scan stops at
    the first inversion.

    Parameters
    ----------
    lst : LinkedList | Node | None
        The list, or the first node of a chain.

    Returns
    -------
    bool
        ``True`` if every adjacent pair is in order. Empty and single-element
        lists are sorted.
    """
    previous: Node | None = None
    for node in iter_nodes(_head_of(lst)):
        if previous is not None and previous.data > node.data:
            return False
        previous = node

    return True
