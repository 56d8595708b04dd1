"""Natural merge sort over linked lists.

Runs found by :func:`runsort.runs.queue_sorted_segments` are merged pairwise
through a FIFO queue until one run is left. Merging splices the existing
nodes together; no values are copied.
"""

from __future__ import annotations

import logging

from runsort.config import get_settings
from runsort.exception import OwnershipError, UnsortedInputError
from runsort.linked import LinkedList, Node, is_sorted, iter_nodes
from runsort.runs import queue_sorted_segments

LOG = logging.getLogger(__name__)


def merge_nodes(list1: Node | None, list2: Node | None) -> Node | None:
    """Merge two sorted chains of nodes.

    When the heads are equal the node from ``list1`` is taken first, so equal
    elements keep their relative order across the two inputs.

    The chains are trusted: they must be sorted, acyclic and disjoint.

    Parameters
    ----------
    list1 : Node | None
        The head of the first list.
    list2 : Node | None
        The head of the second list.

    Returns
    -------
    Node | None
        The head of the final, merged list.
    """
    if list1 is None:
        return list2
    if list2 is None:
        return list1
    # Create the head of the new list as a dummy node
    head = Node()
    current = head
    while list1 is not None and list2 is not None:
        if list2.data < list1.data:
            current.next = list2
            list2 = list2.next
        else:
            current.next = list1
            list1 = list1.next
        current = current.next
    # Whatever is left is already sorted
    current.next = list1 if list1 is not None else list2
    return head.next


def merge(first: LinkedList, second: LinkedList) -> LinkedList:
    """Merge two sorted linked lists.

    Both inputs are consumed and left empty; the returned list owns all of
    their nodes. Merging with an empty list returns the other list's nodes
    unchanged.

    With contract checks disabled only a shared head is detected; the inputs
    are otherwise trusted to be sorted, acyclic and disjoint.

    Parameters
    ----------
    first : LinkedList
        A sorted list. Wins ties.
    second : LinkedList
        A sorted list.

    Returns
    -------
    LinkedList
        A sorted list with ``len(first) + len(second)`` nodes.

    Raises
    ------
    runsort.exception.OwnershipError
        Raised if both arguments own the same nodes.
    runsort.exception.CyclicListError
        Raised if contract checks are enabled and either input loops back on
        itself.
    runsort.exception.UnsortedInputError
        Raised if contract checks are enabled and either input is unsorted.
    """
    if first.head is not None and first.head is second.head:
        raise OwnershipError("Cannot merge a list with itself")
    if get_settings().check_contracts:
        owned = set(iter_nodes(first.head))
        if any(node in owned for node in iter_nodes(second.head)):
            raise OwnershipError("The lists passed to ``merge`` share nodes")
        for name, lst in (("first", first), ("second", second)):
            if not is_sorted(lst):
                raise UnsortedInputError(
                    f"The {name} list passed to ``merge`` is not sorted"
                )

    return LinkedList(head=merge_nodes(first.detach(), second.detach()))


def merge_sort(lst: LinkedList) -> LinkedList:
    """Sort a linked list.

    The list is split into sorted runs. The two oldest runs are repeatedly
    taken off the queue, merged, and the result put at the back, until a
    single run remains.

    Parameters
    ----------
    lst : LinkedList
        The list to sort. It is consumed and left empty.

    Returns
    -------
    LinkedList
        A new handle on the sorted nodes.
    """
    queue = queue_sorted_segments(lst)
    if not queue:
        return LinkedList()

    runs = len(queue)
    if runs == 1:
        LOG.debug("List was already sorted; no merges needed")
    merges = 0
    while len(queue) > 1:
        queue.append(merge(queue.popleft(), queue.popleft()))
        merges += 1

    LOG.debug(f"Sorted {runs} runs with {merges} merges")
    return queue.popleft()
