"""Splitting a list into sorted runs."""

from __future__ import annotations

import logging
from collections import deque

from runsort.linked import LinkedList, Node, is_sorted, iter_nodes

LOG = logging.getLogger(__name__)


def queue_sorted_segments(lst: LinkedList) -> deque[LinkedList]:
    """Split a list into its maximal non-decreasing runs.

    The list is consumed: its nodes are cut into disjoint chains, each owned
    by one of the returned handles, and ``lst`` is left empty. Reading the runs
    front to back gives back the original elements in their original order.

    Parameters
    ----------
    lst : LinkedList
        The list to split.

    Returns
    -------
    collections.deque[LinkedList]
        The runs, oldest first. An already sorted list comes back as a single
        run; an empty list gives an empty queue.
    """
    queue: deque[LinkedList] = deque()
    if lst.is_empty():
        return queue
    if is_sorted(lst):
        queue.append(LinkedList(head=lst.detach()))
        LOG.debug("List is already sorted; emitting a single run")
        return queue

    # Find every node that ends a run before touching any links.
    run_ends: list[Node] = []
    previous: Node | None = None
    for node in iter_nodes(lst.head):
        if previous is not None and previous.data > node.data:
            run_ends.append(previous)
        previous = node

    start = lst.detach()
    for end in run_ends:
        queue.append(LinkedList(head=start))
        start, end.next = end.next, None
    queue.append(LinkedList(head=start))

    LOG.debug(f"Split list into {len(queue)} sorted runs")
    return queue
