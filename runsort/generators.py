"""Builders for sample lists."""

from __future__ import annotations

import random

from runsort.linked import LinkedList


def random_list(n: int, seed: int | None = None) -> LinkedList:
    """Build a list of ``n`` random integers.

    Parameters
    ----------
    n : int
        The number of elements.
    seed : int, optional (default None)
        Seed for the random number generator, for repeatable lists.

    Returns
    -------
    LinkedList
        A list whose elements are drawn from ``[0, n)``.

    Raises
    ------
    ValueError
        Raised if ``n`` is negative.
    """
    if n < 0:
        raise ValueError("Please provide a non-negative ``n``.")
    rng = random.Random(seed)
    out = LinkedList()
    for _ in range(n):
        out.prepend(rng.randrange(n))

    return out


def ordered_list(n: int) -> LinkedList:
    """Build the descending list ``n-1, ..., 1, 0``.

    Parameters
    ----------
    n : int
        The number of elements.

    Returns
    -------
    LinkedList
        The list, which is sorted only when ``n <= 1``.

    Raises
    ------
    ValueError
        Raised if ``n`` is negative.
    """
    if n < 0:
        raise ValueError("Please provide a non-negative ``n``.")
    out = LinkedList()
    for val in range(n):
        out.prepend(val)

    return out
