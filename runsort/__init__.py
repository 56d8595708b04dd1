"""Main module."""

from runsort._meta import __version__  # noqa: F401
from runsort.generators import ordered_list, random_list
from runsort.linked import LinkedList, Node, is_sorted, length, render
from runsort.runs import queue_sorted_segments
from runsort.sort import merge, merge_sort

__all__: list[str] = [
    "LinkedList",
    "Node",
    "is_sorted",
    "length",
    "merge",
    "merge_sort",
    "ordered_list",
    "queue_sorted_segments",
    "random_list",
    "render",
]
