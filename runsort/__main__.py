"""Sort a random list and report on it."""

from __future__ import annotations

import argparse
import logging

from runsort.generators import random_list
from runsort.linked import LinkedList
from runsort.sort import merge_sort


def _report(lst: LinkedList) -> str:
    verdict = "is sorted!" if lst.is_sorted() else "is NOT sorted!"
    return f"isSorted thinks that the list {lst} {verdict}"


def main(argv: list[str] | None = None) -> int:
    """Run the demonstration.

    Parameters
    ----------
    argv : list[str], optional (default None)
        Command line arguments. Defaults to ``sys.argv[1:]``.

    Returns
    -------
    int
        The exit code.
    """
    parser = argparse.ArgumentParser(
        prog="runsort", description="Merge sort a randomly generated linked list."
    )
    parser.add_argument("n", type=int, help="Length of the random list.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity.",
    )
    args = parser.parse_args(argv)
    if args.n < 0:
        parser.error("n must be non-negative")
    logging.basicConfig(level=args.log_level)

    unsorted = random_list(args.n, seed=args.seed)
    print(f"Randomly generated list of length {args.n}: {unsorted}")
    print(_report(unsorted))
    print("Merge sorting...")
    result = merge_sort(unsorted)
    print(f"Merge sorted list: {result}")
    print(_report(result))

    return 0 if result.is_sorted() else 1


if __name__ == "__main__":
    raise SystemExit(main())
