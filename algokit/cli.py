"""Command-line front end reading problem data from standard input."""

from __future__ import annotations

import argparse
import sys
import time
from typing import Callable, Dict, Iterator, List, Optional

from algokit.jobs import Job, job_sequence
from algokit.knapsack import Item, fractional_knapsack, knapsack_01
from algokit.subsets import subset_sums


class _Tokens:
    """Whitespace-separated integers read in order."""

    def __init__(self, text: str) -> None:
        self._iter: Iterator[str] = iter(text.split())

    def next_int(self) -> int:
        try:
            token = next(self._iter)
        except StopIteration:
            raise ValueError("unexpected end of input") from None
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"not an integer: {token!r}") from None

    def count(self) -> int:
        value = self.next_int()
        if value < 0:
            raise ValueError("count must not be negative")
        return value


def _prompt(text: str) -> None:
    print(text, end="")


def _run_knapsack(tokens: _Tokens) -> None:
    _prompt("Enter number of items: ")
    n = tokens.count()
    print("Enter value and weight of items:")
    values: List[int] = []
    weights: List[int] = []
    for _ in range(n):
        values.append(tokens.next_int())
        weights.append(tokens.next_int())
    _prompt("Enter size of knapsack: ")
    capacity = tokens.next_int()

    start = time.perf_counter()
    profit = knapsack_01(capacity, weights, values)
    elapsed = time.perf_counter() - start
    print(f"The maximum profit obtained is: {profit}")
    print(f"The Knapsack problem took {elapsed:f} seconds to execute")


def _run_fractional(tokens: _Tokens) -> None:
    _prompt("Enter knapsack capacity: ")
    capacity = tokens.next_int()
    _prompt("Enter number of items: ")
    count = tokens.count()
    print("Enter value and weight for each item:")
    items: List[Item] = []
    for number in range(1, count + 1):
        _prompt(f"Item {number}: ")
        value = tokens.next_int()
        weight = tokens.next_int()
        items.append(Item(value, weight))

    start = time.perf_counter()
    best = fractional_knapsack(capacity, items)
    elapsed = time.perf_counter() - start
    print(f"\nMaximum achievable value: {best:.2f}")
    print(f"Execution time: {elapsed:.6f} seconds")


def _run_jobs(tokens: _Tokens) -> None:
    start = time.perf_counter()
    _prompt("Enter number of jobs: ")
    count = tokens.count()
    print("Enter id, deadline, and profit of jobs:")
    jobs: List[Job] = []
    for number in range(1, count + 1):
        _prompt(f"Job {number}: ")
        job_id = tokens.next_int()
        deadline = tokens.next_int()
        profit = tokens.next_int()
        jobs.append(Job(job_id, deadline, profit))

    print("Following is sequence for max profit:")
    ids = " ".join(str(job.id) for job in job_sequence(jobs))
    print(f"Job sequence for max profit: {ids}")
    elapsed = time.perf_counter() - start
    print(f"The job sequencing with deadline took {elapsed:f} seconds")


def _run_subsets(tokens: _Tokens) -> None:
    _prompt("Enter the number count: ")
    count = tokens.count()
    print("Enter the numbers:")
    numbers: List[int] = []
    for number in range(1, count + 1):
        _prompt(f"Number {number}: ")
        numbers.append(tokens.next_int())
    _prompt("Enter the sum: ")
    target = tokens.next_int()

    start = time.perf_counter()
    for subset in subset_sums(numbers, target):
        print(" ".join(str(value) for value in subset))
    elapsed = time.perf_counter() - start
    print(f"The sum of subsets problem took {elapsed:f} seconds to execute")


_COMMANDS: Dict[str, Callable[[_Tokens], None]] = {
    "knapsack": _run_knapsack,
    "fractional": _run_fractional,
    "jobs": _run_jobs,
    "subsets": _run_subsets,
}

_HELP = {
    "knapsack": "0/1 knapsack: maximum profit of whole items",
    "fractional": "fractional knapsack: maximum value with divisible items",
    "jobs": "job sequencing with deadlines",
    "subsets": "list the subsets that add up to a target sum",
}


def main(argv: Optional[List[str]] = None) -> int:
    """Run one solver on integers read from standard input; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="algokit", description="Solve classic algorithm problems from standard input."
    )
    commands = parser.add_subparsers(dest="command", required=True)
    for name in _COMMANDS:
        commands.add_parser(name, help=_HELP[name])
    args = parser.parse_args(argv)

    tokens = _Tokens(sys.stdin.read())
    try:
        _COMMANDS[args.command](tokens)
    except ValueError as exc:
        print(f"algokit: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())