"""Dynamic-programming classics: egg drop, Fibonacci, knapsack and job scheduling."""

from __future__ import annotations

import argparse
import sys
from bisect import bisect_right
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence, TextIO

_WARM_STEP = 256


@dataclass(frozen=True)
class KnapsackResult:
    """Best profit, the chosen 1-based item numbers and the full DP table.

    Items are listed in the order the table is walked back: highest first.
    """

    value: int
    items: tuple[int, ...]
    table: tuple[tuple[int, ...], ...]


def egg_drop(eggs: int, floors: int) -> int:
    """Fewest trials that find the critical floor in the worst case."""
    if eggs < 1:
        raise ValueError("at least one egg is needed")
    if floors < 0:
        raise ValueError("floor count must not be negative")
    previous = list(range(floors + 1))
    for _ in range(2, eggs + 1):
        current = [0] * (floors + 1)
        if floors >= 1:
            current[1] = 1
        for height in range(2, floors + 1):
            current[height] = min(
                1 + max(previous[drop - 1], current[height - drop])
                for drop in range(1, height + 1)
            )
        previous = current
    return previous[floors]


def fib_bottom_up(n: int) -> int:
    """The ``n``-th Fibonacci number, built up from the first two."""
    if n < 0:
        raise ValueError("n must not be negative")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def fib_top_down(n: int) -> int:
    """The ``n``-th Fibonacci number by memoised recursion."""
    if n < 0:
        raise ValueError("n must not be negative")
    memo: dict[int, int] = {}

    def fib(k: int) -> int:
        if k not in memo:
            memo[k] = k if k <= 1 else fib(k - 1) + fib(k - 2)
        return memo[k]

    # Fill the memo in stages so the recursion never runs deep.
    for step in range(0, n, _WARM_STEP):
        fib(step)
    return fib(n)


def knapsack(
    capacity: int, weights: Sequence[int], profits: Sequence[int]
) -> KnapsackResult:
    """Solve the 0/1 knapsack problem."""
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if len(weights) != len(profits):
        raise ValueError("weights and profits must have the same length")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must not be negative")

    rows: list[list[int]] = [[0] * (capacity + 1)]
    for weight, profit in zip(weights, profits):
        above = rows[-1]
        rows.append(
            [0]
            + [
                max(profit + above[room - weight], above[room])
                if weight <= room
                else above[room]
                for room in range(1, capacity + 1)
            ]
        )

    remaining = rows[-1][capacity]
    room = capacity
    items: list[int] = []
    for number in range(len(weights), 0, -1):
        if remaining <= 0:
            break
        if remaining == rows[number - 1][room]:
            continue
        items.append(number)
        remaining -= profits[number - 1]
        room -= weights[number - 1]

    return KnapsackResult(
        value=rows[-1][capacity],
        items=tuple(items),
        table=tuple(tuple(row) for row in rows),
    )


def job_scheduling(
    start_times: Sequence[int], end_times: Sequence[int], profits: Sequence[int]
) -> int:
    """Largest total profit from jobs that do not overlap in time."""
    if not len(start_times) == len(end_times) == len(profits):
        raise ValueError("start times, end times and profits must match in length")
    jobs = sorted(zip(start_times, end_times, profits), key=lambda job: job[1])
    ends = [end for _, end, _ in jobs]
    best: list[int] = []
    for index, (start, _, profit) in enumerate(jobs):
        previous = bisect_right(ends, start, 0, index) - 1
        include = profit + (best[previous] if previous >= 0 else 0)
        exclude = best[-1] if best else include
        best.append(max(include, exclude))
    return best[-1] if best else 0


def _ints(stream: TextIO) -> Iterator[int]:
    for line in stream:
        for token in line.split():
            yield int(token)


def _next(reader: Iterator[int]) -> int:
    value = next(reader, None)
    if value is None:
        raise ValueError("unexpected end of input")
    return value


def _run_egg(args: argparse.Namespace, reader: Iterator[int]) -> None:
    print("Enter number of eggs and floors: ", end="", flush=True)
    eggs = _next(reader)
    floors = _next(reader)
    print(f"Minimum number of trials in worst case: {egg_drop(eggs, floors)}")


def _run_fib(args: argparse.Namespace, reader: Iterator[int]) -> None:
    print("Enter n: ", end="", flush=True)
    n = _next(reader)
    compute = fib_top_down if args.method == "top-down" else fib_bottom_up
    print(f"Fibonacci number is {compute(n)}")


def _run_knapsack(args: argparse.Namespace, reader: Iterator[int]) -> None:
    print("Enter number of items :", end="", flush=True)
    count = _next(reader)
    print("\nEnter value of weight and profit :", end="", flush=True)
    pairs = [(_next(reader), _next(reader)) for _ in range(count)]
    print("\nEnter capacity of knapsack :", end="", flush=True)
    capacity = _next(reader)
    result = knapsack(
        capacity, [weight for weight, _ in pairs], [profit for _, profit in pairs]
    )
    print("\n DP Table:")
    for row in result.table:
        print("".join(f"{cell} " for cell in row))
    print()
    print("Item number in solution : ", end="")
    print("".join(f"{item}\t" for item in result.items))
    print(f"Solution : {result.value}")


def _run_jobs(args: argparse.Namespace, reader: Iterator[int]) -> None:
    count = _next(reader)
    starts: list[int] = []
    ends: list[int] = []
    profits: list[int] = []
    for _ in range(count):
        start, duration, profit = _next(reader), _next(reader), _next(reader)
        starts.append(start)
        ends.append(start + duration)
        profits.append(profit)
    print(job_scheduling(starts, ends, profits))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one of the dynamic-programming solvers on standard input."""
    parser = argparse.ArgumentParser(prog="algokit-dynamic", description=__doc__)
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("egg", help="egg dropping puzzle").set_defaults(handler=_run_egg)
    fib_parser = sub.add_parser("fib", help="Fibonacci numbers")
    fib_parser.add_argument(
        "--method", choices=("bottom-up", "top-down"), default="bottom-up"
    )
    fib_parser.set_defaults(handler=_run_fib)
    sub.add_parser("knapsack", help="0/1 knapsack").set_defaults(handler=_run_knapsack)
    sub.add_parser("jobs", help="weighted job scheduling").set_defaults(
        handler=_run_jobs
    )

    args = parser.parse_args(argv)
    try:
        args.handler(args, _ints(sys.stdin))
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0