"""Small array algorithms: sorting, searching, windows and greedy selection."""

from __future__ import annotations

import argparse
import sys
from bisect import bisect_left
from typing import Callable, Iterable, Iterator, Optional, Sequence, TextIO

DEFAULT_SORT_INPUT = (10, 2, 0, 14, 43, 25, 18, 1, 5, 45)
NOT_FOUND_MESSAGE = "No such element is found"


def exchange_sort(values: Iterable[int]) -> tuple[list[int], int]:
    """Sort by pairwise exchange; return the sorted list and the pass count."""
    items = list(values)
    passes = 0
    for i in range(len(items)):
        for j in range(i + 1, len(items)):
            if items[j] < items[i]:
                items[i], items[j] = items[j], items[i]
        passes += 1
    return items, passes


def smallest_missing(values: Iterable[int], limit: int = 100) -> Optional[int]:
    """Smallest non-negative integer below ``limit`` absent from ``values``."""
    present = {value for value in values if 0 <= value < limit}
    return next((number for number in range(limit) if number not in present), None)


def subarray_with_sum(values: Sequence[int], target: int) -> Optional[tuple[int, int]]:
    """First contiguous run of non-negative values summing to ``target``.

    Returns inclusive ``(start, end)`` indices, or ``None`` if there is none.
    """
    if any(value < 0 for value in values):
        raise ValueError("values must not be negative")
    start = 0
    total = 0
    for end, value in enumerate(values):
        total += value
        while total > target and start < end:
            total -= values[start]
            start += 1
        if total == target:
            return start, end
    return None


def max_activities(intervals: Iterable[tuple[int, int]]) -> int:
    """Largest number of non-overlapping ``(start, finish)`` activities."""
    count = 0
    last_finish: Optional[int] = None
    for start, finish in sorted(intervals, key=lambda pair: (pair[1], pair[0])):
        if last_finish is None or start >= last_finish:
            count += 1
            last_finish = finish
    return count


def binary_search(values: Sequence[int], target: int) -> Optional[int]:
    """Index of ``target`` in the ascending ``values``, or ``None``."""
    index = bisect_left(values, target)
    if index < len(values) and values[index] == target:
        return index
    return None


def boring_apartment_keypresses(number: int) -> int:
    """Digits typed while calling every boring apartment up to ``number``.

    Boring apartments are numbered by one repeated digit; calls go through
    1, 11, 111, 1111, then 2, 22, ... until ``number`` answers.
    """
    if number < 1:
        raise ValueError("apartment number must be positive")
    text = str(number)
    length = len(text)
    return (int(text[0]) - 1) * 10 + length * (length + 1) // 2


def _ints(stream: TextIO) -> Iterator[int]:
    for line in stream:
        for token in line.split():
            yield int(token)


def _next(reader: Iterator[int]) -> int:
    value = next(reader, None)
    if value is None:
        raise ValueError("unexpected end of input")
    return value


def _take(reader: Iterator[int], count: int) -> list[int]:
    return [_next(reader) for _ in range(count)]


def _run_sort(args: argparse.Namespace, reader: Iterator[int]) -> None:
    values = args.values or list(DEFAULT_SORT_INPUT)
    print("Input list ...")
    print("".join(f"{value}\t" for value in values))
    ordered, passes = exchange_sort(values)
    print("Sorted Element List ...")
    print("".join(f"{value}\t" for value in ordered))
    print(f"Number of passes taken to sort the list:{passes}")


def _run_missing(args: argparse.Namespace, reader: Iterator[int]) -> None:
    values = _take(reader, _next(reader))
    result = smallest_missing(values, args.limit)
    if result is not None:
        print(result)


def _run_subarray(args: argparse.Namespace, reader: Iterator[int]) -> None:
    count = _next(reader)
    target = _next(reader)
    result = subarray_with_sum(_take(reader, count), target)
    if result is None:
        raise ValueError(f"no subarray sums to {target}")
    print(f"{result[0]} {result[1]}")


def _run_activities(args: argparse.Namespace, reader: Iterator[int]) -> None:
    for _ in range(_next(reader)):
        count = _next(reader)
        intervals = [(_next(reader), _next(reader)) for _ in range(count)]
        print(max_activities(intervals))


def _run_search(args: argparse.Namespace, reader: Iterator[int]) -> None:
    print("enter the size ", end="", flush=True)
    values = _take(reader, _next(reader))
    print("enter the number which we want to find ", end="", flush=True)
    result = binary_search(values, _next(reader))
    print(NOT_FOUND_MESSAGE if result is None else result)


def _run_keypresses(args: argparse.Namespace, reader: Iterator[int]) -> None:
    for _ in range(_next(reader)):
        print(boring_apartment_keypresses(_next(reader)))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one of the array algorithms on input read from standard input."""
    parser = argparse.ArgumentParser(prog="algokit-arrays", description=__doc__)
    sub = parser.add_subparsers(dest="command", required=True)

    sort_parser = sub.add_parser("sort", help="exchange sort a list of integers")
    sort_parser.add_argument("values", nargs="*", type=int)
    sort_parser.set_defaults(handler=_run_sort)

    missing_parser = sub.add_parser("missing", help="smallest missing number")
    missing_parser.add_argument("--limit", type=int, default=100)
    missing_parser.set_defaults(handler=_run_missing)

    commands: dict[str, tuple[str, Callable[[argparse.Namespace, Iterator[int]], None]]] = {
        "subarray": ("subarray with a given sum", _run_subarray),
        "activities": ("maximum number of activities", _run_activities),
        "search": ("binary search in a sorted list", _run_search),
        "keypresses": ("boring apartment keypresses", _run_keypresses),
    }
    for name, (help_text, handler) in commands.items():
        sub.add_parser(name, help=help_text).set_defaults(handler=handler)

    args = parser.parse_args(argv)
    try:
        args.handler(args, _ints(sys.stdin))
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0