"""Command-line drivers that sort files or time sorts of random data."""

from __future__ import annotations

import argparse
import random
import sys
import time
from collections.abc import Callable, Sequence
from os import PathLike
from typing import TextIO

from sortbench.insertion import insertion_sort
from sortbench.merge import merge_sort
from sortbench.vectors import format_vector, load_vector, random_vector, write_vector

SortFunction = Callable[[list[int]], list[int]]

PROMPT = (
    "\nHow many random integers would you like to include in vector to sort? "
    "Enter 0 to end the program\nNumber of integers in vector: "
)


def time_sort(sort: SortFunction, values: list[int]) -> tuple[list[int], float]:
    """Sort the values and return the result with the CPU time in milliseconds."""
    start = time.process_time()
    result = sort(values)
    elapsed = (time.process_time() - start) * 1000.0
    return result, elapsed


def sort_file(
    sort: SortFunction,
    label: str,
    input_path: str | PathLike[str],
    output_path: str | PathLike[str],
    out: TextIO,
) -> list[int]:
    """Load integers, print them before and after sorting, and save the result."""
    values = load_vector(input_path)
    out.write(f"\nInitial List:\t{format_vector(values)}\n")
    ordered = sort(values)
    out.write(f"After {label}:\t{format_vector(ordered)}\n")
    write_vector(ordered, output_path)
    return ordered


def _read_count(prompt_input: Callable[[], str]) -> int:
    try:
        line = prompt_input()
    except EOFError:
        return 0
    tokens = line.split()
    if not tokens:
        return 0
    try:
        return int(tokens[0])
    except ValueError:
        return 0


def timing_loop(
    sort: SortFunction,
    label: str,
    prompt_input: Callable[[], str],
    out: TextIO,
    rng: random.Random | None = None,
) -> list[tuple[int, float]]:
    """Repeatedly ask for a size, time sorting that many random integers.

    The loop ends on a count of 0, on input that is not an integer, or at
    end of input. Returns the (count, milliseconds) pairs measured.
    """
    source = rng if rng is not None else random.Random()
    results: list[tuple[int, float]] = []
    while True:
        out.write(PROMPT)
        out.flush()
        count = _read_count(prompt_input)
        if count == 0:
            return results
        values = random_vector(count, source)
        _, elapsed = time_sort(sort, values)
        out.write(
            f"Time elapsed sorting {count} integers using the {label} algorithm: "
            f"{elapsed:g} milliseconds\n"
        )
        results.append((count, elapsed))


def _file_parser(description: str, default_input: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("--input", default=default_input, help="file of integers")
    parser.add_argument("--output", default="insert.out", help="file for the result")
    return parser


def _descending_merge_sort(values: list[int]) -> list[int]:
    return merge_sort(values, descending=True)


def insertsort_main(argv: Sequence[str] | None = None) -> int:
    """Sort the integers in data.txt by insertion and write insert.out."""
    args = _file_parser("Insertion sort a file of integers.", "data.txt").parse_args(argv)
    sort_file(insertion_sort, "insertion sort", args.input, args.output, sys.stdout)
    return 0


def mergesort_main(argv: Sequence[str] | None = None) -> int:
    """Merge sort the integers in input.txt, largest first, and write insert.out."""
    args = _file_parser("Merge sort a file of integers.", "input.txt").parse_args(argv)
    sort_file(_descending_merge_sort, "insertion sort", args.input, args.output, sys.stdout)
    return 0


def insert_time_main(argv: Sequence[str] | None = None) -> int:
    """Interactively time insertion sort on random data."""
    argparse.ArgumentParser(description="Time insertion sort.").parse_args(argv)
    timing_loop(insertion_sort, "insert sort", input, sys.stdout, random.Random())
    return 0


def merge_time_main(argv: Sequence[str] | None = None) -> int:
    """Interactively time merge sort on random data."""
    argparse.ArgumentParser(description="Time merge sort.").parse_args(argv)
    timing_loop(merge_sort, "insert sort", input, sys.stdout, random.Random())
    return 0


if __name__ == "__main__":
    sys.exit(insertsort_main())