"""Creating, reading and writing lists of integers."""

from __future__ import annotations

import random
from collections.abc import Iterable
from os import PathLike

MAX_RANDOM = 10_000


def random_vector(count: int, rng: random.Random | None = None) -> list[int]:
    """Return ``count`` random integers from 0 to 10,000 inclusive.

    A count of zero or less gives an empty list.
    """
    source = rng if rng is not None else random.Random()
    return [source.randint(0, MAX_RANDOM) for _ in range(max(count, 0))]


def load_vector(path: str | PathLike[str]) -> list[int]:
    """Read whitespace-separated integers from a file.

    Reading stops at the first token that is not an integer. A file that
    cannot be opened gives an empty list.
    """
    try:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    except OSError:
        return []
    values: list[int] = []
    for token in text.split():
        try:
            values.append(int(token))
        except ValueError:
            break
    return values


def format_vector(values: Iterable[int]) -> str:
    """Render each value followed by a single space."""
    return "".join(f"{value} " for value in values)


def write_vector(values: Iterable[int], path: str | PathLike[str]) -> None:
    """Write the values to a file, each followed by a single space."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(format_vector(values))