"""Small command-line readers for integer vectors and square matrices."""

from __future__ import annotations

import sys
from itertools import islice
from typing import Callable, Iterable, Iterator, Sequence, TextIO, TypeVar

T = TypeVar("T")

_GREETING = "Hello World!"


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_count(tokens: Iterator[str]) -> int:
    token = next(tokens, None)
    if token is None:
        raise ValueError("missing element count")
    count = int(token)
    if count < 0:
        raise ValueError(f"negative element count: {count}")
    return count


def _read_ints(tokens: Iterator[str], count: int) -> list[int]:
    words = list(islice(tokens, count))
    if len(words) < count:
        raise ValueError(f"expected {count} values, found {len(words)}")
    return [int(word) for word in words]


def read_vector(stream: TextIO) -> list[int]:
    """Read a count n followed by n integers."""
    tokens = _tokens(stream)
    return _read_ints(tokens, _read_count(tokens))


def format_vector(values: Iterable[int]) -> str:
    """Render a vector in the 'v = [...]' display form."""
    body = "".join(f"{value} " for value in values)
    return f"v = [{body}\b]"


def read_matrix(stream: TextIO) -> list[list[int]]:
    """Read a size n followed by the n*n entries of a square matrix, row by row."""
    tokens = _tokens(stream)
    n = _read_count(tokens)
    values = iter(_read_ints(tokens, n * n))
    return [list(islice(values, n)) for _ in range(n)]


def format_matrix(rows: Iterable[Sequence[int]]) -> str:
    """Render a matrix in the multi-line 'A = [ ... ]' display form."""
    lines = ["A = ["]
    lines.extend("".join(f"{value} " for value in row) + "\b" for row in rows)
    lines.append("]")
    return "\n".join(lines)


def _emit(text: str) -> int:
    sys.stdout.write(f"{text}\n")
    return 0


def hello_main(argv: Sequence[str] | None = None) -> int:
    """Print the greeting; arguments are ignored."""
    return _emit(_GREETING)


def _run_reader(
    argv: Sequence[str] | None,
    prog: str,
    reader: Callable[[TextIO], T],
    formatter: Callable[[T], str],
) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(f"usage: {prog} FILE", file=sys.stderr)
        return 2
    try:
        with open(args[0], encoding="utf-8") as handle:
            data = reader(handle)
    except (OSError, ValueError) as exc:
        print(f"{prog}: {exc}", file=sys.stderr)
        return 1
    return _emit(formatter(data))


def vector_main(argv: Sequence[str] | None = None) -> int:
    """Read a vector from the file named in argv and print it."""
    return _run_reader(argv, "vector", read_vector, format_vector)


def matrix_main(argv: Sequence[str] | None = None) -> int:
    """Read a square matrix from the file named in argv and print it."""
    return _run_reader(argv, "matrix", read_matrix, format_matrix)