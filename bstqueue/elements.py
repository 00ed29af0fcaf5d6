"""Element helpers: parsing text into values, comparing, formatting and file loading."""

from __future__ import annotations

import re
from typing import Any, Callable, Iterator, TextIO

BUFFER_SIZE = 512
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_INT_RE = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


class ConversionError(ValueError):
    """Raised when a text cannot be converted into an element."""


def parse_int(text: str) -> int:
    """Convert a decimal text into an int that fits in 32 bits."""
    match = _INT_RE.fullmatch(text)
    if match is None:
        if _INT_RE.match(text) is None:
            raise ConversionError(f"{text}: not a decimal number")
        end = _INT_RE.match(text).end()
        raise ConversionError(
            f"{text}: extra characters at end of input: {text[end:]}"
        )
    value = int(match.group(1))
    if value > INT_MAX:
        raise ConversionError(f"{value} greater than INT_MAX")
    if value < INT_MIN:
        raise ConversionError(f"{value} less than INT_MIN")
    return value


def parse_str(text: str) -> str:
    """Return the text itself."""
    return str(text)


def parse_char(text: str) -> str:
    """Return the first character of the text, or NUL for an empty text."""
    return text[:1] or "\0"


def parse_float(text: str) -> float:
    """Convert a text into a float."""
    if "_" in text or text != text.rstrip():
        raise ConversionError(f"{text}: not a float number")
    try:
        return float(text)
    except ValueError as exc:
        raise ConversionError(f"{text}: not a float number") from exc


def compare_values(a: Any, b: Any) -> int:
    """Three-way comparison; a missing operand compares equal."""
    if a is None or b is None:
        return 0
    return (a > b) - (a < b)


def format_int(value: int) -> str:
    """Format an int in decimal."""
    return f"{value:d}"


def format_char(value: str) -> str:
    """Format a single character."""
    return f"{value}"


def format_float(value: float) -> str:
    """Format a float with six decimals."""
    return f"{value:f}"


def format_str(value: str) -> str:
    """Format a string as itself."""
    return f"{value}"


def read_lines(stream: TextIO) -> Iterator[str]:
    """Yield lines without their line ending, stopping at EOF or an empty line.

    Lines longer than the read buffer are yielded in pieces.
    """
    while True:
        line = stream.readline(BUFFER_SIZE - 1)
        if line.endswith("\n"):
            line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
        if not line:
            return
        yield line


def read_into(
    container: Any,
    path: str,
    convert: Callable[[str], Any],
    insert: Callable[[Any, Any], Any],
    is_empty: Callable[[Any], bool],
) -> int:
    """Fill an empty container with one converted element per line of a file.

    Returns the number of elements handed to ``insert``.
    """
    if container is None or not is_empty(container):
        raise ValueError("the container must exist and be empty")
    count = 0
    with open(path, encoding="utf-8", newline="") as stream:
        for line in read_lines(stream):
            insert(container, convert(line))
            count += 1
    return count