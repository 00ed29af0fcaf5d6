"""Command that builds a vertex tree from a file and times searches on it."""

from __future__ import annotations

import io
import sys
import time
from functools import cmp_to_key
from typing import Callable, Iterable, Optional, Sequence, TextIO, TypeVar

from bstqueue.tree import BSTree
from bstqueue.vertex import Vertex, VertexFormatError, format_vertex, parse_vertex, vertex_cmp

T = TypeVar("T")

_MODES = ("normal", "sorted")


def load_data(stream: Iterable[str]) -> list[Vertex]:
    """Parse one vertex description per line."""
    return [parse_vertex(line) for line in stream]


def build_balanced_tree(data: Sequence[Vertex]) -> BSTree:
    """Build a balanced tree from sorted vertices by inserting middles first."""
    if not data:
        raise ValueError("no data to build a tree from")
    tree = BSTree(vertex_cmp, format_vertex)
    ranges = [(0, len(data) - 1)]
    while ranges:
        first, last = ranges.pop()
        if first > last:
            continue
        middle = (first + last) // 2
        tree.insert(data[middle])
        ranges.append((middle + 1, last))
        ranges.append((first, middle - 1))
    return tree


def build_unbalanced_tree(data: Sequence[Vertex]) -> BSTree:
    """Build a tree by inserting vertices in the given order."""
    if not data:
        raise ValueError("no data to build a tree from")
    tree = BSTree(vertex_cmp, format_vertex)
    for vertex in data:
        tree.insert(vertex)
    return tree


def _timed(action: Callable[[], T]) -> tuple[T, float]:
    start = time.process_time()
    result = action()
    return result, time.process_time() - start


def _timing(seconds: float) -> str:
    return f"{round(seconds * 1_000_000)} ticks ({seconds:f} seconds)"


def _report_shape(out: TextIO, tree: BSTree) -> None:
    out.write(f"Tree size: {len(tree)}\nTree depth: {tree.depth()}\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command; return the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    out = sys.stdout
    if len(args) != 3:
        out.write("Usage: bstqueue vertex_file vertex_desc mode[normal|sorted]\n")
        return 1
    path, desc, mode = args
    if mode not in _MODES:
        out.write(f"Incorrect mode: {mode}\n")
        return 1

    try:
        with open(path, encoding="utf-8") as stream:
            content = stream.read()
    except OSError:
        return 1

    try:
        target = parse_vertex(desc)
    except VertexFormatError:
        out.write(f"Error when initialising vertex with description: {desc}\n")
        return 1

    lines = content.splitlines(keepends=True)
    out.write(f"No. lines: {len(lines)}\n")
    if not lines:
        return 1
    try:
        data = load_data(io.StringIO(content))
    except VertexFormatError:
        return 1

    if mode == "normal":
        out.write("Mode: normal\n")
        tree, elapsed = _timed(lambda: build_unbalanced_tree(data))
    else:
        data.sort(key=cmp_to_key(vertex_cmp))
        out.write("Mode: sorted\n")
        tree, elapsed = _timed(lambda: build_balanced_tree(data))

    out.write(f"Tree building time: {_timing(elapsed)}\n")
    _report_shape(out, tree)

    out.write("Min element in tree: ")
    smallest, elapsed = _timed(tree.find_min)
    out.write(f"{format_vertex(smallest)} - {_timing(elapsed)}\n")

    out.write("Max element in tree: ")
    largest, elapsed = _timed(tree.find_max)
    out.write(f"{format_vertex(largest)} - {_timing(elapsed)}\n")

    found, elapsed = _timed(lambda: target in tree)
    if found:
        out.write(f"Element found - {_timing(elapsed)}\n")
        out.write("Removing element in tree: ")
        _, elapsed = _timed(lambda: tree.remove(target))
        out.write(f"OK - {_timing(elapsed)}\n")
        _report_shape(out, tree)
    else:
        out.write(f"Element NOT found - {_timing(elapsed)}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())