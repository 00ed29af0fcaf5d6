"""Graph vertices: parsing from descriptions, ordering and printing."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class Label(IntEnum):
    """Visit state of a vertex."""

    WHITE = 0
    BLACK = 1
    ERROR_VERTEX = 2


class VertexFormatError(ValueError):
    """Raised when a vertex description or field value is invalid."""


@dataclass
class Vertex:
    """A vertex with a non-negative id, a tag and a visit state."""

    id: int = 0
    tag: str = ""
    state: Label = Label.WHITE

    def __post_init__(self) -> None:
        if self.id < 0:
            raise VertexFormatError(f"vertex id must be non-negative: {self.id}")
        try:
            self.state = Label(self.state)
        except ValueError as exc:
            raise VertexFormatError(f"invalid vertex state: {self.state}") from exc

    def __str__(self) -> str:
        return format_vertex(self)


def parse_vertex(descr: str) -> Vertex:
    """Build a vertex from whitespace separated ``key:value`` pairs.

    Keys may be ``id``, ``tag`` or ``state`` and appear in any order.
    """
    fields: dict[str, Any] = {}
    for pair in descr.split():
        key, sep, value = pair.partition(":")
        if not sep:
            raise VertexFormatError(f"missing ':' in pair {pair!r}")
        if key == "id":
            try:
                fields["id"] = int(value)
            except ValueError as exc:
                raise VertexFormatError(f"invalid id {value!r}") from exc
        elif key == "tag":
            fields["tag"] = value
        elif key == "state":
            try:
                fields["state"] = Label(int(value))
            except ValueError as exc:
                raise VertexFormatError(f"invalid state {value!r}") from exc
        else:
            raise VertexFormatError(f"unknown key {key!r}")
    return Vertex(**fields)


def vertex_cmp(a: Vertex, b: Vertex) -> int:
    """Compare by id, then by tag; return -1, 0 or 1."""
    key_a = (a.id, a.tag)
    key_b = (b.id, b.tag)
    return (key_a > key_b) - (key_a < key_b)


def format_vertex(vertex: Vertex) -> str:
    """Return the ``[id, tag, state]`` representation of a vertex."""
    return f"[{vertex.id}, {vertex.tag}, {int(vertex.state)}]"