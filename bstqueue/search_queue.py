"""Priority queue that always yields its smallest element, backed by a BST."""

from __future__ import annotations

from typing import Any, TextIO

from bstqueue.tree import BSTree, Comparator, Formatter


class SearchQueue:
    """A queue ordered by a comparator; duplicates are kept only once."""

    def __init__(self, cmp: Comparator, formatter: Formatter) -> None:
        self._tree = BSTree(cmp, formatter)

    def __len__(self) -> int:
        return len(self._tree)

    def is_empty(self) -> bool:
        """Return True when the queue holds no elements."""
        return self._tree.is_empty()

    def push(self, item: Any) -> None:
        """Add an element to the queue."""
        if item is None:
            raise ValueError("cannot push None")
        self._tree.insert(item)

    def pop(self) -> Any:
        """Remove and return the smallest element."""
        if self._tree.is_empty():
            raise IndexError("pop from an empty search queue")
        item = self._tree.find_min()
        self._tree.remove(item)
        return item

    def front(self) -> Any:
        """Return the smallest element, or None when empty."""
        return self._tree.find_min()

    def back(self) -> Any:
        """Return the largest element, or None when empty."""
        return self._tree.find_max()

    def print(self, stream: TextIO) -> int:
        """Write the elements in ascending order and a newline; return characters written."""
        return self._tree.print_inorder(stream)