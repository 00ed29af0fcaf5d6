"""Binary search tree ordered by a user-supplied three-way comparator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional, TextIO

Comparator = Callable[[Any, Any], int]
Formatter = Callable[[Any], str]


@dataclass(slots=True)
class _Node:
    info: Any
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


class BSTree:
    """A binary search tree of arbitrary elements without duplicates.

    ``cmp(a, b)`` returns a negative number, zero or a positive number when
    ``a`` is less than, equal to or greater than ``b``. ``formatter(item)``
    returns the text used when the tree is printed.
    """

    def __init__(self, cmp: Comparator, formatter: Formatter) -> None:
        if not callable(cmp) or not callable(formatter):
            raise TypeError("cmp and formatter must both be callable")
        self._cmp = cmp
        self._format = formatter
        self._root: Optional[_Node] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return self.inorder()

    def __contains__(self, item: Any) -> bool:
        return self._find(item) is not None

    def is_empty(self) -> bool:
        """Return True when the tree holds no elements."""
        return self._root is None

    def depth(self) -> int:
        """Return the number of levels in the tree (0 when empty)."""
        levels = 0
        level = [self._root] if self._root is not None else []
        while level:
            levels += 1
            level = [
                child
                for node in level
                for child in (node.left, node.right)
                if child is not None
            ]
        return levels

    def preorder(self) -> Iterator[Any]:
        """Yield the elements in pre-order (node, left, right)."""
        stack = [self._root]
        while stack:
            node = stack.pop()
            if node is None:
                continue
            yield node.info
            stack.append(node.right)
            stack.append(node.left)

    def inorder(self) -> Iterator[Any]:
        """Yield the elements in ascending order."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.info
            node = node.right

    def postorder(self) -> Iterator[Any]:
        """Yield the elements in post-order (left, right, node)."""
        collected: list[Any] = []
        stack = [self._root]
        while stack:
            node = stack.pop()
            if node is None:
                continue
            collected.append(node.info)
            stack.append(node.left)
            stack.append(node.right)
        yield from reversed(collected)

    def print_preorder(self, stream: TextIO) -> int:
        """Write the elements in pre-order and a newline; return characters written."""
        return self._print(stream, self.preorder())

    def print_inorder(self, stream: TextIO) -> int:
        """Write the elements in order and a newline; return characters written."""
        return self._print(stream, self.inorder())

    def print_postorder(self, stream: TextIO) -> int:
        """Write the elements in post-order and a newline; return characters written."""
        return self._print(stream, self.postorder())

    def find_min(self) -> Any:
        """Return the smallest element, or None when the tree is empty."""
        node = self._root
        if node is None:
            return None
        while node.left is not None:
            node = node.left
        return node.info

    def find_max(self) -> Any:
        """Return the largest element, or None when the tree is empty."""
        node = self._root
        if node is None:
            return None
        while node.right is not None:
            node = node.right
        return node.info

    def insert(self, item: Any) -> None:
        """Insert ``item`` as a leaf; an element already present is left alone."""
        if item is None:
            raise ValueError("cannot insert None into the tree")
        if self._root is None:
            self._root = _Node(item)
            self._size += 1
            return
        node = self._root
        while True:
            order = self._cmp(item, node.info)
            if order == 0:
                return
            if order < 0:
                if node.left is None:
                    node.left = _Node(item)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = _Node(item)
                    break
                node = node.right
        self._size += 1

    def remove(self, item: Any) -> None:
        """Remove the element equal to ``item``; a missing element is ignored."""
        parent: Optional[_Node] = None
        node = self._root
        while node is not None:
            order = self._cmp(item, node.info)
            if order == 0:
                break
            parent = node
            node = node.left if order < 0 else node.right
        if node is None:
            return

        if node.left is not None and node.right is not None:
            succ_parent = node
            succ = node.right
            while succ.left is not None:
                succ_parent = succ
                succ = succ.left
            node.info = succ.info
            if succ_parent is node:
                succ_parent.right = succ.right
            else:
                succ_parent.left = succ.right
        else:
            child = node.left if node.left is not None else node.right
            if parent is None:
                self._root = child
            elif parent.left is node:
                parent.left = child
            else:
                parent.right = child
        self._size -= 1

    def _find(self, item: Any) -> Optional[_Node]:
        node = self._root
        while node is not None:
            order = self._cmp(item, node.info)
            if order == 0:
                return node
            node = node.left if order < 0 else node.right
        return None

    def _print(self, stream: TextIO, items: Iterable[Any]) -> int:
        count = 0
        for item in items:
            text = self._format(item)
            stream.write(text)
            count += len(text)
        stream.write("\n")
        return count + 1