# bstqueue

This package provides the following:

- an unbalanced binary search tree that orders its elements with a comparison function you supply;
- a search queue built on top of that tree;
- a small vertex type;
- helpers for turning lines of text into values;
- a command that shows how the shape of a tree depends on the order its elements arrive in.

## Installation

```
pip install .
```

To run the tests with pytest:

```
pip install ".[test]"
pytest
```

## The tree

You create a `bstqueue.tree.BSTree` with two functions:

- a three-way comparison function, which returns a negative number, zero or a positive number;
- a function that turns an element into the text used for printing.

```python
import sys

from bstqueue.elements import compare_values, format_int
from bstqueue.tree import BSTree

tree = BSTree(compare_values, format_int)
for value in (5, 3, 8, 1, 4):
    tree.insert(value)

len(tree)            # 5
tree.depth()         # 3
3 in tree            # True
tree.find_min()      # 1
tree.find_max()      # 8
list(tree)           # [1, 3, 4, 5, 8]  (in order)
list(tree.preorder())

tree.print_inorder(sys.stdout)   # prints the elements, then a newline

tree.remove(3)
tree.is_empty()      # False
```

Adding and removing elements:

- Inserting an element that is already present leaves the tree unchanged.
- Inserting `None` raises `ValueError`.
- Removing an element that is absent is not an error.

Finding and traversing:

- `find_min()` and `find_max()` return `None` on an empty tree.
- `inorder()`, `preorder()` and `postorder()` yield the elements in the matching traversal.
- The `print_inorder`, `print_preorder` and `print_postorder` methods write the elements to a text stream, followed by a newline. They return the number of characters written, newline included.

## The search queue

`bstqueue.search_queue.SearchQueue` keeps its elements in a tree:

- `front()` returns the smallest element and `back()` the largest. Both return `None` when the queue is empty.
- `pop()` removes and returns the smallest element. It raises `IndexError` when the queue is empty.
- Each element is kept only once, even if it is pushed more than once.
- Pushing `None` raises `ValueError`.
- `print(stream)` writes the elements in ascending order.

```python
from bstqueue.elements import compare_values, format_str
from bstqueue.search_queue import SearchQueue

queue = SearchQueue(compare_values, format_str)
for word in ("pear", "apple", "fig"):
    queue.push(word)

queue.front()   # 'apple'
queue.back()    # 'pear'
queue.pop()     # 'apple'
len(queue)      # 2
```

## Vertices

`bstqueue.vertex.Vertex` has three fields:

- a non-negative `id`;
- a `tag`;
- a `state`, which is a `Label`: `WHITE`, `BLACK` or `ERROR_VERTEX`.

`parse_vertex` builds a vertex from a description made of whitespace-separated `key:value` pairs. The key is `id`, `tag` or `state`, and the pairs may come in any order:

```python
from bstqueue.vertex import parse_vertex, format_vertex

v = parse_vertex("id:1 tag:Toledo state:1")
print(format_vertex(v))   # [1, Toledo, 1]
```

Malformed descriptions, negative ids and unknown states raise `VertexFormatError`.

`vertex_cmp` orders vertices by id and then by tag. You can pass it straight to a `BSTree` together with `format_vertex`.

## Reading values from text

`bstqueue.elements` contains the following:

- `parse_int`, `parse_float`, `parse_char` and `parse_str`:
  - `parse_int` accepts only values that fit in 32 bits.
  - Invalid input raises `ConversionError`.
- The matching formatting functions: `format_int`, `format_float` (six decimals), `format_char` and `format_str`.
- `compare_values`, a three-way comparison in which a `None` operand compares equal.
- `read_lines`, which yields the lines of a stream without their line endings. It stops at the end of the stream or at the first empty line.
- `read_into`, which fills an empty container from a file with one element per line. It returns how many elements were inserted.

## The `bstqueue` command

```
bstqueue VERTEX_FILE VERTEX_DESC MODE
```

The arguments are:

- `VERTEX_FILE`: a file with one vertex description per line.
- `VERTEX_DESC`: the description of a vertex to look for.
- `MODE`: either `normal` or `sorted`.
  - `normal` inserts the vertices in file order, which can give a deep, lopsided tree.
  - `sorted` sorts the vertices first, then inserts the middle element of each range before its halves. This gives a balanced tree.

The command prints the following:

- the number of lines;
- the processor time taken to build the tree;
- the tree's size and depth;
- its smallest and largest vertex, each with the time taken to find it;
- whether the described vertex is present.

If the vertex is present, the command removes it and shows the new size and depth.

The exit status is 1 in any of these cases:

- the arguments are wrong;
- the file cannot be read or is empty;
- a description is malformed.

```
bstqueue cities.txt "id:1 tag:Toledo state:1" sorted
```

## What the package does not do

- The tree does not rebalance itself.
- Nothing is stored on disk: trees and queues live only in memory.
- The command reads vertices only. It does not load ints, floats or strings.