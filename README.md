# bintree

A small binary tree library. Each node holds an integer value and keeps links
to its parent and its two children. Nodes can report their metrics, walk the
tree in the usual orders and draw it as ASCII art.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Building a tree

```python
from bintree.node import Node
from bintree.printer import print_tree, render

root = Node(98, None)
left = root.insert_left(12)
right = root.insert_right(402)
left.insert_right(54)
right.insert_right(128)

print_tree(root, None)
```

`Node(value, parent)` records the parent but does not attach the new node as a
child; set `parent.left` or `parent.right` yourself, or use `insert_left` and
`insert_right`. Those create a new child under a node and return it. If the
node already has a child on that side, the old child moves down below the new
node, on the same side.

## What a node can tell you

| Method          | Meaning                                                              |
|-----------------|----------------------------------------------------------------------|
| `is_leaf()`     | the node has no children                                             |
| `is_root()`     | the node has no parent                                               |
| `height()`      | number of edges on the longest path down to a leaf                   |
| `depth()`       | number of edges up to the root                                       |
| `size()`        | number of nodes in the subtree                                       |
| `leaves()`      | number of leaves in the subtree                                      |
| `nodes()`       | number of nodes in the subtree with at least one child               |
| `balance()`     | left side height minus right side height, counting the edge to each child |
| `is_full()`     | every node in the subtree has either zero or two children            |
| `is_perfect()`  | every inner node has two children and all leaves share one depth     |
| `sibling()`     | the other child of this node's parent, or `None`                     |
| `uncle()`       | the sibling of this node's parent, or `None`                         |

`preorder()`, `inorder()` and `postorder()` are generators that yield the
values of the subtree in their order:

```python
list(root.inorder())
```

`delete()` detaches the node from its parent and breaks every link inside its
subtree.

## Drawing

`render(tree)` in `bintree.printer` returns the drawing as a string, one
newline-terminated line per level, or an empty string for `None`.
`print_tree(tree, file)` writes it to a file object, or to standard output when
`file` is `None`. Each value is shown zero-padded to three digits in brackets,
and connecting lines sit on the row above:

```
       .-------(098)-------.
  .--(012)--.         .--(402)--.
(006)     (016)     (256)     (512)
```

## Demonstrations

The `bintree-demo` command runs one of the numbered demonstrations, from 0 to
18. Each one builds a tree, prints it and shows one operation on it:

```
bintree-demo 0
bintree-demo 14
```

`run_demo(number, out)` in `bintree.demo` does the same from Python and writes
to the given file object, or to standard output when `out` is `None`. A number
outside 0 to 18 raises `ValueError`.