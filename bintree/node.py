"""Binary tree nodes and the measurements and traversals defined on them."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Optional


class Node:
    """A binary tree node holding an integer value and links to its relatives.

    Creating a node records its parent but does not attach it as a child;
    the caller decides which side it goes on, or uses ``insert_left`` and
    ``insert_right``.
    """

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Optional[Node] = None) -> None:
        self.value = value
        self.parent = parent
        self.left: Optional[Node] = None
        self.right: Optional[Node] = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; any existing left child moves below it."""
        new_node = Node(value, self)
        if self.left is not None:
            new_node.left = self.left
            self.left.parent = new_node
        self.left = new_node
        return new_node

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; any existing right child moves below it."""
        new_node = Node(value, self)
        if self.right is not None:
            new_node.right = self.right
            self.right.parent = new_node
        self.right = new_node
        return new_node

    def _children(self) -> Iterator[Node]:
        if self.left is not None:
            yield self.left
        if self.right is not None:
            yield self.right

    def _postorder_nodes(self) -> Iterator[Node]:
        for child in self._children():
            yield from child._postorder_nodes()
        yield self

    def delete(self) -> None:
        """Remove this subtree: unlink it from its parent and break every link inside it."""
        parent = self.parent
        if parent is not None:
            if parent.left is self:
                parent.left = None
            if parent.right is self:
                parent.right = None
        for node in list(self._postorder_nodes()):
            node.left = None
            node.right = None
            node.parent = None

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """Return True if the node has no parent."""
        return self.parent is None

    def preorder(self) -> Iterator[int]:
        """Yield values in pre-order: node, left subtree, right subtree."""
        yield self.value
        if self.left is not None:
            yield from self.left.preorder()
        if self.right is not None:
            yield from self.right.preorder()

    def inorder(self) -> Iterator[int]:
        """Yield values in in-order: left subtree, node, right subtree."""
        if self.left is not None:
            yield from self.left.inorder()
        yield self.value
        if self.right is not None:
            yield from self.right.inorder()

    def postorder(self) -> Iterator[int]:
        """Yield values in post-order: left subtree, right subtree, node."""
        for node in self._postorder_nodes():
            yield node.value

    def height(self) -> int:
        """Number of edges on the longest path from this node down to a leaf."""
        return max((1 + child.height() for child in self._children()), default=0)

    def depth(self) -> int:
        """Number of edges from this node up to the root."""
        count = 0
        node = self.parent
        while node is not None:
            count += 1
            node = node.parent
        return count

    def size(self) -> int:
        """Number of nodes in this subtree."""
        return 1 + sum(child.size() for child in self._children())

    def leaves(self) -> int:
        """Number of leaves in this subtree."""
        if self.is_leaf():
            return 1
        return sum(child.leaves() for child in self._children())

    def nodes(self) -> int:
        """Number of nodes in this subtree that have at least one child."""
        if self.is_leaf():
            return 0
        return 1 + sum(child.nodes() for child in self._children())

    def balance(self) -> int:
        """Height of the left side minus height of the right side, counting the edge to each child."""
        left = self.left.height() + 1 if self.left is not None else 0
        right = self.right.height() + 1 if self.right is not None else 0
        return left - right

    def is_full(self) -> bool:
        """Return True if every node in this subtree has zero or two children."""
        if self.is_leaf():
            return True
        if self.left is not None and self.right is not None:
            return self.left.is_full() and self.right.is_full()
        return False

    def is_perfect(self) -> bool:
        """Return True if every inner node has two children and all leaves share one depth."""
        target = 0
        node = self
        while node.left is not None:
            node = node.left
            target += 1
        return self._perfect_below(target, 0)

    def _perfect_below(self, target: int, current: int) -> bool:
        if self.is_leaf():
            return current == target
        if self.left is None or self.right is None:
            return False
        return self.left._perfect_below(target, current + 1) and self.right._perfect_below(
            target, current + 1
        )

    def sibling(self) -> Optional[Node]:
        """Return the other child of this node's parent, or None."""
        parent = self.parent
        if parent is None:
            return None
        if parent.left is self:
            return parent.right
        if parent.right is self:
            return parent.left
        return None

    def uncle(self) -> Optional[Node]:
        """Return the sibling of this node's parent, or None."""
        parent = self.parent
        if parent is None or parent.parent is None:
            return None
        return parent.sibling()