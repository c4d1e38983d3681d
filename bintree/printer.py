"""ASCII rendering of binary trees, one text row per tree level."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from bintree.node import Node


def _write(row: list[str], start: int, text: str) -> None:
    end = start + len(text)
    if end > len(row):
        row.extend(" " * (end - len(row)))
    row[start:end] = text


def _layout(node: Node, offset: int, depth: int, rows: list[list[str]]) -> int:
    """Draw ``node`` and its subtree into ``rows``; return the width it takes."""
    label = f"({node.value:03d})"
    width = len(label)
    left = _layout(node.left, offset, depth + 1, rows) if node.left is not None else 0
    right = (
        _layout(node.right, offset + left + width, depth + 1, rows)
        if node.right is not None
        else 0
    )
    _write(rows[depth], offset + left, label)
    if depth:
        above = rows[depth - 1]
        is_left = node.parent is not None and node.parent.left is node
        if is_left:
            _write(above, offset + left + width // 2, "-" * (width + right))
        else:
            _write(above, offset - width // 2, "-" * (left + width))
        _write(above, offset + left + width // 2, ".")
    return left + width + right


def _finish(row: list[str]) -> str:
    text = "".join(row)
    # The first two columns are always kept, as in the fixed-width layout.
    return text[:2] + text[2:].rstrip(" ")


def render(tree: Optional[Node]) -> str:
    """Return the drawing of ``tree``, each level on its own newline-terminated line."""
    if tree is None:
        return ""
    rows: list[list[str]] = [[] for _ in range(tree.height() + 1)]
    _layout(tree, 0, 0, rows)
    return "".join(_finish(row) + "\n" for row in rows)


def print_tree(tree: Optional[Node], file: Optional[TextIO] = None) -> None:
    """Write the drawing of ``tree`` to ``file`` (standard output by default)."""
    (file if file is not None else sys.stdout).write(render(tree))