"""Sample programs that build small trees and report on them."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from typing import Optional, TextIO

from bintree.node import Node
from bintree.printer import print_tree

_NONE = "(nil)"


def _sample_tree() -> Node:
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    root.left.insert_right(54)
    root.insert_right(128)
    return root


def _seven(inner_right: int) -> Node:
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    root.left.left = Node(6, root.left)
    root.left.right = Node(inner_right, root.left)
    root.right.left = Node(256, root.right)
    root.right.right = Node(512, root.right)
    return root


def _family_tree() -> Node:
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(128, root)
    root.left.right = Node(54, root.left)
    root.right.right = Node(402, root.right)
    root.left.left = Node(10, root.left)
    root.right.left = Node(110, root.right)
    root.right.right.left = Node(200, root.right.right)
    root.right.right.right = Node(512, root.right.right)
    return root


def _show(node: Optional[Node]) -> str:
    return str(node.value) if node is not None else _NONE


def _demo_create(out: TextIO) -> None:
    print_tree(_seven(16), out)


def _demo_insert_left(out: TextIO) -> None:
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    print_tree(root, out)
    print(file=out)
    root.right.insert_left(128)
    root.insert_left(54)
    print_tree(root, out)


def _demo_insert_right(out: TextIO) -> None:
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    print_tree(root, out)
    print(file=out)
    root.left.insert_right(54)
    root.insert_right(128)
    print_tree(root, out)


def _demo_delete(out: TextIO) -> None:
    root = _sample_tree()
    print_tree(root, out)
    root.delete()


def _report(
    out: TextIO,
    root: Node,
    template: str,
    nodes: list[Node],
    measure: Callable[[Node], object],
) -> None:
    print_tree(root, out)
    for node in nodes:
        print(template.format(value=node.value, result=measure(node)), file=out)


def _demo_is_leaf(out: TextIO) -> None:
    root = _sample_tree()
    _report(out, root, "Is {value} a leaf: {result}",
            [root, root.right, root.right.right], lambda n: int(n.is_leaf()))


def _demo_is_root(out: TextIO) -> None:
    root = _sample_tree()
    _report(out, root, "Is {value} a root: {result}",
            [root, root.right, root.right.right], lambda n: int(n.is_root()))


def _traversal(order: str) -> Callable[[TextIO], None]:
    def run(out: TextIO) -> None:
        root = _seven(56)
        print_tree(root, out)
        for value in getattr(root, order)():
            print(value, file=out)

    return run


def _measure(template: str, method: str) -> Callable[[TextIO], None]:
    def run(out: TextIO) -> None:
        root = _sample_tree()
        _report(out, root, template, [root, root.right, root.left.right],
                lambda n: getattr(n, method)())

    return run


def _demo_balance(out: TextIO) -> None:
    root = _sample_tree()
    root.insert_left(45)
    root.left.insert_right(50)
    root.left.left.insert_left(10)
    root.left.left.left.insert_left(8)
    _report(out, root, "Balance of {value}: {result:+d}",
            [root, root.right, root.left.left.right], Node.balance)


def _demo_is_full(out: TextIO) -> None:
    root = _sample_tree()
    root.left.left = Node(10, root.left)
    _report(out, root, "Is {value} full: {result}",
            [root, root.left, root.right], lambda n: int(n.is_full()))


def _demo_is_perfect(out: TextIO) -> None:
    root = _sample_tree()
    root.left.left = Node(10, root.left)
    root.right.left = Node(10, root.right)

    def check(end: str) -> None:
        print_tree(root, out)
        print(f"Perfect: {int(root.is_perfect())}", file=out, end=end)

    check("\n\n")
    root.right.right.left = Node(10, root.right.right)
    check("\n\n")
    root.right.right.right = Node(10, root.right.right)
    check("\n")


def _demo_sibling(out: TextIO) -> None:
    root = _family_tree()
    print_tree(root, out)
    for node in (root.left, root.right.left, root.left.right, root):
        print(f"Sibling of {node.value}: {_show(node.sibling())}", file=out)


def _demo_uncle(out: TextIO) -> None:
    root = _family_tree()
    print_tree(root, out)
    for node in (root.right.left, root.left.right, root.left):
        print(f"Uncle of {node.value}: {_show(node.uncle())}", file=out)


_DEMOS: dict[int, Callable[[TextIO], None]] = {
    0: _demo_create,
    1: _demo_insert_left,
    2: _demo_insert_right,
    3: _demo_delete,
    4: _demo_is_leaf,
    5: _demo_is_root,
    6: _traversal("preorder"),
    7: _traversal("inorder"),
    8: _traversal("postorder"),
    9: _measure("Height from {value}: {result}", "height"),
    10: _measure("Depth of {value}: {result}", "depth"),
    11: _measure("Size of {value}: {result}", "size"),
    12: _measure("Leaves in {value}: {result}", "leaves"),
    13: _measure("Nodes in {value}: {result}", "nodes"),
    14: _demo_balance,
    15: _demo_is_full,
    16: _demo_is_perfect,
    17: _demo_sibling,
    18: _demo_uncle,
}


def run_demo(number: int, out: Optional[TextIO] = None) -> None:
    """Run sample program ``number`` (0 to 18), writing its output to ``out``."""
    try:
        demo = _DEMOS[number]
    except KeyError:
        raise ValueError(f"no demo numbered {number}; choose 0 to {max(_DEMOS)}") from None
    demo(out if out is not None else sys.stdout)


def main(argv: Optional[list[str]] = None) -> int:
    """Command-line entry point: run the numbered sample program."""
    parser = argparse.ArgumentParser(description="Run a binary tree sample program.")
    parser.add_argument("number", type=int, choices=sorted(_DEMOS),
                        help="which sample program to run")
    args = parser.parse_args(argv)
    run_demo(args.number)
    return 0


if __name__ == "__main__":
    sys.exit(main())