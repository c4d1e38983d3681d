"""Binary trees with parent links, tree metrics, traversals, ASCII rendering and demonstrations."""

__version__ = "0.1.0"
__all__ = ["node", "printer", "demo"]