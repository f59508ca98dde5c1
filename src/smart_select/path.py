from typing import List

from smart_select_tree_sitter import SyntaxNode

from .models import Interval
from .ranges import contains


def resolve_path(root: SyntaxNode, interval: Interval) -> List[SyntaxNode]:
    """Return the chain of nodes containing ``interval``, outermost first.

    A node belongs to the chain when ``full_start <= interval.start`` and
    ``interval.end <= end``; children of a node that fails are never visited.
    """
    path: List[SyntaxNode] = []
    _collect(root, interval, path)
    return path


def _collect(node: SyntaxNode, interval: Interval, path: List[SyntaxNode]) -> None:
    if not contains(Interval(node.full_start, node.end), interval):
        return
    path.append(node)
    for child in node.children:
        _collect(child, interval, path)
