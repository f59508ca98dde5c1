from typing import Iterator, List, Optional

from .node_types import SyntaxNode


class ASTWalker:
    """Utilities for traversing and searching converted syntax trees"""

    @staticmethod
    def iter_descendants(node: SyntaxNode) -> Iterator[SyntaxNode]:
        """Yield every descendant depth-first, pre-order, excluding the node itself"""
        for child in node.children:
            yield child
            yield from ASTWalker.iter_descendants(child)

    @staticmethod
    def find_first_descendant(node: SyntaxNode, type_name: str) -> Optional[SyntaxNode]:
        """Find the first descendant of a specific kind in depth-first order"""
        for descendant in ASTWalker.iter_descendants(node):
            if descendant.kind == type_name:
                return descendant
        return None

    @staticmethod
    def dump(node: SyntaxNode, source: str, indent: int = 0) -> List[str]:
        """Render the tree one node per line, for debugging"""
        text = node.text(source).replace('\n', '\\n')[:50]
        lines = [f"{'  ' * indent}{node.kind} [{node.full_start}:{node.start}-{node.end}] {text!r}"]
        for child in node.children:
            lines.extend(ASTWalker.dump(child, source, indent + 1))
        return lines
