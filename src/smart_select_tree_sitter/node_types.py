from dataclasses import dataclass, field
from typing import Iterator, Optional, Tuple


@dataclass(frozen=True)
class SyntaxNode:
    """Immutable syntax node detached from the tree-sitter tree it came from.

    ``full_start`` includes the leading trivia (whitespace, comments and
    anonymous tokens such as punctuation) between this node and whatever
    precedes it. ``start`` is the first significant character and ``end``
    excludes trailing trivia.
    """
    kind: str
    full_start: int
    start: int
    end: int
    children: Tuple['SyntaxNode', ...] = field(default=())

    def __post_init__(self):
        if not (self.full_start <= self.start <= self.end):
            raise ValueError(
                f"Invalid node span for {self.kind}: "
                f"full_start={self.full_start} start={self.start} end={self.end}"
            )

    @property
    def first_child(self) -> Optional['SyntaxNode']:
        return self.children[0] if self.children else None

    def text(self, source: str) -> str:
        """Significant text of the node (leading trivia excluded)."""
        return source[self.start:self.end]

    def full_text(self, source: str) -> str:
        return source[self.full_start:self.end]

    def __iter__(self) -> Iterator['SyntaxNode']:
        return iter(self.children)


@dataclass
class ParseResult:
    """Result of a tree-sitter parse operation"""
    root: SyntaxNode
    source: str
    dialect: str
    errors: list[str] = field(default_factory=list)
