from .ast_walker import ASTWalker
from .node_types import ParseResult, SyntaxNode
from .parser import SourceParser, UnsupportedDialectError, dialect_for

__all__ = [
    "ASTWalker",
    "ParseResult",
    "SourceParser",
    "SyntaxNode",
    "UnsupportedDialectError",
    "dialect_for",
]
