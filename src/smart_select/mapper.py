"""Conversion of syntax nodes into candidate selection intervals."""

from typing import Callable, Mapping, Optional, Tuple, Union

from smart_select_tree_sitter import SyntaxNode

from .models import Interval

Delta = Tuple[int, int]
Adjustment = Union[Delta, Callable[[SyntaxNode], Delta]]
AdjustmentTable = Mapping[str, Adjustment]


def trim_delimiters(opener: int, closer: int) -> Callable[[SyntaxNode], Delta]:
    """Adjustment dropping ``opener`` characters after the leading trivia and ``closer`` at the end"""

    def delta(node: SyntaxNode) -> Delta:
        return node.start - node.full_start + opener, -closer

    return delta


# Trims the backticks and `${ }` markers of template literals in the
# tree-sitter JavaScript/TypeScript grammars so only literal content remains.
TEMPLATE_LITERAL_ADJUSTMENTS: AdjustmentTable = {
    "template_string": trim_delimiters(1, 1),
    "template_substitution": trim_delimiters(2, 1),
}


def node_to_interval(node: SyntaxNode, adjustments: Optional[AdjustmentTable] = None) -> Interval:
    start_delta, end_delta = 0, 0
    if adjustments and node.kind in adjustments:
        adjustment = adjustments[node.kind]
        start_delta, end_delta = adjustment(node) if callable(adjustment) else adjustment

    start = node.full_start + start_delta
    end = node.end + end_delta
    if end < start:
        start = end = node.full_start
    return Interval(start, end)
