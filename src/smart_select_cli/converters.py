from smart_select.models import Selection
from smart_select_tree_sitter import SyntaxNode

from .models import PathEntry, SelectionReport


def selection_to_report(selection: Selection, source: str) -> SelectionReport:
    """Convert an internal selection to an external Pydantic report"""
    return SelectionReport(
        anchor=selection.anchor,
        active=selection.active,
        start=selection.start,
        end=selection.end,
        text=source[selection.start:selection.end],
    )


def node_to_path_entry(depth: int, node: SyntaxNode, source: str) -> PathEntry:
    return PathEntry(
        depth=depth,
        kind=node.kind,
        full_start=node.full_start,
        end=node.end,
        text=node.text(source)[:60],
    )
