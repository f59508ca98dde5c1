"""Fan-out of a selection into the attribute names of its enclosing JSX element."""

import logging
from typing import Iterable, List, Optional

from smart_select_tree_sitter import ASTWalker, SyntaxNode

from .config import DEFAULT_MAX_STEPS
from .growth import GrowthEngine
from .mapper import AdjustmentTable, node_to_interval
from .models import Interval
from .ranges import collapse_whitespace

logger = logging.getLogger(__name__)

MARKUP_ELEMENT_KINDS = frozenset({"jsx_element", "jsx_self_closing_element", "jsx_opening_element"})
ATTRIBUTE_LIST_KIND = "jsx_attributes"
ATTRIBUTE_KIND = "jsx_attribute"


def is_markup_element(node: SyntaxNode) -> bool:
    return node.kind in MARKUP_ELEMENT_KINDS


def attribute_name_intervals(
    element: SyntaxNode, text: str, adjustments: Optional[AdjustmentTable] = None
) -> List[Interval]:
    """One interval per attribute name of ``element``, in source order.

    Uses the first attribute list found among the element's descendants, so
    for a paired element the opening tag's attributes win over any nested
    child element's.
    """
    attributes = ASTWalker.find_first_descendant(element, ATTRIBUTE_LIST_KIND)
    if attributes is None:
        return []

    names = []
    for attribute in attributes.children:
        if attribute.kind != ATTRIBUTE_KIND:
            continue
        name = attribute.first_child
        if name is None:
            logger.debug("Skipping attribute without a name node at %d", attribute.start)
            continue
        names.append(collapse_whitespace(text, node_to_interval(name, adjustments)))
    return names


def grow_to_attribute_names(
    root: SyntaxNode,
    text: str,
    intervals: Iterable[Interval],
    max_steps: int = DEFAULT_MAX_STEPS,
    adjustments: Optional[AdjustmentTable] = None,
) -> List[Interval]:
    return engine_attribute_names(GrowthEngine(text, root, adjustments), intervals, max_steps)


def engine_attribute_names(engine: GrowthEngine, intervals: Iterable[Interval], max_steps: int) -> List[Interval]:
    results: List[Interval] = []
    for interval in intervals:
        grown = engine.grow_until(interval, is_markup_element, max_steps)
        if grown is None:
            logger.debug("No markup element encloses %s", interval)
            continue
        element = engine.expansion_node(grown)
        if element is None:
            continue
        results.extend(attribute_name_intervals(element, engine.text, engine.adjustments))
    return results
