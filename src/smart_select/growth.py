"""Syntax-tree driven growth of selection intervals."""

import logging
from typing import Callable, Iterable, List, Optional

from smart_select_tree_sitter import SyntaxNode

from .config import DEFAULT_MAX_STEPS
from .mapper import AdjustmentTable, node_to_interval
from .models import Interval
from .path import resolve_path
from .ranges import collapse_whitespace, interval_is_valid, strictly_extends

logger = logging.getLogger(__name__)

NodePredicate = Callable[[SyntaxNode], bool]


class GrowthEngine:
    """Grows intervals over one document snapshot and its syntax tree"""

    def __init__(self, text: str, root: SyntaxNode, adjustments: Optional[AdjustmentTable] = None):
        self.text = text
        self.root = root
        self.adjustments = adjustments

    def candidate(self, node: SyntaxNode) -> Interval:
        return collapse_whitespace(self.text, node_to_interval(node, self.adjustments))

    def expansion_node(self, interval: Interval) -> Optional[SyntaxNode]:
        """Innermost node on the path whose candidate strictly extends ``interval``"""
        if not interval_is_valid(self.text, interval):
            logger.debug("Interval %s is outside the document (length %d)", interval, len(self.text))
            return None
        path = resolve_path(self.root, interval)
        for node in reversed(path):
            if strictly_extends(self.candidate(node), interval):
                return node
        return None

    def grow_once(self, interval: Interval) -> Optional[Interval]:
        node = self.expansion_node(interval)
        if node is None:
            return None
        return self.candidate(node)

    def grow_many(self, intervals: Iterable[Interval]) -> List[Interval]:
        grown = []
        for interval in intervals:
            result = self.grow_once(interval)
            if result is None:
                logger.debug("Dropping %s: no enclosing node grows it", interval)
                continue
            grown.append(result)
        return grown

    def grow_until(
        self, interval: Interval, predicate: NodePredicate, max_steps: int = DEFAULT_MAX_STEPS
    ) -> Optional[Interval]:
        """Grow until the expansion node of the current interval satisfies ``predicate``.

        Returns the last interval before that node, so ``expansion_node`` on
        the result yields the matching node. Gives up with ``None`` when growth
        stops or more than ``max_steps`` steps would be needed.
        """
        current = interval
        steps = 0
        while True:
            node = self.expansion_node(current)
            if node is None:
                return None
            if predicate(node):
                return current
            if steps >= max_steps:
                logger.warning("Step limit of %d exceeded while growing %s", max_steps, interval)
                return None
            current = self.candidate(node)
            steps += 1


def grow_once(
    root: SyntaxNode, text: str, interval: Interval, adjustments: Optional[AdjustmentTable] = None
) -> Optional[Interval]:
    return GrowthEngine(text, root, adjustments).grow_once(interval)


def grow_many(
    root: SyntaxNode, text: str, intervals: Iterable[Interval], adjustments: Optional[AdjustmentTable] = None
) -> List[Interval]:
    return GrowthEngine(text, root, adjustments).grow_many(intervals)


def grow_until(
    root: SyntaxNode,
    text: str,
    interval: Interval,
    predicate: NodePredicate,
    max_steps: int = DEFAULT_MAX_STEPS,
    adjustments: Optional[AdjustmentTable] = None,
) -> Optional[Interval]:
    return GrowthEngine(text, root, adjustments).grow_until(interval, predicate, max_steps)
