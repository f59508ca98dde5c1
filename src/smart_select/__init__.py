"""
smart-select - structural selection for JavaScript/TypeScript sources

This package provides:
- Growth of selections to their enclosing syntax nodes
- Fan-out of a selection to the attribute names of its JSX element
- A selection history that makes growth reversible
- A facade wiring grow/shrink commands to an editor host
"""

__version__ = "0.1.0"

from .attributes import attribute_name_intervals, grow_to_attribute_names, is_markup_element
from .config import EngineConfig
from .engine import SmartSelect
from .growth import GrowthEngine, grow_many, grow_once, grow_until
from .history import ApplyTracker, SelectionHistory
from .host import EditorHost, MemoryEditor
from .mapper import TEMPLATE_LITERAL_ADJUSTMENTS, node_to_interval
from .models import GrowthMode, Interval, NativeCommand, Selection
from .path import resolve_path
from .ranges import collapse_whitespace
from .registry import StrategyRegistry

__all__ = [
    "ApplyTracker",
    "EditorHost",
    "EngineConfig",
    "GrowthEngine",
    "GrowthMode",
    "Interval",
    "MemoryEditor",
    "NativeCommand",
    "Selection",
    "SelectionHistory",
    "SmartSelect",
    "StrategyRegistry",
    "TEMPLATE_LITERAL_ADJUSTMENTS",
    "attribute_name_intervals",
    "collapse_whitespace",
    "grow_many",
    "grow_once",
    "grow_to_attribute_names",
    "grow_until",
    "is_markup_element",
    "node_to_interval",
    "resolve_path",
]
