from typing import Dict, List, Optional, Protocol

from .attributes import engine_attribute_names
from .growth import GrowthEngine
from .models import GrowthMode, Interval

BUILTIN_LANGUAGES = (
    "typescript",
    "typescriptreact",
    "javascript",
    "javascriptreact",
    "json",
    "jsonc",
)


class GrowthStrategy(Protocol):
    """Protocol for a per-language growth behaviour"""

    mode: GrowthMode

    def grow(self, engine: GrowthEngine, intervals: List[Interval]) -> List[Interval]: ...


class StructuralStrategy:
    """Grow every selection to its next enclosing syntax node"""

    mode = GrowthMode.STRUCTURAL

    def grow(self, engine: GrowthEngine, intervals: List[Interval]) -> List[Interval]:
        return engine.grow_many(intervals)


class AttributeNamesStrategy:
    """Grow every selection to its JSX element and select the attribute names"""

    mode = GrowthMode.ATTRIBUTES

    def __init__(self, max_steps: int):
        self.max_steps = max_steps

    def grow(self, engine: GrowthEngine, intervals: List[Interval]) -> List[Interval]:
        return engine_attribute_names(engine, intervals, self.max_steps)


def strategy_for(mode: GrowthMode, max_steps: int) -> GrowthStrategy:
    if mode is GrowthMode.ATTRIBUTES:
        return AttributeNamesStrategy(max_steps)
    return StructuralStrategy()


class StrategyRegistry:
    """Maps editor language ids to growth strategies"""

    def __init__(self, default_mode: GrowthMode = GrowthMode.STRUCTURAL, max_steps: int = 100):
        self._strategies: Dict[str, GrowthStrategy] = {}
        self.max_steps = max_steps
        self._load_builtin_languages(default_mode)

    def register(self, language_id: str, strategy: GrowthStrategy):
        self._strategies[language_id] = strategy

    def register_mode(self, language_id: str, mode: GrowthMode):
        self.register(language_id, strategy_for(mode, self.max_steps))

    def unregister(self, language_id: str):
        self._strategies.pop(language_id, None)

    def get(self, language_id: str) -> Optional[GrowthStrategy]:
        """Strategy for ``language_id``; None means the host's own behaviour applies"""
        return self._strategies.get(language_id)

    def languages(self) -> List[str]:
        return sorted(self._strategies)

    def _load_builtin_languages(self, default_mode: GrowthMode):
        for language_id in BUILTIN_LANGUAGES:
            self.register_mode(language_id, default_mode)
