from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple


@dataclass(frozen=True)
class Interval:
    """Half-open ``[start, end)`` offset range into a document text"""

    start: int
    end: int

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    def __len__(self) -> int:
        return max(0, self.end - self.start)


@dataclass(frozen=True)
class Selection:
    """Editor selection; ``anchor`` is where it began, ``active`` where the caret is"""

    anchor: int
    active: int

    @property
    def start(self) -> int:
        return min(self.anchor, self.active)

    @property
    def end(self) -> int:
        return max(self.anchor, self.active)

    @property
    def interval(self) -> Interval:
        return Interval(self.start, self.end)

    @property
    def is_reversed(self) -> bool:
        return self.active < self.anchor

    @classmethod
    def from_interval(cls, interval: Interval) -> "Selection":
        return cls(anchor=interval.start, active=interval.end)


SelectionSet = Tuple[Selection, ...]


def selection_set(selections: Iterable[Selection]) -> SelectionSet:
    return tuple(selections)


def selections_equal(selections: SelectionSet, other: SelectionSet) -> bool:
    """Pairwise equality, direction included"""
    return len(selections) == len(other) and all(a == b for a, b in zip(selections, other))


class GrowthMode(str, Enum):
    STRUCTURAL = "structural"
    ATTRIBUTES = "attributes"


class NativeCommand(str, Enum):
    """Host built-in commands the engine defers to"""

    GROW = "grow"
    SHRINK = "shrink"
