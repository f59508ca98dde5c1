"""Selection history that makes growth reversible."""

from enum import Enum
from typing import List, Optional

from .models import SelectionSet, selections_equal


class SelectionHistory:
    """LIFO stack of selection sets captured before each grow"""

    def __init__(self) -> None:
        self._entries: List[SelectionSet] = []

    def __len__(self) -> int:
        return len(self._entries)

    def record(self, selections: SelectionSet) -> bool:
        """Push ``selections`` unless it equals the top entry. Returns whether it was pushed."""
        top = self.peek()
        if top is not None and selections_equal(top, selections):
            return False
        self._entries.append(tuple(selections))
        return True

    def peek(self) -> Optional[SelectionSet]:
        return self._entries[-1] if self._entries else None

    def pop(self) -> Optional[SelectionSet]:
        if not self._entries:
            return None
        return self._entries.pop()

    def invalidate(self) -> None:
        self._entries.clear()


class ApplyState(str, Enum):
    IDLE = "idle"
    APPLYING = "applying"


class ApplyTracker:
    """Tells selection changes we caused apart from external ones.

    ``begin_apply`` must be called right before selections are written to the
    host; the first change observed afterwards is attributed to that write.
    """

    def __init__(self) -> None:
        self.state = ApplyState.IDLE

    def begin_apply(self) -> None:
        self.state = ApplyState.APPLYING

    def observe_change(self) -> bool:
        """Returns True when the observed change came from our own apply"""
        own = self.state is ApplyState.APPLYING
        self.state = ApplyState.IDLE
        return own
