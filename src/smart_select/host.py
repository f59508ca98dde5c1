"""Host editor boundary and an in-memory editor implementing it."""

from typing import Callable, List, Optional, Protocol, Sequence

from .models import NativeCommand, Selection, SelectionSet, selection_set

SelectionListener = Callable[[SelectionSet], None]
Unsubscribe = Callable[[], None]


class EditorHost(Protocol):
    """What the engine needs from an editor"""

    @property
    def text(self) -> str: ...

    @property
    def file_name(self) -> str: ...

    @property
    def language_id(self) -> str: ...

    @property
    def selections(self) -> SelectionSet: ...

    def set_selections(self, selections: SelectionSet) -> None: ...

    def execute_native(self, command: NativeCommand) -> None: ...

    def subscribe(self, listener: SelectionListener) -> Unsubscribe: ...


class MemoryEditor:
    """Editor state kept in memory; every selection write notifies listeners synchronously"""

    def __init__(
        self,
        text: str,
        language_id: str = "typescript",
        file_name: str = "",
        selections: Optional[Sequence[Selection]] = None,
    ):
        self._text = text
        self._language_id = language_id
        self._file_name = file_name
        self._selections: SelectionSet = selection_set(selections or [Selection(0, 0)])
        self._listeners: List[SelectionListener] = []
        self.native_calls: List[NativeCommand] = []

    @property
    def text(self) -> str:
        return self._text

    @property
    def file_name(self) -> str:
        return self._file_name

    @property
    def language_id(self) -> str:
        return self._language_id

    @property
    def selections(self) -> SelectionSet:
        return self._selections

    def set_selections(self, selections: SelectionSet) -> None:
        self._selections = selection_set(selections)
        for listener in list(self._listeners):
            listener(self._selections)

    def move_cursor(self, offset: int) -> None:
        """Simulate the user placing a single caret"""
        self.set_selections((Selection(offset, offset),))

    def execute_native(self, command: NativeCommand) -> None:
        self.native_calls.append(command)

    def subscribe(self, listener: SelectionListener) -> Unsubscribe:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def selected_text(self) -> List[str]:
        return [self._text[s.start:s.end] for s in self._selections]
