import logging
from typing import Callable, List, Optional, Tuple

from smart_select_tree_sitter import SourceParser

from .config import EngineConfig
from .growth import GrowthEngine
from .history import ApplyTracker, SelectionHistory
from .host import EditorHost
from .models import GrowthMode, Interval, NativeCommand, Selection, SelectionSet, selections_equal
from .registry import GrowthStrategy, StrategyRegistry, strategy_for

logger = logging.getLogger(__name__)


class SmartSelect:
    """Grow/shrink commands wired to an editor host.

    ``active_editor`` returns the editor commands act on, or None when no
    editor is focused. Each editor passed in is subscribed to once so that
    external selection changes clear the history.
    """

    def __init__(
        self,
        active_editor: Callable[[], Optional[EditorHost]],
        config: Optional[EngineConfig] = None,
        registry: Optional[StrategyRegistry] = None,
    ):
        self.config = config or EngineConfig()
        self.registry = registry or StrategyRegistry(self.config.default_mode, self.config.max_steps)
        for language_id, mode in self.config.languages.items():
            self.registry.register_mode(language_id, mode)
        self.parser = SourceParser()
        self.history = SelectionHistory()
        self.tracker = ApplyTracker()
        self._active_editor = active_editor
        self._subscriptions: List[Tuple[EditorHost, Callable[[], None]]] = []

    @classmethod
    def for_editor(cls, editor: EditorHost, config: Optional[EngineConfig] = None) -> "SmartSelect":
        smart_select = cls(lambda: editor, config)
        smart_select.attach(editor)
        return smart_select

    def attach(self, editor: EditorHost) -> None:
        # one subscription per editor object
        if any(subscribed is editor for subscribed, _ in self._subscriptions):
            return
        self._subscriptions.append((editor, editor.subscribe(self.on_selection_changed)))

    def grow(self) -> None:
        """Grow with the strategy registered for the editor's language"""
        editor = self._editor()
        if editor is None:
            return
        strategy = self.registry.get(editor.language_id)
        if strategy is None:
            logger.debug("No strategy for '%s', deferring to the host", editor.language_id)
            editor.execute_native(NativeCommand.GROW)
            return
        self._grow_with(editor, strategy)

    def grow_structural(self) -> None:
        self._grow_in_mode(GrowthMode.STRUCTURAL)

    def grow_attributes(self) -> None:
        self._grow_in_mode(GrowthMode.ATTRIBUTES)

    def shrink(self) -> None:
        editor = self._editor()
        if editor is None:
            return
        selections = self.history.pop()
        if selections is None:
            editor.execute_native(NativeCommand.SHRINK)
            return
        self._apply(editor, selections)

    def on_selection_changed(self, selections: SelectionSet = ()) -> None:
        if not self.tracker.observe_change():
            if len(self.history):
                logger.debug("External selection change, clearing %d history entries", len(self.history))
            self.history.invalidate()

    def dispose(self) -> None:
        for _, unsubscribe in self._subscriptions:
            unsubscribe()
        self._subscriptions.clear()

    def _grow_in_mode(self, mode: GrowthMode) -> None:
        editor = self._editor()
        if editor is None:
            return
        if self.registry.get(editor.language_id) is None:
            editor.execute_native(NativeCommand.GROW)
            return
        self._grow_with(editor, strategy_for(mode, self.config.max_steps))

    def _grow_with(self, editor: EditorHost, strategy: GrowthStrategy) -> None:
        text = editor.text
        result = self.parser.parse_string(text, editor.file_name, editor.language_id)
        engine = GrowthEngine(text, result.root, self.config.boundary_adjustments())

        current = editor.selections
        intervals: List[Interval] = [selection.interval for selection in current]
        grown = strategy.grow(engine, intervals)
        if not grown:
            if self.config.native_fallback_on_empty:
                editor.execute_native(NativeCommand.GROW)
            return

        # hosts merge identical selections, so keep the first of each
        selections = tuple(Selection.from_interval(interval) for interval in dict.fromkeys(grown))
        if selections_equal(selections, current):
            return
        self.history.record(current)
        self._apply(editor, selections)

    def _apply(self, editor: EditorHost, selections: SelectionSet) -> None:
        if not selections:
            return
        self.tracker.begin_apply()
        editor.set_selections(selections)

    def _editor(self) -> Optional[EditorHost]:
        editor = self._active_editor()
        if editor is not None:
            self.attach(editor)
        return editor
