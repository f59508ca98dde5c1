import pytest
from smart_select.config import EngineConfig
from smart_select.engine import SmartSelect
from smart_select.host import MemoryEditor
from smart_select.models import GrowthMode, NativeCommand, Selection
from smart_select.registry import StrategyRegistry, StructuralStrategy

OBJECT_SOURCE = "const x = { a: 1, b: 2 };"
JSX_SOURCE = '<Foo bar={1} baz="x" />'


def make(source=OBJECT_SOURCE, language_id="typescript", file_name="sample.ts", selections=None, config=None):
    editor = MemoryEditor(source, language_id, file_name, selections or [Selection(14, 14)])
    return editor, SmartSelect.for_editor(editor, config)


def test_engine_config_defaults():
    config = EngineConfig()
    assert config.max_steps == 100
    assert config.trim_template_delimiters is False
    assert config.boundary_adjustments() is None


def test_engine_config_rejects_zero_steps():
    with pytest.raises(ValueError):
        EngineConfig(max_steps=0)


def test_grow_walks_up_the_tree():
    editor, smart_select = make()
    seen = []
    for _ in range(4):
        smart_select.grow()
        seen.append(editor.selected_text()[0])
    assert seen == ["a: 1", "{ a: 1, b: 2 }", "x = { a: 1, b: 2 }", OBJECT_SOURCE]
    assert editor.native_calls == []


def test_grow_then_shrink_restores_each_step():
    editor, smart_select = make()
    original = editor.selections
    steps = []
    for _ in range(3):
        steps.append(editor.selections)
        smart_select.grow()

    for expected in reversed(steps):
        smart_select.shrink()
        assert editor.selections == expected
    assert editor.selections == original
    assert editor.native_calls == []


def test_shrink_restores_direction_and_order():
    selections = [Selection(21, 21), Selection(16, 12)]
    editor, smart_select = make(selections=selections)
    smart_select.grow()
    assert editor.selected_text() == ["2", "{ a: 1, b: 2 }"]
    smart_select.shrink()
    assert editor.selections == tuple(selections)


def test_shrink_with_empty_history_defers_to_host():
    editor, smart_select = make()
    smart_select.shrink()
    assert editor.native_calls == [NativeCommand.SHRINK]


def test_external_change_invalidates_history():
    editor, smart_select = make()
    smart_select.grow()
    smart_select.grow()
    editor.move_cursor(3)
    assert len(smart_select.history) == 0
    smart_select.shrink()
    assert editor.native_calls == [NativeCommand.SHRINK]
    assert editor.selections == (Selection(3, 3),)


def test_own_apply_does_not_invalidate_history():
    editor, smart_select = make()
    smart_select.grow()
    smart_select.grow()
    assert len(smart_select.history) == 2


def test_grow_at_root_falls_back_to_native():
    editor, smart_select = make(selections=[Selection(0, len(OBJECT_SOURCE))])
    smart_select.grow()
    assert editor.native_calls == [NativeCommand.GROW]
    assert len(smart_select.history) == 0


def test_grow_at_root_without_fallback_leaves_selection():
    config = EngineConfig(native_fallback_on_empty=False)
    editor, smart_select = make(selections=[Selection(0, len(OBJECT_SOURCE))], config=config)
    smart_select.grow()
    assert editor.native_calls == []
    assert editor.selections == (Selection(0, len(OBJECT_SOURCE)),)


def test_unregistered_language_defers_to_host():
    editor, smart_select = make(language_id="python", file_name="sample.py")
    smart_select.grow()
    smart_select.grow_attributes()
    assert editor.native_calls == [NativeCommand.GROW, NativeCommand.GROW]
    assert editor.selections == (Selection(14, 14),)


def test_batch_keeps_growable_selections():
    editor, smart_select = make(selections=[Selection(0, len(OBJECT_SOURCE)), Selection(21, 21)])
    smart_select.grow()
    assert editor.selected_text() == ["2"]


def test_grow_attributes_selects_attribute_names():
    editor, smart_select = make(JSX_SOURCE, "typescriptreact", "Foo.tsx", [Selection(10, 10)])
    smart_select.grow_attributes()
    assert editor.selected_text() == ["bar", "baz"]
    smart_select.shrink()
    assert editor.selections == (Selection(10, 10),)


def test_attribute_mode_from_config():
    config = EngineConfig(languages={"typescriptreact": GrowthMode.ATTRIBUTES})
    editor, smart_select = make(JSX_SOURCE, "typescriptreact", "Foo.tsx", [Selection(10, 10)], config)
    smart_select.grow()
    assert editor.selected_text() == ["bar", "baz"]


def test_attribute_grow_without_change_records_nothing():
    editor, smart_select = make(JSX_SOURCE, "typescriptreact", "Foo.tsx", [Selection(10, 10)])
    smart_select.grow_attributes()
    smart_select.grow_attributes()
    assert len(smart_select.history) == 1


def test_registry_builtins_and_unregister():
    registry = StrategyRegistry()
    assert "javascriptreact" in registry.languages()
    assert isinstance(registry.get("json"), StructuralStrategy)
    registry.unregister("json")
    assert registry.get("json") is None
    assert registry.get("markdown") is None


def test_no_active_editor_is_a_noop():
    smart_select = SmartSelect(lambda: None)
    smart_select.grow()
    smart_select.shrink()
    assert len(smart_select.history) == 0


def test_dispose_stops_listening():
    editor, smart_select = make()
    smart_select.grow()
    smart_select.dispose()
    editor.move_cursor(0)
    assert len(smart_select.history) == 1


def test_paired_element_without_own_attributes_selects_nothing():
    source = '<div>hello<span a="1" /></div>'
    editor, smart_select = make(source, "javascriptreact", "x.jsx", [Selection(7, 7)])
    smart_select.grow_attributes()
    assert editor.selections == (Selection(7, 7),)
    assert editor.native_calls == [NativeCommand.GROW]
    assert len(smart_select.history) == 0


def test_caret_in_paired_element_children_selects_its_attribute_names():
    source = '<div id="x">hi<span a="1" /></div>'
    editor, smart_select = make(source, "javascriptreact", "x.jsx", [Selection(13, 13)])
    smart_select.grow_attributes()
    assert editor.selected_text() == ["id"]


def test_caret_in_opening_tag_selects_attribute_names():
    source = '<div id="x" title="y"><span a="1" /></div>'
    editor, smart_select = make(source, "typescriptreact", "x.tsx", [Selection(9, 9)])
    smart_select.grow_attributes()
    assert editor.selected_text() == ["id", "title"]


def test_caret_in_nested_element_selects_only_its_names():
    source = '<div id="x" title="y"><span a="1" /></div>'
    editor, smart_select = make(source, "typescriptreact", "x.tsx", [Selection(31, 31)])
    smart_select.grow_attributes()
    assert editor.selected_text() == ["a"]


TEMPLATE_SOURCE = "const s = `ab${x}cd`;"


def test_template_delimiters_are_trimmed_when_enabled():
    config = EngineConfig(trim_template_delimiters=True)
    editor, smart_select = make(TEMPLATE_SOURCE, selections=[Selection(12, 12)], config=config)
    seen = []
    for _ in range(3):
        smart_select.grow()
        seen.append(editor.selected_text())
    assert seen == [["ab"], ["ab${x}cd"], ["s = `ab${x}cd`"]]


def test_template_delimiters_are_kept_by_default():
    editor, smart_select = make(TEMPLATE_SOURCE, selections=[Selection(12, 12)])
    smart_select.grow()
    smart_select.grow()
    assert editor.selected_text() == ["`ab${x}cd`"]


class LookalikeEditor(MemoryEditor):
    """Compares equal to any other editor and cannot be hashed"""

    def __eq__(self, other):
        return isinstance(other, MemoryEditor)

    __hash__ = None


def test_each_editor_object_is_subscribed_once():
    first = LookalikeEditor(OBJECT_SOURCE, selections=[Selection(14, 14)])
    second = LookalikeEditor(OBJECT_SOURCE, selections=[Selection(14, 14)])
    active = [first]
    smart_select = SmartSelect(lambda: active[0])
    smart_select.grow()
    smart_select.grow()
    # a second listener on the same editor would see the apply as external
    assert len(smart_select.history) == 2

    active[0] = second
    smart_select.grow()
    assert len(smart_select.history) == 3
    second.move_cursor(0)
    assert len(smart_select.history) == 0


def test_new_editors_are_subscribed_after_old_ones_are_dropped():
    smart_select = SmartSelect(lambda: None)
    for _ in range(5):
        editor = MemoryEditor(OBJECT_SOURCE, selections=[Selection(14, 14)])
        smart_select.attach(editor)
        smart_select.history.record(editor.selections)
        editor.move_cursor(0)
        assert len(smart_select.history) == 0


def test_dispose_unsubscribes_every_editor():
    first = MemoryEditor(OBJECT_SOURCE)
    second = MemoryEditor(OBJECT_SOURCE)
    smart_select = SmartSelect(lambda: None)
    smart_select.attach(first)
    smart_select.attach(second)
    smart_select.dispose()
    smart_select.history.record((Selection(1, 1),))
    first.move_cursor(2)
    second.move_cursor(2)
    assert len(smart_select.history) == 1
