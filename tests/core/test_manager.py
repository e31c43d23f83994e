"""
Unit Tests for ChecklistSlotManager

Slot state, toggle resync, export and listener notification.
"""

import json

import pytest

from checklist_manager.config import ManagerConfig
from checklist_manager.core.manager import ChecklistSlotManager, SlotIndexError
from checklist_manager.core.models.slots import Slot
from checklist_manager.core.schemas.validator import parse_checklist


@pytest.fixture
def manager() -> ChecklistSlotManager:
    return ChecklistSlotManager()


class TestInitialState:

    def test_starts_with_three_empty_slots(self, manager):
        assert manager.slot_count == 3
        assert manager.slots == (Slot(), Slot(), Slot())
        for slot in manager.slots:
            assert slot.raw_text == ""
            assert slot.items == ()
            assert slot.parse_error is None

    def test_sessions_do_not_share_state(self, sign_form_text):
        first = ChecklistSlotManager()
        second = ChecklistSlotManager()
        first.set_slot_text(0, sign_form_text)
        assert second.slot(0) == Slot()

    def test_config_controls_slot_count(self):
        assert ChecklistSlotManager(ManagerConfig(slot_count=5)).slot_count == 5

    def test_config_rejects_zero_slots(self):
        with pytest.raises(ValueError, match="slot_count"):
            ManagerConfig(slot_count=0)


class TestSetSlotText:

    def test_valid_text_populates_items(self, manager, sign_form_text):
        slot = manager.set_slot_text(0, sign_form_text)
        assert slot.raw_text == sign_form_text
        assert len(slot.items) == 1
        assert slot.parse_error is None
        assert manager.slot(0) is slot

    def test_malformed_text_sets_error(self, manager):
        manager.set_slot_text(1, "not json")
        slot = manager.slot(1)
        assert isinstance(slot.parse_error, str)
        assert slot.items == ()
        assert slot.raw_text == "not json"

    def test_non_array_sets_shape_error(self, manager):
        manager.set_slot_text(2, '{"a":1}')
        assert manager.slot(2).parse_error == "JSON must be an array"

    def test_whitespace_is_not_an_error(self, manager):
        manager.set_slot_text(0, "   \n")
        assert manager.slot(0).parse_error is None
        assert manager.slot(0).items == ()

    def test_edit_replaces_previous_items_entirely(self, manager, three_items_text, one_item_text):
        manager.set_slot_text(0, three_items_text)
        manager.set_slot_text(0, one_item_text)
        assert [item.id for item in manager.slot(0).items] == ["z"]

    def test_error_after_valid_text_clears_items(self, manager, sign_form_text):
        manager.set_slot_text(0, sign_form_text)
        manager.set_slot_text(0, sign_form_text[:-1])
        assert manager.slot(0).items == ()
        assert manager.slot(0).parse_error

    def test_edit_never_touches_other_slots(self, manager, sign_form_text, three_items_text):
        manager.set_slot_text(0, sign_form_text)
        manager.set_slot_text(2, three_items_text)
        before = (manager.slot(0), manager.slot(2))

        manager.set_slot_text(1, "not json")

        assert (manager.slot(0), manager.slot(2)) == before
        assert manager.slot(0).raw_text == sign_form_text
        assert manager.slot(2).parse_error is None

    @pytest.mark.parametrize("index", [-1, 3, 10])
    def test_bad_index_raises(self, manager, index):
        with pytest.raises(SlotIndexError):
            manager.set_slot_text(index, "[]")

    def test_slot_index_error_is_index_error(self, manager):
        with pytest.raises(IndexError, match="out of range"):
            manager.slot(3)


class TestToggleItem:

    def test_toggle_checks_item_and_resyncs_text(self, manager, sign_form_text):
        manager.set_slot_text(0, sign_form_text)

        assert manager.toggle_item(0, 0) is True

        slot = manager.slot(0)
        assert slot.items[0].data["value"] == "checked"
        assert slot.parse_error is None
        assert parse_checklist(slot.raw_text).items == slot.items

    def test_resync_text_is_pretty_printed(self, manager, sign_form_text):
        manager.set_slot_text(0, sign_form_text)
        manager.toggle_item(0, 0)
        expected = json.dumps(
            [{"id": "1", "name": "Sign form", "type": "doc", "value": "checked",
              "doctype": "x", "mandatory": "yes"}],
            indent=2,
        )
        assert manager.slot(0).raw_text == expected

    def test_toggle_respects_configured_indent(self, sign_form_text):
        manager = ChecklistSlotManager(ManagerConfig(indent=4))
        manager.set_slot_text(0, sign_form_text)
        manager.toggle_item(0, 0)
        assert '\n    {\n        "id"' in manager.slot(0).raw_text

    def test_toggle_twice_restores_original(self, manager, three_items_text):
        manager.set_slot_text(0, three_items_text)
        original = manager.slot(0).items

        manager.toggle_item(0, 1)
        manager.toggle_item(0, 1)

        assert manager.slot(0).items == original
        assert parse_checklist(manager.slot(0).raw_text).items == original

    def test_toggle_checked_item_writes_empty_string(self, manager, three_items_text):
        manager.set_slot_text(0, three_items_text)
        manager.toggle_item(0, 0)
        assert manager.slot(0).items[0].data["value"] == ""

    def test_toggle_only_changes_target_field(self, manager, three_items_text):
        manager.set_slot_text(0, three_items_text)
        before = manager.slot(0).items

        manager.toggle_item(0, 2)

        after = manager.slot(0).items
        assert after[0] == before[0]
        assert after[1] == before[1]
        assert after[2].data["owner"] == "ops"
        assert list(after[2].data) == list(before[2].data)

    @pytest.mark.parametrize("row", [1, 5, -1])
    def test_out_of_range_row_is_noop(self, manager, sign_form_text, row):
        manager.set_slot_text(0, sign_form_text)
        before = manager.slot(0)

        assert manager.toggle_item(0, row) is False
        assert manager.slot(0) is before

    def test_toggle_on_empty_slot_is_noop(self, manager):
        assert manager.toggle_item(1, 0) is False
        assert manager.slot(1) == Slot()

    def test_toggle_non_object_entry_is_noop(self, manager):
        manager.set_slot_text(0, "[1, 2]")
        assert manager.toggle_item(0, 0) is False
        assert manager.slot(0).raw_text == "[1, 2]"

    def test_toggle_when_float_overflows_then_text_stays_valid_json(self, manager):
        manager.set_slot_text(0, '[{"id":"1","value":"","size":1e400}]')

        assert manager.toggle_item(0, 0) is True

        slot = manager.slot(0)
        assert "Infinity" not in slot.raw_text
        reparsed = parse_checklist(slot.raw_text)
        assert reparsed.error is None
        assert reparsed.items == slot.items
        assert json.loads(manager.export_slot(0))[0]["size"] is None

    def test_toggle_bad_slot_raises(self, manager):
        with pytest.raises(SlotIndexError):
            manager.toggle_item(3, 0)

    def test_toggle_never_touches_other_slots(self, manager, sign_form_text, one_item_text):
        manager.set_slot_text(0, sign_form_text)
        manager.set_slot_text(1, one_item_text)
        manager.set_slot_text(2, "not json")
        others = (manager.slot(1), manager.slot(2))

        manager.toggle_item(0, 0)

        assert (manager.slot(1), manager.slot(2)) == others


class TestExportSlot:

    def test_export_is_compact(self, manager, sign_form_text):
        manager.set_slot_text(0, "  " + sign_form_text.replace(",", ", ") + "\n")
        assert manager.export_slot(0) == sign_form_text

    def test_export_reflects_toggle(self, manager, sign_form_text):
        manager.set_slot_text(0, sign_form_text)
        manager.toggle_item(0, 0)
        assert '"value":"checked"' in manager.export_slot(0)

    def test_export_of_errored_slot_is_empty_array(self, manager):
        manager.set_slot_text(0, "not json")
        assert manager.export_slot(0) == "[]"

    def test_export_does_not_mutate(self, manager, sign_form_text):
        manager.set_slot_text(0, sign_form_text)
        before = manager.slots
        manager.export_slot(0)
        assert manager.slots == before

    def test_export_bad_index_raises(self, manager):
        with pytest.raises(SlotIndexError):
            manager.export_slot(-1)


class TestListeners:

    def test_listener_receives_changed_slot(self, manager, sign_form_text):
        seen = []
        manager.subscribe(seen.append)

        manager.set_slot_text(2, sign_form_text)
        manager.toggle_item(2, 0)

        assert seen == [2, 2]

    def test_noop_toggle_does_not_notify(self, manager):
        seen = []
        manager.subscribe(seen.append)
        manager.toggle_item(0, 0)
        assert seen == []

    def test_unsubscribe_stops_notifications(self, manager):
        seen = []
        unsubscribe = manager.subscribe(seen.append)
        unsubscribe()
        unsubscribe()
        manager.set_slot_text(0, "[]")
        assert seen == []
