"""Tests for the headless actions dialog: filtering, selection, and SDK actions."""

from __future__ import annotations

import pytest

from palette.config import ActionsDialogConfig
from palette.dialog import (
    ActionsDialog,
    actions_dialog_empty_state_message,
    resolve_selected_protocol_action_index,
    should_rebuild_grouped_items_for_config_change,
)
from palette.models import Item, SectionHeader, SectionStyle
from palette.protocol import ProtocolAction

HEADERS = ActionsDialogConfig(section_style=SectionStyle.HEADERS)


@pytest.fixture
def dialog(script_actions) -> ActionsDialog:
    return ActionsDialog(script_actions, HEADERS)


class TestInitialState:
    def test_full_list_with_headers(self, dialog):
        assert dialog.filtered == [0, 1, 2, 3, 4, 5]
        assert dialog.grouped_items[0] == SectionHeader("Actions")
        assert dialog.count_section_headers() == 3

    def test_first_item_selected_not_header(self, dialog):
        assert dialog.selected_index == 1
        assert dialog.selected_action_id() == "run_script"

    def test_separators_style_has_no_header_rows(self, script_actions):
        dialog = ActionsDialog(script_actions)
        assert all(isinstance(row, Item) for row in dialog.grouped_items)
        assert dialog.selected_index == 0

    def test_empty_dialog(self):
        dialog = ActionsDialog([])
        assert dialog.grouped_items == []
        assert dialog.selected_action() is None
        assert dialog.empty_state_message() == "No actions available"


class TestFiltering:
    def test_typing_refilters(self, dialog):
        for ch in "copy":
            dialog.handle_char(ch)
        assert dialog.search_text == "copy"
        assert dialog.filtered == [2, 3]
        assert dialog.grouped_items == [SectionHeader("Share"), Item(2), Item(3)]
        assert dialog.selected_action_id() == "copy_deeplink"

    def test_backspace_restores_full_list(self, dialog):
        dialog.set_search_text("co")
        dialog.handle_backspace()
        dialog.handle_backspace()
        assert dialog.search_text == ""
        assert dialog.filtered == list(range(6))

    def test_backspace_on_empty_query_is_noop(self, dialog):
        dialog.handle_backspace()
        assert dialog.search_text == ""

    def test_selection_preserved_across_refilter(self, dialog):
        dialog.set_search_text("copy")
        dialog.move_down()
        assert dialog.selected_action_id() == "copy_path"
        dialog.set_search_text("copy p")
        assert dialog.selected_action_id() == "copy_path"
        dialog.set_search_text("")
        assert dialog.selected_action_id() == "copy_path"

    def test_selection_resets_when_action_filtered_out(self, dialog):
        dialog.select_last()
        assert dialog.selected_action_id() == "move_to_trash"
        dialog.set_search_text("copy")
        assert dialog.selected_action_id() == "copy_deeplink"

    def test_no_matches(self, dialog):
        dialog.set_search_text("zzz")
        assert dialog.grouped_items == []
        assert dialog.selected_action() is None
        assert dialog.empty_state_message() == "No actions match your search"


class TestNavigation:
    def test_move_down_skips_headers(self, dialog):
        dialog.move_down()  # run -> edit
        dialog.move_down()  # edit -> (Share header) -> copy_deeplink
        assert dialog.selected_action_id() == "copy_deeplink"
        assert isinstance(dialog.grouped_items[dialog.selected_index], Item)

    def test_move_up_at_top_stays(self, dialog):
        dialog.move_up()
        assert dialog.selected_action_id() == "run_script"

    def test_first_and_last(self, dialog):
        dialog.select_last()
        assert dialog.selected_action_id() == "move_to_trash"
        dialog.select_first()
        assert dialog.selected_action_id() == "run_script"

    def test_paging(self, dialog):
        dialog.page_down()
        assert dialog.selected_action_id() == "move_to_trash"
        dialog.page_up()
        assert dialog.selected_action_id() == "run_script"


class TestHandleKey:
    def test_typing_and_execute(self, dialog):
        for key in ["t", "r", "a", "s", "h"]:
            dialog.handle_key(key)
        assert dialog.handle_key("enter") == "move_to_trash"

    def test_space_types(self, dialog):
        dialog.handle_key("c")
        dialog.handle_key("space")
        assert dialog.search_text == "c "

    def test_arrows_and_home_end(self, dialog):
        dialog.handle_key("down")
        assert dialog.selected_action_id() == "edit_script"
        dialog.handle_key("end")
        assert dialog.selected_action_id() == "move_to_trash"
        dialog.handle_key("home")
        assert dialog.selected_action_id() == "run_script"
        dialog.handle_key("pagedown")
        dialog.handle_key("up")
        assert dialog.selected_action_id() == "reset_ranking"

    def test_escape_closes(self, dialog):
        assert dialog.handle_key("escape") is None
        assert dialog.is_open is False

    def test_modified_keys_do_not_type(self, dialog):
        dialog.handle_key("c", platform=True)
        assert dialog.search_text == ""

    def test_backspace_key(self, dialog):
        dialog.set_search_text("ab")
        dialog.handle_key("backspace")
        assert dialog.search_text == "a"

    def test_ignored_key(self, dialog):
        assert dialog.handle_key("tab") is None
        assert dialog.selected_action_id() == "run_script"


class TestConfigChange:
    def test_rebuild_only_on_section_style_change(self):
        base = ActionsDialogConfig()
        assert should_rebuild_grouped_items_for_config_change(base, HEADERS)
        assert not should_rebuild_grouped_items_for_config_change(
            base, ActionsDialogConfig(show_icons=True)
        )

    def test_switching_to_separators_keeps_selection(self, dialog):
        dialog.move_down()
        dialog.set_config(ActionsDialogConfig(section_style=SectionStyle.SEPARATORS))
        assert all(isinstance(row, Item) for row in dialog.grouped_items)
        assert dialog.selected_action_id() == "edit_script"
        assert dialog.selected_index == 1


class TestSdkActions:
    @pytest.fixture
    def sdk_items(self) -> list[ProtocolAction]:
        return [
            ProtocolAction(name="Open", shortcut="cmd+o"),
            ProtocolAction(name="Secret", visible=False),
            ProtocolAction(name="Submit", has_action=True, value="ok"),
        ]

    def test_replaces_builtin_actions(self, dialog, sdk_items):
        dialog.set_search_text("copy")
        dialog.set_sdk_actions(sdk_items)
        assert dialog.has_sdk_actions()
        assert [a.id for a in dialog.actions] == ["Open", "Submit"]
        assert dialog.search_text == ""
        assert dialog.selected_action_id() == "Open"

    def test_selected_protocol_action_maps_past_hidden(self, dialog, sdk_items):
        dialog.set_sdk_actions(sdk_items)
        dialog.move_down()
        assert dialog.selected_protocol_action() is sdk_items[2]

    def test_duplicate_names_keep_highlighted_row_on_refilter(self, dialog):
        items = [
            ProtocolAction(name="Copy", value="first"),
            ProtocolAction(name="Copy", value="second"),
        ]
        dialog.set_sdk_actions(items)
        dialog.move_down()
        assert dialog.selected_protocol_action() is items[1]

        dialog.set_search_text("c")
        assert dialog.selected_protocol_action().value == "second"
        dialog.handle_backspace()
        assert dialog.selected_protocol_action().value == "second"

    def test_clear_restores_builtin(self, dialog, sdk_items, script_actions):
        dialog.set_sdk_actions(sdk_items)
        dialog.clear_sdk_actions()
        assert not dialog.has_sdk_actions()
        assert dialog.actions == script_actions
        assert dialog.selected_protocol_action() is None

    def test_clear_without_sdk_is_noop(self, dialog):
        dialog.set_search_text("copy")
        dialog.clear_sdk_actions()
        assert dialog.search_text == "copy"

    def test_set_actions_drops_sdk_state(self, dialog, sdk_items, script_actions):
        dialog.set_sdk_actions(sdk_items)
        dialog.set_actions(script_actions[:2])
        assert not dialog.has_sdk_actions()
        assert [a.id for a in dialog.actions] == ["run_script", "edit_script"]


class TestHelpers:
    def test_resolve_protocol_index(self):
        assert resolve_selected_protocol_action_index(1, [0, 2, 3]) == 2
        assert resolve_selected_protocol_action_index(None, [0]) is None
        assert resolve_selected_protocol_action_index(5, [0]) is None

    def test_empty_state_message(self):
        assert actions_dialog_empty_state_message("   ") == "No actions available"
        assert actions_dialog_empty_state_message("x") == "No actions match your search"
