"""Headless actions dialog: query, ranking, grouping, and selection state.

The dialog owns no rendering. A UI layer feeds it keystrokes and draws
``grouped_items`` with ``selected_index`` highlighted; the dialog keeps the
highlight on a selectable item through every refilter and navigation step.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from palette import selection
from palette.config import ActionsDialogConfig
from palette.grouping import build_grouped_items_static, count_section_headers
from palette.matching import filter_actions
from palette.models import Action, GroupedActionItem, Item
from palette.protocol import ProtocolAction, actions_from_protocol
from palette.shortcuts import KeyIntent, key_intent

logger = logging.getLogger(__name__)


class ActionsDialog:
    """Searchable action list with section-aware keyboard selection.

    Usage::

        dialog = ActionsDialog(actions, ActionsDialogConfig(section_style=SectionStyle.HEADERS))
        dialog.set_search_text("copy")
        dialog.move_down()
        chosen = dialog.selected_action_id()
    """

    def __init__(
        self,
        actions: Sequence[Action],
        config: ActionsDialogConfig | None = None,
    ) -> None:
        self.config = config or ActionsDialogConfig()
        self.actions: list[Action] = list(actions)
        self.search_text = ""
        self.filtered: list[int] = list(range(len(self.actions)))
        self.grouped_items: list[GroupedActionItem] = []
        self.selected_index = 0
        self.is_open = True
        self._builtin_actions: list[Action] = self.actions
        self._sdk_actions: list[ProtocolAction] | None = None
        self._sdk_action_indices: list[int] = []
        self._reset_rows()

    # ------------------------------------------------------------------
    # Rows and filtering
    # ------------------------------------------------------------------

    def _rebuild_grouped_items(self) -> None:
        self.grouped_items = build_grouped_items_static(
            self.actions, self.filtered, self.config.section_style
        )

    def _reset_rows(self) -> None:
        self.filtered = list(range(len(self.actions)))
        self.search_text = ""
        self._rebuild_grouped_items()
        self.selected_index = selection.initial_selection_index(self.grouped_items)

    def _refilter(self) -> None:
        previous_index = self.selected_action_index()

        self.filtered = filter_actions(self.actions, self.search_text)
        self._rebuild_grouped_items()

        row = self._row_for_action_index(previous_index)
        if row is None:
            row = selection.initial_selection_index(self.grouped_items)
        self.selected_index = row

        logger.debug(
            "Refiltered %r: %d of %d actions, selected row %d",
            self.search_text,
            len(self.filtered),
            len(self.actions),
            self.selected_index,
        )

    def _row_for_action_index(self, action_index: int | None) -> int | None:
        # Ids may repeat (SDK actions are keyed by name), so match by position
        if action_index is None:
            return None
        for row, item in enumerate(self.grouped_items):
            if isinstance(item, Item) and item.index == action_index:
                return row
        return None

    def set_search_text(self, text: str) -> None:
        self.search_text = text
        self._refilter()

    def handle_char(self, ch: str) -> None:
        self.set_search_text(self.search_text + ch)

    def handle_backspace(self) -> None:
        if self.search_text:
            self.set_search_text(self.search_text[:-1])

    def set_actions(self, actions: Sequence[Action]) -> None:
        """Replace the built-in action list and reset query and selection."""
        self.actions = list(actions)
        self._builtin_actions = self.actions
        self._sdk_actions = None
        self._sdk_action_indices = []
        self._reset_rows()

    def set_config(self, config: ActionsDialogConfig) -> None:
        """Apply a new config; rows are rebuilt only when the section style changes."""
        rebuild = should_rebuild_grouped_items_for_config_change(self.config, config)
        self.config = config
        if rebuild:
            previous_index = self.selected_action_index()
            self._rebuild_grouped_items()
            row = self._row_for_action_index(previous_index)
            self.selected_index = (
                row if row is not None else selection.initial_selection_index(self.grouped_items)
            )

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def move_up(self) -> None:
        self.selected_index = selection.move_up(self.grouped_items, self.selected_index)

    def move_down(self) -> None:
        self.selected_index = selection.move_down(self.grouped_items, self.selected_index)

    def select_first(self) -> None:
        first = selection.first_selectable_index(self.grouped_items)
        if first is not None:
            self.selected_index = first

    def select_last(self) -> None:
        last = selection.last_selectable_index(self.grouped_items)
        if last is not None:
            self.selected_index = last

    def page_up(self) -> None:
        self.selected_index = selection.page_up(self.grouped_items, self.selected_index)

    def page_down(self) -> None:
        self.selected_index = selection.page_down(self.grouped_items, self.selected_index)

    def handle_key(
        self,
        key: str,
        *,
        platform: bool = False,
        control: bool = False,
        alt: bool = False,
    ) -> str | None:
        """Apply a key press.

        Returns:
            The selected action id when the key executes the selection,
            otherwise ``None``.
        """
        press = key_intent(key, platform=platform, control=control, alt=alt)
        if press is None:
            return None

        intent = press.intent
        if intent is KeyIntent.MOVE_UP:
            self.move_up()
        elif intent is KeyIntent.MOVE_DOWN:
            self.move_down()
        elif intent is KeyIntent.MOVE_HOME:
            self.select_first()
        elif intent is KeyIntent.MOVE_END:
            self.select_last()
        elif intent is KeyIntent.MOVE_PAGE_UP:
            self.page_up()
        elif intent is KeyIntent.MOVE_PAGE_DOWN:
            self.page_down()
        elif intent is KeyIntent.BACKSPACE:
            self.handle_backspace()
        elif intent is KeyIntent.TYPE_CHAR and press.char is not None:
            self.handle_char(press.char)
        elif intent is KeyIntent.CLOSE:
            self.is_open = False
        elif intent is KeyIntent.EXECUTE:
            return self.selected_action_id()
        return None

    # ------------------------------------------------------------------
    # Selection queries
    # ------------------------------------------------------------------

    def selected_action_index(self) -> int | None:
        """Index into ``actions`` of the highlighted row, if it is an item."""
        if 0 <= self.selected_index < len(self.grouped_items):
            row = self.grouped_items[self.selected_index]
            if isinstance(row, Item):
                return row.index
        return None

    def selected_action(self) -> Action | None:
        idx = self.selected_action_index()
        return self.actions[idx] if idx is not None else None

    def selected_action_id(self) -> str | None:
        action = self.selected_action()
        return action.id if action is not None else None

    def count_section_headers(self) -> int:
        return count_section_headers(self.actions, self.filtered)

    def empty_state_message(self) -> str:
        return actions_dialog_empty_state_message(self.search_text)

    # ------------------------------------------------------------------
    # SDK actions
    # ------------------------------------------------------------------

    def set_sdk_actions(self, items: Sequence[ProtocolAction]) -> None:
        """Show script-provided actions in place of the built-in list."""
        converted, indices = actions_from_protocol(items)
        logger.info("SDK actions set: %d visible of %d total", len(converted), len(items))
        self.actions = converted
        self._sdk_actions = list(items)
        self._sdk_action_indices = indices
        self._reset_rows()

    def clear_sdk_actions(self) -> None:
        """Restore the built-in actions after :meth:`set_sdk_actions`."""
        if self._sdk_actions is None:
            return
        logger.info("Clearing SDK actions, restoring built-in actions")
        self._sdk_actions = None
        self._sdk_action_indices = []
        self.actions = self._builtin_actions
        self._reset_rows()

    def has_sdk_actions(self) -> bool:
        return self._sdk_actions is not None

    def selected_protocol_action(self) -> ProtocolAction | None:
        """The original SDK action behind the highlighted row, if any."""
        if self._sdk_actions is None:
            return None
        protocol_index = resolve_selected_protocol_action_index(
            self.selected_action_index(), self._sdk_action_indices
        )
        return self._sdk_actions[protocol_index] if protocol_index is not None else None


def should_rebuild_grouped_items_for_config_change(
    previous: ActionsDialogConfig, new: ActionsDialogConfig
) -> bool:
    """Only the section style changes which rows exist."""
    return previous.section_style != new.section_style


def resolve_selected_protocol_action_index(
    selected_action_index: int | None,
    sdk_action_indices: Sequence[int],
) -> int | None:
    """Map a visible action index back to its position in the SDK list."""
    if selected_action_index is None or selected_action_index >= len(sdk_action_indices):
        return None
    return sdk_action_indices[selected_action_index]


def actions_dialog_empty_state_message(search_text: str) -> str:
    if not search_text.strip():
        return "No actions available"
    return "No actions match your search"
