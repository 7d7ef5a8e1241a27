"""Data models and enums for the actions dialog."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Union

from palette.shortcuts import format_shortcut_hint


class ActionCategory(str, Enum):
    """Category tag carried by every action. Opaque to ranking and grouping."""

    SCRIPT_CONTEXT = "script_context"
    SCRIPT_OPS = "script_ops"
    GLOBAL_OPS = "global_ops"
    TERMINAL = "terminal"


class SectionStyle(str, Enum):
    """How sections are presented in the grouped row list."""

    HEADERS = "headers"
    SEPARATORS = "separators"
    NONE = "none"


class SearchPosition(str, Enum):
    """Where the search input sits relative to the list."""

    TOP = "top"
    BOTTOM = "bottom"
    HIDDEN = "hidden"


class AnchorPosition(str, Enum):
    """Which edge the popup grows from."""

    TOP = "top"
    BOTTOM = "bottom"


def _lower(value: str | None) -> str | None:
    return value.lower() if value is not None else None


@dataclass(frozen=True, slots=True)
class Action:
    """A single selectable command in the actions dialog.

    The ``*_lower`` fields are derived from their source fields when the
    action is built and cannot be passed in. Use the ``with_*`` methods to
    get a modified copy; the lowercase caches are recomputed on every copy.
    """

    id: str
    title: str
    description: str | None = None
    category: ActionCategory = ActionCategory.SCRIPT_CONTEXT
    shortcut: str | None = None  # pre-formatted glyphs, e.g. "⌘⇧C"
    icon: str | None = None
    section: str | None = None  # None means ungrouped
    has_action: bool = False  # True only for SDK-defined actions
    value: str | None = None
    title_lower: str = field(init=False, repr=False, compare=False)
    description_lower: str | None = field(init=False, repr=False, compare=False)
    shortcut_lower: str | None = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "title_lower", self.title.lower())
        object.__setattr__(self, "description_lower", _lower(self.description))
        object.__setattr__(self, "shortcut_lower", _lower(self.shortcut))

    def with_description(self, description: str | None) -> Action:
        return replace(self, description=description)

    def with_shortcut(self, shortcut: str | None) -> Action:
        """Return a copy with an already-formatted glyph shortcut."""
        return replace(self, shortcut=shortcut)

    def with_shortcut_hint(self, raw: str) -> Action:
        """Return a copy with ``raw`` (e.g. ``"cmd+shift+c"``) formatted to glyphs."""
        return replace(self, shortcut=format_shortcut_hint(raw))

    def with_icon(self, icon: str | None) -> Action:
        return replace(self, icon=icon)

    def with_section(self, section: str | None) -> Action:
        return replace(self, section=section)

    def with_value(self, value: str | None) -> Action:
        return replace(self, value=value)

    def with_has_action(self, has_action: bool) -> Action:
        return replace(self, has_action=has_action)


@dataclass(frozen=True, slots=True)
class SectionHeader:
    """A non-selectable header row naming a section."""

    title: str


@dataclass(frozen=True, slots=True)
class Item:
    """A selectable row. ``index`` points into the unfiltered action list."""

    index: int


GroupedActionItem = Union[SectionHeader, Item]


_DESTRUCTIVE_IDS = frozenset({"move_to_trash", "reset_ranking", "clear_conversation"})
_DESTRUCTIVE_TITLE_PREFIXES = ("remove ", "delete ", "clear ", "move to trash")


def is_destructive_action(action: Action) -> bool:
    """Whether an action should be styled as destructive.

    Stable ids are checked first, then title prefixes for SDK-defined
    actions whose ids are arbitrary.
    """
    action_id = action.id
    if (
        action_id in _DESTRUCTIVE_IDS
        or action_id.startswith(("remove_", "delete_"))
        or "_delete" in action_id
        or "_trash" in action_id
    ):
        return True
    return action.title_lower.startswith(_DESTRUCTIVE_TITLE_PREFIXES)
