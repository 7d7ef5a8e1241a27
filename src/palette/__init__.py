"""Ranking and presentation kernel for keyboard-driven actions dialogs."""

__version__ = "0.1.0"

from palette.deeplink import deeplink_url, to_deeplink_name
from palette.grouping import build_grouped_items_static
from palette.matching import filter_actions, fuzzy_match, rank_actions, score_action
from palette.models import (
    Action,
    ActionCategory,
    GroupedActionItem,
    Item,
    SectionHeader,
    SectionStyle,
)
from palette.selection import coerce_action_selection
from palette.shortcuts import format_shortcut_hint, parse_shortcut_keycaps

__all__ = [
    "Action",
    "ActionCategory",
    "GroupedActionItem",
    "Item",
    "SectionHeader",
    "SectionStyle",
    "__version__",
    "build_grouped_items_static",
    "coerce_action_selection",
    "deeplink_url",
    "filter_actions",
    "format_shortcut_hint",
    "fuzzy_match",
    "parse_shortcut_keycaps",
    "rank_actions",
    "score_action",
    "to_deeplink_name",
]
