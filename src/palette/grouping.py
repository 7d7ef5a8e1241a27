"""Section-aware grouping of a filtered action list into display rows."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from palette.models import GroupedActionItem, Item, SectionHeader, SectionStyle

if TYPE_CHECKING:
    from palette.models import Action

_NO_PREVIOUS = object()


def build_grouped_items_static(
    actions: Sequence[Action],
    filtered: Sequence[int],
    style: SectionStyle,
) -> list[GroupedActionItem]:
    """Build the display rows for ``filtered`` under a section style.

    With ``HEADERS``, a header is emitted before an item whose section is
    set and differs from the section of the item shown just before it.
    Headers follow local adjacency, so a section can get a second header
    after another section (or an unsectioned item) interrupts it. The
    other styles emit items only.

    Args:
        actions: The unfiltered action list.
        filtered: Indices into ``actions`` in display order.
        style: Section presentation style.

    Returns:
        Rows whose ``Item.index`` values index into ``actions``.
    """
    rows: list[GroupedActionItem] = []
    if style is not SectionStyle.HEADERS:
        rows.extend(Item(idx) for idx in filtered)
        return rows

    previous: object = _NO_PREVIOUS
    for idx in filtered:
        section = actions[idx].section
        if section is not None and section != previous:
            rows.append(SectionHeader(section))
        rows.append(Item(idx))
        previous = section
    return rows


def count_section_headers(actions: Sequence[Action], filtered: Sequence[int]) -> int:
    """Number of headers the ``HEADERS`` style produces for ``filtered``."""
    rows = build_grouped_items_static(actions, filtered, SectionStyle.HEADERS)
    return sum(1 for row in rows if isinstance(row, SectionHeader))


def should_render_section_separator(
    actions: Sequence[Action],
    filtered: Sequence[int],
    position: int,
) -> bool:
    """Whether a divider belongs above the item at ``position`` in ``filtered``.

    Used by the ``SEPARATORS`` style: a divider is drawn wherever two
    adjacent items have different sections.
    """
    if position <= 0 or position >= len(filtered):
        return False
    return actions[filtered[position - 1]].section != actions[filtered[position]].section
