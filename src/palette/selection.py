"""Keyboard selection over grouped rows, skipping section headers.

Every function takes the grouped rows and a row index and returns a row
index that lands on an :class:`~palette.models.Item`, or ``None`` when no
item exists.
"""

from __future__ import annotations

from collections.abc import Sequence

from palette.models import GroupedActionItem, Item

PAGE_JUMP = 8


def is_selectable_row(row: GroupedActionItem) -> bool:
    return isinstance(row, Item)


def coerce_action_selection(rows: Sequence[GroupedActionItem], index: int) -> int | None:
    """Return the nearest selectable row for a candidate index.

    Out-of-range indices are clamped to the last row. When the index lands
    on a header, the next item below wins; failing that, the nearest item
    above.

    Args:
        rows: Grouped display rows.
        index: Candidate row index (non-negative).

    Returns:
        A row index holding an ``Item``, or ``None`` if there are none.
    """
    if not rows:
        return None

    index = min(index, len(rows) - 1)
    if is_selectable_row(rows[index]):
        return index

    for j in range(index + 1, len(rows)):
        if is_selectable_row(rows[j]):
            return j
    for j in range(index - 1, -1, -1):
        if is_selectable_row(rows[j]):
            return j
    return None


def initial_selection_index(rows: Sequence[GroupedActionItem]) -> int:
    """Row to highlight when a list is first shown (0 if nothing is selectable)."""
    selected = coerce_action_selection(rows, 0)
    return selected if selected is not None else 0


def first_selectable_index(rows: Sequence[GroupedActionItem]) -> int | None:
    return next((j for j, row in enumerate(rows) if is_selectable_row(row)), None)


def last_selectable_index(rows: Sequence[GroupedActionItem]) -> int | None:
    return next(
        (j for j in range(len(rows) - 1, -1, -1) if is_selectable_row(rows[j])),
        None,
    )


def selectable_index_at_or_before(rows: Sequence[GroupedActionItem], start: int) -> int | None:
    if not rows:
        return None
    start = min(start, len(rows) - 1)
    return next((j for j in range(start, -1, -1) if is_selectable_row(rows[j])), None)


def selectable_index_at_or_after(rows: Sequence[GroupedActionItem], start: int) -> int | None:
    if not rows:
        return None
    start = min(start, len(rows) - 1)
    return next((j for j in range(start, len(rows)) if is_selectable_row(rows[j])), None)


def move_up(rows: Sequence[GroupedActionItem], index: int) -> int:
    """Nearest item strictly above ``index``; ``index`` itself if there is none."""
    for j in range(min(index, len(rows)) - 1, -1, -1):
        if is_selectable_row(rows[j]):
            return j
    return index


def move_down(rows: Sequence[GroupedActionItem], index: int) -> int:
    """Nearest item strictly below ``index``; ``index`` itself if there is none."""
    for j in range(index + 1, len(rows)):
        if is_selectable_row(rows[j]):
            return j
    return index


def page_up(rows: Sequence[GroupedActionItem], index: int, jump: int = PAGE_JUMP) -> int:
    """Move up by ``jump`` rows, snapping to an item at or before the target."""
    if not rows:
        return index
    target = max(index - jump, 0)
    selected = selectable_index_at_or_before(rows, target)
    if selected is None:
        selected = first_selectable_index(rows)
    return selected if selected is not None else index


def page_down(rows: Sequence[GroupedActionItem], index: int, jump: int = PAGE_JUMP) -> int:
    """Move down by ``jump`` rows, snapping to an item at or after the target."""
    if not rows:
        return index
    target = min(index + jump, len(rows) - 1)
    selected = selectable_index_at_or_after(rows, target)
    if selected is None:
        selected = last_selectable_index(rows)
    return selected if selected is not None else index
