"""Rich display of grouped action rows for the developer CLI.

Headers become bold rows, the ``SEPARATORS`` style becomes table sections,
and shortcuts are drawn as spaced keycaps.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from palette.grouping import should_render_section_separator
from palette.models import (
    Action,
    GroupedActionItem,
    SectionHeader,
    SectionStyle,
    is_destructive_action,
)
from palette.shortcuts import parse_shortcut_keycaps


def keycap_text(shortcut: str | None) -> str:
    """Render a glyph shortcut as space-separated keycaps (``"⌘ ⇧ C"``)."""
    if not shortcut:
        return ""
    return " ".join(parse_shortcut_keycaps(shortcut))


def display_grouped_actions(
    actions: Sequence[Action],
    filtered: Sequence[int],
    rows: Sequence[GroupedActionItem],
    style: SectionStyle,
    selected_index: int | None = None,
    scores: Mapping[int, int] | None = None,
    console: Console | None = None,
) -> None:
    """Print grouped rows as a table.

    Args:
        actions: The unfiltered action list.
        filtered: Display order used to build ``rows``.
        rows: Output of ``build_grouped_items_static``.
        style: Section style ``rows`` were built with.
        selected_index: Row to mark as highlighted.
        scores: Optional relevance score per action index.
        console: Optional Console for testing.
    """
    con = console or Console()

    table = Table(show_header=True, header_style="bold")
    table.add_column("", width=1)
    table.add_column("Action", style="cyan")
    table.add_column("Description", style="dim")
    table.add_column("Shortcut", justify="right")
    if scores is not None:
        table.add_column("Score", justify="right", style="green")

    position = 0
    for row_index, row in enumerate(rows):
        if isinstance(row, SectionHeader):
            table.add_row("", Text(row.title, style="bold magenta"))
            continue

        if style is SectionStyle.SEPARATORS and should_render_section_separator(
            actions, filtered, position
        ):
            table.add_section()
        position += 1

        action = actions[row.index]
        marker = "›" if row_index == selected_index else ""
        title = Text(action.title, style="red" if is_destructive_action(action) else "")
        cells: list[object] = [marker, title, action.description or "", keycap_text(action.shortcut)]
        if scores is not None:
            cells.append(str(scores.get(row.index, "")))
        table.add_row(*cells)

    con.print(table)
