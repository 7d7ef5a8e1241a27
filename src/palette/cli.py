"""CLI entry point for exercising the actions palette from a terminal.

Provides commands:
  - rank: Rank SDK actions from a JSON file against a query and show grouped rows
  - shortcut: Format a raw shortcut hint and split it into keycaps
  - slug: Show the deep-link slug and URL for a display name
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from palette.config import load_dialog_config
from palette.deeplink import DEFAULT_DEEPLINK_SCHEME, deeplink_url, to_deeplink_name
from palette.dialog import ActionsDialog
from palette.display import display_grouped_actions
from palette.matching import rank_actions
from palette.models import SectionStyle
from palette.protocol import load_protocol_actions
from palette.shortcuts import format_shortcut_hint, parse_shortcut_keycaps

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Actions palette - rank, group, and format command palette actions",
    rich_markup_mode="rich",
)
console = Console()


@app.callback()
def app_callback(
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Log refilter and navigation details"),
    ] = False,
) -> None:
    """Configure logging for all commands."""
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%H:%M:%S",
        )


@app.command()
def rank(
    actions_file: Annotated[
        Path,
        typer.Argument(help="JSON array of SDK actions"),
    ],
    query: Annotated[str, typer.Argument(help="Search text")] = "",
    style: Annotated[
        SectionStyle | None,
        typer.Option("--style", help="Section style (overrides --config)"),
    ] = None,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Dialog config JSON"),
    ] = None,
) -> None:
    """Rank actions against a query and print the grouped rows.

    Examples:
      palette rank actions.json                    # All actions, original order
      palette rank actions.json copy               # Ranked matches
      palette rank actions.json copy --style headers
    """
    try:
        items = load_protocol_actions(actions_file)
        config = load_dialog_config(config_path)
    except FileNotFoundError as e:
        console.print(f"[red]File not found:[/red] {escape(str(e.filename))}")
        raise typer.Exit(code=1)
    except OSError as e:
        console.print(f"[red]Could not read file:[/red] {escape(str(e))}")
        raise typer.Exit(code=1)
    except ValidationError as e:
        console.print(f"[red]Invalid actions file:[/red] {e.error_count()} error(s)\n{escape(str(e))}")
        raise typer.Exit(code=1)
    except ValueError as e:
        console.print(f"[red]Invalid input:[/red] {escape(str(e))}")
        raise typer.Exit(code=1)

    logger.debug("Loaded %d SDK action(s) from %s", len(items), actions_file)
    if style is not None:
        config.section_style = style

    dialog = ActionsDialog([], config)
    dialog.set_sdk_actions(items)
    dialog.set_search_text(query)

    if not dialog.filtered:
        console.print(f"[yellow]{dialog.empty_state_message()}[/yellow]")
        return

    scores = dict(rank_actions(dialog.actions, query)) if query else None
    display_grouped_actions(
        dialog.actions,
        dialog.filtered,
        dialog.grouped_items,
        config.section_style,
        selected_index=dialog.selected_index,
        scores=scores,
        console=console,
    )
    console.print(f"\n[dim]{len(dialog.filtered)} of {len(dialog.actions)} action(s)[/dim]")


@app.command()
def shortcut(
    raw: Annotated[str, typer.Argument(help='Shortcut hint such as "cmd+shift+c"')],
) -> None:
    """Format a shortcut hint into glyphs and keycaps."""
    formatted = format_shortcut_hint(raw)
    console.print(f"[bold]{escape(formatted)}[/bold]")
    console.print(json.dumps(parse_shortcut_keycaps(formatted), ensure_ascii=False), markup=False)


@app.command()
def slug(
    name: Annotated[str, typer.Argument(help="Script display name")],
    scheme: Annotated[
        str,
        typer.Option("--scheme", help="Deep-link URL scheme"),
    ] = DEFAULT_DEEPLINK_SCHEME,
) -> None:
    """Show the deep-link slug and URL for a name."""
    name_slug = to_deeplink_name(name)
    if not name_slug:
        console.print(f"[yellow]'{escape(name)}' has no letters or digits to build a slug from.[/yellow]")
        raise typer.Exit(code=1)
    console.print(name_slug, markup=False)
    console.print(f"[dim]{deeplink_url(name, scheme)}[/dim]")


if __name__ == "__main__":
    app()
