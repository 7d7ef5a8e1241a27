"""Configuration for the actions dialog and the command bar presets."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from palette.models import AnchorPosition, SearchPosition, SectionStyle

logger = logging.getLogger(__name__)


@dataclass
class ActionsDialogConfig:
    """Layout options for one actions dialog."""

    search_position: SearchPosition = SearchPosition.TOP
    section_style: SectionStyle = SectionStyle.SEPARATORS
    anchor: AnchorPosition = AnchorPosition.BOTTOM
    show_icons: bool = False
    show_footer: bool = False

    def __post_init__(self) -> None:
        """Coerce enum fields given as plain strings."""
        self.search_position = SearchPosition(self.search_position)
        self.section_style = SectionStyle(self.section_style)
        self.anchor = AnchorPosition(self.anchor)


@dataclass
class CommandBarConfig:
    """Dialog layout plus close behavior for a command bar.

    The classmethod presets cover the surfaces that embed a command bar.
    """

    dialog_config: ActionsDialogConfig = field(default_factory=ActionsDialogConfig)
    close_on_select: bool = True
    close_on_click_outside: bool = True
    close_on_escape: bool = True

    @classmethod
    def main_menu_style(cls) -> CommandBarConfig:
        """Search at the bottom, separators between sections."""
        return cls(
            dialog_config=ActionsDialogConfig(
                search_position=SearchPosition.BOTTOM,
                section_style=SectionStyle.SEPARATORS,
                anchor=AnchorPosition.BOTTOM,
            )
        )

    @classmethod
    def ai_style(cls) -> CommandBarConfig:
        """Search at the top, section headers, icons and footer."""
        return cls(
            dialog_config=ActionsDialogConfig(
                search_position=SearchPosition.TOP,
                section_style=SectionStyle.HEADERS,
                anchor=AnchorPosition.TOP,
                show_icons=True,
                show_footer=True,
            )
        )

    @classmethod
    def no_search(cls) -> CommandBarConfig:
        """Search hidden; the host handles typing itself."""
        return cls(
            dialog_config=ActionsDialogConfig(
                search_position=SearchPosition.HIDDEN,
                section_style=SectionStyle.SEPARATORS,
                anchor=AnchorPosition.BOTTOM,
            )
        )

    @classmethod
    def notes_style(cls) -> CommandBarConfig:
        """Search at the top with separators, icons and footer."""
        return cls(
            dialog_config=ActionsDialogConfig(
                search_position=SearchPosition.TOP,
                section_style=SectionStyle.SEPARATORS,
                anchor=AnchorPosition.TOP,
                show_icons=True,
                show_footer=True,
            )
        )


def load_dialog_config(config_path: Path | None = None) -> ActionsDialogConfig:
    """Load dialog configuration from JSON, merging over defaults.

    Missing files yield the defaults. Unrecognized keys are ignored.

    Args:
        config_path: Path to a JSON object such as
            ``{"section_style": "headers", "show_icons": true}``.

    Returns:
        ActionsDialogConfig with file values applied.

    Raises:
        ValueError: If the file is not a JSON object or an enum value is
            not recognized.
    """
    if config_path is None or not config_path.exists():
        return ActionsDialogConfig()

    with open(config_path, encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Dialog config must be a JSON object: {config_path}")

    field_names = set(ActionsDialogConfig.__dataclass_fields__)
    kwargs = {k: v for k, v in data.items() if k in field_names}
    ignored = sorted(set(data) - field_names)
    if ignored:
        logger.warning("Ignoring unknown dialog config keys: %s", ", ".join(ignored))

    return ActionsDialogConfig(**kwargs)
