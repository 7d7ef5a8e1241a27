"""SDK-defined actions: validation and conversion to :class:`Action`.

Scripts can replace the built-in action list with their own actions. The
``has_action`` flag decides routing when one is chosen: ``True`` sends an
action-triggered event back to the script, ``False`` submits ``value``.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from palette.models import Action, ActionCategory
from palette.shortcuts import format_shortcut_hint

logger = logging.getLogger(__name__)


class ProtocolAction(BaseModel):
    """An action as sent by a script over the SDK protocol."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str = Field(min_length=1)
    description: str | None = None
    shortcut: str | None = None  # raw hint, e.g. "cmd+shift+c"
    value: str | None = None
    has_action: bool = Field(default=False, alias="hasAction")
    visible: bool = True


_PROTOCOL_LIST = TypeAdapter(list[ProtocolAction])


def actions_from_protocol(
    items: Iterable[ProtocolAction],
) -> tuple[list[Action], list[int]]:
    """Convert visible SDK actions into dialog actions.

    Args:
        items: Actions in the order the script sent them.

    Returns:
        ``(actions, protocol_indices)`` where ``protocol_indices[i]`` is the
        position in ``items`` that ``actions[i]`` came from.
    """
    actions: list[Action] = []
    protocol_indices: list[int] = []
    seen: set[str] = set()
    duplicates: list[str] = []
    total = 0

    for protocol_index, item in enumerate(items):
        total += 1
        if not item.visible:
            continue
        if item.name in seen:
            duplicates.append(item.name)
        seen.add(item.name)

        shortcut = format_shortcut_hint(item.shortcut) if item.shortcut else None
        actions.append(
            Action(
                id=item.name,
                title=item.name,
                description=item.description,
                category=ActionCategory.SCRIPT_CONTEXT,
                shortcut=shortcut,
                has_action=item.has_action,
                value=item.value,
            )
        )
        protocol_indices.append(protocol_index)

    if duplicates:
        logger.warning(
            "SDK actions contain duplicate names %s; mapping by row position",
            duplicates,
        )
    logger.debug("SDK actions converted: %d visible of %d total", len(actions), total)
    return actions, protocol_indices


def parse_protocol_actions(data: object) -> list[ProtocolAction]:
    """Validate decoded JSON as a list of SDK actions.

    Raises:
        pydantic.ValidationError: If ``data`` is not a list of valid actions.
    """
    return _PROTOCOL_LIST.validate_python(data)


def load_protocol_actions(path: Path) -> list[ProtocolAction]:
    """Read a JSON array of SDK actions from ``path``."""
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    return parse_protocol_actions(data)
