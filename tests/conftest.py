"""Shared pytest fixtures for the actions palette tests.

Provides a small sectioned action list resembling the script-list context
and an SDK actions JSON file.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from palette.models import Action, ActionCategory


@pytest.fixture
def script_actions() -> list[Action]:
    """Six actions across three sections, in builder order.

    Sections: Actions (run, edit), Share (copy_deeplink, copy_path),
    Destructive (reset_ranking, move_to_trash).
    """
    return [
        Action("run_script", "Run Script", "Run this script", section="Actions", shortcut="↵"),
        Action("edit_script", "Edit Script", "Edit the script file", section="Actions", shortcut="⌘E"),
        Action("copy_deeplink", "Copy Deeplink", "Copy a deep link URL", section="Share", shortcut="⌘⇧D"),
        Action("copy_path", "Copy Path", "Copy the script path", section="Share", shortcut="⌘⇧C"),
        Action(
            "reset_ranking",
            "Reset Ranking",
            "Forget how often this script was used",
            category=ActionCategory.SCRIPT_OPS,
            section="Destructive",
        ),
        Action(
            "move_to_trash",
            "Move to Trash",
            "Delete the script file",
            category=ActionCategory.SCRIPT_OPS,
            section="Destructive",
            shortcut="⌘⌫",
        ),
    ]


@pytest.fixture
def sdk_actions_file(tmp_path: Path) -> Path:
    """JSON file of SDK actions, including one hidden action."""
    path = tmp_path / "actions.json"
    path.write_text(
        json.dumps(
            [
                {"name": "Open in Browser", "description": "Open the page", "shortcut": "cmd+o"},
                {"name": "Copy URL", "shortcut": "cmd+shift+c", "value": "url"},
                {"name": "Hidden", "visible": False},
                {"name": "Submit", "hasAction": True, "shortcut": "enter"},
            ]
        ),
        encoding="utf-8",
    )
    return path
