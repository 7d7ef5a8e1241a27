"""Keyboard shortcut formatting, keycap tokenizing, and key intents.

Shortcut hints arrive as ``+``-joined tokens such as ``"cmd+shift+c"`` and
are displayed as glyph strings such as ``"⌘⇧C"``. The renderer draws one
keycap per glyph, so :func:`parse_shortcut_keycaps` splits a glyph string
back into keycap tokens.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

MODIFIER_GLYPHS: dict[str, str] = {
    "cmd": "⌘",
    "command": "⌘",
    "meta": "⌘",
    "super": "⌘",
    "shift": "⇧",
    "ctrl": "⌃",
    "control": "⌃",
    "alt": "⌥",
    "opt": "⌥",
    "option": "⌥",
}

KEY_GLYPHS: dict[str, str] = {
    "enter": "↵",
    "return": "↵",
    "escape": "⎋",
    "esc": "⎋",
    "tab": "⇥",
    "space": "␣",
    "backspace": "⌫",
    "delete": "⌫",
    "up": "↑",
    "arrowup": "↑",
    "down": "↓",
    "arrowdown": "↓",
    "left": "←",
    "arrowleft": "←",
    "right": "→",
    "arrowright": "→",
}

KEYCAP_GLYPHS = frozenset("⌘⌃⌥⇧↵⎋⇥␣⌫↑↓←→")


def _split_hint(raw: str) -> list[str]:
    stripped = raw.strip()
    tokens = [token.strip() for token in stripped.split("+")]
    # A trailing "+" is the plus key itself ("cmd++"); "cmd+ " is a dangling separator
    if len(tokens) > 1 and (raw.endswith("+") or stripped.endswith("++")):
        return [token for token in tokens[:-1] if token] + ["+"]
    return [token for token in tokens if token]


def format_shortcut_hint(raw: str) -> str:
    """Convert a raw shortcut hint to its display glyphs.

    All tokens but the last are modifiers; glyphs keep the order the
    modifiers were written in. Unrecognized tokens are uppercased.

    Args:
        raw: Hint such as ``"cmd+shift+c"`` or ``"esc"`` (case-insensitive).

    Returns:
        Glyph string such as ``"⌘⇧C"`` or ``"⎋"``.
    """
    tokens = _split_hint(raw)
    if not tokens:
        return ""

    *modifiers, key = tokens
    glyphs = [MODIFIER_GLYPHS.get(mod.lower(), mod.upper()) for mod in modifiers]

    key_lower = key.lower()
    if key_lower in KEY_GLYPHS:
        glyphs.append(KEY_GLYPHS[key_lower])
    elif key_lower in MODIFIER_GLYPHS:
        glyphs.append(MODIFIER_GLYPHS[key_lower])
    else:
        glyphs.append(key.upper())
    return "".join(glyphs)


def parse_shortcut_keycaps(formatted: str) -> list[str]:
    """Split a glyph string into one token per keycap.

    ``"⌘↵"`` gives ``["⌘", "↵"]`` and ``"⌘c"`` gives ``["⌘", "C"]``. Any
    character that is not a known glyph is uppercased into its own keycap,
    so ``"⌘F12"`` yields four keycaps.
    """
    keycaps: list[str] = []
    for ch in formatted:
        if ch in KEYCAP_GLYPHS:
            keycaps.append(ch)
        else:
            keycaps.append(ch.upper())
    return keycaps


class KeyIntent(str, Enum):
    """What a key press means to an open actions dialog."""

    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    MOVE_HOME = "move_home"
    MOVE_END = "move_end"
    MOVE_PAGE_UP = "move_page_up"
    MOVE_PAGE_DOWN = "move_page_down"
    EXECUTE = "execute"
    CLOSE = "close"
    BACKSPACE = "backspace"
    TYPE_CHAR = "type_char"


@dataclass(frozen=True)
class KeyPress:
    """A resolved key intent. ``char`` is set only for ``TYPE_CHAR``."""

    intent: KeyIntent
    char: str | None = None


_NAMED_INTENTS: dict[str, KeyIntent] = {
    "up": KeyIntent.MOVE_UP,
    "arrowup": KeyIntent.MOVE_UP,
    "down": KeyIntent.MOVE_DOWN,
    "arrowdown": KeyIntent.MOVE_DOWN,
    "home": KeyIntent.MOVE_HOME,
    "end": KeyIntent.MOVE_END,
    "pageup": KeyIntent.MOVE_PAGE_UP,
    "pagedown": KeyIntent.MOVE_PAGE_DOWN,
    "enter": KeyIntent.EXECUTE,
    "return": KeyIntent.EXECUTE,
    "escape": KeyIntent.CLOSE,
    "esc": KeyIntent.CLOSE,
    "backspace": KeyIntent.BACKSPACE,
    "delete": KeyIntent.BACKSPACE,
}

_NON_TEXT_KEYS = frozenset({
    "tab",
    "left",
    "arrowleft",
    "right",
    "arrowright",
    "shift",
    "control",
    "alt",
    "meta",
    "cmd",
    "command",
    "capslock",
    "numlock",
    "scrolllock",
})


def key_intent(
    key: str,
    *,
    platform: bool = False,
    control: bool = False,
    alt: bool = False,
) -> KeyPress | None:
    """Resolve a key name plus held modifiers to a dialog intent.

    Args:
        key: Key name as reported by the UI toolkit (``"down"``, ``"a"``...).
        platform: Whether the command/super modifier is held.
        control: Whether control is held.
        alt: Whether alt/option is held.

    Returns:
        The resolved :class:`KeyPress`, or ``None`` when the key should be
        ignored by the dialog.
    """
    key_lower = key.lower()
    if key_lower in _NAMED_INTENTS:
        return KeyPress(_NAMED_INTENTS[key_lower])
    if key_lower == "space":
        return KeyPress(KeyIntent.TYPE_CHAR, " ")
    if key_lower in _NON_TEXT_KEYS:
        return None

    if not (platform or control or alt) and key:
        ch = key[0]
        if ch.isalnum() or ch.isspace() or ch in "-_":
            return KeyPress(KeyIntent.TYPE_CHAR, ch)
    return None
