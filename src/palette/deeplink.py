"""URL-safe slugs for deep-linking to scripts by display name."""

from __future__ import annotations

import unicodedata

DEFAULT_DEEPLINK_SCHEME = "scriptkit"


def _is_slug_char(ch: str) -> bool:
    # Combining marks stay attached to their base letter (Devanagari, Thai)
    return ch.isalnum() or unicodedata.category(ch).startswith("M")


def to_deeplink_name(name: str) -> str:
    """Convert a display name into a deep-link slug.

    Letters are lowercased, Unicode letters and digits (CJK, accented Latin)
    are kept as raw characters, and every run of other characters becomes a
    single hyphen. Leading and trailing hyphens are dropped, so a name with
    no letters or digits yields an empty string.

    Examples:
        >>> to_deeplink_name("Hello World")
        'hello-world'
        >>> to_deeplink_name("a---b___c")
        'a-b-c'
        >>> to_deeplink_name("Hello 世界!")
        'hello-世界'
    """
    parts: list[str] = []
    word: list[str] = []
    for ch in name.lower():
        if _is_slug_char(ch):
            word.append(ch)
        elif word:
            parts.append("".join(word))
            word = []
    if word:
        parts.append("".join(word))
    return "-".join(parts)


def deeplink_url(name: str, scheme: str = DEFAULT_DEEPLINK_SCHEME) -> str:
    """Build the ``<scheme>://run/<slug>`` URL that launches ``name``."""
    return f"{scheme}://run/{to_deeplink_name(name)}"
