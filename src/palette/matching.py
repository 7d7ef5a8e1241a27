"""Fuzzy matching and relevance scoring for actions.

Scores are tiered on the title (prefix 100, substring 50, subsequence 25)
with additive bonuses for description (+15) and shortcut (+10) substring
matches. All comparisons use the lowercase caches built into
:class:`~palette.models.Action`, so callers pass an already-lowercased query.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from palette.models import Action

TITLE_PREFIX_SCORE = 100
TITLE_CONTAINS_SCORE = 50
TITLE_FUZZY_SCORE = 25
DESCRIPTION_BONUS = 15
SHORTCUT_BONUS = 10


def fuzzy_match(haystack: str, needle: str) -> bool:
    """Return True if ``needle``'s characters appear in ``haystack`` in order.

    Case-sensitive. An empty needle always matches.
    """
    chars = iter(haystack)
    return all(ch in chars for ch in needle)


def score_action(action: Action, query: str) -> int:
    """Score an action against a lowercased query.

    Args:
        action: Action with precomputed lowercase fields.
        query: Search text, already lowercased by the caller.

    Returns:
        0 when nothing matches; otherwise the title tier plus any
        description and shortcut bonuses.
    """
    title = action.title_lower
    if title.startswith(query):
        score = TITLE_PREFIX_SCORE
    elif query in title:
        score = TITLE_CONTAINS_SCORE
    elif fuzzy_match(title, query):
        score = TITLE_FUZZY_SCORE
    else:
        score = 0

    if action.description_lower is not None and query in action.description_lower:
        score += DESCRIPTION_BONUS
    if action.shortcut_lower is not None and query in action.shortcut_lower:
        score += SHORTCUT_BONUS
    return score


def rank_actions(actions: Sequence[Action], query: str) -> list[tuple[int, int]]:
    """Score every action and return matching ``(index, score)`` pairs.

    Pairs are ordered by score descending. ``sorted`` is stable, so equal
    scores keep their original relative order.
    """
    query = query.lower()
    scored = [
        (idx, score)
        for idx, action in enumerate(actions)
        if (score := score_action(action, query)) > 0
    ]
    return sorted(scored, key=lambda pair: pair[1], reverse=True)


def filter_actions(actions: Sequence[Action], query: str) -> list[int]:
    """Return the display order of action indices for a search query.

    An empty query shows every action in its original order.
    """
    if not query:
        return list(range(len(actions)))
    return [idx for idx, _ in rank_actions(actions, query)]
