from __future__ import annotations

from bowling_app.constants import DEFAULT_HIGH_SCORE_LIMIT
from bowling_app.schemas import HighScore


def rank_high_scores(entries: list[HighScore]) -> list[HighScore]:
    return sorted(entries, key=lambda e: (-e.score, e.achieved_at))


def insert_high_score(
    entries: list[HighScore], entry: HighScore, limit: int = DEFAULT_HIGH_SCORE_LIMIT
) -> list[HighScore]:
    """Return the top ``limit`` entries after adding ``entry``.

    Higher scores rank first; on equal scores the earlier ``achieved_at`` wins,
    so a late tie is the first to fall off the board.
    """
    if limit < 1:
        raise ValueError("limit must be at least 1")
    return rank_high_scores([*entries, entry])[:limit]
