from __future__ import annotations

from datetime import datetime, timezone
from threading import Lock
from uuid import UUID, uuid4

from bowling_app.constants import DEFAULT_HIGH_SCORE_LIMIT
from bowling_app.exceptions import GameNotFound
from bowling_app.leaderboard import insert_high_score, rank_high_scores
from bowling_app.schemas import Game, HighScore


class InMemoryRepository:
    def __init__(self, high_score_limit: int = DEFAULT_HIGH_SCORE_LIMIT) -> None:
        self._high_score_limit = high_score_limit
        self._games: dict[UUID, Game] = {}
        self._high_scores: list[HighScore] = []
        self._game_locks: dict[UUID, Lock] = {}
        self._lock = Lock()

    def utcnow(self) -> datetime:
        return datetime.now(timezone.utc)

    def game_lock(self, game_id: UUID) -> Lock:
        """Lock serialising turn submissions for a single game."""
        with self._lock:
            lock = self._game_locks.get(game_id)
            if lock is None:
                raise GameNotFound(game_id)
            return lock

    def create_game(self, name: str) -> Game:
        with self._lock:
            game = Game(id=uuid4(), name=name, created_at=self.utcnow())
            self._games[game.id] = game
            self._game_locks[game.id] = Lock()
            return game

    def get_game(self, game_id: UUID) -> Game | None:
        with self._lock:
            return self._games.get(game_id)

    def save_game(self, game: Game) -> Game:
        """Persist a rescored game. Frames already stored are never dropped."""
        with self._lock:
            stored = self._games.get(game.id)
            if stored is None:
                raise GameNotFound(game.id)
            if len(game.frames) < len(stored.frames):
                raise ValueError("a saved game cannot lose frames")
            self._games[game.id] = game
            return game

    def get_top_high_scores(self, limit: int | None = None) -> list[HighScore]:
        limit = self._high_score_limit if limit is None else limit
        with self._lock:
            return rank_high_scores(self._high_scores)[:limit]

    def add_high_score(self, entry: HighScore, limit: int | None = None) -> list[HighScore]:
        limit = self._high_score_limit if limit is None else limit
        with self._lock:
            self._high_scores = insert_high_score(self._high_scores, entry, limit)
            return list(self._high_scores)
