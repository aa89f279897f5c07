from __future__ import annotations

import logging
from uuid import UUID

from bowling_app.exceptions import GameNotFound
from bowling_app.repository import InMemoryRepository
from bowling_app.schemas import Frame, Game, HighScore, RollInput, TurnResult
from bowling_app.scoring import record_frame
from bowling_app.validators import validate_roll_input

logger = logging.getLogger(__name__)


class BowlingService:
    """Entry point used by the API layer.

    Rolls go through ``validate_roll_input`` before ``record_frame`` ever sees
    them; a rejected turn comes back as a ``TurnResult`` with ``success=False``
    and leaves the stored game untouched.
    """

    def __init__(self, repo: InMemoryRepository, high_score_limit: int | None = None) -> None:
        self.repo = repo
        self.high_score_limit = high_score_limit

    def start_game(self, name: str) -> Game:
        game = self.repo.create_game(name)
        logger.info("Started game %s for %r", game.id, game.name)
        return game

    def get_game(self, game_id: UUID) -> Game | None:
        return self.repo.get_game(game_id)

    def _require_game(self, game_id: UUID) -> Game:
        game = self.repo.get_game(game_id)
        if game is None:
            raise GameNotFound(game_id)
        return game

    def submit_turn(
        self,
        game_id: UUID,
        roll1: int,
        roll2: int | None = None,
        roll3: int | None = None,
    ) -> TurnResult:
        roll = RollInput(game_id=game_id, roll1=roll1, roll2=roll2, roll3=roll3)
        with self.repo.game_lock(game_id):
            game = self._require_game(game_id)
            frame_index = game.current_frame_index
            error = validate_roll_input(roll, frame_index)
            if error is not None:
                logger.warning("Rejected turn for game %s frame %d: %s", game_id, frame_index, error.code.value)
                return TurnResult(success=False, error=error, game=game)

            frame = Frame(frame_index=frame_index, roll1=roll.roll1, roll2=roll.roll2, roll3=roll.roll3)
            game = self.repo.save_game(record_frame(game, frame))
            logger.info("Game %s frame %d recorded, total=%d", game_id, frame_index, game.total_score)

        if game.is_complete:
            self._offer_high_score(game)
        return TurnResult(success=True, game=game)

    def _offer_high_score(self, game: Game) -> None:
        entry = HighScore(
            name=game.name,
            score=game.total_score,
            achieved_at=self.repo.utcnow(),
            game_id=game.id,
        )
        board = self.repo.add_high_score(entry, self.high_score_limit)
        if any(e.game_id == game.id for e in board):
            logger.info("Game %s entered the high scores with %d", game.id, game.total_score)
        else:
            logger.info("Game %s finished with %d, below the high scores", game.id, game.total_score)

    def get_high_scores(self, limit: int | None = None) -> list[HighScore]:
        return self.repo.get_top_high_scores(limit)
