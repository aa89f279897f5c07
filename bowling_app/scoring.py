from __future__ import annotations

from bowling_app.constants import FINAL_FRAME_INDEX, MAX_FRAMES, MAX_PINS
from bowling_app.exceptions import GameCompleteError
from bowling_app.schemas import Frame, Game


def is_strike(frame: Frame) -> bool:
    return frame.roll1 == MAX_PINS


def is_spare(frame: Frame) -> bool:
    return not is_strike(frame) and frame.roll2 is not None and frame.roll1 + frame.roll2 == MAX_PINS


def required_rolls(frame: Frame) -> int:
    if frame.frame_index < FINAL_FRAME_INDEX:
        return 1 if is_strike(frame) else 2
    return 3 if is_strike(frame) or is_spare(frame) else 2


def is_frame_complete(frame: Frame) -> bool:
    return len(frame.rolls) >= required_rolls(frame)


def _rolls_after(frames: list[Frame], index: int) -> list[int]:
    rolls: list[int] = []
    for frame in frames[index + 1 :]:
        rolls.extend(frame.rolls)
    return rolls


def _frame_score(frames: list[Frame], index: int) -> int | None:
    frame = frames[index]
    if not is_frame_complete(frame):
        return None
    if frame.frame_index == FINAL_FRAME_INDEX:
        return sum(frame.rolls)

    bonus_count = 2 if is_strike(frame) else 1 if is_spare(frame) else 0
    if bonus_count == 0:
        return sum(frame.rolls)
    bonus = _rolls_after(frames, index)[:bonus_count]
    if len(bonus) < bonus_count:
        return None
    return MAX_PINS + sum(bonus)


def calculate_frame_scores(frames: list[Frame]) -> list[Frame]:
    """Rescore every frame from scratch.

    Strike and spare bonuses depend on later rolls, so the whole sequence is
    recomputed after each append. Frames whose bonus rolls have not been
    bowled yet keep ``score=None``.
    """
    scored: list[Frame] = []
    running: int | None = 0
    for index, frame in enumerate(frames):
        score = _frame_score(frames, index)
        running = running + score if running is not None and score is not None else None
        scored.append(frame.model_copy(update={"score": score, "running_total": running}))
    return scored


def record_frame(game: Game, frame: Frame) -> Game:
    if len(game.frames) >= MAX_FRAMES:
        raise GameCompleteError(game.id)

    frame = frame.model_copy(update={"frame_index": len(game.frames)})
    frames = calculate_frame_scores([*game.frames, frame])

    completed = sum(1 for f in frames if is_frame_complete(f))
    is_complete = len(frames) == MAX_FRAMES and is_frame_complete(frames[-1])
    return game.model_copy(
        update={
            "frames": frames,
            "total_score": sum(f.score for f in frames if f.score is not None),
            "current_frame_index": completed,
            "is_complete": is_complete,
        }
    )
