from __future__ import annotations

from bowling_app.constants import FINAL_FRAME_INDEX, MAX_PINS
from bowling_app.schemas import ErrorBody, ErrorCode, RollInput


def _reject(code: ErrorCode, message: str, **details) -> ErrorBody:
    return ErrorBody(code=code, message=message, details=details or None)


def _sequence_error(message: str, frame_index: int) -> ErrorBody:
    return _reject(ErrorCode.invalid_roll_sequence, message, frame_index=frame_index)


def _validate_regular_frame(roll: RollInput, frame_index: int) -> ErrorBody | None:
    if roll.roll3 is not None:
        return _sequence_error("roll3 is only allowed in the final frame", frame_index)
    if roll.roll1 == MAX_PINS:
        if roll.roll2 is not None:
            return _sequence_error("a strike ends the frame; roll2 must be empty", frame_index)
        return None
    if roll.roll2 is None:
        return _sequence_error("roll2 is required unless roll1 is a strike", frame_index)
    if roll.roll1 + roll.roll2 > MAX_PINS:
        return _sequence_error(f"roll1 + roll2 cannot exceed {MAX_PINS} pins", frame_index)
    return None


def _validate_final_frame(roll: RollInput) -> ErrorBody | None:
    frame_index = FINAL_FRAME_INDEX
    if roll.roll2 is None:
        return _sequence_error("roll2 is required in the final frame", frame_index)

    strike = roll.roll1 == MAX_PINS
    if not strike and roll.roll1 + roll.roll2 > MAX_PINS:
        return _sequence_error(f"roll1 + roll2 cannot exceed {MAX_PINS} pins", frame_index)

    earns_bonus = strike or roll.roll1 + roll.roll2 == MAX_PINS
    if earns_bonus and roll.roll3 is None:
        return _sequence_error("roll3 is required after a strike or spare in the final frame", frame_index)
    if not earns_bonus and roll.roll3 is not None:
        return _sequence_error("roll3 is only allowed after a strike or spare in the final frame", frame_index)
    return None


def validate_roll_input(roll: RollInput, current_frame_index: int) -> ErrorBody | None:
    """Check a submitted frame against the rules for ``current_frame_index``.

    Returns ``None`` when the rolls are acceptable, otherwise an ``ErrorBody``
    describing the first rule that failed. Never raises and never mutates.
    """
    if not 0 <= current_frame_index <= FINAL_FRAME_INDEX:
        return _reject(ErrorCode.game_already_complete, "game is already complete")

    for name in ("roll1", "roll2", "roll3"):
        value = getattr(roll, name)
        if value is not None and not 0 <= value <= MAX_PINS:
            return _reject(
                ErrorCode.invalid_pin_count,
                f"{name} must be between 0 and {MAX_PINS}",
                roll=name,
                value=value,
            )

    if current_frame_index < FINAL_FRAME_INDEX:
        return _validate_regular_frame(roll, current_frame_index)
    return _validate_final_frame(roll)
