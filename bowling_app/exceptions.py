from __future__ import annotations

from uuid import UUID

from bowling_app.schemas import ErrorBody, ErrorCode


class DomainException(Exception):
    """Base class for errors surfaced to API callers with a fixed status."""

    def __init__(self, status_code: int, code: ErrorCode, message: str, *, details: dict | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.code = code
        self.message = message
        self.details = details

    def to_error_body(self) -> ErrorBody:
        return ErrorBody(code=self.code, message=self.message, details=self.details)


class GameNotFound(DomainException):
    def __init__(self, game_id: UUID) -> None:
        super().__init__(
            status_code=404,
            code=ErrorCode.game_not_found,
            message=f"game '{game_id}' not found",
            details={"game_id": str(game_id)},
        )


class GameCompleteError(DomainException):
    def __init__(self, game_id: UUID) -> None:
        super().__init__(
            status_code=409,
            code=ErrorCode.game_already_complete,
            message=f"game '{game_id}' already has all of its frames",
            details={"game_id": str(game_id)},
        )
