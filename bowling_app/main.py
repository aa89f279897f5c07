from __future__ import annotations

import logging
from uuid import UUID

from fastapi import FastAPI, Query, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from bowling_app.config import settings
from bowling_app.exceptions import DomainException, GameNotFound
from bowling_app.repository import InMemoryRepository
from bowling_app.schemas import (
    ErrorResponse,
    Game,
    HighScoresResponse,
    RollInput,
    StartGameRequest,
    TurnResponse,
    TurnRolls,
)
from bowling_app.service import BowlingService

logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_title, version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
repo = InMemoryRepository(high_score_limit=settings.high_score_limit)
service = BowlingService(repo, high_score_limit=settings.high_score_limit)


@app.exception_handler(DomainException)
async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    logger.info("%s %s -> %d %s", request.method, request.url.path, exc.status_code, exc.code.value)
    body = ErrorResponse(error=exc.to_error_body())
    return JSONResponse(status_code=exc.status_code, content=body.model_dump(mode="json"))


@app.get("/")
def root() -> dict[str, str]:
    return {
        "message": settings.app_title,
        "docs": "/docs",
        "health": "/health",
    }


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/api/v1/games", response_model=Game, status_code=status.HTTP_201_CREATED)
def start_game(req: StartGameRequest) -> Game:
    return service.start_game(req.name)


@app.get("/api/v1/games/{game_id}", response_model=Game, responses={404: {"model": ErrorResponse}})
def get_game(game_id: UUID) -> Game:
    game = service.get_game(game_id)
    if game is None:
        raise GameNotFound(game_id)
    return game


def _turn_response(roll: RollInput) -> TurnResponse | JSONResponse:
    result = service.submit_turn(roll.game_id, roll.roll1, roll.roll2, roll.roll3)
    if not result.success:
        body = ErrorResponse(error=result.error)
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump(mode="json"))
    return TurnResponse(status="ok", game=result.game)


@app.post(
    "/api/v1/games/{game_id}/rolls",
    response_model=TurnResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def submit_turn(game_id: UUID, req: TurnRolls) -> TurnResponse | JSONResponse:
    return _turn_response(RollInput(game_id=game_id, **req.model_dump()))


@app.post(
    "/api/v1/rolls",
    response_model=TurnResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def submit_roll_input(req: RollInput) -> TurnResponse | JSONResponse:
    return _turn_response(req)


@app.get("/api/v1/highscores", response_model=HighScoresResponse)
def get_high_scores(
    limit: int = Query(default=settings.high_score_limit, ge=1, le=settings.max_high_score_limit),
) -> HighScoresResponse:
    return HighScoresResponse(limit=limit, high_scores=service.get_high_scores(limit))
