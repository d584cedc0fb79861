"""Game REST API. Every route works on the GameStore held in app.state."""

import logging

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel, Field

from models.category import Category
from models.dice import DICE_COUNT
from models.snapshot import GameSnapshot
from services import game_actions
from services.game_actions import ActionResult
from services.store import GameStore

router = APIRouter(tags=["games"])
logger = logging.getLogger(__name__)


class HoldRequest(BaseModel):
    index: int = Field(strict=True, ge=0, lt=DICE_COUNT, description="0-based die position")


class ScoreRequest(BaseModel):
    category: Category


class GameResponse(BaseModel):
    game: GameSnapshot


class GameActionResponse(BaseModel):
    message: str
    game: GameSnapshot


class MessageResponse(BaseModel):
    message: str


def get_store(request: Request) -> GameStore:
    return request.app.state.store


def _action_response(result: ActionResult) -> GameActionResponse:
    return GameActionResponse(message=result.message, game=result.game)


@router.post("/games", response_model=GameActionResponse, status_code=201)
def create_game(store: GameStore = Depends(get_store)) -> GameActionResponse:
    """Start a new game: three rolls available, every category open."""
    game = store.create_game()
    logger.info("[games] POST /games -> 201 game_id=%s", game.id)
    return GameActionResponse(message="New game created", game=game.snapshot())


@router.get("/games/{game_id}", response_model=GameResponse)
def get_game(game_id: str, store: GameStore = Depends(get_store)) -> GameResponse:
    return GameResponse(game=store.get_game(game_id).snapshot())


@router.post("/games/{game_id}/roll", response_model=GameActionResponse)
def roll(game_id: str, store: GameStore = Depends(get_store)) -> GameActionResponse:
    return _action_response(game_actions.roll_dice(store.get_game(game_id)))


@router.post("/games/{game_id}/hold", response_model=GameActionResponse)
def hold(game_id: str, body: HoldRequest, store: GameStore = Depends(get_store)) -> GameActionResponse:
    return _action_response(game_actions.toggle_hold(store.get_game(game_id), body.index))


@router.post("/games/{game_id}/score", response_model=GameActionResponse)
def score(game_id: str, body: ScoreRequest, store: GameStore = Depends(get_store)) -> GameActionResponse:
    return _action_response(game_actions.score_category(store.get_game(game_id), body.category))


@router.post("/games/{game_id}/end-turn", response_model=GameActionResponse)
def end_turn(game_id: str, store: GameStore = Depends(get_store)) -> GameActionResponse:
    """Forfeit the remaining rolls; the next action must be a score."""
    return _action_response(game_actions.end_turn(store.get_game(game_id)))


@router.delete("/games/{game_id}", response_model=MessageResponse)
def delete_game(game_id: str, store: GameStore = Depends(get_store)) -> MessageResponse:
    if store.delete_game(game_id):
        logger.info("[games] DELETE /games/%s -> removed", game_id)
    return MessageResponse(message="Game deleted")
