import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from config import get_settings
from db import create_session, get_lookup, get_session
from models import Difficulty
from queries.targets import select_default_targets, select_random_targets

logger = logging.getLogger(__name__)

router = APIRouter()


class NewGameRequest(BaseModel):
    difficulty:   Difficulty = "medium"
    use_defaults: bool       = False


class NewRoundRequest(BaseModel):
    difficulty: Optional[Difficulty] = None


class AddFigureRequest(BaseModel):
    name: str = Field(..., min_length=1)


async def _pick_targets(lookup, difficulty: Difficulty, use_defaults: bool):
    if use_defaults:
        pair = await select_default_targets(lookup)
    else:
        pair = await select_random_targets(lookup, difficulty, max_attempts=get_settings().target_attempts)
    if pair is None:
        raise HTTPException(status_code=503, detail="Could not select target figures, try again.")
    return pair


@router.post("/api/games")
async def new_game(req: NewGameRequest, lookup = Depends(get_lookup)):
    target_a, target_b = await _pick_targets(lookup, req.difficulty, req.use_defaults)
    session = create_session(target_a, target_b, req.difficulty)
    logger.info("Game %s started: %s vs %s", session.id, target_a.name, target_b.name)
    return session.state()


@router.get("/api/games/{game_id}")
def game_state(game_id: str):
    return get_session(game_id).state()


@router.post("/api/games/{game_id}/figures")
async def add_figure(game_id: str, req: AddFigureRequest, lookup = Depends(get_lookup)):
    session = get_session(game_id)
    figure  = await lookup.get_person(req.name)
    if figure is None:
        raise HTTPException(status_code=404, detail=f"No dated biography found for '{req.name}'.")

    improves = session.would_improve(figure)
    added    = session.add_figure(figure)
    return {**session.state(), "figure": figure, "added": added, "improves": improves}


@router.get("/api/games/{game_id}/would-improve")
async def would_improve(game_id: str, name: str, lookup = Depends(get_lookup)):
    session = get_session(game_id)
    figure  = await lookup.get_person(name)
    if figure is None:
        raise HTTPException(status_code=404, detail=f"No dated biography found for '{name}'.")
    return {"figure": figure, "improves": session.would_improve(figure)}


@router.post("/api/games/{game_id}/rounds")
async def new_round(game_id: str, req: NewRoundRequest, lookup = Depends(get_lookup)):
    session = get_session(game_id)
    difficulty = req.difficulty or session.difficulty
    target_a, target_b = await _pick_targets(lookup, difficulty, use_defaults=False)
    session.difficulty = difficulty
    session.new_round(target_a, target_b)
    return session.state()
