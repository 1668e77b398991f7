from __future__ import annotations

import logging
from pathlib import Path

from fastapi import Depends, FastAPI, HTTPException
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel, Field

from .guidance.targets import apply_body_weight
from .menu.macros import estimate_macros, protein_per_100kcal
from .menu.models import Dish
from .menu.parser import parse_menu
from .recommendations.cache import get_cache_stats
from .recommendations.models import (
    MacroEstimate,
    ParseMenuRequest,
    ParseMenuResponse,
    RecommendationRequest,
    RecommendationResponse,
)
from .recommendations.retrieval import get_recommendations
from .recommendations.templates import CUISINE_TEMPLATES, CUISINES
from .state.config import DEFAULT_STATE_CONFIG, StateConfig
from .state.models import Favorite, Recent, State
from .state.store import add_favorite, add_recent, load_state, save_state

logger = logging.getLogger(__name__)

app = FastAPI(title="Fine Dining Coach API", version="1.0.0")

_STATIC_DIR = Path(__file__).resolve().parent / "static"


class FavoriteRequest(BaseModel):
    title: str | None = Field(default=None, max_length=200)


class RecentRequest(BaseModel):
    name: str = Field(..., min_length=1)
    cuisine: str = Field(..., min_length=1)


def get_state_config() -> StateConfig:
    return DEFAULT_STATE_CONFIG


def _persist(state: State, config: StateConfig) -> None:
    try:
        save_state(state, config)
    except OSError:
        logger.error("Could not write state to %s", config.state_path, exc_info=True)
        raise HTTPException(status_code=500, detail="Could not save state")


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metadata")
def metadata() -> dict:
    return {
        "cuisines": CUISINES,
        "templates": sorted(CUISINE_TEMPLATES),
        "goals": ["Cut (rapid)", "Cut (steady)", "Maintenance while traveling"],
        "modes": ["Quick", "Standard", "Power"],
        "alcohol_types": ["wine", "spirits", "beer", "none"],
    }


# ── Pipeline endpoints ───────────────────────────────────────────────────


@app.post("/menu/parse", response_model=ParseMenuResponse)
def menu_parse(body: ParseMenuRequest) -> ParseMenuResponse:
    dishes = parse_menu(body.menu_text)
    return ParseMenuResponse(dishes=dishes, count=len(dishes))


@app.post("/macros", response_model=MacroEstimate)
def macros(dish: Dish) -> MacroEstimate:
    estimate = estimate_macros(dish)
    return MacroEstimate(macros=estimate, protein_per_100kcal=protein_per_100kcal(estimate))


@app.post("/recommendations", response_model=RecommendationResponse)
def recommendations(
    body: RecommendationRequest,
    config: StateConfig = Depends(get_state_config),
) -> RecommendationResponse:
    return get_recommendations(body, config)


# ── State endpoints ──────────────────────────────────────────────────────


@app.get("/state", response_model=State)
def read_state(config: StateConfig = Depends(get_state_config)) -> State:
    return load_state(config)


@app.put("/state", response_model=State)
def write_state(body: State, config: StateConfig = Depends(get_state_config)) -> State:
    state = apply_body_weight(body)
    _persist(state, config)
    return state


@app.get("/favorites", response_model=list[Favorite])
def list_favorites(config: StateConfig = Depends(get_state_config)) -> list[Favorite]:
    return load_state(config).favorites


@app.post("/favorites", response_model=Favorite)
def save_favorite(
    body: FavoriteRequest,
    config: StateConfig = Depends(get_state_config),
) -> Favorite:
    state = load_state(config)
    response = get_recommendations(RecommendationRequest(state=state), config)
    if not response.summary:
        raise HTTPException(status_code=409, detail="No pick to save")
    title = body.title or response.picks[0].dish.name
    state = add_favorite(state, title, response.summary, config)
    _persist(state, config)
    return state.favorites[0]


@app.post("/recents", response_model=Recent)
def save_recent(
    body: RecentRequest,
    config: StateConfig = Depends(get_state_config),
) -> Recent:
    state = add_recent(load_state(config), body.name, body.cuisine, config)
    _persist(state, config)
    return state.recents[0]


@app.get("/cache/stats")
def cache_stats() -> dict:
    return get_cache_stats()


# ── Static page ──────────────────────────────────────────────────────────


app.mount("/static", StaticFiles(directory=str(_STATIC_DIR)), name="static")


@app.get("/")
def root():
    return FileResponse(str(_STATIC_DIR / "index.html"))
