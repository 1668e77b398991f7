from __future__ import annotations

import logging
from datetime import datetime, timezone

from .config import DEFAULT_STATE_CONFIG, StateConfig
from .models import Favorite, Recent, State

logger = logging.getLogger(__name__)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def load_state(config: StateConfig = DEFAULT_STATE_CONFIG) -> State:
    """Return the saved state, or the default state if it cannot be read.

    A missing file is the normal first-run case. Anything else (unreadable
    file, bad JSON, a record that no longer validates) is logged and
    replaced by the defaults; the broken file is left in place until the
    next save overwrites it.
    """
    path = config.state_path
    if not path.exists():
        return State()
    try:
        return State.model_validate_json(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        logger.warning("Saved state at %s is unreadable, using defaults", path, exc_info=True)
        return State()


def save_state(state: State, config: StateConfig = DEFAULT_STATE_CONFIG) -> None:
    path = config.state_path
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(state.model_dump_json(indent=2), encoding="utf-8")


def add_favorite(
    state: State,
    title: str,
    summary: str,
    config: StateConfig = DEFAULT_STATE_CONFIG,
) -> State:
    """Return a copy of *state* with a new favorite at the front."""
    favorite = Favorite(title=title, summary=summary, date=_now())
    favorites = [favorite, *state.favorites][: config.max_favorites]
    return state.model_copy(update={"favorites": favorites})


def add_recent(
    state: State,
    name: str,
    cuisine: str,
    config: StateConfig = DEFAULT_STATE_CONFIG,
) -> State:
    """Return a copy of *state* with a new recent dish at the front."""
    recent = Recent(name=name, cuisine=cuisine, date=_now())
    recents = [recent, *state.recents][: config.max_recents]
    return state.model_copy(update={"recents": recents})
