from __future__ import annotations

import logging
from pathlib import Path

from dining_coach.state.config import StateConfig
from dining_coach.state.models import State
from dining_coach.state.store import add_favorite, add_recent, load_state, save_state


def _config(tmp_path: Path) -> StateConfig:
    return StateConfig(state_dir=tmp_path / "state")


def test_state_stored_under_fixed_key(tmp_path: Path):
    assert _config(tmp_path).state_path.name == "fdc_v1_state.json"


def test_missing_file_gives_defaults(tmp_path: Path):
    assert load_state(_config(tmp_path)) == State()


def test_save_then_load(tmp_path: Path):
    cfg = _config(tmp_path)
    state = State(cuisine="Italian", remaining_kcal=700, menu_text="Chicken piccata")
    save_state(state, cfg)
    assert cfg.state_path.is_file()
    assert load_state(cfg) == state


def test_corrupt_file_falls_back_to_defaults(tmp_path: Path, caplog):
    cfg = _config(tmp_path)
    cfg.state_path.parent.mkdir(parents=True)
    cfg.state_path.write_text("{not json", encoding="utf-8")
    with caplog.at_level(logging.WARNING):
        assert load_state(cfg) == State()
    assert "unreadable" in caplog.text


def test_invalid_record_falls_back_to_defaults(tmp_path: Path):
    cfg = _config(tmp_path)
    cfg.state_path.parent.mkdir(parents=True)
    cfg.state_path.write_text('{"mode": "Turbo"}', encoding="utf-8")
    assert load_state(cfg) == State()


def test_defaults():
    state = State()
    assert state.mode == "Standard"
    assert state.goal == "Cut (steady)"
    assert state.cuisine == "Steakhouse"
    assert state.prefs.high_fiber is True
    assert state.prefs.low_sodium is False
    assert state.walk_mins == 10
    assert state.next_morning_rebalance is True


def test_favorites_newest_first_and_capped(tmp_path: Path):
    cfg = StateConfig(state_dir=tmp_path, max_favorites=3)
    state = State()
    for i in range(5):
        state = add_favorite(state, f"fav {i}", f"summary {i}", cfg)
    assert [f.title for f in state.favorites] == ["fav 4", "fav 3", "fav 2"]
    assert state.favorites[0].date


def test_add_favorite_does_not_mutate_input():
    state = State()
    updated = add_favorite(state, "Steakhouse: Filet lean", "summary")
    assert state.favorites == []
    assert len(updated.favorites) == 1


def test_recents_capped(tmp_path: Path):
    cfg = StateConfig(state_dir=tmp_path)
    state = State()
    for i in range(25):
        state = add_recent(state, f"dish {i}", "Steakhouse", cfg)
    assert len(state.recents) == 20
    assert state.recents[0].name == "dish 24"
