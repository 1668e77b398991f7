from __future__ import annotations

import logging

from ..guidance.advice import (
    alcohol_advice,
    damage_control_card,
    pre_post_plan,
    sides_and_dessert,
)
from ..guidance.summary import build_summary
from ..guidance.targets import apply_body_weight, remaining_budget
from ..state.config import DEFAULT_STATE_CONFIG, StateConfig
from ..state.models import State
from ..state.store import load_state
from .cache import cache_get, cache_set
from .models import RecommendationRequest, RecommendationResponse, ScoringContext
from .ranking import rank_dishes
from .templates import candidate_dishes, merge_templates

logger = logging.getLogger(__name__)

NO_ITEMS_MESSAGE = "No menu items detected. Using cuisine template defaults."


def scoring_context(state: State) -> ScoringContext:
    """Collapse the user state into the inputs the scorer reads."""
    remaining_kcal, remaining_protein = remaining_budget(state)
    return ScoringContext(
        remaining_kcal=remaining_kcal,
        remaining_protein=remaining_protein,
        training_day=state.training_day,
        low_sodium=state.prefs.low_sodium,
        low_carb=state.prefs.low_carb,
        high_fiber=state.prefs.high_fiber,
        budget=state.budget_mode,
    )


def get_recommendations(
    request: RecommendationRequest,
    config: StateConfig = DEFAULT_STATE_CONFIG,
) -> RecommendationResponse:
    state = request.state if request.state is not None else load_state(config)
    state = apply_body_weight(state)

    # --- Cache check ---
    # Keyed on the resolved state so a saved-state request never serves a
    # response computed from an older save.
    inputs = {
        "state": state.model_dump(mode="json", exclude={"favorites", "recents"}),
        "custom_templates": {
            k: v.model_dump(mode="json") for k, v in request.custom_templates.items()
        },
    }
    cached = cache_get(inputs)
    if cached is not None:
        return cached

    templates = merge_templates(request.custom_templates)
    has_menu = bool(state.menu_text and state.menu_text.strip())
    dishes = candidate_dishes(state.menu_text, state.cuisine, templates)
    if not dishes:
        logger.info("No candidate dishes for cuisine %r", state.cuisine)

    # --- Scoring & ranking ---
    ctx = scoring_context(state)
    picks = rank_dishes(dishes, ctx, dietary=state.dietary)

    # --- Assemble response ---
    response = RecommendationResponse(
        title="Quick Pick" if state.mode == "Quick" else "Top Picks (Ranked)",
        source="menu" if has_menu else "template",
        picks=picks,
        total_candidates=len(dishes),
        remaining_kcal=int(ctx.remaining_kcal),
        remaining_protein=int(ctx.remaining_protein),
        message=None if picks else NO_ITEMS_MESSAGE,
        summary=build_summary(picks[0] if picks else None),
        alcohol=alcohol_advice(state.alcohol),
        sides_and_dessert=sides_and_dessert(templates.get(state.cuisine)),
        pre_post=pre_post_plan(state.walk_mins, state.next_morning_rebalance),
        damage_control=None if picks else damage_control_card(),
    )

    cache_set(inputs, response)
    return response
