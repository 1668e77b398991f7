from __future__ import annotations

from ..menu.macros import round_half_up
from ..state.models import State

# kcal per pound of bodyweight, by goal
_KCAL_FACTORS: dict[str, float] = {
    "Cut (rapid)": 10.5,
    "Cut (steady)": 11.5,
    "Maintenance while traveling": 14,
}
_PROTEIN_PER_LB = 0.9

# Share of the day's targets left for this meal when nothing else is known
_MEAL_SHARE = 0.4
_FALLBACK_REMAINING_KCAL = 650
_FALLBACK_REMAINING_PROTEIN = 45


def daily_targets(body_weight: float, goal: str) -> tuple[int, int]:
    """Return ``(daily_kcal, protein_target)`` for a bodyweight in pounds."""
    factor = _KCAL_FACTORS.get(goal, _KCAL_FACTORS["Cut (steady)"])
    return round_half_up(factor * body_weight), round_half_up(_PROTEIN_PER_LB * body_weight)


def apply_body_weight(state: State) -> State:
    """Recompute daily targets from bodyweight; no-op without one."""
    if not state.body_weight:
        return state
    daily_kcal, protein_target = daily_targets(state.body_weight, state.goal)
    return state.model_copy(update={"daily_kcal": daily_kcal, "protein_target": protein_target})


def remaining_budget(state: State) -> tuple[int, int]:
    """Return ``(remaining_kcal, remaining_protein)`` for the meal.

    Explicit values win, then a share of the daily targets, then fixed
    fallbacks.
    """
    if state.remaining_kcal is not None:
        kcal = state.remaining_kcal
    elif state.daily_kcal:
        kcal = round_half_up(state.daily_kcal * _MEAL_SHARE)
    else:
        kcal = _FALLBACK_REMAINING_KCAL

    if state.remaining_protein is not None:
        protein = state.remaining_protein
    elif state.protein_target:
        protein = round_half_up(state.protein_target * _MEAL_SHARE)
    else:
        protein = _FALLBACK_REMAINING_PROTEIN

    return kcal, protein
