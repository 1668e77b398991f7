from __future__ import annotations

from collections.abc import Sequence

from ..menu.macros import estimate_macros, protein_per_100kcal
from ..menu.models import Dish
from ..state.models import DietaryFilters
from .models import RankedPick, ScoringContext
from .scoring import (
    BACKUPS,
    WHY,
    allergen_conflicts,
    badges_for,
    build_script,
    score_dish,
)

TOP_PICKS = 3


def rank_dishes(
    dishes: Sequence[Dish],
    ctx: ScoringContext,
    dietary: DietaryFilters | None = None,
    limit: int = TOP_PICKS,
    weights: dict[str, float] | None = None,
) -> list[RankedPick]:
    """Score every dish under *ctx* and return the best *limit* as picks.

    The sort is stable, so equal scores keep their input order.
    """
    scored = []
    for dish in dishes:
        macros = estimate_macros(dish)
        score = score_dish(dish, macros, ctx, dish.price, weights=weights)
        scored.append((score, dish, macros))

    scored.sort(key=lambda item: item[0], reverse=True)

    picks: list[RankedPick] = []
    for rank, (score, dish, macros) in enumerate(scored[:limit], start=1):
        density = protein_per_100kcal(macros)
        picks.append(RankedPick(
            rank=rank,
            dish=dish,
            score=round(score, 4),
            why=WHY,
            script=build_script(dish, ctx),
            macros=macros,
            protein_per_100kcal=density,
            sodium_flag=dish.is_high_sodium,
            price_estimate=dish.price,
            badges=badges_for(density, ctx),
            backups=list(BACKUPS),
            allergen_conflicts=allergen_conflicts(dish, dietary),
        ))
    return picks
