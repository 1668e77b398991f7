from __future__ import annotations

from ..menu.heuristics import (
    BUDGET_PRICE_THRESHOLD,
    DEFAULT_PROTEIN_TARGET,
    DEFAULT_REMAINING_KCAL,
    HIDDEN_FAT_COOKING,
    HIDDEN_FAT_PENALTY_POINTS,
    HIGH_PROTEIN_DENSITY,
    LOW_CARB_ALLOWANCE,
    SCORING_WEIGHTS,
    SODIUM_HEAVY_COOKING,
    SODIUM_PENALTY_POINTS,
    TRAINING_CARB_CAP,
)
from ..menu.macros import midpoint
from ..menu.models import Dish, MacroRange
from ..state.models import DietaryFilters
from .models import Backup, ScoringContext

WHY = "Protein density with controlled calories; fiber-friendly sides."

BACKUPS: tuple[Backup, ...] = (
    Backup(
        out_of_stock="Nearest sub: similar lean protein (e.g., chicken ↔ fish), same script.",
        cant_modify="Alternate: bun-less burger or grilled skewers, sauce on side.",
    ),
)

_STARCH_SIDES = frozenset({"rice_cup", "pasta_cup"})

_DIETARY_ALLERGENS: dict[str, str] = {
    "dairy_free": "dairy",
    "gluten_free": "gluten",
    "nut_allergy": "nuts",
    "avoid_shellfish": "shellfish",
}


def score_dish(
    dish: Dish,
    macros: MacroRange,
    ctx: ScoringContext,
    price: float | None = None,
    weights: dict[str, float] | None = None,
) -> float:
    """Compute a heuristic score for one dish.

    Scores are only comparable between dishes scored under the same context;
    nothing is normalised.
    """
    w = weights or SCORING_WEIGHTS
    protein = midpoint(macros.protein)
    kcal = midpoint(macros.kcal)
    carbs = midpoint(macros.carbs)
    fiber = midpoint(macros.fiber)

    # protein: reward what the dish covers, penalise what it leaves open
    protein_gap = max(0.0, ctx.remaining_protein - protein)
    protein_hit = min(protein, ctx.remaining_protein or DEFAULT_PROTEIN_TARGET)
    score = protein_hit * w["protein_bias"] - protein_gap * w["protein_gap"]

    # calories: closer to the remaining budget is better
    kcal_delta = abs((ctx.remaining_kcal or DEFAULT_REMAINING_KCAL) - kcal)
    score += 100 - w["kcal_penalty"] * (kcal_delta / 10)

    if ctx.low_carb and not ctx.training_day:
        score -= max(0.0, carbs - LOW_CARB_ALLOWANCE) * w["low_carb_penalty"]
    if ctx.training_day:
        score += w["training_carb_bias"] * min(TRAINING_CARB_CAP, carbs)

    if ctx.high_fiber:
        score += (fiber / w["fiber_bonus"]) * 3

    if ctx.low_sodium and (
        dish.is_high_sodium or any(tag in SODIUM_HEAVY_COOKING for tag in dish.cooking)
    ):
        score -= SODIUM_PENALTY_POINTS * w["sodium_penalty"]

    if any(tag in HIDDEN_FAT_COOKING for tag in dish.cooking):
        score -= HIDDEN_FAT_PENALTY_POINTS * w["hidden_fat_penalty"]

    if ctx.budget and price is not None and price > BUDGET_PRICE_THRESHOLD:
        score -= (price - BUDGET_PRICE_THRESHOLD) * w["budget_penalty"]

    return score


def build_script(dish: Dish, ctx: ScoringContext) -> str:
    """Return the modification request to read to the waiter."""
    parts = ["grilled if possible", "no butter"]
    if "creamy" in dish.cooking or dish.sauces:
        parts.append("sauce on the side, light")
    if _STARCH_SIDES.intersection(dish.sides):
        parts.append("half starch, double vegetables")
    if ctx.low_sodium:
        parts.append("easy on salt, skip soy/miso")
    if ctx.low_carb:
        parts.append("swap starch for extra greens")
    return "; ".join(parts)


def badges_for(protein_density: float, ctx: ScoringContext) -> list[str]:
    badges: list[str] = []
    if protein_density >= HIGH_PROTEIN_DENSITY:
        badges.append("High-Protein")
    if ctx.low_carb:
        badges.append("Low-Carb")
    if ctx.low_sodium:
        badges.append("Low-Sodium")
    if ctx.budget:
        badges.append("Budget")
    if ctx.training_day:
        badges.append("Training-Day")
    return badges


def allergen_conflicts(dish: Dish, dietary: DietaryFilters | None) -> list[str]:
    """Allergens on *dish* that the user's dietary filters rule out."""
    if dietary is None:
        return []
    blocked = {
        allergen for flag, allergen in _DIETARY_ALLERGENS.items() if getattr(dietary, flag)
    }
    return [a for a in dish.allergens if a in blocked]
