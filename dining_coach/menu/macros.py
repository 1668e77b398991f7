from __future__ import annotations

import math
from collections.abc import Iterable

from .heuristics import (
    BASE_PROTEIN,
    COOKING_ADJ,
    FIBER_START,
    NUTRIENTS,
    PLACEHOLDER_BASE,
    SAUCE_ADJ,
    SIDE_ADJ,
)
from .models import Dish, Interval, MacroRange

# Sides are the only adjustments allowed to move fiber and protein.
_DISH_NUTRIENTS = ("kcal", "fat", "carbs")
_SIDE_NUTRIENTS = ("kcal", "fat", "carbs", "fiber", "protein")


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (not banker's rounding)."""
    return int(math.floor(value + 0.5))


def midpoint(interval: Interval) -> float:
    return (interval[0] + interval[1]) / 2


def base_for(dish: Dish) -> dict[str, float]:
    """Return the base nutrient tuple for the dish's protein type."""
    return BASE_PROTEIN.get(dish.protein_type or "", PLACEHOLDER_BASE)


def _accumulate(
    low: dict[str, float],
    high: dict[str, float],
    table: dict[str, dict[str, tuple[float, float]]],
    tags: Iterable[str],
    nutrients: tuple[str, ...],
) -> None:
    for tag in tags:
        adj = table.get(tag)
        if not adj:
            continue
        for nutrient in nutrients:
            if nutrient in adj:
                low[nutrient] += adj[nutrient][0]
                high[nutrient] += adj[nutrient][1]


def estimate_macros(dish: Dish) -> MacroRange:
    """Estimate a [min, max] range per nutrient for *dish*.

    Starts from the base protein portion and adds every cooking, sauce and
    side delta found on the dish. Tags without a table entry are ignored.
    """
    base = base_for(dish)
    low = {n: float(base[n]) for n in NUTRIENTS}
    high = dict(low)
    low["fiber"], high["fiber"] = (float(v) for v in FIBER_START)

    _accumulate(low, high, COOKING_ADJ, dish.cooking, _DISH_NUTRIENTS)
    _accumulate(low, high, SAUCE_ADJ, dish.sauces, _DISH_NUTRIENTS)
    _accumulate(low, high, SIDE_ADJ, dish.sides, _SIDE_NUTRIENTS)

    return MacroRange(**{
        n: (round_half_up(low[n]), round_half_up(high[n])) for n in NUTRIENTS
    })


def protein_per_100kcal(macros: MacroRange) -> float:
    """Midpoint protein grams per 100 midpoint kcal, to one decimal."""
    kcal = midpoint(macros.kcal)
    if kcal <= 0:
        return 0.0
    return round_half_up(midpoint(macros.protein) / kcal * 1000) / 10


def format_range(interval: Interval, unit: str = "") -> str:
    low, high = interval
    if low == high:
        return f"{low}{unit}"
    return f"{low}–{high}{unit}"
