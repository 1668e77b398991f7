from __future__ import annotations

from ..menu.models import CuisineTemplate
from ..state.models import AlcoholPlan
from .models import AlcoholAdvice, PrePostPlan, SidesAndDessert

# Standard pour per drink type
_DRINKS: dict[str, dict[str, float]] = {
    "wine": {"oz": 5, "kcal": 120, "carbs": 4},
    "beer": {"oz": 12, "kcal": 150, "carbs": 12},
    "spirits": {"oz": 1.5, "kcal": 100, "carbs": 0},
}

_DEFAULT_SIDES = ["seasonal veg", "side salad (light)"]
_DEFAULT_GREEN = ["fruit"]
_DEFAULT_AMBER = ["sorbet (small)"]
_DEFAULT_RED = ["cheesecake"]

_PRELOAD = "Optional: 25–30 g protein preload 60–90 min before (whey in water or Greek yogurt)."

_WALKS: dict[int, str] = {
    0: "No walk needed; focus on slow eating and hydration.",
    10: "Walk 10 min post-meal to blunt glucose spike and aid digestion.",
    20: "Walk 20 min post-meal to improve glucose disposal and recovery.",
}

_REBALANCE = (
    "If over calories: reduce tomorrow by ~15% kcal, keep protein high "
    "(+25–30 g), favor veg/lean proteins."
)
_NO_REBALANCE = "No auto-rebalance selected."

_DAMAGE_CONTROL = (
    "Order lean protein (grilled chicken or fish), skip sauces, double "
    "vegetables, starch half portion. Portion: palm-sized protein, 1–2 cups "
    "veg. Tomorrow: -15% kcal, +25–30 g protein."
)


def _format_number(value: float) -> str:
    return f"{value:g}"


def alcohol_advice(alcohol: AlcoholPlan) -> AlcoholAdvice | None:
    """Return drink guidance, or ``None`` when no drinks are planned."""
    if alcohol.plan == 0 or alcohol.type == "none":
        return None
    per = _DRINKS[alcohol.type]
    total_kcal = alcohol.plan * per["kcal"]
    total_carbs = alcohol.plan * per["carbs"]
    return AlcoholAdvice(
        best=f"{alcohol.plan} × {_format_number(per['oz'])} oz {alcohol.type}",
        impact=f"~{_format_number(total_kcal)} kcal, {_format_number(total_carbs)} g carbs",
        rule="One-in, one-out: 1 glass water per drink.",
    )


def sides_and_dessert(template: CuisineTemplate | None) -> SidesAndDessert:
    best_sides = (template.best_sides if template else None) or _DEFAULT_SIDES
    matrix = template.dessert_matrix if template else None
    return SidesAndDessert(
        best_sides=list(best_sides),
        green=list((matrix.green if matrix else None) or _DEFAULT_GREEN),
        amber=list((matrix.amber if matrix else None) or _DEFAULT_AMBER),
        red=list((matrix.red if matrix else None) or _DEFAULT_RED),
    )


def pre_post_plan(walk_mins: int, next_morning_rebalance: bool) -> PrePostPlan:
    return PrePostPlan(
        preload=_PRELOAD,
        walk=_WALKS.get(walk_mins, _WALKS[20]),
        over_plan=_REBALANCE if next_morning_rebalance else _NO_REBALANCE,
    )


def damage_control_card() -> str:
    """Fallback ordering advice for a table with nothing worth ranking."""
    return _DAMAGE_CONTROL
