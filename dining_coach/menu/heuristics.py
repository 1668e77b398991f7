"""
Heuristic tables
================

Rule-of-thumb numbers behind every estimate and score.  They are coaching
estimates, not nutrition facts; tweak them here and nowhere else.

Base proteins
-------------
One grilled portion per protein type, as ``kcal / protein / fat / carbs /
fiber``.  Dishes whose protein could not be recognised fall back to
``PLACEHOLDER_BASE``.

Adjustments
-----------
Cooking methods, sauces and sides each add a ``(min, max)`` delta per
nutrient.  Cooking and sauce deltas only touch kcal, fat and carbs; sides may
also add fiber and protein (edamame).

Scoring weights
---------------
``SCORING_WEIGHTS`` is the single shared weight table used by
``recommendations.scoring.score_dish``.
"""

from __future__ import annotations

NUTRIENTS: tuple[str, ...] = ("kcal", "protein", "carbs", "fat", "fiber")

# ---------------------------------------------------------------------------
# Base proteins
# ---------------------------------------------------------------------------

BASE_PROTEIN: dict[str, dict[str, float]] = {
    # 8 oz filet lands around 520-650 kcal and 55-65 g protein
    "beef": {"kcal": 520, "protein": 56, "fat": 34, "carbs": 0, "fiber": 0},
    "fish": {"kcal": 360, "protein": 35, "fat": 22, "carbs": 0, "fiber": 0},
    "chicken": {"kcal": 280, "protein": 46, "fat": 6, "carbs": 0, "fiber": 0},
    "shrimp": {"kcal": 200, "protein": 42, "fat": 3, "carbs": 2, "fiber": 0},
    "tofu": {"kcal": 260, "protein": 26, "fat": 16, "carbs": 8, "fiber": 2},
    "sashimi": {"kcal": 260, "protein": 40, "fat": 6, "carbs": 6, "fiber": 0},
}

PLACEHOLDER_BASE: dict[str, float] = {
    "kcal": 250, "protein": 30, "fat": 8, "carbs": 0, "fiber": 1,
}

# Fiber is never known exactly. Every estimate starts from this band, whatever
# the protein.
FIBER_START: tuple[float, float] = (0, 2)

# ---------------------------------------------------------------------------
# Adjustments
# ---------------------------------------------------------------------------

COOKING_ADJ: dict[str, dict[str, tuple[float, float]]] = {
    "fried": {"kcal": (200, 350), "fat": (12, 22)},
    "creamy": {"kcal": (150, 300), "fat": (10, 20)},
    "buttered": {"kcal": (80, 180), "fat": (8, 16)},
    "glazed": {"kcal": (50, 120), "carbs": (10, 25)},
    "breaded": {"kcal": (120, 220), "carbs": (15, 30)},
    "alfredo": {"kcal": (250, 400), "fat": (16, 28)},
    "aioli": {"kcal": (120, 240), "fat": (10, 20)},
    "soy_heavy": {"kcal": (20, 60)},
}

SIDE_ADJ: dict[str, dict[str, tuple[float, float]]] = {
    "pasta_cup": {"kcal": (160, 220), "carbs": (30, 40), "fiber": (2, 4)},
    "rice_cup": {"kcal": (180, 230), "carbs": (38, 48), "fiber": (1, 2)},
    "fries": {"kcal": (280, 420), "carbs": (35, 55), "fat": (12, 22)},
    "mashed": {"kcal": (200, 320), "carbs": (30, 45), "fat": (8, 14)},
    "veg_cup": {"kcal": (40, 90), "carbs": (6, 12), "fiber": (2, 5)},
    "salad": {"kcal": (40, 100), "carbs": (6, 12), "fiber": (2, 4)},
    "edamame_cup": {"kcal": (120, 190), "protein": (11, 18), "carbs": (10, 18), "fiber": (4, 8)},
    "cucumber_salad": {"kcal": (40, 70), "fiber": (1, 2), "carbs": (7, 12)},
}

SAUCE_ADJ: dict[str, dict[str, tuple[float, float]]] = {
    "béarnaise": {"kcal": (120, 250), "fat": (12, 24)},
    "cream_sauce": {"kcal": (150, 300), "fat": (10, 20)},
    "piccata_light": {"kcal": (40, 90), "carbs": (4, 8)},
    "soy": {"kcal": (20, 60)},
    "teriyaki": {"kcal": (60, 120), "carbs": (12, 24)},
    "miso_glaze": {"kcal": (50, 100), "carbs": (10, 20)},
    "vinaigrette_tbsp": {"kcal": (40, 80), "fat": (4, 8)},
}

# ---------------------------------------------------------------------------
# Scoring
# ---------------------------------------------------------------------------

SCORING_WEIGHTS: dict[str, float] = {
    "protein_bias": 1.0,
    "protein_gap": 0.2,
    "kcal_penalty": 0.6,
    "low_carb_penalty": 0.5,
    "training_carb_bias": 0.2,
    "fiber_bonus": 3,
    "sodium_penalty": 0.5,
    "hidden_fat_penalty": 0.4,
    "budget_penalty": 0.5,
}

DEFAULT_REMAINING_KCAL = 650
DEFAULT_PROTEIN_TARGET = 50
LOW_CARB_ALLOWANCE = 30
TRAINING_CARB_CAP = 60
SODIUM_PENALTY_POINTS = 15
HIDDEN_FAT_PENALTY_POINTS = 12
BUDGET_PRICE_THRESHOLD = 35

SODIUM_HEAVY_COOKING: frozenset[str] = frozenset({"soy_heavy"})
HIDDEN_FAT_COOKING: frozenset[str] = frozenset(
    {"fried", "creamy", "buttered", "aioli", "alfredo", "glazed", "breaded"}
)

# Protein grams per 100 kcal that earns the High-Protein badge
HIGH_PROTEIN_DENSITY = 7
