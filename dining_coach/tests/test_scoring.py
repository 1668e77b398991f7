import pytest

from dining_coach.menu.macros import estimate_macros
from dining_coach.menu.models import Dish, MacroRange
from dining_coach.menu.parser import parse_line
from dining_coach.recommendations.models import ScoringContext
from dining_coach.recommendations.scoring import (
    allergen_conflicts,
    badges_for,
    build_script,
    score_dish,
)
from dining_coach.state.models import DietaryFilters


def _macros(kcal=250, protein=30, carbs=0, fat=8, fiber=1) -> MacroRange:
    return MacroRange(
        kcal=(kcal, kcal),
        protein=(protein, protein),
        carbs=(carbs, carbs),
        fat=(fat, fat),
        fiber=(fiber, fiber),
    )


PLAIN = Dish(name="Plain")


# ── Score terms ──────────────────────────────────────────────────────────


class TestScoreTerms:
    def test_baseline(self):
        # hit 30 - gap 15*0.2 + (100 - 0.6*400/10)
        assert score_dish(PLAIN, _macros(), ScoringContext()) == pytest.approx(103.0)

    def test_zero_targets_fall_back_to_defaults(self):
        ctx = ScoringContext(remaining_kcal=0, remaining_protein=0)
        # hit min(30, 50), no gap, kcal delta against 650
        assert score_dish(PLAIN, _macros(), ctx) == pytest.approx(30 + 76)

    def test_closer_to_kcal_target_scores_higher(self):
        ctx = ScoringContext(remaining_kcal=600)
        near = score_dish(PLAIN, _macros(kcal=600), ctx)
        far = score_dish(PLAIN, _macros(kcal=900), ctx)
        assert near > far

    def test_low_carb_penalty_only_on_rest_days(self):
        macros = _macros(carbs=50)
        rest = score_dish(PLAIN, macros, ScoringContext(low_carb=True))
        base = score_dish(PLAIN, macros, ScoringContext())
        assert base - rest == pytest.approx(10.0)

    def test_training_day_carb_bonus_is_capped(self):
        base = score_dish(PLAIN, _macros(carbs=100), ScoringContext())
        training = score_dish(PLAIN, _macros(carbs=100), ScoringContext(training_day=True))
        assert training - base == pytest.approx(12.0)

    def test_training_day_skips_low_carb_penalty(self):
        macros = _macros(carbs=50)
        ctx = ScoringContext(low_carb=True, training_day=True)
        base = score_dish(PLAIN, macros, ScoringContext())
        assert score_dish(PLAIN, macros, ctx) - base == pytest.approx(10.0)

    def test_fiber_bonus(self):
        base = score_dish(PLAIN, _macros(fiber=3), ScoringContext())
        boosted = score_dish(PLAIN, _macros(fiber=3), ScoringContext(high_fiber=True))
        assert boosted - base == pytest.approx(3.0)

    def test_hidden_fat_penalty(self):
        fried = Dish(name="Fried", cooking=["fried"])
        macros = _macros()
        diff = score_dish(PLAIN, macros, ScoringContext()) - score_dish(fried, macros, ScoringContext())
        assert diff == pytest.approx(4.8)

    def test_budget_penalty_above_threshold(self):
        ctx = ScoringContext(budget=True)
        macros = _macros()
        base = score_dish(PLAIN, macros, ctx)
        assert base - score_dish(PLAIN, macros, ctx, price=45) == pytest.approx(5.0)
        assert score_dish(PLAIN, macros, ctx, price=30) == pytest.approx(base)
        assert score_dish(PLAIN, macros, ScoringContext(), price=45) == pytest.approx(base)

    def test_custom_weights(self):
        weights = {
            "protein_bias": 0.0,
            "protein_gap": 0.0,
            "kcal_penalty": 0.0,
            "low_carb_penalty": 0.0,
            "training_carb_bias": 0.0,
            "fiber_bonus": 3,
            "sodium_penalty": 0.0,
            "hidden_fat_penalty": 0.0,
            "budget_penalty": 0.0,
        }
        assert score_dish(PLAIN, _macros(), ScoringContext(), weights=weights) == pytest.approx(100.0)


# ── Sodium ───────────────────────────────────────────────────────────────


class TestSodium:
    @pytest.mark.parametrize("line", [
        "Chicken teriyaki with rice",
        "Miso glazed cod",
        "Cured salmon",
        "Salmon, soy glaze",
    ])
    def test_low_sodium_strictly_lowers_high_sodium_dishes(self, line):
        dish = parse_line(line)
        assert dish.is_high_sodium
        macros = estimate_macros(dish)
        off = score_dish(dish, macros, ScoringContext(remaining_kcal=700, remaining_protein=40))
        on = score_dish(dish, macros, ScoringContext(remaining_kcal=700, remaining_protein=40, low_sodium=True))
        assert on < off

    def test_soy_heavy_cooking_is_penalised_without_flag(self):
        dish = Dish(name="Stir fry", cooking=["soy_heavy"])
        macros = _macros()
        off = score_dish(dish, macros, ScoringContext())
        on = score_dish(dish, macros, ScoringContext(low_sodium=True))
        assert off - on == pytest.approx(7.5)

    def test_low_sodium_leaves_other_dishes_alone(self):
        macros = _macros()
        assert score_dish(PLAIN, macros, ScoringContext(low_sodium=True)) == pytest.approx(
            score_dish(PLAIN, macros, ScoringContext())
        )


# ── Scripts & badges ─────────────────────────────────────────────────────


class TestScript:
    def test_always_has_base_requests(self):
        assert build_script(PLAIN, ScoringContext()) == "grilled if possible; no butter"

    def test_sauce_on_the_side(self):
        script = build_script(parse_line("Filet mignon 8 oz with béarnaise"), ScoringContext())
        assert script == "grilled if possible; no butter; sauce on the side, light"

    def test_half_starch(self):
        script = build_script(Dish(name="Risotto", sides=["rice_cup"]), ScoringContext())
        assert "half starch, double vegetables" in script

    def test_preferences_appended_in_order(self):
        ctx = ScoringContext(low_sodium=True, low_carb=True)
        script = build_script(Dish(name="Pasta", sides=["pasta_cup"]), ctx)
        assert script.split("; ") == [
            "grilled if possible",
            "no butter",
            "half starch, double vegetables",
            "easy on salt, skip soy/miso",
            "swap starch for extra greens",
        ]


def test_badges():
    assert badges_for(7.0, ScoringContext()) == ["High-Protein"]
    assert badges_for(6.9, ScoringContext()) == []
    ctx = ScoringContext(low_carb=True, low_sodium=True, budget=True, training_day=True)
    assert badges_for(10.0, ctx) == ["High-Protein", "Low-Carb", "Low-Sodium", "Budget", "Training-Day"]


def test_allergen_conflicts():
    dish = parse_line("Breaded chicken, cheese")
    assert allergen_conflicts(dish, None) == []
    assert allergen_conflicts(dish, DietaryFilters()) == []
    assert allergen_conflicts(dish, DietaryFilters(dairy_free=True)) == ["dairy"]
    assert allergen_conflicts(dish, DietaryFilters(dairy_free=True, gluten_free=True)) == ["dairy", "gluten"]
