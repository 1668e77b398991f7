from __future__ import annotations

from collections.abc import Mapping

from ..menu.models import CuisineTemplate, DessertMatrix, Dish
from ..menu.parser import parse_menu

CUISINES: list[str] = [
    "Steakhouse",
    "Italian",
    "Sushi/Japanese",
    "Mexican",
    "Chinese",
    "Indian",
    "American",
    "Mediterranean",
    "French",
]

CUISINE_TEMPLATES: dict[str, CuisineTemplate] = {
    "Steakhouse": CuisineTemplate(
        default_picks=[
            Dish(
                name="Filet mignon (8 oz), grilled",
                protein_type="beef",
                cooking=["grilled"],
                sides=["veg_cup", "salad"],
                notes="Ask for no butter; sauce on side",
            ),
            Dish(
                name="Grilled salmon (6–8 oz)",
                protein_type="fish",
                cooking=["grilled"],
                sides=["veg_cup"],
                notes="Lemon, herbs",
            ),
            Dish(
                name="Grilled chicken breast (6–8 oz)",
                protein_type="chicken",
                cooking=["grilled"],
                sides=["veg_cup", "salad"],
            ),
        ],
        best_sides=["asparagus", "broccolini", "side salad (light vinaigrette)"],
        dessert_matrix=DessertMatrix(
            green=["berries", "sorbet (small)"],
            amber=["single-scoop gelato"],
            red=["cheesecake", "lava cake", "à la mode"],
        ),
        sodium_swaps={"béarnaise": "light herb jus", "soy": "lemon & olive oil"},
    ),
    "Italian": CuisineTemplate(
        default_picks=[
            Dish(
                name="Chicken piccata (light sauce), with grilled veg",
                protein_type="chicken",
                cooking=["grilled"],
                sauces=["piccata_light"],
                sides=["veg_cup"],
            ),
            Dish(
                name="Grilled branzino/cod with veg",
                protein_type="fish",
                cooking=["grilled"],
                sides=["veg_cup"],
            ),
            Dish(
                name="Steak tagliata, arugula, balsamic (light)",
                protein_type="beef",
                cooking=["grilled"],
                sides=["salad"],
            ),
        ],
        best_sides=["grilled vegetables", "insalata verde (light)"],
        dessert_matrix=DessertMatrix(
            green=["fruit plate"],
            amber=["affogato (no sugar)"],
            red=["tiramisu", "panna cotta", "alfredo anything"],
        ),
        sodium_swaps={"cream_sauce": "tomato-based marinara, light", "alfredo": "marinara light"},
    ),
    "Sushi/Japanese": CuisineTemplate(
        default_picks=[
            Dish(
                name="Sashimi assortment + edamame + cucumber salad",
                protein_type="sashimi",
                sides=["edamame_cup", "cucumber_salad"],
            ),
            Dish(
                name="Grilled salmon teriyaki (sauce on side)",
                protein_type="fish",
                cooking=["grilled", "glazed"],
                sauces=["teriyaki"],
                sides=["veg_cup"],
            ),
            Dish(
                name="Tuna tataki + seaweed salad",
                protein_type="fish",
                cooking=["grilled"],
                sides=["veg_cup"],
            ),
        ],
        best_sides=["edamame", "cucumber salad", "miso soup (if sodium ok)"],
        dessert_matrix=DessertMatrix(
            green=["sliced oranges"],
            amber=["mochi (1 piece)"],
            red=["fried tempura desserts"],
        ),
        sodium_swaps={"soy": "low-sodium soy or lemon"},
    ),
}


def merge_templates(
    custom: Mapping[str, CuisineTemplate] | None = None,
) -> dict[str, CuisineTemplate]:
    """Built-in templates with *custom* ones replacing same-named cuisines."""
    merged = dict(CUISINE_TEMPLATES)
    if custom:
        merged.update(custom)
    return merged


def candidate_dishes(
    menu_text: str | None,
    cuisine: str,
    templates: Mapping[str, CuisineTemplate],
) -> list[Dish]:
    """Dishes to rank: the pasted menu if there is one, else the template's."""
    if menu_text and menu_text.strip():
        return parse_menu(menu_text)
    template = templates.get(cuisine)
    return list(template.default_picks) if template else []
