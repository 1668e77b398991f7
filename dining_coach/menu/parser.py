from __future__ import annotations

import re

from .models import Dish

_I = re.IGNORECASE

# Order matters: the first protein that matches wins.
_PROTEIN_PATTERNS: list[tuple[str, re.Pattern[str]]] = [
    ("beef", re.compile(r"filet|sirloin|tenderloin|ribeye|steak", _I)),
    ("fish", re.compile(r"salmon|tuna|cod|branzino|halibut|fish", _I)),
    ("chicken", re.compile(r"chicken|pollo", _I)),
    ("shrimp", re.compile(r"shrimp|prawn|scampi", _I)),
    ("tofu", re.compile(r"tofu|tempeh", _I)),
    ("sashimi", re.compile(r"sashimi|nigiri", _I)),
]

_COOKING_PATTERNS: list[tuple[str, re.Pattern[str]]] = [
    ("grilled", re.compile(r"grill", _I)),
    ("fried", re.compile(r"fried|breaded|katsu|tempura", _I)),
    ("creamy", re.compile(r"cream|alfredo|béarnaise|beurre|aioli", _I)),
    ("buttered", re.compile(r"butter", _I)),
    ("glazed", re.compile(r"glaze|teriyaki|miso", _I)),
    ("soy_heavy", re.compile(r"soy", _I)),
]

_SAUCE_PATTERNS: list[tuple[str, re.Pattern[str]]] = [
    ("béarnaise", re.compile(r"béarnaise", _I)),
    ("cream_sauce", re.compile(r"alfredo|cream", _I)),
    ("piccata_light", re.compile(r"piccata", _I)),
    ("soy", re.compile(r"soy", _I)),
    ("teriyaki", re.compile(r"teriyaki", _I)),
    ("miso_glaze", re.compile(r"miso", _I)),
]

_STARCH_SIDE_PATTERNS: list[tuple[str, re.Pattern[str]]] = [
    ("fries", re.compile(r"fries|frites", _I)),
    ("mashed", re.compile(r"mash", _I)),
    ("pasta_cup", re.compile(r"pasta|spaghetti|rigatoni|penne|linguine", _I)),
    ("rice_cup", re.compile(r"rice|risotto", _I)),
]

_VEG_RE = re.compile(
    r"asparagus|greens|broccoli|veg|salad|spinach|edamame|cucumber", _I
)

_HIGH_SODIUM_RE = re.compile(r"soy|miso|teriyaki|cured|pickled", _I)

_ALLERGEN_PATTERNS: list[tuple[str, re.Pattern[str]]] = [
    ("nuts", re.compile(r"peanut|nut", _I)),
    ("dairy", re.compile(r"dairy|cream|cheese|butter|béarnaise", _I)),
    ("gluten", re.compile(r"gluten|breaded|panko|pasta", _I)),
    ("shellfish", re.compile(r"shrimp|prawn|shellfish", _I)),
]


def _matching_tags(patterns: list[tuple[str, re.Pattern[str]]], line: str) -> list[str]:
    return [tag for tag, pattern in patterns if pattern.search(line)]


def _protein_type(line: str) -> str | None:
    for protein, pattern in _PROTEIN_PATTERNS:
        if pattern.search(line):
            return protein
    return None


def _sides(line: str) -> list[str]:
    sides = _matching_tags(_STARCH_SIDE_PATTERNS, line)
    if _VEG_RE.search(line):
        lower = line.lower()
        if "edamame" in lower:
            sides.append("edamame_cup")
        if "cucumber" in lower:
            sides.append("cucumber_salad")
        # creamed spinach eats like a starch side
        if "spinach" in lower:
            sides.append("pasta_cup")
        sides.append("veg_cup")
        if "salad" in lower:
            sides.append("salad")
    return sides


def parse_line(line: str) -> Dish:
    """Build a Dish from one already-trimmed menu line."""
    return Dish(
        name=line,
        protein_type=_protein_type(line),
        cooking=_matching_tags(_COOKING_PATTERNS, line),
        sauces=_matching_tags(_SAUCE_PATTERNS, line),
        sides=_sides(line),
        is_high_sodium=bool(_HIGH_SODIUM_RE.search(line)),
        allergens=_matching_tags(_ALLERGEN_PATTERNS, line),
    )


def parse_menu(text: str) -> list[Dish]:
    """Parse pasted menu text, one dish per non-blank line.

    Nothing here fails: a line with no recognised keywords still becomes a
    Dish carrying only its name.
    """
    lines = (raw.strip() for raw in text.split("\n"))
    return [parse_line(line) for line in lines if line]
