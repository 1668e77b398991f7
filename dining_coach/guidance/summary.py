from __future__ import annotations

from ..menu.macros import format_range
from ..recommendations.models import RankedPick


def build_summary(pick: RankedPick | None) -> str:
    """One line to copy to the clipboard or save as a favorite."""
    if pick is None:
        return ""
    m = pick.macros
    return (
        f"{pick.dish.name} — Mods: {pick.script}. "
        f"Est: {format_range(m.kcal, ' kcal')}, {format_range(m.protein, ' g P')}, "
        f"{format_range(m.carbs, ' g C')}, {format_range(m.fat, ' g F')}."
    )
