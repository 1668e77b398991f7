from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

ProteinType = Literal["beef", "fish", "chicken", "shrimp", "tofu", "sashimi"]

Interval = tuple[int, int]


class Dish(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    notes: str | None = None
    price: float | None = Field(default=None, ge=0)
    tags: list[str] = Field(default_factory=list)
    protein_type: ProteinType | None = None
    cooking: list[str] = Field(default_factory=list)
    sauces: list[str] = Field(default_factory=list)
    sides: list[str] = Field(default_factory=list)
    is_high_sodium: bool = False
    allergens: list[str] = Field(default_factory=list)


class MacroRange(BaseModel):
    kcal: Interval
    protein: Interval
    carbs: Interval
    fat: Interval
    fiber: Interval


class DessertMatrix(BaseModel):
    green: list[str] = Field(default_factory=list)
    amber: list[str] = Field(default_factory=list)
    red: list[str] = Field(default_factory=list)


class CuisineTemplate(BaseModel):
    """Fallback dishes and advice for a cuisine when no menu is pasted."""

    default_picks: list[Dish] = Field(default_factory=list)
    scripts: list[str] = Field(default_factory=list)
    cautions: list[str] = Field(default_factory=list)
    best_sides: list[str] = Field(default_factory=list)
    dessert_matrix: DessertMatrix | None = None
    sodium_swaps: dict[str, str] = Field(default_factory=dict)
