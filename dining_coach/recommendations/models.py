from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from ..guidance.models import AlcoholAdvice, PrePostPlan, SidesAndDessert
from ..menu.models import CuisineTemplate, Dish, MacroRange
from ..state.models import State


class ScoringContext(BaseModel):
    remaining_kcal: float = Field(default=650, ge=0)
    remaining_protein: float = Field(default=45, ge=0)
    training_day: bool = False
    low_sodium: bool = False
    low_carb: bool = False
    high_fiber: bool = False
    budget: bool = False


class Backup(BaseModel):
    out_of_stock: str
    cant_modify: str


class RankedPick(BaseModel):
    rank: int = Field(..., ge=1)
    dish: Dish
    score: float
    why: str
    script: str
    macros: MacroRange
    protein_per_100kcal: float
    sodium_flag: bool = False
    price_estimate: float | None = None
    badges: list[str] = Field(default_factory=list)
    backups: list[Backup] = Field(default_factory=list)
    allergen_conflicts: list[str] = Field(default_factory=list)


class RecommendationRequest(BaseModel):
    state: State | None = Field(
        default=None, description="Inputs to rank against; the saved state when omitted"
    )
    custom_templates: dict[str, CuisineTemplate] = Field(
        default_factory=dict,
        description="Templates merged over the built-in ones, keyed by cuisine",
    )


class RecommendationResponse(BaseModel):
    title: str
    source: Literal["menu", "template"]
    picks: list[RankedPick]
    total_candidates: int
    remaining_kcal: int
    remaining_protein: int
    message: str | None = None
    summary: str = ""
    alcohol: AlcoholAdvice | None = None
    sides_and_dessert: SidesAndDessert
    pre_post: PrePostPlan
    damage_control: str | None = None


class ParseMenuRequest(BaseModel):
    menu_text: str = Field(..., max_length=20000)


class ParseMenuResponse(BaseModel):
    dishes: list[Dish]
    count: int


class MacroEstimate(BaseModel):
    macros: MacroRange
    protein_per_100kcal: float
