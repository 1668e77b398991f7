from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

Mode = Literal["Quick", "Standard", "Power"]
GoalPreset = Literal["Cut (rapid)", "Cut (steady)", "Maintenance while traveling"]
AlcoholType = Literal["wine", "spirits", "beer", "none"]
MealType = Literal["lunch", "dinner"]
SocialContext = Literal["client dinner", "celebration", "solo travel"]
Spice = Literal["low", "medium", "high"]


class DietaryFilters(BaseModel):
    avoid_pork: bool = False
    avoid_shellfish: bool = False
    vegetarian: bool = False
    pescatarian: bool = False
    dairy_free: bool = False
    gluten_free: bool = False
    nut_allergy: bool = False


class Preferences(BaseModel):
    low_sodium: bool = False
    low_carb: bool = False
    high_fiber: bool = True
    spice: Spice = "medium"


class AlcoholPlan(BaseModel):
    plan: Literal[0, 1, 2] = 0
    type: AlcoholType = "none"


class Favorite(BaseModel):
    title: str
    summary: str
    date: str


class Recent(BaseModel):
    name: str
    cuisine: str
    date: str


class State(BaseModel):
    mode: Mode = "Standard"
    goal: GoalPreset = "Cut (steady)"
    body_weight: float | None = Field(default=None, gt=0, description="Pounds")
    daily_kcal: int | None = Field(default=None, ge=0)
    protein_target: int | None = Field(default=None, ge=0)
    remaining_kcal: int | None = Field(default=None, ge=0)
    remaining_protein: int | None = Field(default=None, ge=0)
    meal_type: MealType = "dinner"
    training_day: bool = False
    cuisine: str = "Steakhouse"
    restaurant_url: str | None = Field(default=None, description="Kept for the user's notes only")
    menu_text: str | None = None
    dietary: DietaryFilters = Field(default_factory=DietaryFilters)
    prefs: Preferences = Field(default_factory=Preferences)
    alcohol: AlcoholPlan = Field(default_factory=AlcoholPlan)
    budget_mode: bool = False
    social_context: SocialContext = "client dinner"
    next_morning_rebalance: bool = True
    walk_mins: Literal[0, 10, 20] = 10
    favorites: list[Favorite] = Field(default_factory=list)
    recents: list[Recent] = Field(default_factory=list)
