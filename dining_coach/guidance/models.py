from __future__ import annotations

from pydantic import BaseModel, Field


class AlcoholAdvice(BaseModel):
    best: str
    impact: str
    rule: str


class SidesAndDessert(BaseModel):
    best_sides: list[str] = Field(default_factory=list)
    green: list[str] = Field(default_factory=list)
    amber: list[str] = Field(default_factory=list)
    red: list[str] = Field(default_factory=list)


class PrePostPlan(BaseModel):
    preload: str
    walk: str
    over_plan: str
