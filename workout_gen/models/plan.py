from __future__ import annotations

from typing import Dict, List, Literal, Optional
from uuid import uuid4

from pydantic import BaseModel, Field, model_validator


# slot id -> recently shown names for that slot, oldest first
RerollHistory = Dict[str, List[str]]


def new_slot_id() -> str:
    return uuid4().hex


class PlanExercise(BaseModel):
    """An exercise instance owned by a plan; editable without touching the pool."""

    id: str = Field(default_factory=new_slot_id)
    name: str
    tags: List[str] = Field(default_factory=list)
    sets: int = Field(..., ge=1)
    reps: str
    weight: str = ""
    rest: str = ""
    source_tag: str
    equipment: List[str] = Field(default_factory=list)


class GeneratedPlan(BaseModel):
    exercises: List[PlanExercise] = Field(default_factory=list)
    pin_status: Dict[str, bool] = Field(default_factory=dict)
    is_generated: Literal[True] = True

    @model_validator(mode="after")
    def _drop_orphan_pins(self) -> "GeneratedPlan":
        ids = {ex.id for ex in self.exercises}
        self.pin_status = {k: v for k, v in self.pin_status.items() if k in ids}
        return self

    def find(self, slot_id: str) -> Optional[PlanExercise]:
        return next((ex for ex in self.exercises if ex.id == slot_id), None)

    def index_of(self, slot_id: str) -> Optional[int]:
        return next((i for i, ex in enumerate(self.exercises) if ex.id == slot_id), None)

    def names(self) -> List[str]:
        return [ex.name for ex in self.exercises]

    def is_pinned(self, slot_id: str) -> bool:
        return self.pin_status.get(slot_id) is True

    def all_pinned(self) -> bool:
        return bool(self.exercises) and all(self.is_pinned(ex.id) for ex in self.exercises)
