from __future__ import annotations

from typing import Annotated, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, field_validator

from workout_gen.config import get_settings


# Muscle-group label, e.g. "Chest". Blank labels are rejected so a typo can
# never quietly resolve to an empty candidate list.
Tag = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


def _default_sets() -> int:
    return get_settings().DEFAULT_SETS


def _default_reps() -> str:
    return get_settings().DEFAULT_REPS


class Exercise(BaseModel):
    """Candidate exercise from the library. Read-only to the engine."""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "examples": [
                {
                    "name": "Barbell Bench Press",
                    "tags": ["Chest", "Triceps"],
                    "sets": 4,
                    "reps": "6-8",
                    "weight": "60kg",
                    "rest": "120s",
                    "equipment": ["barbell", "bench"],
                }
            ]
        },
    )

    name: str = Field(..., min_length=1)
    tags: List[Tag] = Field(default_factory=list)
    sets: int = Field(default_factory=_default_sets, ge=1)
    reps: str = Field(default_factory=_default_reps)
    weight: str = ""
    rest: str = ""
    equipment: List[str] = Field(default_factory=list)
    description: Optional[str] = None

    @field_validator("tags")
    @classmethod
    def _dedupe_tags(cls, v: List[str]) -> List[str]:
        # ordered set
        seen: set[str] = set()
        out: List[str] = []
        for t in v:
            if t in seen:
                continue
            seen.add(t)
            out.append(t)
        return out
