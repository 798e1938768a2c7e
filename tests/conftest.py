from __future__ import annotations

import random
from typing import Dict, List

import pytest

from workout_gen.models import Exercise, GeneratedPlan, PlanExercise
from workout_gen.services import build_pool


def make_exercise(name: str, *tags: str, **fields) -> Exercise:
    fields.setdefault("sets", 3)
    fields.setdefault("reps", "10")
    return Exercise(name=name, tags=list(tags), **fields)


def make_slot(name: str, tag: str, **fields) -> PlanExercise:
    fields.setdefault("sets", 3)
    fields.setdefault("reps", "10")
    return PlanExercise(name=name, tags=[tag], source_tag=tag, **fields)


def make_plan(slots: List[PlanExercise], pinned: List[int] | None = None) -> GeneratedPlan:
    pins: Dict[str, bool] = {slots[i].id: True for i in (pinned or [])}
    return GeneratedPlan(exercises=slots, pin_status=pins)


@pytest.fixture
def rng():
    return random.Random(1234).random


@pytest.fixture
def scenario_pool():
    library = [
        make_exercise("Bench", "Chest"),
        make_exercise("Incline", "Chest"),
        make_exercise("Fly", "Chest"),
        make_exercise("Squat", "Legs"),
        make_exercise("Lunge", "Legs"),
    ]
    return build_pool(library)


@pytest.fixture
def overlap_pool():
    # Dip counts for both Chest and Triceps
    library = [
        make_exercise("Bench", "Chest"),
        make_exercise("Dip", "Chest", "Triceps"),
        make_exercise("Fly", "Chest"),
        make_exercise("Pushdown", "Triceps"),
        make_exercise("Skull Crusher", "Triceps"),
    ]
    return build_pool(library)
