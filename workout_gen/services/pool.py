from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Sequence

from workout_gen.config import get_settings
from workout_gen.models.exercise import Exercise

logger = logging.getLogger(__name__)

LIBRARY_PATH = Path(__file__).resolve().parents[1] / "data" / "exercise_library.json"

ExercisePool = Dict[str, List[Exercise]]


@lru_cache(maxsize=4)
def _load_library_file(path: str) -> tuple[Exercise, ...]:
    with Path(path).open("r", encoding="utf-8") as f:
        raw = json.load(f)
    return tuple(Exercise.model_validate(item) for item in raw)


def load_library(path: str | Path | None = None) -> List[Exercise]:
    """Load the exercise library JSON (a flat array of exercises)."""
    if path is None:
        path = get_settings().LIBRARY_PATH or LIBRARY_PATH
    library = list(_load_library_file(str(path)))
    logger.debug("Loaded %d exercises from %s", len(library), path)
    return library


def build_pool(library: Sequence[Exercise]) -> ExercisePool:
    """Index the library by tag.

    An exercise is listed once under every tag it carries. A repeated
    (name, tag) pair in the library is skipped so no tag lists the same
    exercise twice.
    """
    pool: ExercisePool = {}
    seen: set[tuple[str, str]] = set()
    for ex in library:
        for tag in ex.tags:
            key = (ex.name, tag)
            if key in seen:
                continue
            seen.add(key)
            pool.setdefault(tag, []).append(ex)
    return pool


def available_tags(pool: ExercisePool) -> List[str]:
    return sorted(tag for tag, candidates in pool.items() if candidates)
