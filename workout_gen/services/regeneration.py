from __future__ import annotations

import logging
import random
from typing import Dict, List, Set

from workout_gen.models.exercise import Exercise
from workout_gen.models.plan import GeneratedPlan, PlanExercise
from workout_gen.models.results import RegenerationResult
from .assembler import to_plan_exercise
from .pool import ExercisePool
from .sampling import Rng, shuffle

logger = logging.getLogger(__name__)


def _has_distinct_fill(options: List[Set[str]]) -> bool:
    """True if every slot can get its own name from its option set (bipartite matching)."""
    owner: Dict[str, int] = {}

    def place(i: int, seen: Set[str]) -> bool:
        for name in options[i]:
            if name in seen:
                continue
            seen.add(name)
            if name not in owner or place(owner[name], seen):
                owner[name] = i
                return True
        return False

    return all(place(i, set()) for i in range(len(options)))


def regenerate(plan: GeneratedPlan, pool: ExercisePool, rng: Rng = random.random) -> RegenerationResult:
    """Resample every unpinned slot while pinned slots stay exactly as they are.

    Slots are resolved left to right against their own source tag. A slot
    never takes a pinned name or a name already given to an earlier slot,
    and never takes a name that would leave a later slot with nothing
    distinct to hold (keeping its current exercise counts). A slot with no
    such candidate keeps its old exercise and a warning is reported.
    """
    if plan.all_pinned() or not plan.exercises:
        return RegenerationResult(plan=plan.model_copy(deep=True))

    pinned_names = {ex.name for ex in plan.exercises if plan.is_pinned(ex.id)}
    # names each unpinned slot could end up holding
    allowed: Dict[int, Set[str]] = {
        pos: ({c.name for c in pool.get(ex.source_tag, [])} | {ex.name}) - pinned_names
        for pos, ex in enumerate(plan.exercises)
        if not plan.is_pinned(ex.id)
    }

    taken: Set[str] = set(pinned_names)
    exercises: List[PlanExercise] = []
    pins: Dict[str, bool] = {}
    warnings: List[str] = []

    for pos, ex in enumerate(plan.exercises):
        if plan.is_pinned(ex.id):
            exercises.append(ex.model_copy(deep=True))
            pins[ex.id] = True
            continue

        later = [allowed[j] - taken for j in allowed if j > pos]
        candidates = [c for c in pool.get(ex.source_tag, []) if c.name not in taken]
        picked: Exercise | None = next(
            (c for c in shuffle(candidates, rng) if _has_distinct_fill([s - {c.name} for s in later])),
            None,
        )

        if picked is None:
            msg = f"No unused \"{ex.source_tag}\" exercises left; kept \"{ex.name}\"."
            logger.warning("regenerate: %s", msg)
            warnings.append(msg)
            exercises.append(ex.model_copy(deep=True))
            taken.add(ex.name)
            continue

        exercises.append(to_plan_exercise(picked, ex.source_tag))
        taken.add(picked.name)

    logger.debug("regenerate: %d pinned, %d resampled", len(pins), len(exercises) - len(pins))
    return RegenerationResult(plan=GeneratedPlan(exercises=exercises, pin_status=pins), warnings=warnings)
