from __future__ import annotations

import logging
import random
from typing import Callable, List, Optional, Sequence, Tuple, TypeVar

from workout_gen.config import get_settings
from workout_gen.models.exercise import Exercise
from workout_gen.models.plan import GeneratedPlan, PlanExercise, RerollHistory
from workout_gen.models.quota import GenerationRequest
from workout_gen.models.results import GenerationResult
from .assembler import assemble, to_plan_exercise
from .pool import ExercisePool

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Uniform float in [0, 1). Pass random.Random(seed).random for repeatable draws.
Rng = Callable[[], float]


def shuffle(items: Sequence[T], rng: Rng = random.random) -> List[T]:
    """Fisher-Yates shuffle of a copy of `items`."""
    out = list(items)
    for i in range(len(out) - 1, 0, -1):
        j = int(rng() * (i + 1))
        out[i], out[j] = out[j], out[i]
    return out


def choice(items: Sequence[T], rng: Rng = random.random) -> T:
    return items[int(rng() * len(items))]


def generate(request: GenerationRequest, pool: ExercisePool, rng: Rng = random.random) -> GenerationResult:
    """Draw a duplicate-free selection satisfying each quota, best effort.

    Quotas are served in request order. A tag that cannot be filled is
    reported in `errors` and gets whatever candidates it has; the other
    tags are unaffected.
    """
    selection: List[Tuple[Exercise, str]] = []
    errors: List[str] = []
    used: set[str] = set()

    for quota in request.quotas:
        tag, count = quota.tag, quota.count
        if count < 1:
            errors.append(f"Quota for \"{tag}\" must be at least 1.")
            continue
        candidates = pool.get(tag, [])
        if not candidates:
            errors.append(f"No exercises found for tag \"{tag}\"")
            continue

        taken = 0
        for ex in shuffle(candidates, rng):
            if taken >= count:
                break
            # already chosen under another tag
            if ex.name in used:
                continue
            used.add(ex.name)
            selection.append((ex, tag))
            taken += 1

        if taken < count:
            errors.append(f"Not enough \"{tag}\" exercises. Need {count}, have {taken}.")

    for msg in errors:
        logger.warning("generate: %s", msg)

    exercises = assemble(selection)
    logger.debug("generate: %d exercises for %d quotas", len(exercises), len(request.quotas))
    return GenerationResult(exercises=exercises, errors=errors)


def reroll_candidates(
    plan: GeneratedPlan,
    slot_id: str,
    pool: ExercisePool,
    history: Optional[RerollHistory] = None,
) -> List[Exercise]:
    current = plan.find(slot_id)
    if current is None:
        return []

    elsewhere = {ex.name for ex in plan.exercises if ex.id != slot_id}
    base = [
        ex for ex in pool.get(current.source_tag, [])
        if ex.name != current.name and ex.name not in elsewhere
    ]
    recent = set((history or {}).get(slot_id, []))
    fresh = [ex for ex in base if ex.name not in recent]
    # history exclusion is dropped when it leaves nothing
    return fresh or base


def can_reroll(
    plan: GeneratedPlan,
    slot_id: str,
    pool: ExercisePool,
    history: Optional[RerollHistory] = None,
) -> bool:
    return bool(reroll_candidates(plan, slot_id, pool, history))


def reroll(
    plan: GeneratedPlan,
    slot_id: str,
    pool: ExercisePool,
    history: Optional[RerollHistory] = None,
    rng: Rng = random.random,
) -> Tuple[Optional[PlanExercise], RerollHistory]:
    """Replace one slot with another exercise from the same tag.

    Returns the new exercise (with a new id) and the updated history, or
    (None, history) when the slot has no alternative. The history entry
    follows the slot to its new id. Neither `plan` nor `history` is modified.
    """
    history = {k: list(v) for k, v in (history or {}).items()}
    current = plan.find(slot_id)
    if current is None:
        logger.warning("reroll: slot %s not in plan", slot_id)
        return None, history

    candidates = reroll_candidates(plan, slot_id, pool, history)
    if not candidates:
        logger.info("reroll: no alternatives for \"%s\" (%s)", current.name, current.source_tag)
        return None, history

    picked = choice(candidates, rng)
    replacement = to_plan_exercise(picked, current.source_tag, inherit=current)

    size = get_settings().REROLL_HISTORY_SIZE
    shown = history.pop(slot_id, []) + [current.name]
    history[replacement.id] = shown[-size:] if size > 0 else []
    logger.debug("reroll: %s -> %s", current.name, replacement.name)
    return replacement, history
