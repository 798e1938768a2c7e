from __future__ import annotations

from collections import OrderedDict
from datetime import date as _date
from typing import Dict, Iterable, List, Optional, Tuple

from workout_gen.models.exercise import Exercise
from workout_gen.models.plan import GeneratedPlan, PlanExercise, RerollHistory, new_slot_id


def to_plan_exercise(candidate: Exercise, source_tag: str, inherit: Optional[PlanExercise] = None) -> PlanExercise:
    """Copy a candidate into a fresh plan slot.

    Presentation fields come from the candidate, or from `inherit` when a
    slot is being replaced and the user's edits should survive.
    """
    src = inherit if inherit is not None else candidate
    return PlanExercise(
        id=new_slot_id(),
        name=candidate.name,
        tags=list(candidate.tags),
        sets=src.sets,
        reps=src.reps,
        weight=src.weight,
        rest=src.rest,
        source_tag=source_tag,
        equipment=list(candidate.equipment),
    )


def assemble(selection: Iterable[Tuple[Exercise, str]]) -> List[PlanExercise]:
    return [to_plan_exercise(candidate, tag) for candidate, tag in selection]


def new_generated_plan(exercises: Iterable[PlanExercise]) -> GeneratedPlan:
    return GeneratedPlan(exercises=[ex.model_copy(deep=True) for ex in exercises], pin_status={})


def apply_reroll(plan: GeneratedPlan, slot_id: str, replacement: PlanExercise) -> GeneratedPlan:
    """Return a copy of `plan` with `slot_id` replaced in place.

    The replacement carries a new id, so a pin on the old id does not
    follow it.
    """
    idx = plan.index_of(slot_id)
    if idx is None:
        return plan.model_copy(deep=True)
    exercises = [ex.model_copy(deep=True) for ex in plan.exercises]
    exercises[idx] = replacement.model_copy(deep=True)
    return GeneratedPlan(exercises=exercises, pin_status=dict(plan.pin_status))


def toggle_pin(plan: GeneratedPlan, slot_id: str) -> GeneratedPlan:
    pins = dict(plan.pin_status)
    pins[slot_id] = not pins.get(slot_id, False)
    return GeneratedPlan(exercises=[ex.model_copy(deep=True) for ex in plan.exercises], pin_status=pins)


def prune_history(history: RerollHistory, plan: GeneratedPlan) -> RerollHistory:
    ids = {ex.id for ex in plan.exercises}
    return {k: list(v) for k, v in history.items() if k in ids}


def generate_plan_name(when: Optional[_date] = None) -> str:
    when = when or _date.today()
    # day without zero padding
    return f"Random Workout - {when.strftime('%b')} {when.day}, {when.year}"


def alternate_by_muscle_group(exercises: List[PlanExercise]) -> List[PlanExercise]:
    """Interleave exercises round-robin by source tag for circuit plans.

    Tags rotate in order of first appearance; order within a tag is kept.
    """
    groups: Dict[str, List[PlanExercise]] = OrderedDict()
    for ex in exercises:
        groups.setdefault(ex.source_tag, []).append(ex)

    out: List[PlanExercise] = []
    depth = max((len(g) for g in groups.values()), default=0)
    for i in range(depth):
        for group in groups.values():
            if i < len(group):
                out.append(group[i])
    return out
