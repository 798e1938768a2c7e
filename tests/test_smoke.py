from __future__ import annotations

from workout_gen.models import GenerationRequest, MuscleQuota
from workout_gen.services import (
    apply_reroll,
    build_pool,
    generate,
    load_library,
    new_generated_plan,
    regenerate,
    reroll,
    toggle_pin,
    validate,
)


def test_smoke_end_to_end() -> None:
    pool = build_pool(load_library())
    request = GenerationRequest(quotas=[
        MuscleQuota(tag="Chest", count=3),
        MuscleQuota(tag="Back", count=2),
        MuscleQuota(tag="Quadriceps", count=2),
    ])

    report = validate(request, pool)
    assert report.valid, f"Validation issues: {report.issues}"

    result = generate(request, pool)
    assert result.errors == []
    assert len(result.exercises) == 7

    plan = new_generated_plan(result.exercises)
    plan = toggle_pin(plan, plan.exercises[0].id)

    slot_id = plan.exercises[-1].id
    replacement, history = reroll(plan, slot_id, pool, {})
    assert replacement is not None
    plan = apply_reroll(plan, slot_id, replacement)
    assert replacement.id in history

    out = regenerate(plan, pool)
    assert out.plan.exercises[0] == plan.exercises[0]
    assert len(out.plan.exercises) == 7
