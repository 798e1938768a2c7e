from __future__ import annotations

from datetime import date

from workout_gen.models import GeneratedPlan
from workout_gen.services import (
    alternate_by_muscle_group,
    apply_reroll,
    generate_plan_name,
    new_generated_plan,
    prune_history,
    toggle_pin,
)

from conftest import make_plan, make_slot


def test_new_plan_is_generated_and_unpinned() -> None:
    plan = new_generated_plan([make_slot("Bench", "Chest")])
    assert plan.is_generated is True
    assert plan.pin_status == {}


def test_pins_only_for_present_ids() -> None:
    slot = make_slot("Bench", "Chest")
    plan = GeneratedPlan(exercises=[slot], pin_status={slot.id: True, "gone": True})
    assert plan.pin_status == {slot.id: True}


def test_toggle_pin() -> None:
    plan = make_plan([make_slot("Bench", "Chest"), make_slot("Squat", "Legs")])
    slot_id = plan.exercises[0].id

    pinned = toggle_pin(plan, slot_id)
    assert pinned.is_pinned(slot_id)
    assert not plan.is_pinned(slot_id)
    assert not toggle_pin(pinned, slot_id).is_pinned(slot_id)


def test_all_pinned() -> None:
    plan = make_plan([make_slot("Bench", "Chest"), make_slot("Squat", "Legs")], pinned=[0, 1])
    assert plan.all_pinned()
    assert not make_plan([make_slot("Bench", "Chest")]).all_pinned()


def test_apply_reroll_replaces_in_place_and_drops_old_pin() -> None:
    a, b, c = make_slot("Bench", "Chest"), make_slot("Squat", "Legs"), make_slot("Fly", "Chest")
    plan = make_plan([a, b, c], pinned=[1])
    replacement = make_slot("Lunge", "Legs")

    out = apply_reroll(plan, b.id, replacement)
    assert [ex.name for ex in out.exercises] == ["Bench", "Lunge", "Fly"]
    assert out.pin_status == {}
    assert [ex.name for ex in plan.exercises] == ["Bench", "Squat", "Fly"]


def test_prune_history() -> None:
    slot = make_slot("Bench", "Chest")
    plan = make_plan([slot])
    assert prune_history({slot.id: ["Fly"], "old": ["Dip"]}, plan) == {slot.id: ["Fly"]}


def test_plan_name() -> None:
    assert generate_plan_name(date(2025, 11, 5)) == "Random Workout - Nov 5, 2025"


def test_alternate_by_muscle_group() -> None:
    slots = [
        make_slot("Bench", "Chest"),
        make_slot("Fly", "Chest"),
        make_slot("Dip", "Chest"),
        make_slot("Squat", "Legs"),
        make_slot("Row", "Back"),
    ]
    out = alternate_by_muscle_group(slots)
    assert [ex.name for ex in out] == ["Bench", "Squat", "Row", "Fly", "Dip"]
    assert alternate_by_muscle_group([]) == []
