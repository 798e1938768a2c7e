from __future__ import annotations

from workout_gen.models import GenerationRequest, MuscleQuota
from workout_gen.services import validate, validate_template


def request(*pairs) -> GenerationRequest:
    return GenerationRequest(quotas=[MuscleQuota(tag=t, count=c) for t, c in pairs])


def codes(report) -> list[str]:
    return [i.code for i in report.issues]


def test_valid_request(scenario_pool) -> None:
    report = validate(request(("Chest", 2), ("Legs", 1)), scenario_pool)
    assert report.valid
    assert report.issues == []


def test_missing_tag_is_error(scenario_pool) -> None:
    report = validate(request(("Back", 1)), scenario_pool)
    assert not report.valid
    assert codes(report) == ["NO_EXERCISES_FOR_TAG"]
    assert report.issues[0].tag == "Back"


def test_insufficient_exercises(scenario_pool) -> None:
    report = validate(request(("Legs", 3)), scenario_pool)
    assert not report.valid
    assert codes(report) == ["INSUFFICIENT_EXERCISES"]
    assert "need 3, have 2" in report.issues[0].message


def test_duplicate_tag(scenario_pool) -> None:
    report = validate(request(("Chest", 1), ("Chest", 1)), scenario_pool)
    assert not report.valid
    assert codes(report) == ["DUPLICATE_TAG"]


def test_count_below_one(scenario_pool) -> None:
    report = validate(request(("Chest", 0)), scenario_pool)
    assert not report.valid
    assert "INVALID_COUNT" in codes(report)


def test_empty_request(scenario_pool) -> None:
    report = validate(GenerationRequest(quotas=[]), scenario_pool)
    assert not report.valid
    assert codes(report) == ["EMPTY_REQUEST"]


def test_request_is_not_modified(scenario_pool) -> None:
    req = request(("Chest", 5), ("Chest", 1))
    before = req.model_dump()
    validate(req, scenario_pool)
    assert req.model_dump() == before


def test_overlap_is_warning_only(overlap_pool) -> None:
    # 3 Chest + 3 Triceps but only 5 distinct names
    report = validate(request(("Chest", 3), ("Triceps", 3)), overlap_pool)
    assert report.valid
    assert [i.code for i in report.warnings()] == ["OVERLAPPING_CANDIDATES"]
    assert report.errors() == []


def test_template_validation_rules() -> None:
    ok = validate_template("Upper Body", [MuscleQuota(tag="Chest", count=2)])
    assert ok.valid

    assert not validate_template("   ", [MuscleQuota(tag="Chest", count=2)]).valid
    assert not validate_template("x" * 51, [MuscleQuota(tag="Chest", count=2)]).valid
    assert validate_template("x" * 50, [MuscleQuota(tag="Chest", count=2)]).valid
    assert not validate_template("Legs", []).valid

    bad = validate_template("Legs", [MuscleQuota(tag="Legs", count=0)])
    assert bad.errors == ["Quota 1: Count must be a positive integer"]
