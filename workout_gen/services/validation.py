from __future__ import annotations

from typing import List

from workout_gen.config import get_settings
from workout_gen.models.quota import GenerationRequest, MuscleQuota
from workout_gen.models.results import Issue, TemplateValidation, ValidationReport
from .pool import ExercisePool


def validate(request: GenerationRequest, pool: ExercisePool) -> ValidationReport:
    """Check a quota request against what the pool can supply.

    Advisory only: the request is never modified and nothing is raised.
    Rules:
    - A request needs at least one quota.
    - Each count must be at least 1.
    - A tag may appear only once per request.
    - Each tag needs candidates, and at least `count` of them.
    - Warn when tags share exercises so the de-duplicated plan comes up short.
    """
    issues: List[Issue] = []

    if not request.quotas:
        issues.append(Issue(code="EMPTY_REQUEST", message="At least one quota is required"))
        return ValidationReport(valid=False, issues=issues)

    seen: set[str] = set()
    sufficient = True
    for quota in request.quotas:
        tag, count = quota.tag, quota.count
        if count < 1:
            issues.append(Issue(code="INVALID_COUNT", tag=tag, message=f"quota must be at least 1 (got {count} for \"{tag}\")"))
        if tag in seen:
            issues.append(Issue(code="DUPLICATE_TAG", tag=tag, message=f"duplicate tag in request: \"{tag}\""))
            continue
        seen.add(tag)

        have = len(pool.get(tag, []))
        if have == 0:
            sufficient = False
            issues.append(Issue(code="NO_EXERCISES_FOR_TAG", tag=tag, message=f"no exercises for tag \"{tag}\""))
        elif have < count:
            sufficient = False
            issues.append(Issue(
                code="INSUFFICIENT_EXERCISES",
                tag=tag,
                message=f"insufficient exercises for tag \"{tag}\": need {count}, have {have}",
            ))

    if sufficient:
        distinct = {ex.name for tag in seen for ex in pool.get(tag, [])}
        requested = request.total()
        if len(distinct) < requested:
            issues.append(Issue(
                code="OVERLAPPING_CANDIDATES",
                severity="warning",
                message=(
                    f"Requested {requested} exercises but the selected tags share exercises; "
                    f"only {len(distinct)} distinct exercises are available."
                ),
            ))

    valid = not any(i.severity == "error" for i in issues)
    return ValidationReport(valid=valid, issues=issues)


def validate_template(name: str, quotas: List[MuscleQuota]) -> TemplateValidation:
    max_len = get_settings().TEMPLATE_NAME_MAX_LENGTH
    errors: List[str] = []

    if not name or not name.strip():
        errors.append("Template name is required")
    elif len(name.strip()) > max_len:
        errors.append(f"Template name must be {max_len} characters or less")

    if not quotas:
        errors.append("Template must have at least one quota")
    else:
        for idx, quota in enumerate(quotas, start=1):
            if not quota.tag:
                errors.append(f"Quota {idx}: Tag is required")
            if quota.count < 1:
                errors.append(f"Quota {idx}: Count must be a positive integer")

    return TemplateValidation(valid=not errors, errors=errors)
