from .exercise import Exercise, Tag
from .quota import MuscleQuota, GenerationRequest, QuotaTemplate
from .plan import PlanExercise, GeneratedPlan, RerollHistory, new_slot_id
from .results import (
    Issue,
    ValidationReport,
    GenerationResult,
    RegenerationResult,
    StorageResult,
    AddTemplateResult,
    TemplateValidation,
)

__all__ = [
    "Exercise",
    "Tag",
    "MuscleQuota",
    "GenerationRequest",
    "QuotaTemplate",
    "PlanExercise",
    "GeneratedPlan",
    "RerollHistory",
    "new_slot_id",
    "Issue",
    "ValidationReport",
    "GenerationResult",
    "RegenerationResult",
    "StorageResult",
    "AddTemplateResult",
    "TemplateValidation",
]
