from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from .plan import GeneratedPlan, PlanExercise
from .quota import QuotaTemplate


class Issue(BaseModel):
    code: Literal[
        "EMPTY_REQUEST",
        "INVALID_COUNT",
        "DUPLICATE_TAG",
        "NO_EXERCISES_FOR_TAG",
        "INSUFFICIENT_EXERCISES",
        "OVERLAPPING_CANDIDATES",
    ]
    severity: Literal["error", "warning"] = "error"
    tag: Optional[str] = None
    message: str


class ValidationReport(BaseModel):
    valid: bool
    issues: List[Issue] = Field(default_factory=list)

    def errors(self) -> List[Issue]:
        return [i for i in self.issues if i.severity == "error"]

    def warnings(self) -> List[Issue]:
        return [i for i in self.issues if i.severity == "warning"]


class GenerationResult(BaseModel):
    exercises: List[PlanExercise] = Field(default_factory=list)
    errors: List[str] = Field(default_factory=list)


class RegenerationResult(BaseModel):
    plan: GeneratedPlan
    warnings: List[str] = Field(default_factory=list)


StorageError = Literal["quota", "not_found", "invalid", "unknown"]


class StorageResult(BaseModel):
    success: bool
    error: Optional[StorageError] = None
    message: Optional[str] = None
    errors: List[str] = Field(default_factory=list)


class AddTemplateResult(StorageResult):
    template: Optional[QuotaTemplate] = None


class TemplateValidation(BaseModel):
    valid: bool
    errors: List[str] = Field(default_factory=list)
