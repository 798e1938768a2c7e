from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from .exercise import Tag


class MuscleQuota(BaseModel):
    tag: Tag
    # Range is checked by the quota validator, not here, so a bad count is
    # reported to the user instead of raised.
    count: int


class GenerationRequest(BaseModel):
    quotas: List[MuscleQuota] = Field(default_factory=list)

    def tags(self) -> List[str]:
        return [q.tag for q in self.quotas]

    def total(self) -> int:
        return sum(max(q.count, 0) for q in self.quotas)


class QuotaTemplate(BaseModel):
    id: str
    name: str = Field(..., min_length=1, max_length=50)
    quotas: List[MuscleQuota] = Field(..., min_length=1)
    created_at: int = Field(..., description="epoch milliseconds")
