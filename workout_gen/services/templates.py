from __future__ import annotations

import errno
import logging
import time
from pathlib import Path
from typing import List, Optional, Protocol, Sequence
from uuid import uuid4

from pydantic import TypeAdapter, ValidationError

from workout_gen.config import get_settings
from workout_gen.models.quota import MuscleQuota, QuotaTemplate
from workout_gen.models.results import AddTemplateResult, StorageResult
from .validation import validate_template

logger = logging.getLogger(__name__)

_TEMPLATES = TypeAdapter(List[QuotaTemplate])

QUOTA_MESSAGE = "Storage limit reached. Delete old templates to free space."


class TemplateBackend(Protocol):
    def load(self) -> List[QuotaTemplate]: ...

    def save(self, templates: List[QuotaTemplate]) -> StorageResult: ...


class JsonFileTemplateBackend:
    """Templates as a JSON array in a single file (last write wins)."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load(self) -> List[QuotaTemplate]:
        if not self.path.exists():
            return []
        try:
            raw = self.path.read_text(encoding="utf-8")
            if not raw.strip():
                return []
            return _TEMPLATES.validate_json(raw)
        except (OSError, ValidationError) as e:
            logger.error("Failed to load quota templates from %s: %s", self.path, e)
            return []

    def save(self, templates: List[QuotaTemplate]) -> StorageResult:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            data = _TEMPLATES.dump_json(templates, indent=2)
            self.path.write_bytes(data)
            return StorageResult(success=True)
        except OSError as e:
            if e.errno in (errno.ENOSPC, getattr(errno, "EDQUOT", errno.ENOSPC)):
                logger.warning("Quota template storage full: %s", e)
                return StorageResult(success=False, error="quota", message=QUOTA_MESSAGE)
            logger.error("Failed to save quota templates to %s: %s", self.path, e)
            return StorageResult(
                success=False,
                error="unknown",
                message="Failed to save quota templates. Please try again.",
            )


class InMemoryTemplateBackend:
    def __init__(self, max_templates: Optional[int] = None) -> None:
        self.max_templates = max_templates
        self._data: str = "[]"

    def load(self) -> List[QuotaTemplate]:
        return _TEMPLATES.validate_json(self._data)

    def save(self, templates: List[QuotaTemplate]) -> StorageResult:
        if self.max_templates is not None and len(templates) > self.max_templates:
            return StorageResult(success=False, error="quota", message=QUOTA_MESSAGE)
        self._data = _TEMPLATES.dump_json(templates).decode("utf-8")
        return StorageResult(success=True)


class QuotaTemplateStore:
    def __init__(self, backend: TemplateBackend) -> None:
        self.backend = backend

    def list(self) -> List[QuotaTemplate]:
        return self.backend.load()

    def get(self, template_id: str) -> Optional[QuotaTemplate]:
        return next((t for t in self.list() if t.id == template_id), None)

    def save(self, name: str, quotas: Sequence[MuscleQuota]) -> AddTemplateResult:
        quotas = [q.model_copy() for q in quotas]
        check = validate_template(name, quotas)
        if not check.valid:
            return AddTemplateResult(
                success=False,
                error="invalid",
                message="; ".join(check.errors),
                errors=check.errors,
            )

        template = QuotaTemplate(
            id=uuid4().hex,
            name=name.strip(),
            quotas=quotas,
            created_at=int(time.time() * 1000),
        )
        templates = self.list()
        templates.append(template)

        result = self.backend.save(templates)
        if not result.success:
            return AddTemplateResult(**result.model_dump())
        logger.info("Saved quota template \"%s\" (%d quotas)", template.name, len(quotas))
        return AddTemplateResult(success=True, template=template)

    def delete(self, template_id: str) -> StorageResult:
        templates = self.list()
        remaining = [t for t in templates if t.id != template_id]
        if len(remaining) == len(templates):
            return StorageResult(success=False, error="not_found", message="Template not found")
        return self.backend.save(remaining)


def default_store() -> QuotaTemplateStore:
    return QuotaTemplateStore(JsonFileTemplateBackend(get_settings().TEMPLATES_PATH))
