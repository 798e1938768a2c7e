from .pool import ExercisePool, load_library, build_pool, available_tags
from .validation import validate, validate_template
from .sampling import shuffle, generate, reroll, reroll_candidates, can_reroll
from .assembler import (
    to_plan_exercise,
    assemble,
    new_generated_plan,
    apply_reroll,
    toggle_pin,
    prune_history,
    generate_plan_name,
    alternate_by_muscle_group,
)
from .regeneration import regenerate
from .templates import (
    QuotaTemplateStore,
    JsonFileTemplateBackend,
    InMemoryTemplateBackend,
    default_store,
)

__all__ = [
    "ExercisePool",
    "load_library",
    "build_pool",
    "available_tags",
    "validate",
    "validate_template",
    "shuffle",
    "generate",
    "reroll",
    "reroll_candidates",
    "can_reroll",
    "to_plan_exercise",
    "assemble",
    "new_generated_plan",
    "apply_reroll",
    "toggle_pin",
    "prune_history",
    "generate_plan_name",
    "alternate_by_muscle_group",
    "regenerate",
    "QuotaTemplateStore",
    "JsonFileTemplateBackend",
    "InMemoryTemplateBackend",
    "default_store",
]
