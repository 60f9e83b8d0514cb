from typing import Dict

from tense_tutor.core.enums import GrammaticalRole, TenseType
from tense_tutor.core.services.tense_inference import required_roles
from tense_tutor.core.value_objects.analysis import CompletionScore, RolePart


def percentage(done: int, total: int) -> int:
    """Rounds half up, like the progress bars do, and clamps to 0..100."""
    if total <= 0:
        return 0
    value = (200 * done + total) // (2 * total)
    return max(0, min(100, value))


def score(
    parts: Dict[GrammaticalRole, RolePart],
    tense_type: TenseType,
) -> CompletionScore:
    required = required_roles(tense_type)
    completed = frozenset(
        role for role, part in parts.items() if part.is_valid
    )
    missing = required - completed

    return CompletionScore(
        completed_roles=completed,
        missing_roles=missing,
        completion_percentage=percentage(
            len(completed & required), len(required)
        ),
    )
