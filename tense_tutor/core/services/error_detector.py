from typing import Dict, List

from tense_tutor.core.consts import GERUND_PLACEHOLDER
from tense_tutor.core.enums import ErrorKind, GrammaticalRole, TenseType
from tense_tutor.core.value_objects.analysis import ErrorRecord, RolePart


def detect_errors(
    parts: Dict[GrammaticalRole, RolePart],
    tense_type: TenseType,
) -> List[ErrorRecord]:
    """
    Cross-checks the classified roles against the inferred tense.

    A present auxiliary is a correctness error; a past auxiliary without a
    gerund is a completeness error, still reported so the learner knows
    what to add next.
    """
    errors: List[ErrorRecord] = []
    auxiliary = parts.get(GrammaticalRole.AUXILIARY)

    if (
        auxiliary is not None
        and auxiliary.error == ErrorKind.PRESENT_IN_PAST
    ):
        errors.append(
            ErrorRecord(
                kind=ErrorKind.PRESENT_IN_PAST,
                detected=auxiliary.text,
                suggestion=auxiliary.suggestion or '',
                at_index=auxiliary.start_index or 0,
            )
        )

    if (
        tense_type == TenseType.PAST_CONTINUOUS
        and GrammaticalRole.GERUND not in parts
    ):
        at_index = 0
        if auxiliary is not None and auxiliary.start_index is not None:
            at_index = auxiliary.start_index + len(auxiliary.text)
        errors.append(
            ErrorRecord(
                kind=ErrorKind.MISSING_GERUND,
                detected='',
                suggestion=GERUND_PLACEHOLDER,
                at_index=at_index,
            )
        )

    return errors
