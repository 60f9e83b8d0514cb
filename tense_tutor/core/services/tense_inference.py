from typing import Dict, FrozenSet

from tense_tutor.core.consts import REQUIRED_ROLES
from tense_tutor.core.enums import GrammaticalRole, TenseType
from tense_tutor.core.value_objects.analysis import RolePart


def infer_tense(parts: Dict[GrammaticalRole, RolePart]) -> TenseType:
    """
    Decides which tense the sentence is attempting.
    The auxiliary outranks any past verb; without either the sentence is
    ambiguous.
    """
    auxiliary = parts.get(GrammaticalRole.AUXILIARY)
    if auxiliary is not None:
        if auxiliary.is_valid:
            return TenseType.PAST_CONTINUOUS
        return TenseType.PRESENT_ERROR
    if GrammaticalRole.MAIN_VERB_PAST in parts:
        return TenseType.PAST_SIMPLE
    return TenseType.UNKNOWN


def required_roles(tense_type: TenseType) -> FrozenSet[GrammaticalRole]:
    return REQUIRED_ROLES[tense_type]
