from typing import Dict, List, Optional

from tense_tutor.core.consts import (
    COMPLEMENT_MIN_TOKENS,
    CONNECTORS,
    GERUND_MIN_LENGTH,
    GERUND_SUFFIX,
    IRREGULAR_PAST_VERBS,
    PAST_AUXILIARIES,
    PRESENT_AUXILIARY_CORRECTIONS,
    REGULAR_PAST_MIN_LENGTH,
    REGULAR_PAST_SUFFIX,
    SUBJECT_PRONOUNS,
)
from tense_tutor.core.enums import (
    ErrorKind,
    GrammaticalRole,
    TenseType,
    VerbForm,
)
from tense_tutor.core.value_objects.analysis import RolePart
from tense_tutor.core.value_objects.token import Token

# Order matters: a token is claimed by the first rule it satisfies.
ROLE_PRECEDENCE = (
    GrammaticalRole.SUBJECT,
    GrammaticalRole.AUXILIARY,
    GrammaticalRole.GERUND,
    GrammaticalRole.MAIN_VERB_PAST,
    GrammaticalRole.CONNECTOR,
)


def is_gerund(word: str) -> bool:
    return word.endswith(GERUND_SUFFIX) and len(word) >= GERUND_MIN_LENGTH


def is_past_verb(word: str) -> bool:
    if word in IRREGULAR_PAST_VERBS:
        return True
    return (
        word.endswith(REGULAR_PAST_SUFFIX)
        and len(word) >= REGULAR_PAST_MIN_LENGTH
    )


def match_role(word: str) -> Optional[GrammaticalRole]:
    """Returns the first role in precedence order the word can fill."""
    if word in SUBJECT_PRONOUNS:
        return GrammaticalRole.SUBJECT
    if word in PAST_AUXILIARIES or word in PRESENT_AUXILIARY_CORRECTIONS:
        return GrammaticalRole.AUXILIARY
    if is_gerund(word):
        return GrammaticalRole.GERUND
    if is_past_verb(word):
        return GrammaticalRole.MAIN_VERB_PAST
    if word in CONNECTORS:
        return GrammaticalRole.CONNECTOR
    return None


def _subject_part(token: Token) -> RolePart:
    return RolePart(
        role=GrammaticalRole.SUBJECT,
        text=token.text,
        is_valid=True,
        form=VerbForm.PRONOUN,
        start_index=token.start_index,
    )


def _auxiliary_part(candidates: List[Token]) -> Optional[RolePart]:
    past = next(
        (t for t in candidates if t.normalized_text in PAST_AUXILIARIES),
        None,
    )
    if past is not None:
        return RolePart(
            role=GrammaticalRole.AUXILIARY,
            text=past.text,
            is_valid=True,
            form=VerbForm.PAST_AUXILIARY,
            start_index=past.start_index,
            tense_hint=TenseType.PAST_CONTINUOUS,
        )
    if not candidates:
        return None

    present = candidates[0]
    return RolePart(
        role=GrammaticalRole.AUXILIARY,
        text=present.text,
        is_valid=False,
        form=VerbForm.PRESENT_AUXILIARY,
        start_index=present.start_index,
        error=ErrorKind.PRESENT_IN_PAST,
        suggestion=PRESENT_AUXILIARY_CORRECTIONS[present.normalized_text],
    )


def _gerund_part(token: Token) -> RolePart:
    return RolePart(
        role=GrammaticalRole.GERUND,
        text=token.text,
        is_valid=True,
        form=VerbForm.GERUND,
        start_index=token.start_index,
        tense_hint=TenseType.PAST_CONTINUOUS,
        base_verb=token.normalized_text[: -len(GERUND_SUFFIX)],
    )


def _main_verb_past_part(token: Token) -> RolePart:
    if token.normalized_text.endswith(REGULAR_PAST_SUFFIX):
        form = VerbForm.REGULAR_PAST
    else:
        form = VerbForm.IRREGULAR_PAST
    return RolePart(
        role=GrammaticalRole.MAIN_VERB_PAST,
        text=token.text,
        is_valid=True,
        form=form,
        start_index=token.start_index,
        tense_hint=TenseType.PAST_SIMPLE,
    )


def _connector_part(token: Token) -> RolePart:
    return RolePart(
        role=GrammaticalRole.CONNECTOR,
        text=token.text,
        is_valid=True,
        form=VerbForm.CONNECTOR,
        start_index=token.start_index,
    )


def classify(tokens: List[Token]) -> Dict[GrammaticalRole, RolePart]:
    """
    Assigns grammatical roles to tokens.

    Every token is matched against the role rules in precedence order and
    belongs to the first rule it satisfies. Each role then records its
    leftmost token. A past-tense main verb is only recorded when no
    auxiliary fixed the tense, and the complement is a length heuristic
    that is not tied to any word.
    """
    candidates: Dict[GrammaticalRole, List[Token]] = {
        role: [] for role in ROLE_PRECEDENCE
    }
    for token in tokens:
        role = match_role(token.normalized_text)
        if role is not None:
            candidates[role].append(token)

    parts: Dict[GrammaticalRole, RolePart] = {}

    if candidates[GrammaticalRole.SUBJECT]:
        parts[GrammaticalRole.SUBJECT] = _subject_part(
            candidates[GrammaticalRole.SUBJECT][0]
        )

    auxiliary = _auxiliary_part(candidates[GrammaticalRole.AUXILIARY])
    if auxiliary is not None:
        parts[GrammaticalRole.AUXILIARY] = auxiliary

    if candidates[GrammaticalRole.GERUND]:
        parts[GrammaticalRole.GERUND] = _gerund_part(
            candidates[GrammaticalRole.GERUND][0]
        )

    if auxiliary is None and candidates[GrammaticalRole.MAIN_VERB_PAST]:
        parts[GrammaticalRole.MAIN_VERB_PAST] = _main_verb_past_part(
            candidates[GrammaticalRole.MAIN_VERB_PAST][0]
        )

    if candidates[GrammaticalRole.CONNECTOR]:
        parts[GrammaticalRole.CONNECTOR] = _connector_part(
            candidates[GrammaticalRole.CONNECTOR][0]
        )

    if len(tokens) >= COMPLEMENT_MIN_TOKENS:
        parts[GrammaticalRole.COMPLEMENT] = RolePart(
            role=GrammaticalRole.COMPLEMENT,
            text='',
            is_valid=True,
            form=VerbForm.COMPLEMENT,
        )

    return parts
