import re
from typing import List, Optional, Tuple

from tense_tutor.core.consts import TIME_MARKERS
from tense_tutor.core.enums import (
    ErrorKind,
    FeedbackTipKind,
    GrammaticalRole,
    TenseType,
)
from tense_tutor.core.services.tokenizer import normalize_word
from tense_tutor.core.texts import Messages, get_tense_name, get_text
from tense_tutor.core.value_objects.analysis import AnalysisResult
from tense_tutor.core.value_objects.feedback import FeedbackTip

CONNECTOR_TIPS = {
    'while': Messages.CONNECTOR_WHILE,
    'when': Messages.CONNECTOR_WHEN,
    'as': Messages.CONNECTOR_AS,
}


def find_time_marker(text: str) -> Optional[Tuple[str, TenseType]]:
    lowered = text.lower()
    for tense, markers in TIME_MARKERS.items():
        for marker in markers:
            if re.search(rf'\b{re.escape(marker)}\b', lowered):
                return marker, tense
    return None


def _error_tips(
    result: AnalysisResult, language_code: str
) -> List[FeedbackTip]:
    tips = []
    for error in result.errors:
        if error.kind == ErrorKind.PRESENT_IN_PAST:
            tips.append(
                FeedbackTip(
                    kind=FeedbackTipKind.CORRECTION,
                    message=get_text(
                        Messages.CHANGE_AUXILIARY,
                        language_code,
                        detected=error.detected,
                        suggestion=error.suggestion,
                    ),
                )
            )
        elif error.kind == ErrorKind.MISSING_GERUND:
            tips.append(
                FeedbackTip(
                    kind=FeedbackTipKind.ADDITION,
                    message=get_text(Messages.ADD_GERUND, language_code),
                )
            )
    return tips


def _missing_role_tips(
    result: AnalysisResult, language_code: str
) -> List[FeedbackTip]:
    tips = []
    if GrammaticalRole.SUBJECT in result.missing_roles:
        tips.append(
            FeedbackTip(
                kind=FeedbackTipKind.ADDITION,
                message=get_text(Messages.ADD_SUBJECT, language_code),
            )
        )
    # A present auxiliary already carries its own correction.
    if (
        GrammaticalRole.MAIN_VERB_PAST in result.missing_roles
        and result.tense_type != TenseType.PRESENT_ERROR
    ):
        tips.append(
            FeedbackTip(
                kind=FeedbackTipKind.ADDITION,
                message=get_text(Messages.ADD_PAST_VERB, language_code),
            )
        )
    return tips


def generate_tips(
    result: AnalysisResult, language_code: str
) -> List[FeedbackTip]:
    """
    Turns an analysis into learner-facing hints, most urgent first:
    corrections, then what is missing, then connector and time-marker
    advice. Text with no recognisable words only gets a nudge to keep
    writing.
    """
    if not result.parts:
        return [
            FeedbackTip(
                kind=FeedbackTipKind.TIP,
                message=get_text(Messages.KEEP_WRITING, language_code),
            )
        ]

    tips = _error_tips(result, language_code)
    tips.extend(_missing_role_tips(result, language_code))

    connector = result.parts.get(GrammaticalRole.CONNECTOR)
    if connector is not None:
        message_key = CONNECTOR_TIPS.get(normalize_word(connector.text))
        if message_key is not None:
            tips.append(
                FeedbackTip(
                    kind=FeedbackTipKind.TIP,
                    message=get_text(message_key, language_code),
                )
            )

    time_marker = find_time_marker(result.original_text)
    if time_marker is not None:
        marker, suggested_tense = time_marker
        if suggested_tense != result.tense_type:
            tips.append(
                FeedbackTip(
                    kind=FeedbackTipKind.TENSE_SUGGESTION,
                    message=get_text(
                        Messages.TIME_MARKER_TENSE,
                        language_code,
                        marker=marker,
                        tense=get_tense_name(
                            suggested_tense.value, language_code
                        ),
                    ),
                )
            )

    return tips
