import logging
from typing import Annotated

from fastapi import APIRouter, Body, Depends

from tense_tutor.api.dependencies import get_spell_checker
from tense_tutor.api.errors import BadRequestError
from tense_tutor.api.schemas.analysis import SpellCheckRequestSchema
from tense_tutor.core.services.spell_checker import SpellChecker
from tense_tutor.core.value_objects.spelling import SpellReport
from tense_tutor.metrics import SPELLING_METRICS
from tense_tutor.utils.language_code_converter import (
    convert_language_code_to_alpha_2,
)

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post(
    '/',
    response_model=SpellReport,
    summary='Check text for spelling, grammar and semantic slips',
    description=(
        'Heuristic checker: a fixed list of known misspellings, '
        'repeated-letter and gerund repairs, plus present-progressive '
        'detection for English text.'
    ),
)
async def check_spelling(
    spell_checker: Annotated[SpellChecker, Depends(get_spell_checker)],
    payload: Annotated[SpellCheckRequestSchema, Body()],
) -> SpellReport:
    if payload.lang and convert_language_code_to_alpha_2(payload.lang) is None:
        logger.warning(f'Unknown language requested: {payload.lang}')
        raise BadRequestError(f"Unknown language: '{payload.lang}'")

    report = spell_checker.check_text(payload.text, lang=payload.lang)

    SPELLING_METRICS['checks'].labels(lang=report.lang.value).inc()
    for problem in report.problems:
        SPELLING_METRICS['problems'].labels(kind=problem.kind.value).inc()
    return report
