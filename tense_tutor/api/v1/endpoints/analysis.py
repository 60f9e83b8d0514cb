import logging
from typing import Annotated

from fastapi import APIRouter, Body, Depends

from tense_tutor.api.dependencies import get_grammar_analyzer
from tense_tutor.api.errors import InternalServerError
from tense_tutor.api.schemas.analysis import AnalyzeRequestSchema
from tense_tutor.core.services.grammar_analyzer import GrammarAnalyzer
from tense_tutor.core.value_objects.analysis import (
    AnalysisResult,
    QuickClassification,
)
from tense_tutor.metrics import ANALYSIS_METRICS

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post(
    '/',
    response_model=AnalysisResult,
    summary='Analyze the grammatical structure of a sentence',
    description=(
        'Classifies grammatical roles, infers the attempted past tense, '
        'detects tense errors and scores how complete the sentence is.'
    ),
)
async def analyze_sentence(
    analyzer: Annotated[GrammarAnalyzer, Depends(get_grammar_analyzer)],
    payload: Annotated[AnalyzeRequestSchema, Body()],
) -> AnalysisResult:
    try:
        with ANALYSIS_METRICS['analysis_time'].labels(
            operation='analyze'
        ).time():
            result = analyzer.analyze(payload.text)
    except Exception as e:
        logger.error(f'Analysis failed for {payload.text!r}: {e}')
        raise InternalServerError('Sentence analysis failed') from e

    ANALYSIS_METRICS['analyses'].labels(
        tense_type=result.tense_type.value
    ).inc()
    if not result.is_valid:
        ANALYSIS_METRICS['invalid_analyses'].labels(
            tense_type=result.tense_type.value
        ).inc()
    logger.debug(f'{result=}')
    return result


@router.post(
    '/quick/',
    response_model=QuickClassification,
    summary='Classify roles and tense only',
    description=(
        'Cheap subset of the full analysis used to light up role icons '
        'while the learner is still typing.'
    ),
)
async def quick_classify_sentence(
    analyzer: Annotated[GrammarAnalyzer, Depends(get_grammar_analyzer)],
    payload: Annotated[AnalyzeRequestSchema, Body()],
) -> QuickClassification:
    try:
        with ANALYSIS_METRICS['analysis_time'].labels(
            operation='quick_classify'
        ).time():
            classification = analyzer.quick_classify(payload.text)
    except Exception as e:
        logger.error(
            f'Quick classification failed for {payload.text!r}: {e}'
        )
        raise InternalServerError('Sentence classification failed') from e

    ANALYSIS_METRICS['quick_classifications'].labels(
        tense_type=classification.tense_type.value
    ).inc()
    return classification
