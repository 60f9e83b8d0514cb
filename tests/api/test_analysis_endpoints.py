from unittest.mock import MagicMock

import pytest
from httpx import AsyncClient

from tense_tutor.config import settings
from tense_tutor.core.services.grammar_analyzer import GrammarAnalyzer
from tense_tutor.core.value_objects.analysis import (
    AnalysisResult,
    QuickClassification,
)
from tense_tutor.main import app


@pytest.mark.asyncio
async def test_analyze_sentence(client: AsyncClient):
    response = await client.post(
        '/api/v1/analysis/', json={'text': 'I was studying when you called'}
    )

    assert response.status_code == 200
    data = response.json()
    assert data['tense_type'] == 'past_continuous'
    assert data['parts']['subject']['text'] == 'I'
    assert data['parts']['auxiliary']['text'] == 'was'
    assert data['parts']['gerund']['text'] == 'studying'
    assert data['parts']['gerund']['base_verb'] == 'study'
    assert data['parts']['connector']['text'] == 'when'
    assert data['is_valid'] is True
    assert data['errors'] == []
    assert data['missing_roles'] == []
    assert data['completion_percentage'] == 100


@pytest.mark.asyncio
@pytest.mark.parametrize(
    'text',
    ['I am studying now', 'I was', 'went home yesterday', ''],
)
async def test_remote_and_local_results_match(
    client: AsyncClient, grammar_analyzer: GrammarAnalyzer, text
):
    response = await client.post('/api/v1/analysis/', json={'text': text})

    assert response.status_code == 200
    remote = AnalysisResult.model_validate(response.json())
    assert remote == grammar_analyzer.analyze(text)


@pytest.mark.asyncio
async def test_analyze_present_error(client: AsyncClient):
    response = await client.post(
        '/api/v1/analysis/', json={'text': 'She is reading'}
    )

    data = response.json()
    assert data['tense_type'] == 'present_error'
    assert data['errors'] == [
        {
            'kind': 'present_in_past',
            'detected': 'is',
            'suggestion': 'was',
            'at_index': 4,
        }
    ]
    assert data['is_valid'] is False


@pytest.mark.asyncio
async def test_quick_classify(client: AsyncClient):
    response = await client.post(
        '/api/v1/analysis/quick/', json={'text': 'we were'}
    )

    assert response.status_code == 200
    classification = QuickClassification.model_validate(response.json())
    assert classification.tense_type.value == 'past_continuous'
    data = response.json()
    assert data['role_activity']['subject'] is True
    assert data['role_activity']['auxiliary'] is True
    assert data['role_activity']['verb'] is False
    assert data['role_activity']['gerund'] is False


@pytest.mark.asyncio
async def test_text_too_long(client: AsyncClient):
    response = await client.post(
        '/api/v1/analysis/',
        json={'text': 'a' * (settings.max_text_length + 1)},
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_text_is_required(client: AsyncClient):
    response = await client.post('/api/v1/analysis/quick/', json={})

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_analysis_failure_returns_500(client: AsyncClient):
    broken = MagicMock(spec=GrammarAnalyzer)
    broken.analyze.side_effect = RuntimeError('boom')
    app.state.grammar_analyzer = broken

    response = await client.post('/api/v1/analysis/', json={'text': 'I was'})

    assert response.status_code == 500
    assert response.json() == {'detail': 'Sentence analysis failed'}


@pytest.mark.asyncio
async def test_metrics_exposed(client: AsyncClient):
    await client.post('/api/v1/analysis/', json={'text': 'I went home'})

    response = await client.get('/metrics')

    assert response.status_code == 200
    assert 'tense_tutor_analysis_total' in response.text
