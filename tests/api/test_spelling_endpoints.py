import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_check_spelling(client: AsyncClient):
    response = await client.post(
        '/api/v1/spelling/',
        json={'text': 'I recieve teh book', 'lang': 'en'},
    )

    assert response.status_code == 200
    data = response.json()
    assert data['lang'] == 'en'
    assert data['problems'] == [
        {
            'word': 'recieve',
            'index': 2,
            'suggestions': ['receive'],
            'kind': 'spelling',
        },
        {
            'word': 'teh',
            'index': 10,
            'suggestions': ['the'],
            'kind': 'spelling',
        },
    ]


@pytest.mark.asyncio
async def test_check_spelling_grammar(client: AsyncClient):
    response = await client.post(
        '/api/v1/spelling/',
        json={'text': 'she is cooking dinner', 'lang': 'English'},
    )

    data = response.json()
    assert data['problems'] == [
        {
            'word': 'she is cooking',
            'index': 0,
            'suggestions': ['she was cooking'],
            'kind': 'grammar',
        }
    ]


@pytest.mark.asyncio
async def test_check_spelling_spanish(client: AsyncClient):
    response = await client.post(
        '/api/v1/spelling/',
        json={'text': 'yo hablo espanol', 'lang': 'spa'},
    )

    data = response.json()
    assert data['lang'] == 'es'
    assert [p['suggestions'] for p in data['problems']] == [['español']]


@pytest.mark.asyncio
async def test_check_spelling_unknown_language(client: AsyncClient):
    response = await client.post(
        '/api/v1/spelling/',
        json={'text': 'hello', 'lang': 'not-a-language'},
    )

    assert response.status_code == 400
    assert response.json() == {
        'detail': "Unknown language: 'not-a-language'"
    }
