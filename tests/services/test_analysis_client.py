import json

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport

from tense_tutor.core.enums import AnalysisErrorKind, TenseType
from tense_tutor.core.services.grammar_analyzer import analyze
from tense_tutor.core.value_objects.analysis import (
    AnalysisError,
    AnalysisResult,
    QuickClassification,
)
from tense_tutor.main import app
from tense_tutor.services.analysis_client import RemoteAnalysisClient

pytestmark = pytest.mark.asyncio

BASE_URL = 'http://test/api/v1'


def mock_client(handler) -> RemoteAnalysisClient:
    http_client = httpx.AsyncClient(
        transport=httpx.MockTransport(handler), base_url=BASE_URL
    )
    return RemoteAnalysisClient(http_client=http_client)


@pytest_asyncio.fixture
async def asgi_client(client):
    """Client talking to the in-process service."""
    async with httpx.AsyncClient(
        transport=ASGITransport(app=app), base_url=BASE_URL
    ) as http_client:
        yield RemoteAnalysisClient(http_client=http_client)


async def test_analyze_against_service(asgi_client):
    outcome = await asgi_client.analyze('I was studying when you called')

    assert isinstance(outcome, AnalysisResult)
    assert outcome == analyze('I was studying when you called')


async def test_quick_classify_against_service(asgi_client):
    outcome = await asgi_client.quick_classify('I went')

    assert isinstance(outcome, QuickClassification)
    assert outcome.tense_type == TenseType.PAST_SIMPLE


async def test_request_shape():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200,
            json={'tense_type': 'unknown', 'role_activity': {}},
        )

    remote = mock_client(handler)
    await remote.quick_classify('hello there')

    assert seen[0].method == 'POST'
    assert seen[0].url.path == '/api/v1/analysis/quick/'
    assert json.loads(seen[0].content) == {'text': 'hello there'}


async def test_server_error_is_returned():
    remote = mock_client(lambda request: httpx.Response(500))

    outcome = await remote.analyze('I was')

    assert isinstance(outcome, AnalysisError)
    assert outcome.kind == AnalysisErrorKind.REMOTE_UNAVAILABLE
    assert outcome.status_code == 500


async def test_network_error_is_returned():
    def handler(request):
        raise httpx.ConnectError('Connection refused', request=request)

    remote = mock_client(handler)
    outcome = await remote.analyze('I was')

    assert outcome.kind == AnalysisErrorKind.REMOTE_UNAVAILABLE
    assert outcome.status_code is None
    assert 'ConnectError' in outcome.detail


@pytest.mark.parametrize(
    'response',
    [
        httpx.Response(200, text='<html>gateway</html>'),
        httpx.Response(200, json={'tense_type': 'future_perfect'}),
        httpx.Response(200, json=['I', 'was']),
    ],
)
async def test_malformed_payload_is_returned(response):
    remote = mock_client(lambda request: response)

    outcome = await remote.analyze('I was')

    assert isinstance(outcome, AnalysisError)
    assert outcome.kind == AnalysisErrorKind.MALFORMED_RESPONSE
    assert outcome.status_code == 200


async def test_aclose_only_closes_owned_client():
    owned = RemoteAnalysisClient(base_url=BASE_URL, timeout=1.0)
    await owned.aclose()
    assert owned._http_client.is_closed

    shared = httpx.AsyncClient(base_url=BASE_URL)
    borrowed = RemoteAnalysisClient(http_client=shared)
    await borrowed.aclose()
    assert not shared.is_closed
    await shared.aclose()
