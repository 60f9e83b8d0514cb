from typing import Any, AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from tense_tutor.core.services.grammar_analyzer import GrammarAnalyzer
from tense_tutor.core.services.spell_checker import SpellChecker
from tense_tutor.main import app


@pytest.fixture
def grammar_analyzer() -> GrammarAnalyzer:
    return GrammarAnalyzer()


@pytest.fixture
def spell_checker() -> SpellChecker:
    return SpellChecker()


@pytest_asyncio.fixture(scope='function')
async def client(
    grammar_analyzer, spell_checker
) -> AsyncGenerator[AsyncClient, Any]:
    """Create test client with the analyzers the lifespan would install"""
    app.state.grammar_analyzer = grammar_analyzer
    app.state.spell_checker = spell_checker

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url='http://test'
    ) as ac:
        try:
            yield ac
        finally:
            del app.state.grammar_analyzer
            del app.state.spell_checker
