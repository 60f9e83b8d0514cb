import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from fastapi import FastAPI
from prometheus_fastapi_instrumentator import Instrumentator

from tense_tutor.api.v1.api import api_router
from tense_tutor.config import settings
from tense_tutor.core.services.grammar_analyzer import GrammarAnalyzer
from tense_tutor.core.services.spell_checker import SpellChecker
from tense_tutor.logging_config import configure_logging
from tense_tutor.sentry_sdk import sentry_init

configure_logging()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, Any]:
    if not settings.debug:
        sentry_init()

    app.state.grammar_analyzer = GrammarAnalyzer()
    app.state.spell_checker = SpellChecker()

    logger.info('Application startup complete.')
    yield

    logger.info('Application shutdown complete.')


app = FastAPI(title='Tense Tutor API', lifespan=lifespan)

Instrumentator().instrument(app).expose(app)

app.include_router(api_router, prefix='/api/v1')


if __name__ == '__main__':
    import uvicorn

    uvicorn.run('tense_tutor.main:app', reload=True)
