import logging

import sentry_sdk
from sentry_sdk.integrations.asyncio import AsyncioIntegration
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.httpx import HttpxIntegration
from sentry_sdk.integrations.logging import LoggingIntegration

from tense_tutor.config import settings

logger = logging.getLogger(__name__)


def sentry_init():
    if settings.sentry_dsn:
        logger.info('Sentry is enabled')
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            integrations=[
                LoggingIntegration(),
                FastApiIntegration(),
                HttpxIntegration(),
                AsyncioIntegration(),
            ],
            traces_sample_rate=0.5,
            environment='production',
            send_default_pii=False,
        )
    else:
        logger.info('Sentry is disabled')
