import logging
from typing import Dict, Optional, Type, TypeVar, Union

import httpx
from pydantic import BaseModel

from tense_tutor.config import settings
from tense_tutor.core.enums import AnalysisErrorKind
from tense_tutor.core.interfaces.analysis_provider import AnalysisProvider
from tense_tutor.core.value_objects.analysis import (
    AnalysisError,
    AnalysisResult,
    QuickClassification,
)
from tense_tutor.metrics import CLIENT_METRICS

logger = logging.getLogger(__name__)

T = TypeVar('T', bound=BaseModel)


class RemoteAnalysisClient(AnalysisProvider):
    """
    Calls the analysis service over HTTP.

    Authentication headers are supplied by the caller. Network errors,
    non-2xx responses and payloads that do not validate are all returned
    as AnalysisError so the caller can decide how to recover.
    """

    def __init__(
        self,
        base_url: str = settings.analysis_api_base_url,
        headers: Optional[Dict[str, str]] = None,
        timeout: float = settings.remote_timeout_seconds,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self._owns_http_client = http_client is None
        if http_client is None:
            http_client = httpx.AsyncClient(
                base_url=base_url,
                headers=headers,
                timeout=timeout,
            )
            logger.info(
                f'RemoteAnalysisClient initialized for {base_url} '
                f'(timeout {timeout}s)'
            )
        self._http_client = http_client

    async def aclose(self) -> None:
        """Closes the HTTP client if this instance created it."""
        if self._owns_http_client and self._http_client:
            await self._http_client.aclose()
            logger.info('RemoteAnalysisClient: Closed internal HTTP client.')

    async def analyze(
        self, text: str
    ) -> Union[AnalysisResult, AnalysisError]:
        return await self._post('/analysis/', text, AnalysisResult)

    async def quick_classify(
        self, text: str
    ) -> Union[QuickClassification, AnalysisError]:
        return await self._post(
            '/analysis/quick/', text, QuickClassification
        )

    async def _post(
        self, path: str, text: str, model: Type[T]
    ) -> Union[T, AnalysisError]:
        try:
            response = await self._http_client.post(path, json={'text': text})
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            return self._failure(
                path,
                AnalysisErrorKind.REMOTE_UNAVAILABLE,
                f'Service answered {e.response.status_code}',
                status_code=e.response.status_code,
            )
        except httpx.HTTPError as e:
            return self._failure(
                path,
                AnalysisErrorKind.REMOTE_UNAVAILABLE,
                f'{type(e).__name__}: {e}',
            )

        try:
            return model.model_validate(response.json())
        except ValueError as e:
            return self._failure(
                path,
                AnalysisErrorKind.MALFORMED_RESPONSE,
                f'Invalid {model.__name__} payload: {e}',
                status_code=response.status_code,
            )

    @staticmethod
    def _failure(
        path: str,
        kind: AnalysisErrorKind,
        detail: str,
        status_code: Optional[int] = None,
    ) -> AnalysisError:
        logger.warning(f'Analysis request to {path} failed: {detail}')
        CLIENT_METRICS['remote_failures'].labels(
            operation=path.strip('/'), kind=kind.value
        ).inc()
        return AnalysisError(kind=kind, detail=detail, status_code=status_code)
