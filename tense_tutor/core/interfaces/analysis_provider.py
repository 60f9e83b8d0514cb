from abc import ABC, abstractmethod
from typing import Union

from tense_tutor.core.value_objects.analysis import (
    AnalysisError,
    AnalysisResult,
    QuickClassification,
)


class AnalysisProvider(ABC):
    """
    Source of sentence analyses for the real-time pipeline.
    Failures are returned as AnalysisError instead of raised.
    """

    @abstractmethod
    async def analyze(
        self, text: str
    ) -> Union[AnalysisResult, AnalysisError]:
        pass

    @abstractmethod
    async def quick_classify(
        self, text: str
    ) -> Union[QuickClassification, AnalysisError]:
        pass
