from typing import List

from pydantic import BaseModel, ConfigDict, Field

from tense_tutor.core.enums import AnalysisSource, FeedbackTipKind
from tense_tutor.core.value_objects.analysis import AnalysisResult


class FeedbackTip(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: FeedbackTipKind = Field()
    message: str = Field()


class LiveFeedback(BaseModel):
    model_config = ConfigDict(frozen=True)

    result: AnalysisResult = Field()
    tips: List[FeedbackTip] = Field(default_factory=list)
    source: AnalysisSource = Field(
        description='Whether the result came from the service or fallback'
    )
