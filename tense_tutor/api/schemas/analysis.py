from typing import Optional

from pydantic import BaseModel, Field

from tense_tutor.config import settings


class AnalyzeRequestSchema(BaseModel):
    text: str = Field(
        max_length=settings.max_text_length,
        description='Sentence typed by the learner',
    )


class SpellCheckRequestSchema(BaseModel):
    text: str = Field(
        max_length=settings.max_text_length,
        description='Text to check for spelling and grammar slips',
    )
    lang: Optional[str] = Field(
        default=None,
        description='Language code or name; detected from the text if absent',
    )
