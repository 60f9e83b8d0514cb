from typing import List

from pydantic import BaseModel, ConfigDict, Field

from tense_tutor.core.enums import LanguageBucket, SpellProblemKind


class SpellProblem(BaseModel):
    model_config = ConfigDict(frozen=True)

    word: str = Field(description='Flagged word or phrase as typed')
    index: int = Field(
        ge=0, description='Character offset in the NFC-normalized text'
    )
    suggestions: List[str] = Field(default_factory=list)
    kind: SpellProblemKind = Field()


class SpellReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    lang: LanguageBucket = Field(default=LanguageBucket.EN)
    problems: List[SpellProblem] = Field(default_factory=list)

    def by_kind(self, kind: SpellProblemKind) -> List[SpellProblem]:
        return [p for p in self.problems if p.kind == kind]
