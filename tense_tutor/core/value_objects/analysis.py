from typing import Dict, FrozenSet, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from tense_tutor.core.enums import (
    AnalysisErrorKind,
    ErrorKind,
    GrammaticalRole,
    TenseType,
    VerbForm,
)


class RolePart(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: GrammaticalRole = Field()
    text: str = Field(description='Matched word; empty for the complement')
    is_valid: bool = Field()
    form: VerbForm = Field(description='What kind of word filled the role')
    start_index: Optional[int] = Field(
        default=None, description='Character offset of the matched word'
    )
    tense_hint: Optional[TenseType] = Field(default=None)
    error: Optional[ErrorKind] = Field(default=None)
    suggestion: Optional[str] = Field(default=None)
    base_verb: Optional[str] = Field(
        default=None, description='Gerund without its -ing, display only'
    )


class ErrorRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: ErrorKind = Field()
    detected: str = Field(description='Offending word, empty if missing')
    suggestion: str = Field()
    at_index: int = Field(ge=0)


class CompletionScore(BaseModel):
    model_config = ConfigDict(frozen=True)

    completed_roles: FrozenSet[GrammaticalRole] = Field()
    missing_roles: FrozenSet[GrammaticalRole] = Field()
    completion_percentage: int = Field(ge=0, le=100)


class AnalysisResult(BaseModel):
    """
    Full classification of one sentence.
    A new instance is produced for every analysis; callers replace the
    previous result instead of updating it.
    """

    model_config = ConfigDict(frozen=True)

    original_text: str = Field()
    parts: Mapping[GrammaticalRole, RolePart] = Field(default_factory=dict)
    tense_type: TenseType = Field(default=TenseType.UNKNOWN)
    is_valid: bool = Field(default=False)
    errors: Tuple[ErrorRecord, ...] = Field(default_factory=tuple)
    completed_roles: FrozenSet[GrammaticalRole] = Field(
        default_factory=frozenset
    )
    missing_roles: FrozenSet[GrammaticalRole] = Field(
        default_factory=frozenset
    )
    completion_percentage: int = Field(default=0, ge=0, le=100)

    def get_part_text(self, role: GrammaticalRole) -> Optional[str]:
        part = self.parts.get(role)
        return part.text if part else None


class QuickClassification(BaseModel):
    model_config = ConfigDict(frozen=True)

    tense_type: TenseType = Field()
    role_activity: Dict[GrammaticalRole, bool] = Field(
        description='Whether each role icon should be lit'
    )

    @property
    def active_roles(self) -> List[GrammaticalRole]:
        return [role for role, active in self.role_activity.items() if active]


class AnalysisError(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: AnalysisErrorKind = Field()
    detail: str = Field(default='')
    status_code: Optional[int] = Field(default=None)
