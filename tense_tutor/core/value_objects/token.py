from pydantic import BaseModel, ConfigDict, Field


class Token(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str = Field(description='Word as typed, edge punctuation removed')
    normalized_text: str = Field(description='Lower-cased word for matching')
    start_index: int = Field(
        ge=0, description='Character offset of the word in the source text'
    )

    @property
    def end_index(self) -> int:
        return self.start_index + len(self.text)
