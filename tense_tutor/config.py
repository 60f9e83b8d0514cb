from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):  # type: ignore
    debug: bool = False

    sentry_dsn: str = ''

    analysis_api_base_url: str = 'http://localhost:8000/api/v1'
    remote_timeout_seconds: float = 5.0

    debounce_seconds: float = 0.5
    minor_edit_max_word_delta: int = 2
    minor_edit_max_char_delta: int = 10

    min_analysis_characters: int = 5
    max_text_length: int = 500

    default_feedback_language: str = 'es'
    supported_feedback_languages: List[str] = ['en', 'es']

    language_detection_min_length: int = 3

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore',
    )


settings = Settings()
