import logging
from typing import Optional

import pycountry

from tense_tutor.core.enums import LanguageBucket

logger = logging.getLogger(__name__)


def convert_language_code_to_alpha_2(language_code: str) -> Optional[str]:
    """
    Resolves an ISO 639-1/639-3 code or an English language name
    ('es', 'spa', 'Spanish') to its two-letter code.
    """
    if not language_code:
        return None
    try:
        lang_obj = pycountry.languages.lookup(language_code.strip())
    except LookupError:
        logger.debug(f"Unknown language code '{language_code}'")
        return None
    return getattr(lang_obj, 'alpha_2', None)


def to_language_bucket(language_code: Optional[str]) -> LanguageBucket:
    """Maps any language code onto the two languages the checker serves."""
    if language_code is None:
        return LanguageBucket.EN
    if convert_language_code_to_alpha_2(language_code) == 'es':
        return LanguageBucket.ES
    return LanguageBucket.EN
