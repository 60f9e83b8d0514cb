from enum import Enum
from typing import Dict

from tense_tutor.config import settings


class Messages(str, Enum):
    CHANGE_AUXILIARY = 'change_auxiliary'
    ADD_GERUND = 'add_gerund'
    ADD_SUBJECT = 'add_subject'
    ADD_PAST_VERB = 'add_past_verb'
    CONNECTOR_WHILE = 'connector_while'
    CONNECTOR_WHEN = 'connector_when'
    CONNECTOR_AS = 'connector_as'
    TIME_MARKER_TENSE = 'time_marker_tense'
    KEEP_WRITING = 'keep_writing'


TENSE_NAMES: Dict[str, Dict[str, str]] = {
    'past_simple': {'en': 'Past Simple', 'es': 'Past Simple'},
    'past_continuous': {'en': 'Past Continuous', 'es': 'Past Continuous'},
}

MESSAGES_TRANSLATIONS: Dict[Messages, Dict[str, str]] = {
    Messages.CHANGE_AUXILIARY: {
        'en': '❌ Change "{detected}" to "{suggestion}" (use the past)',
        'es': '❌ Cambia "{detected}" por "{suggestion}" (usa pasado)',
    },
    Messages.ADD_GERUND: {
        'en': '📝 Add "-ing" to the verb for the Past Continuous',
        'es': '📝 Agrega "-ing" al verbo para Past Continuous',
    },
    Messages.ADD_SUBJECT: {
        'en': '👤 Start with a subject: I, you, he, she, it, we, they',
        'es': '👤 Empieza con un sujeto: I, you, he, she, it, we, they',
    },
    Messages.ADD_PAST_VERB: {
        'en': '⏪ Use a verb in the past: walked, went, studied...',
        'es': '⏪ Usa un verbo en pasado: walked, went, studied...',
    },
    Messages.CONNECTOR_WHILE: {
        'en': '💡 "While" suggests the Past Continuous '
        'for simultaneous actions',
        'es': '💡 "While" sugiere usar Past Continuous '
        'para acciones simultáneas',
    },
    Messages.CONNECTOR_WHEN: {
        'en': '💡 "When" can take the Past Simple (interruption) '
        'or the Past Continuous (background)',
        'es': '💡 "When" puede usar Past Simple (interrupción) '
        'o Past Continuous (contexto)',
    },
    Messages.CONNECTOR_AS: {
        'en': '💡 "As" suggests the Past Continuous for ongoing actions',
        'es': '💡 "As" sugiere Past Continuous para acciones en desarrollo',
    },
    Messages.TIME_MARKER_TENSE: {
        'en': '🕒 "{marker}" is typical of the {tense}',
        'es': '🕒 "{marker}" es típico del {tense}',
    },
    Messages.KEEP_WRITING: {
        'en': '✍️ Keep writing...',
        'es': '✍️ Sigue escribiendo...',
    },
}


def resolve_language(language_code: str) -> str:
    if language_code in settings.supported_feedback_languages:
        return language_code
    return settings.default_feedback_language


def get_tense_name(tense: str, language_code: str) -> str:
    names = TENSE_NAMES.get(tense)
    if names is None:
        return tense
    return names.get(resolve_language(language_code), tense)


def get_text(key: Messages, language_code: str, **kwargs) -> str:
    if key not in MESSAGES_TRANSLATIONS:
        raise ValueError(f'Unknown key for translation: {key}')

    translations = MESSAGES_TRANSLATIONS[key]
    text = translations.get(resolve_language(language_code))
    if text is None:
        raise ValueError(
            f"No translation found for key '{key.value}' "
            f"in language '{language_code}' "
            f"or default '{settings.default_feedback_language}'."
        )

    if kwargs:
        try:
            return text.format(**kwargs)
        except KeyError as e:
            raise ValueError(
                f"Missing placeholder {e} for key '{key.value}'"
            ) from e
    return text
