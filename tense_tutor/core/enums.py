from enum import Enum


class GrammaticalRole(str, Enum):
    SUBJECT = 'subject'
    AUXILIARY = 'auxiliary'
    VERB = 'verb'
    GERUND = 'gerund'
    MAIN_VERB_PAST = 'main_verb_past'
    CONNECTOR = 'connector'
    COMPLEMENT = 'complement'


class TenseType(str, Enum):
    PAST_CONTINUOUS = 'past_continuous'
    PAST_SIMPLE = 'past_simple'
    PRESENT_ERROR = 'present_error'
    UNKNOWN = 'unknown'


class VerbForm(str, Enum):
    PRONOUN = 'pronoun'
    PAST_AUXILIARY = 'past_auxiliary'
    PRESENT_AUXILIARY = 'present_auxiliary'
    GERUND = 'gerund'
    REGULAR_PAST = 'regular_past'
    IRREGULAR_PAST = 'irregular_past'
    CONNECTOR = 'connector'
    COMPLEMENT = 'complement'


class ErrorKind(str, Enum):
    PRESENT_IN_PAST = 'present_in_past'
    MISSING_GERUND = 'missing_gerund'


class SpellProblemKind(str, Enum):
    SPELLING = 'spelling'
    GRAMMAR = 'grammar'
    SEMANTIC = 'semantic'


class LanguageBucket(str, Enum):
    EN = 'en'
    ES = 'es'


class FeedbackTipKind(str, Enum):
    CORRECTION = 'correction'
    ADDITION = 'addition'
    TIP = 'tip'
    TENSE_SUGGESTION = 'tense_suggestion'


class AnalysisSource(str, Enum):
    REMOTE = 'remote'
    LOCAL = 'local'


class AnalysisErrorKind(str, Enum):
    REMOTE_UNAVAILABLE = 'remote_unavailable'
    MALFORMED_RESPONSE = 'malformed_response'
