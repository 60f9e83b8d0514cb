from typing import Dict, FrozenSet

from tense_tutor.core.enums import GrammaticalRole, TenseType

SUBJECT_PRONOUNS: FrozenSet[str] = frozenset(
    ['i', 'you', 'he', 'she', 'it', 'we', 'they']
)

PAST_AUXILIARIES: FrozenSet[str] = frozenset(['was', 'were'])

# Present auxiliaries are only recognised to flag them in a past context.
PRESENT_AUXILIARY_CORRECTIONS: Dict[str, str] = {
    'am': 'was',
    'is': 'was',
    'are': 'were',
}

IRREGULAR_PAST_VERBS: FrozenSet[str] = frozenset(
    [
        'went',
        'came',
        'saw',
        'did',
        'had',
        'got',
        'took',
        'made',
        'said',
        'told',
        'gave',
        'found',
        'left',
        'thought',
        'felt',
        'knew',
        'heard',
        'ate',
        'drank',
        'wrote',
        'bought',
        'sold',
        'broke',
        'spoke',
        'ran',
        'drove',
        'rode',
        'flew',
        'swam',
        'sang',
        'rang',
        'began',
        'won',
        'lost',
        'met',
        'taught',
        'caught',
        'brought',
        'slept',
        # Regular verbs learners reach for first.
        'walked',
        'worked',
        'played',
        'studied',
    ]
)

CONNECTORS: FrozenSet[str] = frozenset(['while', 'when', 'as'])

GERUND_SUFFIX = 'ing'
GERUND_MIN_LENGTH = 5
REGULAR_PAST_SUFFIX = 'ed'
REGULAR_PAST_MIN_LENGTH = 4
COMPLEMENT_MIN_TOKENS = 4

GERUND_PLACEHOLDER = '<verb>ing'

REQUIRED_ROLES: Dict[TenseType, FrozenSet[GrammaticalRole]] = {
    TenseType.PAST_CONTINUOUS: frozenset(
        [
            GrammaticalRole.SUBJECT,
            GrammaticalRole.AUXILIARY,
            GrammaticalRole.GERUND,
        ]
    ),
    TenseType.PAST_SIMPLE: frozenset(
        [GrammaticalRole.SUBJECT, GrammaticalRole.MAIN_VERB_PAST]
    ),
    TenseType.PRESENT_ERROR: frozenset(
        [GrammaticalRole.SUBJECT, GrammaticalRole.MAIN_VERB_PAST]
    ),
    TenseType.UNKNOWN: frozenset(
        [GrammaticalRole.SUBJECT, GrammaticalRole.MAIN_VERB_PAST]
    ),
}

# Time expressions that hint at the tense the learner should be using.
TIME_MARKERS: Dict[TenseType, tuple] = {
    TenseType.PAST_SIMPLE: (
        'yesterday',
        'last night',
        'last week',
        'last month',
        'last year',
        'ago',
    ),
    TenseType.PAST_CONTINUOUS: (
        'all day',
        'all night',
        'constantly',
        'continuously',
        'at that time',
    ),
}
