import logging
import re
from typing import Dict, FrozenSet, List, Optional

from langdetect import DetectorFactory, detect
from langdetect.lang_detect_exception import LangDetectException

from tense_tutor.config import settings
from tense_tutor.core.enums import LanguageBucket, SpellProblemKind
from tense_tutor.core.services.tokenizer import normalize_text
from tense_tutor.core.value_objects.spelling import SpellProblem, SpellReport
from tense_tutor.utils.language_code_converter import to_language_bucket

logger = logging.getLogger(__name__)

# langdetect is probabilistic; a fixed seed keeps reports reproducible.
DetectorFactory.seed = 0

KNOWN_MISSPELLINGS: Dict[str, str] = {
    'cleanning': 'cleaning',
    'recieve': 'receive',
    'espaol': 'español',
    'espanol': 'español',
    'teh': 'the',
    'hte': 'the',
    'taht': 'that',
    'woudl': 'would',
    'coudl': 'could',
    'shoudl': 'should',
    'writen': 'written',
    'writeing': 'writing',
    'runing': 'running',
    'planing': 'planning',
    'stoping': 'stopping',
    'geting': 'getting',
    'seting': 'setting',
    'puting': 'putting',
    # Irregular verbs conjugated as regular ones.
    'maked': 'made',
    'taked': 'took',
    'goed': 'went',
    'eated': 'ate',
    'writed': 'wrote',
    'readed': 'read',
    'sayed': 'said',
    'buyed': 'bought',
    'feeled': 'felt',
    'thinked': 'thought',
    'knowed': 'knew',
    'breaked': 'broke',
    'choosed': 'chose',
    'speaked': 'spoke',
    'teached': 'taught',
}

DOUBLED_CONSONANT_GERUNDS: FrozenSet[str] = frozenset(
    ['running', 'planning', 'beginning', 'winning', 'spinning']
)

NONSENSICAL_PATTERNS = (
    re.compile(r'\bcat.*reading.*cloud\b', re.IGNORECASE),
    re.compile(r'\btable.*eating.*music\b', re.IGNORECASE),
    re.compile(r'\bwater.*walking\b', re.IGNORECASE),
)

PRESENT_PROGRESSIVE_PATTERN = re.compile(
    r'\b(I am|you are|he is|she is|it is|we are|they are)\s+\w+ing\b',
    re.IGNORECASE,
)

_LETTER_RUN = re.compile(r'[^\W\d_]+')
_REPEATED_LETTERS = re.compile(r'(.)\1{2,}')
_VOWELS = re.compile(r'[aeiouáéíóúü]', re.IGNORECASE)

MIN_WORD_LENGTH = 3
PROPER_NOUN_MAX_LENGTH = 5
GERUND_REPAIR_MIN_LENGTH = 6
SINGULAR_PAST_SUBJECTS = ('i', 'he', 'she', 'it')


def detect_language(text: str) -> LanguageBucket:
    if len((text or '').strip()) < settings.language_detection_min_length:
        return LanguageBucket.EN
    try:
        code = detect(text)
    except LangDetectException as e:
        logger.debug(f'Language detection failed: {e}')
        return LanguageBucket.EN
    return to_language_bucket(code)


def collapse_repeated_letters(word: str) -> str:
    """Collapses every run of three or more identical letters to two."""
    return _REPEATED_LETTERS.sub(r'\1\1', word)


def _double_final_consonant(word: str) -> Optional[str]:
    lowered = word.lower()
    if not lowered.endswith('ing') or len(lowered) < GERUND_REPAIR_MIN_LENGTH:
        return None
    stem = lowered[:-3]
    doubled = f'{stem}{stem[-1]}ing'
    if (
        doubled in DOUBLED_CONSONANT_GERUNDS
        and lowered not in DOUBLED_CONSONANT_GERUNDS
    ):
        return doubled
    return None


def suggest_corrections(word: str) -> List[str]:
    """
    Applies the repair strategies in order and returns the first hit.
    This is a heuristic: most unknown misspellings get no suggestion.
    """
    known = KNOWN_MISSPELLINGS.get(word.lower())
    if known:
        return [known]

    collapsed = collapse_repeated_letters(word)
    if collapsed != word:
        return [collapsed]

    doubled = _double_final_consonant(word)
    if doubled:
        return [doubled]

    # Vowel-less words are taken for abbreviations.
    if not _VOWELS.search(word):
        return []

    return []


def _is_candidate(word: str) -> bool:
    if len(word) < MIN_WORD_LENGTH:
        return False
    # Short capitalised words are taken for proper nouns.
    if word[0].isupper() and len(word) <= PROPER_NOUN_MAX_LENGTH:
        return False
    return True


def _past_auxiliary_for(pronoun: str) -> str:
    return 'was' if pronoun.lower() in SINGULAR_PAST_SUBJECTS else 'were'


def check_grammar(text: str, lang: LanguageBucket) -> List[SpellProblem]:
    if lang != LanguageBucket.EN:
        return []

    issues: List[SpellProblem] = []
    for match in PRESENT_PROGRESSIVE_PATTERN.finditer(text):
        pronoun = match.group(1).split()[0]
        rest = match.group(0)[len(match.group(1)) :]
        suggestion = f'{pronoun} {_past_auxiliary_for(pronoun)}{rest}'
        issues.append(
            SpellProblem(
                word=match.group(0),
                index=match.start(),
                suggestions=[suggestion],
                kind=SpellProblemKind.GRAMMAR,
            )
        )

    for pattern in NONSENSICAL_PATTERNS:
        match = pattern.search(text)
        if match:
            issues.append(
                SpellProblem(
                    word=match.group(0),
                    index=match.start(),
                    suggestions=[],
                    kind=SpellProblemKind.SEMANTIC,
                )
            )

    return issues


class SpellChecker:
    def check_text(
        self, text: str, lang: Optional[str] = None
    ) -> SpellReport:
        text = normalize_text(text)
        if lang:
            bucket = to_language_bucket(lang)
        else:
            bucket = detect_language(text)

        problems: List[SpellProblem] = []
        for match in _LETTER_RUN.finditer(text):
            word = match.group()
            if not _is_candidate(word):
                continue
            suggestions = suggest_corrections(word)
            if suggestions:
                problems.append(
                    SpellProblem(
                        word=word,
                        index=match.start(),
                        suggestions=suggestions,
                        kind=SpellProblemKind.SPELLING,
                    )
                )

        problems.extend(check_grammar(text, bucket))
        return SpellReport(lang=bucket, problems=problems)


_default_checker = SpellChecker()


def check_spelling(text: str, lang: Optional[str] = None) -> SpellReport:
    return _default_checker.check_text(text, lang=lang)
