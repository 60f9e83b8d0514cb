import re
import unicodedata
from typing import List

from tense_tutor.core.value_objects.token import Token

_WORD_PATTERN = re.compile(r'\S+')
_LEADING_PUNCTUATION = re.compile(r'^[\W_]+')
_EDGE_PUNCTUATION = re.compile(r'^[\W_]+|[\W_]+$')


def normalize_text(text: str) -> str:
    """NFC form; every offset the analyzers report refers to it."""
    return unicodedata.normalize('NFC', text or '')


def strip_punctuation(word: str) -> str:
    return _EDGE_PUNCTUATION.sub('', word)


def normalize_word(word: str) -> str:
    """Lower-cases a word and strips surrounding punctuation."""
    return strip_punctuation(word).lower()


def tokenize(text: str) -> List[Token]:
    """
    Splits text on whitespace into tokens.

    Token text keeps the learner's casing but not the punctuation around
    the word, and its offset points at the first letter of the word in
    the NFC-normalized text. Tokens made only of punctuation are dropped.
    """
    if not text or not text.strip():
        return []

    text = normalize_text(text)
    tokens: List[Token] = []
    for match in _WORD_PATTERN.finditer(text):
        raw = match.group()
        word = strip_punctuation(raw)
        if not word:
            continue
        leading = _LEADING_PUNCTUATION.match(raw)
        offset = leading.end() if leading else 0
        tokens.append(
            Token(
                text=word,
                normalized_text=word.lower(),
                start_index=match.start() + offset,
            )
        )
    return tokens


def count_words(text: str) -> int:
    return len(text.split()) if text else 0
