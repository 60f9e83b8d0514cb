import unicodedata

import pytest
from pydantic import ValidationError

from tense_tutor.core.enums import ErrorKind, GrammaticalRole, TenseType
from tense_tutor.core.services import grammar_analyzer
from tense_tutor.core.services.grammar_analyzer import GrammarAnalyzer


@pytest.fixture
def analyzer():
    return GrammarAnalyzer()


def test_analyze_past_continuous_with_connector(analyzer):
    result = analyzer.analyze('I was studying when you called')

    assert result.tense_type == TenseType.PAST_CONTINUOUS
    assert result.get_part_text(GrammaticalRole.SUBJECT) == 'I'
    assert result.get_part_text(GrammaticalRole.AUXILIARY) == 'was'
    assert result.get_part_text(GrammaticalRole.GERUND) == 'studying'
    assert result.get_part_text(GrammaticalRole.CONNECTOR) == 'when'
    assert result.is_valid
    assert result.errors == ()
    assert result.missing_roles == frozenset()
    assert result.completion_percentage == 100


def test_analyze_past_simple(analyzer):
    result = analyzer.analyze('I studied English yesterday')

    assert result.tense_type == TenseType.PAST_SIMPLE
    assert result.get_part_text(GrammaticalRole.SUBJECT) == 'I'
    assert result.get_part_text(GrammaticalRole.MAIN_VERB_PAST) == 'studied'
    assert result.is_valid
    assert result.completion_percentage == 100


def test_analyze_present_auxiliary(analyzer):
    result = analyzer.analyze('I am studying now')

    assert result.tense_type == TenseType.PRESENT_ERROR
    assert len(result.errors) == 1
    error = result.errors[0]
    assert error.kind == ErrorKind.PRESENT_IN_PAST
    assert error.detected == 'am'
    assert error.suggestion == 'was'
    assert not result.is_valid


def test_analyze_missing_gerund(analyzer):
    result = analyzer.analyze('I was')

    assert result.tense_type == TenseType.PAST_CONTINUOUS
    assert GrammaticalRole.GERUND in result.missing_roles
    assert not result.is_valid
    assert [e.kind for e in result.errors] == [ErrorKind.MISSING_GERUND]


@pytest.mark.parametrize('text', ['', '   ', '?!'])
def test_analyze_empty_input(analyzer, text):
    result = analyzer.analyze(text)

    assert result.original_text == text
    assert result.parts == {}
    assert result.tense_type == TenseType.UNKNOWN
    assert result.missing_roles == {
        GrammaticalRole.SUBJECT,
        GrammaticalRole.MAIN_VERB_PAST,
    }
    assert result.completion_percentage == 0
    assert not result.is_valid


def test_analyze_unknown_tense(analyzer):
    result = analyzer.analyze('reading a book')

    assert result.tense_type == TenseType.UNKNOWN
    assert not result.is_valid
    assert result.errors == ()


@pytest.mark.parametrize(
    'text',
    [
        'I was studying when you called',
        'They are playing',
        'went home',
        'Nosotros fuimos',
        '',
    ],
)
def test_analyze_is_idempotent(analyzer, text):
    assert analyzer.analyze(text) == analyzer.analyze(text)
    assert GrammarAnalyzer().analyze(text) == analyzer.analyze(text)


@pytest.mark.parametrize(
    'partial, fuller',
    [
        ('was reading', 'I was reading'),
        ('I was', 'I was reading'),
        ('I', 'I walked'),
        ('walked home', 'I walked home'),
    ],
)
def test_adding_a_required_role_never_lowers_completion(
    analyzer, partial, fuller
):
    before = analyzer.analyze(partial).completion_percentage
    after = analyzer.analyze(fuller).completion_percentage

    assert after >= before


def test_result_is_replaced_not_mutated(analyzer):
    first = analyzer.analyze('I was')
    second = analyzer.analyze('I was walking')

    assert first.completion_percentage == 67
    assert second.completion_percentage == 100
    assert first is not second


def test_quick_classify_lights_verb_icon(analyzer):
    classification = analyzer.quick_classify('she was dancing')

    assert classification.tense_type == TenseType.PAST_CONTINUOUS
    assert classification.role_activity[GrammaticalRole.SUBJECT]
    assert classification.role_activity[GrammaticalRole.AUXILIARY]
    assert classification.role_activity[GrammaticalRole.GERUND]
    assert classification.role_activity[GrammaticalRole.VERB]
    assert not classification.role_activity[GrammaticalRole.CONNECTOR]


def test_quick_classify_invalid_auxiliary_stays_dark(analyzer):
    classification = analyzer.quick_classify('he is')

    assert classification.tense_type == TenseType.PRESENT_ERROR
    assert not classification.role_activity[GrammaticalRole.AUXILIARY]
    assert classification.active_roles == [GrammaticalRole.SUBJECT]


def test_quick_classify_covers_every_role(analyzer):
    classification = analyzer.quick_classify('')

    assert set(classification.role_activity) == set(GrammaticalRole)
    assert classification.active_roles == []


def test_module_shortcuts():
    assert grammar_analyzer.analyze('I went') == GrammarAnalyzer().analyze(
        'I went'
    )
    assert (
        grammar_analyzer.quick_classify('I went').tense_type
        == TenseType.PAST_SIMPLE
    )


def test_offsets_refer_to_composed_text(analyzer):
    decomposed = unicodedata.normalize('NFD', 'Canción: I am studying')
    result = analyzer.analyze(decomposed)

    assert result.original_text == unicodedata.normalize('NFC', decomposed)
    error = result.errors[0]
    assert error.at_index == 11
    assert result.original_text[error.at_index :].startswith('am')


def test_errors_exclude_surrounding_punctuation(analyzer):
    result = analyzer.analyze('Yes, I am, studying')

    error = result.errors[0]
    assert error.kind == ErrorKind.PRESENT_IN_PAST
    assert error.detected == 'am'
    assert error.at_index == 7


def test_missing_gerund_points_after_auxiliary(analyzer):
    result = analyzer.analyze('I was.')

    assert result.get_part_text(GrammaticalRole.AUXILIARY) == 'was'
    error = result.errors[0]
    assert error.kind == ErrorKind.MISSING_GERUND
    assert error.at_index == 5


def test_result_collections_are_immutable(analyzer):
    result = analyzer.analyze('I am')

    assert isinstance(result.errors, tuple)
    with pytest.raises(ValidationError):
        result.errors = ()
