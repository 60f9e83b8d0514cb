from fastapi import Request

from tense_tutor.core.services.grammar_analyzer import GrammarAnalyzer
from tense_tutor.core.services.spell_checker import SpellChecker


async def get_grammar_analyzer(request: Request) -> GrammarAnalyzer:
    if not hasattr(request.app.state, 'grammar_analyzer'):
        raise RuntimeError('GrammarAnalyzer not initialized in app.state')
    return request.app.state.grammar_analyzer


async def get_spell_checker(request: Request) -> SpellChecker:
    if not hasattr(request.app.state, 'spell_checker'):
        raise RuntimeError('SpellChecker not initialized in app.state')
    return request.app.state.spell_checker
