from typing import Dict

from tense_tutor.core.enums import GrammaticalRole, TenseType
from tense_tutor.core.services import completion_scorer, error_detector
from tense_tutor.core.services.role_classifier import classify
from tense_tutor.core.services.tense_inference import (
    infer_tense,
    required_roles,
)
from tense_tutor.core.services.tokenizer import normalize_text, tokenize
from tense_tutor.core.value_objects.analysis import (
    AnalysisResult,
    QuickClassification,
    RolePart,
)

VERB_ROLES = (GrammaticalRole.GERUND, GrammaticalRole.MAIN_VERB_PAST)


class GrammarAnalyzer:
    """
    Runs the tense rules over a sentence.

    Holds no state between calls, so the service endpoint and the client
    fallback produce identical results for identical input.
    """

    def analyze(self, text: str) -> AnalysisResult:
        # Offsets in the result refer to the NFC form.
        text = normalize_text(text)
        tokens = tokenize(text)
        if not tokens:
            return self.empty_result(text)

        parts = classify(tokens)
        tense_type = infer_tense(parts)
        errors = error_detector.detect_errors(parts, tense_type)
        completion = completion_scorer.score(parts, tense_type)

        return AnalysisResult(
            original_text=text,
            parts=parts,
            tense_type=tense_type,
            is_valid=not errors and not completion.missing_roles,
            errors=errors,
            completed_roles=completion.completed_roles,
            missing_roles=completion.missing_roles,
            completion_percentage=completion.completion_percentage,
        )

    def quick_classify(self, text: str) -> QuickClassification:
        tokens = tokenize(text)
        parts = classify(tokens) if tokens else {}
        return QuickClassification(
            tense_type=infer_tense(parts),
            role_activity=role_activity(parts),
        )

    @staticmethod
    def empty_result(text: str) -> AnalysisResult:
        return AnalysisResult(
            original_text=text,
            tense_type=TenseType.UNKNOWN,
            missing_roles=required_roles(TenseType.UNKNOWN),
        )


def role_activity(
    parts: Dict[GrammaticalRole, RolePart],
) -> Dict[GrammaticalRole, bool]:
    activity = {
        role: role in parts and parts[role].is_valid
        for role in GrammaticalRole
    }
    activity[GrammaticalRole.VERB] = any(activity[r] for r in VERB_ROLES)
    return activity


_default_analyzer = GrammarAnalyzer()


def analyze(text: str) -> AnalysisResult:
    return _default_analyzer.analyze(text)


def quick_classify(text: str) -> QuickClassification:
    return _default_analyzer.quick_classify(text)
