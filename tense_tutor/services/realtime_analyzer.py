import asyncio
import logging
from dataclasses import dataclass
from typing import Callable, Optional, Set

from tense_tutor.config import settings
from tense_tutor.core.enums import AnalysisSource
from tense_tutor.core.interfaces.analysis_provider import AnalysisProvider
from tense_tutor.core.services.feedback_tips import generate_tips
from tense_tutor.core.services.grammar_analyzer import GrammarAnalyzer
from tense_tutor.core.services.tokenizer import count_words
from tense_tutor.core.value_objects.analysis import (
    AnalysisError,
    AnalysisResult,
    QuickClassification,
)
from tense_tutor.core.value_objects.feedback import LiveFeedback
from tense_tutor.metrics import CLIENT_METRICS

logger = logging.getLogger(__name__)

FeedbackCallback = Callable[[LiveFeedback], None]
QuickUpdateCallback = Callable[[QuickClassification], None]
ResetCallback = Callable[[], None]
ErrorCallback = Callable[[Exception], None]


def is_minor_change(
    old_text: str,
    new_text: str,
    max_word_delta: int = settings.minor_edit_max_word_delta,
    max_char_delta: int = settings.minor_edit_max_char_delta,
) -> bool:
    word_delta = abs(count_words(old_text) - count_words(new_text))
    char_delta = abs(len(old_text) - len(new_text))
    return word_delta <= max_word_delta and char_delta <= max_char_delta


@dataclass
class AnalyzerState:
    current_text: str = ''
    debounce_task: Optional[asyncio.Task] = None
    last_result: Optional[AnalysisResult] = None
    is_analyzing: bool = False
    # Every edit bumps the revision; responses for older revisions than
    # the last applied result are dropped.
    revision: int = 0
    applied_revision: int = 0
    quick_revision: int = 0


class RealTimeAnalyzer:
    """
    Keeps live feedback in step with what the learner is typing.

    Small edits trigger a cheap remote classification so role icons react
    immediately. Every edit restarts the debounce timer; when it expires
    the full analysis runs remotely, and is recomputed locally with the
    same rules if the service cannot answer.
    """

    def __init__(
        self,
        provider: AnalysisProvider,
        local_analyzer: Optional[GrammarAnalyzer] = None,
        on_feedback: Optional[FeedbackCallback] = None,
        on_quick_update: Optional[QuickUpdateCallback] = None,
        on_reset: Optional[ResetCallback] = None,
        on_error: Optional[ErrorCallback] = None,
        language_code: str = settings.default_feedback_language,
        debounce_seconds: float = settings.debounce_seconds,
        max_word_delta: int = settings.minor_edit_max_word_delta,
        max_char_delta: int = settings.minor_edit_max_char_delta,
        min_characters: int = settings.min_analysis_characters,
    ):
        self.provider = provider
        self.local_analyzer = local_analyzer or GrammarAnalyzer()
        self.on_feedback = on_feedback
        self.on_quick_update = on_quick_update
        self.on_reset = on_reset
        self.on_error = on_error
        self.language_code = language_code
        self.debounce_seconds = debounce_seconds
        self.max_word_delta = max_word_delta
        self.max_char_delta = max_char_delta
        self.min_characters = min_characters

        self.state = AnalyzerState()
        self._background_tasks: Set[asyncio.Task] = set()

    @property
    def last_result(self) -> Optional[AnalysisResult]:
        return self.state.last_result

    @property
    def is_analyzing(self) -> bool:
        return self.state.is_analyzing

    def handle_text_change(self, text: str) -> None:
        """Must be called from inside the running event loop."""
        self._cancel_debounce()

        if not text.strip():
            self.reset()
            return

        self.state.revision += 1
        self.state.current_text = text
        revision = self.state.revision

        if len(text.strip()) < self.min_characters:
            logger.debug(f'Text too short to analyze: {text!r}')
            return

        last_result = self.state.last_result
        if last_result is not None and is_minor_change(
            last_result.original_text,
            text,
            self.max_word_delta,
            self.max_char_delta,
        ):
            self._spawn(self._quick_update(text, revision), 'quick_classify')

        self._schedule_full_analysis(text, revision)

    def reset(self) -> None:
        self._cancel_debounce()
        self.state.revision += 1
        self.state.applied_revision = self.state.revision
        self.state.current_text = ''
        self.state.last_result = None
        logger.debug('Real-time analyzer reset')
        if self.on_reset:
            self.on_reset()

    async def flush(self) -> Optional[LiveFeedback]:
        """Runs the full analysis now instead of waiting for the timer."""
        self._cancel_debounce()
        text = self.state.current_text
        if not text.strip():
            return None
        if self.state.is_analyzing:
            self._schedule_full_analysis(text, self.state.revision)
            return None
        return await self.analyze_text(text, self.state.revision)

    async def analyze_text(
        self, text: str, revision: Optional[int] = None
    ) -> Optional[LiveFeedback]:
        if self.state.is_analyzing or not text.strip():
            return None
        if revision is None:
            revision = self.state.revision

        self.state.is_analyzing = True
        try:
            outcome = await self.provider.analyze(text)
            if isinstance(outcome, AnalysisError):
                logger.info(
                    f'Remote analysis unavailable ({outcome.kind.value}), '
                    f'recomputing locally'
                )
                CLIENT_METRICS['fallbacks'].inc()
                result = self.local_analyzer.analyze(text)
                source = AnalysisSource.LOCAL
            else:
                result = outcome
                source = AnalysisSource.REMOTE
            feedback = LiveFeedback(
                result=result,
                tips=generate_tips(result, self.language_code),
                source=source,
            )
        except Exception as e:
            logger.error(f'Error analyzing text: {e}', exc_info=True)
            if self.on_error:
                self.on_error(e)
            return None
        finally:
            self.state.is_analyzing = False

        return self._apply_feedback(feedback, revision)

    async def aclose(self) -> None:
        self._cancel_debounce()
        tasks = list(self._background_tasks)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)

    def _apply_feedback(
        self, feedback: LiveFeedback, revision: int
    ) -> Optional[LiveFeedback]:
        if revision < self.state.applied_revision:
            logger.debug(
                f'Discarding analysis for revision {revision}, '
                f'revision {self.state.applied_revision} already shown'
            )
            CLIENT_METRICS['stale_responses'].labels(operation='analyze').inc()
            return None

        self.state.last_result = feedback.result
        self.state.applied_revision = revision
        if self.on_feedback:
            self.on_feedback(feedback)
        return feedback

    async def _quick_update(self, text: str, revision: int) -> None:
        try:
            outcome = await self.provider.quick_classify(text)
            if isinstance(outcome, AnalysisError):
                logger.debug(f'Quick icon update failed: {outcome.detail}')
                return
            if (
                revision < self.state.applied_revision
                or revision <= self.state.quick_revision
            ):
                CLIENT_METRICS['stale_responses'].labels(
                    operation='quick_classify'
                ).inc()
                return
            self.state.quick_revision = revision
            if self.on_quick_update:
                self.on_quick_update(outcome)
        except Exception as e:
            # The debounced full analysis follows anyway.
            logger.debug(f'Quick icon update failed: {e}')

    def _schedule_full_analysis(self, text: str, revision: int) -> None:
        self.state.debounce_task = asyncio.create_task(
            self._debounced_full_analysis(text, revision),
            name='debounced_full_analysis',
        )

    async def _debounced_full_analysis(self, text: str, revision: int) -> None:
        await asyncio.sleep(self.debounce_seconds)
        self.state.debounce_task = None
        if self.state.is_analyzing:
            logger.debug('Full analysis in flight, deferring the next one')
            self._schedule_full_analysis(text, revision)
            return
        # Runs outside the debounce task so later edits never cancel it.
        self._spawn(self.analyze_text(text, revision), 'full_analysis')

    def _spawn(self, coro, name: str) -> asyncio.Task:
        task = asyncio.create_task(coro, name=name)
        self._background_tasks.add(task)
        task.add_done_callback(self._background_tasks.discard)
        return task

    def _cancel_debounce(self) -> None:
        task = self.state.debounce_task
        if task is not None and not task.done():
            task.cancel()
        self.state.debounce_task = None
