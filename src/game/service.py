"""Game facade tying selection, evaluation and scoring together."""

import logging
import random

from src.config.settings import Settings, get_settings
from src.game.evaluator import evaluate_answer
from src.game.scoring import ScoreTracker
from src.game.selector import select_quote
from src.models.quote import (
    AnswerSubmission,
    AnswerVerdict,
    CheckResult,
    GameMode,
    QuoteView,
    SessionScore,
)
from src.repository.quote_repository import QuoteRepository

logger = logging.getLogger(__name__)


class QuoteGame:
    """
    Entry point for callers such as a web router or the CLI.

    Holds the shared read-only repository and the random source. Session
    scores are passed in by the caller as ScoreTracker objects.
    """

    def __init__(self, repository: QuoteRepository, rng: random.Random | None = None):
        self.repository = repository
        self.rng = rng or random.Random()

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "QuoteGame":
        """
        Load the corpus named in the settings.

        Raises:
            CorpusLoadError: If the corpus cannot be loaded
        """
        settings = settings or get_settings()
        repository = QuoteRepository.load(settings.quotes_path)
        return cls(repository, random.Random(settings.random_seed))

    def select_quote(self, mode: GameMode | str) -> QuoteView:
        return select_quote(self.repository, mode, self.rng)

    def evaluate_answer(
        self, quote_id: int, answer: str, mode: GameMode | str
    ) -> AnswerVerdict:
        return evaluate_answer(self.repository, quote_id, answer, mode)

    def check_answer(
        self, tracker: ScoreTracker, submission: AnswerSubmission
    ) -> CheckResult:
        """
        Evaluate a submission and record the outcome in the session score.

        The score is only touched once a verdict exists, so an unknown quote
        id leaves it unchanged.

        Raises:
            QuoteNotFoundError: If the submission names an unknown quote
        """
        verdict = self.evaluate_answer(
            submission.quote_id, submission.answer, submission.mode
        )
        score = tracker.record_outcome(verdict.correct)
        logger.debug(
            "Quote %d answered %s in %s, streak %d of %d",
            submission.quote_id,
            "correctly" if verdict.correct else "incorrectly",
            submission.mode.value,
            score.current,
            score.total,
        )
        return CheckResult.from_verdict(verdict, score)

    def reset_score(self, tracker: ScoreTracker) -> SessionScore:
        return tracker.reset()
