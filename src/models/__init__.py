"""Data models for the quote guessing game."""

from .quote import (
    AnswerSubmission,
    AnswerVerdict,
    CheckResult,
    GameMode,
    InputStyle,
    MatchStrategy,
    ModeRules,
    QuoteDifficulty,
    QuoteRecord,
    QuoteView,
    SessionScore,
)

__all__ = [
    "QuoteDifficulty",
    "GameMode",
    "InputStyle",
    "MatchStrategy",
    "ModeRules",
    "QuoteRecord",
    "QuoteView",
    "AnswerVerdict",
    "SessionScore",
    "AnswerSubmission",
    "CheckResult",
]
