"""Quote selection, answer evaluation and scoring."""

from .evaluator import evaluate_answer
from .matching import fuzzy_match, levenshtein, normalize_name
from .scoring import ScoreTracker, SessionRegistry
from .selector import select_quote
from .service import QuoteGame

__all__ = [
    "select_quote",
    "evaluate_answer",
    "levenshtein",
    "normalize_name",
    "fuzzy_match",
    "ScoreTracker",
    "SessionRegistry",
    "QuoteGame",
]
