"""Per-session score tracking."""

import threading

from src.models.quote import SessionScore


class ScoreTracker:
    """
    Streak score for one session.

    A correct answer extends the streak, a wrong one sets it back to zero,
    and every answer counts towards the total. Updates are serialized so
    duplicate requests from the same session cannot lose an update.
    """

    def __init__(self, score: SessionScore | None = None):
        self._score = score.model_copy() if score else SessionScore()
        self._lock = threading.Lock()

    @property
    def score(self) -> SessionScore:
        """Get a snapshot of the current score."""
        with self._lock:
            return self._score.model_copy()

    def record_outcome(self, correct: bool) -> SessionScore:
        """Apply one answer outcome and return the updated score."""
        with self._lock:
            self._score.total += 1
            self._score.current = self._score.current + 1 if correct else 0
            return self._score.model_copy()

    def reset(self) -> SessionScore:
        with self._lock:
            self._score.current = 0
            self._score.total = 0
            return self._score.model_copy()


class SessionRegistry:
    """Score trackers keyed by session id, created on first use."""

    def __init__(self):
        self._trackers: dict[str, ScoreTracker] = {}
        self._lock = threading.Lock()

    def tracker_for(self, session_id: str) -> ScoreTracker:
        with self._lock:
            tracker = self._trackers.get(session_id)
            if tracker is None:
                tracker = ScoreTracker()
                self._trackers[session_id] = tracker
            return tracker

    def discard(self, session_id: str) -> None:
        """Forget a session, e.g. when it expires."""
        with self._lock:
            self._trackers.pop(session_id, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._trackers)
