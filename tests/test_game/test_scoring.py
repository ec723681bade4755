"""Tests for session score tracking."""

import threading

from src.game.scoring import ScoreTracker, SessionRegistry
from src.models.quote import SessionScore


class TestScoreTracker:
    """Test the streak score rules."""

    def test_starts_at_zero(self, tracker: ScoreTracker):
        """Test that a new tracker has no score."""
        assert tracker.score == SessionScore(current=0, total=0)

    def test_correct_answers_build_streak(self, tracker: ScoreTracker):
        """Test that N correct answers give a streak of N."""
        for _ in range(5):
            score = tracker.record_outcome(True)

        assert score.current == 5
        assert score.total == 5

    def test_wrong_answer_resets_streak(self, tracker: ScoreTracker):
        """Test the example sequence correct, correct, wrong."""
        tracker.record_outcome(True)
        tracker.record_outcome(True)
        score = tracker.record_outcome(False)

        assert score == SessionScore(current=0, total=3)

    def test_total_counts_every_answer(self, tracker: ScoreTracker):
        """Test that total counts answers since the last reset."""
        outcomes = [True, False, True, True, False, True]
        for outcome in outcomes:
            tracker.record_outcome(outcome)

        assert tracker.score.total == len(outcomes)
        assert tracker.score.current == 1

    def test_reset(self, tracker: ScoreTracker):
        """Test that reset clears both counters."""
        tracker.record_outcome(True)
        tracker.record_outcome(True)

        assert tracker.reset() == SessionScore(current=0, total=0)
        assert tracker.record_outcome(True) == SessionScore(current=1, total=1)

    def test_returns_snapshots(self, tracker: ScoreTracker):
        """Test that returned scores are not live views."""
        snapshot = tracker.record_outcome(True)
        tracker.record_outcome(True)

        assert snapshot.current == 1

    def test_starting_score_is_copied(self):
        """Test that a starting score is not shared with the caller."""
        start = SessionScore(current=2, total=4)
        tracker = ScoreTracker(start)
        tracker.record_outcome(False)

        assert start.current == 2
        assert tracker.score == SessionScore(current=0, total=5)

    def test_concurrent_updates_are_not_lost(self, tracker: ScoreTracker):
        """Test that updates from many threads are all counted."""

        def answer_many():
            for _ in range(200):
                tracker.record_outcome(True)

        threads = [threading.Thread(target=answer_many) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert tracker.score == SessionScore(current=1600, total=1600)


class TestSessionRegistry:
    """Test per-session tracker lookup."""

    def test_same_session_same_tracker(self):
        """Test that a session keeps its tracker."""
        registry = SessionRegistry()
        assert registry.tracker_for("abc") is registry.tracker_for("abc")

    def test_sessions_are_independent(self):
        """Test that sessions do not share scores."""
        registry = SessionRegistry()
        registry.tracker_for("a").record_outcome(True)

        assert registry.tracker_for("b").score.total == 0
        assert len(registry) == 2

    def test_discard(self):
        """Test that a discarded session starts over."""
        registry = SessionRegistry()
        registry.tracker_for("a").record_outcome(True)
        registry.discard("a")
        registry.discard("missing")

        assert registry.tracker_for("a").score.total == 0
