"""Shared test fixtures and configuration for pytest."""

import json
import random
from pathlib import Path

import pytest

from src.game.scoring import ScoreTracker
from src.game.service import QuoteGame
from src.models.quote import QuoteDifficulty, QuoteRecord
from src.repository.quote_repository import QuoteRepository


@pytest.fixture
def sample_records() -> list[QuoteRecord]:
    """Create a small corpus covering every tier."""
    return [
        QuoteRecord(
            id=1,
            text="The secret of getting ahead is getting started.",
            author="Mark Twain",
            difficulty=QuoteDifficulty.EASY,
        ),
        QuoteRecord(
            id=2,
            text="Success is not final, failure is not fatal.",
            author="Winston Churchill",
            difficulty=QuoteDifficulty.EASY,
            source="Speech, 1941",
        ),
        QuoteRecord(
            id=3,
            text="Wise men speak because they have something to say.",
            author="Plato",
            difficulty=QuoteDifficulty.HARD,
        ),
        QuoteRecord(
            id=4,
            text="Imagination is more important than knowledge.",
            author="Albert Einstein",
            difficulty=QuoteDifficulty.MEDIUM,
        ),
        QuoteRecord(
            id=5,
            text="I can resist everything except temptation.",
            author="Oscar Wilde",
            difficulty=QuoteDifficulty.HARD,
            source="Lady Windermere's Fan",
        ),
        QuoteRecord(
            id=6,
            text="Nothing will work unless you do.",
            author="Maya Angelou",
            difficulty=QuoteDifficulty.EASY,
        ),
        QuoteRecord(
            id=7,
            text="The lack of money is the root of all evil.",
            author="Mark Twain",
            difficulty=QuoteDifficulty.HARD,
        ),
    ]


@pytest.fixture
def repository(sample_records: list[QuoteRecord]) -> QuoteRepository:
    return QuoteRepository(sample_records)


@pytest.fixture
def two_author_repository() -> QuoteRepository:
    """Create a corpus with only two distinct authors."""
    return QuoteRepository(
        [
            QuoteRecord(id=1, text="Quote one.", author="Plato", difficulty="hard"),
            QuoteRecord(id=2, text="Quote two.", author="Plato", difficulty="hard"),
            QuoteRecord(id=3, text="Quote three.", author="Aristotle", difficulty="easy"),
        ]
    )


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible selections."""
    return random.Random(1234)


@pytest.fixture
def game(repository: QuoteRepository, rng: random.Random) -> QuoteGame:
    return QuoteGame(repository, rng)


@pytest.fixture
def tracker() -> ScoreTracker:
    return ScoreTracker()


@pytest.fixture
def corpus_data(sample_records: list[QuoteRecord]) -> list[dict]:
    """Sample corpus as it appears in a JSON file."""
    return [r.model_dump(mode="json", exclude_none=True) for r in sample_records]


@pytest.fixture
def corpus_file(tmp_path: Path, corpus_data: list[dict]) -> Path:
    """Write the sample corpus to a temporary JSON file."""
    path = tmp_path / "quotes.json"
    path.write_text(json.dumps(corpus_data), encoding="utf-8")
    return path
