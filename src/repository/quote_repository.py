"""In-memory, read-only store of quote records."""

import json
import logging
from collections import Counter
from collections.abc import Iterable, Sequence
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from src.core.errors import CorpusLoadError, QuoteNotFoundError
from src.models.quote import QuoteDifficulty, QuoteRecord

logger = logging.getLogger(__name__)

_records_adapter = TypeAdapter(list[QuoteRecord])


class QuoteRepository:
    """
    Immutable collection of quotes, keyed by id.

    Built once at startup and only read afterwards, so it can be shared
    between concurrent requests without locking.
    """

    def __init__(self, records: Iterable[QuoteRecord]):
        quotes = tuple(records)
        if not quotes:
            raise CorpusLoadError("Quote corpus is empty")

        by_id: dict[int, QuoteRecord] = {}
        for quote in quotes:
            if quote.id in by_id:
                raise CorpusLoadError(f"Duplicate quote id {quote.id}")
            by_id[quote.id] = quote

        self._quotes = quotes
        self._by_id = by_id
        self._authors = frozenset(q.author for q in quotes)

    @classmethod
    def load(cls, path: str | Path) -> "QuoteRepository":
        """
        Read and validate a JSON corpus file.

        Args:
            path: File holding a JSON array of quote records

        Returns:
            Repository over the loaded quotes

        Raises:
            CorpusLoadError: If the file is unreadable or any record is malformed
        """
        path = Path(path)
        try:
            raw = path.read_text(encoding="utf-8")
        except OSError as e:
            raise CorpusLoadError(f"Cannot read quote corpus {path}: {e}") from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise CorpusLoadError(f"Invalid JSON in quote corpus {path}: {e}") from e

        repository = cls.from_data(data)
        logger.info(
            "Loaded %d quotes by %d authors from %s",
            len(repository),
            len(repository.all_authors()),
            path,
        )
        return repository

    @classmethod
    def from_data(cls, data: object) -> "QuoteRepository":
        """Build a repository from already-parsed JSON data."""
        try:
            records = _records_adapter.validate_python(data)
        except ValidationError as e:
            raise CorpusLoadError(f"Malformed quote corpus: {e}") from e
        return cls(records)

    def __len__(self) -> int:
        return len(self._quotes)

    def all_quotes(self) -> Sequence[QuoteRecord]:
        return self._quotes

    def find_by_id(self, quote_id: int) -> QuoteRecord:
        """
        Look up a quote by id.

        Raises:
            QuoteNotFoundError: If no quote has this id
        """
        try:
            return self._by_id[quote_id]
        except KeyError:
            raise QuoteNotFoundError(quote_id) from None

    def filter_by_tiers(self, tiers: Iterable[QuoteDifficulty]) -> list[QuoteRecord]:
        """Get all quotes whose difficulty is one of the given tiers."""
        wanted = set(tiers)
        return [q for q in self._quotes if q.difficulty in wanted]

    def all_authors(self) -> frozenset[str]:
        """Get the distinct author names in the corpus."""
        return self._authors

    def tier_counts(self) -> dict[QuoteDifficulty, int]:
        """Count quotes in each difficulty tier, including empty tiers."""
        counts = Counter(q.difficulty for q in self._quotes)
        return {tier: counts.get(tier, 0) for tier in QuoteDifficulty}
