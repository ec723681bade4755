"""Quote corpus storage."""

from .quote_repository import QuoteRepository

__all__ = ["QuoteRepository"]
