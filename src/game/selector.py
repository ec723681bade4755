"""Quote selection and multiple-choice option generation."""

import logging
import random

from src.game.modes import mode_value, rules_for
from src.models.quote import GameMode, QuoteRecord, QuoteView
from src.repository.quote_repository import QuoteRepository

logger = logging.getLogger(__name__)

DISTRACTOR_COUNT = 3


def pick_distractors(
    repository: QuoteRepository,
    author: str,
    rng: random.Random,
    count: int = DISTRACTOR_COUNT,
) -> list[str]:
    """
    Pick distinct wrong authors for a multiple-choice question.

    Returns fewer than ``count`` names when the corpus does not have enough
    other authors.
    """
    # Sorted first so a seeded rng gives the same picks on every run.
    candidates = sorted(repository.all_authors() - {author})
    rng.shuffle(candidates)

    if len(candidates) < count:
        logger.warning(
            "Only %d distractor authors available for %r, wanted %d",
            len(candidates),
            author,
            count,
        )
    return candidates[:count]


def build_options(
    repository: QuoteRepository, quote: QuoteRecord, rng: random.Random
) -> list[str]:
    """Combine the true author with distractors in random order."""
    options = pick_distractors(repository, quote.author, rng)
    options.append(quote.author)
    rng.shuffle(options)
    return options


def select_quote(
    repository: QuoteRepository,
    mode: GameMode | str,
    rng: random.Random | None = None,
) -> QuoteView:
    """
    Draw a random quote suited to a game mode.

    Quotes outside the mode's tiers are used only when the mode's tiers are
    empty. Every call is independent, so the same quote may come up again.

    Args:
        repository: Quotes to draw from
        mode: Requested game mode
        rng: Random source, defaults to a fresh unseeded generator

    Returns:
        QuoteView echoing the requested mode, with options for
        multiple-choice modes
    """
    rng = rng or random.Random()
    rules = rules_for(mode)

    pool = repository.filter_by_tiers(rules.tiers)
    if not pool:
        logger.warning(
            "No quotes in tiers %s for mode %s, drawing from the whole corpus",
            sorted(t.value for t in rules.tiers),
            mode_value(mode),
        )
        pool = list(repository.all_quotes())

    quote = rng.choice(pool)
    options = build_options(repository, quote, rng) if rules.is_multiple_choice else None

    return QuoteView(
        id=quote.id,
        text=quote.text,
        mode=mode_value(mode),
        source=quote.source,
        options=options,
    )
