"""Answer evaluation for each game mode."""

from src.game.matching import exact_match, fuzzy_match, trimmed_match
from src.game.modes import resolve_mode, rules_for
from src.models.quote import AnswerVerdict, GameMode, MatchStrategy
from src.repository.quote_repository import QuoteRepository

CORRECT_MESSAGE = "Correct!"


def evaluate_answer(
    repository: QuoteRepository,
    quote_id: int,
    answer: str,
    mode: GameMode | str,
) -> AnswerVerdict:
    """
    Decide whether a submitted answer names the quote's author.

    Multiple-choice modes need the exact author string. Typed hard answers
    only have surrounding whitespace ignored. Typed easy answers are matched
    fuzzily (see ``fuzzy_match``).

    Args:
        repository: Quotes to look the id up in
        quote_id: Id of the quote being answered
        answer: The player's answer
        mode: Mode the quote was played in

    Returns:
        AnswerVerdict that always carries the true author and source

    Raises:
        QuoteNotFoundError: If quote_id is not in the repository
    """
    quote = repository.find_by_id(quote_id)
    author = quote.author

    # Unknown modes have no answer rules, so nothing is accepted.
    if resolve_mode(mode) is None:
        return AnswerVerdict(
            correct=False, correct_author=author, source=quote.source, message=""
        )

    rules = rules_for(mode)

    if rules.is_multiple_choice:
        correct = exact_match(answer, author)
        wrong_message = f"Wrong! It was {author}"
    elif rules.matching == MatchStrategy.FUZZY:
        correct = fuzzy_match(answer, author)
        wrong_message = f"Close, but no! It was {author}"
    else:
        correct = trimmed_match(answer, author)
        wrong_message = f"Incorrect. The author is {author}"

    return AnswerVerdict(
        correct=correct,
        correct_author=author,
        source=quote.source,
        message=CORRECT_MESSAGE if correct else wrong_message,
    )
