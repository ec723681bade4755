"""Mapping from game mode to eligible tiers and answer rules."""

import logging

from src.models.quote import GameMode, InputStyle, MatchStrategy, ModeRules, QuoteDifficulty

logger = logging.getLogger(__name__)

MODE_RULES: dict[GameMode, ModeRules] = {
    GameMode.MC_EASY: ModeRules(
        tiers=frozenset({QuoteDifficulty.EASY}),
        input_style=InputStyle.MULTIPLE_CHOICE,
        matching=MatchStrategy.EXACT,
    ),
    GameMode.MC_HARD: ModeRules(
        tiers=frozenset({QuoteDifficulty.HARD}),
        input_style=InputStyle.MULTIPLE_CHOICE,
        matching=MatchStrategy.EXACT,
    ),
    GameMode.TYPE_EASY: ModeRules(
        tiers=frozenset({QuoteDifficulty.EASY}),
        input_style=InputStyle.FREE_TEXT,
        matching=MatchStrategy.FUZZY,
    ),
    GameMode.TYPE_HARD: ModeRules(
        tiers=frozenset({QuoteDifficulty.MEDIUM, QuoteDifficulty.HARD}),
        input_style=InputStyle.FREE_TEXT,
        matching=MatchStrategy.EXACT,
    ),
}

# Unknown modes are played with the easy multiple-choice rules.
FALLBACK_MODE = GameMode.MC_EASY


def mode_value(mode: GameMode | str) -> str:
    """Get the plain string form of a mode, known or not."""
    return mode.value if isinstance(mode, GameMode) else str(mode)


def resolve_mode(mode: GameMode | str) -> GameMode | None:
    """Parse a mode string, returning None when it is not a known mode."""
    try:
        return GameMode(mode)
    except ValueError:
        return None


def rules_for(mode: GameMode | str) -> ModeRules:
    """
    Get the rules for a mode.

    Args:
        mode: A GameMode or its string value

    Returns:
        The mode's rules, or the easy multiple-choice rules for an
        unrecognized mode
    """
    resolved = resolve_mode(mode)
    if resolved is None:
        logger.warning(
            "Unrecognized mode %r, using %s rules", mode, FALLBACK_MODE.value
        )
        resolved = FALLBACK_MODE
    return MODE_RULES[resolved]
