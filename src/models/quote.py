"""Pydantic models for quote records and game data structures."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class QuoteDifficulty(str, Enum):
    """Intrinsic difficulty tier of a quote."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class GameMode(str, Enum):
    """Caller-facing game variants."""

    MC_EASY = "mc-easy"
    MC_HARD = "mc-hard"
    TYPE_EASY = "type-easy"
    TYPE_HARD = "type-hard"


class InputStyle(str, Enum):
    """How the player submits an answer."""

    MULTIPLE_CHOICE = "multiple-choice"
    FREE_TEXT = "free-text"


class MatchStrategy(str, Enum):
    """How strictly a submitted answer is compared to the author."""

    FUZZY = "fuzzy"
    EXACT = "exact"


class ModeRules(BaseModel):
    """Eligible tiers and answer rules for one game mode."""

    model_config = ConfigDict(frozen=True)

    tiers: frozenset[QuoteDifficulty]
    input_style: InputStyle
    matching: MatchStrategy

    @property
    def is_multiple_choice(self) -> bool:
        return self.input_style == InputStyle.MULTIPLE_CHOICE


class QuoteRecord(BaseModel):
    """A single quote loaded from the corpus. Immutable once built."""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "text": "The secret of getting ahead is getting started.",
                "author": "Mark Twain",
                "difficulty": "easy",
            }
        },
    )

    id: int = Field(..., gt=0, description="Unique quote identifier")
    text: str = Field(..., min_length=1, description="The quote text")
    author: str = Field(..., min_length=1, description="Who said it")
    difficulty: QuoteDifficulty = Field(..., description="Difficulty tier")
    source: str | None = Field(None, description="Optional attribution")

    @field_validator("text", "author")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject whitespace-only text and author."""
        if not v.strip():
            raise ValueError("must not be blank")
        return v


class QuoteView(BaseModel):
    """A quote as served to the player, without its author."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    text: str
    mode: str = Field(..., serialization_alias="difficulty")
    source: str | None = None
    options: list[str] | None = Field(
        None,
        description="Author choices, present only for multiple-choice modes",
    )


class AnswerVerdict(BaseModel):
    """Outcome of evaluating one submitted answer."""

    correct: bool
    correct_author: str = Field(..., serialization_alias="correctAuthor")
    source: str | None = None
    message: str


class SessionScore(BaseModel):
    """Score for one player session."""

    model_config = ConfigDict(validate_assignment=True)

    current: int = Field(default=0, ge=0, serialization_alias="score")
    total: int = Field(default=0, ge=0)


class AnswerSubmission(BaseModel):
    """Body of an answer check request."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "quoteId": 1,
                "answer": "Mark Twain",
                "difficulty": "type-easy",
            }
        },
    )

    quote_id: int = Field(..., alias="quoteId", strict=True)
    answer: str
    mode: GameMode = Field(..., alias="difficulty")


class CheckResult(BaseModel):
    """Verdict fused with the session score after recording it."""

    correct: bool
    correct_author: str = Field(..., serialization_alias="correctAuthor")
    source: str | None = None
    user_score: int = Field(..., ge=0, serialization_alias="userScore")
    message: str

    @classmethod
    def from_verdict(cls, verdict: AnswerVerdict, score: SessionScore) -> "CheckResult":
        return cls(
            correct=verdict.correct,
            correct_author=verdict.correct_author,
            source=verdict.source,
            user_score=score.current,
            message=verdict.message,
        )
