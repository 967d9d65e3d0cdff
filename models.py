from datetime import datetime, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class Difficulty(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class Category(str, Enum):
    MIDDLE_SCHOOL_INFO = "middle_school_info"
    HIGH_SCHOOL_INFO = "high_school_info"
    AI_BASICS = "ai_basics"
    MIDDLE_SCHOOL_CURRICULUM = "middle_school_curriculum"
    HIGH_SCHOOL_CURRICULUM = "high_school_curriculum"
    AI_BASICS_CURRICULUM = "ai_basics_curriculum"


class GradingMode(str, Enum):
    INSTANT = "instant"
    BATCH = "batch"


class ExerciseStatus(str, Enum):
    """Lifecycle of an exercise as seen by its store."""

    CREATED = "created"
    BLANKS_ASSIGNED = "blanks_assigned"
    ANSWERING = "answering"
    GRADED = "graded"


class WireModel(BaseModel):
    """Base for models that travel to clients with camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict[str, Any]:
        """Serialize with the client-facing field names."""
        return self.model_dump(mode="json", by_alias=True)


# ============================================================================
# Engine Models
# ============================================================================


class Token(BaseModel):
    """A maximal run of non-whitespace characters and where it sits in the text."""

    text: str
    start_offset: int
    length: int
    line_index: int
    index: int  # position among all tokens of the text

    @property
    def end_offset(self) -> int:
        return self.start_offset + self.length


class BlankItem(WireModel):
    id: str
    position: int
    word: str
    length: int


class ExerciseResult(WireModel):
    blank_id: str
    user_answer: str = ""
    correct_answer: str
    is_correct: bool
    feedback: str | None = None

    def to_wire(self) -> dict[str, Any]:
        """Serialize for clients, leaving out feedback when there is none."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Score(WireModel):
    correct: int = 0
    incorrect: int = 0
    total: int = 0
    percentage: int = 0


class GradeReport(WireModel):
    results: list[ExerciseResult] = Field(default_factory=list)
    score: Score = Field(default_factory=Score)

    def to_wire(self) -> dict[str, Any]:
        return {
            "results": [result.to_wire() for result in self.results],
            "score": self.score.to_wire(),
        }


# ============================================================================
# Exercise Models
# ============================================================================


class Exercise(WireModel):
    id: str
    original_text: str
    difficulty: Difficulty = Difficulty.ADVANCED
    category: Category | None = None
    blanks: list[BlankItem] = Field(default_factory=list)
    answers: dict[str, str] = Field(default_factory=dict)
    results: list[ExerciseResult] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def status(self) -> ExerciseStatus:
        """Derive the lifecycle state from what has been stored so far."""
        if self.results:
            return ExerciseStatus.GRADED
        if self.answers:
            return ExerciseStatus.ANSWERING
        if self.blanks:
            return ExerciseStatus.BLANKS_ASSIGNED
        return ExerciseStatus.CREATED

    def to_wire(self) -> dict[str, Any]:
        data = self.model_dump(mode="json", by_alias=True, exclude={"results"})
        data["results"] = [result.to_wire() for result in self.results]
        return data


# ============================================================================
# Request Models
# ============================================================================


class CreateExerciseRequest(WireModel):
    original_text: str
    difficulty: Difficulty = Difficulty.ADVANCED
    category: Category | None = None

    @field_validator("original_text")
    @classmethod
    def _require_text(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("originalText must not be empty")
        return value


class SubmitAnswerRequest(WireModel):
    blank_id: str
    answer: str


class BatchAnswersRequest(WireModel):
    answers: dict[str, str]
