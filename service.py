"""Exercise service: the layer between callers (CLI, HTTP) and the engine.

Validates request payloads, owns the exercise lifecycle through an
``ExerciseRepository``, and calls the stateless engine in ``cloze``:

    create_exercise -> select_blanks -> stored blanks (fixed from here on)
    submit_answer   -> merge one answer  -> grade that blank
    grade_answers   -> replace answers   -> grade every blank + score
    reset_exercise  -> clear answers and results, keep blanks (retry)
"""

import logging
import random
from typing import Any, Mapping, TypeVar

from pydantic import BaseModel, ValidationError

from cloze import DEFAULT_CONFIG, EngineConfig, compute_score, find_blank, grade
from cloze.selector import select_blanks
from errors import BlankNotFoundError, ExerciseNotFoundError, InvalidRequestError
from models import (
    BatchAnswersRequest,
    CreateExerciseRequest,
    Exercise,
    ExerciseResult,
    GradeReport,
    SubmitAnswerRequest,
)
from storage import ExerciseRepository

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=BaseModel)


def parse_request(model: type[R], payload: R | Mapping[str, Any]) -> R:
    """Validate a request payload into its model.

    Raises:
        InvalidRequestError: With one message per offending field.
    """
    if isinstance(payload, model):
        return payload
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        errors = [
            f"{'.'.join(str(part) for part in err['loc']) or 'body'}: {err['msg']}"
            for err in exc.errors()
        ]
        raise InvalidRequestError(f"Invalid {model.__name__}", errors) from exc


class ExerciseService:
    """Creates, grades and retries exercises held in a repository."""

    def __init__(
        self,
        repo: ExerciseRepository,
        rng: random.Random | None = None,
        config: EngineConfig = DEFAULT_CONFIG,
    ):
        self.repo = repo
        self.rng = rng or random.Random()
        self.config = config

    def create_exercise(
        self, payload: CreateExerciseRequest | Mapping[str, Any]
    ) -> Exercise:
        """Create an exercise and attach its blanks."""
        request = parse_request(CreateExerciseRequest, payload)

        exercise = self.repo.create(
            request.original_text, request.difficulty, request.category
        )
        blanks = select_blanks(
            request.original_text, request.difficulty, self.rng, self.config
        )
        updated = self.repo.update_blanks(exercise.id, blanks)
        if updated is None:
            raise ExerciseNotFoundError(exercise.id)

        logger.info(
            "created exercise %s with %d blanks (%s)",
            updated.id,
            len(updated.blanks),
            updated.difficulty.value,
        )
        return updated

    def get_exercise(self, exercise_id: str) -> Exercise:
        """Load an exercise.

        Raises:
            ExerciseNotFoundError: If no exercise has that ID.
        """
        exercise = self.repo.get(exercise_id)
        if exercise is None:
            logger.warning("exercise %s not found", exercise_id)
            raise ExerciseNotFoundError(exercise_id)
        return exercise

    def submit_answer(
        self,
        exercise_id: str,
        payload: SubmitAnswerRequest | Mapping[str, Any],
    ) -> ExerciseResult:
        """Record one answer and grade it immediately (instant mode).

        Raises:
            InvalidRequestError: If the payload is malformed.
            ExerciseNotFoundError: If no exercise has that ID.
            BlankNotFoundError: If the exercise has no blank with that ID.
        """
        request = parse_request(SubmitAnswerRequest, payload)
        exercise = self.get_exercise(exercise_id)

        blank = find_blank(exercise.blanks, request.blank_id)
        if blank is None:
            logger.warning(
                "blank %s not found in exercise %s", request.blank_id, exercise_id
            )
            raise BlankNotFoundError(exercise_id, request.blank_id)

        answers = {**exercise.answers, request.blank_id: request.answer}
        self.repo.update_answers(exercise_id, answers)

        return grade([blank], answers)[0]

    def grade_answers(
        self,
        exercise_id: str,
        payload: BatchAnswersRequest | Mapping[str, Any],
    ) -> GradeReport:
        """Replace the answers of an exercise and grade every blank (batch mode).

        Raises:
            InvalidRequestError: If the payload is malformed.
            ExerciseNotFoundError: If no exercise has that ID.
        """
        request = parse_request(BatchAnswersRequest, payload)
        exercise = self.get_exercise(exercise_id)

        self.repo.update_answers(exercise_id, request.answers)
        results = grade(exercise.blanks, request.answers)
        self.repo.update_results(exercise_id, results)

        score = compute_score(results)
        logger.info(
            "graded exercise %s: %d/%d (%d%%)",
            exercise_id,
            score.correct,
            score.total,
            score.percentage,
        )
        return GradeReport(results=results, score=score)

    def reset_exercise(self, exercise_id: str) -> Exercise:
        """Clear answers and results for a retry. Blanks stay as they are."""
        self.get_exercise(exercise_id)
        self.repo.update_answers(exercise_id, {})
        updated = self.repo.update_results(exercise_id, [])
        if updated is None:
            raise ExerciseNotFoundError(exercise_id)
        logger.info("reset exercise %s", exercise_id)
        return updated
