"""In-memory implementation of the exercise repository."""

import uuid

from .base import ExerciseRepository
from errors import BlanksAlreadyAssignedError
from models import (
    BlankItem,
    Category,
    Difficulty,
    Exercise,
    ExerciseResult,
)


class InMemoryExerciseRepository(ExerciseRepository):
    """Dict-backed exercise store. Contents are lost when the process exits.

    Stored exercises are copied on the way in and out, so callers never hold
    a reference into the store.
    """

    def __init__(self):
        self._exercises: dict[str, Exercise] = {}
        self._assigned: set[str] = set()

    def create(
        self,
        original_text: str,
        difficulty: Difficulty = Difficulty.ADVANCED,
        category: Category | None = None,
    ) -> Exercise:
        exercise = Exercise(
            id=str(uuid.uuid4()),
            original_text=original_text,
            difficulty=difficulty,
            category=category,
        )
        self._exercises[exercise.id] = exercise
        return exercise.model_copy(deep=True)

    def get(self, exercise_id: str) -> Exercise | None:
        exercise = self._exercises.get(exercise_id)
        return exercise.model_copy(deep=True) if exercise else None

    def update_blanks(
        self, exercise_id: str, blanks: list[BlankItem]
    ) -> Exercise | None:
        exercise = self._exercises.get(exercise_id)
        if exercise is None:
            return None
        if exercise_id in self._assigned:
            raise BlanksAlreadyAssignedError(exercise_id)
        self._assigned.add(exercise_id)
        return self._replace(exercise, blanks=list(blanks))

    def update_answers(
        self, exercise_id: str, answers: dict[str, str]
    ) -> Exercise | None:
        exercise = self._exercises.get(exercise_id)
        if exercise is None:
            return None
        return self._replace(exercise, answers=dict(answers))

    def update_results(
        self, exercise_id: str, results: list[ExerciseResult]
    ) -> Exercise | None:
        exercise = self._exercises.get(exercise_id)
        if exercise is None:
            return None
        return self._replace(exercise, results=list(results))

    def delete(self, exercise_id: str) -> None:
        self._exercises.pop(exercise_id, None)
        self._assigned.discard(exercise_id)

    def list_ids(self) -> list[str]:
        return list(self._exercises)

    def _replace(self, exercise: Exercise, **changes) -> Exercise:
        """Store an updated copy of the exercise and return another copy."""
        updated = exercise.model_copy(update=changes, deep=True)
        self._exercises[exercise.id] = updated
        return updated.model_copy(deep=True)
