"""Abstract repository interface for the exercise store."""

from abc import ABC, abstractmethod

from models import (
    BlankItem,
    Category,
    Difficulty,
    Exercise,
    ExerciseResult,
)


class ExerciseRepository(ABC):
    """Abstract interface for exercise storage.

    The store owns every exercise and its mutable answer/result state. Blanks
    are written once; later writes only touch answers and results.
    """

    @abstractmethod
    def create(
        self,
        original_text: str,
        difficulty: Difficulty = Difficulty.ADVANCED,
        category: Category | None = None,
    ) -> Exercise:
        """Create a new exercise with no blanks, answers or results.

        Args:
            original_text: The source text.
            difficulty: Difficulty level blanks will be selected with.
            category: Optional catalog category the text came from.

        Returns:
            The stored exercise, with a fresh ID.
        """
        pass

    @abstractmethod
    def get(self, exercise_id: str) -> Exercise | None:
        """Load an exercise by ID.

        Args:
            exercise_id: The exercise ID.

        Returns:
            The exercise, or None if not found.
        """
        pass

    @abstractmethod
    def update_blanks(
        self, exercise_id: str, blanks: list[BlankItem]
    ) -> Exercise | None:
        """Attach the blank set to an exercise.

        Args:
            exercise_id: The exercise ID.
            blanks: The blanks selected for the exercise.

        Returns:
            The updated exercise, or None if not found.

        Raises:
            BlanksAlreadyAssignedError: If the exercise already has blanks.
        """
        pass

    @abstractmethod
    def update_answers(
        self, exercise_id: str, answers: dict[str, str]
    ) -> Exercise | None:
        """Replace the stored answers of an exercise.

        Args:
            exercise_id: The exercise ID.
            answers: Mapping of blank ID to submitted answer.

        Returns:
            The updated exercise, or None if not found.
        """
        pass

    @abstractmethod
    def update_results(
        self, exercise_id: str, results: list[ExerciseResult]
    ) -> Exercise | None:
        """Replace the stored grading results of an exercise.

        Args:
            exercise_id: The exercise ID.
            results: Results of the latest grading call.

        Returns:
            The updated exercise, or None if not found.
        """
        pass

    @abstractmethod
    def delete(self, exercise_id: str) -> None:
        """Delete an exercise. Unknown IDs are ignored.

        Args:
            exercise_id: The exercise ID.
        """
        pass

    @abstractmethod
    def list_ids(self) -> list[str]:
        """List the IDs of all stored exercises, oldest first."""
        pass
