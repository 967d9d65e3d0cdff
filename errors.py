"""Exceptions raised by the exercise service and stores.

The engine in ``cloze`` never raises for well-formed input; everything here
belongs to the layer that owns exercises.
"""


class ClozeError(Exception):
    """Base class for errors surfaced to callers of the exercise service."""


class InvalidRequestError(ClozeError, ValueError):
    """A request payload was missing required fields or had malformed values."""

    def __init__(self, message: str, errors: list[str] | None = None):
        super().__init__(message)
        self.errors = errors or []


class ExerciseNotFoundError(ClozeError, LookupError):
    def __init__(self, exercise_id: str):
        super().__init__(f"Exercise not found: {exercise_id}")
        self.exercise_id = exercise_id


class BlankNotFoundError(ClozeError, LookupError):
    def __init__(self, exercise_id: str, blank_id: str):
        super().__init__(f"Blank not found: {blank_id} (exercise {exercise_id})")
        self.exercise_id = exercise_id
        self.blank_id = blank_id


class BlanksAlreadyAssignedError(ClozeError, ValueError):
    """Blanks are fixed once assigned; retries reuse the same set."""

    def __init__(self, exercise_id: str):
        super().__init__(f"Blanks already assigned for exercise {exercise_id}")
        self.exercise_id = exercise_id
