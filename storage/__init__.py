"""Storage layer for the Korean cloze tutor.

Provides the exercise repository interface with an in-memory implementation
(the default, nothing survives a restart) and a SQLite implementation.
"""

from pathlib import Path

from .base import ExerciseRepository
from .memory import InMemoryExerciseRepository
from .sqlite import SQLiteExerciseRepository
from .connection import get_connection, init_schema, DEFAULT_DB_PATH

__all__ = [
    # Abstract interface
    "ExerciseRepository",
    # Implementations
    "InMemoryExerciseRepository",
    "SQLiteExerciseRepository",
    # Connection utilities
    "get_connection",
    "init_schema",
    "DEFAULT_DB_PATH",
    # Factory
    "get_exercise_repo",
    "STORAGE_BACKENDS",
]

STORAGE_BACKENDS = ("memory", "sqlite")


def get_exercise_repo(
    backend: str = "memory",
    db_path: Path = DEFAULT_DB_PATH,
) -> ExerciseRepository:
    """Get an ExerciseRepository for the named backend.

    The SQLite schema is created on first use.

    Raises:
        ValueError: If the backend name is unknown.
    """
    if backend == "memory":
        return InMemoryExerciseRepository()
    if backend == "sqlite":
        init_schema(db_path)
        return SQLiteExerciseRepository(db_path)
    raise ValueError(f"Unknown storage backend: {backend}")
