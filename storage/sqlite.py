"""SQLite implementation of the exercise repository."""

import json
import uuid
from datetime import datetime, timezone
from pathlib import Path

from .base import ExerciseRepository
from .connection import get_connection, DEFAULT_DB_PATH
from errors import BlanksAlreadyAssignedError
from models import (
    BlankItem,
    Category,
    Difficulty,
    Exercise,
    ExerciseResult,
)


class SQLiteExerciseRepository(ExerciseRepository):
    """SQLite implementation of ExerciseRepository.

    Blanks, answers and results are stored as JSON text columns. The schema
    must exist already (see ``init_schema``).
    """

    def __init__(self, db_path: Path = DEFAULT_DB_PATH):
        self.db_path = db_path

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
            created_at=datetime.now(timezone.utc),
        )
        conn = get_connection(self.db_path)
        try:
            conn.execute(
                """INSERT INTO exercises
                (id, original_text, difficulty, category, blanks, answers, results, created_at)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?)""",
                (
                    exercise.id,
                    exercise.original_text,
                    exercise.difficulty.value,
                    exercise.category.value if exercise.category else None,
                    None,
                    "{}",
                    "[]",
                    exercise.created_at.isoformat(),
                ),
            )
            conn.commit()
        finally:
            conn.close()
        return exercise

    def get(self, exercise_id: str) -> Exercise | None:
        conn = get_connection(self.db_path)
        try:
            cursor = conn.execute(
                "SELECT * FROM exercises WHERE id = ?", (exercise_id,)
            )
            row = cursor.fetchone()
            return self._row_to_model(row) if row else None
        finally:
            conn.close()

    def update_blanks(
        self, exercise_id: str, blanks: list[BlankItem]
    ) -> Exercise | None:
        payload = [blank.model_dump(mode="json") for blank in blanks]
        conn = get_connection(self.db_path)
        try:
            cursor = conn.execute(
                "UPDATE exercises SET blanks = ? WHERE id = ? AND blanks IS NULL",
                (json.dumps(payload, ensure_ascii=False), exercise_id),
            )
            conn.commit()
            assigned = cursor.rowcount > 0
        finally:
            conn.close()
        exercise = self.get(exercise_id)
        if exercise is not None and not assigned:
            raise BlanksAlreadyAssignedError(exercise_id)
        return exercise

    def update_answers(
        self, exercise_id: str, answers: dict[str, str]
    ) -> Exercise | None:
        return self._update_column(exercise_id, "answers", dict(answers))

    def update_results(
        self, exercise_id: str, results: list[ExerciseResult]
    ) -> Exercise | None:
        payload = [result.model_dump(mode="json") for result in results]
        return self._update_column(exercise_id, "results", payload)

    def delete(self, exercise_id: str) -> None:
        conn = get_connection(self.db_path)
        try:
            conn.execute("DELETE FROM exercises WHERE id = ?", (exercise_id,))
            conn.commit()
        finally:
            conn.close()

    def list_ids(self) -> list[str]:
        conn = get_connection(self.db_path)
        try:
            cursor = conn.execute("SELECT id FROM exercises ORDER BY created_at, rowid")
            return [row["id"] for row in cursor.fetchall()]
        finally:
            conn.close()

    def _update_column(self, exercise_id: str, column: str, value) -> Exercise | None:
        """Write one JSON column and return the reloaded exercise."""
        conn = get_connection(self.db_path)
        try:
            cursor = conn.execute(
                f"UPDATE exercises SET {column} = ? WHERE id = ?",
                (json.dumps(value, ensure_ascii=False), exercise_id),
            )
            conn.commit()
            if cursor.rowcount == 0:
                return None
        finally:
            conn.close()
        return self.get(exercise_id)

    def _row_to_model(self, row) -> Exercise:
        """Convert a database row to an Exercise model."""
        return Exercise(
            id=row["id"],
            original_text=row["original_text"],
            difficulty=Difficulty(row["difficulty"]),
            category=Category(row["category"]) if row["category"] else None,
            blanks=[
                BlankItem.model_validate(b) for b in json.loads(row["blanks"] or "[]")
            ],
            answers=json.loads(row["answers"]),
            results=[
                ExerciseResult.model_validate(r) for r in json.loads(row["results"])
            ],
            created_at=datetime.fromisoformat(row["created_at"]),
        )
