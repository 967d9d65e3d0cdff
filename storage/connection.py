"""SQLite connection helper and the exercises table schema."""

import sqlite3
from pathlib import Path

DEFAULT_DB_PATH = Path(__file__).parent.parent / "data" / "exercises.db"

SCHEMA_SQL = """
-- Exercises with their blank set, answers and latest results
CREATE TABLE IF NOT EXISTS exercises (
    id TEXT PRIMARY KEY,
    original_text TEXT NOT NULL,
    difficulty TEXT NOT NULL DEFAULT 'advanced'
        CHECK (difficulty IN ('beginner', 'intermediate', 'advanced')),
    category TEXT,
    blanks TEXT,                         -- JSON array of blank items, NULL until assigned
    answers TEXT NOT NULL DEFAULT '{}',  -- JSON object of blank id -> answer
    results TEXT NOT NULL DEFAULT '[]',  -- JSON array of exercise results
    created_at TEXT NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_exercises_created ON exercises(created_at);
"""


def get_connection(db_path: Path = DEFAULT_DB_PATH) -> sqlite3.Connection:
    """Open the exercise database. Rows come back as sqlite3.Row, keyed by column."""
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    return conn


def init_schema(db_path: Path = DEFAULT_DB_PATH) -> None:
    """Create the exercises table (and its parent directory) if missing.

    Safe to call on every start.
    """
    db_path.parent.mkdir(parents=True, exist_ok=True)

    conn = get_connection(db_path)
    try:
        conn.executescript(SCHEMA_SQL)
        conn.commit()
    finally:
        conn.close()
