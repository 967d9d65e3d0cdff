import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from models import Difficulty
from storage import DEFAULT_DB_PATH, STORAGE_BACKENDS

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class Settings:
    storage: str = "memory"  # memory|sqlite
    db_path: Path = DEFAULT_DB_PATH
    difficulty: Difficulty = Difficulty.ADVANCED
    log_level: str = "WARNING"
    seed: int | None = None


def _optional_int(name: str) -> int | None:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}") from None


def load_settings() -> Settings:
    """Read settings from the environment (and a .env file, if present)."""
    load_dotenv()

    storage = (os.getenv("CLOZE_STORAGE") or "memory").strip().lower()
    if storage not in STORAGE_BACKENDS:
        raise RuntimeError(f"CLOZE_STORAGE must be one of {', '.join(STORAGE_BACKENDS)}")

    db_path = Path(os.getenv("CLOZE_DB_PATH") or DEFAULT_DB_PATH)

    difficulty = (os.getenv("CLOZE_DIFFICULTY") or "advanced").strip().lower()
    if difficulty not in {d.value for d in Difficulty}:
        raise RuntimeError("CLOZE_DIFFICULTY must be beginner, intermediate, or advanced")

    log_level = (os.getenv("CLOZE_LOG_LEVEL") or "WARNING").strip().upper()
    if log_level not in LOG_LEVELS:
        raise RuntimeError(f"CLOZE_LOG_LEVEL must be one of {', '.join(sorted(LOG_LEVELS))}")

    return Settings(
        storage=storage,
        db_path=db_path,
        difficulty=Difficulty(difficulty),
        log_level=log_level,
        seed=_optional_int("CLOZE_SEED"),
    )
