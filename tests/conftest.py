"""Shared pytest fixtures for the Korean cloze tutor test suite."""

import pytest

import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from models import BlankItem
from service import ExerciseService
from storage import (
    InMemoryExerciseRepository,
    SQLiteExerciseRepository,
    init_schema,
)


class ScriptedRandom:
    """Random source that replays fixed values, then repeats the last one.

    Lets tests decide exactly which eligible words pass the acceptance roll.
    """

    def __init__(self, values: list[float]):
        self.values = list(values)
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        if len(self.values) > 1:
            return self.values.pop(0)
        return self.values[0]


def accept_all() -> ScriptedRandom:
    """Every roll passes any non-zero acceptance probability."""
    return ScriptedRandom([0.0])


def reject_all() -> ScriptedRandom:
    """Every roll fails."""
    return ScriptedRandom([0.999])


@pytest.fixture
def simple_text() -> str:
    """The three-word sentence used across the suite."""
    return "나는 학교에 간다"


@pytest.fixture
def messy_text() -> str:
    """Text with leading spaces, repeated spaces, blank lines and punctuation."""
    return (
        "  오늘은   날씨가 좋다.\n"
        "\n"
        "   \n"
        "우리는\t공원에서  산책을 했다!\n"
        "친구로부터 편지를 받았다 \n"
        "\n"
        "그리고 저녁에 책을 읽었다."
    )


@pytest.fixture
def simple_blanks() -> list[BlankItem]:
    """Blanks for simple_text with 학교에 and 간다 selected."""
    return [
        BlankItem(id="blank_1", position=3, word="학교에", length=3),
        BlankItem(id="blank_2", position=7, word="간다", length=2),
    ]


@pytest.fixture
def memory_repo() -> InMemoryExerciseRepository:
    return InMemoryExerciseRepository()


@pytest.fixture
def test_db_path(tmp_path) -> Path:
    """Create a temporary database path for testing."""
    db_path = tmp_path / "test_exercises.db"
    init_schema(db_path)
    return db_path


@pytest.fixture
def sqlite_repo(test_db_path) -> SQLiteExerciseRepository:
    return SQLiteExerciseRepository(test_db_path)


@pytest.fixture(params=["memory", "sqlite"])
def repo(request, tmp_path):
    """Each storage backend in turn."""
    if request.param == "memory":
        return InMemoryExerciseRepository()
    db_path = tmp_path / "param_exercises.db"
    init_schema(db_path)
    return SQLiteExerciseRepository(db_path)


@pytest.fixture
def accepting_service(memory_repo) -> ExerciseService:
    """Service whose blank selection accepts every eligible word up to the target."""
    return ExerciseService(memory_repo, rng=accept_all())
