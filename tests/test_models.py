"""Tests for the exercise models and their wire format."""

import pytest
from pydantic import ValidationError

from models import (
    BatchAnswersRequest,
    BlankItem,
    Category,
    CreateExerciseRequest,
    Difficulty,
    Exercise,
    ExerciseResult,
    ExerciseStatus,
    GradeReport,
    Score,
    SubmitAnswerRequest,
)


class TestExerciseStatus:
    def test_lifecycle(self, simple_text, simple_blanks):
        exercise = Exercise(id="ex-1", original_text=simple_text)
        assert exercise.status == ExerciseStatus.CREATED

        exercise = exercise.model_copy(update={"blanks": simple_blanks})
        assert exercise.status == ExerciseStatus.BLANKS_ASSIGNED

        exercise = exercise.model_copy(update={"answers": {"blank_1": "학교"}})
        assert exercise.status == ExerciseStatus.ANSWERING

        result = ExerciseResult(
            blank_id="blank_1", user_answer="학교", correct_answer="학교에", is_correct=False
        )
        exercise = exercise.model_copy(update={"results": [result]})
        assert exercise.status == ExerciseStatus.GRADED

    def test_defaults(self, simple_text):
        exercise = Exercise(id="ex-1", original_text=simple_text)
        assert exercise.difficulty == Difficulty.ADVANCED
        assert exercise.category is None
        assert exercise.created_at.tzinfo is not None


class TestWireFormat:
    def test_blank_item_keys(self, simple_blanks):
        assert simple_blanks[0].to_wire() == {
            "id": "blank_1",
            "position": 3,
            "word": "학교에",
            "length": 3,
        }

    def test_result_omits_missing_feedback(self):
        result = ExerciseResult(
            blank_id="blank_2", user_answer="간다", correct_answer="간다", is_correct=True
        )
        assert result.to_wire() == {
            "blankId": "blank_2",
            "userAnswer": "간다",
            "correctAnswer": "간다",
            "isCorrect": True,
        }

    def test_result_includes_feedback(self):
        result = ExerciseResult(
            blank_id="blank_2",
            user_answer="가다",
            correct_answer="간다",
            is_correct=False,
            feedback="다시 한번 확인해보세요",
        )
        assert result.to_wire()["feedback"] == "다시 한번 확인해보세요"

    def test_exercise_keys(self, simple_text, simple_blanks):
        exercise = Exercise(
            id="ex-1",
            original_text=simple_text,
            category=Category.AI_BASICS,
            blanks=simple_blanks,
        )
        wire = exercise.to_wire()
        assert set(wire) == {
            "id",
            "originalText",
            "difficulty",
            "category",
            "blanks",
            "answers",
            "results",
            "createdAt",
        }
        assert wire["difficulty"] == "advanced"
        assert wire["category"] == "ai_basics"
        assert wire["blanks"][1] == {"id": "blank_2", "position": 7, "word": "간다", "length": 2}

    def test_grade_report(self):
        report = GradeReport(score=Score(correct=1, incorrect=0, total=1, percentage=100))
        assert report.to_wire() == {
            "results": [],
            "score": {"correct": 1, "incorrect": 0, "total": 1, "percentage": 100},
        }


class TestRequests:
    def test_create_from_camel_case(self):
        request = CreateExerciseRequest.model_validate(
            {"originalText": "나는 학교에 간다", "difficulty": "beginner"}
        )
        assert request.original_text == "나는 학교에 간다"
        assert request.difficulty == Difficulty.BEGINNER
        assert request.category is None

    def test_create_from_field_names(self):
        request = CreateExerciseRequest(original_text="나는 학교에 간다")
        assert request.difficulty == Difficulty.ADVANCED

    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    def test_create_rejects_blank_text(self, text):
        with pytest.raises(ValidationError, match="originalText must not be empty"):
            CreateExerciseRequest(original_text=text)

    def test_create_rejects_unknown_difficulty(self):
        with pytest.raises(ValidationError):
            CreateExerciseRequest.model_validate(
                {"originalText": "나는 학교에 간다", "difficulty": "expert"}
            )

    def test_submit_answer(self):
        request = SubmitAnswerRequest.model_validate({"blankId": "blank_2", "answer": "간다"})
        assert request.blank_id == "blank_2"

    def test_batch_answers(self):
        request = BatchAnswersRequest.model_validate({"answers": {"blank_2": "간다"}})
        assert request.answers == {"blank_2": "간다"}


def test_blank_item_round_trips_through_snake_case(simple_blanks):
    dumped = simple_blanks[0].model_dump(mode="json")
    assert BlankItem.model_validate(dumped) == simple_blanks[0]
