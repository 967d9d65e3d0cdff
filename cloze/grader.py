"""Grading of submitted answers against blank gold words.

Correctness is exact string equality after trimming the submission. Wrong,
non-empty answers get a short hint picked from ``FEEDBACK_RULES``: the first
rule whose predicate holds supplies the message. Empty answers get no
feedback so callers can tell "not answered" apart from "answered wrong".

The grader has no notion of instant or batch mode; both pass blanks and
answers through ``grade``.
"""

from typing import Callable, Mapping, NamedTuple

from cloze.particles import ends_with_particle, extract_root
from models import BlankItem, ExerciseResult, Score

PARTICLE_CONFUSION_FEEDBACK = "조사 구분 주의"
LENGTH_MISMATCH_FEEDBACK = "단어 길이를 확인해보세요"
GENERIC_FEEDBACK = "다시 한번 확인해보세요"


class FeedbackRule(NamedTuple):
    name: str
    applies: Callable[[str, str], bool]
    message: str


def _particle_confusion(user_answer: str, correct_answer: str) -> bool:
    # Same root, with a particle added, dropped or swapped on either side.
    if not (ends_with_particle(user_answer) or ends_with_particle(correct_answer)):
        return False
    return extract_root(user_answer) == extract_root(correct_answer)


def _length_mismatch(user_answer: str, correct_answer: str) -> bool:
    return len(user_answer) != len(correct_answer)


FEEDBACK_RULES: list[FeedbackRule] = [
    FeedbackRule("particle_confusion", _particle_confusion, PARTICLE_CONFUSION_FEEDBACK),
    FeedbackRule("length_mismatch", _length_mismatch, LENGTH_MISMATCH_FEEDBACK),
    FeedbackRule("generic", lambda user, correct: True, GENERIC_FEEDBACK),
]


def feedback_for(
    user_answer: str,
    correct_answer: str,
    rules: list[FeedbackRule] = FEEDBACK_RULES,
) -> str | None:
    """Pick feedback for a wrong answer, or None when nothing was entered."""
    if not user_answer:
        return None
    for rule in rules:
        if rule.applies(user_answer, correct_answer):
            return rule.message
    return None


def grade_blank(blank: BlankItem, answer: str | None) -> ExerciseResult:
    """Grade a single submitted answer."""
    user_answer = (answer or "").strip()
    is_correct = user_answer == blank.word
    return ExerciseResult(
        blank_id=blank.id,
        user_answer=user_answer,
        correct_answer=blank.word,
        is_correct=is_correct,
        feedback=None if is_correct else feedback_for(user_answer, blank.word),
    )


def grade(
    blanks: list[BlankItem],
    answers: Mapping[str, str],
) -> list[ExerciseResult]:
    """Grade every blank, in blank order. Missing answers count as empty."""
    return [grade_blank(blank, answers.get(blank.id)) for blank in blanks]


def find_blank(blanks: list[BlankItem], blank_id: str) -> BlankItem | None:
    """Find a blank by ID. Returns None rather than raising when absent."""
    for blank in blanks:
        if blank.id == blank_id:
            return blank
    return None


def compute_score(results: list[ExerciseResult]) -> Score:
    """Aggregate results into correct/incorrect counts and a rounded percentage."""
    total = len(results)
    correct = sum(1 for r in results if r.is_correct)
    # round half up, as clients display it
    percentage = int(correct * 100 / total + 0.5) if total > 0 else 0
    return Score(
        correct=correct,
        incorrect=total - correct,
        total=total,
        percentage=percentage,
    )
