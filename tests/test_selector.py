"""Unit tests for blank selection."""

import math
import random

import pytest

from cloze.config import EngineConfig, DifficultyPolicy
from cloze.particles import is_particle
from cloze.selector import (
    is_functional,
    make_blank_id,
    select_blanks,
    target_blank_count,
)
from cloze.tokenizer import count_words
from conftest import ScriptedRandom, accept_all, reject_all
from models import BlankItem, Difficulty

CONTENT_WORDS = (
    "학교 친구 선생님 교실 공책 연필 가방 운동장 도서관 급식 "
    "수학 과학 국어 영어 음악 미술 체육 역사 지리 사회 "
    "컴퓨터 알고리즘 데이터 프로그램 네트워크"
)


class TestTargetBlankCount:
    @pytest.mark.parametrize(
        "total, difficulty, expected",
        [
            (10, Difficulty.BEGINNER, 2),
            (10, Difficulty.INTERMEDIATE, 5),
            (10, Difficulty.ADVANCED, 9),
            (3, Difficulty.ADVANCED, 2),
            (0, Difficulty.ADVANCED, 0),
            (4, Difficulty.BEGINNER, 0),
        ],
    )
    def test_floor_of_ratio(self, total, difficulty, expected):
        assert target_blank_count(total, difficulty) == expected


class TestIsFunctional:
    def test_contains_functional_word(self):
        assert is_functional("공부하다")
        assert is_functional("있다")
        assert not is_functional("학교")


class TestSelectBlanks:
    def test_accept_all_fills_target_in_order(self, simple_text):
        """Should take eligible words in order until the target is reached."""
        blanks = select_blanks(simple_text, Difficulty.ADVANCED, accept_all())
        assert blanks == [
            BlankItem(id="blank_0", position=0, word="나는", length=2),
            BlankItem(id="blank_1", position=3, word="학교에", length=3),
        ]

    def test_failed_roll_skips_word(self, simple_text):
        """Should move on to later words when a roll fails."""
        rng = ScriptedRandom([0.99, 0.0, 0.0])
        blanks = select_blanks(simple_text, Difficulty.ADVANCED, rng)
        assert [b.word for b in blanks] == ["학교에", "간다"]
        assert [b.id for b in blanks] == ["blank_1", "blank_2"]
        assert [b.position for b in blanks] == [3, 7]

    def test_reject_all_gives_no_blanks(self, simple_text):
        assert select_blanks(simple_text, Difficulty.ADVANCED, reject_all()) == []

    def test_ids_count_ineligible_tokens(self):
        """Should number blanks by their index among all tokens."""
        blanks = select_blanks("그 는 학교에 간다", Difficulty.ADVANCED, accept_all())
        assert [(b.id, b.position, b.word) for b in blanks] == [
            ("blank_2", 4, "학교에"),
            ("blank_3", 8, "간다"),
        ]

    def test_trailing_punctuation_removed_from_gold(self):
        text = "오늘 학교에 간다."
        rng = ScriptedRandom([0.99, 0.99, 0.0])
        blanks = select_blanks(text, Difficulty.ADVANCED, rng)
        assert blanks == [BlankItem(id="blank_2", position=7, word="간다", length=2)]
        assert text[7:9] == "간다"

    @pytest.mark.parametrize("text", ["", "   \n  \n", "은 는 이 가 을 를", "1 2 3 4 5"])
    def test_degenerate_text_gives_empty_list(self, text):
        assert select_blanks(text, Difficulty.ADVANCED, accept_all()) == []

    def test_rolls_only_for_eligible_words(self):
        rng = accept_all()
        select_blanks("은 는 학교 친구 교실", Difficulty.ADVANCED, rng)
        assert rng.calls == 3

    def test_beginner_skips_functional_words(self):
        """Should never blank functional words at beginner level."""
        text = "공부하다 학교 친구 선생님 교실"
        blanks = select_blanks(text, Difficulty.BEGINNER, accept_all())
        assert [(b.id, b.word) for b in blanks] == [("blank_1", "학교")]

    def test_intermediate_functional_probability(self):
        """Should apply the lower acceptance to functional words."""
        text = "공부하다 학교 친구 교실"
        blanks = select_blanks(text, Difficulty.INTERMEDIATE, ScriptedRandom([0.5]))
        assert [b.word for b in blanks] == ["학교", "친구"]

    def test_same_seed_same_blanks(self, messy_text):
        first = select_blanks(messy_text, Difficulty.INTERMEDIATE, random.Random(3))
        second = select_blanks(messy_text, Difficulty.INTERMEDIATE, random.Random(3))
        assert first == second

    def test_custom_policy(self, simple_text):
        config = EngineConfig(
            policies={
                Difficulty.ADVANCED: DifficultyPolicy(
                    ratio=1.0, acceptance=1.0, functional_acceptance=1.0
                )
            }
        )
        blanks = select_blanks(simple_text, Difficulty.ADVANCED, random.Random(), config)
        assert [b.word for b in blanks] == ["나는", "학교에", "간다"]

    def test_advanced_near_total_coverage(self):
        """Should blank at least 80% of eligible words at advanced level."""
        words = CONTENT_WORDS.split()
        assert len(words) == 25

        blanks = select_blanks(CONTENT_WORDS, Difficulty.ADVANCED, accept_all())
        assert len(blanks) == 23

        blanks = select_blanks(CONTENT_WORDS, Difficulty.ADVANCED, random.Random(42))
        assert len(blanks) / len(words) >= 0.8


class TestSelectionInvariants:
    @pytest.mark.parametrize("difficulty", list(Difficulty))
    @pytest.mark.parametrize("seed", range(10))
    def test_offsets_bound_and_particles(self, messy_text, difficulty, seed):
        text = messy_text + "\n" + CONTENT_WORDS
        blanks = select_blanks(text, difficulty, random.Random(seed))

        target = math.floor(count_words(text) * EngineConfig().policy_for(difficulty).ratio)
        assert len(blanks) <= target

        positions = [b.position for b in blanks]
        assert positions == sorted(set(positions))

        for blank in blanks:
            assert text[blank.position : blank.position + blank.length] == blank.word
            assert blank.length == len(blank.word)
            assert not is_particle(blank.word)
            assert blank.id.startswith("blank_")

    def test_make_blank_id(self):
        assert make_blank_id(7) == "blank_7"
