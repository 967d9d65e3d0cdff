"""Hints shown to a learner who is stuck on a blank."""

from typing import Literal

from cloze.config import DEFAULT_CONFIG, EngineConfig
from cloze.particles import find_particle

WordLevel = Literal["basic", "intermediate", "advanced"]


def generate_hint(word: str, config: EngineConfig = DEFAULT_CONFIG) -> str:
    """Build a hint for a gold word: first letter, letter count, particle.

    >>> generate_hint("학교를")
    '첫 글자: 학, 글자 수: 3자, 조사: 를'
    """
    hints = []
    if len(word) > 1:
        hints.append(f"첫 글자: {word[0]}")
    hints.append(f"글자 수: {len(word)}자")

    particle = find_particle(word, config)
    if particle is not None:
        hints.append(f"조사: {particle}")

    return ", ".join(hints)


def classify_word(word: str) -> WordLevel:
    """Rough difficulty of a word, by length."""
    if len(word) <= 2:
        return "basic"
    if len(word) <= 4:
        return "intermediate"
    return "advanced"
