"""Configuration for blank selection.

These configuration models let callers tune how many blanks are generated for
each difficulty, which particles are never blanked, and which words count as
functional (verbs and copulas that carry grammar rather than content).
"""

from pydantic import BaseModel, Field

from models import Difficulty

DEFAULT_PARTICLES = [
    "은", "는", "이", "가", "을", "를", "에", "에서", "으로", "로",
    "와", "과", "의", "도", "만", "까지", "부터", "에게", "한테",
    "께", "께서", "에게서", "한테서", "로부터", "보다", "처럼", "같이",
]

DEFAULT_FUNCTIONAL_WORDS = ["있다", "없다", "되다", "하다", "이다", "아니다"]

# ASCII punctuation plus the marks common in Korean prose.
DEFAULT_PUNCTUATION = "!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~…·、。「」『』“”‘’《》〈〉"


class DifficultyPolicy(BaseModel):
    """How aggressively one difficulty level blanks words."""

    ratio: float = Field(ge=0.0, le=1.0)
    acceptance: float = Field(ge=0.0, le=1.0)
    functional_acceptance: float = Field(ge=0.0, le=1.0)


def _default_policies() -> dict[Difficulty, DifficultyPolicy]:
    return {
        Difficulty.BEGINNER: DifficultyPolicy(
            ratio=0.20, acceptance=0.30, functional_acceptance=0.0
        ),
        Difficulty.INTERMEDIATE: DifficultyPolicy(
            ratio=0.50, acceptance=0.60, functional_acceptance=0.30
        ),
        Difficulty.ADVANCED: DifficultyPolicy(
            ratio=0.95, acceptance=0.95, functional_acceptance=0.95
        ),
    }


class EngineConfig(BaseModel):
    """Master configuration for the blank selection engine."""

    policies: dict[Difficulty, DifficultyPolicy] = Field(
        default_factory=_default_policies
    )
    particles: list[str] = Field(default_factory=lambda: list(DEFAULT_PARTICLES))
    functional_words: list[str] = Field(
        default_factory=lambda: list(DEFAULT_FUNCTIONAL_WORDS)
    )
    punctuation: str = DEFAULT_PUNCTUATION

    def policy_for(self, difficulty: Difficulty) -> DifficultyPolicy:
        """Get the policy for a difficulty, falling back to the defaults."""
        difficulty = Difficulty(difficulty)
        if difficulty in self.policies:
            return self.policies[difficulty]
        return _default_policies()[difficulty]


DEFAULT_CONFIG = EngineConfig()
