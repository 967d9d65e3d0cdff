"""Fill-in-the-blank engine for Korean text.

Pipeline:
- tokenizer: text -> positioned tokens (exact source offsets)
- particles: token -> gradable word, or None if it cannot be a blank
- selector: eligible words + difficulty -> ordered blanks
- grader: blanks + answers -> per-blank results and a score

Supporting modules:
- config: EngineConfig / DifficultyPolicy
- hints: learner hints for a gold word
- render: masked text and answer splicing

The engine keeps no state between calls; exercises are owned by the storage
layer.
"""

from cloze.config import DEFAULT_CONFIG, DifficultyPolicy, EngineConfig
from cloze.grader import (
    FEEDBACK_RULES,
    FeedbackRule,
    compute_score,
    feedback_for,
    find_blank,
    grade,
    grade_blank,
)
from cloze.hints import classify_word, generate_hint
from cloze.particles import (
    clean_word,
    ends_with_particle,
    extract_root,
    find_particle,
    is_korean_or_latin,
    is_particle,
    strip_punctuation,
)
from cloze.render import mask_text, splice_answers
from cloze.selector import is_functional, select_blanks, target_blank_count
from cloze.tokenizer import count_words, tokenize

__all__ = [
    # Configuration
    "DEFAULT_CONFIG",
    "DifficultyPolicy",
    "EngineConfig",
    # Tokenizer
    "tokenize",
    "count_words",
    # Particle filter
    "clean_word",
    "ends_with_particle",
    "extract_root",
    "find_particle",
    "is_korean_or_latin",
    "is_particle",
    "strip_punctuation",
    # Blank selector
    "is_functional",
    "select_blanks",
    "target_blank_count",
    # Grader
    "FEEDBACK_RULES",
    "FeedbackRule",
    "compute_score",
    "feedback_for",
    "find_blank",
    "grade",
    "grade_blank",
    # Hints and rendering
    "classify_word",
    "generate_hint",
    "mask_text",
    "splice_answers",
]
