"""Blank selection under a difficulty policy."""

import logging
import math
import random

from cloze.config import DEFAULT_CONFIG, EngineConfig
from cloze.particles import clean_word
from cloze.tokenizer import tokenize
from models import BlankItem, Difficulty

logger = logging.getLogger(__name__)

BLANK_ID_PREFIX = "blank_"


def is_functional(word: str, config: EngineConfig = DEFAULT_CONFIG) -> bool:
    """Check if the word contains a functional verb or copula (하다, 이다, ...)."""
    return any(fw in word for fw in config.functional_words)


def target_blank_count(
    total_words: int,
    difficulty: Difficulty,
    config: EngineConfig = DEFAULT_CONFIG,
) -> int:
    """Upper bound on blanks: floor(total word count * difficulty ratio)."""
    return math.floor(total_words * config.policy_for(difficulty).ratio)


def make_blank_id(token_index: int) -> str:
    return f"{BLANK_ID_PREFIX}{token_index}"


def select_blanks(
    text: str,
    difficulty: Difficulty,
    rng: random.Random | None = None,
    config: EngineConfig = DEFAULT_CONFIG,
) -> list[BlankItem]:
    """Choose which words of the text become blanks.

    Walks the tokens in order and, while fewer than the target number of
    blanks have been chosen, accepts each eligible word with the policy's
    probability. The result may fall short of the target but never exceeds it.

    Args:
        text: The source text.
        difficulty: Difficulty level selecting the policy.
        rng: Random source. Pass a seeded ``random.Random`` for repeatable
            output; defaults to a fresh unseeded one.
        config: Engine configuration.

    Returns:
        Blanks in ascending position order. Ids are ``blank_<n>`` where ``n``
        is the token's index among all tokens of the text.
    """
    rng = rng or random.Random()
    policy = config.policy_for(difficulty)
    tokens = list(tokenize(text))
    target = target_blank_count(len(tokens), difficulty, config)

    blanks: list[BlankItem] = []
    for token in tokens:
        if len(blanks) >= target:
            break

        word = clean_word(token.text, config)
        if word is None:
            continue

        if is_functional(word, config):
            probability = policy.functional_acceptance
        else:
            probability = policy.acceptance

        if rng.random() < probability:
            blanks.append(
                BlankItem(
                    id=make_blank_id(token.index),
                    position=token.start_offset,
                    word=word,
                    length=len(word),
                )
            )

    logger.debug(
        "selected %d blanks (target %d, %d words, %s)",
        len(blanks),
        target,
        len(tokens),
        Difficulty(difficulty).value,
    )
    return blanks
