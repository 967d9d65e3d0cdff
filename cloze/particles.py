"""Korean particle handling and the eligibility rule for blanks.

A token is eligible for blanking when, after trailing punctuation is removed,
it is at least two characters long, is not itself a standalone particle, and is
made only of Hangul (syllables or jamo) and ASCII letters. Words that merely
end with a particle (학교를, 학생의) stay eligible and keep the particle in
their gold answer.
"""

from cloze.config import DEFAULT_CONFIG, EngineConfig

HANGUL_RANGES = [
    (0xAC00, 0xD7A3),  # syllables
    (0x1100, 0x11FF),  # jamo
    (0x3130, 0x318F),  # compatibility jamo
    (0xA960, 0xA97F),  # jamo extended-A
    (0xD7B0, 0xD7FF),  # jamo extended-B
]

MIN_WORD_LENGTH = 2


def _is_hangul(char: str) -> bool:
    code = ord(char)
    return any(low <= code <= high for low, high in HANGUL_RANGES)


def _is_ascii_letter(char: str) -> bool:
    return ("a" <= char <= "z") or ("A" <= char <= "Z")


def is_korean_or_latin(word: str) -> bool:
    """Check that every character is Hangul or an ASCII letter."""
    return all(_is_hangul(c) or _is_ascii_letter(c) for c in word)


def strip_punctuation(word: str, config: EngineConfig = DEFAULT_CONFIG) -> str:
    """Remove trailing punctuation marks from a raw token."""
    return word.rstrip(config.punctuation)


def is_particle(word: str, config: EngineConfig = DEFAULT_CONFIG) -> bool:
    """Check whether the word is exactly one of the configured particles."""
    return word in config.particles


def find_particle(word: str, config: EngineConfig = DEFAULT_CONFIG) -> str | None:
    """Find the particle the word ends with, preferring the longest match.

    친구로부터 ends with both 부터 and 로부터; the result is 로부터.
    """
    for particle in sorted(config.particles, key=len, reverse=True):
        if word.endswith(particle):
            return particle
    return None


def ends_with_particle(word: str, config: EngineConfig = DEFAULT_CONFIG) -> bool:
    return find_particle(word, config) is not None


def extract_root(word: str, config: EngineConfig = DEFAULT_CONFIG) -> str:
    """Remove the particle suffix from a word.

    A word that is nothing but a particle is returned unchanged.
    """
    particle = find_particle(word, config)
    if particle is None or particle == word:
        return word
    return word[: -len(particle)]


def clean_word(word: str, config: EngineConfig = DEFAULT_CONFIG) -> str | None:
    """Return the gradable form of a raw token, or None if it cannot be a blank."""
    cleaned = strip_punctuation(word, config)
    if len(cleaned) < MIN_WORD_LENGTH:
        return None
    if is_particle(cleaned, config):
        return None
    if not is_korean_or_latin(cleaned):
        return None
    return cleaned
