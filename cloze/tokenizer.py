"""Line-preserving word tokenizer with exact source offsets."""

import re
from typing import Iterator

from models import Token

_WORD_RE = re.compile(r"\S+")


def tokenize(text: str) -> Iterator[Token]:
    """Yield one token per maximal run of non-whitespace characters.

    Text is processed line by line (split on ``\\n``). Each token's
    ``start_offset`` is its absolute position in ``text``, with every newline
    counted as one character, so ``text[t.start_offset:t.end_offset] == t.text``
    holds for every token regardless of repeated spaces, tabs or blank lines.

    Calling ``tokenize`` again on the same text restarts the sequence.
    """
    line_start = 0
    index = 0
    for line_index, line in enumerate(text.split("\n")):
        for match in _WORD_RE.finditer(line):
            yield Token(
                text=match.group(),
                start_offset=line_start + match.start(),
                length=len(match.group()),
                line_index=line_index,
                index=index,
            )
            index += 1
        line_start += len(line) + 1  # the newline consumed by split()


def count_words(text: str) -> int:
    """Count all tokens in the text, eligible for blanking or not."""
    return sum(1 for _ in tokenize(text))
