"""Rebuild exercise text around its blanks.

Both functions rely on ``text[b.position:b.position + b.length] == b.word``
for every blank; everything outside the blank spans is copied unchanged, so
line breaks and spacing of the original survive.
"""

from typing import Mapping

from models import BlankItem

EMPTY_ANSWER = "(미입력)"


def _replace_spans(text: str, blanks: list[BlankItem], replacement) -> str:
    parts = []
    cursor = 0
    for number, blank in enumerate(sorted(blanks, key=lambda b: b.position), 1):
        parts.append(text[cursor : blank.position])
        parts.append(replacement(number, blank))
        cursor = blank.position + blank.length
    parts.append(text[cursor:])
    return "".join(parts)


def mask_text(text: str, blanks: list[BlankItem], placeholder: str = "_") -> str:
    """Replace each blank with a numbered placeholder sized to the word.

    >>> mask_text("나는 학교에 간다", [BlankItem(id="blank_2", position=7, word="간다", length=2)])
    '나는 학교에 [1]__'
    """
    return _replace_spans(
        text, blanks, lambda number, blank: f"[{number}]{placeholder * blank.length}"
    )


def splice_answers(
    text: str,
    blanks: list[BlankItem],
    answers: Mapping[str, str],
    empty: str = EMPTY_ANSWER,
) -> str:
    """Put the submitted answers back into the text at each blank."""

    def answer_for(number: int, blank: BlankItem) -> str:
        answer = (answers.get(blank.id) or "").strip()
        return answer or empty

    return _replace_spans(text, blanks, answer_for)
