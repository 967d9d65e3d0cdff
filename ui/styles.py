from rich.style import Style
from rich.text import Text
from rich.theme import Theme

from cloze.hints import WordLevel

# Palette loosely follows the taegukgi: blue and red, with gold for blanks.
KOREAN_BLUE = "#0047A0"
KOREAN_RED = "#CD2E3A"
ACCENT_GOLD = "#E8B923"
SUCCESS_GREEN = "#2E9E5B"
ERROR_RED = KOREAN_RED
INFO_BLUE = "#4A90C8"
MUTED_GRAY = "#8A8F98"
TEXT_WHITE = "#F5F5F5"

DEFAULT_THEME = Theme(
    {
        "hint": Style(color=INFO_BLUE, italic=True),
        "muted": Style(color=MUTED_GRAY),
    }
)

DIFFICULTY_LABELS = {
    "beginner": "초급",
    "intermediate": "중급",
    "advanced": "고급",
}

MODE_LABELS = {
    "instant": "바로 채점",
    "batch": "한번에 채점",
}

WORD_LEVEL_LABELS: dict[WordLevel, str] = {
    "basic": "기본",
    "intermediate": "중간",
    "advanced": "심화",
}


def get_score_style(percentage: int) -> Style:
    """Colour a score: green from 80%, gold from 50%, red below."""
    if percentage >= 80:
        return Style(color=SUCCESS_GREEN, bold=True)
    if percentage >= 50:
        return Style(color=ACCENT_GOLD, bold=True)
    return Style(color=ERROR_RED, bold=True)


_DIFFICULTY_STYLES = {
    "beginner": Style(color=SUCCESS_GREEN, bold=True),
    "intermediate": Style(color=ACCENT_GOLD, bold=True),
    "advanced": Style(color=KOREAN_RED, bold=True),
}


def get_difficulty_style(difficulty: str) -> Style:
    return _DIFFICULTY_STYLES.get(difficulty.lower(), Style())


def _result_header(mark: str, label: str, color: str) -> Text:
    style = Style(color=color, bold=True)
    return Text.assemble((f"{mark} ", style), (label, style))


def create_success_header() -> Text:
    """Header for a correctly filled blank."""
    return _result_header("✓", "정답!", SUCCESS_GREEN)


def create_error_header() -> Text:
    """Header for a wrong or empty blank."""
    return _result_header("✗", "오답", ERROR_RED)
