from rich.text import Text
from rich.panel import Panel
from rich.table import Table
from rich.style import Style
from rich.align import Align
from rich.columns import Columns
from rich import box
from rich.console import Group
from typing import Optional, List

from catalog import CategoryInfo
from cloze.hints import classify_word
from cloze.render import EMPTY_ANSWER
from models import ExerciseResult, GradeReport
from ui.styles import (
    KOREAN_BLUE,
    ACCENT_GOLD,
    SUCCESS_GREEN,
    ERROR_RED,
    MUTED_GRAY,
    TEXT_WHITE,
    DIFFICULTY_LABELS,
    MODE_LABELS,
    WORD_LEVEL_LABELS,
    create_error_header,
    create_success_header,
    get_difficulty_style,
    get_score_style,
)

BLANK_PATTERN = r"\[\d+\]_+"


class ExercisePanel:
    """A styled panel showing the passage with its blanks masked out."""

    def __init__(
        self,
        masked_text: str,
        blank_count: int,
        difficulty: str,
        mode: str,
        title: Optional[str] = None,
    ):
        self.masked_text = masked_text
        self.blank_count = blank_count
        self.difficulty = difficulty
        self.mode = mode
        self.title = title

    def render(self) -> Panel:
        content = Text()

        content.append(
            DIFFICULTY_LABELS.get(self.difficulty, self.difficulty),
            get_difficulty_style(self.difficulty),
        )
        content.append(
            f"  ·  {MODE_LABELS.get(self.mode, self.mode)}"
            f"  ·  빈칸 {self.blank_count}개\n\n",
            Style(color=MUTED_GRAY),
        )

        passage = Text(self.masked_text, Style(color=TEXT_WHITE))
        passage.highlight_regex(BLANK_PATTERN, Style(color=ACCENT_GOLD, bold=True))
        content.append(passage)

        return Panel(
            Align.left(content),
            title=self.title or "빈칸 채우기",
            subtitle="Type '?' for a hint, 'q' to quit",
            border_style=KOREAN_BLUE,
            box=box.HEAVY,
            padding=(1, 2),
        )

    def __rich__(self) -> Panel:
        return self.render()


class FeedbackPanel:
    """A styled panel for the result of a single blank."""

    def __init__(self, result: ExerciseResult, number: int):
        self.result = result
        self.number = number

    def render(self) -> Panel:
        content = Text()

        if self.result.is_correct:
            content.append(create_success_header())
            content.append("\n")
        else:
            content.append(create_error_header())
            content.append("\n")
            content.append(
                f"입력: {self.result.user_answer or EMPTY_ANSWER}\n",
                Style(color=MUTED_GRAY),
            )
            content.append("정답: ", Style(color=MUTED_GRAY))
            content.append(
                self.result.correct_answer, Style(color=SUCCESS_GREEN, bold=True)
            )
            if self.result.feedback:
                content.append("\n")
                content.append(self.result.feedback, Style(color=ACCENT_GOLD))

        return Panel(
            Align.left(content),
            title=f"빈칸 {self.number}",
            border_style=SUCCESS_GREEN if self.result.is_correct else ERROR_RED,
            box=box.HEAVY,
            padding=(0, 2),
        )

    def __rich__(self) -> Panel:
        return self.render()


class CategoryMenu:
    """Numbered list of catalog categories plus a custom-text entry."""

    def __init__(self, categories: List[CategoryInfo]):
        self.categories = categories

    def render(self) -> Panel:
        content = Text()
        for i, info in enumerate(self.categories, 1):
            content.append(f"{i}. ", Style(color=ACCENT_GOLD, bold=True))
            content.append(info.title, Style(color=TEXT_WHITE, bold=True))
            content.append(f" ({info.description})\n", Style(color=MUTED_GRAY))
        content.append("0. ", Style(color=ACCENT_GOLD, bold=True))
        content.append("직접 입력", Style(color=TEXT_WHITE, bold=True))

        return Panel(
            Align.left(content),
            title="지문 선택",
            subtitle=f"Choose 0-{len(self.categories)} (or 'q' to quit)",
            border_style=ACCENT_GOLD,
            box=box.HEAVY,
            padding=(1, 2),
        )

    def __rich__(self) -> Panel:
        return self.render()


class ResultsPanel:
    """Score summary and per-blank table for a graded exercise."""

    def __init__(self, report: GradeReport, filled_text: Optional[str] = None):
        self.report = report
        self.filled_text = filled_text

    def render(self) -> Panel:
        score = self.report.score

        stats = Table(
            show_header=False,
            border_style=MUTED_GRAY,
            box=box.SIMPLE,
        )
        stats.add_column("Label", style=Style(color=MUTED_GRAY))
        stats.add_column("Value", justify="right")
        stats.add_row("정답", Text(str(score.correct), style=Style(color=SUCCESS_GREEN)))
        stats.add_row("오답", Text(str(score.incorrect), style=Style(color=ERROR_RED)))
        stats.add_row(
            "정답률",
            Text(f"{score.percentage}%", style=get_score_style(score.percentage)),
        )

        table = Table(
            show_header=True,
            header_style=Style(color=KOREAN_BLUE, bold=True),
            border_style=MUTED_GRAY,
            row_styles=[Style(), Style(dim=True)],
            box=box.HEAVY,
        )
        table.add_column("빈칸", justify="right")
        table.add_column("입력")
        table.add_column("정답", style=Style(color=SUCCESS_GREEN))
        table.add_column("수준", style=Style(color=MUTED_GRAY))
        table.add_column("피드백", style=Style(color=ACCENT_GOLD))

        for i, result in enumerate(self.report.results, 1):
            mark = Text(
                "✓" if result.is_correct else "✗",
                style=SUCCESS_GREEN if result.is_correct else ERROR_RED,
            )
            table.add_row(
                Text.assemble(mark, f" {i}"),
                result.user_answer or EMPTY_ANSWER,
                result.correct_answer,
                WORD_LEVEL_LABELS[classify_word(result.correct_answer)],
                result.feedback or "",
            )

        parts = [Columns([Align.center(stats)], align="center"), table]
        if self.filled_text:
            parts.append(Text(f"\n{self.filled_text}", Style(color=TEXT_WHITE)))

        return Panel(
            Group(*parts),
            title="채점 결과",
            border_style=ACCENT_GOLD,
            box=box.HEAVY,
            padding=(1, 2),
        )

    def __rich__(self) -> Panel:
        return self.render()


class WelcomeScreen:
    """Welcome screen with banner and catalog info."""

    def __init__(self, category_count: int, difficulty: str):
        self.category_count = category_count
        self.difficulty = difficulty

    def render(self) -> Panel:
        banner = Text()
        banner.append(
            "╔═══════════════════════════════════════════╗\n", Style(color=KOREAN_BLUE)
        )
        banner.append("║               ", Style(color=KOREAN_BLUE))
        banner.append("빈 칸 채 우 기", Style(color=ACCENT_GOLD, bold=True))
        banner.append("               ║\n", Style(color=KOREAN_BLUE))
        banner.append(
            "║            Korean Cloze Tutor             ║\n", Style(color=KOREAN_BLUE)
        )
        banner.append(
            "╚═══════════════════════════════════════════╝\n", Style(color=KOREAN_BLUE)
        )
        banner.append("\n")
        banner.append(
            "Fill in the blanks of a Korean passage.\n\n", Style(color=TEXT_WHITE)
        )
        banner.append("Type 'q' at any prompt to quit.\n", Style(color=MUTED_GRAY))

        stats = Table(
            show_header=False,
            border_style=MUTED_GRAY,
            box=box.ROUNDED,
        )
        stats.add_column("Label", justify="center")
        stats.add_column("Value", justify="center")
        stats.add_row(
            Text("Passages", style=Style(color=MUTED_GRAY)),
            Text(str(self.category_count), style=Style(color=ACCENT_GOLD, bold=True)),
        )
        stats.add_row(
            Text("Difficulty", style=Style(color=MUTED_GRAY)),
            Text(
                DIFFICULTY_LABELS.get(self.difficulty, self.difficulty),
                style=get_difficulty_style(self.difficulty),
            ),
        )

        return Panel(
            Columns(
                [Align.center(banner), Align.center(stats)],
                align="center",
                padding=(3, 3),
            ),
            border_style=KOREAN_BLUE,
            box=box.HEAVY,
            padding=(2, 3),
        )

    def __rich__(self) -> Panel:
        return self.render()