from rich.console import Console
from rich.text import Text
from rich.panel import Panel
from ui.components import (
    CategoryMenu,
    ExercisePanel,
    FeedbackPanel,
    ResultsPanel,
    WelcomeScreen,
)
from ui.styles import (
    ERROR_RED,
    INFO_BLUE,
    MUTED_GRAY,
    ACCENT_GOLD,
    DEFAULT_THEME,
)
from typing import Callable, Optional, List, Literal

from catalog import CategoryInfo
from models import Category, ExerciseResult, GradeReport, GradingMode

QUIT = "quit"
CUSTOM_TEXT = "custom"
HINT_REQUEST = "?"


class ClozeUI:
    """Main UI orchestrator for the Korean cloze tutor."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()
        self.console.push_theme(DEFAULT_THEME)

    def show_welcome(self, category_count: int, difficulty: str) -> None:
        """Display the welcome screen and wait for user to press Enter."""
        self.console.print(WelcomeScreen(category_count, difficulty))
        self.console.print()
        self.console.input(Text("Press Enter to start...", style=f"bold {MUTED_GRAY}"))

    def choose_category(self, categories: List[CategoryInfo]) -> Category | str:
        """Show the category menu.

        Returns:
            The chosen Category, CUSTOM_TEXT for the custom-text entry, or
            QUIT.
        """
        self.console.print(CategoryMenu(categories))
        self.console.print()

        while True:
            user_input = self._prompt("Passage: ")
            if user_input.lower() == "q":
                return QUIT
            if user_input == "0":
                return CUSTOM_TEXT
            if user_input.isdigit() and 1 <= int(user_input) <= len(categories):
                return categories[int(user_input) - 1].id

            self.console.print(
                Text(
                    f"Please enter a number 0-{len(categories)} (or 'q' to quit)\n",
                    style=ERROR_RED,
                )
            )

    def ask_custom_text(self) -> str:
        """Read a multi-line passage; an empty line ends it."""
        self.console.print(
            Text("한국어 지문을 입력하세요. 빈 줄을 입력하면 끝납니다.", style=INFO_BLUE)
        )
        lines = []
        while True:
            line = self.console.input("")
            if not line.strip():
                if lines:
                    break
                continue
            lines.append(line)
        return "\n".join(lines)

    def choose_mode(self) -> GradingMode | str:
        """Ask for instant (per blank) or batch grading."""
        self.console.print(
            Text("1. 바로 채점   2. 한번에 채점", style=f"bold {ACCENT_GOLD}")
        )
        while True:
            user_input = self._prompt("Mode: ")
            if user_input.lower() == "q":
                return QUIT
            if user_input == "1":
                return GradingMode.INSTANT
            if user_input == "2":
                return GradingMode.BATCH
            self.console.print(Text("Please enter 1 or 2\n", style=ERROR_RED))

    def show_exercise(
        self,
        masked_text: str,
        blank_count: int,
        difficulty: str,
        mode: str,
        title: Optional[str] = None,
    ) -> None:
        """Display the masked passage."""
        self.console.print(
            ExercisePanel(masked_text, blank_count, difficulty, mode, title)
        )
        self.console.print()

    def ask_answer(self, number: int, hint: Callable[[], str]) -> Optional[str]:
        """Ask for the answer to one blank.

        Typing '?' prints the hint and asks again.

        Returns:
            The raw answer, or None if the user quits.
        """
        while True:
            user_input = self._prompt(f"[{number}] ")
            if user_input.lower() == "q":
                return None
            if user_input == HINT_REQUEST:
                self.console.print(Text(f"힌트: {hint()}", style="hint"))
                continue
            return user_input

    def show_feedback(self, result: ExerciseResult, number: int) -> None:
        """Display the result of a single blank."""
        self.console.print(FeedbackPanel(result, number))

    def show_results(self, report: GradeReport, filled_text: Optional[str] = None) -> None:
        """Display the score and per-blank results."""
        self.console.print()
        self.console.print(ResultsPanel(report, filled_text))
        self.console.print()

    def ask_next_action(self) -> Literal["retry", "new", "quit"]:
        """Ask whether to retry the same blanks, start a new exercise, or quit."""
        while True:
            user_input = self._prompt("r: 다시 풀기, n: 새 문제, q: 종료 > ").lower()
            if user_input == "r":
                return "retry"
            if user_input == "n":
                return "new"
            if user_input == "q":
                return "quit"
            self.console.print(Text("Please enter r, n, or q\n", style=ERROR_RED))

    def show_error(self, message: str) -> None:
        """Display an error message."""
        self.console.print(
            Panel(
                Text(f"Error: {message}", style=ERROR_RED),
                title="Error",
                border_style=ERROR_RED,
            )
        )

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        self.console.print(Text(message, style=INFO_BLUE))

    def show_quit_message(self) -> None:
        """Display the quit message."""
        self.console.print()
        self.console.print(Text("👋 안녕히 가세요!", style="muted"))

    def clear_screen(self) -> None:
        """Clear the terminal screen."""
        self.console.clear()

    def _prompt(self, label: str) -> str:
        return self.console.input(Text(label, style=f"bold {MUTED_GRAY}")).strip()
