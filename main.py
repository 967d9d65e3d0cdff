import argparse
import json
import logging
import random
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from catalog import CATEGORY_DIFFICULTY, get_category_info, get_passage, list_categories
from cloze import generate_hint, mask_text, splice_answers
from errors import ClozeError
from models import Difficulty, Exercise, GradingMode
from service import ExerciseService
from settings import Settings, load_settings
from storage import STORAGE_BACKENDS, get_exercise_repo
from ui import CUSTOM_TEXT, QUIT, ClozeUI


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser with subcommands."""
    parser = argparse.ArgumentParser(description="Korean Cloze Tutor")
    parser.add_argument(
        "--difficulty",
        "-d",
        choices=[d.value for d in Difficulty],
        default=None,
        help="Difficulty for custom text (default: from CLOZE_DIFFICULTY or advanced)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible blank selection",
    )
    parser.add_argument(
        "--storage",
        choices=STORAGE_BACKENDS,
        default=None,
        help="Exercise store backend (default: from CLOZE_STORAGE or memory)",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    practice_parser = subparsers.add_parser("practice", help="Interactive practice (default)")
    practice_parser.add_argument(
        "--mode",
        "-m",
        choices=[m.value for m in GradingMode],
        default=None,
        help="Grading mode; asked interactively when omitted",
    )

    gen_parser = subparsers.add_parser("generate", help="Print an exercise as JSON")
    gen_parser.add_argument(
        "input",
        nargs="?",
        type=str,
        default="-",
        help="Text file to read (default: stdin)",
    )
    gen_parser.add_argument(
        "--masked",
        action="store_true",
        help="Print the masked passage instead of JSON",
    )

    subparsers.add_parser("categories", help="List the passage catalog")

    return parser


def configure_logging(level: str, console: Console | None = None) -> None:
    """Route log records through rich, at the given level."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console or Console(stderr=True), show_path=False)],
        force=True,
    )


def create_rng(seed: int | None) -> random.Random:
    """Random source for blank selection."""
    return random.Random(seed)


def create_service(settings: Settings) -> ExerciseService:
    repo = get_exercise_repo(settings.storage, settings.db_path)
    return ExerciseService(repo, rng=create_rng(settings.seed))


def apply_overrides(settings: Settings, args) -> Settings:
    """Let command-line flags take precedence over environment settings."""
    return Settings(
        storage=args.storage or settings.storage,
        db_path=settings.db_path,
        difficulty=Difficulty(args.difficulty) if args.difficulty else settings.difficulty,
        log_level=settings.log_level,
        seed=args.seed if args.seed is not None else settings.seed,
    )


def run_exercise(
    ui: ClozeUI,
    service: ExerciseService,
    exercise: Exercise,
    mode: GradingMode,
    title: str | None = None,
) -> str:
    """Take the user through one attempt at an exercise.

    Returns:
        "retry", "new" or "quit".
    """
    ui.show_exercise(
        mask_text(exercise.original_text, exercise.blanks),
        len(exercise.blanks),
        exercise.difficulty.value,
        mode.value,
        title,
    )

    answers: dict[str, str] = {}
    for number, blank in enumerate(exercise.blanks, 1):
        answer = ui.ask_answer(number, lambda word=blank.word: generate_hint(word))
        if answer is None:
            return "quit"
        answers[blank.id] = answer

        if mode == GradingMode.INSTANT:
            result = service.submit_answer(
                exercise.id, {"blankId": blank.id, "answer": answer}
            )
            ui.show_feedback(result, number)

    report = service.grade_answers(exercise.id, {"answers": answers})
    ui.show_results(
        report, splice_answers(exercise.original_text, exercise.blanks, answers)
    )
    return ui.ask_next_action()


def run_interactive(
    settings: Settings,
    mode: GradingMode | None = None,
    console: Console | None = None,
) -> None:
    """Run the interactive practice session."""
    console = console or Console()
    ui = ClozeUI(console)
    service = create_service(settings)
    categories = list_categories()

    ui.clear_screen()
    ui.show_welcome(len(categories), settings.difficulty.value)

    while True:
        choice = ui.choose_category(categories)
        if choice == QUIT:
            break

        if choice == CUSTOM_TEXT:
            text = ui.ask_custom_text()
            payload = {"originalText": text, "difficulty": settings.difficulty}
            title = None
        else:
            info = get_category_info(choice)
            payload = {
                "originalText": get_passage(choice).content,
                "difficulty": CATEGORY_DIFFICULTY,
                "category": choice,
            }
            title = f"{info.title} · {info.description}"

        chosen_mode = mode or ui.choose_mode()
        if chosen_mode == QUIT:
            break

        try:
            exercise = service.create_exercise(payload)
        except ClozeError as exc:
            ui.show_error(str(exc))
            continue

        if not exercise.blanks:
            ui.show_info("빈칸을 만들 수 있는 단어가 없습니다. 다른 지문을 선택하세요.")
            continue

        action = run_exercise(ui, service, exercise, chosen_mode, title)
        while action == "retry":
            exercise = service.reset_exercise(exercise.id)
            ui.clear_screen()
            action = run_exercise(ui, service, exercise, chosen_mode, title)

        if action == "quit":
            break
        ui.clear_screen()

    ui.show_quit_message()


def run_generate(settings: Settings, args, out=None) -> int:
    """Create one exercise from a file or stdin and print it."""
    out = out or sys.stdout
    if args.input == "-":
        text = sys.stdin.read()
    else:
        text = Path(args.input).read_text(encoding="utf-8")

    service = create_service(settings)
    try:
        exercise = service.create_exercise(
            {"originalText": text, "difficulty": settings.difficulty}
        )
    except ClozeError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        for message in getattr(exc, "errors", []):
            print(f"  {message}", file=sys.stderr)
        return 1

    if args.masked:
        print(mask_text(exercise.original_text, exercise.blanks), file=out)
    else:
        print(json.dumps(exercise.to_wire(), ensure_ascii=False, indent=2), file=out)
    return 0


def run_categories(console: Console | None = None) -> None:
    """Print the passage catalog."""
    console = console or Console()
    table = Table(title="Passages")
    table.add_column("#", justify="right")
    table.add_column("ID")
    table.add_column("Title")
    table.add_column("Type")
    for i, info in enumerate(list_categories(), 1):
        table.add_row(str(i), info.id.value, info.title, info.description)
    console.print(table)


def main():
    """Main entry point with CLI routing."""
    parser = create_parser()
    args = parser.parse_args()

    try:
        settings = apply_overrides(load_settings(), args)
    except RuntimeError as exc:
        parser.error(str(exc))
    configure_logging(settings.log_level)

    if args.command == "generate":
        sys.exit(run_generate(settings, args))
    elif args.command == "categories":
        run_categories()
    else:
        # Default to interactive mode
        mode = GradingMode(args.mode) if getattr(args, "mode", None) else None
        run_interactive(settings, mode)


if __name__ == "__main__":
    main()
