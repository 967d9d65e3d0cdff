"""Terminal UI for fill-in-the-blank practice, built on rich."""

from ui.app import CUSTOM_TEXT, HINT_REQUEST, QUIT, ClozeUI
from ui.components import (
    BLANK_PATTERN,
    CategoryMenu,
    ExercisePanel,
    FeedbackPanel,
    ResultsPanel,
    WelcomeScreen,
)
from ui.styles import DEFAULT_THEME, DIFFICULTY_LABELS, MODE_LABELS

__all__ = [
    # Session driver
    "ClozeUI",
    "QUIT",
    "CUSTOM_TEXT",
    "HINT_REQUEST",
    # Renderables
    "BLANK_PATTERN",
    "CategoryMenu",
    "ExercisePanel",
    "FeedbackPanel",
    "ResultsPanel",
    "WelcomeScreen",
    # Styling
    "DEFAULT_THEME",
    "DIFFICULTY_LABELS",
    "MODE_LABELS",
]
