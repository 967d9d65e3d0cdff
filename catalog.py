"""
Category catalog for ready-made practice passages.

Each category pairs a subject (middle/high school informatics, AI basics)
with a document type (achievement standards or content system). Passages
live in data/passages.json; the display metadata lives here.
"""

import json
from pathlib import Path

from pydantic import BaseModel

from models import Category, Difficulty

DATA_DIR = Path(__file__).parent / "data"
PASSAGES_PATH = DATA_DIR / "passages.json"

# Exercises created from a category always use this difficulty.
CATEGORY_DIFFICULTY = Difficulty.ADVANCED


class CategoryInfo(BaseModel):
    id: Category
    title: str
    description: str


CATEGORIES: list[CategoryInfo] = [
    CategoryInfo(id=Category.MIDDLE_SCHOOL_INFO, title="중학교정보", description="성취기준"),
    CategoryInfo(id=Category.HIGH_SCHOOL_INFO, title="고등학교정보", description="성취기준"),
    CategoryInfo(id=Category.AI_BASICS, title="인공지능기초", description="성취기준"),
    CategoryInfo(id=Category.MIDDLE_SCHOOL_CURRICULUM, title="중학교정보", description="내용체계"),
    CategoryInfo(id=Category.HIGH_SCHOOL_CURRICULUM, title="고등학교정보", description="내용체계"),
    CategoryInfo(id=Category.AI_BASICS_CURRICULUM, title="인공지능기초", description="내용체계"),
]


class Passage(BaseModel):
    title: str
    content: str


def list_categories() -> list[CategoryInfo]:
    """Get all categories in display order."""
    return list(CATEGORIES)


def get_category_info(category: Category) -> CategoryInfo:
    """Get display metadata for a category."""
    category = Category(category)
    for info in CATEGORIES:
        if info.id == category:
            return info
    raise KeyError(category)


def load_passages(path: Path = PASSAGES_PATH) -> dict[Category, Passage]:
    """Load all bundled passages from the JSON file."""
    with open(path, encoding="utf-8") as f:
        raw = json.load(f)
    return {Category(key): Passage.model_validate(value) for key, value in raw.items()}


def get_passage(category: Category, path: Path = PASSAGES_PATH) -> Passage:
    """Get the passage for a category.

    Raises:
        KeyError: If the catalog has no passage for the category.
    """
    passages = load_passages(path)
    return passages[Category(category)]
