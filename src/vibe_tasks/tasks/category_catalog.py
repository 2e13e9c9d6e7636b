# src/vibe_tasks/tasks/category_catalog.py

"""
Selectable task categories.

The catalog is read from an optional JSON file mapping name -> {color, emoji}:

    {"Work": {"color": "blue", "emoji": "💼"}, "Errands": {"color": "magenta"}}

Key order is menu order. Without a file the built-in table is used.
Tasks keep their own copies, so editing the file never changes existing tasks.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from .task_models import Category

logger = logging.getLogger(__name__)

DEFAULT_CATEGORIES: tuple[Category, ...] = (
    Category(name="Work", color="blue", emoji="💼"),
    Category(name="Personal", color="green", emoji="🏠"),
    Category(name="Study", color="yellow", emoji="📚"),
    Category(name="Health", color="red", emoji="💪"),
    Category(name="Shopping", color="cyan", emoji="🛒"),
)


class CategoryCatalogError(ValueError):
    """The catalog file exists but cannot be used."""


def load_category_catalog(path: str | Path | None) -> list[Category]:
    if path is None:
        return list(DEFAULT_CATEGORIES)

    path = Path(path)
    if not path.exists():
        return list(DEFAULT_CATEGORIES)

    try:
        data = json.loads(path.read_text("utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise CategoryCatalogError(f"Cannot read category catalog {path}: {e}") from e

    if not isinstance(data, dict) or not data:
        raise CategoryCatalogError(
            f"Category catalog {path} must be a non-empty object mapping name -> {{color, emoji}}"
        )

    out: list[Category] = []
    for name, attrs in data.items():
        name = name.strip()
        if not name:
            raise CategoryCatalogError(f"Category catalog {path}: empty category name")
        if attrs is None:
            attrs = {}
        if not isinstance(attrs, dict):
            raise CategoryCatalogError(f"Category catalog {path}: entry {name!r} must be an object")
        out.append(
            Category(
                name=name,
                color=str(attrs.get("color") or "white"),
                emoji=str(attrs.get("emoji") or ""),
            )
        )

    logger.info("Loaded %d categories from %s", len(out), path)
    return out
