# src/vibe_tasks/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Paths default to the user's home directory; everything is overridable.
- Nothing is read at import time; get_settings() builds and caches lazily.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "VIBE"


class ConfigError(RuntimeError):
    """Settings cannot be resolved (e.g. no home directory to anchor default paths)."""


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _home_dir() -> Path:
    try:
        return Path.home()
    except RuntimeError as e:
        raise ConfigError("Could not find home directory") from e


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_to_file: bool
    emoji: bool
    color: bool

    # ---- Local data paths ----
    data_dir: Path
    tasks_path: Path
    categories_path: Path
    log_dir: Path

    # ---- Due-date reminders ----
    notify_window_hours: int
    notify_cooldown_hours: int
    notify_icon: str

    @staticmethod
    def from_env(*, dotenv: bool = True) -> "Settings":
        if dotenv:
            # .env next to where the command runs; real environment always wins.
            load_dotenv(find_dotenv(usecwd=True), override=False)

        app_name = _env(_k("APP_NAME"), "vibe_tasks").strip() or "vibe_tasks"
        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING"
        log_to_file = _env_bool(_k("LOG_TO_FILE"), True)
        emoji = _env_bool(_k("EMOJI"), True)
        color = _env_bool(_k("COLOR"), True)

        # Only touch the home directory when some default actually needs it.
        data_dir_raw = os.getenv(_k("DATA_DIR"))
        tasks_path_raw = os.getenv(_k("TASKS_PATH"))
        needs_home = not (data_dir_raw and data_dir_raw.strip()) or not (
            tasks_path_raw and tasks_path_raw.strip()
        )
        home = _home_dir() if needs_home else Path(".")

        data_dir = _env_path(_k("DATA_DIR"), home / ".local" / "share" / "vibe_tasks")
        tasks_path = _env_path(_k("TASKS_PATH"), home / ".vibe_tasks.json")
        categories_path = _env_path(_k("CATEGORIES_PATH"), data_dir / "categories.json")
        log_dir = _env_path(_k("LOG_DIR"), data_dir)

        notify_window_hours = max(0, _env_int(_k("NOTIFY_WINDOW_HOURS"), 24))
        notify_cooldown_hours = max(0, _env_int(_k("NOTIFY_COOLDOWN_HOURS"), 6))
        notify_icon = _env(_k("NOTIFY_ICON"), "calendar").strip() or "calendar"

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_to_file=log_to_file,
            emoji=emoji,
            color=color,
            data_dir=data_dir,
            tasks_path=tasks_path,
            categories_path=categories_path,
            log_dir=log_dir,
            notify_window_hours=notify_window_hours,
            notify_cooldown_hours=notify_cooldown_hours,
            notify_icon=notify_icon,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS
