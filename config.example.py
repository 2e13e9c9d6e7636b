# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file
in the directory where vibe-tasks runs). Real environment variables win over .env values.

This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "VIBE_APP_NAME": "App display name used in logs (default: vibe_tasks).",
    "VIBE_LOG_LEVEL": "Console (stderr) logging level (default: WARNING).",
    "VIBE_LOG_TO_FILE": "Write full DEBUG logs to <log_dir>/vibe_tasks.log (default: true).",
    "VIBE_EMOJI": "Decorate CLI output with emoji (default: true).",
    "VIBE_COLOR": "Color list and report output when stdout is a terminal; NO_COLOR disables (default: true).",
    # Paths
    "VIBE_DATA_DIR": "Local data directory (default: ~/.local/share/vibe_tasks).",
    "VIBE_TASKS_PATH": "Task collection JSON file (default: ~/.vibe_tasks.json).",
    "VIBE_CATEGORIES_PATH": "Category catalog JSON (default: <data_dir>/categories.json).",
    "VIBE_LOG_DIR": "Log directory (default: <data_dir>).",
    # Due-date reminders
    "VIBE_NOTIFY_WINDOW_HOURS": "Remind about tasks due within this many hours (default: 24).",
    "VIBE_NOTIFY_COOLDOWN_HOURS": "Minimum hours between reminders for one task (default: 6).",
    "VIBE_NOTIFY_ICON": "Icon name passed to notify-send (default: calendar).",
}

# Example category catalog (save as <data_dir>/categories.json). Key order is menu order.
CATEGORIES_EXAMPLE = {
    "Work": {"color": "blue", "emoji": "💼"},
    "Personal": {"color": "green", "emoji": "🏠"},
    "Study": {"color": "yellow", "emoji": "📚"},
    "Health": {"color": "red", "emoji": "💪"},
    "Shopping": {"color": "cyan", "emoji": "🛒"},
    "Errands": {"color": "magenta", "emoji": "🧺"},
}
