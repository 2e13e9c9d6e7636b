# src/vibe_tasks/cli/main.py

"""
CLI entrypoint.

One invocation = one command: parse argv, initialize logging, load the task
file, run the command, print its output, exit.

Exit codes:
- 0   success (including "timer already running" style notices)
- 1   task id not found
- 2   usage error or fatal error (settings, unreadable/corrupted task file, ...)
- 130 interrupted while prompting
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from ..cli.bootstrap import create_initial_state
from ..cli.commands import registry
from ..config import ConfigError, get_settings
from ..core.ports import Notifier, Prompter
from ..logging_setup import setup_logging
from ..tasks.category_catalog import CategoryCatalogError
from ..tasks.task_store import StoreError

logger = logging.getLogger(__name__)

EXIT_FATAL = 2
EXIT_INTERRUPTED = 130


def _fatal(msg: str) -> int:
    print(f"Error: {msg}", file=sys.stderr)
    return EXIT_FATAL


def _init_logging(settings) -> None:
    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)

    log_dir = getattr(settings, "log_dir", None) if getattr(settings, "log_to_file", True) else None
    try:
        setup_logging(log_dir=log_dir, console_level=console_level)
    except OSError as e:
        # No usable log dir: keep going with console logging only.
        setup_logging(log_dir=None, console_level=console_level)
        logger.warning("File logging disabled (%s): %s", log_dir, e)


def main(
    argv: Sequence[str] | None = None,
    *,
    settings=None,
    prompter: Prompter | None = None,
    notifier: Notifier | None = None,
    configure_logging: bool = True,
) -> int:
    parser = registry.build_parser()
    args = parser.parse_args(argv)

    if settings is None:
        try:
            settings = get_settings()
        except ConfigError as e:
            return _fatal(str(e))

    if configure_logging:
        _init_logging(settings)

    logger.debug("Starting %s command=%s", getattr(settings, "app_name", "vibe_tasks"), args.command)

    try:
        state = create_initial_state(settings=settings, prompter=prompter, notifier=notifier)
        result = registry.handle(state, args)
    except (StoreError, CategoryCatalogError) as e:
        logger.error("%s failed: %s", args.command, e)
        return _fatal(str(e))
    except (KeyboardInterrupt, EOFError):
        logger.info("Interrupted during %s", args.command)
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED

    if result.text:
        print(result.text)
    return result.exit_code


if __name__ == "__main__":
    sys.exit(main())
