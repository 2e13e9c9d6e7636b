# src/vibe_tasks/connectors/desktop_notifier.py

from __future__ import annotations

import logging
import shutil
import subprocess
import sys

from ..core.ports import NotificationError

logger = logging.getLogger(__name__)


def _osascript_quote(text: str) -> str:
    return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'


class DesktopNotifier:
    """
    Notifier that shells out to the host's native notification command:
    - macOS: osascript "display notification"
    - everything else: notify-send (libnotify)

    Fire-and-forget: success only means the command exited 0.
    """

    def __init__(self, *, icon: str = "calendar", timeout_seconds: float = 10.0) -> None:
        self._icon = icon
        self._timeout = timeout_seconds

    def _command(self, summary: str, body: str) -> list[str]:
        if sys.platform == "darwin":
            exe = shutil.which("osascript")
            if exe is None:
                raise NotificationError("osascript not found")
            script = f"display notification {_osascript_quote(body)} with title {_osascript_quote(summary)}"
            return [exe, "-e", script]

        exe = shutil.which("notify-send")
        if exe is None:
            raise NotificationError("notify-send not found (install libnotify)")
        return [exe, "--icon", self._icon, summary, body]

    def notify(self, summary: str, body: str) -> None:
        cmd = self._command(summary, body)
        try:
            proc = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self._timeout,
                check=False,
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            raise NotificationError(str(e)) from e

        if proc.returncode != 0:
            err = (proc.stderr or "").strip() or f"exit code {proc.returncode}"
            raise NotificationError(err)

        logger.debug("Notification shown via %s: %s", cmd[0], summary)
