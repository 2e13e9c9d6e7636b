# tests/test_commands.py

from __future__ import annotations

import json
from datetime import datetime, timedelta
from types import SimpleNamespace

import pytest

from vibe_tasks.cli.commands import CommandRegistry, CommandResult, registry
from vibe_tasks.cli.main import main

from .fakes import FakeNotifier, FakePrompter


def _run(settings: SimpleNamespace, argv: list[str], answers=(), notifier=None) -> int:
    return main(
        argv,
        settings=settings,
        prompter=FakePrompter(answers),
        notifier=notifier or FakeNotifier(),
        configure_logging=False,
    )


def test_registry_exposes_every_command() -> None:
    assert registry.names() == [
        "add",
        "list",
        "complete",
        "status",
        "delete",
        "add-categories",
        "start-time",
        "stop-time",
        "time-report",
        "check-notifications",
    ]


def test_registry_parses_ids_and_dispatches(state) -> None:
    reg = CommandRegistry()
    seen: list[int] = []

    def handler(state, args):
        seen.append(args.id)
        return CommandResult("ok")

    reg.register("poke", handler, "poke a task", takes_id=True)
    args = reg.build_parser().parse_args(["poke", "7"])

    assert reg.handle(state, args) == CommandResult("ok")
    assert seen == [7]


@pytest.mark.parametrize("argv", [[], ["nope"], ["complete"], ["complete", "abc"], ["delete", "0"]])
def test_usage_errors_exit_2(settings: SimpleNamespace, argv: list[str]) -> None:
    with pytest.raises(SystemExit) as exc:
        _run(settings, argv)
    assert exc.value.code == 2


def test_add_list_and_time_tracking_flow(settings: SimpleNamespace, capsys) -> None:
    tomorrow = (datetime.now() + timedelta(days=1)).strftime("%Y-%m-%d")

    assert _run(settings, ["add"], ["Write report", "", 2, f"{tomorrow} 09:00", []]) == 0
    assert "Task 1 created." in capsys.readouterr().out

    assert _run(settings, ["list"]) == 0
    out = capsys.readouterr().out
    assert "Task #1: Write report" in out
    assert "Status: TODO" in out
    assert "Priority: HIGH" in out
    assert f"Due: {tomorrow} 09:00" in out

    assert _run(settings, ["start-time", "1"]) == 0
    assert "Time tracking started!" in capsys.readouterr().out
    assert _run(settings, ["start-time", "1"]) == 0
    assert "already running" in capsys.readouterr().out
    assert _run(settings, ["stop-time", "1"]) == 0
    assert "Time tracking stopped!" in capsys.readouterr().out
    assert _run(settings, ["stop-time", "1"]) == 0
    assert "No active time tracking" in capsys.readouterr().out

    assert _run(settings, ["time-report", "1"]) == 0
    out = capsys.readouterr().out
    assert out.count("Session ") == 1
    assert "Total time spent: 0.00 hours" in out


def test_not_found_exits_1_and_leaves_file(settings: SimpleNamespace, capsys) -> None:
    assert _run(settings, ["add"], ["a", "", 0, "", []]) == 0
    before = settings.tasks_path.read_bytes()
    capsys.readouterr()

    for cmd in ("complete", "status", "delete", "add-categories", "start-time", "stop-time", "time-report"):
        assert _run(settings, [cmd, "42"]) == 1
        assert capsys.readouterr().out.strip() == "Task not found!"

    assert settings.tasks_path.read_bytes() == before


def test_complete_status_delete(settings: SimpleNamespace, capsys) -> None:
    _run(settings, ["add"], ["a", "", 0, "", []])
    _run(settings, ["add"], ["b", "", 0, "", [1, 3]])

    assert _run(settings, ["complete", "1"]) == 0
    assert _run(settings, ["status", "2"], [1]) == 0
    assert _run(settings, ["add-categories", "2"], [[0]]) == 0
    assert _run(settings, ["delete", "1"]) == 0

    data = json.loads(settings.tasks_path.read_text("utf-8"))
    assert data["next_id"] == 3
    assert [t["id"] for t in data["tasks"]] == [2]
    assert data["tasks"][0]["status"] == "InProgress"
    assert [c["name"] for c in data["tasks"][0]["categories"]] == ["Work"]


def test_check_notifications_command(settings: SimpleNamespace, capsys) -> None:
    soon = (datetime.now() + timedelta(hours=3, minutes=30)).strftime("%Y-%m-%d %H:%M")
    _run(settings, ["add"], ["Soon", "", 1, soon, []])
    capsys.readouterr()

    notifier = FakeNotifier()
    assert _run(settings, ["check-notifications"], notifier=notifier) == 0
    assert "Sent 1 notification(s)." in capsys.readouterr().out
    assert len(notifier.sent) == 1
    assert "'Soon' is due in" in notifier.sent[0].body


def test_corrupted_store_is_fatal(settings: SimpleNamespace, capsys) -> None:
    settings.tasks_path.write_text("{oops", "utf-8")

    assert _run(settings, ["list"]) == 2
    err = capsys.readouterr().err
    assert err.startswith("Error: ")
    assert "not valid JSON" in err
    assert settings.tasks_path.read_text("utf-8") == "{oops"


def test_bad_category_catalog_is_fatal(settings: SimpleNamespace, capsys) -> None:
    settings.categories_path.write_text("[1, 2]", "utf-8")
    assert _run(settings, ["list"]) == 2
    assert "Category catalog" in capsys.readouterr().err


def test_interrupted_prompt_exits_130(settings: SimpleNamespace, capsys) -> None:
    # Script ends after the title: the next prompt raises EOFError.
    assert _run(settings, ["add"], ["half typed"]) == 130
    assert "Interrupted." in capsys.readouterr().err
