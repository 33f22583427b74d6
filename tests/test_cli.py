import io
from datetime import date

import pytest

from todocsv.cli import build_parser, main
from todocsv.storage import Task, TaskStore
from todocsv.tasks import COMPLETED, NOT_COMPLETED, format_date


@pytest.fixture
def task_file(tmp_path):
    path = tmp_path / "tasks.csv"
    TaskStore(path).save(
        [
            Task("1", "alpha", NOT_COMPLETED, "2025 July 4"),
            Task("2", "beta", NOT_COMPLETED, "2025 July 4"),
            Task("3", "gamma", NOT_COMPLETED, "2025 July 4"),
        ]
    )
    return path


def _feed(monkeypatch, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))


def _run(path, *argv):
    return main(["--file", str(path), *argv])


def test_create_makes_file(tmp_path):
    path = tmp_path / "tasks.csv"
    assert _run(path, "create") == 0
    assert TaskStore(path).load() == []


def test_add_task_appends(tmp_path, monkeypatch, capsys):
    path = tmp_path / "tasks.csv"
    _run(path, "create")
    _feed(monkeypatch, "  write report  \n")
    assert _run(path, "addTask") == 0
    tasks = TaskStore(path).load()
    assert tasks == [
        Task("1", "write report", NOT_COMPLETED, format_date(date.today()))
    ]
    assert "successfully added task!" in capsys.readouterr().out


def test_add_task_without_newline_fails(task_file, monkeypatch):
    _feed(monkeypatch, "no newline")
    assert _run(task_file, "addTask") == 1
    assert len(TaskStore(task_file).load()) == 3


def test_add_task_without_file_fails(tmp_path, monkeypatch):
    _feed(monkeypatch, "task\n")
    assert _run(tmp_path / "missing.csv", "addTask") == 1


def test_list_prints_tasks(task_file, capsys):
    assert _run(task_file, "list") == 0
    out = capsys.readouterr().out
    assert "alpha" in out and "gamma" in out and "Date Added" in out


def test_delete_renumbers(task_file, monkeypatch):
    _feed(monkeypatch, "2\n")
    assert _run(task_file, "delete") == 0
    tasks = TaskStore(task_file).load()
    assert [(t.id, t.description) for t in tasks] == [("1", "alpha"), ("2", "gamma")]


def test_update_description(task_file, monkeypatch):
    _feed(monkeypatch, "3\nnew text\n")
    assert _run(task_file, "updateTask", "description") == 0
    assert TaskStore(task_file).load()[2].description == "new text"


def test_update_description_bad_id_changes_nothing(task_file, monkeypatch):
    before = TaskStore(task_file).load()
    _feed(monkeypatch, "abc\nnew text\n")
    assert _run(task_file, "updateTask", "description") == 0
    assert TaskStore(task_file).load() == before


def test_status_completed_and_back(task_file, monkeypatch):
    _feed(monkeypatch, "1\n")
    assert _run(task_file, "updateTask", "status", "-c") == 0
    assert TaskStore(task_file).load()[0].status == COMPLETED
    _feed(monkeypatch, "1\n")
    assert _run(task_file, "updateTask", "status", "--ncompleted") == 0
    assert TaskStore(task_file).load()[0].status == NOT_COMPLETED


def test_status_both_flags_fails(task_file):
    assert _run(task_file, "updateTask", "status", "-c", "-n") == 1


def test_status_without_flags_changes_nothing(task_file, capsys):
    before = TaskStore(task_file).load()
    assert _run(task_file, "updateTask", "status") == 0
    assert TaskStore(task_file).load() == before
    assert "-c for completed" in capsys.readouterr().out


def test_status_non_numeric_id_fails(task_file, monkeypatch):
    _feed(monkeypatch, "x\n")
    assert _run(task_file, "updateTask", "status", "-c") == 1


def test_clear_empties(task_file):
    assert _run(task_file, "clear") == 0
    assert TaskStore(task_file).load() == []


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "updateTask" in capsys.readouterr().out


def test_parser_rejects_unknown_command():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["bogus"])


def test_parser_status_flags():
    args = build_parser().parse_args(["updateTask", "status", "-c"])
    assert args.completed is True
    assert args.ncompleted is False