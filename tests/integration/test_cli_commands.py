from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from hrtracker.cli import app


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def invoke(runner: CliRunner, data: Path, *args: str):
    return runner.invoke(app, ["--data", str(data), *args])


def add_candidate(runner: CliRunner, data: Path, name: str, student_id: str, *extra: str):
    result = invoke(runner, data, "add", "--name", name, "--id", student_id, *extra)
    assert result.exit_code == 0, result.output
    return result


def test_cli_add_list_and_persist(tmp_path: Path, runner: CliRunner) -> None:
    data = tmp_path / "roster.json"

    result = add_candidate(runner, data, "Alice Pauline", "A0001", "--phone", "94351253", "--tag", "friends")
    assert "New candidate added: Alice Pauline (A0001)" in result.stdout

    result = invoke(runner, data, "list")
    assert result.exit_code == 0, result.output
    assert "1 candidates listed" in result.stdout
    assert "1. Alice Pauline (A0001) | 94351253" in result.stdout

    document = json.loads(data.read_text(encoding="utf-8"))
    assert document["candidates"][0]["tags"] == ["friends"]


def test_cli_rejects_duplicate_candidate(tmp_path: Path, runner: CliRunner) -> None:
    data = tmp_path / "roster.json"
    add_candidate(runner, data, "Alice", "A001", "--phone", "11111111")

    result = invoke(runner, data, "add", "--name", "Alice", "--id", "A001", "--phone", "22222222")

    assert result.exit_code == 1
    document = json.loads(data.read_text(encoding="utf-8"))
    assert [c["phone"] for c in document["candidates"]] == ["11111111"]


def test_cli_schedule_duplicate_conflict_and_boundary(tmp_path: Path, runner: CliRunner) -> None:
    data = tmp_path / "roster.json"
    add_candidate(runner, data, "Bob Choo", "A0002")
    add_candidate(runner, data, "Carl Kurz", "A0003")

    result = invoke(runner, data, "schedule", "1", "--at", "2099-12-23T10:00")
    assert result.exit_code == 0, result.output
    assert "Scheduled interview for Bob Choo (A0002) on 2099-12-23 at 10:00" in result.stdout

    assert invoke(runner, data, "schedule", "1", "--at", "2099-12-23T14:00").exit_code == 1
    assert invoke(runner, data, "schedule", "2", "--at", "2099-12-23T10:15").exit_code == 1

    result = invoke(runner, data, "schedule", "2", "--at", "2099-12-23T10:30")
    assert result.exit_code == 0, result.output

    result = invoke(runner, data, "interviews", "--on", "2099-12-23")
    assert "2 interviews listed" in result.stdout
    assert "1. Bob Choo (A0002) 2099-12-23 10:00-10:30" in result.stdout
    assert "2. Carl Kurz (A0003) 2099-12-23 10:30-11:00" in result.stdout


def test_cli_schedule_in_past_fails(tmp_path: Path, runner: CliRunner) -> None:
    data = tmp_path / "roster.json"
    add_candidate(runner, data, "Bob Choo", "A0002")

    result = invoke(runner, data, "schedule", "1", "--at", "2000-01-01T10:00")

    assert result.exit_code == 1
    assert json.loads(data.read_text(encoding="utf-8"))["interviews"] == []


def test_cli_schedule_rejects_bad_datetime(tmp_path: Path, runner: CliRunner) -> None:
    data = tmp_path / "roster.json"
    add_candidate(runner, data, "Bob Choo", "A0002")

    result = invoke(runner, data, "schedule", "1", "--at", "tomorrow-ish")

    assert result.exit_code == 2


def test_cli_delete_cancels_interview(tmp_path: Path, runner: CliRunner) -> None:
    data = tmp_path / "roster.json"
    add_candidate(runner, data, "Bob Choo", "A0002")
    invoke(runner, data, "schedule", "1", "--at", "2099-12-23T10:00")

    result = invoke(runner, data, "delete", "1")

    assert result.exit_code == 0, result.output
    document = json.loads(data.read_text(encoding="utf-8"))
    assert document["candidates"] == []
    assert document["interviews"] == []


def test_cli_edit_sort_and_unschedule(tmp_path: Path, runner: CliRunner) -> None:
    data = tmp_path / "roster.json"
    add_candidate(runner, data, "Carl Kurz", "A0003")
    add_candidate(runner, data, "Alice Pauline", "A0001")
    invoke(runner, data, "schedule", "1", "--at", "2099-12-23T10:00")

    result = invoke(runner, data, "edit", "1", "--course", "Computer Science")
    assert result.exit_code == 0, result.output

    result = invoke(runner, data, "sort", "--by", "name")
    assert result.exit_code == 0, result.output
    assert "1. Alice Pauline (A0001)" in result.stdout

    document = json.loads(data.read_text(encoding="utf-8"))
    assert [c["name"] for c in document["candidates"]] == ["Alice Pauline", "Carl Kurz"]
    assert document["candidates"][1]["course"] == "Computer Science"
    assert document["interviews"][0]["name"] == "Carl Kurz"

    result = invoke(runner, data, "unschedule", "1")
    assert result.exit_code == 0, result.output
    assert json.loads(data.read_text(encoding="utf-8"))["interviews"] == []


def test_cli_list_empty_roster(tmp_path: Path, runner: CliRunner) -> None:
    result = invoke(runner, tmp_path / "roster.json", "list")

    assert result.exit_code == 0
    assert "There are no candidates in the system" in result.stdout


def test_cli_sort_uses_configured_default(tmp_path: Path, runner: CliRunner) -> None:
    data = tmp_path / "roster.json"
    config = tmp_path / "config.yaml"
    config.write_text("display:\n  default_sort: student_id\n", encoding="utf-8")
    add_candidate(runner, data, "Zed Ng", "A0001")
    add_candidate(runner, data, "Amy Bee", "A0002")

    result = runner.invoke(app, ["--data", str(data), "--config", str(config), "sort"])

    assert result.exit_code == 0, result.output
    assert "Sorted 2 candidates by student_id" in result.stdout
    assert "1. Zed Ng (A0001)" in result.stdout


def test_cli_schedule_rejects_utc_offset(tmp_path: Path, runner: CliRunner) -> None:
    data = tmp_path / "roster.json"
    add_candidate(runner, data, "Bob Choo", "A0002")

    result = invoke(runner, data, "schedule", "1", "--at", "2099-12-23T10:00+08:00")

    assert result.exit_code == 2
    assert json.loads(data.read_text(encoding="utf-8"))["interviews"] == []


def test_cli_sort_rejects_unknown_key(tmp_path: Path, runner: CliRunner) -> None:
    data = tmp_path / "roster.json"
    add_candidate(runner, data, "Bob Choo", "A0002")

    result = invoke(runner, data, "sort", "--by", "salary")

    assert result.exit_code == 2
    assert "--by" in result.output


def test_cli_reports_malformed_roster_file(tmp_path: Path, runner: CliRunner) -> None:
    data = tmp_path / "roster.json"
    data.write_text(json.dumps({"candidates": None}), encoding="utf-8")

    result = invoke(runner, data, "list")

    assert result.exit_code == 1
    assert "candidates: expected a list" in result.output
