from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from objadapt import __version__
from objadapt.cli.main import cli, main


def _plan(tmp_path: Path, models_module: str, *, extra: str = "") -> Path:
    plan = tmp_path / "plan.yaml"
    plan.write_text(
        f"""
description: user pages
targets:
  - name: user
    factory: "{models_module}:make_user"
    properties: [name, age]
    expect: {{name: Alice, age: 30}}
    tags: [smoke]
{extra}
""",
        encoding="utf-8",
    )
    return plan


def test_cli_help_short_flag() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["-h"])
    assert result.exit_code == 0
    assert "Usage:" in result.output
    assert "check" in result.output
    assert "resolve" in result.output


def test_cli_version() -> None:
    result = CliRunner().invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_check_plan(tmp_path: Path, models_module: str) -> None:
    plan = _plan(tmp_path, models_module)
    result = CliRunner().invoke(cli, ["check", "--plan", str(plan), "--no-color"])
    assert result.exit_code == 0, result.output
    assert "user.age -> RESOLVED" in result.output


def test_cli_check_reports_failures(tmp_path: Path, models_module: str) -> None:
    extra = f"""  - name: broken
    factory: "{models_module}:Broken"
    properties: [value]
"""
    plan = _plan(tmp_path, models_module, extra=extra)
    result = CliRunner().invoke(cli, ["check", "--plan", str(plan), "--no-color"])
    assert result.exit_code == 1
    assert "broken.value -> FAILED" in result.output
    assert "RuntimeError: boom" in result.output


def test_cli_check_filters_and_lists(tmp_path: Path, models_module: str) -> None:
    plan = _plan(tmp_path, models_module)
    result = CliRunner().invoke(cli, ["check", "--plan", str(plan), "--list"])
    assert result.exit_code == 0
    assert "user: name, age" in result.output

    result = CliRunner().invoke(cli, ["check", "--plan", str(plan), "--skip-tags", "smoke"])
    assert result.exit_code == 1
    assert "No targets matched" in result.output


def test_cli_json_report(tmp_path: Path, models_module: str) -> None:
    plan = _plan(tmp_path, models_module)
    report_path = tmp_path / "out" / "report.json"
    result = CliRunner().invoke(
        cli,
        ["check", "--plan", str(plan), "--report", "json", "--report-path", str(report_path)],
    )
    assert result.exit_code == 0, result.output
    payload = json.loads(report_path.read_text(encoding="utf-8"))
    assert payload["summary"]["resolved"] == 2


def test_cli_json_report_requires_path(tmp_path: Path, models_module: str) -> None:
    plan = _plan(tmp_path, models_module)
    result = CliRunner().invoke(cli, ["check", "--plan", str(plan), "--report", "json"])
    assert result.exit_code == 2
    assert "--report-path" in result.output


def test_cli_check_rejects_invalid_plan(tmp_path: Path) -> None:
    plan = tmp_path / "plan.yaml"
    plan.write_text("targets: []\n", encoding="utf-8")
    result = CliRunner().invoke(cli, ["check", "--plan", str(plan)])
    assert result.exit_code == 1
    assert "Plan schema validation failed" in result.output


def test_cli_resolve(models_module: str) -> None:
    result = CliRunner().invoke(cli, ["resolve", f"{models_module}:ALICE", "name", "age", "salary"])
    assert result.exit_code == 1
    assert f"name: field {models_module}.User.name = 'Alice'" in result.output
    assert f"age: method {models_module}.User.getAge = 30" in result.output
    assert f"salary: no such property: {models_module}.User.salary" in result.output


def test_cli_resolve_calls_classes(models_module: str) -> None:
    result = CliRunner().invoke(cli, ["resolve", f"{models_module}:Broken", "value"])
    assert result.exit_code == 1
    assert "(RuntimeError: boom)" in result.output


def test_cli_resolve_unknown_target() -> None:
    result = CliRunner().invoke(cli, ["resolve", "no_such_module_xyz:thing", "name"])
    assert result.exit_code == 1
    assert "Cannot load" in result.output


def test_main_returns_exit_code(models_module: str) -> None:
    assert main(["resolve", f"{models_module}:make_user", "name"]) == 0
    assert main(["resolve", f"{models_module}:make_user", "salary"]) == 1
