"""Tests for the installer CLI."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from arcgis_ai_context import __version__
from arcgis_ai_context.cli.main import build_parser, command_descriptions, main, render_help


def _run(argv: list[str], project: Path, root: Path) -> int:
    return main(argv, base_dir=project, content_root=root)


@pytest.mark.parametrize("argv", [[], ["--help"], ["-h"], ["skills", "--help"]])
def test_help_lists_commands_and_versions(
    argv: list[str], tmp_path: Path, content_store: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    assert _run(argv, tmp_path, content_store) == 0

    output = capsys.readouterr().out
    assert "USAGE" in output
    assert "AVAILABLE SDK VERSIONS" in output
    assert "4.34, 5.0 (default: 5.0)" in output
    for command in ("skills", "claude", "copilot", "all", "list"):
        assert command in output
    assert not (tmp_path / ".github").exists()


def test_help_without_versions(tmp_path: Path) -> None:
    assert "No versions available" in render_help([], color=False)


def test_version_flag(tmp_path: Path, content_store: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(["-v"], tmp_path, content_store) == 0

    assert capsys.readouterr().out.strip() == f"arcgis-ai-context v{__version__}"


def test_unknown_command(tmp_path: Path, content_store: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(["bogus"], tmp_path, content_store) == 1

    output = capsys.readouterr().out
    assert 'Error: Unknown command "bogus"' in output
    assert "arcgis-ai-context --help" in output


def test_unknown_sdk_version(tmp_path: Path, content_store: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(["skills", "--sdk", "3.9"], tmp_path, content_store) == 1

    output = capsys.readouterr().out
    assert 'SDK version "3.9" is not available.' in output
    assert "Available versions: 4.34, 5.0" in output
    assert not (tmp_path / ".github").exists()


def test_list_command(tmp_path: Path, content_store: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(["list"], tmp_path, content_store) == 0

    output = capsys.readouterr().out
    assert "Agent Skills (SDK 5.0)" in output
    assert "arcgis-core-maps" in output


def test_list_with_empty_store(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(["list"], tmp_path, tmp_path / "missing") == 0

    assert "No versions available" in capsys.readouterr().out


def test_install_latest_by_default(tmp_path: Path, content_store: Path, capsys: pytest.CaptureFixture[str]) -> None:
    project = tmp_path / "project"
    project.mkdir()

    assert _run(["skills"], project, content_store) == 0

    notes = project / ".github" / "skills" / "arcgis-core-maps" / "reference"
    assert [path.name for path in notes.iterdir()] == ["notes-5.0.md"]
    assert "Installed 4 Agent Skills files for SDK 5.0" in capsys.readouterr().out


@pytest.mark.parametrize("sdk_args", [["--sdk", "4.34"], ["--sdk=4.34"]])
def test_install_explicit_version(sdk_args: list[str], tmp_path: Path, content_store: Path) -> None:
    project = tmp_path / "project"
    project.mkdir()

    assert _run(["claude", *sdk_args], project, content_store) == 0

    assert (project / ".claude" / "skills" / "arcgis-core-maps" / "reference" / "notes-4.34.md").is_file()


def test_command_is_case_insensitive(tmp_path: Path, content_store: Path) -> None:
    project = tmp_path / "project"
    project.mkdir()

    assert _run(["Copilot"], project, content_store) == 0

    assert (project / ".github" / "instructions" / "arcgis.instructions.md").is_file()


def test_all_installs_claude_then_copilot(
    tmp_path: Path, content_store: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    project = tmp_path / "project"
    project.mkdir()

    assert _run(["all"], project, content_store) == 0

    assert (project / ".claude" / "skills" / "arcgis-widgets" / "SKILL.md").is_file()
    assert (project / ".github" / "instructions" / "arcgis.instructions.md").is_file()
    output = capsys.readouterr().out
    assert output.index("Installing Claude skills") < output.index("Installing Copilot instructions")


def test_failed_install_exits_nonzero(tmp_path: Path, content_store: Path) -> None:
    with patch("arcgis_ai_context.installer.orchestrator.is_writable", return_value=False):
        assert _run(["skills"], tmp_path, content_store) == 1


def test_extra_positional_is_usage_error(tmp_path: Path, content_store: Path) -> None:
    with pytest.raises(SystemExit) as exc_info:
        _run(["skills", "claude"], tmp_path, content_store)

    assert exc_info.value.code == 2


def test_parser_and_descriptions_cover_commands() -> None:
    args = build_parser().parse_args(["all", "--sdk", "5.0", "--no-color"])

    assert (args.command, args.sdk, args.no_color) == ("all", "5.0", True)
    assert list(command_descriptions()) == ["skills", "claude", "copilot", "all", "list"]
