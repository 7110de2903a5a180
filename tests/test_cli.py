"""CLI behaviour coverage for the click command group."""

from __future__ import annotations

import re

import pytest
from click.testing import CliRunner

from lib_log_vivid import __init__conf__
from lib_log_vivid import cli as cli_mod
from lib_log_vivid import config as vivid_config
from lib_log_vivid.config import ConfigSnapshot, GlobalConfig
from lib_log_vivid.domain.themes import Theme

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    """Return ``text`` without ANSI colour codes.

    Examples
    --------
    >>> strip_ansi("\x1b[31mred\x1b[0m")
    'red'
    """

    return ANSI_RE.sub("", text)


def test_cli_without_subcommand_prints_summary() -> None:
    result = CliRunner().invoke(cli_mod.cli, [], prog_name=__init__conf__.shell_command)

    assert result.exit_code == 0
    assert result.output == cli_mod.summary_info()


def test_cli_info_command_matches_summary() -> None:
    result = CliRunner().invoke(cli_mod.cli, ["info"])

    assert result.exit_code == 0
    assert result.output == cli_mod.summary_info()
    assert f"Info for {__init__conf__.name}:" in result.output


def test_cli_version_flag() -> None:
    result = CliRunner().invoke(cli_mod.cli, ["--version"])

    assert result.exit_code == 0
    assert result.output.strip() == __init__conf__.version


def test_cli_themes_lists_every_theme() -> None:
    result = CliRunner().invoke(cli_mod.cli, ["themes"])

    assert result.exit_code == 0
    for theme in Theme:
        assert theme.value in result.output
    assert "COMPLETED" in result.output


def test_cli_logdemo_plain_output() -> None:
    result = CliRunner().invoke(cli_mod.cli, ["logdemo", "--theme", "TECH", "--no-color", "--message", "ping"])

    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines[0] == "=== Theme: tech ==="
    assert " 🔥 ping" in lines
    assert len(lines) == 8
    assert "\x1b[" not in result.output


def test_cli_logdemo_applies_prefix_and_suffix() -> None:
    result = CliRunner().invoke(cli_mod.cli, ["logdemo", "--no-color", "--prefix", "[svc]", "--suffix", "(v2)"])

    assert result.exit_code == 0
    assert "[svc]  ✅ Sample log message (v2)" in result.output.splitlines()


def test_cli_logdemo_color_keeps_escape_codes() -> None:
    result = CliRunner().invoke(cli_mod.cli, ["logdemo", "--color", "--theme", "minimal"])

    assert result.exit_code == 0
    assert "\x1b[31m" in result.output
    assert " ✗ Sample log message" in strip_ansi(result.output)


def test_cli_logdemo_defaults_to_configured_theme() -> None:
    vivid_config.set_global_config(GlobalConfig(ConfigSnapshot(default_theme=Theme.NATURE, color_enabled=False)))

    result = CliRunner().invoke(cli_mod.cli, ["logdemo"])

    assert result.exit_code == 0
    assert "=== Theme: nature ===" in result.output
    assert " 🌸 Sample log message" in result.output


def test_cli_rejects_unknown_theme() -> None:
    result = CliRunner().invoke(cli_mod.cli, ["logdemo", "--theme", "neon"])

    assert result.exit_code != 0


def test_main_returns_zero_for_version(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli_mod.main(["--version"]) == 0
    assert capsys.readouterr().out.strip() == __init__conf__.version


def test_main_reports_usage_errors() -> None:
    assert cli_mod.main(["logdemo", "--theme", "neon"]) == 2
