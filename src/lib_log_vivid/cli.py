"""Click command line interface for previewing themes and decorated output.

Purpose
-------
Give operators a quick way to inspect the glyph themes and to see how the
active configuration decorates each severity.

Contents
--------
* :func:`cli` - command group (``info``, ``themes``, ``logdemo``).
* :func:`summary_info` - metadata banner shared with ``python -m``.
* :func:`main` - test-friendly runner returning an exit code.
"""

from __future__ import annotations

from typing import Sequence

import click
from rich.console import Console
from rich.table import Table

from . import __init__conf__
from .application.decorator import MessageDecorator
from .config import ConfigSnapshot, GlobalConfig, InstanceConfig, load
from .domain.levels import Severity
from .domain.themes import Theme


CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
THEME_CHOICES = [theme.value for theme in Theme]


def summary_info() -> str:
    """Return the metadata banner ending with a newline."""

    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    return "".join(lines)


@click.group(invoke_without_command=True, context_settings=CLICK_CONTEXT_SETTINGS)
@click.version_option(version=__init__conf__.version, prog_name=__init__conf__.shell_command, message="%(version)s")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Preview emoji themes and decorated log lines."""

    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print package metadata."""

    click.echo(summary_info(), nl=False)


@cli.command("themes", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_themes() -> None:
    """List every theme with its glyph per severity."""

    table = Table(title="Themes")
    table.add_column("Theme")
    for severity in Severity:
        table.add_column(severity.label)
    for theme in Theme:
        table.add_row(theme.value, *(theme.glyphs[severity.label].strip() for severity in Severity))
    Console(highlight=False).print(table)


@cli.command("logdemo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--theme", "theme_name", type=click.Choice(THEME_CHOICES, case_sensitive=False), default=None, help="Theme to preview (default: configured theme).")
@click.option("--color/--no-color", default=None, help="Override the configured colour switch.")
@click.option("--prefix", default=None, help="Custom prefix placed before the glyph.")
@click.option("--suffix", default=None, help="Custom suffix appended after the message.")
@click.option("--message", default="Sample log message", show_default=True, help="Message text to decorate.")
def cli_logdemo(theme_name: str | None, color: bool | None, prefix: str | None, suffix: str | None, message: str) -> None:
    """Print one decorated line per severity."""

    base = load().snapshot()
    overrides = ConfigSnapshot(
        default_theme=base.default_theme,
        color_enabled=base.color_enabled if color is None else color,
        custom_prefix=base.custom_prefix if prefix is None else prefix,
        custom_suffix=base.custom_suffix if suffix is None else suffix,
    )
    config = InstanceConfig(GlobalConfig(overrides))
    theme = Theme.resolve(theme_name) if theme_name is not None else overrides.default_theme
    decorator = MessageDecorator(theme, config)
    click.echo(f"=== Theme: {theme.value} ===")
    for severity in Severity:
        click.echo(decorator.format_for_console(severity, message), color=overrides.color_enabled)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Click command in a test-friendly manner.

    Examples
    --------
    >>> main(["--version"])  # doctest: +ELLIPSIS
    0.1...
    0
    """

    args = list(argv) if argv is not None else None
    try:
        cli.main(args=args, prog_name=__init__conf__.shell_command, standalone_mode=False)
    except click.ClickException as error:
        error.show()
        return error.exit_code
    return 0


__all__ = ["cli", "main", "summary_info"]
