"""Package metadata shared by the CLI banner and packaging checks."""

from __future__ import annotations

from typing import Callable

name = "lib_log_vivid"
title = "Themed glyph and colour decoration for Python logging"
version = "0.1.0"
homepage = "https://pypi.org/project/lib_log_vivid/"
author = "lib_log_vivid contributors"
shell_command = "lib_log_vivid"


def print_info(writer: Callable[[str], None] | None = None) -> None:
    """Emit the metadata banner line by line through ``writer`` (default ``print``)."""

    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:\n", "\n"]
    lines.extend(f"    {label.ljust(pad)} = {value}\n" for label, value in fields)
    emit = writer if writer is not None else (lambda text: print(text, end=""))
    for line in lines:
        emit(line)
