from __future__ import annotations

from datetime import datetime, timezone
from io import StringIO
from pathlib import Path
from typing import Iterator

import pytest
from rich.console import Console

from lib_log_vivid import config as vivid_config
from lib_log_vivid.domain.events import CallerInfo, LogEvent


@pytest.fixture(autouse=True)
def isolated_global_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Give every test a fresh process-wide config backed by a missing file."""

    monkeypatch.setenv(vivid_config.CONFIG_ENV_VAR, str(tmp_path / "absent.properties"))
    vivid_config.reset_global_config()
    yield
    vivid_config.reset_global_config()


@pytest.fixture
def record_console() -> Console:
    return Console(file=StringIO(), record=True, width=160, color_system=None)


@pytest.fixture
def make_event():
    def _make(**overrides: object) -> LogEvent:
        values: dict[str, object] = {
            "message": "job %s finished",
            "formatted_message": "job 7 finished",
            "level": 20,
            "level_name": "INFO",
            "logger_name": "tests.events",
            "thread_name": "worker-1",
            "timestamp": datetime(2025, 9, 23, 12, 0, tzinfo=timezone.utc),
            "caller": CallerInfo("/srv/app/jobs.py", 42, "run", "jobs"),
            "markers": (),
            "context": {"request_id": "req-1"},
            "sequence_number": 42,
            "arguments": (7,),
        }
        values.update(overrides)
        return LogEvent(**values)  # type: ignore[arg-type]

    return _make
