"""Shared fixtures: a recording fake desktop and a ready-to-call app."""

from __future__ import annotations

from datetime import datetime, timedelta
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from deskshot_backend.app.server import create_app
from deskshot_backend.capture.orchestrator import ScreenshotOrchestrator
from deskshot_backend.execution.automation import Automation, AutomationError


class FakeAutomation(Automation):
    """Records every call and writes a small real PNG on capture."""

    def __init__(self, fail_on: Optional[str] = None):
        self.calls: List[Tuple] = []
        self.fail_on = fail_on

    def _record(self, *call):
        self.calls.append(call)
        if self.fail_on == call[0]:
            raise AutomationError(f"{call[0]} exploded")

    def activate_application(self, name: str) -> None:
        self._record("activate", name)

    def send_keystroke(self, key: str, modifiers: Sequence[str] = ()) -> None:
        self._record("keystroke", key, tuple(modifiers))

    def capture_screen_to_file(self, path: Path) -> None:
        self._record("capture", Path(path))
        Image.new("RGB", (4, 3), (200, 30, 90)).save(path, format="PNG")

    @property
    def names(self) -> List[str]:
        return [call[0] for call in self.calls]


class StepClock:
    """Local clock that moves forward one millisecond per reading."""

    def __init__(self, start: Optional[datetime] = None):
        self.now = start or datetime(2026, 10, 19, 9, 15, 30, 123000).astimezone()

    def __call__(self) -> datetime:
        current = self.now
        self.now = self.now + timedelta(milliseconds=1)
        return current


@pytest.fixture
def automation():
    return FakeAutomation()


@pytest.fixture
def clock():
    return StepClock()


@pytest.fixture
def sleeps():
    return []


@pytest.fixture
def orchestrator(automation, clock, sleeps, tmp_path):
    return ScreenshotOrchestrator(
        automation=automation,
        output_root=tmp_path / "Downloads",
        clock=clock,
        sleep=sleeps.append,
    )


@pytest.fixture
def client(orchestrator):
    return TestClient(create_app(orchestrator))


@pytest.fixture
def call_capture(client):
    """POST a flat-shape capture call with the given arguments."""

    def _call(**arguments):
        return client.post(
            "/invoke",
            json={"method": "callTool", "params": {"name": "capture", "arguments": arguments}},
        )

    return _call
