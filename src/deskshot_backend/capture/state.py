"""
Capture state tracking for DeskShot.
Records which stages of the capture sequence were reached.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class CaptureStage(Enum):
    """Stages of one capture, in the only order they can happen."""

    IDLE = "idle"
    DIRECTORY_READY = "directory_ready"
    ACTIVATE_WINDOW = "activate_window"
    SWITCH_SUBVIEW = "switch_subview"
    ENTER_FULLSCREEN = "enter_fullscreen"
    CAPTURE = "capture"
    EXIT_FULLSCREEN = "exit_fullscreen"
    DONE = "done"


_ORDER = list(CaptureStage)


@dataclass
class CaptureTrace:
    """
    Stages completed by one capture.
    Stages only move forward; a failure freezes the trace where it stopped.
    """

    stages: List[CaptureStage] = field(default_factory=lambda: [CaptureStage.IDLE])
    error: Optional[str] = None

    @property
    def current(self) -> CaptureStage:
        return self.stages[-1]

    def advance(self, stage: CaptureStage) -> None:
        if self.error is not None:
            raise RuntimeError(f"capture already failed at {self.current.value}")
        if _ORDER.index(stage) <= _ORDER.index(self.current):
            raise ValueError(f"cannot move from {self.current.value} back to {stage.value}")
        self.stages.append(stage)

    def mark_failed(self, error: str) -> None:
        self.error = error

    def reached(self, stage: CaptureStage) -> bool:
        return stage in self.stages

    def names(self) -> List[str]:
        return [stage.value for stage in self.stages]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "stages": self.names(),
            "error": self.error,
        }
