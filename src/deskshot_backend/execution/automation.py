from __future__ import annotations

import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Sequence


class AutomationError(RuntimeError):
    """An OS automation primitive failed."""


class Automation(ABC):
    """
    Any OS backend must implement this.
    This is how the orchestrator touches windows, keys and the screen.
    """

    @abstractmethod
    def activate_application(self, name: str) -> None:
        """Bring the named application to the foreground."""
        raise NotImplementedError

    @abstractmethod
    def send_keystroke(self, key: str, modifiers: Sequence[str] = ()) -> None:
        """Press key while holding modifiers ("command", "control", ...)."""
        raise NotImplementedError

    @abstractmethod
    def capture_screen_to_file(self, path: Path) -> None:
        """Write the current screen content to path as PNG."""
        raise NotImplementedError


def run_command(args: List[str]) -> None:
    """
    Run an external program to completion.

    Success is a zero exit status; nothing is parsed from stdout.
    No timeout: a hung program hangs the caller.

    Raises:
        AutomationError: If the program is missing or exits non-zero.
    """
    try:
        subprocess.run(args, check=True, capture_output=True, text=True)
    except FileNotFoundError as e:
        raise AutomationError(f"{args[0]} not found: {e}") from e
    except subprocess.CalledProcessError as e:
        detail = (e.stderr or "").strip() or f"exit status {e.returncode}"
        raise AutomationError(f"{args[0]} failed: {detail}") from e
