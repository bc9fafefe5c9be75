"""
desktop_controller.py - Backend selection and the X11 implementation
=====================================================================
The orchestrator only knows the Automation interface from automation.py.
This module decides HOW those calls happen on the current machine.

- MacAutomation (macos.py) → osascript + screencapture
- X11Automation (here)     → wmctrl + PyAutoGUI + scrot
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from typing import Optional, Sequence

from .actions import build_chord, grab_screen, press_chord
from .automation import Automation, AutomationError, run_command
from .macos import MacAutomation


class X11Automation(Automation):
    """
    Controls a Linux/X11 desktop.

    USAGE:
        automation = X11Automation()
        automation.activate_application("Thunderbird")
        automation.send_keystroke("2", ["command"])
        automation.capture_screen_to_file(Path("/tmp/shot.png"))
    """

    def activate_application(self, name: str) -> None:
        # wmctrl -a matches the first window whose title contains name
        run_command(["wmctrl", "-a", name])

    def send_keystroke(self, key: str, modifiers: Sequence[str] = ()) -> None:
        chord = build_chord(key, modifiers)
        try:
            press_chord(chord)
        except Exception as e:
            # PyAutoGUI errors (no display, unknown key) surface as AutomationError
            raise AutomationError(f"keystroke {'+'.join(chord)} failed: {e}") from e

    def capture_screen_to_file(self, path: Path) -> None:
        try:
            grab_screen(path)
        except subprocess.CalledProcessError as e:
            detail = (e.stderr or "").strip() or f"exit status {e.returncode}"
            raise AutomationError(f"scrot failed: {detail}") from e
        except Exception as e:
            raise AutomationError(f"screen capture failed: {e}") from e


# ─────────────────────────────────────────────────────────────
# CONVENIENCE FUNCTION
# ─────────────────────────────────────────────────────────────

def create_automation(platform: Optional[str] = None) -> Automation:
    """
    Factory function to pick the automation backend.

    Args:
        platform: sys.platform-style name; defaults to the running platform.

    Returns:
        MacAutomation on macOS, X11Automation everywhere else.
    """
    platform = platform or sys.platform
    if platform == "darwin":
        return MacAutomation()
    return X11Automation()
