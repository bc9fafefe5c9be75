"""
macos.py - macOS automation backend
===================================
Drives the desktop through the two tools every Mac ships with:

- osascript    → AppleScript for activating apps and injecting keystrokes
- screencapture → writes the screen to a PNG file

Both are plain external processes; we only care about their exit status.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from .automation import Automation, run_command


# Modifier names accepted by send_keystroke → AppleScript "using {...}" terms
MODIFIER_MAP = {
    "command": "command down",
    "cmd": "command down",
    "control": "control down",
    "ctrl": "control down",
    "option": "option down",
    "alt": "option down",
    "shift": "shift down",
}


def applescript_string(value: str) -> str:
    """Quote a value as an AppleScript string literal."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def activate_script(app_name: str) -> str:
    return f"tell application {applescript_string(app_name)} to activate"


def keystroke_script(key: str, modifiers: Sequence[str] = ()) -> str:
    """
    Build the System Events script for one keystroke.

    EXAMPLE:
        keystroke_script("f", ["command", "control"])
        → tell application "System Events" to keystroke "f" using {command down, control down}
    """
    script = f'tell application "System Events" to keystroke {applescript_string(key)}'
    if modifiers:
        terms = []
        for modifier in modifiers:
            term = MODIFIER_MAP.get(modifier.lower().strip())
            if term is None:
                raise ValueError(f"Unknown modifier: {modifier}")
            if term not in terms:
                terms.append(term)
        script += " using {" + ", ".join(terms) + "}"
    return script


class MacAutomation(Automation):
    """Controls a macOS desktop via osascript and screencapture."""

    def activate_application(self, name: str) -> None:
        run_command(["osascript", "-e", activate_script(name)])

    def send_keystroke(self, key: str, modifiers: Sequence[str] = ()) -> None:
        run_command(["osascript", "-e", keystroke_script(key, modifiers)])

    def capture_screen_to_file(self, path: Path) -> None:
        run_command(["screencapture", str(path)])
