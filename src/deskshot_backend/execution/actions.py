"""
actions.py - Low-level X11 input/capture functions
==================================================
The raw PyAutoGUI and scrot calls behind X11Automation.

PyAutoGUI talks to whatever display is in the DISPLAY env var, and
importing it without a display fails, so it is loaded on first use.
"""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import List, Sequence


# ─────────────────────────────────────────────────────────────
# CONFIGURATION
# ─────────────────────────────────────────────────────────────

_pyautogui = None


def get_pyautogui():
    """Import and configure PyAutoGUI once."""
    global _pyautogui
    if _pyautogui is None:
        import pyautogui

        # Moving the mouse to a corner would abort the keystroke
        pyautogui.FAILSAFE = False
        pyautogui.PAUSE = 0.1
        _pyautogui = pyautogui
    return _pyautogui


# Key name mapping: macOS/X11 names → PyAutoGUI names
KEY_NAME_MAP = {
    # The primary command key is Ctrl on Linux desktops
    "command": "ctrl",
    "cmd": "ctrl",
    # Super/Windows key
    "super_l": "win",
    "super_r": "win",
    "super": "win",
    "meta": "win",
    # Control
    "control": "ctrl",
    "control_l": "ctrl",
    "control_r": "ctrl",
    "ctrl": "ctrl",
    # Alt
    "option": "alt",
    "alt_l": "alt",
    "alt_r": "alt",
    "alt": "alt",
    # Shift
    "shift_l": "shift",
    "shift_r": "shift",
    "shift": "shift",
    # Return/Enter
    "return": "enter",
    "enter": "enter",
    # Escape
    "escape": "esc",
    "esc": "esc",
}

# macOS chords with a different meaning on X11 desktops, keyed on the
# macOS modifier names before normalization.
# "Enter fullscreen" (cmd+ctrl+f) is F11 under most window managers.
CHORD_ALIASES = {
    (frozenset({"command", "control"}), "f"): ["f11"],
}


def normalize_key(key: str) -> str:
    """
    Normalize a key name to PyAutoGUI format.
    
    Maps macOS/X11 names (command, Super_L, Control) to PyAutoGUI names.
    """
    key_lower = key.lower().strip()
    return KEY_NAME_MAP.get(key_lower, key_lower)


def build_chord(key: str, modifiers: Sequence[str] = ()) -> List[str]:
    """
    Turn modifiers + key into the list of keys PyAutoGUI should press.

    EXAMPLES:
        build_chord("2", ["command"])            → ["ctrl", "2"]
        build_chord("f", ["command", "control"]) → ["f11"]
    """
    raw = (frozenset(m.lower().strip() for m in modifiers), key.lower().strip())
    if raw in CHORD_ALIASES:
        return list(CHORD_ALIASES[raw])

    chord: List[str] = []
    for name in list(modifiers) + [key]:
        normalized = normalize_key(name)
        if normalized not in chord:
            chord.append(normalized)
    return chord


def press_chord(keys: Sequence[str]) -> None:
    """Press a single key or a key combination."""
    pyautogui = get_pyautogui()
    if len(keys) > 1:
        pyautogui.hotkey(*keys)
    else:
        pyautogui.press(keys[0])


def grab_screen(path: Path) -> None:
    """
    Write the current screen to path.

    Uses scrot directly (more reliable than PyAutoGUI's pyscreeze).
    Falls back to PyAutoGUI when scrot is not installed.
    """
    try:
        subprocess.run(["scrot", "-o", str(path)], check=True, capture_output=True, text=True)
        return
    except FileNotFoundError:
        pass  # Fall through to PyAutoGUI

    image = get_pyautogui().screenshot()
    image.save(str(path), format="PNG")
