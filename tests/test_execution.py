"""Tests for the OS automation backends, without touching a real desktop."""

import subprocess
from pathlib import Path

import pytest

from deskshot_backend.execution import (
    AutomationError,
    MacAutomation,
    X11Automation,
    create_automation,
    run_command,
)
from deskshot_backend.execution import actions, automation as automation_module
from deskshot_backend.execution.macos import activate_script, keystroke_script


@pytest.fixture
def commands(monkeypatch):
    """Capture subprocess.run calls made through run_command."""
    seen = []

    def fake_run(args, **kwargs):
        seen.append(list(args))
        return subprocess.CompletedProcess(args, 0, "", "")

    monkeypatch.setattr(automation_module.subprocess, "run", fake_run)
    return seen


# ---- run_command ----

def test_run_command_wraps_missing_binary(monkeypatch):
    def fake_run(args, **kwargs):
        raise FileNotFoundError(2, "No such file or directory")

    monkeypatch.setattr(automation_module.subprocess, "run", fake_run)
    with pytest.raises(AutomationError, match="screencapture not found"):
        run_command(["screencapture", "/tmp/x.png"])


def test_run_command_wraps_non_zero_exit(monkeypatch):
    def fake_run(args, **kwargs):
        raise subprocess.CalledProcessError(1, args, output="", stderr="execution error: -1728\n")

    monkeypatch.setattr(automation_module.subprocess, "run", fake_run)
    with pytest.raises(AutomationError, match="osascript failed: execution error: -1728"):
        run_command(["osascript", "-e", "nope"])


# ---- macOS ----

def test_activate_script_escapes_quotes():
    assert activate_script('My "App"') == 'tell application "My \\"App\\"" to activate'


def test_keystroke_script_with_modifiers():
    assert keystroke_script("f", ["command", "control"]) == (
        'tell application "System Events" to keystroke "f" using {command down, control down}'
    )
    assert keystroke_script("2", ["command"]) == (
        'tell application "System Events" to keystroke "2" using {command down}'
    )


def test_keystroke_script_rejects_unknown_modifier():
    with pytest.raises(ValueError):
        keystroke_script("f", ["hyper"])


def test_mac_automation_commands(commands, tmp_path):
    mac = MacAutomation()
    target = tmp_path / "shot.png"

    mac.activate_application("Calendar")
    mac.send_keystroke("f", ("command", "control"))
    mac.capture_screen_to_file(target)

    assert commands == [
        ["osascript", "-e", 'tell application "Calendar" to activate'],
        ["osascript", "-e", keystroke_script("f", ("command", "control"))],
        ["screencapture", str(target)],
    ]


# ---- X11 ----

def test_build_chord_maps_command_to_ctrl():
    assert actions.build_chord("2", ["command"]) == ["ctrl", "2"]


def test_build_chord_translates_fullscreen():
    assert actions.build_chord("f", ["command", "control"]) == ["f11"]
    assert actions.build_chord("F", ["Control", "Command"]) == ["f11"]


def test_subview_shortcut_on_f_is_not_fullscreen():
    assert actions.build_chord("f", ["command"]) == ["ctrl", "f"]
    assert actions.build_chord("f", ["control"]) == ["ctrl", "f"]


def test_x11_activation_uses_wmctrl(commands):
    X11Automation().activate_application("Thunderbird")
    assert commands == [["wmctrl", "-a", "Thunderbird"]]


def test_x11_keystroke_presses_chord(monkeypatch):
    pressed = []
    monkeypatch.setattr("deskshot_backend.execution.desktop_controller.press_chord", pressed.append)

    X11Automation().send_keystroke("2", ["command"])
    assert pressed == [["ctrl", "2"]]


def test_x11_keystroke_failure_is_automation_error(monkeypatch):
    def broken(keys):
        raise OSError("no display")

    monkeypatch.setattr("deskshot_backend.execution.desktop_controller.press_chord", broken)
    with pytest.raises(AutomationError, match="no display"):
        X11Automation().send_keystroke("f", ["command", "control"])


def test_x11_capture_failure_is_automation_error(monkeypatch, tmp_path):
    def failing_grab(path):
        raise subprocess.CalledProcessError(2, ["scrot"], stderr="giblib error")

    monkeypatch.setattr("deskshot_backend.execution.desktop_controller.grab_screen", failing_grab)
    with pytest.raises(AutomationError, match="scrot failed: giblib error"):
        X11Automation().capture_screen_to_file(tmp_path / "x.png")


def test_grab_screen_falls_back_to_pyautogui(monkeypatch, tmp_path):
    from PIL import Image

    class FakePyAutoGUI:
        def screenshot(self):
            return Image.new("RGB", (2, 2))

    def no_scrot(args, **kwargs):
        raise FileNotFoundError("scrot")

    monkeypatch.setattr(actions.subprocess, "run", no_scrot)
    monkeypatch.setattr(actions, "get_pyautogui", lambda: FakePyAutoGUI())

    target = tmp_path / "fallback.png"
    actions.grab_screen(target)
    assert target.read_bytes().startswith(b"\x89PNG")


# ---- factory ----

def test_create_automation_per_platform():
    assert isinstance(create_automation("darwin"), MacAutomation)
    assert isinstance(create_automation("linux"), X11Automation)
