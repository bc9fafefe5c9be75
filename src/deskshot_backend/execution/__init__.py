"""
execution - OS automation module
================================
Window activation, keystroke injection and screen capture behind one
interface so the capture sequence can run against a fake in tests.

USAGE:
    from deskshot_backend.execution import create_automation

    automation = create_automation()
    automation.activate_application("Calendar")
    automation.capture_screen_to_file(path)
"""

from .automation import Automation, AutomationError, run_command
from .desktop_controller import X11Automation, create_automation
from .macos import MacAutomation

__all__ = [
    "Automation",
    "AutomationError",
    "run_command",
    "MacAutomation",
    "X11Automation",
    "create_automation",
]
