"""Static tool metadata returned by listTools."""

from __future__ import annotations

from typing import List

from ..schemas.capture import ToolDescriptor
from .arguments import CAPTURE_TOOL

CAPTURE_DESCRIPTION = (
    "Captures a screenshot and returns a raw base64-encoded image. "
    "Options:\n"
    "- region: 'full' (only full supported)\n"
    "- format: 'markdown' (default)\n"
    "- windowName: Optional name of window to focus\n"
    "- switchToWindow: Whether to switch to the specified window (default: false)\n"
    "- switchToSubwindow: Whether to send a Cmd+<subwindowKey> shortcut after switching (default: false)\n"
    "- subwindowKey: Key for the sub-view shortcut, e.g. '2' (default: '')\n"
    "- includeBase64: Whether to include base64 image data in response (default: true)\n"
    "The screenshot is saved to a dated directory in Downloads and returned as raw base64 data."
)

TOOLS: List[ToolDescriptor] = [
    ToolDescriptor(name=CAPTURE_TOOL, description=CAPTURE_DESCRIPTION),
]


def list_tools() -> List[dict]:
    return [tool.model_dump() for tool in TOOLS]
