"""Schemas module for DeskShot."""

from .capture import (
    CaptureRequest,
    InvokeRequest,
    ToolCall,
    ToolDescriptor,
)
from .results import CaptureResult

__all__ = [
    "CaptureRequest",
    "InvokeRequest",
    "ToolCall",
    "ToolDescriptor",
    "CaptureResult",
]
