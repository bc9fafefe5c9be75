"""
arguments.py - Tool call normalization
======================================
Callers send the tool name and arguments in one of two shapes:

    {"params": {"name": "capture", "arguments": {...}}}
    {"params": {"data": {"name": "capture", "arguments": {...}}}}

normalize_tool_call() folds both into one ToolCall, and
parse_capture_request() validates it before anything touches the desktop.
"""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import ValidationError

from ..errors import InvalidRequestError
from ..schemas.capture import CaptureRequest, ToolCall

CAPTURE_TOOL = "capture"
SUPPORTED_REGION = "full"

UNSUPPORTED_MESSAGE = "Unsupported method or tool"
REGION_MESSAGE = "Only 'full' region is supported"


def normalize_tool_call(params: Any) -> ToolCall:
    """Resolve name and arguments from params or params.data (data wins when truthy)."""
    params = params or {}
    if not isinstance(params, Mapping):
        raise InvalidRequestError("params must be an object")
    source = params.get("data") or params
    if not isinstance(source, Mapping):
        raise InvalidRequestError("params.data must be an object")

    arguments = source.get("arguments") or {}
    if not isinstance(arguments, Mapping):
        raise InvalidRequestError("arguments must be an object")

    name = source.get("name")
    return ToolCall(name=name if isinstance(name, str) else None, arguments=dict(arguments))


def _describe(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        loc = ".".join(str(p) for p in item.get("loc", ())) or "arguments"
        parts.append(f"{loc}: {item.get('msg')}")
    return "Invalid capture arguments: " + "; ".join(parts)


def parse_capture_request(call: ToolCall) -> CaptureRequest:
    """
    Validate a ToolCall as a capture request.

    Raises:
        InvalidRequestError: Unknown tool, bad argument types, or a region other than "full".
    """
    if call.name != CAPTURE_TOOL:
        raise InvalidRequestError(UNSUPPORTED_MESSAGE)

    try:
        request = CaptureRequest.model_validate(call.arguments)
    except ValidationError as e:
        raise InvalidRequestError(_describe(e)) from e

    if request.region != SUPPORTED_REGION:
        raise InvalidRequestError(REGION_MESSAGE)
    return request
