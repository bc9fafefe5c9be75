"""
Error taxonomy for DeskShot.
Each error carries the HTTP status it should surface as.
"""

from __future__ import annotations


class DeskshotError(Exception):
    """Base class for errors reported back to the caller."""

    status_code = 500


class InvalidRequestError(DeskshotError):
    """Bad method, tool, region or argument shape. Raised before any side effect."""

    status_code = 400


class CaptureError(DeskshotError):
    """Directory creation, window activation, keystroke or capture failed."""


class EncodingError(DeskshotError):
    """The captured file could not be read back for encoding."""
