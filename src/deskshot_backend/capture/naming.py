"""
File naming for captured screenshots.

Layout:
    <root>/<YYYYMMDD>/screenshot[-<window>]-<UTC timestamp>.png
"""

from __future__ import annotations

import re
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9]")


def dated_directory(root: Path, now: datetime) -> Path:
    """Directory for screenshots taken on now's local date."""
    return Path(root) / now.strftime("%Y%m%d")


def ensure_dated_directory(root: Path, now: datetime) -> Path:
    """Create (if needed) and return today's directory. Existing directories are fine."""
    directory = dated_directory(root, now)
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def sanitize_window_name(name: str) -> str:
    return _UNSAFE_CHARS.sub("_", name)


def iso_timestamp(now: datetime) -> str:
    """
    UTC ISO-8601 timestamp with millisecond precision, made filename-safe.

    2026-10-19T08:15:30.123Z → 2026-10-19T08-15-30-123Z
    """
    if now.tzinfo is None:
        now = now.astimezone()
    utc = now.astimezone(timezone.utc)
    stamp = utc.strftime("%Y-%m-%dT%H:%M:%S") + f".{utc.microsecond // 1000:03d}Z"
    return stamp.replace(":", "-").replace(".", "-")


def build_filename(now: datetime, window_name: Optional[str] = None) -> str:
    suffix = f"-{sanitize_window_name(window_name)}" if window_name else ""
    return f"screenshot{suffix}-{iso_timestamp(now)}.png"
