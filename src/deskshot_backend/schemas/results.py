"""
Result models for DeskShot.
Defines what a finished capture hands back to the HTTP layer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional


@dataclass
class CaptureResult:
    """Outcome of one successful capture."""

    file_path: Path
    image_base64: Optional[str] = None
    stages: List[str] = field(default_factory=list)

    @property
    def message(self) -> str:
        return f"Screenshot saved to: {self.file_path}"

    def to_content(self) -> List[Dict[str, Any]]:
        """Content list for a callTool response; the image element only when encoded."""
        content: List[Dict[str, Any]] = [{"type": "text", "text": self.message}]
        if self.image_base64 is not None:
            content.append({"type": "base64_image", "data": self.image_base64})
        return content

    def to_dict(self) -> dict:
        return {
            "file_path": str(self.file_path),
            "has_image": self.image_base64 is not None,
            "stages": list(self.stages),
        }
