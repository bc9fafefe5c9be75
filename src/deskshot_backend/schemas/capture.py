from __future__ import annotations

from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


# ---- Wire envelope ----

class InvokeRequest(BaseModel):
    """Body of POST /invoke."""
    method: str
    params: Any = None


class ToolCall(BaseModel):
    """Canonical (name, arguments) pair, whatever shape the caller sent."""
    name: Optional[str] = None
    arguments: Dict[str, Any] = Field(default_factory=dict)


class ToolDescriptor(BaseModel):
    name: str
    description: str


# ---- Capture arguments ----

class CaptureRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    region: str = Field(default="full", description="Only 'full' is supported")
    format: str = Field(default="markdown", description="Informational only")
    window_name: Optional[str] = Field(default=None, alias="windowName")
    switch_to_window: bool = Field(default=False, alias="switchToWindow")
    switch_to_subwindow: bool = Field(default=False, alias="switchToSubwindow")
    subwindow_key: str = Field(default="", alias="subwindowKey")
    include_base64: bool = Field(default=True, alias="includeBase64")

    @field_validator("region", mode="before")
    @classmethod
    def _default_region(cls, v: Any) -> Any:
        return v if v else "full"

    @field_validator("format", mode="before")
    @classmethod
    def _default_format(cls, v: Any) -> Any:
        # Informational only, so any value is accepted
        if not v:
            return "markdown"
        return v if isinstance(v, str) else str(v)

    @field_validator("window_name", mode="before")
    @classmethod
    def _blank_window_name(cls, v: Any) -> Any:
        # An empty name means "whatever is on screen"
        return v if v != "" else None

    @field_validator("switch_to_window", "switch_to_subwindow", mode="before")
    @classmethod
    def _default_false(cls, v: Any) -> Any:
        return False if v is None else v

    @field_validator("subwindow_key", mode="before")
    @classmethod
    def _default_key(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("include_base64", mode="before")
    @classmethod
    def _default_true(cls, v: Any) -> Any:
        return True if v is None else v

    @property
    def switches_window(self) -> bool:
        """Activation, fullscreen and restore only happen for a named window."""
        return bool(self.window_name) and self.switch_to_window

    @property
    def switches_subview(self) -> bool:
        return self.switches_window and self.switch_to_subwindow and bool(self.subwindow_key)
