from .encoding import encode_file_base64
from .naming import build_filename, dated_directory, ensure_dated_directory, sanitize_window_name
from .orchestrator import ScreenshotOrchestrator, SettleDelays
from .state import CaptureStage, CaptureTrace

__all__ = [
    "encode_file_base64",
    "build_filename",
    "dated_directory",
    "ensure_dated_directory",
    "sanitize_window_name",
    "ScreenshotOrchestrator",
    "SettleDelays",
    "CaptureStage",
    "CaptureTrace",
]
