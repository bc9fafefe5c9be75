"""
Screenshot orchestrator - the capture sequence.
Implements IDLE → DIRECTORY_READY → [ACTIVATE → SUBVIEW → FULLSCREEN] →
CAPTURE → [EXIT FULLSCREEN] → DONE, one step after another.

There is no acknowledgement channel from the target application, so every
UI-changing step is followed by a fixed settle delay before the next one.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional, Tuple

from ..errors import CaptureError
from ..execution.automation import Automation
from ..schemas.capture import CaptureRequest
from ..schemas.results import CaptureResult
from ..utils.logger import get_logger
from .encoding import encode_file_base64
from .naming import build_filename, ensure_dated_directory
from .state import CaptureStage, CaptureTrace

logger = get_logger(__name__)


# Seconds to wait after each UI-changing step
ACTIVATE_SETTLE_SECONDS = 1.0
SUBVIEW_SETTLE_SECONDS = 2.0
FULLSCREEN_SETTLE_SECONDS = 2.0

# Modifier sets passed to Automation.send_keystroke
PRIMARY_MODIFIERS: Tuple[str, ...] = ("command",)
FULLSCREEN_MODIFIERS: Tuple[str, ...] = ("command", "control")
FULLSCREEN_KEY = "f"


@dataclass
class SettleDelays:
    activate: float = ACTIVATE_SETTLE_SECONDS
    subview: float = SUBVIEW_SETTLE_SECONDS
    fullscreen: float = FULLSCREEN_SETTLE_SECONDS


def _local_now() -> datetime:
    return datetime.now().astimezone()


class ScreenshotOrchestrator:
    """
    Runs one capture sequence per call against an injected Automation.

    Nothing is shared between calls, so concurrent requests need no lock.
    They can still race at the OS level (two fullscreen toggles on the same
    app); that is accepted.
    """

    def __init__(
        self,
        automation: Automation,
        output_root: Optional[Path] = None,
        delays: Optional[SettleDelays] = None,
        clock: Callable[[], datetime] = _local_now,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self._automation = automation
        root = Path(output_root) if output_root else Path.home() / "Downloads"
        self._output_root = root.expanduser().absolute()
        self._delays = delays or SettleDelays()
        self._clock = clock
        self._sleep = sleep

    @property
    def output_root(self) -> Path:
        return self._output_root

    def run(self, request: CaptureRequest) -> CaptureResult:
        """Capture, then encode the file if the caller asked for the image."""
        trace = CaptureTrace()
        path = self.capture(request, trace)

        image = None
        if request.include_base64:
            image = encode_file_base64(path)
            logger.debug("Image converted to base64")

        result = CaptureResult(file_path=path, image_base64=image, stages=trace.names())
        logger.debug("Capture finished: %s", result.to_dict())
        return result

    def capture(self, request: CaptureRequest, trace: Optional[CaptureTrace] = None) -> Path:
        """
        Run the capture sequence and return the absolute file path.

        Any failing step aborts the sequence. Steps already taken are not
        undone: a failed capture after entering fullscreen stays fullscreen.

        Raises:
            CaptureError: Wrapping whatever the failing step raised.
        """
        trace = trace or CaptureTrace()
        window = request.window_name

        logger.info(
            "Starting screenshot capture for region: %s, format: %s, window: %s",
            request.region, request.format, window or "current",
        )

        try:
            now = self._clock()
            directory = ensure_dated_directory(self._output_root, now)
            path = directory / build_filename(now, window)
            trace.advance(CaptureStage.DIRECTORY_READY)

            if request.switches_window:
                self._automation.activate_application(window)
                trace.advance(CaptureStage.ACTIVATE_WINDOW)
                logger.debug("Activated %s", window)
                self._sleep(self._delays.activate)

                if request.switches_subview:
                    self._automation.send_keystroke(request.subwindow_key, PRIMARY_MODIFIERS)
                    trace.advance(CaptureStage.SWITCH_SUBVIEW)
                    logger.debug("Switched %s to sub-view '%s'", window, request.subwindow_key)
                    self._sleep(self._delays.subview)
                elif request.switch_to_subwindow:
                    logger.debug("Sub-view switch requested without a key, skipping")

                self._automation.send_keystroke(FULLSCREEN_KEY, FULLSCREEN_MODIFIERS)
                trace.advance(CaptureStage.ENTER_FULLSCREEN)
                logger.debug("Made %s fullscreen", window)
                self._sleep(self._delays.fullscreen)

            self._automation.capture_screen_to_file(path)
            trace.advance(CaptureStage.CAPTURE)
            logger.debug("Screenshot taken")

            if request.switches_window:
                self._automation.send_keystroke(FULLSCREEN_KEY, FULLSCREEN_MODIFIERS)
                trace.advance(CaptureStage.EXIT_FULLSCREEN)
                logger.debug("Exited fullscreen mode for %s", window)

        except Exception as e:
            trace.mark_failed(str(e))
            logger.error("Screenshot error at stage %s: %s", trace.current.value, e)
            raise CaptureError(f"Screenshot capture failed: {e}") from e

        trace.advance(CaptureStage.DONE)
        logger.info("Screenshot saved to: %s", path)
        return path
