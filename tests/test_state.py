"""Tests for capture stage tracking."""

import pytest

from deskshot_backend.capture.state import CaptureStage, CaptureTrace


def test_trace_starts_idle():
    trace = CaptureTrace()
    assert trace.current == CaptureStage.IDLE
    assert trace.names() == ["idle"]


def test_stages_may_be_skipped_but_not_revisited():
    trace = CaptureTrace()
    trace.advance(CaptureStage.DIRECTORY_READY)
    trace.advance(CaptureStage.CAPTURE)

    assert not trace.reached(CaptureStage.ACTIVATE_WINDOW)
    with pytest.raises(ValueError):
        trace.advance(CaptureStage.ENTER_FULLSCREEN)


def test_failed_trace_is_frozen():
    trace = CaptureTrace()
    trace.advance(CaptureStage.DIRECTORY_READY)
    trace.mark_failed("boom")

    with pytest.raises(RuntimeError):
        trace.advance(CaptureStage.CAPTURE)
    assert trace.to_dict() == {"stages": ["idle", "directory_ready"], "error": "boom"}
