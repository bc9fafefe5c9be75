"""Read a captured image back and encode it for inline transport."""

from __future__ import annotations

import base64
from pathlib import Path

from ..errors import EncodingError
from ..utils.logger import get_logger

logger = get_logger(__name__)


def encode_file_base64(path: Path) -> str:
    """
    Raw base64 of the file's bytes (no data URI prefix).

    Raises:
        EncodingError: If the file cannot be read.
    """
    try:
        data = Path(path).read_bytes()
    except OSError as e:
        logger.error("Error converting image to base64: %s", e)
        raise EncodingError(f"Failed to convert image to base64: {e}") from e
    return base64.b64encode(data).decode("ascii")
