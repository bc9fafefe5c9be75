"""Tests for reading captured files back as base64."""

import base64

import pytest

from deskshot_backend.capture.encoding import encode_file_base64
from deskshot_backend.errors import EncodingError


def test_encodes_raw_base64_without_prefix(tmp_path):
    path = tmp_path / "shot.png"
    payload = b"\x89PNG\r\n\x1a\n" + bytes(range(256))
    path.write_bytes(payload)

    encoded = encode_file_base64(path)

    assert not encoded.startswith("data:")
    assert base64.b64decode(encoded, validate=True) == payload


def test_missing_file_raises_encoding_error(tmp_path):
    with pytest.raises(EncodingError) as exc_info:
        encode_file_base64(tmp_path / "nope.png")

    assert str(exc_info.value).startswith("Failed to convert image to base64:")
    assert exc_info.value.status_code == 500
