# tests/unit/imaging/test_unit_heic.py — v1
"""Tests for imaging/heic.py — HEIC detection and JPEG normalisation."""

from __future__ import annotations

import io
from unittest.mock import patch

import pytest

from fotocore.core.errors import ImageConversionError
from fotocore.imaging import heic
from fotocore.imaging.heic import ensure_jpeg_compatible, is_heic_like


class TestIsHeicLike:
    @pytest.mark.parametrize("filename,media_type,expected", [
        ("IMG_1.HEIC", None, True),
        ("img.heif", None, True),
        ("img.jpg", "image/heic", True),
        ("img", "IMAGE/HEIF", True),
        ("img.jpg", "image/jpeg", False),
        ("heic.png", None, False),
    ])
    def test_detection(self, filename, media_type, expected):
        assert is_heic_like(filename, media_type) is expected


class TestEnsureJpegCompatible:
    def test_passthrough_without_converter(self):
        data = b"\xff\xd8\xff\xe0jpeg"
        with patch.object(heic, "get_jpeg_converter") as getter:
            assert ensure_jpeg_compatible("a.jpg", data) is data
        getter.assert_not_called()

    def test_converts_heic(self):
        with patch.object(heic, "get_jpeg_converter", return_value=lambda d: b"JPEG:" + d):
            assert ensure_jpeg_compatible("a.heic", b"raw") == b"JPEG:raw"

    def test_conversion_failure_wrapped(self):
        def broken(data: bytes) -> bytes:
            raise OSError("cannot identify image file")

        with patch.object(heic, "get_jpeg_converter", return_value=broken):
            with pytest.raises(ImageConversionError, match="a.heic"):
                ensure_jpeg_compatible("a.heic", b"raw")

    def test_missing_dependency_reported(self):
        with patch.object(
            heic, "get_jpeg_converter",
            side_effect=ImageConversionError("HEIC support requires the 'heic' extra"),
        ):
            with pytest.raises(ImageConversionError, match="heic"):
                ensure_jpeg_compatible("a.heic", b"raw")


class TestGetJpegConverter:
    def test_round_trip_with_pillow(self):
        pytest.importorskip("pillow_heif")
        image_mod = pytest.importorskip("PIL.Image")

        buf = io.BytesIO()
        image_mod.new("RGB", (4, 4), (200, 10, 10)).save(buf, format="PNG")
        jpeg = heic.get_jpeg_converter()(buf.getvalue())
        assert jpeg.startswith(b"\xff\xd8")
