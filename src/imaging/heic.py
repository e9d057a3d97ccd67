# src/imaging/heic.py — v1
"""HEIC/HEIF to JPEG normalisation before fingerprinting and analysis.

Some phones save HEIC photos that the analysis API does not accept. The
converter (Pillow with the pillow-heif opener) is resolved on first use and
shared afterwards; other formats pass through without touching Pillow.
"""

from __future__ import annotations

import io
import logging
from collections.abc import Callable
from functools import lru_cache
from pathlib import PurePath

from fotocore.core.errors import ImageConversionError

logger = logging.getLogger(__name__)

HEIC_MEDIA_TYPES = frozenset({"image/heic", "image/heif"})
HEIC_SUFFIXES = frozenset({".heic", ".heif"})
JPEG_QUALITY = 90


def is_heic_like(filename: str, media_type: str | None = None) -> bool:
    """True for HEIC/HEIF by media type or file extension."""
    if media_type and media_type.lower() in HEIC_MEDIA_TYPES:
        return True
    return PurePath(filename).suffix.lower() in HEIC_SUFFIXES


@lru_cache(maxsize=1)
def get_jpeg_converter() -> Callable[[bytes], bytes]:
    """Resolve the HEIC-capable converter once.

    Raises:
        ImageConversionError: If Pillow or pillow-heif is not installed.
    """
    try:
        from PIL import Image
        from pillow_heif import register_heif_opener
    except ImportError as e:
        raise ImageConversionError(
            "HEIC support requires the 'heic' extra (pillow, pillow-heif)"
        ) from e

    register_heif_opener()
    logger.debug("HEIC converter initialised")

    def convert(data: bytes) -> bytes:
        with Image.open(io.BytesIO(data)) as img:
            out = io.BytesIO()
            img.convert("RGB").save(out, format="JPEG", quality=JPEG_QUALITY)
            return out.getvalue()

    return convert


def ensure_jpeg_compatible(
    filename: str, data: bytes, media_type: str | None = None,
) -> bytes:
    """Return JPEG bytes for HEIC input, the original bytes otherwise.

    The filename is not changed by the caller's pipeline, so results still
    match uploads by name.

    Raises:
        ImageConversionError: If the HEIC payload cannot be decoded.
    """
    if not is_heic_like(filename, media_type):
        return data

    convert = get_jpeg_converter()
    try:
        return convert(data)
    except Exception as e:
        raise ImageConversionError(f"Failed to convert {filename} to JPEG: {e}") from e
