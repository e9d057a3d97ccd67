# src/core/errors.py — v1
"""Project-wide exception hierarchy."""

from __future__ import annotations


class FotocoreError(Exception):
    """Base class for recoverable fotocore failures."""


class SessionFormatError(FotocoreError):
    """Raised when a session snapshot cannot be loaded."""


class ImageConversionError(FotocoreError):
    """Raised when an image cannot be normalised to JPEG."""
