# src/cache/base_slot_store.py — v2
"""Abstract durable slot store interface.

A slot store holds opaque serialized payloads under named keys. The image
cache uses a single slot; the store knows nothing about its content.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class BaseSlotStore(ABC):
    """Unified interface for durable slot backends.

    Implementations may raise ``OSError`` (or a backend error) on I/O
    failure; callers decide whether that is fatal.
    """

    @abstractmethod
    def read(self, key: str) -> str | None:
        """Return the payload stored under ``key``, or None if absent."""

    @abstractmethod
    def write(self, key: str, payload: str) -> None:
        """Replace the payload stored under ``key``."""

    @abstractmethod
    def remove(self, key: str) -> None:
        """Delete ``key`` entirely. Missing keys are ignored."""

    def close(self) -> None:
        """Release backend resources. File-based stores hold none."""
