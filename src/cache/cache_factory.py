# src/cache/cache_factory.py — v3
"""Factory for slot store and image cache instantiation."""

from __future__ import annotations

from fotocore.cache.base_slot_store import BaseSlotStore
from fotocore.cache.image_cache import DEFAULT_SLOT_NAME, ImageCache
from fotocore.config.settings import Settings

_DEFAULT_CACHE_ROOT = "~/.fotocore/cache"


def create_slot_store(settings: Settings | None = None) -> BaseSlotStore:
    """Instantiate the configured durable slot backend.

    Args:
        settings: Application settings. Defaults to JSON backend.

    Returns:
        Configured BaseSlotStore implementation.
    """
    backend = "json" if settings is None else settings.cache_backend
    cache_root = _DEFAULT_CACHE_ROOT if settings is None else str(settings.cache_root)

    if backend == "json":
        from fotocore.cache.json_slot_store import JsonSlotStore
        return JsonSlotStore(cache_root=cache_root)

    if backend == "sqlite":
        from fotocore.cache.sqlite_slot_store import SqliteSlotStore
        return SqliteSlotStore(db_path=f"{cache_root}/fotocore_cache.db")

    raise ValueError(f"Unsupported cache backend: {backend!r}")


def create_image_cache(settings: Settings | None = None) -> ImageCache:
    """Build an ImageCache over the configured slot store."""
    slot_name = DEFAULT_SLOT_NAME if settings is None else settings.cache_slot_name
    return ImageCache(create_slot_store(settings), slot_name=slot_name)
