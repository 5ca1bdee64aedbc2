# file: phoneregion/registry.py
"""
Process-wide region index.

The index is built once, on first use or by an explicit `initialize()` call,
behind a lock so concurrent first access builds it exactly once. After that
every accessor is a lock-free read of immutable state.
"""

from __future__ import annotations

import logging
import threading
from typing import Iterable

from phoneregion.config import PhoneregionSettings, load_settings
from phoneregion.core.capabilities import RegionCapabilities
from phoneregion.core.resolver import RegionResolver
from phoneregion.metadata.catalog import catalog_from_phonenumbers, load_catalog
from phoneregion.metadata.indexer import CatalogError, build_indices
from phoneregion.metadata.model import MetadataIndex, RegionMetadata

logger = logging.getLogger(__name__)

_lock = threading.Lock()
_capabilities: RegionCapabilities | None = None


def _catalog_for(settings: PhoneregionSettings) -> list[RegionMetadata]:
    source = settings.resolved_catalog_source()
    if source == "file":
        if settings.catalog_path is None:
            raise CatalogError("catalog_source 'file' requires catalog_path")
        return load_catalog(settings.catalog_path)
    if source == "sample":
        return load_catalog()
    return catalog_from_phonenumbers()


def initialize(
    catalog: Iterable[RegionMetadata] | None = None,
    *,
    settings: PhoneregionSettings | None = None,
) -> MetadataIndex:
    """
    Build the process-wide index if it has not been built yet.

    Args:
        catalog: Records to index. If omitted, the catalog named by `settings`
            is loaded (default: `phonenumbers` metadata).
        settings: Settings used to pick the catalog; loaded from the
            environment if omitted.

    Returns the index in use. Calling this again after initialization is a
    no-op that returns the existing index; arguments are then ignored.

    Raises:
        CatalogError: if the catalog is malformed. Nothing is installed.
    """

    global _capabilities
    if _capabilities is not None:
        return _capabilities.resolver.index

    with _lock:
        if _capabilities is not None:
            return _capabilities.resolver.index

        if settings is None:
            settings = load_settings()
        if catalog is None:
            logger.info("Loading region catalog from %s", settings.resolved_catalog_source())
            catalog = _catalog_for(settings)

        index = build_indices(catalog, allow_duplicates=settings.allow_duplicate_regions)
        _capabilities = RegionCapabilities(index, RegionResolver(index))
        return index


def get_capabilities() -> RegionCapabilities:
    caps = _capabilities
    if caps is None:
        initialize()
        caps = _capabilities
        assert caps is not None
    return caps


def get_resolver() -> RegionResolver:
    return get_capabilities().resolver


def get_index() -> MetadataIndex:
    return get_resolver().index


def is_initialized() -> bool:
    return _capabilities is not None


def reset() -> None:
    """Drop the process-wide index. Intended for tests only."""

    global _capabilities
    with _lock:
        _capabilities = None
