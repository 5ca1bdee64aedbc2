# file: phoneregion/metadata/indexer.py
"""
Build the region and calling-code indices from a catalog.

The catalog is walked exactly once. The returned `MetadataIndex` is frozen:
both maps are wrapped in `MappingProxyType` and region lists are tuples.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from types import MappingProxyType
from typing import Iterable

from phoneregion.metadata.model import MetadataIndex, RegionMetadata

logger = logging.getLogger(__name__)


class CatalogError(ValueError):
    """Raised when catalog data cannot be turned into a usable index."""


class DuplicateRegionError(CatalogError):
    """Raised when two catalog records share a region id."""


def _validate(record: RegionMetadata, position: int) -> None:
    if not isinstance(record.id, str) or not record.id.strip():
        raise CatalogError(f"Catalog entry {position} has an empty region id.")
    cc = record.country_code
    if isinstance(cc, bool) or not isinstance(cc, int) or cc <= 0:
        raise CatalogError(
            f"Catalog entry {position} ({record.id!r}) has an invalid country code: {cc!r}"
        )


def build_indices(
    catalog: Iterable[RegionMetadata], *, allow_duplicates: bool = False
) -> MetadataIndex:
    """
    Index a catalog by region id and by calling code.

    Args:
        catalog: Region records in catalog order.
        allow_duplicates: If True, a repeated region id replaces the earlier
            record (last write wins) and a warning is logged. If False, a
            repeated id raises `DuplicateRegionError`.

    Raises:
        CatalogError: on an empty id or a non-positive calling code.
        DuplicateRegionError: on a repeated id when duplicates are not allowed.
    """

    regions: dict[str, RegionMetadata] = {}
    calling_codes: dict[int, list[str]] = {}

    for position, record in enumerate(catalog):
        _validate(record, position)
        key = record.id.upper()
        if key in regions:
            if not allow_duplicates:
                raise DuplicateRegionError(f"Duplicate region id in catalog: {key}")
            logger.warning("Duplicate region id %s in catalog; keeping the later entry", key)
        if record.id != key:
            record = replace(record, id=key)
        regions[key] = record
        calling_codes.setdefault(record.country_code, []).append(key)

    logger.info(
        "Indexed %d regions across %d calling codes", len(regions), len(calling_codes)
    )
    return MetadataIndex(
        regions=MappingProxyType(regions),
        calling_codes=MappingProxyType({cc: tuple(ids) for cc, ids in calling_codes.items()}),
    )
