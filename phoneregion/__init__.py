# file: phoneregion/__init__.py
# file: phoneregion/__init__.py
"""
phoneregion - region resolution and capability queries for phone numbers.

Given a calling code and national significant number, phoneregion tells which
region owns the number and answers questions about regions and calling codes
(international diallability, supported number types, national prefix, mobile
token) from a static catalog of per-region metadata.
"""

from __future__ import annotations

__version__ = "0.1.0"

from phoneregion.api import (
    can_be_internationally_dialled,
    country_calling_code_for_region,
    country_calling_code_for_valid_region,
    country_mobile_token,
    is_nanpa_country,
    is_supported_global_network_calling_code,
    is_supported_region,
    is_valid_country_code,
    is_valid_region_code,
    metadata_for_non_geographic_entity,
    metadata_for_region,
    metadata_for_region_or_calling_code,
    ndd_prefix,
    region_codes_for_country_code,
    region_for_country_code,
    region_for_number,
    supported_calling_codes,
    supported_global_network_calling_codes,
    supported_regions,
    supported_types_for_non_geo_entity,
    supported_types_for_region,
)
from phoneregion.core.capabilities import RegionCapabilities
from phoneregion.core.resolver import RegionResolver
from phoneregion.metadata.indexer import CatalogError, DuplicateRegionError, build_indices
from phoneregion.metadata.model import (
    UNKNOWN_REGION,
    MetadataIndex,
    NumberDescriptor,
    ParsedNumber,
    RegionMetadata,
)

__all__ = [
    "__version__",
    "CatalogError",
    "DuplicateRegionError",
    "MetadataIndex",
    "NumberDescriptor",
    "ParsedNumber",
    "RegionCapabilities",
    "RegionMetadata",
    "RegionResolver",
    "UNKNOWN_REGION",
    "build_indices",
    "can_be_internationally_dialled",
    "country_calling_code_for_region",
    "country_calling_code_for_valid_region",
    "country_mobile_token",
    "is_nanpa_country",
    "is_supported_global_network_calling_code",
    "is_supported_region",
    "is_valid_country_code",
    "is_valid_region_code",
    "metadata_for_non_geographic_entity",
    "metadata_for_region",
    "metadata_for_region_or_calling_code",
    "ndd_prefix",
    "region_codes_for_country_code",
    "region_for_country_code",
    "region_for_number",
    "supported_calling_codes",
    "supported_global_network_calling_codes",
    "supported_regions",
    "supported_types_for_non_geo_entity",
    "supported_types_for_region",
]
