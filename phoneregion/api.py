# file: phoneregion/api.py
"""
Module-level query functions over the process-wide index.

Each call reaches the index through `phoneregion.registry`, which builds it on
first use. Use `RegionCapabilities` directly to query an index of your own.
"""

from __future__ import annotations

from phoneregion.metadata.model import ParsedNumber, RegionMetadata
from phoneregion.registry import get_capabilities, get_resolver


def region_for_country_code(calling_code: int) -> str:
    return get_resolver().region_for_country_code(calling_code)


def region_for_number(country_code: int, national_number: str) -> str | None:
    return get_resolver().region_for_number(country_code, national_number)


def region_codes_for_country_code(calling_code: int) -> list[str]:
    return get_resolver().region_codes_for_country_code(calling_code)


def country_calling_code_for_region(region_id: str | None) -> int:
    return get_capabilities().country_calling_code_for_region(region_id)


def country_calling_code_for_valid_region(region_id: str | None) -> int | None:
    return get_capabilities().country_calling_code_for_valid_region(region_id)


def country_mobile_token(calling_code: int) -> str:
    return get_capabilities().country_mobile_token(calling_code)


def metadata_for_region(region_id: str | None) -> RegionMetadata | None:
    return get_capabilities().metadata_for_region(region_id)


def metadata_for_non_geographic_entity(calling_code: int | str) -> RegionMetadata | None:
    return get_capabilities().metadata_for_non_geographic_entity(calling_code)


def metadata_for_region_or_calling_code(
    calling_code: int, region_id: str | None
) -> RegionMetadata | None:
    return get_capabilities().metadata_for_region_or_calling_code(calling_code, region_id)


def can_be_internationally_dialled(number: ParsedNumber) -> bool:
    return get_capabilities().can_be_internationally_dialled(number)


def ndd_prefix(region_id: str | None, strip_non_digits: bool) -> str | None:
    return get_capabilities().ndd_prefix(region_id, strip_non_digits)


def supported_regions() -> list[str]:
    return get_capabilities().supported_regions()


def supported_global_network_calling_codes() -> list[int]:
    return get_capabilities().supported_global_network_calling_codes()


def supported_calling_codes() -> list[int]:
    return get_capabilities().supported_calling_codes()


def supported_types_for_region(region_id: str | None) -> list[str]:
    return get_capabilities().supported_types_for_region(region_id)


def supported_types_for_non_geo_entity(calling_code: int | str) -> list[str]:
    return get_capabilities().supported_types_for_non_geo_entity(calling_code)


def is_valid_region_code(region_id: str | None) -> bool:
    return get_capabilities().is_valid_region_code(region_id)


def is_supported_region(region_id: str | None) -> bool:
    return get_capabilities().is_supported_region(region_id)


def is_supported_global_network_calling_code(calling_code: int | None) -> bool:
    return get_capabilities().is_supported_global_network_calling_code(calling_code)


def is_valid_country_code(calling_code: int | None) -> bool:
    return get_capabilities().is_valid_country_code(calling_code)


def is_nanpa_country(region_id: str | None) -> bool:
    return get_capabilities().is_nanpa_country(region_id)
