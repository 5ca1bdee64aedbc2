# file: phoneregion/core/capabilities.py
"""
Capability queries over the region index.

Every method is a pure read of the immutable index. Lookup misses come back
as sentinel values (0, None, empty lists, False); none of them raises.
"""

from __future__ import annotations

import re

from phoneregion.core.matching import matches
from phoneregion.core.resolver import RegionResolver
from phoneregion.metadata.model import (
    CARRIER_CODE_PLACEHOLDER,
    MOBILE_TOKEN_MAPPINGS,
    NANPA_COUNTRY_CODE,
    NUMBER_TYPES,
    REGION_CODE_FOR_NON_GEO_ENTITY,
    MetadataIndex,
    ParsedNumber,
    RegionMetadata,
)


_LEADING_INTEGER = re.compile(r"[+-]?\d+")

_UNSUPPORTABLE_TYPES = frozenset({"fixed_line_or_mobile", "unknown"})


def is_integer_like(value: str) -> bool:
    """
    Return True if `value` starts with an integer ("1", "800", "+44", "7abc").

    Region ids never do; non-geographic entities are keyed by such strings.
    """

    return _LEADING_INTEGER.match(value) is not None


def _supported_types(metadata: RegionMetadata) -> list[str]:
    out: list[str] = []
    for number_type in NUMBER_TYPES:
        if number_type in _UNSUPPORTABLE_TYPES:
            continue
        desc = metadata.descriptor(number_type)
        if desc is not None and desc.has_data:
            out.append(number_type)
    return out


class RegionCapabilities:
    """Public questions about regions and calling codes."""

    def __init__(self, index: MetadataIndex, resolver: RegionResolver | None = None) -> None:
        self._index = index
        self._resolver = resolver if resolver is not None else RegionResolver(index)

    @property
    def resolver(self) -> RegionResolver:
        return self._resolver

    # Metadata lookups

    def metadata_for_region(self, region_id: str | None) -> RegionMetadata | None:
        if region_id is None:
            return None
        return self._index.regions.get(region_id.upper())

    def metadata_for_non_geographic_entity(self, calling_code: int | str) -> RegionMetadata | None:
        return self.metadata_for_region(str(calling_code))

    def metadata_for_region_or_calling_code(
        self, calling_code: int, region_id: str | None
    ) -> RegionMetadata | None:
        if region_id == REGION_CODE_FOR_NON_GEO_ENTITY:
            return self.metadata_for_non_geographic_entity(calling_code)
        return self.metadata_for_region(region_id)

    # Region and calling-code validity

    def is_valid_region_code(self, region_id: str | None) -> bool:
        if region_id is None or is_integer_like(region_id):
            return False
        return region_id.upper() in self._index.regions

    def is_supported_region(self, region_id: str | None) -> bool:
        if region_id is None:
            return False
        return region_id.upper() in self._index.regions

    def is_supported_global_network_calling_code(self, calling_code: int | None) -> bool:
        if calling_code is None:
            return False
        return str(calling_code) in self._index.regions

    def is_valid_country_code(self, calling_code: int | None) -> bool:
        if calling_code is None:
            return False
        return calling_code in self._index.calling_codes

    def is_nanpa_country(self, region_id: str | None) -> bool:
        if region_id is None:
            return False
        return region_id.upper() in self._index.calling_codes.get(NANPA_COUNTRY_CODE, ())

    # Calling codes

    def country_calling_code_for_region(self, region_id: str | None) -> int:
        """Return the calling code of a region, or 0 for an invalid or unknown id."""

        if not self.is_valid_region_code(region_id):
            return 0
        metadata = self.metadata_for_region(region_id)
        return metadata.country_code if metadata is not None else 0

    def country_calling_code_for_valid_region(self, region_id: str | None) -> int | None:
        """
        Return the calling code of a region that has metadata, or None if it has none.

        Unlike `country_calling_code_for_region`, a miss is reported as None
        rather than folded into the 0 sentinel.
        """

        metadata = self.metadata_for_region(region_id)
        if metadata is None:
            return None
        return metadata.country_code

    def country_mobile_token(self, calling_code: int) -> str:
        return MOBILE_TOKEN_MAPPINGS.get(calling_code, "")

    # Number-level questions

    def can_be_internationally_dialled(self, number: ParsedNumber) -> bool:
        """
        Return False only if the number can be dialled from inside its region alone.

        Numbers whose region cannot be resolved are assumed diallable. The
        number itself is not validated.
        """

        region_id = self._resolver.region_for_number(number.country_code, number.national_number)
        metadata = self.metadata_for_region(region_id)
        if metadata is None:
            return True
        return not matches(number.national_number, metadata.no_international_dialing)

    def ndd_prefix(self, region_id: str | None, strip_non_digits: bool) -> str | None:
        """
        Return the national dialling prefix of a region, or None if it has none.

        With `strip_non_digits`, the carrier-code placeholder "~" is removed.
        """

        metadata = self.metadata_for_region(region_id)
        if metadata is None or not metadata.national_prefix:
            return None
        if strip_non_digits:
            return metadata.national_prefix.replace(CARRIER_CODE_PLACEHOLDER, "")
        return metadata.national_prefix

    # Supported sets

    def supported_regions(self) -> list[str]:
        return [key for key in self._index.regions if not is_integer_like(key)]

    def supported_global_network_calling_codes(self) -> list[int]:
        codes: list[int] = []
        for key in self._index.regions:
            m = _LEADING_INTEGER.match(key)
            if m is not None:
                codes.append(int(m.group()))
        return codes

    def supported_calling_codes(self) -> list[int]:
        codes = set(self.supported_global_network_calling_codes())
        codes.update(self._index.calling_codes)
        return sorted(codes)

    def supported_types_for_region(self, region_id: str | None) -> list[str]:
        if not self.is_valid_region_code(region_id):
            return []
        metadata = self.metadata_for_region(region_id)
        return _supported_types(metadata) if metadata is not None else []

    def supported_types_for_non_geo_entity(self, calling_code: int | str) -> list[str]:
        metadata = self.metadata_for_non_geographic_entity(calling_code)
        if metadata is None:
            return []
        return _supported_types(metadata)
