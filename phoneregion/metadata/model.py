# file: phoneregion/metadata/model.py
"""
Region metadata records and the immutable lookup index built from them.

These types carry no behavior beyond small derived properties; matching and
resolution live in `phoneregion.core`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Literal, Mapping

NumberType = Literal[
    "fixed_line",
    "mobile",
    "fixed_line_or_mobile",
    "toll_free",
    "premium_rate",
    "shared_cost",
    "voip",
    "personal_number",
    "pager",
    "uan",
    "voicemail",
    "unknown",
]

NUMBER_TYPES: tuple[str, ...] = (
    "fixed_line",
    "mobile",
    "fixed_line_or_mobile",
    "toll_free",
    "premium_rate",
    "shared_cost",
    "voip",
    "personal_number",
    "pager",
    "uan",
    "voicemail",
    "unknown",
)

UNKNOWN_REGION = "ZZ"
REGION_CODE_FOR_NON_GEO_ENTITY = "001"
NANPA_COUNTRY_CODE = 1
CARRIER_CODE_PLACEHOLDER = "~"

# Digit inserted before the area code when dialling a mobile number from abroad.
MOBILE_TOKEN_MAPPINGS: Mapping[int, str] = MappingProxyType({52: "1", 54: "9"})


@dataclass(frozen=True, slots=True)
class NumberDescriptor:
    """
    A national-number pattern plus the lengths it may take.

    An empty `possible_lengths` means the length is not constrained.
    """

    pattern: str | None = None
    possible_lengths: tuple[int, ...] = ()
    example_number: str | None = None

    @property
    def has_data(self) -> bool:
        return bool(self.pattern) or bool(self.example_number)


@dataclass(frozen=True, slots=True)
class RegionMetadata:
    """Metadata for one geographic region or non-geographic entity."""

    id: str
    country_code: int
    national_prefix: str | None = None
    leading_digits: str | None = None
    main_country_for_code: bool = False
    general_desc: NumberDescriptor | None = None
    no_international_dialing: NumberDescriptor | None = None
    types: Mapping[str, NumberDescriptor] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Copy into a read-only view so indexed metadata cannot change after load.
        object.__setattr__(self, "types", MappingProxyType(dict(self.types)))

    @property
    def has_leading_digits(self) -> bool:
        return bool(self.leading_digits)

    @property
    def same_mobile_and_fixed_line_pattern(self) -> bool:
        fixed = self.types.get("fixed_line")
        mobile = self.types.get("mobile")
        if fixed is None or mobile is None:
            return False
        return bool(fixed.pattern) and fixed.pattern == mobile.pattern

    def descriptor(self, number_type: str) -> NumberDescriptor | None:
        return self.types.get(number_type)


@dataclass(frozen=True, slots=True)
class ParsedNumber:
    """A number reduced to its calling code and national significant number."""

    country_code: int
    national_number: str


@dataclass(frozen=True, slots=True)
class MetadataIndex:
    """
    The two read-only lookup tables built from a catalog.

    Fields:
        regions: uppercased region id -> metadata.
        calling_codes: calling code -> region ids in first-seen catalog order.
    """

    regions: Mapping[str, RegionMetadata]
    calling_codes: Mapping[int, tuple[str, ...]]
