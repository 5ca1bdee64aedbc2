# file: phoneregion/core/matching.py
"""
Pattern matching against region number descriptors.

Mirrors libphonenumber's description matching: a number matches a descriptor
when its length is one of the possible lengths (if any are listed) and the
whole digit string matches the national-number pattern.
"""

from __future__ import annotations

import re
from functools import lru_cache

from phoneregion.metadata.model import NumberDescriptor, RegionMetadata

# Checked in this order before fixed-line/mobile.
_SPECIAL_TYPES: tuple[str, ...] = (
    "premium_rate",
    "toll_free",
    "shared_cost",
    "voip",
    "personal_number",
    "pager",
    "uan",
    "voicemail",
)


@lru_cache(maxsize=4096)
def _compile(pattern: str) -> re.Pattern[str]:
    return re.compile(f"(?:{pattern})")


def matches(national_number: str, descriptor: NumberDescriptor | None) -> bool:
    """Return True if `national_number` fully matches `descriptor`."""

    if descriptor is None or not descriptor.pattern:
        return False
    lengths = descriptor.possible_lengths
    if lengths and len(national_number) not in lengths:
        return False
    return _compile(descriptor.pattern).fullmatch(national_number) is not None


def match_at_start(national_number: str, pattern: str) -> bool:
    """Return True if `pattern` matches a prefix of `national_number`."""

    return _compile(pattern).match(national_number) is not None


def classify(national_number: str, metadata: RegionMetadata) -> str:
    """
    Return the number type tag of `national_number` within a region.

    Returns "unknown" when no descriptor matches. A region without a general
    descriptor skips the general pre-check.
    """

    if metadata.general_desc is not None and not matches(national_number, metadata.general_desc):
        return "unknown"

    for number_type in _SPECIAL_TYPES:
        if matches(national_number, metadata.descriptor(number_type)):
            return number_type

    same_pattern = metadata.same_mobile_and_fixed_line_pattern
    if matches(national_number, metadata.descriptor("fixed_line")):
        if same_pattern or matches(national_number, metadata.descriptor("mobile")):
            return "fixed_line_or_mobile"
        return "fixed_line"

    if not same_pattern and matches(national_number, metadata.descriptor("mobile")):
        return "mobile"
    return "unknown"
