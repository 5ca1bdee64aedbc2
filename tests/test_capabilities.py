# file: tests/test_capabilities.py
from __future__ import annotations

import pytest

from phoneregion.core.capabilities import RegionCapabilities, is_integer_like
from phoneregion.metadata.indexer import build_indices
from phoneregion.metadata.model import ParsedNumber
from tests.factories import make_region


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("1", True),
        ("800", True),
        ("+44", True),
        ("-1", True),
        ("7abc", True),
        ("US", False),
        ("", False),
    ],
)
def test_is_integer_like(value: str, expected: bool) -> None:
    assert is_integer_like(value) is expected


def test_is_valid_region_code(caps: RegionCapabilities) -> None:
    assert caps.is_valid_region_code("US")
    assert caps.is_valid_region_code("us")
    assert not caps.is_valid_region_code("1")
    assert not caps.is_valid_region_code("800")
    assert not caps.is_valid_region_code("ZZ")
    assert not caps.is_valid_region_code(None)


def test_country_calling_code_for_region(caps: RegionCapabilities) -> None:
    assert caps.country_calling_code_for_region("US") == 1
    assert caps.country_calling_code_for_region("gb") == 44
    assert caps.country_calling_code_for_region(None) == 0
    assert caps.country_calling_code_for_region("ZZ") == 0
    assert caps.country_calling_code_for_region("800") == 0


def test_country_calling_code_for_valid_region(caps: RegionCapabilities) -> None:
    assert caps.country_calling_code_for_valid_region("DE") == 49
    assert caps.country_calling_code_for_valid_region("800") == 800
    assert caps.country_calling_code_for_valid_region("ZZ") is None
    assert caps.country_calling_code_for_valid_region(None) is None


def test_metadata_for_region(caps: RegionCapabilities) -> None:
    metadata = caps.metadata_for_region("us")
    assert metadata is not None
    assert metadata.id == "US"
    assert metadata.country_code == 1
    assert caps.metadata_for_region(None) is None
    assert caps.metadata_for_region("ZZ") is None


def test_metadata_for_non_geographic_entity(caps: RegionCapabilities) -> None:
    by_int = caps.metadata_for_non_geographic_entity(800)
    by_str = caps.metadata_for_non_geographic_entity("800")
    assert by_int is not None and by_int.id == "800"
    assert by_int is by_str
    assert caps.metadata_for_non_geographic_entity(999) is None


def test_metadata_for_region_or_calling_code(caps: RegionCapabilities) -> None:
    non_geo = caps.metadata_for_region_or_calling_code(800, "001")
    geo = caps.metadata_for_region_or_calling_code(1, "US")
    assert non_geo is not None and non_geo.id == "800"
    assert geo is not None and geo.id == "US"
    assert caps.metadata_for_region_or_calling_code(1, None) is None


@pytest.mark.parametrize(
    ("number", "expected"),
    [
        # US toll-free numbers cannot be dialled from abroad.
        (ParsedNumber(1, "8002345678"), False),
        (ParsedNumber(1, "6502530000"), True),
        # Region cannot be resolved.
        (ParsedNumber(1, "3105550000"), True),
        (ParsedNumber(999, "123456"), True),
        # Region without a no-international-dialling descriptor.
        (ParsedNumber(44, "8001234567"), True),
    ],
)
def test_can_be_internationally_dialled(
    caps: RegionCapabilities, number: ParsedNumber, expected: bool
) -> None:
    assert caps.can_be_internationally_dialled(number) is expected


def test_ndd_prefix(caps: RegionCapabilities) -> None:
    assert caps.ndd_prefix("US", False) == "1"
    assert caps.ndd_prefix("mx", True) == "01"
    assert caps.ndd_prefix("SG", False) is None
    assert caps.ndd_prefix("ZZ", False) is None
    assert caps.ndd_prefix(None, True) is None


def test_ndd_prefix_strips_carrier_code_placeholder() -> None:
    index = build_indices(
        [make_region("BY", 375, national_prefix="8~10"), make_region("XX", 999, national_prefix="")]
    )
    caps = RegionCapabilities(index)
    assert caps.ndd_prefix("BY", True) == "810"
    assert caps.ndd_prefix("BY", False) == "8~10"
    assert caps.ndd_prefix("XX", True) is None


def test_supported_regions_exclude_non_geographic_entities(caps: RegionCapabilities) -> None:
    regions = caps.supported_regions()
    assert sorted(regions) == sorted(
        ["US", "BS", "AG", "CA", "RU", "KZ", "GB", "GG", "JE", "DE", "MX", "AR", "SG"]
    )


def test_supported_calling_codes(caps: RegionCapabilities) -> None:
    assert sorted(caps.supported_global_network_calling_codes()) == [800, 979]
    assert caps.supported_calling_codes() == [1, 7, 44, 49, 52, 54, 65, 800, 979]


def test_supported_types_for_region(caps: RegionCapabilities) -> None:
    assert caps.supported_types_for_region("US") == [
        "fixed_line",
        "mobile",
        "toll_free",
        "premium_rate",
    ]
    assert caps.supported_types_for_region("gb") == [
        "fixed_line",
        "mobile",
        "toll_free",
        "premium_rate",
        "voip",
        "personal_number",
        "pager",
        "uan",
    ]
    assert caps.supported_types_for_region("ZZ") == []
    assert caps.supported_types_for_region("800") == []
    assert caps.supported_types_for_region(None) == []


def test_supported_types_for_non_geo_entity(caps: RegionCapabilities) -> None:
    assert caps.supported_types_for_non_geo_entity(800) == ["toll_free"]
    assert caps.supported_types_for_non_geo_entity("979") == ["premium_rate"]
    assert caps.supported_types_for_non_geo_entity(999) == []


def test_country_mobile_token(caps: RegionCapabilities) -> None:
    assert caps.country_mobile_token(54) == "9"
    assert caps.country_mobile_token(52) == "1"
    assert caps.country_mobile_token(1) == ""


def test_nanpa_and_support_checks(caps: RegionCapabilities) -> None:
    assert caps.is_nanpa_country("bs")
    assert not caps.is_nanpa_country("GB")
    assert not caps.is_nanpa_country(None)

    assert caps.is_supported_global_network_calling_code(800)
    assert not caps.is_supported_global_network_calling_code(1)
    assert not caps.is_supported_global_network_calling_code(None)

    assert caps.is_supported_region("us")
    assert not caps.is_supported_region("ZZ")
    assert not caps.is_supported_region(None)

    assert caps.is_valid_country_code(44)
    assert not caps.is_valid_country_code(999)
    assert not caps.is_valid_country_code(None)


def test_queries_are_repeatable(caps: RegionCapabilities) -> None:
    number = ParsedNumber(1, "8002345678")
    first = caps.can_be_internationally_dialled(number)
    assert first is False
    assert caps.can_be_internationally_dialled(number) is first
    assert caps.supported_regions() == caps.supported_regions()
    assert caps.ndd_prefix("GB", True) == caps.ndd_prefix("GB", True) == "0"
