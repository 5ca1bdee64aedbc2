from __future__ import annotations

import pytest

from phoneregion.core.matching import classify, match_at_start, matches
from phoneregion.metadata.model import MetadataIndex, NumberDescriptor, RegionMetadata


def test_matches_requires_full_string_match() -> None:
    desc = NumberDescriptor(pattern=r"\d{3}")
    assert matches("123", desc)
    assert not matches("1234", desc)
    assert not matches("12", desc)


def test_matches_checks_possible_lengths_first() -> None:
    desc = NumberDescriptor(pattern=r"\d+", possible_lengths=(8,))
    assert matches("12345678", desc)
    assert not matches("123456789", desc)


def test_matches_without_pattern_is_false() -> None:
    assert not matches("123", None)
    assert not matches("123", NumberDescriptor(pattern=None, possible_lengths=(3,)))
    assert not matches("123", NumberDescriptor(pattern=""))


def test_match_at_start_is_a_prefix_match() -> None:
    assert match_at_start("2687201234", "268")
    assert not match_at_start("2426801234", "268")


def test_match_at_start_with_alternation() -> None:
    assert match_at_start("7012345678", "33|7")
    assert match_at_start("3312345678", "33|7")
    assert not match_at_start("3712345678", "33|7")


@pytest.mark.parametrize(
    ("number", "expected"),
    [
        ("1212345678", "fixed_line"),
        ("7400123456", "mobile"),
        ("8001234567", "toll_free"),
        ("9012345678", "premium_rate"),
        ("7012345678", "personal_number"),
        ("5612345678", "voip"),
        ("7640123456", "pager"),
        ("5512345678", "uan"),
        # Outside the general description.
        ("4012345678", "unknown"),
        # Wrong length.
        ("121234567", "unknown"),
    ],
)
def test_classify_gb_numbers(sample_index: MetadataIndex, number: str, expected: str) -> None:
    assert classify(number, sample_index.regions["GB"]) == expected


def test_classify_same_fixed_and_mobile_pattern_is_fixed_line_or_mobile(
    sample_index: MetadataIndex,
) -> None:
    assert classify("6502530000", sample_index.regions["US"]) == "fixed_line_or_mobile"
    # Matches the general description only.
    assert classify("3105550000", sample_index.regions["US"]) == "unknown"


def test_classify_overlapping_fixed_and_mobile_patterns() -> None:
    metadata = RegionMetadata(
        id="XX",
        country_code=999,
        types={
            "fixed_line": NumberDescriptor(pattern=r"[2-5]\d{6}"),
            "mobile": NumberDescriptor(pattern=r"[5-9]\d{6}"),
        },
    )
    assert classify("2123456", metadata) == "fixed_line"
    assert classify("5123456", metadata) == "fixed_line_or_mobile"
    assert classify("8123456", metadata) == "mobile"
    assert classify("0123456", metadata) == "unknown"


def test_classify_without_general_descriptor_uses_types() -> None:
    metadata = RegionMetadata(
        id="XX",
        country_code=999,
        types={"toll_free": NumberDescriptor(pattern=r"800\d{4}")},
    )
    assert metadata.general_desc is None
    assert classify("8001234", metadata) == "toll_free"
    assert classify("9001234", metadata) == "unknown"
