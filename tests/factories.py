# file: tests/factories.py
from __future__ import annotations

from typing import Any

from phoneregion.metadata.model import NumberDescriptor, RegionMetadata


def make_region(
    region_id: str,
    country_code: int,
    *,
    fixed_line: str | None = r"\d{10}",
    leading_digits: str | None = None,
    main: bool = False,
    national_prefix: str | None = None,
    **extra: Any,
) -> RegionMetadata:
    types = {}
    if fixed_line is not None:
        types["fixed_line"] = NumberDescriptor(pattern=fixed_line)
    return RegionMetadata(
        id=region_id,
        country_code=country_code,
        national_prefix=national_prefix,
        leading_digits=leading_digits,
        main_country_for_code=main,
        types=types,
        **extra,
    )
