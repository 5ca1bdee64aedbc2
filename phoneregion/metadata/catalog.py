# file: phoneregion/metadata/catalog.py
"""
Catalog loaders.

A catalog is an ordered list of region records. Three sources are supported:

- a JSON or YAML file (a top-level array of region objects),
- the small sample catalog packaged in `phoneregion/data/sample_catalog.json`
  (used for tests and demos),
- the metadata bundled with the `phonenumbers` package (libphonenumber data).

Records are validated with pydantic; any malformed entry aborts the load with
`CatalogError`.
"""

from __future__ import annotations

import json
import logging
from importlib import resources
from pathlib import Path
from typing import Any

import yaml
from phonenumbers.phonemetadata import PhoneMetadata
from phonenumbers.phonenumberutil import (
    COUNTRY_CODE_TO_REGION_CODE,
    REGION_CODE_FOR_NON_GEO_ENTITY,
)
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic import ConfigDict as PydanticConfigDict

from phoneregion.metadata.indexer import CatalogError
from phoneregion.metadata.model import NUMBER_TYPES, NumberDescriptor, RegionMetadata

logger = logging.getLogger(__name__)

# PhoneMetadata attribute names in `phonenumbers`, keyed by our type tags.
_PHONENUMBERS_TYPE_ATTRS: dict[str, str] = {
    "fixed_line": "fixed_line",
    "mobile": "mobile",
    "toll_free": "toll_free",
    "premium_rate": "premium_rate",
    "shared_cost": "shared_cost",
    "voip": "voip",
    "personal_number": "personal_number",
    "pager": "pager",
    "uan": "uan",
    "voicemail": "voicemail",
}


class DescriptorRecord(BaseModel):
    model_config = PydanticConfigDict(extra="ignore")

    pattern: str | None = None
    possible_lengths: list[int] = Field(default_factory=list)
    example_number: str | None = None

    def to_descriptor(self) -> NumberDescriptor:
        return NumberDescriptor(
            pattern=self.pattern or None,
            possible_lengths=tuple(self.possible_lengths),
            example_number=self.example_number or None,
        )


class RegionRecord(BaseModel):
    model_config = PydanticConfigDict(extra="ignore")

    id: str
    country_code: int = Field(gt=0)
    national_prefix: str | None = None
    leading_digits: str | None = None
    main_country_for_code: bool = False
    general_desc: DescriptorRecord | None = None
    no_international_dialing: DescriptorRecord | None = None
    types: dict[str, DescriptorRecord] = Field(default_factory=dict)

    @field_validator("id")
    @classmethod
    def _id_not_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("region id must not be empty")
        return v.upper()

    @field_validator("types")
    @classmethod
    def _known_types(cls, v: dict[str, DescriptorRecord]) -> dict[str, DescriptorRecord]:
        unknown = sorted(k for k in v if k not in NUMBER_TYPES)
        if unknown:
            raise ValueError(f"unknown number types: {', '.join(unknown)}")
        return v

    def to_metadata(self) -> RegionMetadata:
        return RegionMetadata(
            id=self.id,
            country_code=self.country_code,
            national_prefix=self.national_prefix or None,
            leading_digits=self.leading_digits or None,
            main_country_for_code=self.main_country_for_code,
            general_desc=self.general_desc.to_descriptor() if self.general_desc else None,
            no_international_dialing=(
                self.no_international_dialing.to_descriptor()
                if self.no_international_dialing
                else None
            ),
            types={k: d.to_descriptor() for k, d in self.types.items()},
        )


def parse_catalog(raw: Any) -> list[RegionMetadata]:
    """
    Validate raw catalog data (a list of dicts) into region records.

    Raises:
        CatalogError: if `raw` is not a list or any entry is malformed.
    """

    if not isinstance(raw, list):
        raise CatalogError("Catalog must be an array of region objects")

    records: list[RegionMetadata] = []
    for position, item in enumerate(raw):
        try:
            record = RegionRecord.model_validate(item)
        except ValidationError as exc:
            raise CatalogError(f"Catalog entry {position} is malformed: {exc}") from exc
        records.append(record.to_metadata())
    return records


def _read_catalog_text(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in (".yaml", ".yml"):
        return yaml.safe_load(text)
    return json.loads(text)


def load_catalog(path: Path | None = None) -> list[RegionMetadata]:
    """
    Load a catalog file, defaulting to the packaged sample catalog.

    Args:
        path: JSON or YAML catalog. The format is chosen by file suffix
            (`.yaml`/`.yml` for YAML, anything else is read as JSON).

    Raises:
        CatalogError: if the file cannot be read or parsed, or is malformed.
    """

    try:
        if path is None:
            text = (
                resources.files("phoneregion.data")
                .joinpath("sample_catalog.json")
                .read_text(encoding="utf-8")
            )
            raw = json.loads(text)
        else:
            raw = _read_catalog_text(path)
    except (OSError, json.JSONDecodeError, yaml.YAMLError) as exc:
        source = path or "sample_catalog.json"
        raise CatalogError(f"Could not read catalog {source}: {exc}") from exc

    records = parse_catalog(raw)
    logger.debug("Loaded %d catalog records from %s", len(records), path or "sample catalog")
    return records


def _descriptor_from_phonenumbers(desc: Any) -> NumberDescriptor | None:
    if desc is None:
        return None
    # libphonenumber marks "no numbers of this type" with a possible length of -1.
    lengths = tuple(n for n in (desc.possible_length or ()) if n > 0)
    return NumberDescriptor(
        pattern=desc.national_number_pattern or None,
        possible_lengths=lengths,
        example_number=desc.example_number or None,
    )


def _region_from_phonenumbers(metadata: Any, region_id: str) -> RegionMetadata:
    types: dict[str, NumberDescriptor] = {}
    for tag, attr in _PHONENUMBERS_TYPE_ATTRS.items():
        desc = _descriptor_from_phonenumbers(getattr(metadata, attr, None))
        if desc is not None:
            types[tag] = desc
    return RegionMetadata(
        id=region_id,
        country_code=int(metadata.country_code),
        national_prefix=metadata.national_prefix or None,
        leading_digits=metadata.leading_digits or None,
        main_country_for_code=bool(metadata.main_country_for_code),
        general_desc=_descriptor_from_phonenumbers(metadata.general_desc),
        no_international_dialing=_descriptor_from_phonenumbers(
            metadata.no_international_dialling
        ),
        types=types,
    )


def catalog_from_phonenumbers() -> list[RegionMetadata]:
    """
    Build a catalog from the libphonenumber metadata bundled with `phonenumbers`.

    Records follow `COUNTRY_CODE_TO_REGION_CODE` order. Non-geographic
    entities (region "001") are keyed by their calling code, e.g. "800".

    Raises:
        CatalogError: if `phonenumbers` has no metadata for a listed region.
    """

    records: list[RegionMetadata] = []
    for calling_code, region_codes in COUNTRY_CODE_TO_REGION_CODE.items():
        for region_code in region_codes:
            if region_code == REGION_CODE_FOR_NON_GEO_ENTITY:
                metadata = PhoneMetadata.metadata_for_nongeo_region(calling_code)
                region_id = str(calling_code)
            else:
                metadata = PhoneMetadata.metadata_for_region(region_code)
                region_id = region_code
            if metadata is None:
                raise CatalogError(f"phonenumbers has no metadata for {region_code}")
            records.append(_region_from_phonenumbers(metadata, region_id))
    logger.debug("Built %d catalog records from phonenumbers metadata", len(records))
    return records
