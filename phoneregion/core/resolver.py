# file: phoneregion/core/resolver.py
"""
Region resolution for calling codes and national numbers.

Several regions can share one calling code (the NANP members under +1, the
UK and Crown Dependencies under +44). Resolution picks one of them:

- by calling code alone: the region flagged `main_country_for_code`, else the
  last region listed for the code;
- by number: the first candidate whose leading-digits pattern matches the
  start of the number, or, for candidates without leading digits, whose
  descriptors classify the number as some known type.
"""

from __future__ import annotations

import logging
from typing import Sequence

from phoneregion.core.matching import classify, match_at_start
from phoneregion.metadata.model import UNKNOWN_REGION, MetadataIndex, RegionMetadata

logger = logging.getLogger(__name__)


class RegionResolver:
    """Answers "which region" questions over a built `MetadataIndex`."""

    def __init__(self, index: MetadataIndex) -> None:
        self._index = index

    @property
    def index(self) -> MetadataIndex:
        return self._index

    def _metadata(self, region_id: str) -> RegionMetadata | None:
        return self._index.regions.get(region_id.upper())

    def region_codes_for_country_code(self, calling_code: int) -> list[str]:
        return list(self._index.calling_codes.get(calling_code, ()))

    def region_for_country_code(self, calling_code: int) -> str:
        """
        Return the main region for a calling code, or "ZZ" if it is unknown.

        With several regions and none flagged as main country, the last one
        listed for the code is returned.
        """

        region_ids = self._index.calling_codes.get(calling_code)
        if not region_ids:
            return UNKNOWN_REGION
        if len(region_ids) == 1:
            return region_ids[0]
        for region_id in region_ids:
            metadata = self._metadata(region_id)
            if metadata is not None and metadata.main_country_for_code:
                return region_id
        return region_ids[-1]

    def region_for_number(self, country_code: int, national_number: str) -> str | None:
        """
        Return the region a number belongs to, or None if it cannot be told.

        A calling code used by a single region resolves to it without looking
        at the digits.
        """

        region_ids = self._index.calling_codes.get(country_code)
        if not region_ids:
            return None
        if len(region_ids) == 1:
            return region_ids[0]
        return self.resolve_among_candidates(national_number, region_ids)

    def resolve_among_candidates(
        self, national_number: str, candidates: Sequence[str]
    ) -> str | None:
        ordered = sorted(candidates) if "GB" in candidates else list(candidates)

        for region_id in ordered:
            metadata = self._metadata(region_id)
            if metadata is None:
                logger.debug("No metadata for candidate region %s; skipping", region_id)
                continue
            if metadata.has_leading_digits:
                # A leading-digits miss rejects the candidate outright.
                if match_at_start(national_number, metadata.leading_digits or ""):
                    return region_id
                continue
            if classify(national_number, metadata) != "unknown":
                return region_id

        logger.debug("No region among %s matched national number", ordered)
        return None
