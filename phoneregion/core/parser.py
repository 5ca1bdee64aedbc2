# file: phoneregion/core/parser.py
"""
Phone number parsing.

Thin wrappers around `phonenumbers` that reduce user input to the
`ParsedNumber` (calling code + national significant number) the resolver
works on. Validity is not checked here: region resolution and capability
queries are defined for any digit string.
"""

from __future__ import annotations

import re

import phonenumbers
from phonenumbers import NumberParseException
from phonenumbers.phonenumber import PhoneNumber

from phoneregion.metadata.model import ParsedNumber


class MissingCountryError(ValueError):
    """Raised when a number is missing a country code and no default region is provided."""


_NON_DIALABLE = re.compile(r"[^\d+]+")


def sanitize_number(raw: str) -> str:
    """
    Normalize common phone number input into a parse-friendly string.

    - Trims whitespace.
    - Removes common separators (spaces, dashes, parentheses, dots).
    - Converts an international dialing prefix `00` into `+`.
    """

    s = _NON_DIALABLE.sub("", raw.strip())
    if s.startswith("00"):
        s = f"+{s[2:]}"
    return s


def from_phonenumber(parsed: PhoneNumber) -> ParsedNumber:
    """Reduce a `phonenumbers.PhoneNumber` to calling code and national number."""

    if parsed.country_code is None:
        raise NumberParseException(
            NumberParseException.INVALID_COUNTRY_CODE, "Parsed number has no country code."
        )
    return ParsedNumber(
        country_code=int(parsed.country_code),
        national_number=phonenumbers.national_significant_number(parsed),
    )


def parse_number(raw: str, *, default_region: str | None = None) -> ParsedNumber:
    """
    Parse user input into a `ParsedNumber`.

    Args:
        raw: User-provided input (can include spaces/dashes, etc).
        default_region: Region (e.g., "US") used when `raw` has no leading `+`.

    Raises:
        MissingCountryError: if `raw` has no leading `+` and no `default_region`.
        NumberParseException: if `phonenumbers` cannot parse the input.
    """

    sanitized = sanitize_number(raw)
    if not sanitized:
        raise NumberParseException(NumberParseException.NOT_A_NUMBER, "Empty input")

    if not sanitized.startswith("+") and not default_region:
        raise MissingCountryError(
            "Missing country code. Provide an E.164 number (e.g., +14155552671) "
            "or specify a default region (e.g., US)."
        )

    region = default_region.upper() if default_region else None
    return from_phonenumber(phonenumbers.parse(sanitized, region))
