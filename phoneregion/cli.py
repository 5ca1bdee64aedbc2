# file: phoneregion/cli.py
"""
phoneregion CLI.

Commands:
  - lookup: resolve the region of a phone number and report its capabilities
  - calling-code: show the regions behind a country calling code
  - region: show metadata-derived facts about a region
  - supported: list supported regions and calling codes
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import click
from phonenumbers import NumberParseException

from phoneregion import __version__, registry
from phoneregion.config import PhoneregionSettings, load_settings
from phoneregion.core.capabilities import RegionCapabilities
from phoneregion.core.matching import classify
from phoneregion.core.parser import MissingCountryError, parse_number
from phoneregion.logging_config import configure_logging
from phoneregion.metadata.indexer import CatalogError
from phoneregion.metadata.model import UNKNOWN_REGION, ParsedNumber

logger = logging.getLogger(__name__)


def _setup(
    config_path: Path | None, catalog_path: Path | None
) -> tuple[PhoneregionSettings, RegionCapabilities]:
    settings = load_settings(yaml_path=config_path)
    if catalog_path is not None:
        settings = settings.model_copy(update={"catalog_path": catalog_path})
    configure_logging(level=settings.log_level, json_logging=settings.json_logging)
    try:
        registry.initialize(settings=settings)
    except CatalogError as exc:
        raise click.ClickException(f"Could not load region catalog: {exc}") from exc
    logger.debug("Region index ready (%s catalog)", settings.resolved_catalog_source())
    return settings, registry.get_capabilities()


def _emit(payload: dict[str, Any], as_json: bool) -> None:
    if as_json:
        click.echo(json.dumps(payload, indent=2, sort_keys=True))
        return
    for key, value in payload.items():
        if isinstance(value, list):
            value = ", ".join(str(v) for v in value) if value else "-"
        elif value is None:
            value = "-"
        click.echo(f"{key.replace('_', ' ').capitalize()}: {value}")


def lookup_report(
    caps: RegionCapabilities, country_code: int, national_number: str
) -> dict[str, Any]:
    """Collect what the index knows about one number."""

    number = ParsedNumber(country_code=country_code, national_number=national_number)
    region = caps.resolver.region_for_number(country_code, national_number)
    metadata = caps.metadata_for_region(region)
    return {
        "country_code": country_code,
        "national_number": national_number,
        "region": region,
        "number_type": classify(national_number, metadata) if metadata is not None else "unknown",
        "internationally_diallable": caps.can_be_internationally_dialled(number),
        "national_prefix": caps.ndd_prefix(region, True) if region is not None else None,
        "mobile_token": caps.country_mobile_token(country_code) or None,
    }


_common_options = [
    click.option("--json", "as_json", is_flag=True, help="Print JSON to stdout."),
    click.option(
        "--config",
        "config_path",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        default=None,
        help="YAML config path.",
    ),
    click.option(
        "--catalog",
        "catalog_path",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        default=None,
        help="JSON or YAML region catalog (default: phonenumbers metadata).",
    ),
]


def common_options(func: Any) -> Any:
    for option in reversed(_common_options):
        func = option(func)
    return func


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__)
def main() -> None:
    """Phone number region resolution and capability queries."""


@main.command("lookup")
@click.argument("number", type=str)
@click.option(
    "--region", default=None, help="Default region (ISO alpha-2) used if NUMBER is not in E.164."
)
@common_options
def lookup_cmd(
    number: str,
    region: str | None,
    as_json: bool,
    config_path: Path | None,
    catalog_path: Path | None,
) -> None:
    """Resolve the region of NUMBER and report its capabilities."""

    settings, caps = _setup(config_path, catalog_path)
    try:
        parsed = parse_number(number, default_region=region or settings.default_region)
    except MissingCountryError as exc:
        raise click.ClickException(str(exc)) from exc
    except NumberParseException as exc:
        raise click.ClickException(f"Could not parse number: {exc}") from exc

    _emit(lookup_report(caps, parsed.country_code, parsed.national_number), as_json)


@main.command("calling-code")
@click.argument("code", type=int)
@common_options
def calling_code_cmd(
    code: int, as_json: bool, config_path: Path | None, catalog_path: Path | None
) -> None:
    """Show the regions that share calling CODE."""

    _, caps = _setup(config_path, catalog_path)
    main_region = caps.resolver.region_for_country_code(code)
    if main_region == UNKNOWN_REGION:
        raise click.ClickException(f"Unknown calling code: {code}")

    _emit(
        {
            "calling_code": code,
            "main_region": main_region,
            "regions": caps.resolver.region_codes_for_country_code(code),
            "global_network": caps.is_supported_global_network_calling_code(code),
            "mobile_token": caps.country_mobile_token(code) or None,
        },
        as_json,
    )


@main.command("region")
@click.argument("region_code", type=str)
@common_options
def region_cmd(
    region_code: str, as_json: bool, config_path: Path | None, catalog_path: Path | None
) -> None:
    """Show what the catalog says about REGION_CODE."""

    _, caps = _setup(config_path, catalog_path)
    if not caps.is_valid_region_code(region_code):
        raise click.ClickException(f"Unknown region: {region_code}")

    _emit(
        {
            "region": region_code.upper(),
            "calling_code": caps.country_calling_code_for_region(region_code),
            "national_prefix": caps.ndd_prefix(region_code, False),
            "nanpa": caps.is_nanpa_country(region_code),
            "supported_types": caps.supported_types_for_region(region_code),
        },
        as_json,
    )


@main.command("supported")
@common_options
def supported_cmd(as_json: bool, config_path: Path | None, catalog_path: Path | None) -> None:
    """List supported regions and calling codes."""

    _, caps = _setup(config_path, catalog_path)
    _emit(
        {
            "regions": sorted(caps.supported_regions()),
            "calling_codes": caps.supported_calling_codes(),
            "global_network_calling_codes": sorted(caps.supported_global_network_calling_codes()),
        },
        as_json,
    )
