# file: phoneregion/config.py
"""
Configuration loader.

Design goals:
- Support `.env` for local development.
- Support YAML for non-secret defaults.
- Validate configuration with pydantic.

Precedence (highest to lowest):
1. OS environment variables
2. `.env` values
3. YAML config file values
4. Code defaults
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal

import yaml
from dotenv import dotenv_values
from pydantic import BaseModel
from pydantic import ConfigDict as PydanticConfigDict

CatalogSource = Literal["phonenumbers", "sample", "file"]


class PhoneregionSettings(BaseModel):
    model_config = PydanticConfigDict(extra="ignore")

    # General
    default_region: str | None = None
    log_level: str = "INFO"
    json_logging: bool = False

    # Catalog
    # "file" requires catalog_path; setting catalog_path alone implies "file".
    catalog_source: CatalogSource = "phonenumbers"
    catalog_path: Path | None = None
    allow_duplicate_regions: bool = False

    def resolved_catalog_source(self) -> CatalogSource:
        if self.catalog_path is not None:
            return "file"
        return self.catalog_source


_ENV_MAP: dict[str, str] = {
    "PHONEREGION_DEFAULT_REGION": "default_region",
    "PHONEREGION_LOG_LEVEL": "log_level",
    "PHONEREGION_JSON_LOGGING": "json_logging",
    "PHONEREGION_CATALOG_SOURCE": "catalog_source",
    "PHONEREGION_CATALOG_PATH": "catalog_path",
    "PHONEREGION_ALLOW_DUPLICATE_REGIONS": "allow_duplicate_regions",
}


def _read_yaml(path: Path) -> dict[str, Any]:
    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    return raw if isinstance(raw, dict) else {}


def _read_dotenv(path: Path) -> dict[str, str]:
    # dotenv_values does not mutate os.environ; it just parses the file.
    values = dotenv_values(path)
    out: dict[str, str] = {}
    for k, v in values.items():
        if isinstance(k, str) and isinstance(v, str):
            out[k] = v
    return out


def _overlay_env(target: dict[str, Any], env: dict[str, str]) -> None:
    for env_key, field_name in _ENV_MAP.items():
        if env_key in env:
            target[field_name] = env[env_key]


def load_settings(
    *, yaml_path: Path | None = None, env_path: Path | None = None
) -> PhoneregionSettings:
    """
    Load settings from YAML and .env, with OS env overrides.

    Args:
        yaml_path: Optional YAML config path.
        env_path: Optional .env path (default: `.env` if present).
    """

    data: dict[str, Any] = {}

    if env_path is None:
        maybe = Path(".env")
        env_path = maybe if maybe.exists() else None

    dotenv = _read_dotenv(env_path) if env_path is not None and env_path.exists() else {}

    # YAML path resolution:
    # - explicit yaml_path wins
    # - else PHONEREGION_CONFIG from OS env wins
    # - else PHONEREGION_CONFIG from .env
    if yaml_path is None:
        cfg = os.environ.get("PHONEREGION_CONFIG") or dotenv.get("PHONEREGION_CONFIG")
        if cfg:
            yaml_path = Path(cfg)

    if yaml_path is not None and yaml_path.exists():
        data.update(_read_yaml(yaml_path))

    if dotenv:
        _overlay_env(data, dotenv)

    os_env: dict[str, str] = {k: v for k, v in os.environ.items() if k in _ENV_MAP}
    _overlay_env(data, os_env)

    return PhoneregionSettings.model_validate(data)
