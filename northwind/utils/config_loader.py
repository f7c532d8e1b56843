"""
Configuration loader for the Northwind data services (local tables + OData catalogue).
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "northwind_config.yml"

# Environment variable -> (section, field)
_ENV_OVERRIDES = {
    "NORTHWIND_DB_DIRECTORY": ("data", "db_directory"),
    "NORTHWIND_EMAIL_DOMAIN": ("data", "email_domain"),
    "NORTHWIND_ODATA_SERVICE": ("odata", "service_url"),
}


class LocalDataConfig(BaseModel):
    """Local JSON table store configuration"""

    db_directory: str = "northwindDB"
    email_domain: str = "northwindtraders.onmicrosoft.com"

    def resolve_directory(self, base: Optional[Path] = None) -> Path:
        """Relative directories are resolved against the project root (or `base`)."""
        directory = Path(self.db_directory)
        if directory.is_absolute():
            return directory
        return (base or DEFAULT_CONFIG_PATH.parent.parent) / directory


class ODataConfig(BaseModel):
    """Remote Northwind OData service configuration"""

    service_url: str = "https://services.odata.org/V4/Northwind/Northwind.svc"
    order_email_domain: str = "northwindtraders.com"
    timeout_seconds: float = Field(default=20.0, gt=0.0, le=300.0)


class NorthwindConfig(BaseModel):
    data: LocalDataConfig = Field(default_factory=LocalDataConfig)
    odata: ODataConfig = Field(default_factory=ODataConfig)


def _apply_env_overrides(data: dict) -> dict:
    for env_name, (section, key) in _ENV_OVERRIDES.items():
        value = os.getenv(env_name, "").strip()
        if not value:
            continue
        if not isinstance(data.get(section), dict):
            data[section] = {}
        data[section][key] = value
        logger.debug("Config override from %s", env_name)
    return data


def load_northwind_config(config_path: Optional[Path] = None) -> NorthwindConfig:
    """
    Load and validate the Northwind configuration.

    Args:
        config_path: Path to config file. Defaults to config/northwind_config.yml;
            when the default file is absent the built-in defaults are used.

    Returns:
        Validated NorthwindConfig object (environment overrides applied)

    Raises:
        FileNotFoundError: If an explicitly given config file doesn't exist
        ValidationError: If config doesn't match schema
    """
    explicit = config_path is not None
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    data: dict = {}
    if config_path.exists():
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    elif explicit:
        raise FileNotFoundError(f"Northwind config file not found: {config_path}")
    else:
        logger.info("No config file at %s, using defaults", config_path)

    # Empty YAML sections (`data:`) load as None; fall back to section defaults.
    data = _apply_env_overrides({k: v for k, v in data.items() if v is not None})

    try:
        cfg = NorthwindConfig(**data)
        logger.info("Successfully loaded Northwind config from %s", config_path)
        return cfg
    except ValidationError as e:
        logger.error("Northwind config validation failed: %s", e)
        raise
