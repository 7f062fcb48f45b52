"""
Storefront configuration loader (catalogue REST source, order sink, timeouts).
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Literal, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "storefront.yml"

# Each setting may come from either name; the VITE_ names match the storefront's frontend .env.
_ENV_ALIASES = {
    "supabase_url": ("SUPABASE_URL", "VITE_SUPABASE_URL"),
    "api_key": ("SUPABASE_ANON_KEY", "VITE_SUPABASE_ANON_KEY"),
    "integrations_mode": ("INTEGRATIONS_MODE",),
}


class StorefrontConfig(BaseModel):
    """Connection settings for the catalogue source and the order-intent sink."""

    supabase_url: Optional[str] = None
    api_key: Optional[str] = None
    rest_prefix: str = "/rest/v1"
    categories_table: str = "categories"
    products_table: str = "products"
    orders_table: str = "orders"
    timeout_seconds: float = Field(default=10.0, gt=0)
    tracking_timeout_seconds: float = Field(default=3.0, gt=0)
    integrations_mode: Literal["auto", "real", "mock"] = "auto"

    @property
    def credentials_configured(self) -> bool:
        return bool(self.supabase_url) and bool(self.api_key)

    @property
    def rest_base(self) -> str:
        return f"{(self.supabase_url or '').rstrip('/')}{self.rest_prefix}"

    def auth_headers(self) -> Dict[str, str]:
        return {
            "apikey": self.api_key or "",
            "Authorization": f"Bearer {self.api_key or ''}",
        }

    @property
    def use_real_integrations(self) -> bool:
        if self.integrations_mode == "real":
            return True
        if self.integrations_mode == "mock":
            return False
        return bool(self.supabase_url)


def load_storefront_config(config_path: Optional[Path] = None) -> StorefrontConfig:
    """
    Load storefront configuration from an optional YAML file plus the environment.

    Environment values (including a local .env) win over the file, so
    deployments only need SUPABASE_URL and SUPABASE_ANON_KEY.

    Raises:
        ValidationError: If the merged settings don't match the schema
    """
    load_dotenv()

    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    data: Dict[str, Any] = {}
    if config_path.exists():
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    else:
        logger.debug("No storefront config file at %s; using environment only", config_path)

    for field_name, env_names in _ENV_ALIASES.items():
        for env_name in env_names:
            value = os.getenv(env_name, "").strip()
            if value:
                data[field_name] = value.lower() if field_name == "integrations_mode" else value
                break

    try:
        cfg = StorefrontConfig(**data)
    except ValidationError as e:
        logger.error("Storefront config validation failed: %s", e)
        raise

    if not cfg.credentials_configured:
        logger.warning("Catalogue URL or API key is not set; remote catalogue calls will fail")
    return cfg
