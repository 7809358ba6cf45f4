"""
Config — centralized shop configuration with env overrides.

The catalog, builder presets and shop output are fixed in code; only
ambient concerns (logging, CLI banner) are configurable via environment
variables.
"""
import os
from dataclasses import dataclass


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() not in ("0", "false", "no", "off", "")


@dataclass(frozen=True)
class ShopConfig:
    """Immutable shop configuration. Env vars override defaults."""

    # Display (CLI banner and log records only)
    shop_name: str = os.getenv("SHOP_NAME", "Computer Shop")

    # Logging
    log_enabled: bool = _env_flag("SHOP_LOG_ENABLED", "1")


# Singleton
CONFIG = ShopConfig()
