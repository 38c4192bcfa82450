"""
Centralized settings and path configuration for the tool rental system.
"""
import os
from pathlib import Path
from dataclasses import dataclass
from typing import Optional


def get_package_root() -> Path:
    """Get the tool_rental package directory."""
    return Path(__file__).resolve().parent.parent


@dataclass
class Settings:
    """Application settings with sensible defaults."""

    # Catalog file (falls back to the built-in catalog when missing)
    tool_catalog: Path

    # Presentation
    date_format: str = '%m/%d/%y'
    currency_symbol: str = '$'

    # API server
    api_host: str = '0.0.0.0'
    api_port: int = 8000

    @classmethod
    def load(cls) -> 'Settings':
        """Load settings from the package layout and environment."""
        catalog_env = os.environ.get('TOOL_RENTAL_CATALOG')
        if catalog_env:
            tool_catalog = Path(catalog_env)
        else:
            tool_catalog = get_package_root() / 'data' / 'tools.csv'

        return cls(
            tool_catalog=tool_catalog,
            api_host=os.environ.get('TOOL_RENTAL_API_HOST', '0.0.0.0'),
            api_port=int(os.environ.get('TOOL_RENTAL_API_PORT', '8000')),
        )


# Default settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings


def reset_settings():
    """Drop the cached settings so the next get_settings() reloads them."""
    global _settings
    _settings = None
