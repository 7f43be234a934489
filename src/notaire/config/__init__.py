"""
Configuration package.
"""

from notaire.config.settings import (
    NotaireConfig,
    get_settings,
    load_config,
    reset_settings,
)

__all__ = [
    "NotaireConfig",
    "get_settings",
    "load_config",
    "reset_settings",
]
