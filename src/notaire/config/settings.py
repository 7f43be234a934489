"""
Notaire configuration with hybrid YAML + ENV support.

Priority: Environment variables > environment YAML > default YAML > Pydantic defaults
"""

import os
from pathlib import Path
from typing import List, Optional

import yaml
from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from notaire.domain.value_objects.signature_scheme import SignatureScheme

ENV_PREFIX = "NOTAIRE_"


class NotaireConfig(BaseSettings):
    """
    Notaire configuration schema.

    enabled_schemes acts as the feature switch: a scheme missing from
    the list is never exposed, even when its libraries are installed.
    Unknown keys are rejected.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        case_sensitive=False,
        extra="forbid",
    )

    # Application
    app_name: str = Field(default="Notaire")

    # Verification
    enabled_schemes: List[str] = Field(
        default_factory=lambda: [scheme.value for scheme in SignatureScheme],
        description="Signature schemes exposed by this deployment",
    )

    # Logging
    log_level: str = Field(default="info")
    json_logs: bool = Field(default=True)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        allowed = ["debug", "info", "warning", "error", "critical"]
        v_lower = v.lower()
        if v_lower not in allowed:
            raise ValueError(f"Invalid log_level. Must be one of: {allowed}")
        return v_lower

    @field_validator("enabled_schemes")
    @classmethod
    def validate_enabled_schemes(cls, v: List[str]) -> List[str]:
        """Normalize scheme names and reject unknown ones."""
        allowed = [scheme.value for scheme in SignatureScheme]
        normalized = []
        for name in v:
            name_lower = str(name).strip().lower()
            if name_lower not in allowed:
                raise ValueError(
                    f"Invalid scheme '{name}'. Must be one of: {allowed}"
                )
            if name_lower not in normalized:
                normalized.append(name_lower)
        return normalized

    def schemes(self) -> List[SignatureScheme]:
        """Enabled schemes as SignatureScheme members."""
        return [SignatureScheme(name) for name in self.enabled_schemes]


def _read_yaml(path: Path) -> dict:
    """Read a YAML mapping, empty dict when file is missing or blank."""
    if not path.exists():
        return {}

    with open(path, "r") as f:
        loaded = yaml.safe_load(f)

    return loaded or {}


def load_config(
    config_file: Optional[str] = None,
    config_dir: Optional[Path] = None,
) -> NotaireConfig:
    """
    Load configuration from YAML files.

    Priority: Environment variables > environment-specific YAML > default YAML

    Args:
        config_file: Optional YAML filename override
        config_dir: Optional directory holding the YAML files

    Returns:
        NotaireConfig instance
    """
    load_dotenv()

    env = os.getenv("ENV", "production")

    config_map = {
        "production": "production.yaml",
        "development": "development.yaml",
        "test": "test.yaml",
    }

    if config_dir is None:
        current_file = Path(__file__).resolve()
        project_root = current_file.parent.parent.parent.parent
        config_dir = project_root / "config"

    merged_config = _read_yaml(config_dir / "default.yaml")

    if config_file is None:
        config_file = os.getenv(f"{ENV_PREFIX}CONFIG")
        if not config_file:
            config_file = config_map.get(env, "production.yaml")

    merged_config.update(_read_yaml(config_dir / config_file))

    # Init kwargs beat env vars in pydantic-settings, so drop overridden keys
    env_keys = {key.upper() for key in os.environ}
    overrides = {
        key: value
        for key, value in merged_config.items()
        if f"{ENV_PREFIX}{key}".upper() not in env_keys
    }

    return NotaireConfig(**overrides)


# Global settings instance
_settings: Optional[NotaireConfig] = None


def get_settings() -> NotaireConfig:
    """
    Get singleton settings instance.

    Returns:
        NotaireConfig instance
    """
    global _settings
    if _settings is None:
        _settings = load_config()
    return _settings


def reset_settings() -> None:
    """Drop cached settings so the next get_settings() reloads."""
    global _settings
    _settings = None
