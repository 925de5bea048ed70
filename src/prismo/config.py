"""Application settings loading."""

from __future__ import annotations

from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env file
load_dotenv()

DEFAULT_CONFIG_FILE = Path("config") / "prismo.yaml"


class PrismoSettings(BaseSettings):
    """Global settings, read from PRISMO_* environment variables.

    Example:
        PRISMO_LOG_LEVEL=DEBUG
        PRISMO_LOG_DIR=/var/log/prismo
    """

    model_config = SettingsConfigDict(env_prefix="PRISMO_", extra="ignore")

    log_dir: Path = Field(default_factory=lambda: Path.cwd() / "logs")
    log_level: str = "INFO"


def load_settings(config_path: Path | None = None) -> PrismoSettings:
    """Load settings from YAML file, falling back to environment and defaults.

    Keys present in the YAML file win over PRISMO_* environment variables.
    """
    if config_path is None:
        config_path = Path.cwd() / DEFAULT_CONFIG_FILE

    if not config_path.exists():
        return PrismoSettings()

    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return PrismoSettings(**data)
