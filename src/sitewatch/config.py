"""Configuration loading from TOML files."""

from pathlib import Path
from typing import Any

import toml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings


class ServerConfig(BaseModel):
    """Server configuration."""

    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False


class DatabaseConfig(BaseModel):
    """Database configuration."""

    url: str = "sqlite+aiosqlite:///./sitewatch.db"


class SeedConfig(BaseModel):
    """Demo data seeding."""

    demo_data: bool = True


class Settings(BaseSettings):
    """Application settings loaded from TOML files."""

    server: ServerConfig = Field(default_factory=ServerConfig)
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    seed: SeedConfig = Field(default_factory=SeedConfig)

    log_level: str = "INFO"

    # Paths
    config_dir: Path = Path("config")

    model_config = {"extra": "ignore"}


def load_toml_file(path: Path) -> dict[str, Any]:
    """Load a TOML file, returning empty dict if not found."""
    if path.exists():
        return toml.load(path)
    return {}


def load_settings(config_dir: Path | None = None) -> Settings:
    """Load settings from the TOML configuration file.

    Args:
        config_dir: Path to configuration directory. Defaults to ./config

    Returns:
        Populated Settings object
    """
    if config_dir is None:
        config_dir = Path("config")

    config_data = load_toml_file(config_dir / "sitewatch.toml")
    config_data.pop("config_dir", None)

    return Settings(
        server=ServerConfig(**config_data.pop("server", {})),
        database=DatabaseConfig(**config_data.pop("database", {})),
        seed=SeedConfig(**config_data.pop("seed", {})),
        **config_data,
        config_dir=config_dir,
    )


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def init_settings(config_dir: Path | None = None) -> Settings:
    """Initialize settings from a specific config directory."""
    global _settings
    _settings = load_settings(config_dir)
    return _settings
