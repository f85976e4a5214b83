"""Configuration loader for the Bookshelf catalog browser."""

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field


class AppInfo(BaseModel):
    """Application metadata."""

    name: str = "Bookshelf"
    version: str = "1.0.0"


class CatalogConfig(BaseModel):
    """Where the catalog document lives."""

    path: str = "./data/catalog.json"


class LoggingConfig(BaseModel):
    """Logging setup applied by the console driver."""

    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class AppConfig(BaseModel):
    """Root application configuration."""

    app: AppInfo = Field(default_factory=AppInfo)
    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(config_path: str | Path = "config.yaml") -> AppConfig:
    """Load configuration from YAML file and environment variables.

    Args:
        config_path: Path to the YAML configuration file.

    Returns:
        Fully populated AppConfig instance.
    """
    load_dotenv()

    yaml_data: dict = {}
    config_file = Path(config_path)
    if config_file.exists():
        with open(config_file) as f:
            yaml_data = yaml.safe_load(f) or {}

    config = AppConfig(**yaml_data)

    # Environment wins over the YAML file
    catalog_path = os.getenv("BOOKSHELF_CATALOG_PATH")
    if catalog_path:
        config.catalog.path = catalog_path
    log_level = os.getenv("BOOKSHELF_LOG_LEVEL")
    if log_level:
        config.logging.level = log_level.upper()

    return config
