"""Configuration loader for the SDoc engine."""

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field


class AppInfo(BaseModel):
    """Application metadata."""

    name: str = "SDoc"
    version: str = "1.0.0"
    log_level: str = "INFO"


class SectioningConfig(BaseModel):
    """Section-heading inference configuration."""

    # A heading must be this many characters shorter than the line after it
    min_length_gap: int = Field(default=10, ge=0)
    indent_width: int = Field(default=2, ge=1)


class IndexingConfig(BaseModel):
    """Term and term-pair index configuration."""

    # Pairs are indexed for token distances 1 .. window - 1
    window: int = Field(default=10, ge=2)
    include_section_title: bool = True
    pair_separator: str = Field(default=":", min_length=1)


class StorageConfig(BaseModel):
    """Storage paths configuration."""

    sqlite_path: str = "./db/sdoc.db"
    sources_dir: str = "./sources"


class AppConfig(BaseModel):
    """Root application configuration."""

    app: AppInfo = Field(default_factory=AppInfo)
    sectioning: SectioningConfig = Field(default_factory=SectioningConfig)
    indexing: IndexingConfig = Field(default_factory=IndexingConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)


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

    # Override from environment
    db_path = os.getenv("SDOC_DB_PATH")
    if db_path:
        config.storage.sqlite_path = db_path
    log_level = os.getenv("SDOC_LOG_LEVEL")
    if log_level:
        config.app.log_level = log_level.upper()

    return config
