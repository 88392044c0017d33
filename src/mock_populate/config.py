"""
Configuration management for dataset generation.
Loads and validates dataset declarations from YAML files.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import InvalidConfiguration

logger = logging.getLogger(__name__)

COLUMN_KINDS = ("dates", "times", "numbers", "people", "emails", "shuffle", "strings", "images", "stats")


class ColumnConfig(BaseModel):
    """One generated column of a dataset."""

    model_config = ConfigDict(extra="forbid")

    name: str
    kind: str
    options: Dict[str, Any] = Field(default_factory=dict)
    source: Optional[str] = Field(None, description="Column whose names feed an emails column")

    @field_validator("kind")
    @classmethod
    def known_kind(cls, value: str) -> str:
        if value not in COLUMN_KINDS:
            raise ValueError(f"unknown column kind {value!r}, expected one of {list(COLUMN_KINDS)}")
        return value

    @field_validator("options")
    @classmethod
    def no_column_seed(cls, value: Dict[str, Any]) -> Dict[str, Any]:
        # Columns draw from the dataset generator; set the seed on the dataset.
        if "seed" in value:
            raise ValueError("column options cannot set a seed, use the dataset seed")
        return value


class DatasetConfig(BaseModel):
    """Columns to generate, in output order."""

    model_config = ConfigDict(extra="forbid")

    columns: List[ColumnConfig] = Field(..., min_length=1)
    seed: Optional[int] = None

    @field_validator("columns")
    @classmethod
    def unique_names(cls, columns: List[ColumnConfig]) -> List[ColumnConfig]:
        seen = set()
        for column in columns:
            if column.name in seen:
                raise ValueError(f"duplicate column name {column.name!r}")
            if column.kind == "emails" and column.source not in seen:
                raise ValueError(f"emails column {column.name!r} needs an earlier source column")
            seen.add(column.name)
        return columns

    @classmethod
    def from_dict(cls, data: Any) -> "DatasetConfig":
        try:
            return cls.model_validate({} if data is None else data)
        except ValidationError as e:
            raise InvalidConfiguration(f"Invalid dataset configuration: {e}") from e


class ConfigLoader:
    """Loads YAML configuration files."""

    def __init__(self, config_dir="config"):
        self.config_dir = Path(config_dir)
        if not self.config_dir.exists():
            raise InvalidConfiguration(f"Configuration directory {config_dir} does not exist")

    def load_yaml(self, filename: str) -> dict:
        filepath = Path(filename) if "/" in str(filename) else self.config_dir / filename
        if not filepath.exists():
            raise InvalidConfiguration(f"Configuration file {filepath} does not exist")
        with open(filepath, "r") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise InvalidConfiguration(f"Could not parse {filepath}: {e}") from e
        logger.info("Loaded configuration from %s", filepath)
        return data

    def load_dataset_config(self, filename="populate.yaml") -> DatasetConfig:
        return DatasetConfig.from_dict(self.load_yaml(filename))


def load_config(filename=None, config_dir="config") -> DatasetConfig:
    loader = ConfigLoader(config_dir)
    return loader.load_dataset_config(filename or "populate.yaml")
