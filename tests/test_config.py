#!/usr/bin/env python3
"""
Tests for the configuration system.
"""

from pathlib import Path

import pytest

from mock_populate import ConfigLoader, DatasetConfig, InvalidConfiguration, load_config
from mock_populate.config import COLUMN_KINDS

CONFIG_DIR = Path(__file__).parent.parent / "config"


class TestConfigLoading:
    """Test configuration loading functionality."""

    def test_load_shipped_config(self):
        """The shipped populate.yaml loads into a DatasetConfig."""
        config = load_config(config_dir=CONFIG_DIR)

        assert isinstance(config, DatasetConfig)
        assert config.seed == 42
        assert [column.name for column in config.columns] == [
            "birthday", "wake_up", "balance", "person", "email", "score"
        ]
        assert all(column.kind in COLUMN_KINDS for column in config.columns)

    def test_config_loader(self, tmp_path):
        """ConfigLoader reads YAML from its directory."""
        (tmp_path / "small.yaml").write_text(
            "columns:\n"
            "  - name: id\n"
            "    kind: numbers\n"
            "    options: {start: 1, end: 5}\n"
        )
        loader = ConfigLoader(tmp_path)

        assert loader.load_yaml("small.yaml")["columns"][0]["name"] == "id"
        config = loader.load_dataset_config("small.yaml")
        assert config.columns[0].options == {"start": 1, "end": 5}
        assert config.seed is None

    def test_missing_directory(self, tmp_path):
        """A missing configuration directory is reported."""
        with pytest.raises(InvalidConfiguration):
            ConfigLoader(tmp_path / "nope")

    def test_missing_file(self, tmp_path):
        """A missing configuration file is reported."""
        with pytest.raises(InvalidConfiguration):
            load_config("absent.yaml", config_dir=tmp_path)

    def test_malformed_yaml(self, tmp_path):
        """Unparseable YAML is reported as a configuration error."""
        (tmp_path / "bad.yaml").write_text("columns: [unclosed\n")
        with pytest.raises(InvalidConfiguration):
            load_config("bad.yaml", config_dir=tmp_path)

    @pytest.mark.parametrize("text", ["- name: x\n  kind: dates\n", "just a string\n", "42\n"])
    def test_top_level_must_be_mapping(self, tmp_path, text):
        """A YAML list or scalar is reported as a configuration error."""
        (tmp_path / "list.yaml").write_text(text)
        with pytest.raises(InvalidConfiguration):
            load_config("list.yaml", config_dir=tmp_path)

    def test_empty_file(self, tmp_path):
        """An empty file has no columns."""
        (tmp_path / "empty.yaml").write_text("")
        with pytest.raises(InvalidConfiguration):
            load_config("empty.yaml", config_dir=tmp_path)


class TestDatasetConfigValidation:
    """Test dataset declaration checks."""

    def test_unknown_kind(self):
        """Column kinds must be known generators."""
        with pytest.raises(InvalidConfiguration):
            DatasetConfig.from_dict({"columns": [{"name": "x", "kind": "planets"}]})

    def test_duplicate_names(self):
        """Column names must be unique."""
        with pytest.raises(InvalidConfiguration):
            DatasetConfig.from_dict({"columns": [
                {"name": "x", "kind": "dates"},
                {"name": "x", "kind": "times"},
            ]})

    def test_emails_need_earlier_source(self):
        """An emails column must name a column declared before it."""
        with pytest.raises(InvalidConfiguration):
            DatasetConfig.from_dict({"columns": [
                {"name": "email", "kind": "emails", "source": "person"},
                {"name": "person", "kind": "people"},
            ]})

    def test_column_seed_rejected(self):
        """Columns share the dataset generator, so a column seed is refused."""
        with pytest.raises(InvalidConfiguration):
            DatasetConfig.from_dict({"seed": 1, "columns": [
                {"name": "day", "kind": "dates", "options": {"seed": 7}},
            ]})

    def test_empty_columns(self):
        """At least one column is required."""
        with pytest.raises(InvalidConfiguration):
            DatasetConfig.from_dict({"columns": []})
