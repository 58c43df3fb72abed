"""Tests for the YAML config loader."""

from pathlib import Path

import pydantic
import pytest
import yaml

from weathergov.config.loader import load_config
from weathergov.core.formats import ResponseFormat


class TestLoadConfig:
    def test_empty_file_gives_defaults(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        config = load_config(path)
        assert config.base_url == "https://api.weather.gov"
        assert config.timeout == 30.0

    def test_values(self, tmp_path: Path):
        path = tmp_path / "client.yaml"
        with open(path, "w") as f:
            yaml.dump(
                {
                    "base_url": "https://staging.example.com",
                    "user_agent": "myapp/1.0 (me@example.com)",
                    "default_format": "application/ld+json",
                    "timeout": 12.5,
                },
                f,
            )
        config = load_config(str(path))
        assert config.base_url == "https://staging.example.com"
        assert config.user_agent == "myapp/1.0 (me@example.com)"
        assert config.default_format is ResponseFormat.JSON_LD
        assert config.timeout == 12.5

    def test_unknown_key_rejected(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        path.write_text("retries: 3\n")
        with pytest.raises(pydantic.ValidationError):
            load_config(path)

    def test_non_mapping_rejected(self, tmp_path: Path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ValueError, match="mapping"):
            load_config(path)
