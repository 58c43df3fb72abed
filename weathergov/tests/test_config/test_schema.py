"""Tests for ClientConfig validation."""

import pydantic
import pytest

from weathergov.config.schema import ClientConfig
from weathergov.core.formats import ResponseFormat


class TestClientConfig:
    def test_defaults(self):
        config = ClientConfig()
        assert config.user_agent == "weathergov/0.1.0"
        assert config.default_format is ResponseFormat.GEOJSON

    def test_timeout_must_be_positive(self):
        with pytest.raises(pydantic.ValidationError):
            ClientConfig(timeout=0)

    def test_unknown_format_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            ClientConfig(default_format="text/html")

    def test_user_agent_assignment_validated(self):
        config = ClientConfig()
        config.user_agent = "other/1.0"
        assert config.user_agent == "other/1.0"
        with pytest.raises(pydantic.ValidationError):
            config.user_agent = 42

    def test_base_url_not_validated_eagerly(self):
        assert ClientConfig(base_url="not-a-url").base_url == "not-a-url"
