"""Tests for the NwsClient facade."""

import asyncio

import httpx
import pydantic
import pytest
import respx

from weathergov.client import NwsClient
from weathergov.config.schema import ClientConfig
from weathergov.core.formats import ResponseFormat
from weathergov.services.alerts import AlertsEndpoint

BASE = "https://api.test.example.com"


class TestNwsClient:
    def test_default_config(self):
        client = NwsClient()
        assert client.config.base_url == "https://api.weather.gov"
        assert client.config.default_format is ResponseFormat.GEOJSON

    def test_services_are_lazy_and_reused(self, client: NwsClient):
        assert "alerts" not in vars(client)
        first = client.alerts
        assert client.alerts is first
        assert "alerts" in vars(client)

    def test_services_share_executor(self, client: NwsClient):
        assert client.points.executor is client.forecasts.executor
        assert client.zones.executor is client.offices.executor

    def test_instances_are_independent(self):
        a = NwsClient(ClientConfig(user_agent="a"))
        b = NwsClient(ClientConfig(user_agent="b"))
        a.set_user_agent("changed")
        assert b.config.user_agent == "b"

    @respx.mock
    def test_set_user_agent_applies_to_next_call(self, client: NwsClient, load_fixture):
        route = respx.get(f"{BASE}/alerts/active/count").mock(
            return_value=httpx.Response(200, json=load_fixture("alert_count.json"))
        )
        asyncio.run(client.alerts.get_active_alert_count())
        client.set_user_agent("myweatherapp/2.0 (ops@example.com)")
        asyncio.run(client.alerts.get_active_alert_count())

        agents = [call.request.headers["user-agent"] for call in route.calls]
        assert agents[0] == "weathergov-tests/1.0 (tests@example.com)"
        assert agents[1] == "myweatherapp/2.0 (ops@example.com)"

    def test_only_user_agent_is_mutable(self, client: NwsClient):
        with pytest.raises(pydantic.ValidationError):
            client.config.base_url = "https://elsewhere.example.com"
        with pytest.raises(pydantic.ValidationError):
            client.config.timeout = 1.0

    @respx.mock
    def test_fetch_raw_with_format(self, client: NwsClient):
        route = respx.get(f"{BASE}/alerts/active").mock(
            return_value=httpx.Response(200, content=b"<feed/>")
        )
        body = asyncio.run(
            client.fetch_raw(AlertsEndpoint(active=True), response_format=ResponseFormat.ATOM)
        )
        assert body == b"<feed/>"
        assert route.calls[0].request.headers["accept"] == "application/atom+xml"
