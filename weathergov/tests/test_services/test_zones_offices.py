"""Tests for ZonesService and OfficesService."""

import asyncio

import httpx
import pytest
import respx

from weathergov.client import NwsClient
from weathergov.core.errors import InvalidRequestError, NotFoundError
from weathergov.models.zone import ZoneType

BASE = "https://api.test.example.com"


class TestZones:
    @respx.mock
    def test_get_zones(self, client: NwsClient, load_fixture):
        route = respx.get(f"{BASE}/zones/forecast").mock(
            return_value=httpx.Response(
                200, json={"type": "FeatureCollection", "features": [load_fixture("zone.json")]}
            )
        )
        zones = asyncio.run(client.zones.get_zones(ZoneType.FORECAST))
        assert route.called
        assert zones.features[0].properties.name == "Riley"

    @respx.mock
    def test_get_zone(self, client: NwsClient, load_fixture):
        respx.get(f"{BASE}/zones/forecast/KSZ035").mock(
            return_value=httpx.Response(200, json=load_fixture("zone.json"))
        )
        zone = asyncio.run(client.zones.get_zone(ZoneType.FORECAST, "KSZ035"))
        assert zone.properties.state == "KS"

    @respx.mock
    def test_zone_forecast(self, client: NwsClient, load_fixture):
        respx.get(f"{BASE}/zones/forecast/KSZ035/forecast").mock(
            return_value=httpx.Response(200, json=load_fixture("zone_forecast.json"))
        )
        forecast = asyncio.run(client.zones.get_zone_forecast(ZoneType.FORECAST, "KSZ035"))
        assert forecast.properties.periods[0].detailed_forecast.startswith("Sunny")

    @respx.mock
    def test_bad_zone_id(self, client: NwsClient):
        respx.get(f"{BASE}/zones/county/XXX").mock(
            return_value=httpx.Response(400, json={"detail": "bad zone id"})
        )
        with pytest.raises(InvalidRequestError) as exc_info:
            asyncio.run(client.zones.get_zone(ZoneType.COUNTY, "XXX"))
        assert exc_info.value.message == "bad zone id"


class TestOffices:
    @respx.mock
    def test_get_office(self, client: NwsClient, load_fixture):
        respx.get(f"{BASE}/offices/TOP").mock(
            return_value=httpx.Response(200, json=load_fixture("office_top.json"))
        )
        office = asyncio.run(client.offices.get_office("TOP"))
        assert office.name == "Topeka, KS"

    @respx.mock
    def test_headlines(self, client: NwsClient, load_fixture):
        respx.get(f"{BASE}/offices/TOP/headlines").mock(
            return_value=httpx.Response(200, json=load_fixture("headlines_top.json"))
        )
        headlines = asyncio.run(client.offices.get_office_headlines("TOP"))
        assert len(headlines.headlines) == 1

    @respx.mock
    def test_all_offices(self, client: NwsClient, load_fixture):
        respx.get(f"{BASE}/offices").mock(
            return_value=httpx.Response(200, json={"features": [load_fixture("office_top.json")]})
        )
        offices = asyncio.run(client.offices.get_all_offices())
        assert offices.features[0].id == "TOP"

    @respx.mock
    def test_unknown_office(self, client: NwsClient):
        respx.get(f"{BASE}/offices/ZZZ").mock(return_value=httpx.Response(404))
        with pytest.raises(NotFoundError):
            asyncio.run(client.offices.get_office("ZZZ"))
