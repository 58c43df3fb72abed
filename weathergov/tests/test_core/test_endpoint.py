"""Tests for endpoint descriptors and URL composition."""

from dataclasses import dataclass

import pytest

from weathergov.core.endpoint import HttpMethod, build_url, normalize_query
from weathergov.core.errors import InvalidRequestError
from weathergov.models.common import Coordinate
from weathergov.services.alerts import AlertsEndpoint
from weathergov.services.forecasts import GridpointForecastEndpoint
from weathergov.services.observations import StationObservationsEndpoint
from weathergov.services.points import PointEndpoint
from weathergov.services.stations import LinkedResourceEndpoint, StationEndpoint
from weathergov.services.zones import ZoneForecastEndpoint

BASE = "https://api.test.example.com"


@dataclass(frozen=True)
class RawEndpoint:
    path: str
    query_items: dict[str, str] | None = None
    method: HttpMethod = HttpMethod.GET


class TestNormalizeQuery:
    def test_none(self):
        assert normalize_query(None) is None

    def test_empty(self):
        assert normalize_query({}) is None

    def test_preserves_order(self):
        result = normalize_query({"status": "Actual", "area": "KS"})
        assert list(result) == ["status", "area"]


class TestBuildUrl:
    def test_no_query(self):
        url = build_url(BASE, RawEndpoint("/stations"))
        assert str(url) == "https://api.test.example.com/stations"
        assert "?" not in str(url)

    def test_empty_query_has_no_question_mark(self):
        url = build_url(BASE, RawEndpoint("/alerts", {}))
        assert str(url) == "https://api.test.example.com/alerts"

    def test_empty_alert_filters_have_no_question_mark(self):
        url = build_url(BASE, AlertsEndpoint(active=True, filters=()))
        assert "?" not in str(url)
        assert url.path == "/alerts/active"

    def test_query_params(self):
        url = build_url(BASE, RawEndpoint("/alerts", {"status": "Actual", "limit": "5"}))
        assert url.params["status"] == "Actual"
        assert url.params["limit"] == "5"

    def test_endpoint_path_replaces_base_path(self):
        url = build_url(BASE + "/ignored/prefix", RawEndpoint("/offices/TOP"))
        assert url.path == "/offices/TOP"

    def test_invalid_base_url(self):
        with pytest.raises(InvalidRequestError, match="Invalid base URL"):
            build_url("not-a-url", RawEndpoint("/stations"))

    def test_unconstructable_url(self):
        with pytest.raises(InvalidRequestError, match="Could not construct URL"):
            build_url(BASE, RawEndpoint("/zones/forecast/bad\nid"))

    def test_query_characters_in_identifier_rejected(self):
        with pytest.raises(InvalidRequestError, match="Could not construct URL"):
            build_url(BASE, StationEndpoint("KTOP?x=1#f"))


class TestEndpointPaths:
    def test_point(self):
        endpoint = PointEndpoint(Coordinate(39.7456, -97.0892))
        assert endpoint.path == "/points/39.7456,-97.0892"
        assert endpoint.method == HttpMethod.GET
        assert endpoint.query_items is None

    def test_gridpoint_forecast(self):
        assert GridpointForecastEndpoint("TOP", 32, 81).path == "/gridpoints/TOP/32,81/forecast"
        assert (
            GridpointForecastEndpoint("TOP", 32, 81, hourly=True).path
            == "/gridpoints/TOP/32,81/forecast/hourly"
        )

    def test_zone_forecast(self):
        assert ZoneForecastEndpoint("forecast", "KSZ035").path == "/zones/forecast/KSZ035/forecast"

    def test_observations_without_bounds_has_no_query(self):
        assert StationObservationsEndpoint("KMHK").query_items is None

    def test_linked_resource_keeps_only_path(self):
        endpoint = LinkedResourceEndpoint("https://api.weather.gov/gridpoints/TOP/32,81/stations")
        assert endpoint.path == "/gridpoints/TOP/32,81/stations"
        url = build_url(BASE, endpoint)
        assert str(url) == "https://api.test.example.com/gridpoints/TOP/32,81/stations"

    def test_alert_filters_keep_order(self):
        endpoint = AlertsEndpoint(filters=(("status", "Actual"), ("area", "KS"), ("limit", "5")))
        assert list(endpoint.query_items) == ["status", "area", "limit"]

    def test_alerts_endpoint_is_hashable(self):
        a = AlertsEndpoint(active=True, filters=(("area", "KS"),))
        b = AlertsEndpoint(active=True, filters=(("area", "KS"),))
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b, AlertsEndpoint(active=True)}) == 2
