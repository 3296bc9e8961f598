import pytest
import requests

from restaurant_directory.backends.base import ListingQuery
from restaurant_directory.backends.postgrest import PostgrestBackend
from restaurant_directory.errors import BackendError


class DummyResponse:
    def __init__(self, status_code=200, payload=None, headers=None, text=""):
        self.status_code = status_code
        self._payload = payload
        self.headers = headers or {}
        self.text = text

    def json(self):
        if self._payload is None:
            raise ValueError("no json")
        return self._payload


class DummySession:
    def __init__(self, responses=None):
        self.calls = []
        self.responses = list(responses or [])
        self.error = None

    def request(self, method, url, headers=None, **kwargs):
        self.calls.append({"method": method, "url": url, "headers": headers, **kwargs})
        if self.error:
            raise self.error
        return self.responses.pop(0)


def _backend(session):
    return PostgrestBackend("https://db.example.co/", "anon-key", session=session)


def test_radius_rpc_payload():
    session = DummySession([DummyResponse(payload=[{"restaurant_id": 1}])])
    rows = _backend(session).restaurants_within_radius(
        longitude=77.5946, latitude=12.9716, radius_km=5.0, page=1, limit=10,
    )
    assert rows == [{"restaurant_id": 1}]
    call = session.calls[0]
    assert call["method"] == "POST"
    assert call["url"] == "https://db.example.co/rest/v1/rpc/restaurants_within_radius"
    assert call["json"] == {
        "_lon": 77.5946, "_lat": 12.9716, "_radius_km": 5.0, "_page": 1, "_limit": 10,
    }
    assert call["headers"]["apikey"] == "anon-key"
    assert call["headers"]["Authorization"] == "Bearer anon-key"


@pytest.mark.parametrize(
    "payload, expected",
    [([{"count": 42}], 42), ([], None), (17, 17), ([{"count": None}], None)],
)
def test_count_rpc_shapes(payload, expected):
    session = DummySession([DummyResponse(payload=payload)])
    count = _backend(session).restaurants_within_radius_count(
        longitude=77.5946, latitude=12.9716, radius_km=5.0,
    )
    assert count == expected
    assert session.calls[0]["url"].endswith("/rpc/restaurants_within_radius_count")
    assert session.calls[0]["json"] == {"_lon": 77.5946, "_lat": 12.9716, "_radius_km": 5.0}


def test_rpc_error_message_passes_through():
    session = DummySession([
        DummyResponse(status_code=404, payload={"message": "Could not find the function"}),
    ])
    with pytest.raises(BackendError, match="Could not find the function"):
        _backend(session).restaurants_within_radius_count(
            longitude=0, latitude=0, radius_km=1,
        )


def test_network_error_becomes_backend_error():
    session = DummySession()
    session.error = requests.ConnectionError("name resolution failed")
    with pytest.raises(BackendError, match="name resolution failed"):
        _backend(session).restaurants_within_radius(
            longitude=0, latitude=0, radius_km=1, page=1, limit=10,
        )


def test_listing_filters_and_count():
    session = DummySession([
        DummyResponse(payload=[{"restaurant_id": 1}], headers={"Content-Range": "10-19/95"}),
    ])
    rows, count = _backend(session).list_restaurants(ListingQuery(
        offset=10, limit=10, country_codes=[1, 94], max_spend=500.0, name="hut", cuisine="pizza",
    ))
    assert rows == [{"restaurant_id": 1}]
    assert count == 95
    call = session.calls[0]
    assert call["url"] == "https://db.example.co/rest/v1/restaurants"
    params = dict(call["params"])
    assert params["country_code"] == "in.(1,94)"
    assert params["average_cost_for_two"] == "lte.500.0"
    assert params["restaurant_name"] == "ilike.*hut*"
    assert params["cuisines"] == "ilike.*pizza*"
    assert "description" not in params
    assert call["headers"]["Range"] == "10-19"
    assert call["headers"]["Prefer"] == "count=exact"


def test_listing_empty_range():
    session = DummySession([DummyResponse(payload=[], headers={"Content-Range": "*/0"})])
    rows, count = _backend(session).list_restaurants(ListingQuery())
    assert rows == []
    assert count == 0


def test_get_restaurant_missing_returns_none():
    session = DummySession([DummyResponse(payload=[])])
    assert _backend(session).get_restaurant("12") is None
    assert session.calls[0]["params"]["restaurant_id"] == "eq.12"


def test_non_json_body_is_backend_error():
    session = DummySession([DummyResponse(payload=None, text="<html>")])
    with pytest.raises(BackendError):
        _backend(session).restaurant_summaries()
