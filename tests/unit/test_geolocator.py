#!/usr/bin/env python3
"""
Unit tests for Geolocator class.
"""
import httpx
import pytest

from utils.errors import GeocodingError
from utils.geolocator import Geolocator

GEOCODE_RESULT = {
    "status": "OK",
    "results": [{
        "geometry": {"location": {"lat": 51.5237, "lng": -0.1585}},
        "address_components": []
    }]
}

REVERSE_RESULT = {
    "status": "OK",
    "results": [{
        "address_components": [
            {"long_name": "1600", "types": ["street_number"]},
            {"long_name": "Mountain View", "types": ["locality", "political"]},
            {"long_name": "Sunnyvale", "types": ["locality", "political"]},
        ]
    }]
}


def make_geolocator(handler, api_key="test_api_key"):
    session = httpx.Client(transport=httpx.MockTransport(handler))
    return Geolocator(api_key, session=session)


def test_geolocator_initialization():
    """Test that Geolocator can be initialized"""
    geolocator = Geolocator("test_api_key")
    assert geolocator.api_key == "test_api_key"
    assert geolocator.base_url == "https://maps.googleapis.com/maps/api/geocode/json"


def test_geocode_address():
    requests = []

    def handler(request):
        requests.append(request)
        return httpx.Response(200, json=GEOCODE_RESULT)

    coords = make_geolocator(handler).geocode("221B Baker Street")

    assert coords == (51.5237, -0.1585)
    assert len(requests) == 1
    assert requests[0].url.params["address"] == "221B Baker Street"
    assert requests[0].url.params["key"] == "test_api_key"


def test_reverse_geocode_returns_first_locality():
    requests = []

    def handler(request):
        requests.append(request)
        return httpx.Response(200, json=REVERSE_RESULT)

    city = make_geolocator(handler).reverse_geocode(37.42, -122.08)

    assert city == "Mountain View"
    assert requests[0].url.params["latlng"] == "37.42,-122.08"


def test_reverse_geocode_without_locality():
    def handler(request):
        return httpx.Response(200, json={
            "status": "OK",
            "results": [{"address_components": [{"long_name": "US", "types": ["country"]}]}]
        })

    with pytest.raises(GeocodingError):
        make_geolocator(handler).reverse_geocode(37.42, -122.08)


@pytest.mark.parametrize("response", [
    httpx.Response(200, json={"status": "ZERO_RESULTS", "results": []}),
    httpx.Response(200, json={"status": "REQUEST_DENIED", "results": []}),
    httpx.Response(500, text="error"),
    httpx.Response(200, text="<html>"),
    httpx.Response(200, json={"status": "OK", "results": [{"geometry": {}}]}),
])
def test_geocode_failures(response):
    def handler(request):
        return response

    with pytest.raises(GeocodingError):
        make_geolocator(handler).geocode("Nowhere")


def test_geocode_transport_error():
    def handler(request):
        raise httpx.ConnectError("unreachable", request=request)

    with pytest.raises(GeocodingError):
        make_geolocator(handler).geocode("Seattle")


def test_geolocator_without_api_key():
    """Test that Geolocator refuses to look anything up without a key"""
    def handler(request):
        raise AssertionError("no request expected")

    with pytest.raises(GeocodingError):
        make_geolocator(handler, api_key="").geocode("Miami Florida")


def test_geocode_empty_address():
    def handler(request):
        raise AssertionError("no request expected")

    with pytest.raises(GeocodingError):
        make_geolocator(handler).geocode("   ")
