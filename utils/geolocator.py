#!/usr/bin/python3

# =============================================================================
#
# Copyright 2017 by Leland Lucius
#
# Released under the GNU Affero GPL
# See: https://github.com/lllucius/climacast/blob/master/LICENSE
#
# =============================================================================

"""
Geolocator class for converting addresses to coordinates and back.
Supports the Google Maps Geocoding API.
"""

import logging
from typing import Any, Dict, Optional, Tuple

import httpx

from utils.errors import GeocodingError

# Configure logging
logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


class Geolocator:
    """
    Abstraction layer for geocoding services.
    Currently supports the Google Maps Geocoding API.
    """

    def __init__(self, api_key, session=None, base_url=None):
        """
        Initialize the geolocator with an API key.

        Args:
            api_key: Google Maps API key
            session: Optional httpx.Client object to use for HTTP requests
            base_url: Optional geocoding endpoint override
        """
        self.api_key = api_key
        self.session = session or httpx.Client(timeout=10)
        self.base_url = base_url or "https://maps.googleapis.com/maps/api/geocode/json"

    def geocode(self, address: str) -> Tuple[float, float]:
        """
        Geocode a free-text address.

        Args:
            address: Address to geocode (e.g., "221B Baker Street")

        Returns:
            Tuple of (latitude, longitude)

        Raises:
            GeocodingError: if the address can't be resolved
        """
        address = (address or "").strip()
        if not address:
            raise GeocodingError("No address to geocode")

        results = self._lookup({"address": address})

        location = results[0].get("geometry", {}).get("location")
        if not location or "lat" not in location or "lng" not in location:
            raise GeocodingError("Could not obtain coordinates from geocoding results")

        logger.info("Geocoded %r to %s,%s", address, location["lat"], location["lng"])
        return location["lat"], location["lng"]

    def reverse_geocode(self, latitude: float, longitude: float) -> str:
        """
        Return the locality (city) name for the given coordinates.

        The locality is the first address component of the first result
        whose types include "locality".

        Raises:
            GeocodingError: if no locality can be found
        """
        results = self._lookup({"latlng": "%s,%s" % (latitude, longitude)})

        for component in results[0].get("address_components", []):
            if "locality" in component.get("types", []):
                logger.info("Reverse geocoded %s,%s to %r",
                            latitude, longitude, component["long_name"])
                return component["long_name"]

        raise GeocodingError("Could not parse city name from geocoding results")

    def _lookup(self, params: Dict[str, Any]) -> list:
        """
        Issue one geocoding request and return its non-empty result list.
        """
        if not self.api_key:
            raise GeocodingError("No geocoding API key configured")

        params = dict(params, key=self.api_key)

        try:
            response = self.session.get(self.base_url, params=params)
        except httpx.HTTPError as e:
            raise GeocodingError("Geocoding request failed: %s" % e) from e

        if response.status_code != 200:
            raise GeocodingError("Geocoding returned HTTP %s" % response.status_code)

        try:
            data: Optional[Dict[str, Any]] = response.json()
        except ValueError as e:
            raise GeocodingError("Geocoding returned invalid JSON") from e

        # Google reports "ZERO_RESULTS" with an empty list
        status = data.get("status", "OK") if isinstance(data, dict) else None
        results = data.get("results") if isinstance(data, dict) else None
        if status != "OK" or not results:
            raise GeocodingError("No geocoding results (status %s)" % status)

        return results
