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
Flight advisory lookups.

This module queries the flight advisory service for a coordinate and turns
the reply into an AdvisoryResult: the hazard color of the airspace plus the
current weather condition and wind speed.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

import httpx

from utils.constants import HAZARD_ADVISORIES, UNKNOWN_HAZARD_ADVISORY
from utils.errors import AdvisoryFetchError

# Configure logging
logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


def advisory_for(color: Optional[str]) -> str:
    """
    Return the advisory sentence for a hazard color.

    Unknown colors get a fixed fallback sentence rather than an error.
    """
    if not color:
        return UNKNOWN_HAZARD_ADVISORY
    return HAZARD_ADVISORIES.get(str(color).strip().lower(), UNKNOWN_HAZARD_ADVISORY)


@dataclass(frozen=True)
class AdvisoryResult:
    hazard_color: str
    weather_condition: str
    wind_speed: Union[int, float]

    @property
    def advisory(self) -> str:
        return advisory_for(self.hazard_color)

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "AdvisoryResult":
        """
        Build a result from the advisory service payload.

        Two shapes are accepted:
            {"data": {"advisory_color": ..., "weather": {"condition": ..., "wind": {"speed": ...}}}}
            {"advisoryColor": ..., "weatherCondition": ..., "windSpeed": ...}

        Raises:
            AdvisoryFetchError: if a field is missing or malformed
        """
        try:
            if "data" in data:
                payload = data["data"]
                color = payload["advisory_color"]
                condition = payload["weather"]["condition"]
                wind = payload["weather"]["wind"]["speed"]
            else:
                color = data["advisoryColor"]
                condition = data["weatherCondition"]
                wind = data["windSpeed"]
        except (KeyError, TypeError) as e:
            raise AdvisoryFetchError("Unexpected advisory payload: missing %s" % e) from e

        if isinstance(wind, bool) or not isinstance(wind, (int, float)):
            raise AdvisoryFetchError("Unexpected wind speed %r" % (wind,))

        return cls(hazard_color=str(color),
                   weather_condition=str(condition),
                   wind_speed=wind)


class AdvisoryClient:
    """
    Client for the flight advisory service.

    The request URL comes from a template with {latitude}, {longitude} and
    optionally {api_key} placeholders.  The API key, when configured, is
    also sent in the X-API-Key header.
    """

    def __init__(self, url_template: str, api_key: str = "", session=None):
        """
        Args:
            url_template: Advisory URL template
            api_key: Advisory service API key
            session: Optional httpx.Client object to use for HTTP requests
        """
        self.url_template = url_template
        self.api_key = api_key
        self.session = session or httpx.Client(timeout=10)

    def url(self, latitude: float, longitude: float) -> str:
        return self.url_template.format(latitude=latitude,
                                        longitude=longitude,
                                        api_key=self.api_key)

    def fetch(self, latitude: Optional[float], longitude: Optional[float]) -> AdvisoryResult:
        """
        Issue a single advisory request for the given coordinates.

        Raises:
            AdvisoryFetchError: on a transport error, a non-200 status or an
                                unparseable payload
        """
        if latitude is None or longitude is None:
            raise AdvisoryFetchError("Advisory lookup needs both coordinates")

        url = self.url(latitude, longitude)
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["X-API-Key"] = self.api_key

        logger.info("Advisory request for %s,%s", latitude, longitude)
        try:
            r = self.session.get(url, headers=headers)
        except httpx.HTTPError as e:
            logger.error("Advisory request failed: %s", e)
            raise AdvisoryFetchError("We cannot retrieve flight data at the moment") from e

        if r.status_code != 200:
            logger.error("Advisory request returned HTTP %s: %s", r.status_code, r.text)
            raise AdvisoryFetchError("Advisory service returned HTTP %s" % r.status_code)

        try:
            data = r.json()
        except ValueError as e:
            raise AdvisoryFetchError("Advisory service returned invalid JSON") from e

        if not isinstance(data, dict):
            raise AdvisoryFetchError("Unexpected advisory payload")

        result = AdvisoryResult.from_json(data)
        logger.info("%s, %s, %s, %s", result.hazard_color, result.advisory,
                    result.weather_condition, result.wind_speed)
        return result
