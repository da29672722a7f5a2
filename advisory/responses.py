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
Speech and card rendering for Fly Drone.
"""

import httpx
from ask_sdk_model.ui import Image, StandardCard

from advisory.location import ResolvedLocation
from advisory.service import AdvisoryResult
from utils import constants
from utils.config import Config
from utils.ssml import ssml


def static_map_url(city: str, latitude: float, longitude: float,
                   api_key: str = None) -> str:
    """
    Return a Static Maps URL centered on the city with a marker at the
    coordinates.
    """
    params = {
        "key": Config.MAPS_API_KEY if api_key is None else api_key,
        "size": Config.STATIC_MAPS_SIZE,
        "center": city,
        "markers": "color:red|%s,%s" % (latitude, longitude),
    }
    return str(httpx.URL(Config.STATIC_MAPS_URL, params=params))


def map_card(location: ResolvedLocation) -> StandardCard:
    url = static_map_url(location.city, location.latitude, location.longitude)
    return StandardCard(title=constants.MAP_CARD_TITLE,
                        text=location.city,
                        image=Image(small_image_url=url, large_image_url=url))


def say_location(location: ResolvedLocation, result: AdvisoryResult) -> str:
    return ssml(constants.SAY_LOCATION,
                city=location.city,
                advisory=result.advisory,
                condition=result.weather_condition,
                wind=result.wind_speed)


def greet_user() -> str:
    return ssml(constants.GREET_USER)


def unhandled_deep_link(utterance: str) -> str:
    return ssml(constants.UNHANDLED_DEEP_LINK, input=utterance or "that")


def fly_drone_error() -> str:
    return ssml(constants.FLY_DRONE_ERROR)


def coarse_location(city: str) -> str:
    return ssml(constants.COARSE_LOCATION, city=city)


def no_coarse_location() -> str:
    return ssml(constants.NO_COARSE_LOCATION)


def permission_reason() -> str:
    return ssml(constants.PERMISSION_REASON)


def permission_reprompt() -> str:
    return ssml(constants.PERMISSION_REPROMPT)
