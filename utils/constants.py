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
Constants for Fly Drone.

Intent names, permission scopes, hazard advisories and the speech text.
"""

from enum import Enum
from typing import Optional


class Intent(Enum):
    """The intents this skill answers. Anything else is unrecognized."""

    WELCOME = "WelcomeIntent"
    REQUEST_LOCATION_PERMISSION = "RequestLocationPermissionIntent"
    HANDLE_LOCATION_DATA = "HandleLocationDataIntent"
    UNHANDLED_DEEP_LINK = "UnhandledDeepLinkIntent"
    CUSTOM_ADDRESS = "CustomAddressIntent"

    @classmethod
    def from_name(cls, name: Optional[str]) -> Optional["Intent"]:
        """Return the intent for a platform intent name, or None."""
        if name is None:
            return None
        name = INTENT_ALIASES.get(name, name)
        for intent in cls:
            if intent.value == name:
                return intent
        return None


# Platform names routed to one of the intents above
INTENT_ALIASES = {
    "AMAZON.FallbackIntent": Intent.UNHANDLED_DEEP_LINK.value,
}


class Permission(Enum):
    """Location precision requested from the device."""

    COARSE = "coarse"
    PRECISE = "precise"

    @property
    def scope(self) -> str:
        return PERMISSION_SCOPES[self]

    @classmethod
    def from_value(cls, value: Optional[str]) -> Optional["Permission"]:
        for permission in cls:
            if permission.value == value:
                return permission
        return None


PERMISSION_SCOPES = {
    Permission.COARSE: "read::alexa:device:all:address",
    Permission.PRECISE: "alexa::devices:all:geolocation:read",
}

# Session attribute holding the requested Permission value
REQUESTED_PERMISSION = "requestedPermission"

# Slots carrying the raw user utterance
SLOTS = ["query", "address"]

HAZARD_ADVISORIES = {
    "red": "is strictly prohibited. Please change location and check again",
    "orange": "is restricted. Action is required to get authorization to fly your drone in this area",
    "yellow": "is restricted. Please check advisories and use caution when flying your drone",
    "green": "has no restrictions, but please use caution when flying your drone",
}

UNKNOWN_HAZARD_ADVISORY = \
    "could not be classified. Please check local regulations before flying your drone"

# =============================================================================
# Speech templates (values are escaped by utils.ssml.ssml)
# =============================================================================

SAY_LOCATION = """
    <speak>
      Here are the results: <break time="500ms"/>
      Flying your drone at {city} {advisory}.<break time="500ms"/>
      The weather condition is {condition}, <break time="250ms"/>
      and the wind speed is {wind}.
    </speak>
"""

GREET_USER = """
    <speak>
      Welcome to Fly Drone!
      <break time="500ms"/>
      We can tell you about flight restrictions and weather for flying
      your drone in your area.
      <break time="500ms"/>
      Do you want us to use your current location, or do you want to check an address?
    </speak>
"""

UNHANDLED_DEEP_LINK = """
    <speak>
      We're sorry, we didn't understand {input}. Please try again.
    </speak>
"""

FLY_DRONE_ERROR = """
    <speak>
      Oops!
      <break time="1s"/>
      Something went wrong, and we couldn't get the information you asked for.
      <break time="250ms"/>
      Please try again later.
    </speak>
"""

COARSE_LOCATION = """
    <speak>
      We weren't able to find your precise location using your device.
      <break time="250ms"/>
      Your device's current location {city} is not precise enough to return accurate information.
      <break time="500ms"/>
      Please use a specific address instead.
    </speak>
"""

NO_COARSE_LOCATION = """
    <speak>
      Oops!
      <break time="1s"/>
      We didn't see a location set in your device.
      <break time="250ms"/>
      But you can try again with a specific address.
    </speak>
"""

PERMISSION_REASON = """
    <speak>
      To find your device location, please grant location access in the
      Alexa app, then say check my location.
    </speak>
"""

PERMISSION_REPROMPT = """
    <speak>
      When you have granted location access, say check my location,
      or tell me an address.
    </speak>
"""

MAP_CARD_TITLE = "Location Map"
