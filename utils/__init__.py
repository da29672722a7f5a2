"""
Utility modules for Fly Drone.

This package contains configuration, constants, SSML helpers and the
geocoding client.
"""

from .constants import (HAZARD_ADVISORIES, INTENT_ALIASES, PERMISSION_SCOPES,
                        REQUESTED_PERMISSION, SLOTS, UNKNOWN_HAZARD_ADVISORY,
                        Intent, Permission)
from .geolocator import Geolocator

__all__ = ['Geolocator', 'HAZARD_ADVISORIES', 'INTENT_ALIASES', 'Intent',
           'Permission', 'PERMISSION_SCOPES', 'REQUESTED_PERMISSION', 'SLOTS',
           'UNKNOWN_HAZARD_ADVISORY']
