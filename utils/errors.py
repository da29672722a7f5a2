# =============================================================================
#
# Copyright 2017 by Leland Lucius
#
# Released under the GNU Affero GPL
# See: https://github.com/lllucius/climacast/blob/master/LICENSE
#
# =============================================================================

"""
Exceptions raised while answering a request.

Every one of them ends the turn with the generic failure prompt.
"""


class FlyDroneError(Exception):
    """Base class for request failures."""


class UnrecognizedIntentError(FlyDroneError):
    """No handler exists for the request."""


class UnresolvableLocationError(FlyDroneError):
    """Neither a city nor both coordinates are known."""


class GeocodingError(FlyDroneError):
    """The geocoding service returned no usable result."""


class AdvisoryFetchError(FlyDroneError):
    """The advisory service failed or returned an unparseable payload."""


class PermissionDeniedError(FlyDroneError):
    """Location data was requested without a granted permission."""


class UnrecognizedPermissionError(FlyDroneError):
    """The session holds no known requested permission."""
