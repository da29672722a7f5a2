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
The location an advisory is fetched for.

A ResolvedLocation is built up in steps (a spoken address, then the
coordinates it geocodes to; or device coordinates, then the city they
reverse geocode to).  Each step returns a new value.
"""

from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class ResolvedLocation:
    city: str = ""
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    def with_city(self, city: Optional[str]) -> "ResolvedLocation":
        return replace(self, city=city or "")

    def with_coordinates(self, latitude: float, longitude: float) -> "ResolvedLocation":
        return replace(self, latitude=latitude, longitude=longitude)

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    def is_resolvable(self) -> bool:
        """True when a city name or both coordinates are known."""
        return bool(self.city) or self.has_coordinates

    def __str__(self) -> str:
        return "%s [%s,%s]" % (self.city or "?", self.latitude, self.longitude)
