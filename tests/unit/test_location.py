#!/usr/bin/env python3
"""
Unit tests for ResolvedLocation.
"""
import dataclasses

import pytest

from advisory.location import ResolvedLocation


def test_empty_location_is_not_resolvable():
    assert not ResolvedLocation().is_resolvable()
    assert not ResolvedLocation(latitude=47.6).is_resolvable()
    assert not ResolvedLocation(longitude=-122.3).is_resolvable()


def test_city_or_coordinates_resolve():
    assert ResolvedLocation(city="Seattle").is_resolvable()
    assert ResolvedLocation(latitude=0.0, longitude=0.0).is_resolvable()


def test_steps_return_new_values():
    """Test that each resolution step leaves the previous value untouched"""
    start = ResolvedLocation()
    with_coords = start.with_coordinates(37.77, -122.42)
    done = with_coords.with_city("San Francisco")

    assert start == ResolvedLocation()
    assert with_coords == ResolvedLocation("", 37.77, -122.42)
    assert done == ResolvedLocation("San Francisco", 37.77, -122.42)
    assert done.has_coordinates


def test_location_is_immutable():
    location = ResolvedLocation(city="Seattle")
    with pytest.raises(dataclasses.FrozenInstanceError):
        location.city = "Tacoma"


def test_with_city_none():
    assert ResolvedLocation(city="x").with_city(None).city == ""
