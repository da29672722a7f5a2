"""
Flight advisory modules for Fly Drone.

This package contains the advisory service client, the resolved location
value and the speech/card rendering.
"""

from advisory.location import ResolvedLocation
from advisory.service import AdvisoryClient, AdvisoryResult, advisory_for

__all__ = [
    'AdvisoryClient',
    'AdvisoryResult',
    'ResolvedLocation',
    'advisory_for',
]
