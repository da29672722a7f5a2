"""
Storage modules for Fly Drone.

This package contains the session state handlers.
"""

from .local_handlers import LocalJsonSessionStateHandler
from .session_state import AlexaSessionStateHandler, SessionStateHandler

__all__ = [
    "SessionStateHandler",
    "AlexaSessionStateHandler",
    "LocalJsonSessionStateHandler",
]
