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
Session state handlers for Fly Drone.

This module provides base and Alexa-specific implementations for keeping the
location permission requested from the user's device.
"""

import logging
from typing import Optional

from ask_sdk_core.handler_input import HandlerInput

from utils.constants import REQUESTED_PERMISSION

# Configure logging
logger = logging.getLogger(__name__)


class SessionStateHandler(object):
    """
    Base class for handling session state operations.
    This allows different backends for session state storage.
    """

    def __init__(self) -> None:
        """Initialize the session state handler."""
        pass

    def get_requested_permission(self) -> Optional[str]:
        """Get the permission last requested from the device."""
        raise NotImplementedError("Subclass must implement get_requested_permission()")

    def set_requested_permission(self, permission: str) -> None:
        """Set the permission requested from the device."""
        raise NotImplementedError("Subclass must implement set_requested_permission()")


class AlexaSessionStateHandler(SessionStateHandler):
    """
    Session state handler implementation using Alexa's attributes_manager.

    The value lives in the session attributes.  When a persistence adapter
    is configured it is also saved to the persistent attributes, since the
    user may grant the permission in the Alexa app after the session ended.
    """

    def __init__(self, handler_input: HandlerInput, persistent: bool = False) -> None:
        """
        Initialize with Alexa handler input for accessing attributes_manager.

        Args:
            handler_input: ASK SDK HandlerInput object
            persistent: True when the skill has a persistence adapter
        """
        super().__init__()
        self.handler_input = handler_input
        self.attr_mgr = handler_input.attributes_manager
        self.persistent = persistent

    def get_requested_permission(self) -> Optional[str]:
        permission = self.attr_mgr.session_attributes.get(REQUESTED_PERMISSION)
        if permission is None and self.persistent:
            permission = self.attr_mgr.persistent_attributes.get(REQUESTED_PERMISSION)
            logger.info("Requested permission from persistent attributes: %s", permission)
        return permission

    def set_requested_permission(self, permission: str) -> None:
        self.attr_mgr.session_attributes[REQUESTED_PERMISSION] = permission
        if self.persistent:
            persistent_attrs = self.attr_mgr.persistent_attributes
            persistent_attrs[REQUESTED_PERMISSION] = permission
            self.attr_mgr.save_persistent_attributes()
