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
Local testing handlers for Fly Drone.

This module provides a file-based implementation of the session state
handler for running the skill from the command line without DynamoDB.
"""

import json
import logging
import os
import re
from typing import Optional

from storage.session_state import SessionStateHandler
from utils.constants import REQUESTED_PERMISSION

# Configure logging
logger = logging.getLogger(__name__)


class LocalJsonSessionStateHandler(SessionStateHandler):
    """
    Session state handler implementation using local JSON files.

    State is stored in a single JSON file per session.
    """

    def __init__(self, session_id: str, state_dir: str = ".test_state") -> None:
        """
        Initialize with a session ID and local directory for state storage.

        Args:
            session_id: Session identifier
            state_dir: Directory to store state JSON files
        """
        super().__init__()
        self.session_id = session_id
        self.state_dir = state_dir

        # Create state directory if it doesn't exist
        os.makedirs(state_dir, exist_ok=True)

        self._load_state()

    def _get_file_path(self) -> str:
        # Sanitize session_id for filename
        safe_id = re.sub(r"[^\w\s-]", "_", self.session_id).strip().replace(" ", "_")
        return os.path.join(self.state_dir, f"{safe_id}.json")

    def _load_state(self) -> None:
        """Load state from local JSON file."""
        file_path = self._get_file_path()
        self._state = {}

        if os.path.exists(file_path):
            try:
                with open(file_path, "r") as f:
                    self._state = json.load(f)
            except (OSError, ValueError) as e:
                logger.error(f"Error loading state for {self.session_id}: {e}")

    def _save_state(self) -> None:
        """Save state to local JSON file."""
        with open(self._get_file_path(), "w") as f:
            json.dump(self._state, f, indent=2)

    def get_requested_permission(self) -> Optional[str]:
        return self._state.get(REQUESTED_PERMISSION)

    def set_requested_permission(self, permission: str) -> None:
        self._state[REQUESTED_PERMISSION] = permission
        self._save_state()
