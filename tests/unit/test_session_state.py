#!/usr/bin/env python3
"""
Unit tests for the session state handlers.
"""
from unittest.mock import MagicMock

import pytest

from storage.local_handlers import LocalJsonSessionStateHandler
from storage.session_state import AlexaSessionStateHandler, SessionStateHandler
from utils.constants import REQUESTED_PERMISSION


def make_handler_input(session_attributes=None, persistent_attributes=None):
    handler_input = MagicMock()
    handler_input.attributes_manager.session_attributes = \
        {} if session_attributes is None else session_attributes
    handler_input.attributes_manager.persistent_attributes = \
        {} if persistent_attributes is None else persistent_attributes
    return handler_input


def test_base_handler_is_abstract():
    handler = SessionStateHandler()
    with pytest.raises(NotImplementedError):
        handler.get_requested_permission()
    with pytest.raises(NotImplementedError):
        handler.set_requested_permission("coarse")


def test_alexa_handler_uses_session_attributes():
    handler_input = make_handler_input()
    handler = AlexaSessionStateHandler(handler_input)

    assert handler.get_requested_permission() is None
    handler.set_requested_permission("precise")

    assert handler_input.attributes_manager.session_attributes == {REQUESTED_PERMISSION: "precise"}
    assert handler.get_requested_permission() == "precise"
    handler_input.attributes_manager.save_persistent_attributes.assert_not_called()


def test_alexa_handler_persists_when_enabled():
    """Test that the value is mirrored to persistent attributes and read back"""
    handler_input = make_handler_input()
    handler = AlexaSessionStateHandler(handler_input, persistent=True)
    handler.set_requested_permission("coarse")

    attr_mgr = handler_input.attributes_manager
    assert attr_mgr.persistent_attributes[REQUESTED_PERMISSION] == "coarse"
    attr_mgr.save_persistent_attributes.assert_called_once_with()

    # A new session only has the persisted value
    later = make_handler_input(persistent_attributes={REQUESTED_PERMISSION: "coarse"})
    assert AlexaSessionStateHandler(later, persistent=True).get_requested_permission() == "coarse"
    assert AlexaSessionStateHandler(later).get_requested_permission() is None


def test_local_json_handler_round_trip(tmp_path):
    state_dir = str(tmp_path / "state")
    handler = LocalJsonSessionStateHandler("amzn1.echo-api.session.test", state_dir)
    assert handler.get_requested_permission() is None

    handler.set_requested_permission("precise")

    reloaded = LocalJsonSessionStateHandler("amzn1.echo-api.session.test", state_dir)
    assert reloaded.get_requested_permission() == "precise"
    assert LocalJsonSessionStateHandler("other", state_dir).get_requested_permission() is None


def test_local_json_handler_ignores_corrupt_file(tmp_path):
    handler = LocalJsonSessionStateHandler("bad", str(tmp_path))
    with open(handler._get_file_path(), "w") as f:
        f.write("{not json")

    assert LocalJsonSessionStateHandler("bad", str(tmp_path)).get_requested_permission() is None
