#!/usr/bin/env python3
"""
Unit tests for the unusual-event report.
"""
import logging

from utils.notify import notify


def test_notify_reports_intent_and_slots(caplog):
    event = {
        "request": {
            "type": "IntentRequest",
            "intent": {
                "name": "CustomAddressIntent",
                "slots": {"address": {"name": "address", "value": "221B Baker Street"}}
            }
        }
    }

    with caplog.at_level(logging.INFO, logger="utils.notify"):
        notify(event, "Exception", "GeocodingError: No geocoding results")

    text = caplog.text
    assert "IntentRequest - CustomAddressIntent" in text
    assert "221B Baker Street" in text
    assert "MESSAGE:" in text
    assert "GeocodingError" in text


def test_notify_without_request(caplog):
    with caplog.at_level(logging.INFO, logger="utils.notify"):
        notify({"session": {}}, "Session Ended")

    assert "Session Ended" in caplog.text
    assert "REQUEST:" not in caplog.text
