#!/usr/bin/python3

# =============================================================================
#
# Copyright 2017 by Leland Lucius
#
# Released under the GNU Affero GPL
# See: https://github.com/lllucius/climacast/blob/master/LICENSE
#
# =============================================================================

import json
import logging

from utils.constants import SLOTS

# Configure logging
logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


def notify(event, sub, msg=None):
    """
    Log a report of an unusual event
    """
    text = ""
    if isinstance(event.get("request"), dict):
        request = event["request"]
        intent = request.get("intent", None) if request else None
        slots = intent.get("slots", None) if intent else None

        if request:
            text += "REQUEST:\n\n"
            text += "  " + str(request.get("type"))
            if intent and "name" in intent:
                text += " - " + intent["name"]
            text += "\n\n"

        if slots:
            text += "SLOTS:\n\n"
            for slot in SLOTS:
                text += "  %-15s %s\n" % (
                    slot + ":",
                    str((slots.get(slot) or {}).get("value", None)),
                )
            text += "\n"

    text += "EVENT:\n\n"
    text += json.dumps(event, indent=4, default=str)
    text += "\n\n"

    if msg:
        text += "MESSAGE:\n\n"
        text += "  " + msg
        text += "\n\n"

    logger.info(f"NOTIFY:\n\n  {sub}\n\n{text}")


def event_from_envelope(request_envelope):
    """
    Build the small event dict used by notify() from an ASK request envelope.
    """
    request = request_envelope.request
    event = {
        "session": {
            "sessionId": request_envelope.session.session_id if request_envelope.session else None,
        },
        "request": {
            "type": request.object_type,
            "requestId": request.request_id,
        },
    }

    intent = getattr(request, "intent", None)
    if intent is not None:
        event["request"]["intent"] = {"name": intent.name, "slots": {}}
        for slot_name, slot in (intent.slots or {}).items():
            event["request"]["intent"]["slots"][slot_name] = {
                "name": slot.name,
                "value": slot.value,
            }

    return event
