#!/usr/bin/env python3

# =============================================================================
#
# Copyright 2017 by Leland Lucius
#
# Released under the GNU Affero GPL
# See: https://github.com/lllucius/climacast/blob/master/LICENSE
#
# =============================================================================

"""
Command-line interface for testing Fly Drone locally.

This CLI builds Alexa Skill request envelopes, runs them through the lambda
handler and prints the response.  Session state can be kept in local JSON
files so a permission request can be followed by a location data request.
"""

import argparse
import json
import logging
import sys

from dotenv import load_dotenv

from utils.constants import Intent, Permission

INTENTS = {
    "launch": None,
    "welcome": Intent.WELCOME,
    "request_permission": Intent.REQUEST_LOCATION_PERMISSION,
    "location_data": Intent.HANDLE_LOCATION_DATA,
    "deep_link": Intent.UNHANDLED_DEEP_LINK,
    "address": Intent.CUSTOM_ADDRESS,
}


def build_event(intent=None, query=None, address=None, screen=False,
                granted=None, latitude=None, longitude=None,
                attributes=None, session_id="amzn1.echo-api.session.test",
                user_id="amzn1.ask.account.test"):
    """
    Emulate an Alexa Skill request in JSON format.

    Args:
        intent: Intent to request, or None for a LaunchRequest
        query: Utterance for the unhandled deep link intent
        address: Utterance for the custom address intent
        screen: True when the device has a display
        granted: Permission granted by the user, if any
        latitude, longitude: Device coordinates shared by the device
        attributes: Session attributes
        session_id: Session identifier
        user_id: User identifier

    Returns:
        Dictionary with the request envelope
    """
    user = {"userId": user_id}
    if granted is Permission.COARSE:
        user["permissions"] = {"consentToken": "amzn1.ask.consent.test"}
    elif granted is Permission.PRECISE:
        user["permissions"] = {
            "scopes": {Permission.PRECISE.scope: {"status": "GRANTED"}}
        }

    supported_interfaces = {}
    if screen:
        supported_interfaces["Display"] = {}

    context = {
        "System": {
            "application": {"applicationId": "amzn1.ask.skill.test"},
            "user": user,
            "device": {
                "deviceId": "amzn1.ask.device.test",
                "supportedInterfaces": supported_interfaces
            },
            "apiEndpoint": "https://api.amazonalexa.com",
            "apiAccessToken": "amzn1.ask.token.test"
        }
    }
    if latitude is not None and longitude is not None:
        context["Geolocation"] = {
            "timestamp": "2024-01-01T00:00:00Z",
            "coordinate": {
                "latitudeInDegrees": latitude,
                "longitudeInDegrees": longitude,
                "accuracyInMeters": 10
            }
        }

    if intent is None:
        request = {"type": "LaunchRequest"}
    else:
        slots = {}
        if query is not None:
            slots["query"] = {"name": "query", "value": query}
        if address is not None:
            slots["address"] = {"name": "address", "value": address}
        request = {
            "type": "IntentRequest",
            "intent": {
                "name": intent.value if isinstance(intent, Intent) else intent,
                "confirmationStatus": "NONE",
                "slots": slots
            }
        }
    request.update({
        "requestId": "amzn1.echo-api.request.test",
        "timestamp": "2024-01-01T00:00:00Z",
        "locale": "en-US"
    })

    return {
        "version": "1.0",
        "session": {
            "new": intent is None,
            "sessionId": session_id,
            "application": {"applicationId": "amzn1.ask.skill.test"},
            "attributes": attributes or {},
            "user": user
        },
        "context": context,
        "request": request
    }


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Fly Drone CLI - Test the skill locally",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Launch request
  %(prog)s launch

  # Check an address
  %(prog)s address --address "221B Baker Street"

  # Ask for a location permission from a phone, then use the coordinates
  %(prog)s --state-dir /tmp/flydrone request_permission --screen
  %(prog)s --state-dir /tmp/flydrone location_data --granted precise \\
      --latitude 47.6 --longitude -122.3

  # Use JSON input file
  %(prog)s --json-input request.json
        """
    )

    parser.add_argument(
        "--state-dir",
        help="Directory for JSON session state files"
    )

    parser.add_argument(
        "--json-input",
        help="Path to JSON file containing a request envelope"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log request and response envelopes"
    )

    parser.add_argument(
        "request",
        nargs="?",
        choices=sorted(INTENTS),
        default="launch",
        help="Request to send (default: launch)"
    )

    parser.add_argument("--query", help="Utterance for the deep_link request")
    parser.add_argument("--address", help="Address for the address request")
    parser.add_argument("--screen", action="store_true",
                        help="Emulate a device with a display")
    parser.add_argument("--granted", choices=[p.value for p in Permission],
                        help="Location permission granted by the user")
    parser.add_argument("--requested", choices=[p.value for p in Permission],
                        help="Location permission requested earlier in the session")
    parser.add_argument("--latitude", type=float, help="Device latitude")
    parser.add_argument("--longitude", type=float, help="Device longitude")
    parser.add_argument("--session-id", default="amzn1.echo-api.session.test",
                        help="Session identifier")

    args = parser.parse_args()

    load_dotenv()
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

    if args.json_input:
        with open(args.json_input) as f:
            event = json.load(f)
    else:
        attributes = {}
        if args.requested:
            attributes["requestedPermission"] = args.requested
        event = build_event(
            intent=INTENTS[args.request],
            query=args.query,
            address=args.address,
            screen=args.screen,
            granted=Permission.from_value(args.granted),
            latitude=args.latitude,
            longitude=args.longitude,
            attributes=attributes,
            session_id=args.session_id
        )

    # Imported late so logging is configured first
    import lambda_function

    if args.state_dir:
        from storage.local_handlers import LocalJsonSessionStateHandler

        session_id = event.get("session", {}).get("sessionId", args.session_id)
        state_handler = LocalJsonSessionStateHandler(session_id, args.state_dir)
        if args.requested:
            state_handler.set_requested_permission(args.requested)
        lambda_function.TEST_STATE_HANDLER = state_handler

    response = lambda_function.lambda_handler(event)
    print(json.dumps(response, indent=4))

    return 0


if __name__ == "__main__":
    sys.exit(main())
