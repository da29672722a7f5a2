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
Lambda function handler for the Fly Drone Alexa Skill.

This module contains the ASK SDK request handlers.  Each of the five
intents is answered by one handler; the location is resolved from the
device or from a spoken address, and the flight advisory for it is read
back together with a map card.
"""

import json
import logging
import traceback
from typing import Optional, Tuple

from ask_sdk_core.dispatch_components import AbstractRequestHandler, AbstractExceptionHandler
from ask_sdk_core.dispatch_components import AbstractRequestInterceptor, AbstractResponseInterceptor
from ask_sdk_core.exceptions import ApiClientException
from ask_sdk_core.handler_input import HandlerInput
from ask_sdk_core.serialize import DefaultSerializer
from ask_sdk_core.skill_builder import CustomSkillBuilder
from ask_sdk_core.utils import get_intent_name, is_request_type
from ask_sdk_model import RequestEnvelope, Response
from ask_sdk_model.permission_status import PermissionStatus
from ask_sdk_model.services import ServiceException
from ask_sdk_model.ui import AskForPermissionsConsentCard

from advisory import responses
from advisory.location import ResolvedLocation
from storage.session_state import AlexaSessionStateHandler, SessionStateHandler
from utils.api_client import TimeoutApiClient
from utils.config import Config
from utils.constants import Intent, Permission
from utils.errors import (PermissionDeniedError, UnrecognizedIntentError,
                          UnrecognizedPermissionError, UnresolvableLocationError)
from utils.factories import get_advisory_client, get_geolocator
from utils.notify import event_from_envelope, notify

# Configure logging
logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)

Config.validate()

# Set by the command line interface to keep state in local files
TEST_STATE_HANDLER = None


class FlyDrone(object):
    """
    Answers one request.

    Holds the handler input, the session state handler and the two service
    clients.  The location being resolved is passed from step to step as a
    ResolvedLocation value rather than stored here.
    """

    def __init__(self, handler_input: HandlerInput, state_handler: SessionStateHandler,
                 geolocator=None, advisory_client=None):
        self.handler_input = handler_input
        self.request_envelope = handler_input.request_envelope
        self.request = self.request_envelope.request
        self.state_handler = state_handler
        self.geolocator = geolocator
        self.advisory_client = advisory_client

    # -------------------------------------------------------------------------
    # Request accessors
    # -------------------------------------------------------------------------

    def get_slot_values(self):
        """Extract slot values from the intent"""
        slots = {}
        intent = getattr(self.request, "intent", None)
        if intent is not None and intent.slots:
            for slot_name, slot in intent.slots.items():
                slots[slot_name] = slot.value.strip() if slot.value else None
        return slots

    def get_raw_input(self, slot_name: str) -> Optional[str]:
        return self.get_slot_values().get(slot_name)

    @property
    def system(self):
        context = self.request_envelope.context
        return context.system if context else None

    def has_screen(self) -> bool:
        """True when the device can show visual output."""
        device = self.system.device if self.system else None
        interfaces = device.supported_interfaces if device else None
        if interfaces is None:
            return False
        return interfaces.display is not None or interfaces.alexa_presentation_apl is not None

    def is_permission_granted(self, permission: Optional[Permission] = None) -> bool:
        """
        Check whether the user granted a location permission.

        Args:
            permission: The permission to check, or None for either one
        """
        user = self.system.user if self.system else None
        permissions = user.permissions if user else None
        if permissions is None:
            return False

        scope = (permissions.scopes or {}).get(Permission.PRECISE.scope)
        precise = scope is not None and scope.status == PermissionStatus.GRANTED
        coarse = permissions.consent_token is not None

        if permission is Permission.PRECISE:
            return precise
        if permission is Permission.COARSE:
            return coarse
        return precise or coarse

    def get_device_city(self) -> Optional[str]:
        """Return the city set for the device in the Alexa app, if any."""
        factory = self.handler_input.service_client_factory
        if factory is None or self.system is None or self.system.device is None:
            raise UnresolvableLocationError("Device address service is not available")

        try:
            address = factory.get_device_address_service().get_full_address(
                self.system.device.device_id)
        except ServiceException as e:
            logger.error("Device address lookup failed (%s): %s", e.status_code, e)
            if e.status_code in (401, 403):
                raise PermissionDeniedError("Device address is not accessible") from e
            raise UnresolvableLocationError("Device address lookup failed") from e
        except ApiClientException as e:
            logger.error("Device address request failed: %s", e)
            raise UnresolvableLocationError("Device address lookup failed") from e

        return address.city if address else None

    def get_device_coordinates(self) -> Tuple[float, float]:
        context = self.request_envelope.context
        geolocation = context.geolocation if context else None
        if geolocation is None or geolocation.coordinate is None:
            raise PermissionDeniedError("Device did not share its coordinates")

        coordinate = geolocation.coordinate
        return coordinate.latitude_in_degrees, coordinate.longitude_in_degrees

    # -------------------------------------------------------------------------
    # Responses
    # -------------------------------------------------------------------------

    def ask(self, speech: str, reprompt: Optional[str] = None, card=None) -> Response:
        response_builder = self.handler_input.response_builder
        response_builder.speak(speech).ask(reprompt or speech)
        if card is not None:
            response_builder.set_card(card)
        return response_builder.response

    def tell(self, speech: str, card=None) -> Response:
        response_builder = self.handler_input.response_builder
        response_builder.speak(speech).set_should_end_session(True)
        if card is not None:
            response_builder.set_card(card)
        return response_builder.response

    # -------------------------------------------------------------------------
    # Intents
    # -------------------------------------------------------------------------

    def welcome(self) -> Response:
        return self.ask(responses.greet_user())

    def unhandled_deep_link(self) -> Response:
        return self.ask(responses.unhandled_deep_link(self.get_raw_input("query")))

    def request_location_permission(self) -> Response:
        # Phones have a screen and GPS; speakers only know their address
        permission = Permission.PRECISE if self.has_screen() else Permission.COARSE
        self.state_handler.set_requested_permission(permission.value)

        if self.is_permission_granted(permission):
            logger.info("%s location permission already granted", permission.value)
            return self.handle_location_data()

        logger.info("Asking for %s location permission", permission.value)
        return self.ask(responses.permission_reason(),
                        reprompt=responses.permission_reprompt(),
                        card=AskForPermissionsConsentCard(permissions=[permission.scope]))

    def custom_address(self) -> Response:
        address = self.get_raw_input("address")
        logger.info("query user input address: %s", address)

        location = ResolvedLocation().with_city(address)
        latitude, longitude = self.geolocator.geocode(address)
        location = location.with_coordinates(latitude, longitude)

        logger.info("calling from address subroutine")
        return self.fetch_advisory(location)

    def handle_location_data(self) -> Response:
        if not self.is_permission_granted():
            logger.info("Permission not granted by user.")
            raise PermissionDeniedError("Permission not granted")

        requested = self.state_handler.get_requested_permission()
        permission = Permission.from_value(requested)

        if permission is Permission.COARSE:
            # Coarse location is never precise enough to look up an advisory
            city = self.get_device_city()
            if not city:
                logger.info("no coarse location set for this device.")
                return self.tell(responses.no_coarse_location())

            logger.info("log coarse location at [%s]", city)
            return self.tell(responses.coarse_location(city))

        if permission is Permission.PRECISE:
            latitude, longitude = self.get_device_coordinates()
            location = ResolvedLocation().with_coordinates(latitude, longitude)
            logger.info("log exact location: [%s,%s]", latitude, longitude)

            location = location.with_city(self.geolocator.reverse_geocode(latitude, longitude))

            logger.info("calling from exact location subroutine")
            return self.fetch_advisory(location)

        logger.info("Unrecognized permission: %s", requested)
        raise UnrecognizedPermissionError("Unrecognized permission %r" % (requested,))

    def fetch_advisory(self, location: ResolvedLocation) -> Response:
        """
        Look up the advisory for the location and read it back with a map.
        """
        if not location.is_resolvable():
            logger.info("cannot resolve location.")
            raise UnresolvableLocationError("We cannot resolve the location.")

        result = self.advisory_client.fetch(location.latitude, location.longitude)
        logger.info("Advisory for %s: %s", location, result)

        return self.tell(responses.say_location(location, result),
                         card=responses.map_card(location))


# ============================================================================
# ASK SDK Request Handlers
# ============================================================================

class BaseIntentHandler(AbstractRequestHandler):
    """Base handler providing common functionality for all intent handlers"""

    intent = None  # type: Intent

    def can_handle(self, handler_input):
        return (is_request_type("IntentRequest")(handler_input) and
                Intent.from_name(get_intent_name(handler_input)) is self.intent)

    def get_skill_helper(self, handler_input):
        """Create FlyDrone instance from handler_input"""
        if TEST_STATE_HANDLER is not None:
            state_handler = TEST_STATE_HANDLER
        else:
            state_handler = AlexaSessionStateHandler(
                handler_input, persistent=persistence_adapter is not None)

        return FlyDrone(handler_input, state_handler,
                        geolocator=get_geolocator(),
                        advisory_client=get_advisory_client())


class LaunchRequestHandler(BaseIntentHandler):
    """Handler for Skill Launch and the Welcome Intent"""

    intent = Intent.WELCOME

    def can_handle(self, handler_input):
        return (is_request_type("LaunchRequest")(handler_input) or
                super().can_handle(handler_input))

    def handle(self, handler_input):
        return self.get_skill_helper(handler_input).welcome()


class UnhandledDeepLinkIntentHandler(BaseIntentHandler):
    """Handler for utterances the skill has no answer for"""

    intent = Intent.UNHANDLED_DEEP_LINK

    def handle(self, handler_input):
        return self.get_skill_helper(handler_input).unhandled_deep_link()


class RequestLocationPermissionIntentHandler(BaseIntentHandler):
    """Handler for Request Location Permission Intent"""

    intent = Intent.REQUEST_LOCATION_PERMISSION

    def handle(self, handler_input):
        return self.get_skill_helper(handler_input).request_location_permission()


class HandleLocationDataIntentHandler(BaseIntentHandler):
    """Handler for Handle Location Data Intent"""

    intent = Intent.HANDLE_LOCATION_DATA

    def handle(self, handler_input):
        return self.get_skill_helper(handler_input).handle_location_data()


class CustomAddressIntentHandler(BaseIntentHandler):
    """Handler for Custom Address Intent"""

    intent = Intent.CUSTOM_ADDRESS

    def handle(self, handler_input):
        return self.get_skill_helper(handler_input).custom_address()


class UnrecognizedIntentHandler(AbstractRequestHandler):
    """Catches intents none of the handlers above recognize"""

    def can_handle(self, handler_input):
        return is_request_type("IntentRequest")(handler_input)

    def handle(self, handler_input):
        raise UnrecognizedIntentError(
            "Unrecognized intent %s" % get_intent_name(handler_input))


class SessionEndedRequestHandler(AbstractRequestHandler):
    """Handler for Session End"""

    def can_handle(self, handler_input):
        return is_request_type("SessionEndedRequest")(handler_input)

    def handle(self, handler_input):
        request = handler_input.request_envelope.request
        event = event_from_envelope(handler_input.request_envelope)

        if getattr(request, "error", None) is not None:
            notify(event, "Error detected", request.error.message)
        else:
            notify(event, "Session Ended", str(getattr(request, "reason", None)))

        return handler_input.response_builder.response


# ============================================================================
# Request and Response Interceptors
# ============================================================================

class RequestLogger(AbstractRequestInterceptor):
    """Log the request envelope."""

    def process(self, handler_input):
        logger.info("Request Envelope: %s", handler_input.request_envelope)


class ResponseLogger(AbstractResponseInterceptor):
    """Log the response envelope."""

    def process(self, handler_input, response):
        logger.info("Response: %s", response)


# ============================================================================
# Exception Handler
# ============================================================================

class AllExceptionHandler(AbstractExceptionHandler):
    """Catch all exception handler."""

    def can_handle(self, handler_input, exception):
        return True

    def handle(self, handler_input, exception):
        event = event_from_envelope(handler_input.request_envelope)

        if isinstance(exception, UnrecognizedIntentError):
            logger.error("Unrecognized intent: %s", exception)
            notify(event, "Unrecognized intent", str(exception))
        else:
            logger.error("Exception encountered: %s", exception)
            notify(event, "Exception", "".join(traceback.format_exception(
                type(exception), exception, exception.__traceback__)))

        handler_input.response_builder.speak(responses.fly_drone_error()) \
                                      .set_should_end_session(True)
        return handler_input.response_builder.response


# ============================================================================
# Skill Builder
# ============================================================================

# Only persist when a DynamoDB table is configured
if Config.persistence_enabled():
    from ask_sdk_dynamodb.adapter import DynamoDbAdapter
    from boto3 import resource

    logger.info("REGION %s %s", Config.DYNAMODB_REGION, Config.DYNAMODB_TABLE_NAME)
    persistence_adapter = DynamoDbAdapter(
        table_name=Config.DYNAMODB_TABLE_NAME,
        create_table=False,
        dynamodb_resource=resource("dynamodb", region_name=Config.DYNAMODB_REGION)
    )
else:
    logger.info("DynamoDB not configured - session state only")
    persistence_adapter = None

# The API client is needed for the Device Address service
sb = CustomSkillBuilder(persistence_adapter=persistence_adapter,
                        api_client=TimeoutApiClient())
if Config.APP_ID:
    sb.skill_id = Config.APP_ID

# Register request handlers (order matters, the catch-all goes last)
sb.add_request_handler(LaunchRequestHandler())
sb.add_request_handler(UnhandledDeepLinkIntentHandler())
sb.add_request_handler(RequestLocationPermissionIntentHandler())
sb.add_request_handler(HandleLocationDataIntentHandler())
sb.add_request_handler(CustomAddressIntentHandler())
sb.add_request_handler(SessionEndedRequestHandler())
sb.add_request_handler(UnrecognizedIntentHandler())

# Register exception handler
sb.add_exception_handler(AllExceptionHandler())

# Register request and response interceptors
sb.add_global_request_interceptor(RequestLogger())
sb.add_global_response_interceptor(ResponseLogger())

# Create the skill instance
skill_instance = sb.create()


# ============================================================================
# Lambda Handler
# ============================================================================

def error_response():
    """Raw response envelope with the generic failure prompt."""
    return {
        "version": "1.0",
        "response": {
            "outputSpeech": {
                "type": "SSML",
                "ssml": responses.fly_drone_error()
            },
            "shouldEndSession": True
        }
    }


def lambda_handler(event, context=None):
    """
    Lambda handler for Alexa skill using ASK SDK.
    """
    try:
        serializer = DefaultSerializer()
        request_envelope = serializer.deserialize(
            json.dumps(event), RequestEnvelope
        )

        response_envelope = skill_instance.invoke(request_envelope, context)

        # Serialize the response back to dict for Lambda
        if response_envelope:
            response_dict = serializer.serialize(response_envelope)
            if isinstance(response_dict, str):
                return json.loads(response_dict)
            return response_dict
        return None

    except Exception:
        logger.error("Lambda handler exception: %s", traceback.format_exc())
        notify(event, "Exception", traceback.format_exc())
        return error_response()


if __name__ == "__main__":
    import cli

    cli.main()
