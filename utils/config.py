# =============================================================================
#
# Copyright 2017 by Leland Lucius
#
# Released under the GNU Affero GPL
# See: https://github.com/lllucius/climacast/blob/master/LICENSE
#
# =============================================================================

import logging
import os

from dotenv import load_dotenv

# Configure logging
logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


load_dotenv()


class Config:
    """
    Configuration class for managing environment variables and application settings.
    Provides a centralized location for all configuration values.

    Environment Variables:
        app_id: Alexa skill application ID (verified when set)
        maps_api_key: Google Maps API key for geocoding and static maps
        advisory_api_key: Flight advisory API key
        advisory_url: Flight advisory URL template with {latitude},
                      {longitude} and optionally {api_key}
        DYNAMODB_PERSISTENCE_TABLE_NAME: DynamoDB table name (optional)
        DYNAMODB_PERSISTENCE_REGION: AWS region (optional)
        HTTP_TIMEOUT: Timeout in seconds for outbound calls (default: 10)

    Example:
        Access configuration values:
            key = Config.MAPS_API_KEY
            url = Config.ADVISORY_URL
    """

    # Application identifiers
    APP_ID: str = os.environ.get("app_id", "")

    # API keys
    MAPS_API_KEY: str = os.environ.get("maps_api_key", "")
    ADVISORY_API_KEY: str = os.environ.get("advisory_api_key", "")

    # Advisory service
    ADVISORY_URL: str = os.environ.get(
        "advisory_url",
        "https://api.airmap.com/status/v2/point/"
        "?latitude={latitude}&longitude={longitude}&weather=true",
    )

    # Google Maps
    GEOCODE_URL: str = "https://maps.googleapis.com/maps/api/geocode/json"
    STATIC_MAPS_URL: str = "https://maps.googleapis.com/maps/api/staticmap"
    STATIC_MAPS_SIZE: str = "600x400"

    # DynamoDB settings (persistence is enabled only when both are set)
    DYNAMODB_TABLE_NAME: str = os.environ.get("DYNAMODB_PERSISTENCE_TABLE_NAME", "")
    DYNAMODB_REGION: str = os.environ.get("DYNAMODB_PERSISTENCE_REGION", "")

    # HTTP settings
    HTTP_TIMEOUT: float = float(os.environ.get("HTTP_TIMEOUT", "10"))

    @classmethod
    def persistence_enabled(cls) -> bool:
        return bool(cls.DYNAMODB_TABLE_NAME and cls.DYNAMODB_REGION)

    @classmethod
    def validate(cls):
        """
        Validate configuration values.

        Missing API keys are not fatal; the affected requests fail and are
        answered with the generic failure prompt.
        """
        if not cls.APP_ID:
            logger.warning("APP_ID not set - application id will not be verified")

        if not cls.MAPS_API_KEY:
            logger.warning("MAPS_API_KEY not set - geocoding will not work")

        if not cls.ADVISORY_API_KEY:
            logger.warning("ADVISORY_API_KEY not set - advisory requests are unauthenticated")

        if cls.HTTP_TIMEOUT <= 0:
            raise ValueError("HTTP_TIMEOUT must be positive")

        logger.info("Configuration validated successfully")
