"""Default provider settings for the Visual Crossing timeline API."""

TIMELINE_BASE_URL = (
    "https://weather.visualcrossing.com"
    "/VisualCrossingWebServices/rest/services/timeline"
)
DEFAULT_UNIT_GROUP = "metric"
DEFAULT_CONTENT_TYPE = "json"
DEFAULT_TIMEOUT_SECONDS = 15.0

# Today plus the following week
DEFAULT_MAX_DAYS = 8

API_KEY_ENV_VAR = "SKYCAST_API_KEY"
