"""Built-in defaults used when neither config nor stored preferences say otherwise."""

VISUAL_CROSSING_BASE_URL = (
    "https://weather.visualcrossing.com/VisualCrossingWebServices/rest/services/timeline"
)
API_KEY_ENV_VAR = "WEATHERRUN_API_KEY"

# 5:30 AM
DEFAULT_RUN_HOUR = 5
DEFAULT_RUN_MINUTE = 30
