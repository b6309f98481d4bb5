"""Visual Crossing timeline API client.

One request per call and no retries: a failed fetch is terminal for that
query and surfaces a user-facing message.
"""

import logging
import os
from urllib.parse import quote

import httpx

from weatherrun.config.defaults import API_KEY_ENV_VAR, VISUAL_CROSSING_BASE_URL

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "weatherrun/0.1.0"

# Scoring, gear thresholds and report text are in degrees F and mph.
UNIT_GROUP = "us"


class WeatherApiError(Exception):
    """Raised when the forecast cannot be retrieved. The message is user-facing."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class VisualCrossingClient:
    def __init__(
        self,
        api_key: str | None = None,
        base_url: str = VISUAL_CROSSING_BASE_URL,
        timeout: float = 30.0,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        self.api_key = api_key or os.environ.get(API_KEY_ENV_VAR, "")
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.user_agent = user_agent

    def get_timeline(self, location: str) -> dict:
        """Fetch the next-7-days timeline with daily, hourly and alert data."""
        if not self.api_key:
            raise WeatherApiError("Visual Crossing API key is not configured.")

        url = f"{self.base_url}/{quote(location, safe='')}/next7days"
        params = {
            "unitGroup": UNIT_GROUP,
            "include": "days,hours,alerts",
            "key": self.api_key,
        }
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}

        try:
            resp = httpx.get(url, params=params, headers=headers, timeout=self.timeout)
        except httpx.RequestError as e:
            logger.warning("Visual Crossing request failed for %r: %s", location, e)
            raise WeatherApiError("Could not reach the weather service.") from e

        if resp.status_code == 400:
            raise WeatherApiError(
                "Location not found. Try a zip code or city name.", status_code=400
            )
        if resp.status_code >= 400:
            logger.warning(
                "Visual Crossing %r returned %d", location, resp.status_code
            )
            raise WeatherApiError(
                f"Weather API error: {resp.status_code}", status_code=resp.status_code
            )

        try:
            return resp.json()
        except ValueError as e:
            raise WeatherApiError("Weather API returned an unreadable response.") from e
