"""Visual Crossing timeline API client."""

import logging

import httpx

from skycast.config.defaults import (
    DEFAULT_CONTENT_TYPE,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_UNIT_GROUP,
    TIMELINE_BASE_URL,
)
from skycast.config.schema import ProviderConfig

logger = logging.getLogger(__name__)


class TimelineClient:
    def __init__(
        self,
        api_key: str,
        base_url: str = TIMELINE_BASE_URL,
        unit_group: str = DEFAULT_UNIT_GROUP,
        content_type: str = DEFAULT_CONTENT_TYPE,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.unit_group = unit_group
        self.content_type = content_type
        self.timeout = timeout

    @classmethod
    def from_config(cls, config: ProviderConfig) -> "TimelineClient":
        return cls(
            api_key=config.api_key.get_secret_value(),
            base_url=config.base_url,
            unit_group=config.unit_group,
            content_type=config.content_type,
            timeout=config.timeout_seconds,
        )

    async def get_timeline(self, query: str) -> dict:
        """Fetch the daily timeline for an already percent-encoded query.

        Raises httpx.HTTPStatusError on a non-2xx response and lets
        httpx.RequestError propagate. Returns the decoded JSON body.
        """
        url = f"{self.base_url}/{query}"
        params = {
            "unitGroup": self.unit_group,
            "key": self.api_key,
            "contentType": self.content_type,
        }
        # params carry the key, so only the bare URL is logged
        logger.info("Requesting timeline %s", url)
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            resp = await client.get(url, params=params)
        if resp.is_error:
            logger.warning("Timeline %s returned %d", url, resp.status_code)
        resp.raise_for_status()
        return resp.json()
