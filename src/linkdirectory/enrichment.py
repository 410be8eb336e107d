# enrichment.py

import logging
from typing import Optional

import requests

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10


def _get_headers(api_key: Optional[str]) -> dict:
    headers = {"Accept": "application/json"}
    if api_key:
        headers["Authorization"] = f"Bearer {api_key}"
    return headers


def enrich_link(link: str, api_url: str, api_key: Optional[str] = None, timeout: float = DEFAULT_TIMEOUT) -> Optional[dict]:
    """
    Ask the enrichment API for metadata about `link`.

    Returns the decoded JSON object (usually carrying `title` and
    `description`), or None if the call failed for any reason.
    """
    try:
        response = requests.get(
            api_url,
            params={"url": link},
            headers=_get_headers(api_key),
            timeout=timeout,
        )
        response.raise_for_status()
        data = response.json()
    except requests.RequestException as e:
        logger.error("Error enriching link %s: %s", link, e)
        return None
    except ValueError as e:
        logger.error("Enrichment API returned invalid JSON for %s: %s", link, e)
        return None

    if not isinstance(data, dict):
        logger.warning("Enrichment API returned %s instead of an object for %s", type(data).__name__, link)
        return None

    return data


class Enricher:
    """Callable bound to one enrichment endpoint, as built from Settings."""

    def __init__(self, api_url: str, api_key: Optional[str] = None, timeout: float = DEFAULT_TIMEOUT):
        self.api_url = api_url
        self.api_key = api_key
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings) -> "Enricher":
        return cls(settings.enrichment_api_url, settings.enrichment_api_key, settings.enrichment_timeout)

    def __call__(self, link: str) -> Optional[dict]:
        return enrich_link(link, self.api_url, self.api_key, timeout=self.timeout)
