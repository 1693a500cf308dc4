import logging
from typing import Callable, Optional

import requests

from wordcrawl.domain.http_response import HttpResponse
from wordcrawl.exceptions import HttpFetchError

logger = logging.getLogger(__name__)


class HttpService:
    """
    Downloads crawlable pages over HTTP.

    `fetch` returns the raw response; `fetch_page` applies the crawler's rules
    on top of it and only hands back bodies worth parsing. The `http_client`
    callable (`requests.get` in production) is injected so tests can swap in a
    fake without patching `requests`.
    """

    def __init__(self, user_agent: str, http_client: Callable, timeout: int = 10):
        self.user_agent = user_agent
        self.timeout = timeout
        self.http_client = http_client

    def fetch(self, url: str) -> HttpResponse:
        """Fetch `url`; transport failures are raised as `HttpFetchError`."""
        try:
            resp = self.http_client(url, headers={"User-Agent": self.user_agent}, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise HttpFetchError(url, e) from e

        headers = getattr(resp, "headers", None)
        content_type = headers.get("Content-Type") if headers is not None else None
        return HttpResponse(resp.status_code, resp.text, content_type)

    def fetch_page(self, url: str) -> Optional[str]:
        """Return the body of `url` if it is a successful text page, else None.

        Transport errors, non-2xx statuses and binary content are logged and
        absorbed; anything else propagates to the caller.
        """
        try:
            response = self.fetch(url)
        except HttpFetchError as e:
            logger.warning("Fetch failed for %s: %s", url, e)
            return None

        if not response.is_success:
            logger.warning("Non-success status for %s: %s", url, response.status_code)
            return None
        if not response.is_text:
            logger.info("Content type not supported %s. Skipping %s", response.content_type, url)
            return None
        return response.text
