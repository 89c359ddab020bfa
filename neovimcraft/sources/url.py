"""
Markdown source served over HTTP (e.g. a raw.githubusercontent.com README).
"""

import requests

from neovimcraft.config import REQUEST_TIMEOUT
from neovimcraft.sources.base import MarkdownSource


class UrlMarkdownSource(MarkdownSource):
    """
    Fetches markdown text from a URL with a single GET request.

    No retries: HTTP errors (raise_for_status) and connection errors
    propagate to the caller.
    """

    USER_AGENT = "neovimcraft/1.0 (+https://neovimcraft.com)"

    def __init__(self, url: str, timeout: int = None):
        self.url = url
        self.timeout = timeout or REQUEST_TIMEOUT

    @property
    def name(self) -> str:
        return self.url

    def fetch_text(self) -> str:
        response = requests.get(
            self.url,
            headers={"User-Agent": self.USER_AGENT},
            timeout=self.timeout,
        )
        response.raise_for_status()
        return response.text
