"""
HTTP JSON source.

Fetches the groups and exhibitions documents from a base URL, e.g. a
static file host serving `groups.json` and `exhibitions.json`.
"""

import httpx
from typing import Any, Iterable, Optional

from .base import TournamentSource
from .records import (
    SourceAccessError,
    SourceError,
    SourceNotFoundError,
    parse_exhibitions_document,
    parse_groups_document
)
from ..simulator.models import Exhibitions, Groups


class HttpJsonSource(TournamentSource):
    """Fetches tournament documents over HTTP."""

    def __init__(
        self,
        base_url: str,
        groups_endpoint: str = "/groups.json",
        exhibitions_endpoint: str = "/exhibitions.json",
        timeout: float = 30.0,
        allowed_hosts: Optional[Iterable[str]] = None
    ):
        """
        Initialize the HTTP source.

        Args:
            base_url: URL the endpoints are appended to
            groups_endpoint: Path of the groups document
            exhibitions_endpoint: Path of the exhibitions document
            timeout: HTTP request timeout in seconds
            allowed_hosts: If given, only URLs on these hosts are fetched
        """
        self.base_url = base_url.rstrip("/")
        self.groups_endpoint = groups_endpoint
        self.exhibitions_endpoint = exhibitions_endpoint
        self.timeout = timeout
        self.allowed_hosts = (
            {h.lower() for h in allowed_hosts} if allowed_hosts is not None else None
        )

    def url_for(self, endpoint: str) -> str:
        """
        Build the URL of an endpoint and check it against the allowed hosts.

        Raises:
            SourceAccessError: If the URL is malformed or its host is not allowed
        """
        url = f"{self.base_url}{endpoint}"
        if self.allowed_hosts is None:
            return url

        try:
            parsed = httpx.URL(url)
        except httpx.InvalidURL:
            raise SourceAccessError(f"Invalid source URL: {url}")

        if parsed.scheme not in ("http", "https") or parsed.host.lower() not in self.allowed_hosts:
            raise SourceAccessError(f"Host not allowed: {parsed.host or url}")
        return url

    @property
    def source_name(self) -> str:
        return "http"

    async def _fetch_json(self, endpoint: str) -> Any:
        """
        Fetch JSON data from the source.

        Raises:
            SourceNotFoundError: If the resource doesn't exist
            SourceAccessError: If the URL is not allowed
            SourceError: If there's a network, HTTP or decoding error
        """
        url = self.url_for(endpoint)

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            try:
                response = await client.get(url)

                if response.status_code == 404:
                    raise SourceNotFoundError(f"Resource not found: {url}")

                response.raise_for_status()
                return response.json()

            except httpx.HTTPStatusError as e:
                raise SourceError(f"HTTP error fetching {url}: {e}")
            except httpx.RequestError as e:
                raise SourceError(f"Network error: {e}")
            except ValueError as e:
                raise SourceError(f"Invalid JSON from {url}: {e}")

    async def fetch_groups(self) -> Groups:
        return parse_groups_document(await self._fetch_json(self.groups_endpoint))

    async def fetch_exhibitions(self) -> Exhibitions:
        return parse_exhibitions_document(await self._fetch_json(self.exhibitions_endpoint))
