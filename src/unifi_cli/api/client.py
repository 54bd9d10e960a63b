"""Read-only HTTP client for the UniFi Network controller API."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Type, TypeVar

import requests
import urllib3
from pydantic import ValidationError

from ..errors import APIError
from ..models import Client, ClientsResponse, Settings, SitesResponse

logger = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT", ClientsResponse, SitesResponse)

CLIENTS_PATH = "/proxy/network/api/s/{site}/stat/sta"
SITES_PATH = "/proxy/network/api/self/sites"


class APIClient:
    """Controller client authenticated with an ``X-API-KEY`` header.

    Args:
        settings: Resolved connection settings (host, key, site, TLS, timeout)
        session: Optional pre-built session (tests inject a mock here)
    """

    def __init__(
        self, settings: Settings, session: Optional[requests.Session] = None
    ):
        self.host = settings.host.rstrip("/")
        self.site = settings.site
        self.timeout = settings.timeout
        self.insecure = settings.insecure

        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "X-API-KEY": settings.api_key,
                "Content-Type": "application/json",
            }
        )
        self.session.verify = not settings.insecure
        if settings.insecure:
            # Controllers ship self-signed certificates.
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

    def _request(self, method: str, path: str) -> bytes:
        url = f"{self.host}{path}"
        logger.debug("%s %s", method, url)

        try:
            resp = self.session.request(method, url, timeout=self.timeout)
        except requests.RequestException as e:
            raise APIError(f"request failed: {e}") from e

        logger.debug("%s %s -> %d", method, url, resp.status_code)
        if resp.status_code != 200:
            raise APIError(
                f"API request failed with status {resp.status_code}: "
                f"{resp.text}"
            )
        return resp.content

    def _get(self, path: str, model: Type[ResponseT]) -> ResponseT:
        body = self._request("GET", path)
        try:
            response = model.model_validate_json(body)
        except ValidationError as e:
            raise APIError(f"failed to parse response: {e}") from e

        if response.meta.rc != "ok":
            raise APIError(f"API returned error: {response.meta.rc}")
        return response

    def list_clients(self) -> List[Client]:
        """Return currently connected clients for the configured site."""

        path = CLIENTS_PATH.format(site=self.site)
        response = self._get(path, ClientsResponse)
        logger.debug("fetched %d clients", len(response.data))
        return response.data

    def list_sites(self) -> List[Dict[str, Any]]:
        """Return the sites visible to this API key."""

        return self._get(SITES_PATH, SitesResponse).data

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "APIClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


__all__ = ["APIClient", "CLIENTS_PATH", "SITES_PATH"]
