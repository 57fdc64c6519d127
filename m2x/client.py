# Copyright Offene Werkstatt Wädenswil
# SPDX-License-Identifier: MIT

"""M2X REST API request client.

Provides the shared low-level client used by every resource facade: URL
templating, query string and JSON body shaping, API key injection and
response parsing.
"""

import json
import logging
import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from . import __version__

_LOG = logging.getLogger(__name__)

# M2X API base URL (the API version is appended as a path segment)
M2X_API_BASE = "https://api-m2x.att.com"
M2X_API_VERSION = "v1"

API_KEY_HEADER = "X-M2X-KEY"
USER_AGENT = f"M2X-Python/{__version__} requests/{requests.__version__}"


class M2XError(Exception):
    """Raised when an M2X API request fails."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Any = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


@dataclass(frozen=True)
class Config:
    """Immutable connection settings shared by all requests of a client."""

    api_key: Optional[str]
    api_version: str = M2X_API_VERSION
    base_url: str = M2X_API_BASE
    timeout: Optional[float] = None
    user_agent: str = USER_AGENT

    @classmethod
    def from_env(cls, **overrides: Any) -> "Config":
        """Create a Config from M2X_API_KEY, M2X_API_VERSION and M2X_API_BASE.

        Keyword arguments that are not None take precedence over the
        environment.
        """
        values: dict[str, Any] = {
            "api_key": os.environ.get("M2X_API_KEY"),
            "api_version": os.environ.get("M2X_API_VERSION", M2X_API_VERSION),
            "base_url": os.environ.get("M2X_API_BASE", M2X_API_BASE),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    @property
    def endpoint(self) -> str:
        """Base URL including the version segment."""
        return f"{self.base_url.rstrip('/')}/{self.api_version.strip('/')}"


def _compact(params: Optional[Mapping[str, Any]]) -> dict[str, Any]:
    """Drop parameters that were not supplied."""
    if not params:
        return {}
    return {k: v for k, v in params.items() if v is not None}


def _decode(response: requests.Response) -> Any:
    """Decode a response body, falling back to the raw text."""
    try:
        return response.json()
    except ValueError:
        return response.text


class Client:
    """Client for the M2X REST API.

    Usage:
        client = Client(Config(api_key="my-key"))

        feed = client.get("/feeds/{id}", {"id": "abc"})
        client.put("/feeds/{id}/location", {"id": "abc"}, body={...})
    """

    def __init__(self, config: Config, pool_maxsize: int = 10):
        """Initialize the M2X client.

        Args:
            config: Connection settings.
            pool_maxsize: Maximum number of pooled connections per host.

        Raises:
            M2XError: If the config carries no API key.
        """
        if not config.api_key:
            raise M2XError(
                "API key required. Set M2X_API_KEY environment variable "
                "or pass api_key parameter."
            )

        self._config = config

        # Single attempt per call; failures are reported to the caller.
        self._session = requests.Session()
        adapter = HTTPAdapter(
            max_retries=Retry(total=0, raise_on_status=False),
            pool_maxsize=pool_maxsize,
        )
        self._session.mount("http://", adapter)
        self._session.mount("https://", adapter)
        self._session.headers.update(
            {
                API_KEY_HEADER: config.api_key,
                "User-Agent": config.user_agent,
                "Accept": "application/json",
            }
        )

    @property
    def config(self) -> Config:
        return self._config

    def url(self, path: str, path_params: Optional[Mapping[str, Any]] = None) -> str:
        """Build the absolute URL for a path template.

        Identifiers are substituted verbatim; callers are responsible for
        supplying URL-safe values.
        """
        if path_params:
            path = path.format(**path_params)
        return f"{self._config.endpoint}/{path.lstrip('/')}"

    def request(
        self,
        method: str,
        path: str,
        path_params: Optional[Mapping[str, Any]] = None,
        params: Optional[Mapping[str, Any]] = None,
        body: Any = None,
    ) -> Any:
        """Make an API request.

        Args:
            method: HTTP method.
            path: API path template (without base URL and version).
            path_params: Values substituted into the path template.
            params: Query parameters. None values are omitted.
            body: Object serialized as the JSON request body.

        Returns:
            Parsed JSON response, or None for empty (204) responses.

        Raises:
            M2XError: If the body cannot be serialized or the request fails.
        """
        url = self.url(path, path_params)

        headers = {}
        data = None
        if body is not None:
            try:
                data = json.dumps(body)
            except (TypeError, ValueError) as e:
                raise M2XError(f"Cannot serialize request body: {e}") from e
            headers["Content-Type"] = "application/json"

        _LOG.debug("%s %s params=%s", method, url, params)

        try:
            response = self._session.request(
                method,
                url,
                params=_compact(params),
                data=data,
                headers=headers,
                timeout=self._config.timeout,
            )
        except requests.exceptions.RequestException as e:
            raise M2XError(f"Request failed: {e}") from e

        _LOG.debug("%s %s -> %d", method, url, response.status_code)

        if not 200 <= response.status_code < 300:
            raise M2XError(
                f"API request failed: {response.status_code} {response.reason}",
                status_code=response.status_code,
                body=_decode(response),
            )

        if response.status_code == 204 or not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise M2XError(
                f"Invalid JSON in response: {e}",
                status_code=response.status_code,
                body=response.text,
            ) from e

    def get(
        self,
        path: str,
        path_params: Optional[Mapping[str, Any]] = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        return self.request("GET", path, path_params, params=params)

    def delete(
        self,
        path: str,
        path_params: Optional[Mapping[str, Any]] = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        return self.request("DELETE", path, path_params, params=params)

    def post(
        self,
        path: str,
        path_params: Optional[Mapping[str, Any]] = None,
        body: Any = None,
    ) -> Any:
        return self.request("POST", path, path_params, body=body)

    def put(
        self,
        path: str,
        path_params: Optional[Mapping[str, Any]] = None,
        body: Any = None,
    ) -> Any:
        return self.request("PUT", path, path_params, body=body)

    def close(self) -> None:
        """Close the HTTP session."""
        self._session.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
