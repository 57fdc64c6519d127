# Copyright Offene Werkstatt Wädenswil
# SPDX-License-Identifier: MIT

"""Entry point bundling all M2X API areas behind one object."""

import logging
from typing import Any, Optional

from .batches import Batches
from .blueprints import Blueprints
from .client import Client, Config
from .datasources import Datasources
from .feeds import Feeds
from .futures import FutureClient
from .keys import Keys

_LOG = logging.getLogger(__name__)


class M2X:
    """Client for the whole M2X API.

    All facades share a single request client.

    Usage:
        m2x = M2X(api_key="my-key")  # or M2X() to use M2X_API_KEY

        m2x.status()
        for feed in m2x.feeds.list()["feeds"]:
            print(feed["name"])
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_version: Optional[str] = None,
        base_url: Optional[str] = None,
        *,
        config: Optional[Config] = None,
        client: Optional[Client] = None,
    ):
        """Initialize the M2X client.

        Args:
            api_key: M2X API key. If None, reads from the M2X_API_KEY
                environment variable.
            api_version: API version path segment. Defaults to
                M2X_API_VERSION from the environment, then "v1".
            base_url: API base URL. Defaults to M2X_API_BASE from the
                environment, then the public M2X endpoint.
            config: Complete connection settings; overrides the arguments
                above.
            client: Request client to share; overrides everything else.

        Raises:
            M2XError: If no API key is available.
        """
        if client is None:
            if config is None:
                config = Config.from_env(
                    api_key=api_key, api_version=api_version, base_url=base_url
                )
            client = Client(config)
        self.client = client

        self.keys = Keys(client)
        self.batches = Batches(client)
        self.blueprints = Blueprints(client)
        self.datasources = Datasources(client)
        self.feeds = Feeds(client, keys=self.keys)

        _LOG.debug("M2X client ready for %s", client.config.endpoint)

    @classmethod
    def with_futures(
        cls,
        api_key: Optional[str] = None,
        api_version: Optional[str] = None,
        base_url: Optional[str] = None,
        pool_maxsize: int = 10,
    ) -> "M2X":
        """Create an M2X client whose operations all return futures."""
        config = Config.from_env(
            api_key=api_key, api_version=api_version, base_url=base_url
        )
        return cls(client=FutureClient(config, pool_maxsize=pool_maxsize))

    def status(self) -> Any:
        """Return the API status, verifying connectivity and the API key."""
        return self.client.get("/status")

    def close(self) -> None:
        """Close the shared request client."""
        self.client.close()

    def __enter__(self) -> "M2X":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
