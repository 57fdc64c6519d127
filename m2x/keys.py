# Copyright Offene Werkstatt Wädenswil
# SPDX-License-Identifier: MIT

"""M2X Keys API operations.

Keys are access credentials for the M2X API. A key may be unrestricted,
scoped to a single feed, or scoped to one stream of a feed.
"""

import logging
from typing import Any, Mapping, Optional

from .client import Client

_LOG = logging.getLogger(__name__)


class Keys:
    """Wrapper for the M2X Keys API.

    Usage:
        keys = Keys(client)

        keys.list()
        keys.create({"name": "reader", "permissions": ["GET"]})
        keys.regenerate("1234567890abcdef")
    """

    def __init__(self, client: Client):
        self._client = client

    def list(self, params: Optional[Mapping[str, Any]] = None) -> Any:
        """List all the keys of the account.

        Args:
            params: Optional filters, e.g. ``{"feed": feed_id}`` to list only
                the keys associated with a feed.
        """
        return self._client.get("/keys", params=params)

    def create(self, params: Mapping[str, Any]) -> Any:
        """Create a new key.

        Args:
            params: Key properties: ``name``, ``permissions`` and optionally
                ``feed``, ``stream`` and ``expires_at``. A key with both
                ``feed`` and ``stream`` is scoped to that stream only.
        """
        _LOG.info("Creating key '%s'", params.get("name"))
        return self._client.post("/keys", body=dict(params))

    def view(self, key: str) -> Any:
        """Return the details of the key."""
        return self._client.get("/keys/{key}", {"key": key})

    def update(self, key: str, params: Mapping[str, Any]) -> Any:
        """Update the key properties."""
        return self._client.put("/keys/{key}", {"key": key}, body=dict(params))

    def regenerate(self, key: str) -> Any:
        """Regenerate the key token.

        The old token stops working immediately; the response carries
        the new one.
        """
        _LOG.info("Regenerating key")
        return self._client.post("/keys/{key}/regenerate", {"key": key})

    def delete(self, key: str) -> Any:
        """Delete the key. It can no longer be used to access the API."""
        return self._client.delete("/keys/{key}", {"key": key})
