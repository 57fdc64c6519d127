# Copyright Offene Werkstatt Wädenswil
# SPDX-License-Identifier: MIT

"""M2X Feeds API operations.

Covers feeds and everything scoped to a feed: location, data streams and
their values, triggers, and feed keys.

See https://m2x.att.com/developer/documentation/feed for the HTTP API.
"""

import logging
from typing import Any, Mapping, Optional, Sequence

from .client import Client
from .keys import Keys

_LOG = logging.getLogger(__name__)

FEED = "/feeds/{id}"
STREAM = "/feeds/{id}/streams/{name}"
TRIGGER = "/feeds/{id}/triggers/{trigger}"


class Feeds:
    """Wrapper for the M2X Feeds API.

    Usage:
        feeds = Feeds(client)

        feeds.search({"q": "garage", "type": "datasource"})
        feeds.stream_values(feed_id, "temperature", limit=10)
        feeds.post_multiple(feed_id, {
            "temperature": [{"at": "2014-01-01T00:00:00Z", "value": 21}],
        })
    """

    def __init__(self, client: Client, keys: Optional[Keys] = None):
        self._client = client
        self._keys = keys or Keys(client)

    # -- Feeds --

    def search(self, params: Optional[Mapping[str, Any]] = None) -> Any:
        """List or search the feeds of the account owning the API key.

        The list can be filtered with one or more of:

        * ``q`` text to search, matching the name and description.
        * ``type`` one of ``blueprint``, ``batch`` and ``datasource``.
        * ``tags`` a comma separated list of tags.
        * ``limit`` how many results per page.
        * ``page`` the specific results page, starting by 1.
        * ``latitude`` and ``longitude`` for searching feeds geographically.
        * ``distance`` numeric value in ``distance_unit``.
        * ``distance_unit`` either ``miles``, ``mi`` or ``km``.
        """
        return self._client.get("/feeds", params=dict(params or {}))

    def list(self) -> Any:
        """List all the feeds of the account owning the API key."""
        return self.search({})

    def view(self, feed_id: str) -> Any:
        """Return the details of the feed."""
        return self._client.get(FEED, {"id": feed_id})

    def log(self, feed_id: str) -> Any:
        """Return the access log of the feed."""
        return self._client.get(FEED + "/log", {"id": feed_id})

    def location(self, feed_id: str) -> Any:
        """Return the current location of the feed.

        Returns None (response status 204) if the feed has no location.
        """
        return self._client.get(FEED + "/location", {"id": feed_id})

    def update_location(self, feed_id: str, params: Mapping[str, Any]) -> Any:
        """Update the current location of the feed.

        Args:
            feed_id: Feed ID.
            params: ``latitude``, ``longitude`` and optionally ``name``,
                ``elevation`` and ``timestamp``.
        """
        return self._client.put(FEED + "/location", {"id": feed_id}, body=dict(params))

    def post_multiple(
        self,
        feed_id: str,
        values: Mapping[str, Sequence[Mapping[str, Any]]],
    ) -> Any:
        """Post multiple values to multiple streams of the feed.

        All the streams must exist before posting. ``values`` maps stream
        names to lists of ``{"at": <ISO 8601 time>, "value": x}`` entries.
        """
        return self._client.post(FEED, {"id": feed_id}, body={"values": values})

    # -- Streams --

    def streams(self, feed_id: str) -> Any:
        """Return the streams of the feed."""
        return self._client.get(FEED + "/streams", {"id": feed_id})

    def stream(self, feed_id: str, name: str) -> Any:
        """Return the details of the stream."""
        return self._client.get(STREAM, {"id": feed_id, "name": name})

    def stream_values(
        self,
        feed_id: str,
        name: str,
        *,
        start: Optional[str] = None,
        end: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> Any:
        """List values of a stream, most recent first.

        Args:
            feed_id: Feed ID.
            name: Stream name.
            start: ISO 8601 timestamp of the start of the range.
            end: ISO 8601 timestamp of the end of the range.
            limit: Maximum number of values to return.
        """
        return self._client.get(
            STREAM + "/values",
            {"id": feed_id, "name": name},
            params={"start": start, "end": end, "limit": limit},
        )

    def update_stream(self, feed_id: str, name: str, params: Mapping[str, Any]) -> Any:
        """Update the stream properties, creating the stream if needed."""
        return self._client.put(STREAM, {"id": feed_id, "name": name}, body=dict(params))

    def delete_stream(self, feed_id: str, name: str) -> Any:
        """Delete the stream and all its values."""
        _LOG.info("Deleting stream '%s' from feed %s", name, feed_id)
        return self._client.delete(STREAM, {"id": feed_id, "name": name})

    # -- Keys --

    def keys(self, feed_id: str) -> Any:
        """Return the API keys associated with the feed."""
        return self._keys.list({"feed": feed_id})

    def create_key(self, feed_id: str, params: Mapping[str, Any]) -> Any:
        """Create an API key associated with the feed.

        If ``params`` carries a ``stream`` name, the key is associated with
        that stream only.
        """
        return self._keys.create({**params, "feed": feed_id})

    def update_key(self, feed_id: str, key: str, params: Mapping[str, Any]) -> Any:
        """Update the properties of a feed API key."""
        return self._keys.update(key, {**params, "feed": feed_id})

    # -- Triggers --

    def triggers(self, feed_id: str) -> Any:
        """Return the triggers of the feed."""
        return self._client.get(FEED + "/triggers", {"id": feed_id})

    def trigger(self, feed_id: str, trigger_id: str) -> Any:
        """Return the details of the trigger."""
        return self._client.get(TRIGGER, {"id": feed_id, "trigger": trigger_id})

    def create_trigger(self, feed_id: str, params: Mapping[str, Any]) -> Any:
        """Create a trigger on the feed."""
        return self._client.post(FEED + "/triggers", {"id": feed_id}, body=dict(params))

    def update_trigger(
        self,
        feed_id: str,
        trigger_id: str,
        params: Mapping[str, Any],
    ) -> Any:
        """Update an existing trigger of the feed."""
        return self._client.put(
            TRIGGER, {"id": feed_id, "trigger": trigger_id}, body=dict(params)
        )

    def test_trigger(self, feed_id: str, trigger_id: str) -> Any:
        """Fire the trigger with a fake value.

        Lets client applications check how they receive and handle M2X
        notifications.
        """
        _LOG.info("Testing trigger %s of feed %s", trigger_id, feed_id)
        return self._client.post(TRIGGER, {"id": feed_id, "trigger": trigger_id})

    def delete_trigger(self, feed_id: str, trigger_id: str) -> Any:
        """Delete the trigger."""
        return self._client.delete(TRIGGER, {"id": feed_id, "trigger": trigger_id})
