# Copyright Offene Werkstatt Wädenswil
# SPDX-License-Identifier: MIT

"""Unit tests for the M2X Feeds API wrapper."""

import unittest

from m2x.feeds import Feeds
from m2x.keys import Keys
from m2x.tests.mock_session import SessionTestCase

FEED_ID = "1f4b2c"


class TestFeeds(SessionTestCase):
    """Tests for feed level operations."""

    def setUp(self):
        super().setUp()
        self.feeds = Feeds(self.client)

    def test_search_forwards_filters(self):
        """Test that search filters become the query string unmodified."""
        filters = {
            "q": "garage",
            "type": "datasource",
            "tags": "door,garage",
            "limit": 10,
            "page": 2,
            "latitude": -37.9788423562422,
            "longitude": -57.5478776916862,
            "distance": 100,
            "distance_unit": "km",
        }
        self.feeds.search(filters)
        self.assertRequest("GET", "/feeds", params=filters)

    def test_search_omits_absent_filters(self):
        self.feeds.search({"q": "garage", "tags": None})
        self.assertRequest("GET", "/feeds", params={"q": "garage"})

    def test_search_without_filters(self):
        self.feeds.search()
        self.assertRequest("GET", "/feeds")

    def test_search_does_not_mutate_filters(self):
        filters = {"q": "garage"}
        self.feeds.search(filters)
        self.assertEqual(filters, {"q": "garage"})

    def test_list_equals_empty_search(self):
        """Test that list issues the same request as search({})."""
        self.feeds.list()
        listed = self.session.request.call_args
        self.feeds.search({})
        self.assertEqual(listed, self.session.request.call_args)

    def test_list_returns_response(self):
        self.respond(200, {"feeds": [{"id": FEED_ID}]})
        self.assertEqual(self.feeds.list(), {"feeds": [{"id": FEED_ID}]})

    def test_view(self):
        self.feeds.view(FEED_ID)
        self.assertRequest("GET", f"/feeds/{FEED_ID}")

    def test_log(self):
        self.feeds.log(FEED_ID)
        self.assertRequest("GET", f"/feeds/{FEED_ID}/log")

    def test_location(self):
        location = {"name": "Storage Room", "latitude": -37.97, "longitude": -57.54}
        self.respond(200, location)
        self.assertEqual(self.feeds.location(FEED_ID), location)
        self.assertRequest("GET", f"/feeds/{FEED_ID}/location")

    def test_location_not_set(self):
        """Test that a 204 location response is an empty result."""
        self.respond(204)
        self.assertIsNone(self.feeds.location(FEED_ID))

    def test_update_location(self):
        location = {"latitude": -37.97, "longitude": -57.54, "elevation": 5}
        self.feeds.update_location(FEED_ID, location)
        self.assertRequest("PUT", f"/feeds/{FEED_ID}/location", body=location)

    def test_post_multiple(self):
        """Test that values are wrapped in a values object."""
        values = {"temp": [{"at": "2023-01-01T00:00:00Z", "value": 21}]}
        self.feeds.post_multiple(FEED_ID, values)
        self.assertRequest("POST", f"/feeds/{FEED_ID}", body={"values": values})


class TestFeedStreams(SessionTestCase):
    """Tests for stream operations."""

    def setUp(self):
        super().setUp()
        self.feeds = Feeds(self.client)

    def test_streams(self):
        self.feeds.streams(FEED_ID)
        self.assertRequest("GET", f"/feeds/{FEED_ID}/streams")

    def test_stream(self):
        self.feeds.stream(FEED_ID, "temperature")
        self.assertRequest("GET", f"/feeds/{FEED_ID}/streams/temperature")

    def test_stream_values_without_filters(self):
        """Test that omitted filters produce an empty query string."""
        self.feeds.stream_values(FEED_ID, "temperature")
        self.assertRequest("GET", f"/feeds/{FEED_ID}/streams/temperature/values")

    def test_stream_values_with_filters(self):
        self.feeds.stream_values(
            FEED_ID,
            "temperature",
            start="2014-01-01T00:00:00Z",
            end="2014-01-02T00:00:00Z",
            limit=5,
        )
        self.assertRequest(
            "GET",
            f"/feeds/{FEED_ID}/streams/temperature/values",
            params={
                "start": "2014-01-01T00:00:00Z",
                "end": "2014-01-02T00:00:00Z",
                "limit": 5,
            },
        )

    def test_stream_values_partial_filters(self):
        self.feeds.stream_values(FEED_ID, "temperature", limit=1)
        self.assertRequest(
            "GET", f"/feeds/{FEED_ID}/streams/temperature/values", params={"limit": 1}
        )

    def test_update_stream(self):
        self.feeds.update_stream(FEED_ID, "humidity", {"unit": {"label": "percent"}})
        self.assertRequest(
            "PUT",
            f"/feeds/{FEED_ID}/streams/humidity",
            body={"unit": {"label": "percent"}},
        )

    def test_delete_stream(self):
        self.respond(204)
        self.assertIsNone(self.feeds.delete_stream(FEED_ID, "humidity"))
        self.assertRequest("DELETE", f"/feeds/{FEED_ID}/streams/humidity")


class TestFeedKeys(SessionTestCase):
    """Tests for feed key operations."""

    def setUp(self):
        super().setUp()
        self.feeds = Feeds(self.client)
        self.keys = Keys(self.client)

    def test_keys(self):
        self.feeds.keys(FEED_ID)
        self.assertRequest("GET", "/keys", params={"feed": FEED_ID})

    def test_create_key_same_as_keys_create(self):
        """Test that create_key delegates to Keys.create with the feed."""
        self.feeds.create_key(FEED_ID, {"name": "x"})
        via_feed = self.session.request.call_args
        self.keys.create({"name": "x", "feed": FEED_ID})
        self.assertEqual(via_feed, self.session.request.call_args)
        self.assertRequest("POST", "/keys", body={"name": "x", "feed": FEED_ID})

    def test_create_key_does_not_mutate_params(self):
        params = {"name": "x", "stream": "temperature"}
        self.feeds.create_key(FEED_ID, params)
        self.assertEqual(params, {"name": "x", "stream": "temperature"})

    def test_update_key(self):
        self.feeds.update_key(FEED_ID, "abc123", {"name": "y"})
        self.assertRequest("PUT", "/keys/abc123", body={"name": "y", "feed": FEED_ID})


class TestFeedTriggers(SessionTestCase):
    """Tests for trigger operations."""

    def setUp(self):
        super().setUp()
        self.feeds = Feeds(self.client)

    def test_triggers(self):
        self.feeds.triggers(FEED_ID)
        self.assertRequest("GET", f"/feeds/{FEED_ID}/triggers")

    def test_trigger(self):
        self.feeds.trigger(FEED_ID, "42")
        self.assertRequest("GET", f"/feeds/{FEED_ID}/triggers/42")

    def test_create_trigger(self):
        params = {
            "name": "Too hot",
            "stream": "temperature",
            "condition": ">",
            "value": 30,
            "callback_url": "http://example.com/hook",
        }
        self.feeds.create_trigger(FEED_ID, params)
        self.assertRequest("POST", f"/feeds/{FEED_ID}/triggers", body=params)

    def test_update_trigger(self):
        self.feeds.update_trigger(FEED_ID, "42", {"value": 35})
        self.assertRequest("PUT", f"/feeds/{FEED_ID}/triggers/42", body={"value": 35})

    def test_test_trigger(self):
        """Test that firing a trigger posts without a body."""
        self.respond(204)
        self.feeds.test_trigger(FEED_ID, "42")
        self.assertRequest("POST", f"/feeds/{FEED_ID}/triggers/42")
        self.assertIsNone(self.session.request.call_args[1]["data"])

    def test_delete_trigger(self):
        self.feeds.delete_trigger(FEED_ID, "42")
        self.assertRequest("DELETE", f"/feeds/{FEED_ID}/triggers/42")


if __name__ == "__main__":
    unittest.main()
