# Copyright Offene Werkstatt Wädenswil
# SPDX-License-Identifier: MIT

"""M2X Batches API operations.

A batch groups datasources built from the same blueprint, typically one
production run of devices identified by serial number.
"""

import logging
from typing import Any, Mapping

from .client import Client

_LOG = logging.getLogger(__name__)

BATCH = "/batches/{id}"


class Batches:
    """Wrapper for the M2X Batches API.

    Usage:
        batches = Batches(client)

        batch = batches.create({"name": "run-42", "visibility": "private"})
        batches.add_datasource(batch["id"], "SN-0001")
    """

    def __init__(self, client: Client):
        self._client = client

    def list(self) -> Any:
        """List all the batches of the account."""
        return self._client.get("/batches")

    def create(self, params: Mapping[str, Any]) -> Any:
        """Create a batch.

        Args:
            params: ``name``, ``visibility`` and optionally ``description``
                and ``tags``.
        """
        return self._client.post("/batches", body=dict(params))

    def view(self, batch_id: str) -> Any:
        """Return the details of the batch."""
        return self._client.get(BATCH, {"id": batch_id})

    def update(self, batch_id: str, params: Mapping[str, Any]) -> Any:
        """Update the batch properties."""
        return self._client.put(BATCH, {"id": batch_id}, body=dict(params))

    def datasources(self, batch_id: str) -> Any:
        """Return the datasources belonging to the batch."""
        return self._client.get(BATCH + "/datasources", {"id": batch_id})

    def add_datasource(self, batch_id: str, serial: str) -> Any:
        """Add a datasource with the given serial number to the batch."""
        _LOG.info("Adding datasource %s to batch %s", serial, batch_id)
        return self._client.post(
            BATCH + "/datasources", {"id": batch_id}, body={"serial": serial}
        )

    def delete(self, batch_id: str) -> Any:
        """Delete the batch."""
        return self._client.delete(BATCH, {"id": batch_id})
