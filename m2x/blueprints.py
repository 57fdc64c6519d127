# Copyright Offene Werkstatt Wädenswil
# SPDX-License-Identifier: MIT

"""M2X Blueprints API operations.

A blueprint is a feed template: datasources created from it share its
streams and triggers.
"""

from typing import Any, Mapping

from .client import Client


class Blueprints:
    """Wrapper for the M2X Blueprints API."""

    def __init__(self, client: Client):
        self._client = client

    def list(self) -> Any:
        """List all the blueprints of the account."""
        return self._client.get("/blueprints")

    def create(self, params: Mapping[str, Any]) -> Any:
        """Create a blueprint.

        Args:
            params: ``name``, ``visibility`` and optionally ``description``
                and ``tags``.
        """
        return self._client.post("/blueprints", body=dict(params))

    def view(self, blueprint_id: str) -> Any:
        """Return the details of the blueprint."""
        return self._client.get("/blueprints/{id}", {"id": blueprint_id})

    def update(self, blueprint_id: str, params: Mapping[str, Any]) -> Any:
        """Update the blueprint properties."""
        return self._client.put("/blueprints/{id}", {"id": blueprint_id}, body=dict(params))

    def delete(self, blueprint_id: str) -> Any:
        """Delete the blueprint."""
        return self._client.delete("/blueprints/{id}", {"id": blueprint_id})
