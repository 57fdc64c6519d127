# Copyright Offene Werkstatt Wädenswil
# SPDX-License-Identifier: MIT

"""M2X Datasources API operations."""

from typing import Any, Mapping

from .client import Client


class Datasources:
    """Wrapper for the M2X Datasources API.

    A datasource is the feed of a single physical device.
    """

    def __init__(self, client: Client):
        self._client = client

    def list(self) -> Any:
        return self._client.get("/datasources")

    def create(self, params: Mapping[str, Any]) -> Any:
        return self._client.post("/datasources", body=dict(params))

    def view(self, datasource_id: str) -> Any:
        return self._client.get("/datasources/{id}", {"id": datasource_id})

    def update(self, datasource_id: str, params: Mapping[str, Any]) -> Any:
        return self._client.put(
            "/datasources/{id}", {"id": datasource_id}, body=dict(params)
        )

    def delete(self, datasource_id: str) -> Any:
        return self._client.delete("/datasources/{id}", {"id": datasource_id})
