# Copyright Offene Werkstatt Wädenswil
# SPDX-License-Identifier: MIT

"""Python client for the AT&T M2X REST API."""

__version__ = "0.1.0"

from .client import Client, Config, M2XError
from .futures import FutureClient
from .batches import Batches
from .blueprints import Blueprints
from .datasources import Datasources
from .feeds import Feeds
from .keys import Keys
from .api import M2X

__all__ = [
    "M2X",
    "Client",
    "Config",
    "M2XError",
    "FutureClient",
    "Batches",
    "Blueprints",
    "Datasources",
    "Feeds",
    "Keys",
]
