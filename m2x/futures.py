# Copyright Offene Werkstatt Wädenswil
# SPDX-License-Identifier: MIT

"""Non-blocking binding of the M2X request client.

Every request runs on its own background thread and a
``concurrent.futures.Future`` is returned immediately. Facades work unchanged
on top of it: each facade method then returns a future resolving to the
parsed response, or failing with ``M2XError``.

Usage:
    with M2X.with_futures(api_key="my-key") as m2x:
        pending = [m2x.feeds.view(feed_id) for feed_id in feed_ids]
        feeds = [f.result() for f in pending]
"""

import logging
import threading
from concurrent.futures import Future
from typing import Any, Mapping, Optional

from .client import Client, Config

_LOG = logging.getLogger(__name__)


class FutureClient(Client):
    """Request client returning futures instead of parsed responses.

    No concurrency limit is imposed: each call starts its own thread and
    goes straight to the transport. Connections beyond ``pool_maxsize`` are
    opened as needed and not kept for reuse.
    """

    def __init__(self, config: Config, pool_maxsize: int = 10):
        super().__init__(config, pool_maxsize=pool_maxsize)
        self._threads: set[threading.Thread] = set()

    def request(
        self,
        method: str,
        path: str,
        path_params: Optional[Mapping[str, Any]] = None,
        params: Optional[Mapping[str, Any]] = None,
        body: Any = None,
    ) -> "Future[Any]":
        future: Future = Future()
        thread = threading.Thread(
            target=self._run,
            args=(future, method, path, path_params, params, body),
            name=f"m2x-{method.lower()}",
            daemon=True,
        )
        self._threads.add(thread)
        thread.start()
        return future

    def _run(self, future: Future, *args: Any) -> None:
        """Background thread performing one request."""
        try:
            if not future.set_running_or_notify_cancel():
                return
            try:
                result = super().request(*args)
            except Exception as e:
                future.set_exception(e)
            else:
                future.set_result(result)
        finally:
            self._threads.discard(threading.current_thread())

    def close(self) -> None:
        """Wait for in-flight requests, then close the HTTP session."""
        pending = list(self._threads)
        if pending:
            _LOG.debug("Waiting for %d in-flight requests", len(pending))
        for thread in pending:
            thread.join()
        super().close()
