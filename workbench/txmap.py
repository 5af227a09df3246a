"""A key/value map owned by one thread, reached through request queues."""

from __future__ import annotations

import enum
import logging
import queue
import threading
from dataclasses import dataclass
from types import TracebackType

logger = logging.getLogger(__name__)


class _Kind(enum.Enum):
    SET = enum.auto()
    GET = enum.auto()
    BEGIN_TRANSACTION = enum.auto()
    END_TRANSACTION = enum.auto()


@dataclass
class _Request:
    kind: _Kind
    key: int = 0
    value: str = ""
    reply: queue.Queue | None = None
    transaction: queue.Queue | None = None


def _serve(store: dict[int, str], requests: queue.Queue) -> None:
    while True:
        logger.debug("wait")
        request: _Request = requests.get()
        if request.kind is _Kind.GET:
            request.reply.put(store.get(request.key, ""))
        elif request.kind is _Kind.SET:
            store[request.key] = request.value
        elif request.kind is _Kind.BEGIN_TRANSACTION:
            _serve(store, request.transaction)
        elif request.kind is _Kind.END_TRANSACTION:
            return


class MapServer:
    """A map served by a background thread.

    While a transaction is open, only requests made through the handle
    returned by :meth:`begin_transaction` are served; others wait until the
    transaction ends. Missing keys read as the empty string.
    """

    def __init__(self) -> None:
        self._requests: queue.Queue = queue.Queue()
        self._closed = False
        self._thread: threading.Thread | None = threading.Thread(
            target=_serve, args=({}, self._requests), daemon=True
        )
        self._thread.start()

    @classmethod
    def _attach(cls, requests: queue.Queue) -> MapServer:
        handle = cls.__new__(cls)
        handle._requests = requests
        handle._closed = False
        handle._thread = None
        return handle

    def _send(self, request: _Request) -> None:
        if self._closed:
            raise RuntimeError("map server is closed")
        self._requests.put(request)

    def get(self, key: int) -> str:
        """Return the value stored at ``key``, or ``""``."""
        reply: queue.Queue = queue.Queue(maxsize=1)
        self._send(_Request(_Kind.GET, key=key, reply=reply))
        return reply.get()

    def set(self, key: int, value: str) -> None:
        """Store ``value`` at ``key``."""
        self._send(_Request(_Kind.SET, key=key, value=value))

    def begin_transaction(self) -> MapServer:
        """Open a transaction and return the handle that serves it."""
        transaction: queue.Queue = queue.Queue()
        self._send(_Request(_Kind.BEGIN_TRANSACTION, transaction=transaction))
        return MapServer._attach(transaction)

    def end_transaction(self) -> None:
        """Stop serving this handle; on the root handle this stops the server."""
        self._send(_Request(_Kind.END_TRANSACTION))
        self._closed = True
        if self._thread is not None:
            self._thread.join()

    def close(self) -> None:
        """End this handle if it is still open."""
        if not self._closed:
            self.end_transaction()

    def __enter__(self) -> MapServer:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()