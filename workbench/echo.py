"""A threaded TCP server that acknowledges every message it receives."""

from __future__ import annotations

import argparse
import logging
import os
import socketserver
import sys
import threading
from types import TracebackType

DEFAULT_PORT = 12345
BUFFER_SIZE = 1024

logger = logging.getLogger(__name__)


def echo_reply(data: bytes) -> bytes:
    """Return the acknowledgement for ``data``: trailing newlines dropped, ``:OK\\r\\n`` added."""
    return data.rstrip(b"\n") + b":OK\r\n"


class _EchoHandler(socketserver.BaseRequestHandler):
    def handle(self) -> None:
        peer = self.client_address
        logger.info("Accept[%s]", peer)
        while True:
            try:
                data = self.request.recv(BUFFER_SIZE)
            except OSError as exc:
                logger.info("Receive Error[%s]: %s", peer, exc)
                return
            if not data:
                logger.info("Receive Error[%s]: EOF", peer)
                return
            logger.info("Receive[%s]: %s", peer, data.decode("utf-8", errors="replace"))
            try:
                self.request.sendall(echo_reply(data))
            except OSError as exc:
                logger.info("Send Error[%s]: %s", peer, exc)
                return


class _ThreadingServer(socketserver.ThreadingTCPServer):
    allow_reuse_address = True
    daemon_threads = True


class EchoServer:
    """Accept connections and answer each message with :func:`echo_reply`."""

    def __init__(self, host: str = "", port: int = DEFAULT_PORT) -> None:
        self._server = _ThreadingServer((host, port), _EchoHandler)
        self._serving = threading.Event()

    @property
    def address(self) -> tuple[str, int]:
        """The address the server is bound to."""
        host, port = self._server.server_address[:2]
        return host, port

    def serve_forever(self) -> None:
        """Handle connections until :meth:`shutdown` is called."""
        self._serving.set()
        self._server.serve_forever()

    def shutdown(self) -> None:
        """Stop serving and close the listening socket."""
        if self._serving.is_set():
            self._server.shutdown()
            self._serving.clear()
        self._server.server_close()

    def __enter__(self) -> EchoServer:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.shutdown()


def main(argv: list[str] | None = None) -> int:
    """Run the echo server on the port given with ``-p``."""
    parser = argparse.ArgumentParser(prog="echo-server")
    parser.add_argument("-p", type=int, default=DEFAULT_PORT, help="port number.")
    parser.add_argument("rest", nargs="*", help=argparse.SUPPRESS)
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    if args.rest:
        print("error:illegale args.", file=sys.stderr)
        return 1

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")
    logger.info("cpu : %s", os.cpu_count())
    logger.info("port : %d", args.p)
    try:
        server = EchoServer("", args.p)
    except OSError as exc:
        print(f"Fatal error: {exc}", file=sys.stderr)
        return 1
    with server:
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())