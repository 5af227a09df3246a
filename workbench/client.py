"""TCP clients that send a message and print the server's answer."""

from __future__ import annotations

import argparse
import socket
import sys
from concurrent.futures import ThreadPoolExecutor

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 12345
DEFAULT_BASE_PORT = 55550
DEFAULT_COUNT = 2
BUFFER_SIZE = 1024


def _exchange(conn: socket.socket, message: bytes) -> bytes:
    conn.sendall(message)
    return conn.recv(BUFFER_SIZE)


def send_once(host: str, port: int, message: str | bytes) -> bytes:
    """Send ``message`` to ``host:port`` and return the first reply read."""
    payload = message.encode("utf-8") if isinstance(message, str) else message
    with socket.create_connection((host, port)) as conn:
        return _exchange(conn, payload)


def send_many(
    host: str = DEFAULT_HOST, base_port: int = DEFAULT_BASE_PORT, count: int = DEFAULT_COUNT
) -> list[bytes]:
    """Greet ``count`` servers on consecutive ports concurrently.

    All connections are opened first; each server is then sent
    ``hello! localhost:<port>`` and its reply printed. Replies are returned
    in port order.
    """
    if count < 0:
        raise ValueError("count must not be negative")
    ports = [base_port + offset for offset in range(count)]
    connections: list[socket.socket] = []
    try:
        for port in ports:
            connections.append(socket.create_connection((host, port)))

        def talk(conn: socket.socket, port: int) -> bytes:
            reply = _exchange(conn, f"hello! localhost:{port}".encode("utf-8"))
            print(f"> {reply.decode('utf-8', errors='replace')}", end="")
            return reply

        with ThreadPoolExecutor(max_workers=max(count, 1)) as pool:
            return list(pool.map(talk, connections, ports))
    finally:
        for conn in connections:
            conn.close()


def _read_line() -> str:
    line = sys.stdin.readline()
    line = line.removesuffix("\n")
    return line.removesuffix("\r")


def main(argv: list[str] | None = None) -> int:
    """Send one line of standard input to the server given by ``-h`` and ``-p``."""
    parser = argparse.ArgumentParser(prog="tcp-client", add_help=False)
    parser.add_argument("-p", type=int, default=DEFAULT_PORT, help="port number.")
    parser.add_argument("-h", default=DEFAULT_HOST, help="host name.")
    parser.add_argument("rest", nargs="*", help=argparse.SUPPRESS)
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    if args.rest:
        print("error:illegale args.", file=sys.stderr)
        return 1

    print(f"host: {args.h}", file=sys.stderr)
    print(f"port: {args.p}", file=sys.stderr)
    line = _read_line()
    try:
        reply = send_once(args.h, args.p, line)
    except OSError as exc:
        print(f"Fatal error: {exc}", file=sys.stderr)
        return 1
    print(len(reply))
    print(f"> {reply.decode('utf-8', errors='replace')}", end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())