import io
import socket
import threading

import pytest

from workbench.client import main, send_many, send_once
from workbench.echo import EchoServer, echo_reply


@pytest.fixture
def server_port():
    server = EchoServer("127.0.0.1", 0)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield server.address[1]
    server.shutdown()
    thread.join(timeout=5)


def _free_port():
    with socket.socket() as probe:
        probe.bind(("127.0.0.1", 0))
        return probe.getsockname()[1]


def _listen_consecutive(count):
    for _ in range(100):
        first = socket.socket()
        first.bind(("127.0.0.1", 0))
        first.listen()
        base = first.getsockname()[1]
        sockets = [first]
        try:
            for offset in range(1, count):
                extra = socket.socket()
                sockets.append(extra)
                extra.bind(("127.0.0.1", base + offset))
                extra.listen()
        except (OSError, OverflowError):
            for sock in sockets:
                sock.close()
            continue
        return base, sockets
    raise RuntimeError("no consecutive free ports")


def _answer_once(listener):
    conn, _ = listener.accept()
    with conn:
        conn.sendall(echo_reply(conn.recv(1024)))
    listener.close()


def test_send_once_gets_acknowledgement(server_port):
    assert send_once("127.0.0.1", server_port, "hi") == b"hi:OK\r\n"


def test_send_once_accepts_bytes(server_port):
    assert send_once("127.0.0.1", server_port, b"data\n") == echo_reply(b"data\n")


def test_send_once_refused_connection():
    with pytest.raises(OSError):
        send_once("127.0.0.1", _free_port(), "hi")


def test_send_many_greets_consecutive_ports(capsys):
    base, listeners = _listen_consecutive(2)
    threads = [threading.Thread(target=_answer_once, args=(sock,), daemon=True) for sock in listeners]
    for thread in threads:
        thread.start()
    replies = send_many("127.0.0.1", base, 2)
    for thread in threads:
        thread.join(timeout=5)
    assert replies == [
        f"hello! localhost:{base}:OK\r\n".encode(),
        f"hello! localhost:{base + 1}:OK\r\n".encode(),
    ]
    out = capsys.readouterr().out
    assert f"> hello! localhost:{base}:OK" in out


def test_send_many_rejects_negative_count():
    with pytest.raises(ValueError):
        send_many("127.0.0.1", 1, -1)


def test_main_sends_stdin_line(server_port, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("hi\n"))
    assert main(["-p", str(server_port), "-h", "127.0.0.1"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[0] == str(len(b"hi:OK\r\n"))
    assert "> hi:OK" in out


def test_main_reports_fatal_error(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("hi\n"))
    assert main(["-p", str(_free_port()), "-h", "127.0.0.1"]) == 1
    assert "Fatal error:" in capsys.readouterr().err


def test_main_rejects_extra_arguments(capsys):
    assert main(["unexpected"]) == 1
    assert "error:illegale args." in capsys.readouterr().err