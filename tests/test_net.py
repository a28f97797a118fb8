import socket
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from gadgetry.net import addr, download_file, host_name, open_remote_file


class _Handler(BaseHTTPRequestHandler):
    def do_GET(self):
        if self.path == "/file.txt":
            status, body = 200, b"hello"
        else:
            status, body = 404, b"missing"
        self.send_response(status)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, *args):
        pass


@pytest.fixture
def server_url():
    server = ThreadingHTTPServer(("127.0.0.1", 0), _Handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield f"http://127.0.0.1:{server.server_address[1]}"
    finally:
        server.shutdown()
        server.server_close()


@pytest.fixture
def localhost(monkeypatch):
    monkeypatch.setattr(socket, "gethostname", lambda: "localhost")


def test_host_name_uses_system_name(monkeypatch):
    monkeypatch.setattr(socket, "gethostname", lambda: "testserver")
    assert host_name() == "testserver"


def test_host_name_falls_back_to_localhost(monkeypatch):
    monkeypatch.setattr(socket, "gethostname", lambda: "")
    assert host_name() == "localhost"


@pytest.mark.parametrize(
    "protocol, tcp_addr, expected",
    [
        ("http", ":8080", "http://localhost:8080"),
        ("https", "testserver:9090", "https://testserver:9090"),
        ("http", ":http", "http://localhost"),
        ("https", "demomachine:https", "https://demomachine"),
    ],
)
def test_addr_documented_examples(localhost, protocol, tcp_addr, expected):
    assert addr(protocol, tcp_addr) == expected


def test_addr_without_protocol(localhost):
    assert addr("", "testserver:9090") == "testserver:9090"


def test_open_remote_file_reads_body(server_url):
    with open_remote_file(server_url + "/file.txt") as src:
        assert src.read() == b"hello"


def test_open_remote_file_returns_error_body(server_url):
    with open_remote_file(server_url + "/nothing") as src:
        assert src.read() == b"missing"


def test_open_remote_file_bad_url_raises():
    with pytest.raises(ValueError):
        open_remote_file("not a url")


def test_download_file(server_url, tmp_path):
    dst = tmp_path / "out.txt"
    download_file(server_url + "/file.txt", str(dst))
    assert dst.read_bytes() == b"hello"