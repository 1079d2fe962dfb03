"""Shared test fixtures: a throwaway HTTP server and a refused port."""

import socket
import threading
from collections.abc import Iterator
from dataclasses import dataclass, field
from http.server import BaseHTTPRequestHandler, HTTPServer
from urllib.parse import parse_qs, urlsplit

import pytest

PAYLOAD = (
    b'{\n    "results": [\n        {\n            "statement_id": 0,\n'
    b'            "series": [\n                {\n                    "name": "cpu",\n'
    b'                    "columns": ["time", "host", "value"],\n'
    b'                    "values": [["2026-10-17T00:00:00Z", "server03", 0.64]]\n'
    b"                }\n            ]\n        }\n    ]\n}\n"
)


@dataclass
class FakeInflux:
    """What the fake server answers and what it saw."""

    status: int = 200
    body: bytes = PAYLOAD
    requests: list = field(default_factory=list)
    base_url: str = ""


def _handler_for(state: FakeInflux) -> type:
    class Handler(BaseHTTPRequestHandler):
        def do_GET(self) -> None:
            parts = urlsplit(self.path)
            length = int(self.headers.get("Content-Length") or 0)
            state.requests.append(
                {
                    "path": parts.path,
                    "query": parse_qs(parts.query, keep_blank_values=True),
                    "raw_query": parts.query,
                    "headers": dict(self.headers),
                    "body": self.rfile.read(length) if length else b"",
                }
            )
            self.send_response(state.status)
            self.send_header("Content-Type", "application/json")
            self.send_header("Content-Length", str(len(state.body)))
            self.end_headers()
            self.wfile.write(state.body)

        def log_message(self, format: str, *args) -> None:
            pass

    return Handler


@pytest.fixture
def fake_influx() -> Iterator[FakeInflux]:
    """Serve ``FakeInflux.body`` on a free localhost port."""
    state = FakeInflux()
    server = HTTPServer(("127.0.0.1", 0), _handler_for(state))
    state.base_url = f"http://127.0.0.1:{server.server_address[1]}"
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield state
    server.shutdown()
    server.server_close()
    thread.join(timeout=5)


@pytest.fixture
def refused_url() -> str:
    """A localhost URL whose port nobody listens on."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        port = sock.getsockname()[1]
    return f"http://127.0.0.1:{port}"
