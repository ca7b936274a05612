"""Shared fixtures for the weather test suite."""

import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def london_json() -> bytes:
    """Canonical OpenWeatherMap response for London (Drizzle, 280.32 K)."""
    return (FIXTURES / "london.json").read_bytes()


class WeatherServer:
    """Local HTTP server standing in for the OpenWeatherMap endpoint."""

    def __init__(self):
        self.status = 200
        self.body = b""
        self.paths: list[str] = []

        server = self

        class Handler(BaseHTTPRequestHandler):
            def do_GET(self):
                server.paths.append(self.path)
                self.send_response(server.status)
                self.send_header("Content-Type", "application/json")
                self.send_header("Content-Length", str(len(server.body)))
                self.end_headers()
                self.wfile.write(server.body)

            def log_message(self, format, *args):
                pass

        self._httpd = ThreadingHTTPServer(("127.0.0.1", 0), Handler)
        self._thread = threading.Thread(target=self._httpd.serve_forever, daemon=True)

    @property
    def url(self) -> str:
        host, port = self._httpd.server_address[:2]
        return f"http://{host}:{port}/data/2.5/weather"

    def respond(self, status: int, body: bytes) -> None:
        self.status = status
        self.body = body

    def start(self) -> None:
        self._thread.start()

    def stop(self) -> None:
        self._httpd.shutdown()
        self._httpd.server_close()


@pytest.fixture
def weather_server():
    """Start a local weather server for the duration of a test."""
    server = WeatherServer()
    server.start()
    yield server
    server.stop()


@pytest.fixture(autouse=True)
def no_proxy_env(monkeypatch):
    """Keep requests to the local server away from any configured proxy."""
    for name in ("HTTP_PROXY", "HTTPS_PROXY", "ALL_PROXY", "http_proxy", "https_proxy", "all_proxy"):
        monkeypatch.delenv(name, raising=False)
