"""Shared fixtures."""

import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from m2rest import MagentoClient, MagentoRetry, StoreConfig


@pytest.fixture
def store():
    return StoreConfig(scheme="https", host="shop.example.com", store_code="default")


@pytest.fixture
def client(store):
    """Create a test Magento client."""
    return MagentoClient.from_integration(store, "test_token_123")


@pytest.fixture
def no_backoff(monkeypatch):
    """Skip retry backoff sleeps."""
    monkeypatch.setattr(MagentoRetry, "sleep", lambda self, response=None: None)


@pytest.fixture
def local_server():
    """Start a local HTTP server answering every GET with ``respond(handler)``.

    Yields a function taking ``respond`` and returning ``(store, hits)``.
    """
    servers = []

    def serve(respond):
        hits = []

        class Handler(BaseHTTPRequestHandler):
            def do_GET(self):
                hits.append(self.path)
                try:
                    respond(self)
                except (BrokenPipeError, ConnectionResetError):
                    pass

            def log_message(self, format, *args):
                pass

        server = ThreadingHTTPServer(("127.0.0.1", 0), Handler)
        server.daemon_threads = True
        threading.Thread(target=server.serve_forever, daemon=True).start()
        servers.append(server)
        host, port = server.server_address[:2]
        return StoreConfig(scheme="http", host=f"{host}:{port}"), hits

    yield serve

    for server in servers:
        server.shutdown()
        server.server_close()
