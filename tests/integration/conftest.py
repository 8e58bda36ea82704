"""Live server fixture for integration tests.

Starts uvicorn on an ephemeral loopback port in a background thread and
yields its base URL. The server is told to exit after the module's tests.
"""

from __future__ import annotations

import threading
import time

import pytest

from timeserver.config import ServerConfig
from timeserver.main import bind_listener, build_server, create_app

STARTUP_TIMEOUT = 10.0


@pytest.fixture(scope="module")
def live_server() -> str:
    cfg = ServerConfig(host="127.0.0.1", port=0)
    sock = bind_listener(cfg)
    port = sock.getsockname()[1]
    server = build_server(create_app(cfg), cfg)
    thread = threading.Thread(target=server.run, kwargs={"sockets": [sock]}, daemon=True)
    thread.start()
    deadline = time.monotonic() + STARTUP_TIMEOUT
    while not server.started:
        if time.monotonic() > deadline or not thread.is_alive():
            pytest.fail("uvicorn did not start")
        time.sleep(0.05)
    yield f"http://127.0.0.1:{port}"
    server.should_exit = True
    thread.join(timeout=STARTUP_TIMEOUT)
    sock.close()
