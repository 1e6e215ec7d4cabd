"""Shared fixtures: an in-process test client and a real server bound to a free port."""
import threading
import time
from typing import Iterator, Tuple

from fastapi.testclient import TestClient
import pytest

from arithmetic_http_server.server.app import create_app
from arithmetic_http_server.server.server import ArithmeticServer


@pytest.fixture
def app_client() -> Iterator[TestClient]:
    """FastAPI test client calling the application in-process."""
    with TestClient(create_app()) as client:
        yield client


@pytest.fixture
def running_server() -> Iterator[Tuple[str, int]]:
    """Run uvicorn in a background thread and yield the bound (host, port)."""
    server = ArithmeticServer(host="127.0.0.1", port=0).create_uvicorn_server()
    thread = threading.Thread(target=server.run, daemon=True)
    thread.start()

    deadline = time.monotonic() + 10
    while not server.started:
        if time.monotonic() > deadline or not thread.is_alive():
            pytest.fail("uvicorn did not start")
        time.sleep(0.01)

    try:
        host, port = server.servers[0].sockets[0].getsockname()[:2]
        yield host, port
    finally:
        server.should_exit = True
        thread.join(timeout=5)
