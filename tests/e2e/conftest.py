"""Playwright setup for the browser tests.

- A real uvicorn server is started once per session on a free local port.
- ``base_url`` points at it, so tests navigate with relative paths ("/login").
- Test modules here are marked ``e2e`` (deselected by default).

Run with: ``playwright install chromium && pytest -m e2e``.
"""

from __future__ import annotations

import asyncio
import socket
import threading
import time
from collections.abc import Generator

import httpx
import pytest
import uvicorn

from toggle_demo.app import create_app
from toggle_demo.config import AppConfig


def _free_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]


@pytest.fixture(scope="session")
def live_server(tmp_path_factory: pytest.TempPathFactory) -> Generator[str, None, None]:
    host = "127.0.0.1"
    port = _free_port()
    public_dir = tmp_path_factory.mktemp("public")

    config = AppConfig.model_validate(
        {"network": {"bind_host": host, "port": port}, "static": {"public_dir": str(public_dir)}}
    )
    server = uvicorn.Server(
        uvicorn.Config(create_app(config), host=host, port=port, log_level="error")
    )

    thread = threading.Thread(target=lambda: asyncio.run(server.serve()), daemon=True)
    thread.start()

    base = f"http://{host}:{port}"
    for _ in range(50):
        try:
            if httpx.get(f"{base}/healthz", timeout=1.0).status_code == 200:
                break
        except httpx.TransportError:
            time.sleep(0.1)
    else:
        raise RuntimeError("Failed to start test server")

    yield base

    server.should_exit = True
    thread.join(timeout=5)


@pytest.fixture(scope="session")
def base_url(live_server: str) -> str:
    return live_server
