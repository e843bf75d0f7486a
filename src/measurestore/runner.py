from __future__ import annotations

import contextlib
import socket
import threading
import time
from dataclasses import dataclass

import httpx
import uvicorn

from .api import create_api_app
from .client import MeasurementClient
from .service import MeasurementService


@dataclass(frozen=True)
class MeasurementServer:
    host: str
    port: int
    url: str

    def client(self) -> MeasurementClient:
        return MeasurementClient(self.url)


def _find_free_port(host: str) -> int:
    with contextlib.closing(socket.socket(socket.AF_INET, socket.SOCK_STREAM)) as s:
        s.bind((host, 0))
        return int(s.getsockname()[1])


def _is_server_alive(base_url: str, *, timeout_s: float = 0.2) -> bool:
    """Best-effort probe to determine if a measurestore server is reachable."""

    try:
        with httpx.Client(base_url=base_url, timeout=timeout_s) as client:
            r = client.get("/healthz")
            if r.status_code != 200:
                return False
            return bool(r.json().get("ok"))
    except (httpx.HTTPError, ValueError):
        return False


def run(
    *,
    host: str = "127.0.0.1",
    port: int = 0,
    service: MeasurementService | None = None,
    log_level: str = "info",
    access_log: bool = False,
    startup_timeout_s: float = 5.0,
) -> MeasurementServer:
    """Serve the HTTP API from a background thread and return once it answers `/healthz`.

    `port=0` picks a free port. The server thread is a daemon and stops with the process.
    """

    if port == 0:
        port = _find_free_port(host)

    app = create_api_app(service)

    config = uvicorn.Config(app, host=host, port=port, log_level=log_level.lower(), access_log=access_log)
    server = uvicorn.Server(config)

    thread = threading.Thread(target=server.run, daemon=True)
    thread.start()

    url = f"http://{host}:{port}"
    deadline = time.monotonic() + startup_timeout_s
    while not _is_server_alive(url):
        if time.monotonic() > deadline:
            raise RuntimeError(f"measurestore server did not start at {url}")
        time.sleep(0.05)

    return MeasurementServer(host=host, port=port, url=url)
