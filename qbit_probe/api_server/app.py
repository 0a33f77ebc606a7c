"""
ASGI application factory.

Resolve config from the environment and build the app.
Run with: uvicorn --factory qbit_probe.api_server.app:create_app_from_env --host 0.0.0.0 --port 9000
"""

from fastapi import FastAPI

from qbit_probe.api_server.server import create_app
from qbit_probe.config import resolve_config
from qbit_probe.qbittorrent import QBittorrentClient


def create_app_from_env() -> FastAPI:
    config = resolve_config()
    return create_app(QBittorrentClient.from_config(config))


__all__ = ["create_app", "create_app_from_env"]
