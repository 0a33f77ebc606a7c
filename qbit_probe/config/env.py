"""
Environment variable loading for qbit_probe.

- QBITTORRENT_HOST: Web UI base URL (default: http://localhost:8080)
- QBITTORRENT_USERNAME: Web UI user (default: admin)
- QBITTORRENT_PASSWORD: Web UI password (required)
- QBITTORRENT_TIMEOUT: per-request timeout in seconds (default: 10)
- PORT / ADDRESS: where the probe server listens (default: 0.0.0.0:9000)
- Loads .env from the working directory when available.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from dotenv import find_dotenv, load_dotenv

from qbit_probe.probe_logging import get_logger

logger = get_logger(__name__)

ENV_HOST = "QBITTORRENT_HOST"
ENV_USERNAME = "QBITTORRENT_USERNAME"
ENV_PASSWORD = "QBITTORRENT_PASSWORD"
ENV_TIMEOUT = "QBITTORRENT_TIMEOUT"
ENV_PORT = "PORT"
ENV_ADDRESS = "ADDRESS"


def load_probe_env() -> None:
    """Load .env from the working directory. Variables already set win. Safe to call multiple times."""
    load_dotenv(find_dotenv(usecwd=True), override=False)


def env_or_default(environ: Mapping[str, str], variable: str, default: str) -> str:
    """Return environ[variable], or default (logged at info) when it is not set."""
    value = environ.get(variable)
    if value is None:
        logger.info(
            "config_default_used",
            variable=variable,
            default=default,
            message="environment variable is not set, using default value instead",
        )
        return default
    return value


def current_environ() -> Mapping[str, str]:
    """Process environment after .env loading."""
    load_probe_env()
    return os.environ
