"""
Probe settings resolved from the environment.

Only the password is load-bearing: without it every Web API call fails, so a
missing password raises MissingCredentialError. Every other value falls back
to its default with a logged warning so a typo never stops the sidecar.
"""

from __future__ import annotations

import ipaddress
import math
from collections.abc import Mapping
from dataclasses import dataclass, field

from qbit_probe.config.env import (
    ENV_ADDRESS,
    ENV_HOST,
    ENV_PASSWORD,
    ENV_PORT,
    ENV_TIMEOUT,
    ENV_USERNAME,
    current_environ,
    env_or_default,
)
from qbit_probe.core.exceptions import MissingCredentialError
from qbit_probe.probe_logging import get_logger

logger = get_logger(__name__)

DEFAULT_HOST = "http://localhost:8080"
DEFAULT_USERNAME = "admin"

DEFAULT_PORT_STR = "9000"
DEFAULT_PORT = 9000
MAX_PORT = 65535

DEFAULT_ADDRESS_STR = "0.0.0.0"
DEFAULT_ADDRESS = ipaddress.IPv4Address(DEFAULT_ADDRESS_STR)

DEFAULT_TIMEOUT_STR = "10"
DEFAULT_TIMEOUT_SEC = 10.0

IPAddress = ipaddress.IPv4Address | ipaddress.IPv6Address


@dataclass(frozen=True)
class ProbeConfig:
    """
    Resolved settings; built once at startup and shared read-only.

    host: qBittorrent Web UI base URL, used as given.
    port / address: where the probe HTTP server listens.
    timeout_sec: applied to every request against the Web API.
    """

    host: str
    username: str
    password: str = field(repr=False)
    port: int = DEFAULT_PORT
    address: IPAddress = DEFAULT_ADDRESS
    timeout_sec: float = DEFAULT_TIMEOUT_SEC

    @property
    def socket_address(self) -> str:
        if self.address.version == 6:
            return f"[{self.address}]:{self.port}"
        return f"{self.address}:{self.port}"

    def log_fields(self) -> dict[str, object]:
        """Fields safe to log (no password)."""
        return {
            "host": self.host,
            "username": self.username,
            "port": self.port,
            "address": str(self.address),
            "timeout_sec": self.timeout_sec,
        }


def _resolve_password(environ: Mapping[str, str]) -> str:
    password = environ.get(ENV_PASSWORD)
    if not password:
        logger.error("config_password_missing", variable=ENV_PASSWORD)
        raise MissingCredentialError(ENV_PASSWORD)
    return password


def _parse_u16(raw: str) -> int | None:
    """ASCII digits only, no sign, value <= 65535; None otherwise."""
    if not (raw.isascii() and raw.isdigit()):
        return None
    significant = raw.lstrip("0") or "0"
    if len(significant) > len(str(MAX_PORT)):
        return None
    value = int(significant)
    return value if value <= MAX_PORT else None


def _resolve_port(environ: Mapping[str, str]) -> int:
    raw = env_or_default(environ, ENV_PORT, DEFAULT_PORT_STR).strip()
    port = _parse_u16(raw)
    if port is None:
        logger.warning(
            "config_port_invalid",
            value=raw[:32],
            default=DEFAULT_PORT,
            message="port must be parseable as an unsigned 16-bit integer, using default value instead",
        )
        return DEFAULT_PORT
    if port == 0:
        logger.warning(
            "config_port_zero",
            default=DEFAULT_PORT,
            message="port must not be zero, using default value instead",
        )
        return DEFAULT_PORT
    return port


def _resolve_address(environ: Mapping[str, str]) -> IPAddress:
    raw = env_or_default(environ, ENV_ADDRESS, DEFAULT_ADDRESS_STR)
    try:
        return ipaddress.ip_address(raw)
    except ValueError as e:
        logger.warning(
            "config_address_invalid",
            value=raw,
            default=DEFAULT_ADDRESS_STR,
            error=str(e),
            message="address must be an IP literal, using default value instead",
        )
        return DEFAULT_ADDRESS


def _resolve_timeout(environ: Mapping[str, str]) -> float:
    raw = env_or_default(environ, ENV_TIMEOUT, DEFAULT_TIMEOUT_STR).strip()
    try:
        timeout = float(raw)
    except ValueError:
        timeout = math.nan
    if not math.isfinite(timeout) or timeout <= 0:
        logger.warning(
            "config_timeout_invalid",
            value=raw,
            default=DEFAULT_TIMEOUT_SEC,
            message="timeout must be a positive number of seconds, using default value instead",
        )
        return DEFAULT_TIMEOUT_SEC
    return timeout


def resolve_config(environ: Mapping[str, str] | None = None) -> ProbeConfig:
    """
    Build the probe configuration.

    Args:
        environ: Variables to read; defaults to os.environ after loading .env.

    Raises:
        MissingCredentialError: QBITTORRENT_PASSWORD is absent or empty.
    """
    if environ is None:
        environ = current_environ()

    host = env_or_default(environ, ENV_HOST, DEFAULT_HOST)
    username = env_or_default(environ, ENV_USERNAME, DEFAULT_USERNAME)
    password = _resolve_password(environ)

    return ProbeConfig(
        host=host,
        username=username,
        password=password,
        port=_resolve_port(environ),
        address=_resolve_address(environ),
        timeout_sec=_resolve_timeout(environ),
    )
