"""
Configuration management for the qBittorrent probe.

Resolves connection and listen settings from environment variables and an
optional .env file. Exposes a single immutable ProbeConfig for the process.
"""

from qbit_probe.config.settings import ProbeConfig, resolve_config  # noqa: F401

__all__ = ["ProbeConfig", "resolve_config"]
