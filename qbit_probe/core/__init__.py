"""
Core package: exceptions shared by config, client and probes.
"""

from qbit_probe.core.exceptions import (
    MissingCredentialError,
    ProbeError,
    QBittorrentAuthError,
    QBittorrentError,
)

__all__ = [
    "MissingCredentialError",
    "ProbeError",
    "QBittorrentAuthError",
    "QBittorrentError",
]
