"""
Application-level exceptions.

- MissingCredentialError: fatal at startup; the only error that stops the process.
- QBittorrentError: a query against the daemon failed. Probes recover from it
  per request by answering 503.
"""

from __future__ import annotations


class ProbeError(Exception):
    """Base class for qbit_probe errors."""


class MissingCredentialError(ProbeError):
    """Raised when the qBittorrent password is absent or empty."""

    def __init__(self, variable: str) -> None:
        self.variable = variable
        super().__init__(f"qbittorrent password must be provided ({variable} is not set)")


class QBittorrentError(ProbeError):
    """A request to the qBittorrent Web API failed (transport, status or payload)."""


class QBittorrentAuthError(QBittorrentError):
    """Login was rejected: bad credentials or the client IP is banned."""
