"""
Pytest fixtures for qbit_probe tests. Uses an in-memory fake DownloadClient.
"""

from __future__ import annotations

import pytest

from qbit_probe.core.exceptions import QBittorrentError
from qbit_probe.qbittorrent.models import ConnectionStatus, TorrentFilter, TransferInfo


class FakeDownloadClient:
    """
    Deterministic DownloadClient.

    counts maps a TorrentFilter to an int, or to an exception to raise.
    status is a ConnectionStatus, or an exception to raise from get_transfer_info.
    Every call is recorded in `calls`.
    """

    def __init__(self, counts=None, status=ConnectionStatus.CONNECTED):
        self.counts = dict(counts or {})
        self.status = status
        self.calls: list[object] = []
        self.closed = False

    async def count_torrents(self, torrent_filter: TorrentFilter) -> int:
        self.calls.append(torrent_filter)
        result = self.counts.get(torrent_filter, 0)
        if isinstance(result, Exception):
            raise result
        return result

    async def get_transfer_info(self) -> TransferInfo:
        self.calls.append("transfer_info")
        if isinstance(self.status, Exception):
            raise self.status
        return TransferInfo(connection_status=self.status)

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def fake_client():
    """Fake client with no torrents and a connected daemon."""
    return FakeDownloadClient()


@pytest.fixture
def make_fake_client():
    """Factory for fake clients with custom counts / status."""
    return FakeDownloadClient


@pytest.fixture
def query_error():
    return QBittorrentError("connection refused")


@pytest.fixture
def probe_env():
    """Minimal valid environment: only the required password."""
    return {"QBITTORRENT_PASSWORD": "adminadmin"}
