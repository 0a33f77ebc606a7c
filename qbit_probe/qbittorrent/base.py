"""
DownloadClient: the two daemon queries the probes depend on.

Any transport implementing this protocol is substitutable (tests use an
in-memory fake). Implementations raise QBittorrentError on every failure.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from qbit_probe.qbittorrent.models import TorrentFilter, TransferInfo


@runtime_checkable
class DownloadClient(Protocol):
    async def count_torrents(self, torrent_filter: TorrentFilter) -> int:
        """Number of torrents matching the filter."""
        ...

    async def get_transfer_info(self) -> TransferInfo:
        """Global transfer info, including connection status."""
        ...
