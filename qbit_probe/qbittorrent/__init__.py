"""
qBittorrent package: Web API v2 client and wire models.

The probes only see the DownloadClient protocol; QBittorrentClient is the
httpx implementation used in production.
"""

from qbit_probe.qbittorrent.base import DownloadClient
from qbit_probe.qbittorrent.client import QBittorrentClient
from qbit_probe.qbittorrent.models import ConnectionStatus, TorrentFilter, TransferInfo

__all__ = [
    "ConnectionStatus",
    "DownloadClient",
    "QBittorrentClient",
    "TorrentFilter",
    "TransferInfo",
]
