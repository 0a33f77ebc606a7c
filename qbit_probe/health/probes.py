"""
Liveness and readiness evaluation against a DownloadClient.

Liveness: healthy when nothing is resumed, or when fewer torrents are stalled
than resumed. Readiness: ready when the daemon is connected or firewalled.
Each evaluation issues fresh queries, never retries, and maps any query
failure to the negative verdict.
"""

from __future__ import annotations

from enum import Enum

from qbit_probe.core.exceptions import QBittorrentError
from qbit_probe.probe_logging import get_logger
from qbit_probe.qbittorrent.base import DownloadClient
from qbit_probe.qbittorrent.models import ConnectionStatus, TorrentFilter

logger = get_logger(__name__)

HTTP_NO_CONTENT = 204
HTTP_SERVICE_UNAVAILABLE = 503

READY_STATUSES = frozenset({ConnectionStatus.CONNECTED, ConnectionStatus.FIREWALLED})


class LivenessVerdict(str, Enum):
    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"

    @property
    def status_code(self) -> int:
        return HTTP_NO_CONTENT if self is LivenessVerdict.HEALTHY else HTTP_SERVICE_UNAVAILABLE


class ReadinessVerdict(str, Enum):
    READY = "ready"
    NOT_READY = "not_ready"

    @property
    def status_code(self) -> int:
        return HTTP_NO_CONTENT if self is ReadinessVerdict.READY else HTTP_SERVICE_UNAVAILABLE


async def evaluate_liveness(client: DownloadClient) -> LivenessVerdict:
    """
    Liveness verdict from resumed vs. stalled torrent counts.

    The stalled query is only issued when at least one torrent is resumed.
    stalled >= resumed is unhealthy (equal counts included): no net progress.
    """
    try:
        resumed_count = await client.count_torrents(TorrentFilter.RESUMED)
    except QBittorrentError as e:
        logger.info(
            "liveness_query_failed",
            torrent_filter=TorrentFilter.RESUMED.value,
            error=str(e),
            message="unable to get torrent list from qbittorrent, responding not healthy",
        )
        return LivenessVerdict.UNHEALTHY

    if resumed_count == 0:
        logger.info("liveness_no_resumed_torrents", message="no resumed torrents, responding healthy")
        return LivenessVerdict.HEALTHY

    try:
        stalled_count = await client.count_torrents(TorrentFilter.STALLED)
    except QBittorrentError as e:
        logger.info(
            "liveness_query_failed",
            torrent_filter=TorrentFilter.STALLED.value,
            resumed_count=resumed_count,
            error=str(e),
            message="unable to get torrent list from qbittorrent, responding not healthy",
        )
        return LivenessVerdict.UNHEALTHY

    if stalled_count >= resumed_count:
        logger.info(
            "liveness_torrents_stalled",
            resumed_count=resumed_count,
            stalled_count=stalled_count,
            message="all torrents are stalled, responding not healthy",
        )
        return LivenessVerdict.UNHEALTHY

    logger.info(
        "liveness_torrents_progressing",
        resumed_count=resumed_count,
        stalled_count=stalled_count,
        message="not all torrents are stalled, responding healthy",
    )
    return LivenessVerdict.HEALTHY


async def evaluate_readiness(client: DownloadClient) -> ReadinessVerdict:
    """Ready when connected or firewalled; any other (or unknown) status is not ready."""
    try:
        transfer_info = await client.get_transfer_info()
    except QBittorrentError as e:
        logger.info(
            "readiness_query_failed",
            error=str(e),
            message="unable to get transfer info from qbittorrent, responding not ready",
        )
        return ReadinessVerdict.NOT_READY

    status = transfer_info.connection_status
    if status in READY_STATUSES:
        return ReadinessVerdict.READY

    logger.info(
        "readiness_not_connected",
        connection_status=status.value,
        message="qbittorrent is not connected or firewalled, responding not ready",
    )
    return ReadinessVerdict.NOT_READY
