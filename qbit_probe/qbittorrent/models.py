"""
Wire models for the qBittorrent Web API v2 endpoints the probes use.

GET /api/v2/torrents/info?filter=... returns a JSON array of torrents.
GET /api/v2/transfer/info returns global transfer info, including connection_status.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TorrentFilter(str, Enum):
    """Values accepted by the `filter` query parameter of /torrents/info."""

    ALL = "all"
    DOWNLOADING = "downloading"
    SEEDING = "seeding"
    COMPLETED = "completed"
    RESUMED = "resumed"
    PAUSED = "paused"
    ACTIVE = "active"
    INACTIVE = "inactive"
    STALLED = "stalled"
    STALLED_UPLOADING = "stalled_uploading"
    STALLED_DOWNLOADING = "stalled_downloading"
    ERRORED = "errored"


class ConnectionStatus(str, Enum):
    """Daemon connectivity as reported in transfer info."""

    CONNECTED = "connected"
    FIREWALLED = "firewalled"
    DISCONNECTED = "disconnected"
    UNKNOWN = "unknown"

    @classmethod
    def _missing_(cls, value: object) -> ConnectionStatus:
        # Statuses added by newer daemons must not break parsing.
        return cls.UNKNOWN


class TransferInfo(BaseModel):
    """GET /api/v2/transfer/info response (subset)."""

    model_config = ConfigDict(extra="ignore")

    connection_status: ConnectionStatus = Field(..., description="connected | firewalled | disconnected")
    dl_info_speed: int | None = Field(None, description="Global download rate (bytes/s)")
    up_info_speed: int | None = Field(None, description="Global upload rate (bytes/s)")
    dl_info_data: int | None = Field(None, description="Data downloaded this session (bytes)")
    up_info_data: int | None = Field(None, description="Data uploaded this session (bytes)")
    dht_nodes: int | None = Field(None, description="DHT nodes connected to")

    @field_validator("connection_status", mode="before")
    @classmethod
    def _coerce_status(cls, value: object) -> object:
        if isinstance(value, str):
            return ConnectionStatus(value.strip().lower())
        return value
