"""
qBittorrent Web API v2 client over one long-lived httpx.AsyncClient.

Session handling: login lazily on first query (SID cookie kept by the httpx
cookie jar). A 403 on a query means the session expired; the client logs in
again and reissues that query once. All failures surface as QBittorrentError.
"""

from __future__ import annotations

import asyncio
from typing import Any

import httpx
from pydantic import ValidationError

from qbit_probe.config.settings import ProbeConfig
from qbit_probe.core.exceptions import QBittorrentAuthError, QBittorrentError
from qbit_probe.probe_logging import get_logger
from qbit_probe.qbittorrent.models import TorrentFilter, TransferInfo

logger = get_logger(__name__)

LOGIN_PATH = "/api/v2/auth/login"
TORRENTS_INFO_PATH = "/api/v2/torrents/info"
TRANSFER_INFO_PATH = "/api/v2/transfer/info"

LOGIN_OK = "Ok."

class QBittorrentClient:
    """DownloadClient backed by the qBittorrent Web UI API."""

    def __init__(
        self,
        host: str,
        username: str,
        password: str,
        timeout_sec: float,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._host = host.rstrip("/")
        self._username = username
        self._password = password
        self._host_error = _check_host(self._host)
        if self._host_error:
            logger.warning(
                "qbittorrent_host_invalid",
                host=self._host,
                error=self._host_error,
                message="qbittorrent host is not a usable URL, every query will fail",
            )
        # URLs are built per request so a bad host fails queries, not startup.
        self._http = httpx.AsyncClient(timeout=timeout_sec, transport=transport)
        self._login_lock = asyncio.Lock()
        # Bumped on every successful login; 0 means no session yet.
        self._session_generation = 0

    @classmethod
    def from_config(cls, config: ProbeConfig, transport: httpx.AsyncBaseTransport | None = None) -> QBittorrentClient:
        return cls(
            host=config.host,
            username=config.username,
            password=config.password,
            timeout_sec=config.timeout_sec,
            transport=transport,
        )

    async def aclose(self) -> None:
        await self._http.aclose()

    async def count_torrents(self, torrent_filter: TorrentFilter) -> int:
        data = await self._get_json(TORRENTS_INFO_PATH, params={"filter": torrent_filter.value})
        if not isinstance(data, list):
            raise QBittorrentError(f"unexpected torrent list payload: {type(data).__name__}")
        return len(data)

    async def get_transfer_info(self) -> TransferInfo:
        data = await self._get_json(TRANSFER_INFO_PATH)
        try:
            return TransferInfo.model_validate(data)
        except ValidationError as e:
            raise QBittorrentError(f"unexpected transfer info payload: {e}") from e

    async def _send(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        if self._host_error:
            raise QBittorrentError(f"{method} {path} not sent: invalid host {self._host!r}: {self._host_error}")
        try:
            return await self._http.request(
                method,
                self._host + path,
                headers={"Referer": self._host},
                **kwargs,
            )
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeError) as e:
            raise QBittorrentError(f"{method} {path} failed: {e}") from e

    async def _login(self, seen_generation: int) -> None:
        """Log in unless another task already replaced the session the caller saw."""
        async with self._login_lock:
            if self._session_generation != seen_generation:
                return
            resp = await self._send(
                "POST",
                LOGIN_PATH,
                data={"username": self._username, "password": self._password},
            )
            if resp.status_code == 403:
                raise QBittorrentAuthError("login forbidden: client IP is banned after too many failed attempts")
            if resp.status_code != 200 or resp.text.strip() != LOGIN_OK:
                raise QBittorrentAuthError(f"login rejected (status={resp.status_code}, body={resp.text.strip()!r})")
            self._session_generation += 1
            logger.debug("qbittorrent_login_ok", host=self._host, username=self._username)

    async def _get_json(self, path: str, params: dict[str, Any] | None = None) -> Any:
        if self._session_generation == 0:
            await self._login(0)
        generation = self._session_generation
        resp = await self._send("GET", path, params=params)
        if resp.status_code == 403:
            logger.debug("qbittorrent_session_expired", path=path)
            await self._login(generation)
            resp = await self._send("GET", path, params=params)
        if resp.status_code != 200:
            raise QBittorrentError(f"GET {path} returned HTTP {resp.status_code}")
        try:
            return resp.json()
        except ValueError as e:
            raise QBittorrentError(f"GET {path} returned invalid JSON: {e}") from e


def _check_host(host: str) -> str | None:
    """Why host cannot be used as a Web UI base URL, or None when it can."""
    try:
        url = httpx.URL(host)
    except httpx.InvalidURL as e:
        return str(e)
    if url.scheme not in ("http", "https") or not url.host:
        return "expected an absolute http(s) URL"
    return None
